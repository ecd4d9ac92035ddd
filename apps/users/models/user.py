from django.contrib.auth.models import AbstractUser, Group
from django.db import models

from .roles import Role


class User(AbstractUser):
    """Storefront user; policy roles are modelled as auth groups"""
    phone = models.CharField(max_length=20, unique=True, null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'users'
        verbose_name = 'User'
        verbose_name_plural = 'Users'

    def __str__(self):
        return self.username or self.phone or f"User {self.id}"

    @property
    def role_names(self):
        """Set of role tags held by the user"""
        return set(self.groups.values_list('name', flat=True))

    def has_role(self, role):
        return self.groups.filter(name=Role(role).value).exists()

    def add_role(self, role):
        group, _ = Group.objects.get_or_create(name=Role(role).value)
        self.groups.add(group)

    def remove_role(self, role):
        self.groups.remove(*self.groups.filter(name=Role(role).value))

    @classmethod
    def with_role(cls, role):
        """Queryset of users holding ``role``"""
        return cls.objects.filter(groups__name=Role(role).value)
