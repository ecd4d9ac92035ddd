from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin

from .models import User


@admin.register(User)
class UserAdmin(BaseUserAdmin):
    """User admin showing policy roles"""
    list_display = ['username', 'email', 'phone', 'roles', 'is_staff', 'created_at']
    list_filter = ['is_staff', 'is_superuser', 'is_active', 'groups', 'created_at']
    search_fields = ['username', 'email', 'phone']
    ordering = ['-created_at']

    fieldsets = BaseUserAdmin.fieldsets + (
        ('Contact', {
            'fields': ('phone',)
        }),
        ('Timestamps', {
            'fields': ('created_at', 'updated_at'),
            'classes': ('collapse',)
        }),
    )
    readonly_fields = ['created_at', 'updated_at']

    def roles(self, obj):
        return ', '.join(sorted(obj.role_names)) or '-'
    roles.short_description = 'Roles'
