from django.contrib import admin, messages

from apps.pv.exceptions import InvalidPVValue, report_pv_error
from .forms import ProductAdminForm
from .models import Category, Product
from .services import ProductPVService
from .services.product_pv_service import PV_FIELD_ID


@admin.register(Category)
class CategoryAdmin(admin.ModelAdmin):
    list_display = ['name', 'parent', 'created_at']
    list_filter = ['parent', 'created_at']
    search_fields = ['name']
    ordering = ['name']


@admin.register(Product)
class ProductAdmin(admin.ModelAdmin):
    form = ProductAdminForm
    list_display = ['id', 'name', 'price', 'pv', 'status', 'inventory', 'create_time']
    list_filter = ['status', 'category', 'create_time']
    search_fields = ['id', 'name', 'description']
    ordering = ['-create_time']

    fieldsets = (
        ('Basic Information', {
            'fields': ('name', 'description', 'category')
        }),
        ('Pricing', {
            'fields': ('price', PV_FIELD_ID)
        }),
        ('Status & Inventory', {
            'fields': ('status', 'inventory')
        }),
    )

    def save_model(self, request, obj, form, change):
        super().save_model(request, obj, form, change)
        submitted = {PV_FIELD_ID: form.cleaned_data.get(PV_FIELD_ID)}
        try:
            ProductPVService.save_from_submission(obj, submitted)
        except InvalidPVValue as exc:
            report_pv_error(exc, product_id=obj.pk)
            self.message_user(request, str(exc), level=messages.WARNING)
