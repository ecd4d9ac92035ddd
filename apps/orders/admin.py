from django.contrib import admin, messages

from .models import Order, OrderItem
from .services import OrderService


class OrderItemInline(admin.TabularInline):
    model = OrderItem
    extra = 0
    fields = ['product', 'quantity', 'price', 'amount']
    readonly_fields = ['product', 'quantity', 'price', 'amount']
    can_delete = False


@admin.register(Order)
class OrderAdmin(admin.ModelAdmin):
    list_display = ['roid', 'uid', 'amount', 'status', 'create_time', 'complete_time']
    list_filter = ['status', 'create_time']
    search_fields = ['roid', 'uid__username']
    readonly_fields = ['roid', 'create_time', 'pay_time', 'send_time', 'complete_time']
    inlines = [OrderItemInline]
    actions = ['mark_completed']

    def get_readonly_fields(self, request, obj=None):
        # Completed orders are immutable
        if obj and obj.is_completed:
            return [field.name for field in obj._meta.fields]
        return self.readonly_fields

    def save_model(self, request, obj, form, change):
        # The completion transition goes through OrderService so the event fires once
        if change and 'status' in form.changed_data and obj.status == Order.COMPLETED:
            obj.status = form.initial.get('status', obj.status)
            super().save_model(request, obj, form, change)
            OrderService.complete_order(obj.roid)
            return
        super().save_model(request, obj, form, change)

    @admin.action(description='Mark selected orders as completed')
    def mark_completed(self, request, queryset):
        completed = 0
        for order in queryset:
            success, message = OrderService.complete_order(order.roid)
            if success:
                completed += 1
            else:
                self.message_user(request, f"{order.roid}: {message}", level=messages.WARNING)
        self.message_user(request, f"{completed} order(s) completed")
