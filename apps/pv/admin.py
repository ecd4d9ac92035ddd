from django.contrib import admin

from .models import PVAccrual, PVLedger, PVResetRun


@admin.register(PVLedger)
class PVLedgerAdmin(admin.ModelAdmin):
    list_display = ['user', 'monthly_pv', 'last_pv_order', 'reset_period', 'updated_at']
    list_filter = ['reset_period']
    search_fields = ['user__username', 'user__email', 'user__phone']
    readonly_fields = ['user', 'monthly_pv', 'last_pv_order', 'reset_period', 'created_at', 'updated_at']

    def has_add_permission(self, request):
        return False  # Ledgers are created by accrual

    def has_change_permission(self, request, obj=None):
        return False


@admin.register(PVAccrual)
class PVAccrualAdmin(admin.ModelAdmin):
    list_display = ['user', 'order', 'pv', 'created_at']
    list_filter = ['created_at']
    search_fields = ['user__username', 'order__roid']
    readonly_fields = ['user', 'order', 'pv', 'created_at']

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False  # Accruals are an append-only log


@admin.register(PVResetRun)
class PVResetRunAdmin(admin.ModelAdmin):
    list_display = ['period', 'status', 'users_reset', 'last_user_id', 'started_at', 'finished_at']
    list_filter = ['status']
    readonly_fields = [
        'period', 'status', 'cutoff', 'last_user_id', 'users_reset',
        'failed_user_ids', 'started_at', 'finished_at'
    ]

    def has_add_permission(self, request):
        return False
