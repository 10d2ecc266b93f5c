# ==========================================
# apps/ledger/admin.py
# ==========================================

from django.contrib import admin
from .models import Account, AccountTransaction, Expense


@admin.register(Account)
class AccountAdmin(admin.ModelAdmin):
    list_display = ['name', 'company', 'godown', 'balance', 'updated_at']
    list_filter = ['company', 'godown']
    search_fields = ['name']
    readonly_fields = ['id', 'balance', 'created_at', 'updated_at']


@admin.register(AccountTransaction)
class AccountTransactionAdmin(admin.ModelAdmin):
    """Ledger entries are append-only; the admin shows them read-only."""

    list_display = ['created_at', 'account', 'type', 'amount', 'category', 'reference']
    list_filter = ['type', 'category', 'company', 'godown']
    search_fields = ['reference', 'category', 'account__name']
    date_hierarchy = 'created_at'

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return False


@admin.register(Expense)
class ExpenseAdmin(admin.ModelAdmin):
    list_display = ['date', 'category', 'amount', 'payment_mode', 'paid_to', 'account', 'godown']
    list_filter = ['category', 'payment_mode', 'company', 'godown']
    search_fields = ['category', 'description', 'paid_to']
    readonly_fields = ['id', 'ledger_entry', 'created_at']
    date_hierarchy = 'date'
