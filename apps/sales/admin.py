# ==========================================
# apps/sales/admin.py
# ==========================================

from django.contrib import admin
from .models import MaalOutSale, MaalOutPayment


@admin.register(MaalOutSale)
class MaalOutSaleAdmin(admin.ModelAdmin):
    list_display = ['date', 'firm_name', 'weight', 'rate', 'amount', 'gst', 'freight', 'payment_type', 'godown']
    list_filter = ['payment_type', 'company', 'godown', 'date']
    search_fields = ['firm_name', 'bill_to', 'vehicle_no']
    readonly_fields = ['id', 'amount', 'created_at']
    date_hierarchy = 'date'

    def save_model(self, request, obj, form, change):
        obj.amount = obj.weight * obj.rate
        super().save_model(request, obj, form, change)


@admin.register(MaalOutPayment)
class MaalOutPaymentAdmin(admin.ModelAdmin):
    list_display = ['date', 'firm_name', 'amount', 'godown']
    list_filter = ['company', 'godown', 'date']
    search_fields = ['firm_name']
    readonly_fields = ['id', 'created_at']
    date_hierarchy = 'date'
