# ==========================================
# apps/purchases/admin.py
# ==========================================

from django.contrib import admin
from django.utils.html import format_html
from .models import PurchaseRecord, PurchaseLine, PurchasePayment, PaymentStatus


class PurchaseLineInline(admin.TabularInline):
    """Priced lines within a purchase. Written only by the purchase workflow."""
    model = PurchaseLine
    extra = 0
    fields = ['material', 'weight', 'rate', 'amount']
    readonly_fields = fields

    def has_add_permission(self, request, obj=None):
        return False


class PurchasePaymentInline(admin.TabularInline):
    model = PurchasePayment
    extra = 0
    fields = ['amount', 'mode', 'note', 'date']
    readonly_fields = fields

    def has_add_permission(self, request, obj=None):
        return False


@admin.register(PurchaseRecord)
class PurchaseRecordAdmin(admin.ModelAdmin):
    """
    Admin interface for purchases.

    Committed purchases are not edited (corrections are out of scope), so
    every field is read-only here.
    """

    list_display = [
        'vendor_name',
        'channel',
        'godown',
        'total_amount',
        'payment_status_badge',
        'date',
        'created_at',
    ]

    list_filter = [
        'channel',
        'payment_status',
        'company',
        'godown',
        'date',
    ]

    search_fields = ['vendor_name', 'vendor__phone']

    readonly_fields = [
        'id',
        'channel',
        'company',
        'godown',
        'vendor',
        'vendor_name',
        'date',
        'total_amount',
        'payment_status',
        'payment_mode',
        'created_at',
    ]

    inlines = [PurchaseLineInline, PurchasePaymentInline]
    date_hierarchy = 'date'
    ordering = ['-date', '-created_at']

    def payment_status_badge(self, obj):
        """Display payment status as colored badge."""
        if not obj.payment_status:
            return '-'
        colors = {
            PaymentStatus.PENDING: ('#E5C49A', '#2C1810'),
            PaymentStatus.PARTIAL: ('#A47449', 'white'),
            PaymentStatus.PAID: ('#6B8E5E', 'white'),
        }
        bg, fg = colors.get(obj.payment_status, ('#ccc', '#666'))
        return format_html(
            '<span style="background: {}; color: {}; padding: 3px 8px; '
            'border-radius: 10px; font-size: 11px;">{}</span>',
            bg, fg, obj.get_payment_status_display()
        )
    payment_status_badge.short_description = 'Payment'

    def has_add_permission(self, request):
        return False


@admin.register(PurchasePayment)
class PurchasePaymentAdmin(admin.ModelAdmin):
    list_display = ['purchase', 'amount', 'mode', 'date', 'created_at']
    list_filter = ['mode', 'date']
    search_fields = ['purchase__vendor_name', 'note']
    readonly_fields = ['id', 'purchase', 'amount', 'mode', 'note', 'date', 'created_at']

    def has_add_permission(self, request):
        return False
