# ==========================================
# apps/vendors/admin.py
# ==========================================

from django.contrib import admin
from .models import Vendor, ScrapType, VendorRate


class VendorRateInline(admin.TabularInline):
    """Inline rate card within a vendor."""
    model = VendorRate
    extra = 0
    fields = ['scrap_type', 'vendor_rate', 'updated_at']
    readonly_fields = ['updated_at']
    autocomplete_fields = ['scrap_type']


@admin.register(Vendor)
class VendorAdmin(admin.ModelAdmin):
    list_display = ['name', 'kind', 'company', 'phone', 'get_rate_count', 'is_active', 'created_at']
    list_filter = ['kind', 'is_active', 'company']
    search_fields = ['name', 'phone']
    readonly_fields = ['id', 'created_at']
    inlines = [VendorRateInline]

    def get_rate_count(self, obj):
        return obj.rates.count()
    get_rate_count.short_description = 'Rates'


@admin.register(ScrapType)
class ScrapTypeAdmin(admin.ModelAdmin):
    list_display = ['material_type', 'description', 'created_at']
    search_fields = ['material_type']
    readonly_fields = ['id', 'created_at']


@admin.register(VendorRate)
class VendorRateAdmin(admin.ModelAdmin):
    list_display = ['vendor', 'scrap_type', 'vendor_rate', 'updated_at']
    list_filter = ['scrap_type', 'vendor__company']
    search_fields = ['vendor__name', 'scrap_type__material_type']
    autocomplete_fields = ['vendor', 'scrap_type']
