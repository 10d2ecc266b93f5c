# ==========================================
# apps/companies/admin.py
# ==========================================

from django.contrib import admin
from .models import Company, Godown


class GodownInline(admin.TabularInline):
    """Inline admin for godowns within a company."""
    model = Godown
    extra = 0
    fields = ['name', 'address']


@admin.register(Company)
class CompanyAdmin(admin.ModelAdmin):
    list_display = ['name', 'gstin', 'get_godown_count', 'created_at']
    search_fields = ['name', 'gstin']
    readonly_fields = ['id', 'created_at']
    inlines = [GodownInline]

    def get_godown_count(self, obj):
        return obj.godowns.count()
    get_godown_count.short_description = 'Godowns'


@admin.register(Godown)
class GodownAdmin(admin.ModelAdmin):
    list_display = ['name', 'company', 'created_at']
    list_filter = ['company']
    search_fields = ['name', 'company__name']
    readonly_fields = ['id', 'created_at']
