# ==========================================
# apps/labour/admin.py
# ==========================================

from django.contrib import admin
from .models import Labour, Attendance


@admin.register(Labour)
class LabourAdmin(admin.ModelAdmin):
    list_display = ['name', 'godown', 'daily_wage', 'phone', 'is_active']
    list_filter = ['is_active', 'company', 'godown']
    search_fields = ['name', 'phone']
    readonly_fields = ['id', 'created_at']


@admin.register(Attendance)
class AttendanceAdmin(admin.ModelAdmin):
    list_display = ['date', 'labour', 'status', 'godown']
    list_filter = ['status', 'godown', 'date']
    search_fields = ['labour__name']
    readonly_fields = ['id', 'created_at', 'updated_at']
    date_hierarchy = 'date'
