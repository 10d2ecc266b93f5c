from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin
from django.utils.html import format_html
from .models import User, StaffRole


class CompanyAssignmentFilter(admin.SimpleListFilter):
    """Find managers who cannot sign in because no company is set."""

    title = 'company assignment'
    parameter_name = 'assigned'

    def lookups(self, request, model_admin):
        return [
            ('yes', 'Assigned'),
            ('no', 'Unassigned managers'),
        ]

    def queryset(self, request, queryset):
        if self.value() == 'yes':
            return queryset.filter(company__isnull=False)
        if self.value() == 'no':
            return queryset.filter(company__isnull=True, role=StaffRole.MANAGER)
        return queryset


@admin.register(User)
class UserAdmin(BaseUserAdmin):
    """Owners and godown managers."""

    list_display = ['email', 'display_name', 'role', 'company_label', 'is_active', 'last_login']
    list_filter = ['role', CompanyAssignmentFilter, 'company', 'is_active']
    list_select_related = ['company']
    search_fields = ['email', 'display_name', 'company__name']
    ordering = ['email']

    fieldsets = (
        (None, {'fields': ('email', 'display_name', 'password')}),
        ('Godown access', {'fields': ('role', 'company')}),
        ('Permissions', {
            'fields': ('is_active', 'is_staff', 'is_superuser', 'groups', 'user_permissions'),
            'classes': ('collapse',),
        }),
        ('Activity', {'fields': ('created_at', 'last_login')}),
    )

    add_fieldsets = (
        (None, {
            'classes': ('wide',),
            'fields': ('email', 'display_name', 'role', 'company', 'password1', 'password2'),
        }),
    )

    readonly_fields = ['created_at', 'last_login']
    filter_horizontal = ['groups', 'user_permissions']

    actions = ['deactivate_managers']

    @admin.display(description='Company', ordering='company__name')
    def company_label(self, obj):
        if obj.company_id:
            return obj.company.name
        if obj.role == StaffRole.MANAGER:
            return format_html('<span style="color: #B85C5C;">{}</span>', 'unassigned')
        return '-'

    @admin.action(description='Deactivate selected managers')
    def deactivate_managers(self, request, queryset):
        count = queryset.filter(role=StaffRole.MANAGER).update(is_active=False)
        self.message_user(request, f'Deactivated {count} manager(s).')
