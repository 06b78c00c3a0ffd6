"""Django admin configuration for the watchlist API."""

from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin
from .models import User, WatchlistItem


@admin.register(User)
class UserAdmin(BaseUserAdmin):
    """Custom User admin configuration."""

    list_display = ('email', 'name', 'country', 'risk_tolerance', 'is_active', 'created_at')
    list_filter = ('is_active', 'is_staff', 'risk_tolerance')
    search_fields = ('email', 'name')
    ordering = ('-created_at',)

    fieldsets = (
        (None, {'fields': ('email', 'password')}),
        ('Personal info', {'fields': ('name', 'country')}),
        ('Investor profile', {'fields': ('investment_goals', 'risk_tolerance', 'preferred_industry')}),
        ('Permissions', {'fields': ('is_active', 'is_staff', 'is_superuser', 'groups', 'user_permissions')}),
        ('Important dates', {'fields': ('last_login', 'created_at')}),
    )

    add_fieldsets = (
        (None, {
            'classes': ('wide',),
            'fields': ('email', 'password1', 'password2', 'name'),
        }),
    )

    readonly_fields = ('created_at', 'last_login')


@admin.register(WatchlistItem)
class WatchlistItemAdmin(admin.ModelAdmin):
    """Watchlist item admin configuration."""

    list_display = ('symbol', 'company', 'user', 'added_at')
    list_filter = ('added_at',)
    search_fields = ('symbol', 'company', 'user__email')
    ordering = ('-added_at',)
    readonly_fields = ('added_at',)
