# PATH: apps/core/admin.py
from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as DjangoUserAdmin

from apps.core.models import User


@admin.register(User)
class UserAdmin(DjangoUserAdmin):
    list_display = ("id", "username", "national_id", "name", "role", "is_active")
    list_filter = ("role", "is_active", "is_staff")
    search_fields = ("username", "national_id", "name", "email")
    fieldsets = DjangoUserAdmin.fieldsets + (
        ("School", {"fields": ("role", "national_id", "name")}),
    )
