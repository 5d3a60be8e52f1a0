from django.contrib import admin
from .models import User
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin
from django.utils.translation import gettext_lazy as _


class CustomUserAdmin(BaseUserAdmin):
    model = User

    list_display = (
        "id", "email", "first_name", "last_name", "role", "is_verified", "is_active"
    )
    list_filter = ("role", "is_verified", "is_active")

    readonly_fields = ("id", "created_at")

    fieldsets = (
        (None, {
            "fields": ("id", "email", "password")
        }),
        (_("Personal info"), {
            "fields": ("first_name", "last_name")
        }),
        (_("Access"), {
            "fields": ("role", "is_verified", "is_active", "is_staff", "is_superuser"),
        }),
        (_("Important dates"), {
            "fields": ("last_login", "date_joined", "created_at"),
        }),
    )

    add_fieldsets = (
        (None, {
            "classes": ("wide",),
            "fields": ("email", "first_name", "role", "password1", "password2"),
        }),
    )

    search_fields = ("email", "first_name", "last_name")
    ordering = ("email",)


admin.site.register(User, CustomUserAdmin)
