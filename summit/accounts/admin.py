from django.contrib import admin
from .models import UserProfile, SecurityPersonnel


@admin.register(UserProfile)
class UserProfileAdmin(admin.ModelAdmin):
    list_display = ("user", "role", "phone_number", "profile_complete")
    list_filter = ("role", "profile_complete")
    search_fields = ("user__username", "user__email", "phone_number")


@admin.register(SecurityPersonnel)
class SecurityPersonnelAdmin(admin.ModelAdmin):
    list_display = ("badge_number", "user", "assigned_area", "is_active")
    search_fields = ("badge_number", "user__username")
