from django.contrib import admin

from .models import Profile


@admin.register(Profile)
class ProfileAdmin(admin.ModelAdmin):
    list_display = ["full_name", "user_type", "company", "location", "is_active", "created_at"]
    list_filter = ["user_type", "is_active", "sector"]
    search_fields = ["full_name", "company", "email"]
    raw_id_fields = ["user"]
