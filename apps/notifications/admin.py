from django.contrib import admin

from .models import Notification


@admin.register(Notification)
class NotificationAdmin(admin.ModelAdmin):
    list_display = ["type", "recipient", "title", "read", "delivery_status", "created_at"]
    list_filter = ["type", "read", "delivery_status"]
    search_fields = ["title", "message", "recipient__full_name"]
    readonly_fields = ["created_at", "sent_at", "read_at"]
    raw_id_fields = ["recipient"]
