from django.contrib import admin

from .models import Project


@admin.register(Project)
class ProjectAdmin(admin.ModelAdmin):
    list_display = ["title_short", "owner", "sector", "funding_goal", "status", "created_at"]
    list_filter = ["status", "sector", "stage", "risk_level"]
    search_fields = ["title", "owner__full_name", "location"]
    raw_id_fields = ["owner"]

    @admin.display(description="Titre")
    def title_short(self, obj):
        return obj.title[:80]
