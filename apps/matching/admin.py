from django.contrib import admin

from .models import AIMatch


@admin.register(AIMatch)
class AIMatchAdmin(admin.ModelAdmin):
    list_display = ["user", "target_type", "target_id", "score_display", "ai_derived", "updated_at"]
    list_filter = ["target_type", "ai_derived", "model_name"]
    search_fields = ["user__full_name"]
    raw_id_fields = ["user"]

    @admin.display(description="Score", ordering="match_score")
    def score_display(self, obj):
        return f"{obj.match_score:.0f}/100"
