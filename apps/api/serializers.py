"""DRF serializers — matching request envelope, saved matches, notifications."""
from rest_framework import serializers

from apps.matching.models import AIMatch
from apps.notifications.models import Notification


class PreferencesSerializer(serializers.Serializer):
    sectors = serializers.ListField(
        child=serializers.CharField(max_length=100), required=False, default=list
    )
    location = serializers.CharField(
        max_length=200, required=False, allow_blank=True, allow_null=True
    )
    fundingRange = serializers.ListField(
        child=serializers.FloatField(min_value=0),
        min_length=2,
        max_length=2,
        required=False,
        allow_null=True,
    )

    def validate_fundingRange(self, value):
        if value and value[0] > value[1]:
            raise serializers.ValidationError("Le minimum doit être inférieur ou égal au maximum.")
        return value


class MatchRequestSerializer(serializers.Serializer):
    """Body of POST /api/matching/advanced/."""

    requestingUserId = serializers.UUIDField()
    requestingUserRole = serializers.ChoiceField(choices=["investor", "entrepreneur"])
    preferences = PreferencesSerializer(required=False, allow_null=True)


class AIMatchSerializer(serializers.ModelSerializer):
    class Meta:
        model = AIMatch
        fields = [
            "id", "target_id", "target_type", "match_score", "match_reasons",
            "preferences_used", "ai_derived", "prompt_version", "created_at", "updated_at",
        ]


class NotificationSerializer(serializers.ModelSerializer):
    class Meta:
        model = Notification
        fields = [
            "id", "type", "title", "message", "data", "read", "read_at", "created_at",
        ]
        read_only_fields = fields
