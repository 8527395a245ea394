"""DRF views — advanced matching endpoint, saved matches, notification center."""
import logging

from django.db.models import QuerySet
from django.utils import timezone
from django_filters.rest_framework import DjangoFilterBackend
from rest_framework import mixins, status, viewsets
from rest_framework.decorators import action
from rest_framework.exceptions import ParseError, PermissionDenied, ValidationError
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.matching.engine import run_advanced_matching
from apps.matching.models import AIMatch
from apps.matching.types import MatchRequest, Preferences
from apps.notifications.models import Notification
from apps.profiles.models import Profile

from .serializers import (
    AIMatchSerializer,
    MatchRequestSerializer,
    NotificationSerializer,
    PreferencesSerializer,
)

logger = logging.getLogger(__name__)

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "authorization, x-client-info, apikey, content-type",
    "Access-Control-Allow-Methods": "POST, OPTIONS",
}


def _format_errors(errors: dict, prefix: str = "") -> list[str]:
    parts = []
    for field, value in errors.items():
        name = f"{prefix}{field}"
        if isinstance(value, dict):
            parts.extend(_format_errors(value, f"{name}."))
        else:
            parts.append(f"{name}: {value[0]}")
    return parts


def _failure(error: str, status_code: int) -> Response:
    return Response(
        {"success": False, "error": error, "timestamp": timezone.now().isoformat()},
        status=status_code,
    )


class AdvancedMatchingView(APIView):
    """POST /api/matching/advanced/ — run the matching pipeline synchronously.

    Cross-origin, unauthenticated: callers are trusted backends and the SPA.
    """

    authentication_classes = []
    permission_classes = [AllowAny]

    def finalize_response(self, request, response, *args, **kwargs):
        response = super().finalize_response(request, response, *args, **kwargs)
        for header, value in CORS_HEADERS.items():
            response[header] = value
        return response

    def options(self, request, *args, **kwargs):
        return Response(status=status.HTTP_200_OK)

    def post(self, request):
        try:
            body = request.data
        except ParseError as exc:
            return _failure(str(exc.detail), status.HTTP_400_BAD_REQUEST)

        serializer = MatchRequestSerializer(data=body)
        if not serializer.is_valid():
            return _failure("; ".join(_format_errors(serializer.errors)), status.HTTP_400_BAD_REQUEST)

        data = serializer.validated_data
        match_request = MatchRequest(
            requesting_user_id=data["requestingUserId"],
            requesting_user_role=data["requestingUserRole"],
            preferences=Preferences.from_dict(data.get("preferences")),
        )
        logger.info(
            "Advanced matching request: user=%s role=%s preferences=%s",
            match_request.requesting_user_id,
            match_request.requesting_user_role,
            match_request.preferences.as_dict(),
        )

        try:
            result = run_advanced_matching(match_request)
        except Profile.DoesNotExist:
            return _failure(
                f"Error fetching user profile: {match_request.requesting_user_id} not found",
                status.HTTP_404_NOT_FOUND,
            )
        except Exception as exc:
            logger.exception("Advanced matching failed for %s", match_request.requesting_user_id)
            return _failure(str(exc), status.HTTP_500_INTERNAL_SERVER_ERROR)

        return Response(result.as_payload())


class ProfileScopedMixin:
    """Restricts a viewset to rows owned by the caller's profile."""

    def get_profile(self) -> Profile:
        profile = getattr(self.request.user, "profile", None)
        if profile is None:
            raise PermissionDenied("Aucun profil associé à ce compte.")
        return profile


class AIMatchViewSet(ProfileScopedMixin, viewsets.ReadOnlyModelViewSet):
    serializer_class = AIMatchSerializer
    filter_backends = [DjangoFilterBackend]
    filterset_fields = ["target_type", "ai_derived"]

    def get_queryset(self) -> QuerySet:
        return AIMatch.objects.filter(user=self.get_profile()).order_by("-match_score")

    @action(detail=False, methods=["post"])
    def refresh(self, request):
        """POST /api/matches/refresh/ {"sectors": [...], "location": "...", "fundingRange": [min, max]}"""
        from apps.matching.tasks import refresh_matches

        profile = self.get_profile()
        if profile.user_type not in (Profile.UserType.INVESTOR, Profile.UserType.ENTREPRENEUR):
            raise ValidationError({"error": "Seuls les investisseurs et entrepreneurs ont des matches."})

        prefs = PreferencesSerializer(data=request.data)
        prefs.is_valid(raise_exception=True)
        refresh_matches.delay(str(profile.pk), profile.user_type, prefs.validated_data)
        return Response({"status": "enqueued"}, status=status.HTTP_202_ACCEPTED)


class NotificationViewSet(
    ProfileScopedMixin,
    mixins.ListModelMixin,
    mixins.RetrieveModelMixin,
    viewsets.GenericViewSet,
):
    serializer_class = NotificationSerializer
    filter_backends = [DjangoFilterBackend]
    filterset_fields = ["read", "type"]

    def get_queryset(self) -> QuerySet:
        return Notification.objects.filter(recipient=self.get_profile())

    @action(detail=True, methods=["post"])
    def mark_read(self, request, pk=None):
        notif = self.get_object()
        if not notif.read:
            notif.read = True
            notif.read_at = timezone.now()
            notif.save(update_fields=["read", "read_at", "updated_at"])
        return Response(self.get_serializer(notif).data)

    @action(detail=False, methods=["post"])
    def mark_all_read(self, request):
        updated = self.get_queryset().filter(read=False).update(
            read=True, read_at=timezone.now(), updated_at=timezone.now()
        )
        return Response({"updated": updated})

    @action(detail=False, methods=["get"])
    def unread_count(self, request):
        return Response({"count": self.get_queryset().filter(read=False).count()})
