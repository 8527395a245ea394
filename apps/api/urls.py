"""API URL configuration."""
from django.urls import include, path
from rest_framework.routers import DefaultRouter

from . import views

app_name = "api"

router = DefaultRouter()
router.register("matches", views.AIMatchViewSet, basename="ai-match")
router.register("notifications", views.NotificationViewSet, basename="notification")

urlpatterns = [
    path("matching/advanced/", views.AdvancedMatchingView.as_view(), name="advanced-matching"),
    path("", include(router.urls)),
]

# ── Exemple de payloads ────────────────────────────────
#
# POST /api/matching/advanced/
# {"requestingUserId": "uuid", "requestingUserRole": "investor",
#  "preferences": {"sectors": ["technology"], "location": "Paris", "fundingRange": [50000, 500000]}}
# Response:
# {
#   "success": true,
#   "matches": [
#     {"id": "uuid", "title": "Projet Tech", "sector": "technology", ...,
#      "targetType": "project", "matchScore": 85, "reasons": ["..."], "aiAnalyzed": true}
#   ],
#   "total": 1,
#   "aiAnalyzed": 1,
#   "timestamp": "2025-01-15T10:00:00+00:00"
# }
#
# GET /api/notifications/unread_count/
# Response: {"count": 3}
