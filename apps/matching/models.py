"""Matching: scores de compatibilité persistés (cache de matches IA)."""
from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models

from apps.core.models import TimeStampedModel
from apps.profiles.models import Profile


class AIMatch(TimeStampedModel):
    """Dernier score calculé entre un utilisateur et une cible (projet ou profil)."""

    class TargetType(models.TextChoices):
        PROJECT = "project", "Projet"
        PROFILE = "profile", "Profil"

    user = models.ForeignKey(
        Profile, on_delete=models.CASCADE, related_name="ai_matches"
    )
    target_id = models.UUIDField("Cible", db_index=True)
    target_type = models.CharField(
        "Type de cible", max_length=10, choices=TargetType.choices
    )
    match_score = models.FloatField(
        "Score (0-100)",
        validators=[MinValueValidator(0), MaxValueValidator(100)],
        help_text="0 = incompatible, 100 = parfait",
    )
    match_reasons = models.JSONField("Raisons", default=list)
    preferences_used = models.JSONField("Préférences utilisées", default=dict, blank=True)
    ai_derived = models.BooleanField("Score IA", default=False)
    prompt_version = models.CharField("Version du prompt", max_length=50, blank=True)
    model_name = models.CharField("Modèle IA", max_length=100, blank=True)

    class Meta:
        verbose_name = "Match IA"
        verbose_name_plural = "Matches IA"
        ordering = ["-match_score"]
        constraints = [
            models.UniqueConstraint(
                fields=["user", "target_id", "target_type"],
                name="uniq_ai_match_user_target",
            ),
        ]

    def __str__(self):
        return f"{self.user.full_name} ↔ {self.target_type}:{self.target_id} ({self.match_score:.0f}/100)"
