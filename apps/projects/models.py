"""Project domain models — levées de fonds publiées par les entrepreneurs."""
from django.db import models

from apps.core.models import TimeStampedModel
from apps.profiles.models import Profile


class Project(TimeStampedModel):
    """Projet en recherche de financement."""

    class Status(models.TextChoices):
        DRAFT = "draft", "Brouillon"
        PENDING = "pending", "En validation"
        ACTIVE = "active", "Actif"
        FUNDED = "funded", "Financé"
        CLOSED = "closed", "Clôturé"
        REJECTED = "rejected", "Rejeté"

    class Stage(models.TextChoices):
        IDEA = "idea", "Idée"
        PROTOTYPE = "prototype", "Prototype"
        MVP = "mvp", "MVP"
        GROWTH = "growth", "Croissance"
        SCALE = "scale", "Expansion"

    class RiskLevel(models.TextChoices):
        LOW = "low", "Faible"
        MEDIUM = "medium", "Moyen"
        HIGH = "high", "Élevé"

    owner = models.ForeignKey(
        Profile, on_delete=models.CASCADE, related_name="projects"
    )
    title = models.CharField("Titre", max_length=300)
    description = models.TextField("Description")
    sector = models.CharField("Secteur", max_length=100, db_index=True)
    location = models.CharField("Localisation", max_length=200)
    tags = models.JSONField("Tags", default=list, blank=True)

    # Financement
    funding_goal = models.DecimalField("Objectif de financement", max_digits=15, decimal_places=2)
    current_funding = models.DecimalField(
        "Financement actuel", max_digits=15, decimal_places=2, default=0
    )
    min_investment = models.DecimalField(
        "Ticket minimum", max_digits=15, decimal_places=2, null=True, blank=True
    )
    max_investment = models.DecimalField(
        "Ticket maximum", max_digits=15, decimal_places=2, null=True, blank=True
    )
    expected_roi = models.DecimalField(
        "ROI attendu (%)", max_digits=6, decimal_places=2, null=True, blank=True
    )

    stage = models.CharField("Stade", max_length=20, choices=Stage.choices, blank=True)
    risk_level = models.CharField(
        "Niveau de risque", max_length=10, choices=RiskLevel.choices, blank=True
    )
    status = models.CharField(
        "Statut", max_length=20, choices=Status.choices, default=Status.DRAFT, db_index=True
    )

    class Meta:
        verbose_name = "Projet"
        verbose_name_plural = "Projets"
        ordering = ["created_at"]
        indexes = [
            models.Index(fields=["status", "sector"], name="idx_status_sector"),
            models.Index(fields=["status", "funding_goal"], name="idx_status_funding"),
        ]

    def __str__(self):
        return f"{self.title[:80]} ({self.get_status_display()})"
