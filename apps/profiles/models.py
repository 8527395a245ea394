"""Profile domain models."""
from django.conf import settings
from django.db import models

from apps.core.models import TimeStampedModel


class Profile(TimeStampedModel):
    """Investisseur ou entrepreneur inscrit sur la plateforme."""

    class UserType(models.TextChoices):
        INVESTOR = "investor", "Investisseur"
        ENTREPRENEUR = "entrepreneur", "Entrepreneur"
        ADMIN = "admin", "Administrateur"

    user = models.OneToOneField(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="profile",
        null=True,
        blank=True,
    )
    full_name = models.CharField("Nom complet", max_length=200)
    user_type = models.CharField(
        "Type de compte", max_length=20, choices=UserType.choices, db_index=True
    )
    company = models.CharField("Entreprise", max_length=200, blank=True)
    bio = models.TextField("Bio", blank=True)
    location = models.CharField("Localisation", max_length=200, blank=True)
    sector = models.CharField(
        "Secteur", max_length=100, blank=True, db_index=True,
        help_text="Secteur d'activité ou d'investissement principal",
    )
    email = models.EmailField("E-mail", blank=True)
    phone = models.CharField("Téléphone", max_length=30, blank=True)
    website = models.URLField("Site web", blank=True)

    is_active = models.BooleanField("Actif", default=True)
    notify_email = models.BooleanField("Notifier par e-mail", default=True)
    webhook_url = models.URLField("Webhook URL", blank=True)

    class Meta:
        verbose_name = "Profil"
        verbose_name_plural = "Profils"
        ordering = ["created_at"]

    def __str__(self):
        return f"{self.full_name} ({self.get_user_type_display()})"
