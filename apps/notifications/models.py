"""In-app notifications with optional e-mail/webhook delivery."""
from django.db import models

from apps.core.models import TimeStampedModel
from apps.profiles.models import Profile


class Notification(TimeStampedModel):
    """Notification affichée dans le centre de notifications d'un profil."""

    class Type(models.TextChoices):
        NEW_MATCH = "new_match", "Nouveaux matches"
        CONNECTION_REQUEST = "connection_request", "Demande de connexion"
        MESSAGE = "message", "Message"
        SYSTEM = "system", "Système"

    class DeliveryStatus(models.TextChoices):
        PENDING = "pending", "En attente"
        SENT = "sent", "Envoyée"
        FAILED = "failed", "Échec"
        SKIPPED = "skipped", "Interne uniquement"

    recipient = models.ForeignKey(
        Profile, on_delete=models.CASCADE, related_name="notifications"
    )
    type = models.CharField("Type", max_length=30, choices=Type.choices, db_index=True)
    title = models.CharField("Titre", max_length=300)
    message = models.TextField("Message")
    data = models.JSONField("Données", default=dict, blank=True)
    read = models.BooleanField("Lue", default=False, db_index=True)
    read_at = models.DateTimeField("Lue le", null=True, blank=True)

    delivery_status = models.CharField(
        "Statut d'envoi", max_length=20,
        choices=DeliveryStatus.choices,
        default=DeliveryStatus.PENDING,
    )
    sent_at = models.DateTimeField("Envoyée le", null=True, blank=True)
    error_message = models.TextField("Erreur", blank=True)

    class Meta:
        verbose_name = "Notification"
        verbose_name_plural = "Notifications"
        ordering = ["-created_at"]

    def __str__(self):
        return f"[{self.get_type_display()}] {self.title}"
