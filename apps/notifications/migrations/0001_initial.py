import uuid

import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("profiles", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="Notification",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("created_at", models.DateTimeField(auto_now_add=True, db_index=True, verbose_name="Créé le")),
                ("updated_at", models.DateTimeField(auto_now=True, verbose_name="Mis à jour le")),
                ("type", models.CharField(choices=[("new_match", "Nouveaux matches"), ("connection_request", "Demande de connexion"), ("message", "Message"), ("system", "Système")], db_index=True, max_length=30, verbose_name="Type")),
                ("title", models.CharField(max_length=300, verbose_name="Titre")),
                ("message", models.TextField(verbose_name="Message")),
                ("data", models.JSONField(blank=True, default=dict, verbose_name="Données")),
                ("read", models.BooleanField(db_index=True, default=False, verbose_name="Lue")),
                ("read_at", models.DateTimeField(blank=True, null=True, verbose_name="Lue le")),
                ("delivery_status", models.CharField(choices=[("pending", "En attente"), ("sent", "Envoyée"), ("failed", "Échec"), ("skipped", "Interne uniquement")], default="pending", max_length=20, verbose_name="Statut d'envoi")),
                ("sent_at", models.DateTimeField(blank=True, null=True, verbose_name="Envoyée le")),
                ("error_message", models.TextField(blank=True, verbose_name="Erreur")),
                ("recipient", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="notifications", to="profiles.profile")),
            ],
            options={
                "verbose_name": "Notification",
                "verbose_name_plural": "Notifications",
                "ordering": ["-created_at"],
            },
        ),
    ]
