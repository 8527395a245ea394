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
            name="Project",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("created_at", models.DateTimeField(auto_now_add=True, db_index=True, verbose_name="Créé le")),
                ("updated_at", models.DateTimeField(auto_now=True, verbose_name="Mis à jour le")),
                ("title", models.CharField(max_length=300, verbose_name="Titre")),
                ("description", models.TextField(verbose_name="Description")),
                ("sector", models.CharField(db_index=True, max_length=100, verbose_name="Secteur")),
                ("location", models.CharField(max_length=200, verbose_name="Localisation")),
                ("tags", models.JSONField(blank=True, default=list, verbose_name="Tags")),
                ("funding_goal", models.DecimalField(decimal_places=2, max_digits=15, verbose_name="Objectif de financement")),
                ("current_funding", models.DecimalField(decimal_places=2, default=0, max_digits=15, verbose_name="Financement actuel")),
                ("min_investment", models.DecimalField(blank=True, decimal_places=2, max_digits=15, null=True, verbose_name="Ticket minimum")),
                ("max_investment", models.DecimalField(blank=True, decimal_places=2, max_digits=15, null=True, verbose_name="Ticket maximum")),
                ("expected_roi", models.DecimalField(blank=True, decimal_places=2, max_digits=6, null=True, verbose_name="ROI attendu (%)")),
                ("stage", models.CharField(blank=True, choices=[("idea", "Idée"), ("prototype", "Prototype"), ("mvp", "MVP"), ("growth", "Croissance"), ("scale", "Expansion")], max_length=20, verbose_name="Stade")),
                ("risk_level", models.CharField(blank=True, choices=[("low", "Faible"), ("medium", "Moyen"), ("high", "Élevé")], max_length=10, verbose_name="Niveau de risque")),
                ("status", models.CharField(choices=[("draft", "Brouillon"), ("pending", "En validation"), ("active", "Actif"), ("funded", "Financé"), ("closed", "Clôturé"), ("rejected", "Rejeté")], db_index=True, default="draft", max_length=20, verbose_name="Statut")),
                ("owner", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="projects", to="profiles.profile")),
            ],
            options={
                "verbose_name": "Projet",
                "verbose_name_plural": "Projets",
                "ordering": ["created_at"],
                "indexes": [
                    models.Index(fields=["status", "sector"], name="idx_status_sector"),
                    models.Index(fields=["status", "funding_goal"], name="idx_status_funding"),
                ],
            },
        ),
    ]
