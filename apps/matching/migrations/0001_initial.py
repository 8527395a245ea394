import uuid

import django.core.validators
import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("profiles", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="AIMatch",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("created_at", models.DateTimeField(auto_now_add=True, db_index=True, verbose_name="Créé le")),
                ("updated_at", models.DateTimeField(auto_now=True, verbose_name="Mis à jour le")),
                ("target_id", models.UUIDField(db_index=True, verbose_name="Cible")),
                ("target_type", models.CharField(choices=[("project", "Projet"), ("profile", "Profil")], max_length=10, verbose_name="Type de cible")),
                ("match_score", models.FloatField(help_text="0 = incompatible, 100 = parfait", validators=[django.core.validators.MinValueValidator(0), django.core.validators.MaxValueValidator(100)], verbose_name="Score (0-100)")),
                ("match_reasons", models.JSONField(default=list, verbose_name="Raisons")),
                ("preferences_used", models.JSONField(blank=True, default=dict, verbose_name="Préférences utilisées")),
                ("ai_derived", models.BooleanField(default=False, verbose_name="Score IA")),
                ("prompt_version", models.CharField(blank=True, max_length=50, verbose_name="Version du prompt")),
                ("model_name", models.CharField(blank=True, max_length=100, verbose_name="Modèle IA")),
                ("user", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="ai_matches", to="profiles.profile")),
            ],
            options={
                "verbose_name": "Match IA",
                "verbose_name_plural": "Matches IA",
                "ordering": ["-match_score"],
                "constraints": [
                    models.UniqueConstraint(fields=("user", "target_id", "target_type"), name="uniq_ai_match_user_target"),
                ],
            },
        ),
    ]
