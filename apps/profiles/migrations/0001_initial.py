import uuid

import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="Profile",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("created_at", models.DateTimeField(auto_now_add=True, db_index=True, verbose_name="Créé le")),
                ("updated_at", models.DateTimeField(auto_now=True, verbose_name="Mis à jour le")),
                ("full_name", models.CharField(max_length=200, verbose_name="Nom complet")),
                ("user_type", models.CharField(choices=[("investor", "Investisseur"), ("entrepreneur", "Entrepreneur"), ("admin", "Administrateur")], db_index=True, max_length=20, verbose_name="Type de compte")),
                ("company", models.CharField(blank=True, max_length=200, verbose_name="Entreprise")),
                ("bio", models.TextField(blank=True, verbose_name="Bio")),
                ("location", models.CharField(blank=True, max_length=200, verbose_name="Localisation")),
                ("sector", models.CharField(blank=True, db_index=True, help_text="Secteur d'activité ou d'investissement principal", max_length=100, verbose_name="Secteur")),
                ("email", models.EmailField(blank=True, max_length=254, verbose_name="E-mail")),
                ("phone", models.CharField(blank=True, max_length=30, verbose_name="Téléphone")),
                ("website", models.URLField(blank=True, verbose_name="Site web")),
                ("is_active", models.BooleanField(default=True, verbose_name="Actif")),
                ("notify_email", models.BooleanField(default=True, verbose_name="Notifier par e-mail")),
                ("webhook_url", models.URLField(blank=True, verbose_name="Webhook URL")),
                ("user", models.OneToOneField(blank=True, null=True, on_delete=django.db.models.deletion.CASCADE, related_name="profile", to=settings.AUTH_USER_MODEL)),
            ],
            options={
                "verbose_name": "Profil",
                "verbose_name_plural": "Profils",
                "ordering": ["created_at"],
            },
        ),
    ]
