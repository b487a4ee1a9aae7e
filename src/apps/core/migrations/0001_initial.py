"""Initial migration for core app - ContactSubmission model."""

from django.db import migrations, models


class Migration(migrations.Migration):
    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="ContactSubmission",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True,
                        primary_key=True,
                        serialize=False,
                        verbose_name="ID",
                    ),
                ),
                ("full_name", models.CharField(max_length=255)),
                ("email", models.EmailField(max_length=320)),
                ("phone", models.CharField(max_length=50)),
                (
                    "legal_domain",
                    models.CharField(
                        choices=[
                            ("commercial", "Commercial & corporate law"),
                            ("civil", "Civil & family law"),
                            ("litigation", "Litigation"),
                            ("labor", "Labor law"),
                            ("criminal", "Criminal law"),
                            ("retainer", "Ongoing counsel (retainer)"),
                            ("other", "Other"),
                        ],
                        max_length=32,
                    ),
                ),
                ("situation_description", models.TextField()),
                (
                    "preferred_contact_method",
                    models.CharField(
                        choices=[
                            ("phone", "Phone"),
                            ("email", "Email"),
                            ("messaging_app", "WhatsApp"),
                            ("video_call", "Video call"),
                        ],
                        max_length=32,
                    ),
                ),
                ("data_consent", models.BooleanField(default=False)),
                ("is_read", models.BooleanField(default=False)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "verbose_name": "contact submission",
                "verbose_name_plural": "contact submissions",
                "ordering": ["-created_at"],
            },
        ),
    ]
