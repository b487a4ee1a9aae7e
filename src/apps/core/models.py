"""Core app models."""

from typing import ClassVar

from django.db import models


class LegalDomain(models.TextChoices):
    COMMERCIAL = "commercial", "Commercial & corporate law"
    CIVIL = "civil", "Civil & family law"
    LITIGATION = "litigation", "Litigation"
    LABOR = "labor", "Labor law"
    CRIMINAL = "criminal", "Criminal law"
    RETAINER = "retainer", "Ongoing counsel (retainer)"
    OTHER = "other", "Other"


class ContactMethod(models.TextChoices):
    PHONE = "phone", "Phone"
    EMAIL = "email", "Email"
    MESSAGING_APP = "messaging_app", "WhatsApp"
    VIDEO_CALL = "video_call", "Video call"


class ContactSubmission(models.Model):
    """Stores consultation requests sent through the contact form."""

    full_name = models.CharField(max_length=255)
    email = models.EmailField(max_length=320)
    phone = models.CharField(max_length=50)
    legal_domain = models.CharField(max_length=32, choices=LegalDomain.choices)
    situation_description = models.TextField()
    preferred_contact_method = models.CharField(max_length=32, choices=ContactMethod.choices)
    data_consent = models.BooleanField(default=False)
    is_read = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering: ClassVar[list[str]] = ["-created_at"]
        verbose_name = "contact submission"
        verbose_name_plural = "contact submissions"

    def __str__(self) -> str:
        return f"{self.full_name} - {self.email} ({self.created_at:%Y-%m-%d})"
