"""Core app admin configuration."""

from django.contrib import admin

from .models import ContactSubmission


@admin.register(ContactSubmission)
class ContactSubmissionAdmin(admin.ModelAdmin):
    """Admin interface for consultation requests."""

    list_display = ("full_name", "email", "phone", "legal_domain", "preferred_contact_method", "is_read", "created_at")
    list_filter = ("is_read", "legal_domain", "preferred_contact_method", "created_at")
    search_fields = ("full_name", "email", "phone", "situation_description")
    readonly_fields = ("data_consent", "created_at", "updated_at")
    ordering = ("-created_at",)
