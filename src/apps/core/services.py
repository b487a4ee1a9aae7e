"""Core app services."""

import logging

from django.conf import settings
from django.core.mail import EmailMultiAlternatives
from django.template.loader import render_to_string

from .models import ContactSubmission

logger = logging.getLogger(__name__)


async def send_contact_notification(submission: ContactSubmission) -> None:
    """Send email notification to the firm when a consultation is requested."""
    recipients: list[str] = getattr(settings, "CONTACT_NOTIFICATION_EMAILS", [])

    if not recipients:
        logger.warning("No CONTACT_NOTIFICATION_EMAILS configured, skipping notification.")
        return

    legal_domain_display = submission.get_legal_domain_display()
    contact_method_display = submission.get_preferred_contact_method_display()
    admin_url = f"{settings.SITE_URL}/admin/core/contactsubmission/{submission.pk}/change/"

    subject = f"New consultation request from {submission.full_name}"

    # Plain text version
    text_body = (
        f"New consultation request received:\n\n"
        f"Name: {submission.full_name}\n"
        f"Email: {submission.email}\n"
        f"Phone: {submission.phone}\n"
        f"Legal area: {legal_domain_display}\n"
        f"Preferred contact: {contact_method_display}\n"
        f"Situation:\n{submission.situation_description}\n\n"
        f"Submitted: {submission.created_at:%Y-%m-%d %H:%M}\n\n"
        f"View in admin: {admin_url}\n"
    )

    # HTML version
    html_body = render_to_string(
        "emails/contact_notification.html",
        {
            "submission": submission,
            "legal_domain_display": legal_domain_display,
            "contact_method_display": contact_method_display,
            "admin_url": admin_url,
        },
    )

    # Reply-to the visitor so "Reply" goes straight to them
    from_email = f"{submission.full_name} via {settings.SITE_NAME} <{settings.DEFAULT_FROM_EMAIL_ADDRESS}>"

    try:
        msg = EmailMultiAlternatives(
            subject=subject,
            body=text_body,
            from_email=from_email,
            to=recipients,
            reply_to=[f"{submission.full_name} <{submission.email}>"],
        )
        msg.attach_alternative(html_body, "text/html")
        msg.send(fail_silently=False)
        logger.info("Contact notification sent to %s for submission #%d", recipients, submission.pk)
    except Exception:
        logger.exception("Failed to send contact notification for submission #%d", submission.pk)
