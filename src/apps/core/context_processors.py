"""Context processors for the core app."""

from django.conf import settings
from django.http import HttpRequest

from .disclosure import ScrollState


def site_context(request: HttpRequest) -> dict:
    """Add site-wide context variables to all templates."""
    return {
        "SITE_NAME": settings.SITE_NAME,
        "SITE_TAGLINE": "Law Office",
        "BOOKING_URL": getattr(settings, "BOOKING_URL", ""),
        "MESSAGING_APP_URL": getattr(settings, "MESSAGING_APP_URL", ""),
        "SCROLL_THRESHOLDS": ScrollState(getattr(settings, "SCROLL_THRESHOLDS", None)).thresholds,
    }
