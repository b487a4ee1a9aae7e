"""Core app views."""

import logging

from django.conf import settings
from django.contrib import messages
from django.http import HttpRequest, HttpResponse
from django.shortcuts import redirect, render
from django.urls import reverse
from django.views import View
from django.views.generic import TemplateView

from . import content
from .controller import ContactFormController, SubmissionState
from .disclosure import Accordion
from .forms import FIELD_NAMES
from .models import ContactMethod, LegalDomain
from .submitters import get_submitter

logger = logging.getLogger(__name__)

SUCCESS_MESSAGE = "Thank you! Your request has been sent. We will contact you as soon as possible."
CHECKBOX_ON_VALUES = ("on", "true", "1")


def _faq_accordion(raw: str | None) -> Accordion:
    """Accordion state carried in the ``?faq=`` query parameter."""
    size = len(content.FAQS)
    if raw == "none":
        return Accordion(size, open_index=None)
    if raw:
        try:
            return Accordion(size, open_index=int(raw))
        except (ValueError, IndexError):
            logger.debug("Ignoring invalid faq parameter %r", raw)
    return Accordion(size)


def build_page_context(request: HttpRequest, form: dict | None = None) -> dict:
    """Context for the landing page, optionally with a form snapshot."""
    accordion = _faq_accordion(request.GET.get("faq"))
    faqs = []
    for index, item in enumerate(content.FAQS):
        target = accordion.next_index(index)
        faqs.append(
            {
                **item,
                "is_open": accordion.is_open(index),
                "toggle_value": "none" if target is None else target,
            }
        )

    return {
        "practice_areas": content.PRACTICE_AREAS,
        "testimonials": content.TESTIMONIALS,
        "faqs": faqs,
        "legal_domains": LegalDomain.choices,
        "contact_methods": ContactMethod.choices,
        "form": form or {"draft": {}, "errors": {}, "form_error": "", "state": "idle"},
        "success_display_ms": int(settings.CONTACT_SUCCESS_DISPLAY_SECONDS * 1000),
    }


class IndexView(TemplateView):
    """Public landing page."""

    template_name = "index.html"

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context.update(build_page_context(self.request))
        return context


class ContactSubmitView(View):
    """Handle consultation request submissions."""

    async def post(self, request: HttpRequest) -> HttpResponse:
        """Run the posted fields through the form controller."""
        controller = ContactFormController(
            get_submitter(),
            success_display_seconds=settings.CONTACT_SUCCESS_DISPLAY_SECONDS,
        )
        for name in FIELD_NAMES:
            value = request.POST.get(name, "")
            if name == "data_consent":
                value = value.lower() in CHECKBOX_ON_VALUES
            controller.edit(name, value)

        state = await controller.submit()

        if state == SubmissionState.SUCCEEDED:
            messages.success(request, SUCCESS_MESSAGE)
            return redirect(f"{reverse('core:index')}#contact")

        status = 503 if state == SubmissionState.FAILED else 400
        return render(request, "index.html", build_page_context(request, controller.snapshot()), status=status)
