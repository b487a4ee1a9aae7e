"""
Delivery backends for validated consultation requests.

A submitter is an async callable taking a ``ContactData``. It returns on
success and raises ``SubmissionFailed`` when the request could not be
delivered. The backend in use is chosen with ``settings.CONTACT_SUBMITTER``.
"""

import asyncio
import hashlib
import hmac
import json
import logging
from urllib.error import HTTPError, URLError
from urllib.request import Request, urlopen

from django.conf import settings
from django.utils.module_loading import import_string

from .controller import SubmissionFailed, Submitter
from .forms import ContactData
from .models import ContactSubmission
from .services import send_contact_notification

logger = logging.getLogger(__name__)

DEFAULT_SUBMITTER = "apps.core.submitters.ConsultationRequestSubmitter"


class SimulatedSubmitter:
    """Pretends to deliver the request after a short delay. Always succeeds."""

    def __init__(self, delay: float | None = None) -> None:
        self.delay = getattr(settings, "CONTACT_SIMULATED_DELAY", 0.6) if delay is None else delay

    async def __call__(self, data: ContactData) -> None:
        logger.info("Simulated contact submission from %s <%s>", data.full_name, data.email)
        await asyncio.sleep(self.delay)


class ConsultationRequestSubmitter:
    """Stores the request and notifies the firm by email."""

    async def __call__(self, data: ContactData) -> ContactSubmission:
        submission = await ContactSubmission.objects.acreate(**data.as_dict())
        logger.info("Stored consultation request #%d (%s)", submission.pk, submission.legal_domain)

        await send_contact_notification(submission)
        return submission


def sign_payload(payload: bytes, secret: str) -> str:
    """Create HMAC SHA256 signature for a webhook payload."""
    return hmac.new(
        secret.encode(),
        payload,
        hashlib.sha256,
    ).hexdigest()


class WebhookSubmitter:
    """POSTs the request as signed JSON to a lead-intake endpoint."""

    def __init__(self, url: str | None = None, secret: str | None = None, timeout: int = 10) -> None:
        self.url = url if url is not None else getattr(settings, "CONTACT_WEBHOOK_URL", "")
        self.secret = secret if secret is not None else getattr(settings, "CONTACT_WEBHOOK_SECRET", "")
        self.timeout = timeout

    async def __call__(self, data: ContactData) -> None:
        if not self.url:
            logger.error("CONTACT_WEBHOOK_URL is not configured")
            raise SubmissionFailed()

        payload = json.dumps({"event": "consultation.requested", "data": data.as_dict()}).encode()
        headers = {
            "Content-Type": "application/json",
            "X-Signature": sign_payload(payload, self.secret),
            "User-Agent": f"{settings.SITE_NAME}-Contact/1.0",
        }
        req = Request(self.url, data=payload, headers=headers, method="POST")  # noqa: S310

        loop = asyncio.get_running_loop()
        try:
            status = await loop.run_in_executor(None, lambda: self._post(req))
        except HTTPError as exc:
            logger.error("Lead webhook %s returned HTTP %s", self.url, exc.code)
            raise SubmissionFailed() from exc
        except (URLError, TimeoutError) as exc:
            logger.error("Lead webhook %s unreachable: %s", self.url, exc)
            raise SubmissionFailed() from exc

        logger.info("Lead webhook accepted request from %s (HTTP %s)", data.email, status)

    def _post(self, req: Request) -> int:
        with urlopen(req, timeout=self.timeout) as response:  # noqa: S310
            return response.status


def get_submitter() -> Submitter:
    """Build the submitter named by ``settings.CONTACT_SUBMITTER``."""
    path = getattr(settings, "CONTACT_SUBMITTER", DEFAULT_SUBMITTER)
    return import_string(path)()
