"""Tests for the consultation request submitters."""

import asyncio
import json
from unittest.mock import MagicMock, patch
from urllib.error import HTTPError, URLError

import pytest
from asgiref.sync import async_to_sync
from django.core import mail

from apps.core.controller import SubmissionFailed
from apps.core.forms import ContactData
from apps.core.models import ContactSubmission
from apps.core.submitters import (
    ConsultationRequestSubmitter,
    SimulatedSubmitter,
    WebhookSubmitter,
    get_submitter,
    sign_payload,
)


class TestSimulatedSubmitter:
    """The stand-in backend always succeeds."""

    def test_succeeds(self, contact_data: ContactData) -> None:
        assert asyncio.run(SimulatedSubmitter(delay=0)(contact_data)) is None

    def test_delay_from_settings(self, settings) -> None:
        settings.CONTACT_SIMULATED_DELAY = 0.25
        assert SimulatedSubmitter().delay == 0.25


@pytest.mark.django_db
class TestConsultationRequestSubmitter:
    """Database-backed submitter."""

    def test_stores_request_and_notifies(self, contact_data: ContactData) -> None:
        submission = async_to_sync(ConsultationRequestSubmitter())(contact_data)

        stored = ContactSubmission.objects.get(pk=submission.pk)
        assert stored.full_name == "Alex Popescu"
        assert stored.legal_domain == "commercial"
        assert stored.data_consent is True
        assert stored.is_read is False

        assert len(mail.outbox) == 1
        message = mail.outbox[0]
        assert message.subject == "New consultation request from Alex Popescu"
        assert message.to == ["office@example.com"]
        assert message.reply_to == ["Alex Popescu <alex@example.ro>"]
        assert "Commercial & corporate law" in message.body
        assert message.alternatives[0][1] == "text/html"

    def test_no_recipients_skips_email(self, settings, contact_data: ContactData) -> None:
        settings.CONTACT_NOTIFICATION_EMAILS = []
        async_to_sync(ConsultationRequestSubmitter())(contact_data)
        assert ContactSubmission.objects.count() == 1
        assert mail.outbox == []

    def test_email_failure_does_not_fail_submission(self, contact_data: ContactData) -> None:
        with patch("apps.core.services.EmailMultiAlternatives.send", side_effect=OSError("smtp down")):
            async_to_sync(ConsultationRequestSubmitter())(contact_data)
        assert ContactSubmission.objects.count() == 1


class TestWebhookSubmitter:
    """Signed JSON POST to a lead-intake endpoint."""

    URL = "https://intake.example.com/leads/"

    @patch("apps.core.submitters.urlopen")
    def test_posts_signed_payload(self, mock_urlopen: MagicMock, contact_data: ContactData) -> None:
        mock_urlopen.return_value.__enter__.return_value.status = 202

        asyncio.run(WebhookSubmitter(url=self.URL, secret="s3cret")(contact_data))

        request = mock_urlopen.call_args.args[0]
        assert request.full_url == self.URL
        assert request.get_method() == "POST"
        body = json.loads(request.data)
        assert body["event"] == "consultation.requested"
        assert body["data"]["email"] == "alex@example.ro"
        assert request.get_header("X-signature") == sign_payload(request.data, "s3cret")

    @patch("apps.core.submitters.urlopen")
    def test_http_error_raises_submission_failed(self, mock_urlopen: MagicMock, contact_data: ContactData) -> None:
        mock_urlopen.side_effect = HTTPError(self.URL, 500, "Server Error", hdrs=None, fp=None)
        with pytest.raises(SubmissionFailed):
            asyncio.run(WebhookSubmitter(url=self.URL, secret="s3cret")(contact_data))

    @patch("apps.core.submitters.urlopen")
    def test_network_error_raises_submission_failed(self, mock_urlopen: MagicMock, contact_data: ContactData) -> None:
        mock_urlopen.side_effect = URLError("connection refused")
        with pytest.raises(SubmissionFailed):
            asyncio.run(WebhookSubmitter(url=self.URL, secret="s3cret")(contact_data))

    def test_missing_url_raises_submission_failed(self, contact_data: ContactData) -> None:
        with pytest.raises(SubmissionFailed):
            asyncio.run(WebhookSubmitter(url="", secret="")(contact_data))

    def test_sign_payload_is_hmac_sha256(self) -> None:
        assert sign_payload(b"{}", "key") == sign_payload(b"{}", "key")
        assert sign_payload(b"{}", "key") != sign_payload(b"{}", "other")
        assert len(sign_payload(b"{}", "key")) == 64


class TestGetSubmitter:
    """Backend selection from settings."""

    def test_default_is_database_backend(self) -> None:
        assert isinstance(get_submitter(), ConsultationRequestSubmitter)

    def test_configured_backend(self, settings) -> None:
        settings.CONTACT_SUBMITTER = "apps.core.submitters.SimulatedSubmitter"
        assert isinstance(get_submitter(), SimulatedSubmitter)
