"""
Contact form controller.

Owns the draft a visitor is editing and drives it through
validation and submission:

    idle -> validating -> idle              (invalid draft, field errors attached)
    idle -> validating -> pending -> succeeded -> idle   (after the display window)
    idle -> validating -> pending -> failed              (draft kept for retry)

Only one submission can be in flight per controller. Submit triggers that
arrive while validating or pending are ignored.
"""

import asyncio
import logging
from collections.abc import Awaitable, Callable
from enum import StrEnum

from .forms import FIELD_NAMES, ContactData, FieldError, empty_draft, validate_contact

logger = logging.getLogger(__name__)

DEFAULT_SUCCESS_DISPLAY_SECONDS = 5.0
GENERIC_FAILURE_MESSAGE = "We could not send your request. Please try again in a few minutes."

Submitter = Callable[[ContactData], Awaitable[object]]


class SubmissionState(StrEnum):
    IDLE = "idle"
    VALIDATING = "validating"
    PENDING = "pending"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


class UnknownFieldError(KeyError):
    """Raised when an edit names a field the form does not have."""


class SubmissionFailed(Exception):  # noqa: N818
    """Raised by submitters when a validated request could not be delivered."""

    def __init__(self, message: str = GENERIC_FAILURE_MESSAGE) -> None:
        super().__init__(message)
        self.message = message


class ContactFormController:
    """State holder for one contact form instance."""

    def __init__(
        self,
        submitter: Submitter,
        *,
        success_display_seconds: float = DEFAULT_SUCCESS_DISPLAY_SECONDS,
    ) -> None:
        self.submitter = submitter
        self.success_display_seconds = success_display_seconds
        self.state = SubmissionState.IDLE
        self.field_errors: dict[str, FieldError] = {}
        self.form_error = ""
        self._draft = empty_draft()
        self._reset_handle: asyncio.TimerHandle | None = None

    @property
    def draft(self) -> dict:
        """Copy of the current draft values."""
        return dict(self._draft)

    @property
    def is_busy(self) -> bool:
        return self.state in (SubmissionState.VALIDATING, SubmissionState.PENDING)

    def edit(self, field: str, value) -> None:
        """Record a raw field value. No validation happens here."""
        if field not in FIELD_NAMES:
            raise UnknownFieldError(field)
        self._draft[field] = value

    async def submit(self) -> SubmissionState:
        """Validate the draft and, if valid, hand it to the submitter."""
        if self.is_busy:
            logger.debug("Ignoring submit while %s", self.state)
            return self.state

        self._cancel_reset()
        self.state = SubmissionState.VALIDATING
        self.form_error = ""

        result = validate_contact(self._draft)
        self.field_errors = result.errors
        if not result.is_valid:
            logger.info("Contact form rejected, invalid fields: %s", ", ".join(result.errors))
            self.state = SubmissionState.IDLE
            return self.state

        self.state = SubmissionState.PENDING
        try:
            await self.submitter(result.data)
        except SubmissionFailed as exc:
            logger.warning("Contact submission failed: %s", exc.message)
            self.form_error = exc.message
            self.state = SubmissionState.FAILED
            return self.state
        except asyncio.CancelledError:
            logger.warning("Contact submission cancelled while pending")
            self.form_error = GENERIC_FAILURE_MESSAGE
            self.state = SubmissionState.FAILED
            raise
        except Exception:
            logger.exception("Unexpected error while submitting contact form")
            self.form_error = GENERIC_FAILURE_MESSAGE
            self.state = SubmissionState.FAILED
            return self.state

        self._draft = empty_draft()
        self.state = SubmissionState.SUCCEEDED
        self._reset_handle = asyncio.get_running_loop().call_later(
            self.success_display_seconds,
            self._expire_success,
        )
        return self.state

    def snapshot(self) -> dict:
        """Everything the page needs to render the form."""
        return {
            "draft": self.draft,
            "errors": {name: error.message for name, error in self.field_errors.items()},
            "form_error": self.form_error,
            "state": self.state.value,
            "is_busy": self.is_busy,
            "show_success": self.state == SubmissionState.SUCCEEDED,
        }

    def _expire_success(self) -> None:
        self._reset_handle = None
        if self.state == SubmissionState.SUCCEEDED:
            self.state = SubmissionState.IDLE

    def _cancel_reset(self) -> None:
        if self._reset_handle is not None:
            self._reset_handle.cancel()
            self._reset_handle = None
