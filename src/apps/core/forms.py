"""Contact form schema and validation."""

from dataclasses import dataclass, field
from enum import StrEnum
from typing import ClassVar

from django import forms
from django.core.exceptions import ValidationError
from django.core.validators import EmailValidator

from .models import ContactMethod, LegalDomain

FIELD_NAMES: tuple[str, ...] = (
    "full_name",
    "email",
    "phone",
    "legal_domain",
    "situation_description",
    "preferred_contact_method",
    "data_consent",
)


class ErrorKind(StrEnum):
    """Kinds of errors shown to the visitor."""

    TOO_SHORT = "too_short"
    INVALID_FORMAT = "invalid_format"
    REQUIRED = "required"
    CONSENT_REQUIRED = "consent_required"


FIELD_ERROR_KINDS: dict[str, ErrorKind] = {
    "full_name": ErrorKind.TOO_SHORT,
    "email": ErrorKind.INVALID_FORMAT,
    "phone": ErrorKind.TOO_SHORT,
    "legal_domain": ErrorKind.REQUIRED,
    "situation_description": ErrorKind.TOO_SHORT,
    "preferred_contact_method": ErrorKind.REQUIRED,
    "data_consent": ErrorKind.CONSENT_REQUIRED,
}

FIELD_ERROR_MESSAGES: dict[str, str] = {
    "full_name": "Please enter your full name.",
    "email": "Please enter a valid email address.",
    "phone": "Please enter a valid phone number.",
    "legal_domain": "Please select the legal area.",
    "situation_description": "The description of your situation must contain at least 50 characters.",
    "preferred_contact_method": "Please select how you would like us to contact you.",
    "data_consent": "Your consent to the processing of personal data is required to submit the form.",
}


def empty_draft() -> dict:
    """Return a draft with every recognized field unset."""
    return {name: False if name == "data_consent" else "" for name in FIELD_NAMES}


def _messages(name: str, *codes: str) -> dict[str, str]:
    # Same sentence whatever rule fired, one per field.
    return dict.fromkeys(("required", *codes), FIELD_ERROR_MESSAGES[name])


class StrictEmailField(forms.EmailField):
    """Email field that requires a dotted domain (no bare ``localhost``)."""

    default_validators: ClassVar[list] = [EmailValidator(allowlist=[])]


class ContactForm(forms.Form):
    """Declarative rules for the consultation request form."""

    full_name = forms.CharField(min_length=3, error_messages=_messages("full_name", "min_length"))
    email = StrictEmailField(error_messages=_messages("email", "invalid"))
    phone = forms.CharField(min_length=7, error_messages=_messages("phone", "min_length"))
    legal_domain = forms.ChoiceField(
        choices=LegalDomain.choices,
        error_messages=_messages("legal_domain", "invalid_choice"),
    )
    situation_description = forms.CharField(
        min_length=50,
        widget=forms.Textarea,
        error_messages=_messages("situation_description", "min_length"),
    )
    preferred_contact_method = forms.ChoiceField(
        choices=ContactMethod.choices,
        widget=forms.RadioSelect,
        error_messages=_messages("preferred_contact_method", "invalid_choice"),
    )
    data_consent = forms.BooleanField(error_messages=_messages("data_consent"))

    def clean_data_consent(self) -> bool:
        # CheckboxInput coerces any truthy value, only a real True counts here.
        if self.data.get("data_consent") is not True:
            raise ValidationError(FIELD_ERROR_MESSAGES["data_consent"], code="required")
        return True


@dataclass(frozen=True)
class ContactData:
    """Normalized, validated consultation request."""

    full_name: str
    email: str
    phone: str
    legal_domain: str
    situation_description: str
    preferred_contact_method: str
    data_consent: bool

    def as_dict(self) -> dict:
        return {name: getattr(self, name) for name in FIELD_NAMES}


@dataclass(frozen=True)
class FieldError:
    kind: ErrorKind
    message: str


@dataclass(frozen=True)
class ValidationResult:
    """Either ``data`` (valid) or a non-empty ``errors`` mapping (invalid)."""

    data: ContactData | None = None
    errors: dict[str, FieldError] = field(default_factory=dict)

    @property
    def is_valid(self) -> bool:
        return self.data is not None


def validate_contact(draft: dict) -> ValidationResult:
    """Validate a contact draft without touching it."""
    form = ContactForm(data=dict(draft))
    if form.is_valid():
        return ValidationResult(data=ContactData(**form.cleaned_data))

    errors = {
        name: FieldError(kind=FIELD_ERROR_KINDS[name], message=FIELD_ERROR_MESSAGES[name])
        for name in FIELD_NAMES
        if name in form.errors
    }
    return ValidationResult(errors=errors)
