"""Pytest configuration and shared fixtures for the law office tests."""

import pytest


@pytest.fixture
def valid_draft() -> dict:
    """A draft where every field passes validation."""
    return {
        "full_name": "Alex Popescu",
        "email": "alex@example.ro",
        "phone": "+40 721 000 000",
        "legal_domain": "commercial",
        "situation_description": "My former business partner stopped paying the agreed dividends last year.",
        "preferred_contact_method": "email",
        "data_consent": True,
    }


@pytest.fixture
def contact_data(valid_draft: dict):
    """Validated data bundle matching ``valid_draft``."""
    from apps.core.forms import ContactData

    return ContactData(**valid_draft)


@pytest.fixture
def contact_post(valid_draft: dict) -> dict:
    """The same draft as a browser would POST it."""
    return {**valid_draft, "data_consent": "on"}
