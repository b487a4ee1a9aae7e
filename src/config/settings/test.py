"""
Django test settings for the law office website.
"""

from .base import *  # noqa: F403
from .base import env

DEBUG = False

SECRET_KEY = "django-insecure-test-key-only"  # noqa: S105

ALLOWED_HOSTS = ["*"]

# Use fast password hasher for tests
PASSWORD_HASHERS = [
    "django.contrib.auth.hashers.MD5PasswordHasher",
]

# Use in-memory email backend
EMAIL_BACKEND = "django.core.mail.backends.locmem.EmailBackend"

# Use DATABASE_URL if set (Docker), otherwise an in-memory SQLite database
DATABASES = {
    "default": env.db("DATABASE_URL", default="sqlite://:memory:"),
}

# Use simple static files storage in tests
STORAGES = {
    "staticfiles": {
        "BACKEND": "django.contrib.staticfiles.storage.StaticFilesStorage",
    },
}

CONTACT_NOTIFICATION_EMAILS = ["office@example.com"]
CONTACT_SIMULATED_DELAY = 0
