"""
Base settings for the probe matchers example project.

The project only exists so the matchers have real models, forms and a
URLconf to probe. Environment-specific modules import from here.
"""

import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent.parent

SECRET_KEY = os.environ.get("SECRET_KEY", "django-insecure-dev-key-only-for-development")

DEBUG = os.environ.get("DEBUG", "0") == "1"

ALLOWED_HOSTS = ["*"]

INSTALLED_APPS = [
    "django.contrib.contenttypes",
    "django.contrib.auth",
    "apps.catalog",
]

ROOT_URLCONF = "backend.urls"

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": BASE_DIR / "db.sqlite3",
    }
}

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"
USE_TZ = True
TIME_ZONE = "UTC"

# Probe matcher overrides; unset keys fall back to libs.probe_matchers.conf.DEFAULTS
PROBE_MATCHERS = {
    "CREDENTIAL_FIELDS": ["password", "password_confirmation"],
    "LOG": {
        "SERVICE": os.environ.get("SERVICE", "probe-matchers"),
        "STREAM": os.environ.get("LOG_STREAM", "stderr"),
        "JSON": os.environ.get("JSON_LOGS", "1").lower() not in ("0", "false", "no"),
    },
}
