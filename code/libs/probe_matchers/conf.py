"""Settings for probe matchers.

Values come from the ``PROBE_MATCHERS`` dict in Django settings, falling back
to ``DEFAULTS`` key by key. Outside a configured Django project (plain unit
tests, scripts) the defaults are used as-is.
"""

from __future__ import annotations

import os
from typing import Any, Dict

DEFAULTS: Dict[str, Any] = {
    # Attributes whose blocked mutation raises CouldNotSetPasswordError
    "CREDENTIAL_FIELDS": ("password",),
    "DEFAULT_EXCLUSION_MESSAGE": "exclusion",
    "DEFAULT_PRESENCE_MESSAGE": "blank",
    # Symbolic kind -> host error codes that count as that kind
    "ERROR_CODE_ALIASES": {
        "blank": ("blank", "null", "required"),
        "exclusion": ("exclusion",),
    },
    "LOG": {
        "SERVICE": "probe-matchers",
        "STREAM": "stderr",
        "JSON": True,
    },
}


def _overrides() -> Dict[str, Any]:
    from django.conf import settings
    from django.core.exceptions import ImproperlyConfigured

    try:
        return dict(getattr(settings, "PROBE_MATCHERS", None) or {})
    except ImproperlyConfigured:
        # settings not configured (non-Django context)
        return {}


def get_setting(name: str) -> Any:
    """Return a single setting, Django override first."""
    if name not in DEFAULTS:
        raise KeyError(f"unknown probe matcher setting '{name}'")
    overrides = _overrides()
    value = overrides.get(name, DEFAULTS[name])
    if isinstance(DEFAULTS[name], dict) and value is not DEFAULTS[name]:
        merged = dict(DEFAULTS[name])
        merged.update(value)
        return merged
    return value


def credential_fields() -> tuple[str, ...]:
    return tuple(get_setting("CREDENTIAL_FIELDS"))


def error_code_aliases(kind: str) -> tuple[str, ...]:
    """Host error codes accepted for a symbolic kind (the kind itself included)."""
    aliases = get_setting("ERROR_CODE_ALIASES").get(kind, ())
    return (kind, *[a for a in aliases if a != kind])


def log_config() -> Dict[str, Any]:
    """
    Logging config. Environment wins over settings:
      - LOG_STREAM (stderr|stdout)
      - JSON_LOGS (1/0)
      - SERVICE
    """
    cfg = get_setting("LOG")
    json_env = os.getenv("JSON_LOGS")
    return {
        "SERVICE": os.getenv("SERVICE", cfg["SERVICE"]),
        "STREAM": (os.getenv("LOG_STREAM") or cfg["STREAM"]).lower(),
        "JSON": cfg["JSON"] if json_env is None else json_env.lower() not in ("0", "false", "no"),
        "ENV": os.getenv("APP_ENV", "test"),
        "RELEASE": os.getenv("RELEASE", ""),
    }
