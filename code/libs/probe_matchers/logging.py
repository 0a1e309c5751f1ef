from __future__ import annotations

import contextvars
import json
import os
import random
import re
import sys
import time
from typing import Any, Dict

from .conf import credential_fields, log_config

# ---- context ---------------------------------------------------------------

_CTX = contextvars.ContextVar("probe_log_ctx", default=None)


def bind(**fields: Any) -> None:
    """
    Bind context fields for the current evaluation.
    Use for things like matcher, attribute, method, path.
    """
    ctx = dict(_CTX.get() or {})
    ctx.update({k: v for k, v in fields.items() if v is not None})
    _CTX.set(ctx)


def clear() -> None:
    """Clear bound context so one evaluation does not leak into the next."""
    _CTX.set(None)


# ---- internal utilities ----------------------------------------------------

_SECRET_PATTERNS = [
    (r'(token|key|secret|password|auth|bearer|api[_-]?key)["\s:=]+([^\s"\']+)', r"\1=***"),
    (r"(sk|pk)[_-][a-zA-Z0-9]{20,}", r"***"),
    (r"Bearer\s+[a-zA-Z0-9\-._~+/]+=*", "Bearer ***"),
]


def _ts() -> str:
    return time.strftime("%Y-%m-%dT%H:%M:%SZ", time.gmtime())


def _redact(s: str) -> str:
    result = s
    for pattern, replacement in _SECRET_PATTERNS:
        result = re.sub(pattern, replacement, result, flags=re.IGNORECASE)
    return result


def redact_value(attribute: str, value: Any) -> Any:
    """Mask probe values written to credential attributes."""
    if attribute in credential_fields() and value is not None:
        return "***"
    return value


def _sample(env_key: str, default: float = 0.0) -> bool:
    """Return True with probability defined by ENV var (e.g., LOG_SAMPLE_DEBUG=0.05)."""
    try:
        rate = float(os.getenv(env_key, default))
    except ValueError:
        rate = default
    return random.random() < rate


def _stream(cfg: Dict[str, Any]):
    # stderr by default so pytest -s output stays readable
    return sys.stdout if cfg["STREAM"] == "stdout" else sys.stderr


def _as_json(event: Dict[str, Any]) -> str:
    return json.dumps(event, separators=(",", ":"), sort_keys=True, ensure_ascii=False, default=repr)


# ---- core logger -----------------------------------------------------------


def log(level: str, event: str, **fields: Any) -> None:
    """Emit structured JSON log event with context binding."""
    cfg = log_config()

    base: Dict[str, Any] = {
        "ts": _ts(),
        "level": level,
        "event": event,
        "service": cfg["SERVICE"],
        "env": cfg["ENV"],
        "version": cfg["RELEASE"],
    }
    base.update(_CTX.get() or {})

    for k, v in fields.items():
        if isinstance(v, str):
            base[k] = _redact(v)[:2000]
        else:
            base[k] = v

    stream = _stream(cfg)
    if cfg["JSON"]:
        stream.write(_as_json(base) + "\n")
    else:
        kv = " ".join(f"{k}={v}" for k, v in base.items() if k not in ("ts", "level", "event"))
        stream.write(f"[{base['level'].upper()}] {base['event']} {kv}\n")

    stream.flush()


def warn(event: str, **fields: Any) -> None:
    log("warn", event, **fields)


def debug(event: str, **fields: Any) -> None:
    """Debug events with volume control via LOG_SAMPLE_DEBUG (default 0.0)."""
    if _sample("LOG_SAMPLE_DEBUG", 0.0):
        log("debug", event, **fields)
