"""Secret redaction helpers for logging."""

from __future__ import annotations

import logging
import re
import traceback
from collections.abc import Callable, Iterable

from envfile.properties import PropertyStore, properties

_SENSITIVE_KEY_PATTERN = r"(?:apikey|api_key|token|access_token|key|secret|password|passphrase|auth)"
_JSON_SECRET_PATTERN = re.compile(
    rf"(?i)(\"{_SENSITIVE_KEY_PATTERN}\"[ \t]*:[ \t]*\")([^\"]*)(\")"
)
_KV_SECRET_PATTERN = re.compile(
    rf"(?i)(\b{_SENSITIVE_KEY_PATTERN}\b[ \t]*[=:][ \t]*)([^&\s,;\"'<>]+)"
)
_BEARER_PATTERN = re.compile(r"(?i)\bBearer\s+[A-Za-z0-9._~+\-/]+=*")

_FILTER_LOGGERS = ("", "envfile")

SecretsProvider = Callable[[], Iterable[str]]


def _secret_fragments(secrets: Iterable[str]) -> list[str]:
    fragments: set[str] = set()
    for secret in secrets:
        if not secret or not secret.strip():
            continue
        fragments.add(secret)
        # Multi-line key material can leak one line at a time.
        fragments.update(line.strip() for line in secret.splitlines() if line.strip())
    # Longest first so a whole secret wins over its own lines.
    return sorted(fragments, key=len, reverse=True)


def redact_text(value: str | None, secrets: Iterable[str] = ()) -> str | None:
    """Redact known secret values and common secret formats from log text."""
    if value is None:
        return None
    text = str(value)

    for fragment in _secret_fragments(secrets):
        text = text.replace(fragment, "***")
    text = _JSON_SECRET_PATTERN.sub(r"\1***\3", text)
    text = _KV_SECRET_PATTERN.sub(r"\1***", text)
    text = _BEARER_PATTERN.sub("Bearer ***", text)
    return text


class SecretRedactionFilter(logging.Filter):
    """Logging filter that redacts secrets before records are emitted."""

    def __init__(self, secrets_provider: SecretsProvider | None = None) -> None:
        super().__init__()
        self._secrets_provider = secrets_provider or (lambda: ())

    def filter(self, record: logging.LogRecord) -> bool:
        secrets = list(self._secrets_provider())
        try:
            message = record.getMessage()
        except Exception:
            message = str(record.msg)

        record.msg = redact_text(message, secrets) or ""
        record.args = ()
        if record.exc_info:
            exc_text = "".join(traceback.format_exception(*record.exc_info))
            record.exc_text = redact_text(exc_text, secrets)
        return True


def _ensure_filter(logger: logging.Logger, redaction_filter: SecretRedactionFilter) -> None:
    if not any(isinstance(existing, SecretRedactionFilter) for existing in logger.filters):
        logger.addFilter(redaction_filter)
    for handler in logger.handlers:
        if not any(isinstance(existing, SecretRedactionFilter) for existing in handler.filters):
            handler.addFilter(redaction_filter)


def install_log_redaction(store: PropertyStore = properties) -> None:
    """Install process-wide log redaction of every value published to *store*."""
    redaction_filter = SecretRedactionFilter(store.values)
    for logger_name in _FILTER_LOGGERS:
        _ensure_filter(logging.getLogger(logger_name), redaction_filter)
