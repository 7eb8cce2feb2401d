"""Helpers for safe debug logging.

Forecast and geolocation requests carry API keys in their query strings.
This module redacts them before anything is logged.
"""

from __future__ import annotations

from collections.abc import Mapping
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

_SENSITIVE_VALUE_KEYS: frozenset[str] = frozenset(
    {
        "key",
        "apikey",
        "api_key",
        "token",
        "access_token",
        "authorization",
        "password",
    }
)

_REDACTED = "<redacted>"


def redact_for_log(params: Mapping[str, str]) -> dict[str, str]:
    """Return a copy of query *params* with sensitive values replaced."""
    return {key: _REDACTED if key.lower() in _SENSITIVE_VALUE_KEYS else value for key, value in params.items()}


def redact_url(url: str) -> str:
    """Return *url* with sensitive query parameters replaced."""
    parts = urlsplit(url)
    if not parts.query:
        return url
    query = [
        (k, _REDACTED if k.lower() in _SENSITIVE_VALUE_KEYS else v)
        for k, v in parse_qsl(parts.query, keep_blank_values=True)
    ]
    return urlunsplit(parts._replace(query=urlencode(query, safe="<>,")))
