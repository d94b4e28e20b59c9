"""
Logging utilities for the Klarna Payments SDK with sensitive data masking.

The SDK never configures handlers itself; it logs through module loggers
under the ``klarna_payments`` namespace and leaves output to the application.

Usage:
    from klarna_payments.logging import log_request, log_response

    logger = logging.getLogger(__name__)
    log_request(logger, "POST", url, headers)
    log_response(logger, 200, duration_ms=12.5)
"""
from __future__ import annotations

import json
import logging
import re
from typing import Any, Dict, Mapping, Optional, Sequence

MASK_PATTERN = "***REDACTED***"
MAX_LOG_MESSAGE_LENGTH = 10000
MAX_BODY_LOG_LENGTH = 500

SENSITIVE_FIELDS = frozenset({
    "password",
    "secret",
    "client_token",
    "authorization_token",
    "token_id",
    "customer_token_id",
    "date_of_birth",
    "email",
    "phone",
})

SENSITIVE_HEADERS = frozenset({
    "authorization",
    "proxy-authorization",
    "cookie",
    "set-cookie",
})

_INLINE_PATTERNS = [
    (re.compile(r"(Bearer\s+)[a-zA-Z0-9._-]+", re.IGNORECASE), r"\1***"),
    (re.compile(r"(Basic\s+)[a-zA-Z0-9+/=]+", re.IGNORECASE), r"\1***"),
    (re.compile(r"(https?://)[^:/@\s]+:[^@\s]+@", re.IGNORECASE), r"\1***:***@"),
    (re.compile(r"\beyJ[a-zA-Z0-9_-]+\.eyJ[a-zA-Z0-9_-]+\.[a-zA-Z0-9_-]+\b"), "***JWT***"),
]


def is_sensitive_key(key: str) -> bool:
    """Check if a key name indicates sensitive data."""
    key_lower = key.lower().replace("-", "_")
    return key_lower in SENSITIVE_FIELDS or any(
        sensitive in key_lower
        for sensitive in ("secret", "password", "token", "credential", "auth")
    )


def mask_inline(text: str) -> str:
    """Mask credentials embedded in free text (auth headers, URLs, JWTs)."""
    if len(text) > MAX_LOG_MESSAGE_LENGTH:
        text = text[:MAX_LOG_MESSAGE_LENGTH] + "...[truncated]"
    for pattern, replacement in _INLINE_PATTERNS:
        text = pattern.sub(replacement, text)
    return text


def mask_url(url: str) -> str:
    return mask_inline(url)


def mask_sensitive_data(
    data: Any,
    additional_fields: Optional[Sequence[str]] = None,
    _depth: int = 0,
    _max_depth: int = 10,
) -> Any:
    """Recursively mask sensitive values in a data structure.

    Args:
        data: The data structure to mask (dict, list, or scalar)
        additional_fields: Additional field names to mask

    Returns:
        Copy of data with sensitive values masked
    """
    if _depth > _max_depth:
        return data

    if isinstance(data, Mapping):
        result = {}
        for key, value in data.items():
            if is_sensitive_key(str(key)) or (additional_fields and key in additional_fields):
                result[key] = MASK_PATTERN
            else:
                result[key] = mask_sensitive_data(value, additional_fields, _depth + 1, _max_depth)
        return result

    if isinstance(data, (list, tuple)):
        return type(data)(
            mask_sensitive_data(item, additional_fields, _depth + 1, _max_depth)
            for item in data
        )

    if isinstance(data, str):
        return mask_inline(data)

    return data


def mask_headers(headers: Mapping[str, str]) -> Dict[str, str]:
    """Mask sensitive HTTP headers."""
    return {
        key: MASK_PATTERN if key.lower() in SENSITIVE_HEADERS else value
        for key, value in headers.items()
    }


def _truncate_body(body: Any) -> str:
    body_str = json.dumps(mask_sensitive_data(body), default=str)
    if len(body_str) > MAX_BODY_LOG_LENGTH:
        body_str = body_str[:MAX_BODY_LOG_LENGTH] + "..."
    return body_str


def log_request(
    logger: logging.Logger,
    method: str,
    url: str,
    headers: Optional[Mapping[str, str]] = None,
    body: Optional[Any] = None,
) -> None:
    """Log an outgoing HTTP request at DEBUG."""
    if not logger.isEnabledFor(logging.DEBUG):
        return

    log_data: Dict[str, Any] = {
        "direction": "request",
        "method": method,
        "url": mask_url(url),
    }
    if headers:
        log_data["headers"] = mask_headers(headers)
    if body is not None:
        log_data["body"] = _truncate_body(body)

    logger.debug(f"HTTP {method} {log_data['url']}", extra={"data": log_data})


def log_response(
    logger: logging.Logger,
    status_code: int,
    url: Optional[str] = None,
    duration_ms: Optional[float] = None,
    error: Optional[str] = None,
) -> None:
    """Log an HTTP response; DEBUG for success, WARNING for 4xx/5xx."""
    level = logging.DEBUG if status_code < 400 else logging.WARNING
    if not logger.isEnabledFor(level):
        return

    log_data: Dict[str, Any] = {
        "direction": "response",
        "status_code": status_code,
    }
    if url:
        log_data["url"] = mask_url(url)
    if duration_ms is not None:
        log_data["duration_ms"] = duration_ms
    if error:
        log_data["error"] = mask_inline(error)

    message = f"HTTP {status_code}"
    if duration_ms is not None:
        message += f" ({duration_ms:.0f}ms)"

    logger.log(level, message, extra={"data": log_data})
