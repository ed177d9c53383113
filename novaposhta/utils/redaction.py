"""Secret redaction utility for safe logging and error messages.

Nova Poshta authenticates by placing ``apiKey`` inside every request body,
so request envelopes must be redacted before they reach a log line. Uses
case-insensitive substring matching for sensitive key detection and
handles nested dicts and lists of dicts.
"""

import re

# Substring patterns matched case-insensitively against dict keys
_DEFAULT_SENSITIVE_PATTERNS = frozenset({
    "apikey", "api_key", "secret", "token", "authorization", "password",
})

# Keys whose entire value is redacted (regardless of content type)
_CONTAINER_KEYS = frozenset({"headers"})

_REDACTED = "***REDACTED***"


def _is_sensitive_key(key: str, sensitive_patterns: frozenset[str]) -> bool:
    """Check if a key matches any sensitive pattern (case-insensitive substring)."""
    key_lower = key.lower()
    return any(pattern in key_lower for pattern in sensitive_patterns)


def redact_for_logging(
    obj: dict,
    sensitive_patterns: frozenset[str] = _DEFAULT_SENSITIVE_PATTERNS,
) -> dict:
    """Redact sensitive values from a dict for safe logging.

    Args:
        obj: Dict to redact (not mutated, a copy is returned).
        sensitive_patterns: Substring patterns whose matching keys' values
            should be replaced. Matching is case-insensitive.

    Returns:
        New dict with sensitive values replaced by '***REDACTED***'.
    """
    result = {}
    for key, value in obj.items():
        key_str = str(key)
        if key_str.lower() in _CONTAINER_KEYS:
            result[key] = _REDACTED
        elif _is_sensitive_key(key_str, sensitive_patterns):
            result[key] = _REDACTED
        elif isinstance(value, dict):
            result[key] = redact_for_logging(value, sensitive_patterns)
        elif isinstance(value, list):
            result[key] = [
                redact_for_logging(item, sensitive_patterns) if isinstance(item, dict) else item
                for item in value
            ]
        else:
            result[key] = value
    return result


# "apiKey": "value" (JSON style) or apiKey=value
_API_KEY_VALUE_PATTERN = re.compile(
    r'(?i)(?:"api_?key"\s*:\s*"[^"]*"|api_?key\s*[=:]\s*\S+)'
)


def sanitize_error_message(msg: str | None, max_length: int = 2000) -> str | None:
    """Redact API keys from free text and truncate to max_length.

    Args:
        msg: Error message to sanitize (None passes through).
        max_length: Maximum length of the sanitized message.

    Returns:
        Sanitized and truncated message, or None.
    """
    if msg is None:
        return None
    sanitized = _API_KEY_VALUE_PATTERN.sub(_REDACTED, msg)
    if len(sanitized) > max_length:
        sanitized = sanitized[:max_length - 3] + "..."
    return sanitized


def mask_api_key(api_key: str) -> str:
    """Show only the last four characters of an API key."""
    return "***" + api_key[-4:] if len(api_key) > 4 else "***"
