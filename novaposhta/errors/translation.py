"""Nova Poshta error message translation to registry codes.

The API reports logical failures as free-text messages plus opaque
numeric message codes. This module maps the well-known messages onto
the registry so callers get a stable code and a remediation hint.
"""

from novaposhta.errors.formatter import NovaPoshtaError, format_response_errors
from novaposhta.errors.registry import get_error

# Lower-cased substrings of Nova Poshta error messages
NOVA_POSHTA_MESSAGE_PATTERNS: dict[str, str] = {
    "api key is not valid": "E-5001",
    "api key expired": "E-5001",
    "invalid api key": "E-5001",
    "api key is required": "E-5002",
    "apikey is empty": "E-5002",
    "user is undefined": "E-5002",
    "document number is not correct": "E-2001",
    "document not found": "E-3002",
    "to many requests": "E-3003",
    "too many requests": "E-3003",
}

# Nova Poshta message codes with a known meaning
NOVA_POSHTA_MESSAGE_CODES: dict[str, str] = {
    "20000101582": "E-5002",
}


def translate_message_code(code: str | None) -> str | None:
    """Map a Nova Poshta message code onto a registry code.

    Returns:
        Registry code, or None when the message code is not recognised.
    """
    if not code:
        return None
    return NOVA_POSHTA_MESSAGE_CODES.get(str(code).strip())


def translate_api_error(
    api_message: str | None,
    context: dict | None = None,
) -> tuple[str, str, str]:
    """Translate a Nova Poshta error message into a registry error.

    Args:
        api_message: Error text from the response envelope.
        context: Additional template values (e.g. 'value').

    Returns:
        Tuple of (error_code, formatted_message, remediation).
    """
    context = dict(context or {})
    context.setdefault("value", "")

    if api_message:
        lowered = api_message.lower()
        for pattern, code in NOVA_POSHTA_MESSAGE_PATTERNS.items():
            if pattern in lowered:
                error = get_error(code)
                if error:
                    message = _format_message(
                        error.message_template, api_message=api_message, **context
                    )
                    return (error.code, message, error.remediation)

    error = get_error("E-3001")
    if error:
        message = _format_message(
            error.message_template,
            api_message=api_message or "Unknown error",
            **context,
        )
        return (error.code, message, error.remediation)

    return (
        "E-3001",
        f"Nova Poshta error: {api_message or 'Unknown'}",
        "Contact support with this error message for assistance.",
    )


def _format_message(template: str, **kwargs: object) -> str:
    """Format a message template with context, ignoring missing keys.

    Args:
        template: Message template with {placeholder} syntax.
        **kwargs: Values to substitute into the template.

    Returns:
        Formatted message string.
    """
    try:
        return template.format(**kwargs)
    except KeyError:
        return template


def error_from_api_response(
    errors: list[str] | None,
    error_codes: list[str] | None,
    fallback: str,
) -> NovaPoshtaError:
    """Build a coded error for a ``success: false`` response.

    Known message codes map straight onto a registry code; otherwise the
    joined error text is matched against the known message patterns.

    Args:
        errors: The response's error messages.
        error_codes: The response's ``errorCodes``.
        fallback: Message used when the response carries no error text.
    """
    api_message = format_response_errors(errors, fallback)
    for message_code in error_codes or []:
        code = translate_message_code(message_code)
        if code:
            return NovaPoshtaError.from_code(code, api_message=api_message)

    code, message, remediation = translate_api_error(api_message)
    return NovaPoshtaError(code=code, message=message, remediation=remediation)
