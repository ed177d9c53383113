"""Error types and formatting utilities.

This module provides:
- NovaPoshtaError exception class for client errors
- TransportError raised by transports for network-level failures
- Error formatting for textual tool results
"""

from dataclasses import dataclass, field
from typing import Any

from novaposhta.errors.registry import get_error


@dataclass
class NovaPoshtaError(Exception):
    """Client error with code, message, and context.

    Attributes:
        code: Error code in E-XXXX format.
        message: Human-readable error message.
        remediation: Action user should take to resolve.
        is_retryable: Whether the operation can be retried without user action.
        details: Additional context dictionary.
    """

    code: str
    message: str
    remediation: str = ""
    is_retryable: bool = False
    details: dict = field(default_factory=dict)

    def __str__(self) -> str:
        """Return string representation of the error."""
        return f"{self.code}: {self.message}"

    @classmethod
    def from_code(cls, code: str, **kwargs: object) -> "NovaPoshtaError":
        """Create error from registry code with context substitution.

        Args:
            code: Error code in E-XXXX format.
            **kwargs: Context values for message template substitution.
                The special key 'details' is stored on the error rather
                than substituted into the message.

        Returns:
            Error instance with formatted message.
        """
        details = kwargs.pop("details", {})
        if not isinstance(details, dict):
            details = {}

        error_def = get_error(code)
        if not error_def:
            return cls(
                code=code,
                message=f"Unknown error: {code}",
                remediation="Contact support.",
                details=details,
            )

        message = error_def.message_template
        try:
            message = message.format(**kwargs)
        except KeyError:
            # Keep template if some placeholders are missing
            pass

        return cls(
            code=error_def.code,
            message=message,
            remediation=error_def.remediation,
            is_retryable=error_def.is_retryable,
            details=details,
        )


@dataclass
class TransportError(NovaPoshtaError):
    """Network-level failure: unreachable host, timeout, or non-JSON body."""


def format_error(error: BaseException | str | Any, include_remediation: bool = False) -> str:
    """Format an error for display in a textual tool result.

    Args:
        error: Exception, message string, or arbitrary value.
        include_remediation: Append the remediation hint for coded errors.

    Returns:
        Single-line (or two-line with remediation) message.
    """
    if isinstance(error, NovaPoshtaError):
        text = f"Nova Poshta API error ({error.code}): {error.message}"
        if include_remediation and error.remediation:
            text += f"\n  Action: {error.remediation}"
        return text

    if isinstance(error, BaseException):
        return str(error) or error.__class__.__name__

    if isinstance(error, str):
        return error

    return "Unknown error"


def format_response_errors(errors: Any, fallback: str) -> str:
    """Join response error messages, or return a fallback when there are none.

    Args:
        errors: The ``errors`` list of a response envelope.
        fallback: Message used when ``errors`` is empty or not a list.

    Returns:
        Comma-separated error messages or the fallback.
    """
    if isinstance(errors, (list, tuple)) and errors:
        return ", ".join(str(e) for e in errors)
    return fallback
