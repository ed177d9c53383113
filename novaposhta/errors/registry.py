"""Error code registry with E-XXXX format codes.

This module defines the error code system for the Nova Poshta client,
organizing errors into categories:
- E-2xxx: Validation errors (bad tool arguments, malformed requests)
- E-3xxx: Nova Poshta API errors (logical failures reported by the API)
- E-4xxx: System/transport errors (network, timeouts, malformed bodies)
- E-5xxx: Authentication errors

Each error includes a code, title, message template, and remediation steps.
"""

from dataclasses import dataclass
from enum import Enum


class ErrorCategory(str, Enum):
    """Categories for error codes."""

    VALIDATION = "validation"  # E-2xxx
    API = "api"  # E-3xxx
    SYSTEM = "system"  # E-4xxx
    AUTH = "auth"  # E-5xxx


@dataclass
class ErrorCode:
    """Definition of an error code with metadata.

    Attributes:
        code: Error code in E-XXXX format.
        category: Error category for grouping.
        title: Short title for display.
        message_template: Message with {placeholders} for context.
        remediation: Action user should take to resolve.
        is_retryable: Whether the operation can be retried without user action.
    """

    code: str
    category: ErrorCategory
    title: str
    message_template: str
    remediation: str
    is_retryable: bool = False


ERROR_REGISTRY: dict[str, ErrorCode] = {
    # Validation errors (E-2xxx)
    "E-2001": ErrorCode(
        code="E-2001",
        category=ErrorCategory.VALIDATION,
        title="Invalid Tracking Number",
        message_template="'{value}' is not a valid Nova Poshta tracking number.",
        remediation="Tracking numbers are 14 digits, e.g. 20450123456789.",
    ),
    "E-2002": ErrorCode(
        code="E-2002",
        category=ErrorCategory.VALIDATION,
        title="Invalid Phone Number",
        message_template="'{value}' is not a valid phone number.",
        remediation="Use the international format 380XXXXXXXXX.",
    ),
    "E-2003": ErrorCode(
        code="E-2003",
        category=ErrorCategory.VALIDATION,
        title="Invalid Request",
        message_template="Request for {operation} is invalid: {reason}",
        remediation="Check the required fields for this operation and retry.",
    ),
    "E-2004": ErrorCode(
        code="E-2004",
        category=ErrorCategory.VALIDATION,
        title="Postomat Limits Exceeded",
        message_template="Shipment does not fit a postomat: {reason}",
        remediation="Postomat parcels must weigh at most 30 kg, fit 40x60x30 cm and be declared at no more than 10000 UAH. Ship to a warehouse otherwise.",
    ),
    # Nova Poshta API errors (E-3xxx)
    "E-3001": ErrorCode(
        code="E-3001",
        category=ErrorCategory.API,
        title="Nova Poshta Request Failed",
        message_template="Nova Poshta API rejected the request: {api_message}",
        remediation="Review the error returned by Nova Poshta and correct the request.",
    ),
    "E-3002": ErrorCode(
        code="E-3002",
        category=ErrorCategory.API,
        title="Document Not Found",
        message_template="Document {value} was not found.",
        remediation="Verify the document number. New documents may take a few minutes to appear.",
    ),
    "E-3003": ErrorCode(
        code="E-3003",
        category=ErrorCategory.API,
        title="Rate Limit Exceeded",
        message_template="Nova Poshta API rate limit exceeded: {api_message}",
        remediation="Wait a minute before retrying, or reduce batch sizes.",
        is_retryable=True,
    ),
    # System/transport errors (E-4xxx)
    "E-4001": ErrorCode(
        code="E-4001",
        category=ErrorCategory.SYSTEM,
        title="Nova Poshta API Unreachable",
        message_template="Could not reach {url}: {reason}",
        remediation="Check network connectivity and the configured base URL, then retry.",
        is_retryable=True,
    ),
    "E-4002": ErrorCode(
        code="E-4002",
        category=ErrorCategory.SYSTEM,
        title="Request Timeout",
        message_template="Request to {url} timed out after {timeout}s.",
        remediation="Retry later or increase NOVA_POSHTA_TIMEOUT.",
        is_retryable=True,
    ),
    "E-4003": ErrorCode(
        code="E-4003",
        category=ErrorCategory.SYSTEM,
        title="Malformed Response",
        message_template="Nova Poshta API returned a non-JSON response (HTTP {status}).",
        remediation="The API may be under maintenance. Retry later.",
        is_retryable=True,
    ),
    "E-4004": ErrorCode(
        code="E-4004",
        category=ErrorCategory.SYSTEM,
        title="Configuration Error",
        message_template="Invalid configuration: {reason}",
        remediation="Fix novaposhta.yaml or the NOVA_POSHTA_* environment variables.",
    ),
    # Authentication errors (E-5xxx)
    "E-5001": ErrorCode(
        code="E-5001",
        category=ErrorCategory.AUTH,
        title="Invalid API Key",
        message_template="Nova Poshta rejected the API key: {api_message}",
        remediation="Set NOVA_POSHTA_API_KEY to a valid key from your Nova Poshta business account.",
    ),
    "E-5002": ErrorCode(
        code="E-5002",
        category=ErrorCategory.AUTH,
        title="API Key Required",
        message_template="This operation requires an API key: {api_message}",
        remediation="Set NOVA_POSHTA_API_KEY and restart the server.",
    ),
}


def get_error(code: str) -> ErrorCode | None:
    """Get error definition by code.

    Args:
        code: Error code in E-XXXX format.

    Returns:
        ErrorCode if found, None otherwise.
    """
    return ERROR_REGISTRY.get(code)


def get_errors_by_category(category: ErrorCategory) -> list[ErrorCode]:
    """Get all errors in a category.

    Args:
        category: Category to filter by.

    Returns:
        List of ErrorCode definitions in that category.
    """
    return [e for e in ERROR_REGISTRY.values() if e.category == category]
