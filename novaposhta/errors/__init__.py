"""Error handling framework for the Nova Poshta client.

This package provides:
- Error code registry with E-XXXX format codes
- Nova Poshta message translation to friendly messages
- Error types and formatting utilities

Error categories:
- E-2xxx: Validation errors
- E-3xxx: Nova Poshta API errors
- E-4xxx: System/transport errors
- E-5xxx: Authentication errors
"""

from novaposhta.errors.formatter import (
    NovaPoshtaError,
    TransportError,
    format_error,
    format_response_errors,
)
from novaposhta.errors.registry import (
    ERROR_REGISTRY,
    ErrorCategory,
    ErrorCode,
    get_error,
    get_errors_by_category,
)
from novaposhta.errors.translation import (
    NOVA_POSHTA_MESSAGE_CODES,
    NOVA_POSHTA_MESSAGE_PATTERNS,
    error_from_api_response,
    translate_api_error,
    translate_message_code,
)

__all__ = [
    # Registry
    "ErrorCode",
    "ErrorCategory",
    "ERROR_REGISTRY",
    "get_error",
    "get_errors_by_category",
    # Translation
    "translate_api_error",
    "error_from_api_response",
    "translate_message_code",
    "NOVA_POSHTA_MESSAGE_PATTERNS",
    "NOVA_POSHTA_MESSAGE_CODES",
    # Formatter
    "NovaPoshtaError",
    "TransportError",
    "format_error",
    "format_response_errors",
]
