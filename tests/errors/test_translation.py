"""Tests for Nova Poshta message translation."""

import pytest

from novaposhta.errors import error_from_api_response, translate_api_error, translate_message_code


class TestTranslateApiError:
    """Test message pattern matching."""

    @pytest.mark.parametrize(
        "message,code",
        [
            ("API key is not valid", "E-5001"),
            ("API key expired", "E-5001"),
            ("API key is required", "E-5002"),
            ("Document number is not correct", "E-2001"),
            ("Document not found", "E-3002"),
            ("To many requests", "E-3003"),
        ],
    )
    def test_known_messages(self, message, code):
        """Test known Nova Poshta messages map to registry codes."""
        assert translate_api_error(message)[0] == code

    def test_api_message_substituted(self):
        code, message, remediation = translate_api_error("API key expired")

        assert message == "Nova Poshta rejected the API key: API key expired"
        assert "NOVA_POSHTA_API_KEY" in remediation

    def test_unknown_message_falls_back_to_e3001(self):
        code, message, _ = translate_api_error("CitySender is empty")

        assert code == "E-3001"
        assert message == "Nova Poshta API rejected the request: CitySender is empty"

    def test_empty_message(self):
        code, message, _ = translate_api_error(None)

        assert code == "E-3001"
        assert message.endswith("Unknown error")


class TestTranslateMessageCode:
    def test_known_code(self):
        assert translate_message_code("20000101582") == "E-5002"

    def test_unknown_or_empty(self):
        assert translate_message_code("1") is None
        assert translate_message_code(None) is None


class TestErrorFromApiResponse:
    """Test building a coded error from a failed response."""

    def test_message_code_takes_precedence(self):
        error = error_from_api_response(["Document not found"], ["20000101582"], "fallback")

        assert error.code == "E-5002"
        assert "Document not found" in error.message

    def test_falls_back_to_message_patterns(self):
        error = error_from_api_response(["API key expired"], ["1"], "fallback")

        assert error.code == "E-5001"

    def test_empty_response_uses_fallback_text(self):
        error = error_from_api_response([], [], "Failed to track document")

        assert error.code == "E-3001"
        assert "Failed to track document" in error.message
