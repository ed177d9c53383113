"""Tests for secret redaction utility."""

from novaposhta.utils.redaction import mask_api_key, redact_for_logging, sanitize_error_message


class TestRedactForLogging:

    def test_redacts_api_key_in_envelope(self):
        data = {"apiKey": "secret123", "modelName": "Address", "methodProperties": {"Page": 1}}
        result = redact_for_logging(data)
        assert result["apiKey"] == "***REDACTED***"
        assert result["modelName"] == "Address"
        assert result["methodProperties"] == {"Page": 1}

    def test_does_not_mutate_input(self):
        data = {"apiKey": "secret123"}
        redact_for_logging(data)
        assert data == {"apiKey": "secret123"}

    def test_handles_nested_dict(self):
        data = {"outer": {"access_token": "tok123", "name": "Store"}}
        result = redact_for_logging(data)
        assert result["outer"]["access_token"] == "***REDACTED***"
        assert result["outer"]["name"] == "Store"

    def test_handles_list_of_dicts(self):
        data = {"Documents": [{"DocumentNumber": "20450000000001", "password": "x"}]}
        result = redact_for_logging(data)
        assert result["Documents"][0]["password"] == "***REDACTED***"
        assert result["Documents"][0]["DocumentNumber"] == "20450000000001"

    def test_container_key_redacted_whole(self):
        result = redact_for_logging({"headers": {"Accept": "application/json"}})
        assert result["headers"] == "***REDACTED***"

    def test_custom_sensitive_keys(self):
        data = {"Phone": "380501234567", "name": "test"}
        result = redact_for_logging(data, sensitive_patterns=frozenset({"phone"}))
        assert result["Phone"] == "***REDACTED***"
        assert result["name"] == "test"

    def test_empty_dict(self):
        assert redact_for_logging({}) == {}


class TestSanitizeErrorMessage:

    def test_redacts_json_style_key(self):
        msg = 'Request failed: {"apiKey": "abcdef123456", "modelName": "Address"}'
        result = sanitize_error_message(msg)
        assert "abcdef123456" not in result
        assert "***REDACTED***" in result

    def test_redacts_query_style_key(self):
        result = sanitize_error_message("https://host/?api_key=abcdef123456 failed")
        assert "abcdef123456" not in result

    def test_truncates(self):
        result = sanitize_error_message("x" * 100, max_length=10)
        assert result == "xxxxxxx..."

    def test_none_passes_through(self):
        assert sanitize_error_message(None) is None


class TestMaskApiKey:

    def test_shows_last_four(self):
        assert mask_api_key("abcdef123456") == "***3456"

    def test_short_key_fully_masked(self):
        assert mask_api_key("abc") == "***"
