"""Tests for the novaposhta-mcp CLI."""

import pytest
from typer.testing import CliRunner

from novaposhta import __version__
from novaposhta import cli
from novaposhta.cli import app
from novaposhta.errors import TransportError
from tests.helpers import FakeTransport, ok

runner = CliRunner()


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    for name in ("API_KEY", "BASE_URL", "LOG_LEVEL", "TIMEOUT", "CONFIG"):
        monkeypatch.delenv(f"NOVA_POSHTA_{name}", raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def cli_transport(monkeypatch):
    """Replace HttpxTransport in the CLI with a FakeTransport."""
    fake = FakeTransport()

    class _Transport:
        def __init__(self, timeout=None):
            self.timeout = timeout

        async def __aenter__(self):
            return fake

        async def __aexit__(self, exc_type, exc_val, exc_tb):
            return None

    monkeypatch.setattr(cli, "HttpxTransport", _Transport)
    return fake


class TestVersion:
    def test_prints_version(self):
        result = runner.invoke(app, ["version"])

        assert result.exit_code == 0
        assert __version__ in result.output


class TestConfigShow:
    """Test config show output."""

    def test_masks_api_key(self, tmp_path):
        """Test only the last four characters of the key are shown."""
        path = tmp_path / "novaposhta.yaml"
        path.write_text("api_key: abcdef123456\ntimeout: 10\n")

        result = runner.invoke(app, ["--config", str(path), "config", "show"])

        assert result.exit_code == 0
        assert "***3456" in result.output
        assert "abcdef123456" not in result.output
        assert "10s" in result.output

    def test_key_not_set(self):
        result = runner.invoke(app, ["config", "show"])

        assert result.exit_code == 0
        assert "not set" in result.output

    def test_bad_config_exits_1(self, tmp_path):
        path = tmp_path / "novaposhta.yaml"
        path.write_text("log_level: verbose\n")

        result = runner.invoke(app, ["config", "show"])

        assert result.exit_code == 1


class TestTrack:
    """Test the track command."""

    def test_prints_table_and_stats(self, cli_transport):
        cli_transport.queue(
            ok(
                {"Number": "20450000000001", "Status": "Отримано", "StatusCode": "9"},
                {"Number": "20450000000002", "Status": "Прибув", "StatusCode": "8"},
            )
        )

        result = runner.invoke(app, ["track", "20450000000001", "20450000000002"])

        assert result.exit_code == 0
        assert "20450000000001" in result.output
        assert "Tracked 2: 1 delivered, 0 in transit, 1 at warehouse" in result.output
        documents = cli_transport.last_properties["Documents"]
        assert [d["DocumentNumber"] for d in documents] == ["20450000000001", "20450000000002"]

    def test_missing_number_exits_1(self, cli_transport):
        cli_transport.queue(ok({"Number": "20450000000001", "StatusCode": "6"}))

        result = runner.invoke(app, ["track", "20450000000001", "20450000000009"])

        assert result.exit_code == 1
        assert "not found" in result.output
        assert "1 in transit" in result.output

    def test_transport_error_exits_1(self, cli_transport):
        cli_transport.queue(TransportError.from_code("E-4001", url="https://x", reason="refused"))

        result = runner.invoke(app, ["track", "20450000000001"])

        assert result.exit_code == 1
