"""Test helpers for the Nova Poshta client and MCP tools."""

from tests.helpers.fake_transport import FakeTransport, fail, ok

__all__ = ["FakeTransport", "fail", "ok"]
