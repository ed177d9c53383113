"""Tests for fetch-all pagination."""

import pytest

from novaposhta.client import ResponseEnvelope, failed_response, fetch_all_pages
from novaposhta.errors import TransportError


class PagedSource:
    """Serves fixed pages and records which pages were requested."""

    def __init__(self, pages):
        self.pages = pages
        self.calls = []

    async def __call__(self, page, limit):
        self.calls.append((page, limit))
        item = self.pages[page - 1] if page <= len(self.pages) else []
        if isinstance(item, Exception):
            raise item
        if isinstance(item, ResponseEnvelope):
            return item
        return ResponseEnvelope(success=True, data=item)


class TestFetchAllPages:
    """Test fetch_all_pages walk and stop conditions."""

    @pytest.mark.asyncio
    async def test_stops_after_short_page(self):
        """Test full pages are followed until a short page, then the walk ends."""
        source = PagedSource([[1, 2], [3, 4], [5]])

        result = await fetch_all_pages(source, limit=2)

        assert result.success is True
        assert result.data == [1, 2, 3, 4, 5]
        assert source.calls == [(1, 2), (2, 2), (3, 2)]

    @pytest.mark.asyncio
    async def test_stops_on_empty_page(self):
        """Test an empty page after full pages ends the walk."""
        source = PagedSource([[1, 2], [3, 4]])

        result = await fetch_all_pages(source, limit=2)

        assert result.data == [1, 2, 3, 4]
        assert len(source.calls) == 3

    @pytest.mark.asyncio
    async def test_oversized_page_stops_walk(self):
        """Test a page larger than the limit is kept and ends the walk."""
        source = PagedSource([[1, 2, 3]])

        result = await fetch_all_pages(source, limit=2)

        assert result.data == [1, 2, 3]
        assert len(source.calls) == 1

    @pytest.mark.asyncio
    async def test_failed_page_returns_partial_with_warning(self):
        """Test a failed later page keeps earlier data and reports where it stopped."""
        source = PagedSource([[1, 2], failed_response("Limit exceeded")])

        result = await fetch_all_pages(source, limit=2)

        assert result.success is True
        assert result.data == [1, 2]
        assert result.warnings == ["Pagination stopped at page 2: Limit exceeded"]

    @pytest.mark.asyncio
    async def test_failed_first_page_is_empty_success_with_warning(self):
        """Test a failed first page yields no data and one warning."""
        source = PagedSource([failed_response("API key expired")])

        result = await fetch_all_pages(source, limit=2)

        assert result.success is True
        assert result.data == []
        assert result.warnings == ["Pagination stopped at page 1: API key expired"]

    @pytest.mark.asyncio
    async def test_transport_error_after_first_page(self):
        """Test a transport failure later in the walk is turned into a warning."""
        error = TransportError.from_code("E-4002", url="u", timeout=30)
        source = PagedSource([[1, 2], error])

        result = await fetch_all_pages(source, limit=2)

        assert result.data == [1, 2]
        assert result.warnings[0].startswith("Pagination stopped at page 2:")

    @pytest.mark.asyncio
    async def test_transport_error_on_first_page_propagates(self):
        """Test nothing to return means the transport error is raised."""
        error = TransportError.from_code("E-4001", url="u", reason="down")

        with pytest.raises(TransportError):
            await fetch_all_pages(PagedSource([error]), limit=2)

    @pytest.mark.asyncio
    async def test_page_warnings_are_collected(self):
        """Test warnings from each page are carried into the result."""
        source = PagedSource([ResponseEnvelope(success=True, data=[1], warnings=["w1"])])

        result = await fetch_all_pages(source, limit=5)

        assert result.warnings == ["w1"]

    @pytest.mark.asyncio
    async def test_max_pages_caps_the_walk(self):
        """Test max_pages bounds the number of calls."""
        source = PagedSource([[1], [2], [3], [4]])

        result = await fetch_all_pages(source, limit=1, max_pages=2)

        assert result.data == [1, 2]
        assert len(source.calls) == 2

    @pytest.mark.asyncio
    async def test_non_positive_limit_rejected(self):
        """Test limit must be positive."""
        with pytest.raises(ValueError, match="limit must be positive"):
            await fetch_all_pages(PagedSource([]), limit=0)
