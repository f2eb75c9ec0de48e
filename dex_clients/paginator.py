"""Cursor pagination over subgraph entities ordered by creation timestamp."""
from __future__ import annotations

import enum
import logging
from typing import Any, Awaitable, Callable, Dict, List, Optional

from config import PAGE_SIZE
from dex_clients.errors import ResponseShapeError

FetchPage = Callable[[int], Awaitable[List[Dict[str, Any]]]]
OnPage = Callable[[List[Dict[str, Any]]], None]


class PaginationState(enum.Enum):
    FETCHING = "fetching"
    ACCUMULATING = "accumulating"
    DONE = "done"
    FAILED = "failed"


class PairPaginator:
    """Walk every pair with ``createdAtTimestamp`` strictly above the cursor.

    Each call to :meth:`step` fetches one page. A full page moves the cursor
    to the last record's timestamp and leaves the paginator in ``FETCHING``;
    a short page ends the walk in ``DONE``. Any error leaves it in ``FAILED``.
    """

    def __init__(self, fetch_page: FetchPage, page_size: int = PAGE_SIZE, cursor: int = 0) -> None:
        self.fetch_page = fetch_page
        self.page_size = page_size
        self.cursor = cursor
        self.state = PaginationState.FETCHING
        self.pairs: List[Dict[str, Any]] = []
        self.pages_fetched = 0
        self.logger = logging.getLogger(self.__class__.__name__)

    async def step(self, on_page: Optional[OnPage] = None) -> List[Dict[str, Any]]:
        if self.state is not PaginationState.FETCHING:
            raise RuntimeError(f"Cannot fetch a page while {self.state.value}")

        try:
            page = await self.fetch_page(self.cursor)
            self.state = PaginationState.ACCUMULATING
            self._accumulate(page, on_page)
        except Exception:
            self.state = PaginationState.FAILED
            raise
        return page

    def _accumulate(self, page: List[Dict[str, Any]], on_page: Optional[OnPage]) -> None:
        self.pages_fetched += 1
        self.pairs.extend(page)
        self.logger.debug(
            "Page %d: %d pairs after cursor %d", self.pages_fetched, len(page), self.cursor
        )
        if on_page is not None:
            on_page(page)

        if len(page) < self.page_size:
            self.state = PaginationState.DONE
        else:
            cursor = _created_at(page[-1])
            if cursor <= self.cursor:
                raise ResponseShapeError(
                    f"Cursor did not advance past {self.cursor} (last createdAtTimestamp {cursor})"
                )
            self.cursor = cursor
            self.state = PaginationState.FETCHING

    async def run(self, on_page: Optional[OnPage] = None) -> List[Dict[str, Any]]:
        """Step until the source is exhausted and return every raw pair."""
        while self.state is PaginationState.FETCHING:
            await self.step(on_page)
        self.logger.info("Fetched %d pairs in %d page(s)", len(self.pairs), self.pages_fetched)
        return self.pairs


def _created_at(record: Dict[str, Any]) -> int:
    try:
        return int(record["createdAtTimestamp"])
    except (KeyError, TypeError, ValueError) as exc:
        raise ResponseShapeError(f"Invalid createdAtTimestamp in pair {record!r}") from exc
