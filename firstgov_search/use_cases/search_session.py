"""
SearchSession - Drives one query across result pages.

Each retrieve_some() call fetches exactly one page, appends the hits it
finds to the session's results and queues the next page, if any. The
session ends (state DONE) on the first failed fetch or the first page
without a usable "next" signal; after that every call returns 0 and
nothing more is fetched.
"""

import logging
from typing import AsyncIterator, List, Optional

from ..domain.entities.page import PageRequest, SessionState
from ..domain.entities.search_record import SearchRecord
from ..domain.interfaces.i_document_parser import IDocumentParser
from ..domain.interfaces.i_page_fetcher import FetchResult, IPageFetcher
from .extract_results import ExtractResultsUseCase
from .paginate import PaginateRequest, PaginateUseCase

logger = logging.getLogger(__name__)


class SearchSession:
    def __init__(
        self,
        first_request: PageRequest,
        fetcher: IPageFetcher,
        parser: IDocumentParser,
        extractor: ExtractResultsUseCase,
        paginator: PaginateUseCase,
    ):
        self.fetcher = fetcher
        self.parser = parser
        self.extractor = extractor
        self.paginator = paginator

        self._next_request: Optional[PageRequest] = first_request
        self._state = SessionState.MORE_PAGES
        self._pages_fetched = 0
        self._approximate_result_count: Optional[int] = None
        self._results: List[SearchRecord] = []
        self._cursor = 0
        self.last_fetch: Optional[FetchResult] = None

    # ── Read-only state ───────────────────────────────────────────────────

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def is_done(self) -> bool:
        return self._state == SessionState.DONE

    @property
    def pages_fetched(self) -> int:
        return self._pages_fetched

    @property
    def next_request(self) -> Optional[PageRequest]:
        return self._next_request

    @property
    def approximate_result_count(self) -> Optional[int]:
        return self._approximate_result_count

    @property
    def records(self) -> List[SearchRecord]:
        return list(self._results)

    # ── Retrieval ─────────────────────────────────────────────────────────

    def _finish(self) -> None:
        self._state = SessionState.DONE
        self._next_request = None

    async def retrieve_some(self) -> int:
        """Fetches one page. Returns the number of records it added."""
        if self._state == SessionState.DONE or self._next_request is None:
            self._finish()
            return 0

        request = self._next_request
        if self._pages_fetched > 0:
            await self.fetcher.delay()

        logger.info(f"[Session] Requesting page {self._pages_fetched + 1}: {request.url}")
        fetch = await self.fetcher.fetch(request.url)
        self.last_fetch = fetch
        self._pages_fetched += 1

        if not fetch.success:
            logger.warning(
                f"[Session] Fetch failed ({fetch.error}) for {request.url} → session done"
            )
            self._finish()
            return 0

        page = self.parser.parse(request.url, fetch.body)

        extraction = self.extractor.execute(page)
        if (
            self._approximate_result_count is None
            and extraction.approximate_count is not None
        ):
            self._approximate_result_count = extraction.approximate_count
        self._results.extend(extraction.records)

        next_request = self.paginator.execute(
            PaginateRequest(page=page, previous=request)
        )
        if next_request is None:
            self._finish()
        else:
            self._next_request = next_request

        logger.info(
            f"[Session] Page {self._pages_fetched} → {len(extraction.records)} hits | "
            f"total={len(self._results)} | state={self._state.value}"
        )
        return len(extraction.records)

    async def next_result(self) -> Optional[SearchRecord]:
        """Next record in encounter order, fetching pages as needed; None at the end."""
        while self._cursor >= len(self._results):
            if self.is_done:
                return None
            await self.retrieve_some()
        record = self._results[self._cursor]
        self._cursor += 1
        return record

    async def results(self, limit: Optional[int] = None) -> List[SearchRecord]:
        """Retrieves until exhausted (or until `limit` records) and returns them."""
        while not self.is_done and (limit is None or len(self._results) < limit):
            await self.retrieve_some()
        if limit is None:
            return list(self._results)
        return self._results[:limit]

    async def __aiter__(self) -> AsyncIterator[SearchRecord]:
        while True:
            record = await self.next_result()
            if record is None:
                return
            yield record
