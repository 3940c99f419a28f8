"""
Dependency Injection Container.
Wires the adapters to their ports and hands out one SearchSession per query.
This is the ONLY place that knows about concrete implementations.
"""

from typing import Any, Mapping, Optional

from .config import Config
from ..adapters.bs4_document_parser import Bs4DocumentParser
from ..adapters.httpx_page_fetcher import HttpxPageFetcher
from ..adapters.legacy_line_extractor import LegacyLineExtractor
from ..adapters.logging_observer import LoggingExtractionObserver
from ..adapters.results_table_extractor import ResultsTableExtractor
from ..domain.entities.query_defaults import FIRSTGOV_DEFAULTS, PER_PAGE_FIELD
from ..use_cases.build_query import BuildQueryRequest, BuildQueryUseCase
from ..use_cases.extract_results import ExtractResultsUseCase
from ..use_cases.paginate import PaginateUseCase
from ..use_cases.search_session import SearchSession


class Container:
    """
    Composes the full object graph.
    Swap any adapter by changing a single line here.
    """

    def __init__(self, config: Config):
        self.config = config

        # ── Adapters (Ports & Adapters layer) ─────────────────────────────
        self.fetcher = HttpxPageFetcher(
            timeout=config.timeout_seconds,
            delay_seconds=config.request_delay_seconds,
            user_agent=config.user_agent,
            contact_email=config.contact_email,
        )
        self.parser = Bs4DocumentParser()
        self.observer = LoggingExtractionObserver()
        # Newest layout first; the legacy line format is the fallback.
        self.strategies = [ResultsTableExtractor(), LegacyLineExtractor()]

        # ── Use Cases (Application layer) ──────────────────────────────────
        self.query_defaults = FIRSTGOV_DEFAULTS.with_overrides(
            search_url=config.search_url,
            options={PER_PAGE_FIELD: config.results_per_page},
        )
        self.build_query_use_case = BuildQueryUseCase(self.query_defaults)
        self.extract_use_case = ExtractResultsUseCase(self.strategies, self.observer)
        self.paginate_use_case = PaginateUseCase(self.strategies, self.observer)

    def new_session(
        self, query: str, options: Optional[Mapping[str, Any]] = None
    ) -> SearchSession:
        """A fresh session per query; nothing is shared between sessions but adapters."""
        first_request = self.build_query_use_case.execute(
            BuildQueryRequest(query=query, options=options)
        )
        return SearchSession(
            first_request=first_request,
            fetcher=self.fetcher,
            parser=self.parser,
            extractor=self.extract_use_case,
            paginator=self.paginate_use_case,
        )
