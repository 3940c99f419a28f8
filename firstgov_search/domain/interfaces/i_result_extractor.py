"""
IResultExtractor - Port: one strategy for a known result-page layout.

Each FirstGov markup generation gets its own implementation. The
strategy that recognizes a page is asked for its records and for the
signals the pagination controller needs.
"""

from abc import ABC, abstractmethod

from ..entities.page import PageExtraction, PaginationSignals, ResultPage


class IResultExtractor(ABC):
    layout_name: str = "unknown"

    @abstractmethod
    def recognizes(self, page: ResultPage) -> bool:
        """True if the page is in this strategy's markup shape."""
        pass

    @abstractmethod
    def extract(self, page: ResultPage) -> PageExtraction:
        """
        Returns the records found on the page (possibly none) and the
        approximate total-result count when the page states one.
        Unrecognized fragments are skipped, never raised.
        """
        pass

    @abstractmethod
    def pagination_signals(self, page: ResultPage) -> PaginationSignals:
        """Reports the "next" control and the next-offset token, if present."""
        pass
