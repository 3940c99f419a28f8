"""
Page-level value objects: the request for one result page, the parsed
page itself, and what extraction and pagination learn from it.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List, Optional

from .search_record import SearchRecord


class SessionState(str, Enum):
    MORE_PAGES = "more_pages"
    DONE = "done"


@dataclass(frozen=True)
class PageRequest:
    """Absolute URL of one result page (endpoint + ordered query string)."""

    url: str

    def __str__(self) -> str:
        return self.url


@dataclass
class ResultPage:
    """
    A fetched page ready for extraction.
    `document` is the navigable tree built by the document parser; the domain
    does not care which library produced it.
    """

    url: str
    html: str
    document: Any = None

    @property
    def lines(self) -> List[str]:
        return self.html.splitlines()


@dataclass(frozen=True)
class PaginationSignals:
    has_next_control: bool = False
    next_offset: Optional[str] = None

    @property
    def has_more(self) -> bool:
        # Both signals are required; either one alone means we are done.
        return self.has_next_control and bool(self.next_offset)


@dataclass
class PageExtraction:
    records: List[SearchRecord] = field(default_factory=list)
    approximate_count: Optional[int] = None
