"""
SearchRecord - One hit extracted from a FirstGov result page.
Immutable once created; appended to the session output in encounter order.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class SearchRecord:
    url: str
    title: str
    description: Optional[str] = None  # absent in "brief" format
    score: Optional[int] = None  # relevance 0-100
    size: Optional[int] = None  # bytes
    change_date: Optional[str] = None  # as printed by the site, e.g. "2/14/2001"

    @property
    def is_brief(self) -> bool:
        return self.description is None
