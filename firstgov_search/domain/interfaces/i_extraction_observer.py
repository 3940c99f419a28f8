"""
IExtractionObserver - Optional hook called at extraction milestones.
The base class does nothing; correctness never depends on an observer.
"""

from typing import Optional

from ..entities.search_record import SearchRecord


class IExtractionObserver:
    def record_found(self, record: SearchRecord, layout: str) -> None:
        pass

    def count_parsed(self, count: int, layout: str) -> None:
        pass

    def pagination_decided(self, previous_url: str, next_url: Optional[str]) -> None:
        pass


NULL_OBSERVER = IExtractionObserver()
