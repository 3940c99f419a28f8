"""
LoggingExtractionObserver - IExtractionObserver that writes milestones
to the standard logger.
"""

import logging
from typing import Optional

from ..domain.entities.search_record import SearchRecord
from ..domain.interfaces.i_extraction_observer import IExtractionObserver

logger = logging.getLogger(__name__)


class LoggingExtractionObserver(IExtractionObserver):
    def __init__(self, log: Optional[logging.Logger] = None):
        self.log = log or logger

    def record_found(self, record: SearchRecord, layout: str) -> None:
        if record.is_brief:
            self.log.debug(f"[{layout}] Found brief hit → {record.url!r} | title={record.title!r}")
            return
        self.log.debug(
            f"[{layout}] Found hit → {record.url!r} | title={record.title!r} | "
            f"score={record.score}"
        )

    def count_parsed(self, count: int, layout: str) -> None:
        self.log.info(f"[{layout}] Approximate result count: {count}")

    def pagination_decided(self, previous_url: str, next_url: Optional[str]) -> None:
        if next_url:
            self.log.info(f"[Paginate] Next page → {next_url}")
        else:
            self.log.info(f"[Paginate] No further pages after {previous_url}")
