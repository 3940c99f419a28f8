"""
PaginateUseCase - Decides whether another result page exists and, if so,
builds its URL from the previous one.

A next page is pursued only when the page shows BOTH a "next" control and
an offset token. Either alone is treated as the end of the results.
"""

import logging
import re
from dataclasses import dataclass
from typing import Optional, Sequence

from ..domain.entities.page import PageRequest, PaginationSignals, ResultPage
from ..domain.entities.query_defaults import NEXT_ACTION_FIELDS, OFFSET_FIELD
from ..domain.interfaces.i_extraction_observer import (
    NULL_OBSERVER,
    IExtractionObserver,
)
from ..domain.interfaces.i_result_extractor import IResultExtractor
from .extract_results import select_strategy

logger = logging.getLogger(__name__)

# The offset may be negative: that is what the begin_at mapping produces.
OFFSET_PARAM = re.compile(r"([?&]" + re.escape(OFFSET_FIELD) + r"=)(-?\d*)(&.*)?$")


def next_page_url(previous_url: str, next_offset: str) -> str:
    """Previous URL with its offset replaced (or appended) and the next action on."""
    url, replaced = OFFSET_PARAM.subn(
        lambda m: m.group(1) + next_offset + (m.group(3) or ""),
        previous_url,
        count=1,
    )
    if not replaced:
        separator = "&" if "?" in url else "?"
        url = f"{url}{separator}{OFFSET_FIELD}={next_offset}"

    if NEXT_ACTION_FIELDS[0] not in url:
        url += "".join(f"&{name}=1" for name in NEXT_ACTION_FIELDS)
    return url


@dataclass
class PaginateRequest:
    page: ResultPage
    previous: PageRequest


class PaginateUseCase:
    def __init__(
        self,
        strategies: Sequence[IResultExtractor],
        observer: IExtractionObserver = NULL_OBSERVER,
    ):
        self.strategies = list(strategies)
        self.observer = observer

    def signals(self, page: ResultPage) -> PaginationSignals:
        strategy = select_strategy(self.strategies, page)
        if strategy is None:
            return PaginationSignals()
        return strategy.pagination_signals(page)

    def execute(self, request: PaginateRequest) -> Optional[PageRequest]:
        signals = self.signals(request.page)
        next_request = None
        if signals.has_more:
            next_request = PageRequest(
                url=next_page_url(request.previous.url, signals.next_offset)
            )
        elif signals.has_next_control or signals.next_offset:
            logger.info(
                f"[Paginate] Incomplete pagination signals on {request.previous.url} "
                f"(next_control={signals.has_next_control}, "
                f"offset={signals.next_offset!r}) → stopping"
            )

        self.observer.pagination_decided(
            request.previous.url, next_request.url if next_request else None
        )
        return next_request
