"""
ExtractResultsUseCase - Picks the extraction strategy matching a page's
markup and runs it, reporting milestones to the observer.
"""

import logging
from typing import Optional, Sequence

from ..domain.entities.page import PageExtraction, ResultPage
from ..domain.interfaces.i_extraction_observer import (
    NULL_OBSERVER,
    IExtractionObserver,
)
from ..domain.interfaces.i_result_extractor import IResultExtractor

logger = logging.getLogger(__name__)


def select_strategy(
    strategies: Sequence[IResultExtractor], page: ResultPage
) -> Optional[IResultExtractor]:
    """First strategy that recognizes the page, in the order given."""
    for strategy in strategies:
        if strategy.recognizes(page):
            return strategy
    return None


class ExtractResultsUseCase:
    def __init__(
        self,
        strategies: Sequence[IResultExtractor],
        observer: IExtractionObserver = NULL_OBSERVER,
    ):
        self.strategies = list(strategies)
        self.observer = observer

    def execute(self, page: ResultPage) -> PageExtraction:
        strategy = select_strategy(self.strategies, page)
        if strategy is None:
            logger.warning(f"[Extract] Unrecognized result page layout: {page.url}")
            return PageExtraction()

        extraction = strategy.extract(page)
        if extraction.approximate_count is not None:
            self.observer.count_parsed(extraction.approximate_count, strategy.layout_name)
        for record in extraction.records:
            self.observer.record_found(record, strategy.layout_name)
        return extraction
