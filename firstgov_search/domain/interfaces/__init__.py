from .i_page_fetcher import IPageFetcher, FetchResult
from .i_document_parser import IDocumentParser
from .i_result_extractor import IResultExtractor
from .i_extraction_observer import IExtractionObserver, NULL_OBSERVER

__all__ = [
    "IPageFetcher",
    "FetchResult",
    "IDocumentParser",
    "IResultExtractor",
    "IExtractionObserver",
    "NULL_OBSERVER",
]
