from .search_record import SearchRecord
from .query_defaults import QueryDefaults, FIRSTGOV_DEFAULTS
from .page import (
    PageExtraction,
    PageRequest,
    PaginationSignals,
    ResultPage,
    SessionState,
)

__all__ = [
    "SearchRecord",
    "QueryDefaults",
    "FIRSTGOV_DEFAULTS",
    "PageExtraction",
    "PageRequest",
    "PaginationSignals",
    "ResultPage",
    "SessionState",
]
