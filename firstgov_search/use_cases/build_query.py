"""
BuildQueryUseCase - Turns a free-text query plus caller options into the
URL of the first result page. Pure data transformation, no I/O.

Caller options override the defaults key by key. `begin_at` (1-based) is
a convenience: it is translated into the site's own offset arithmetic
(`fr = begin_at - 1 - nr` with the "next" action forced on) and is never
sent to the site itself.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional
from urllib.parse import quote_plus

from ..domain.entities.page import PageRequest
from ..domain.entities.query_defaults import (
    BEGIN_AT_FIELD,
    BEGIN_HIT_NUMBER_FIELD,
    FIRSTGOV_DEFAULTS,
    NEXT_ACTION_FIELDS,
    OFFSET_FIELD,
    PER_PAGE_FIELD,
    QUERY_FIELD,
    QueryDefaults,
    is_forwarded_option,
)

logger = logging.getLogger(__name__)


def escape_query(text: str) -> str:
    """URL-escapes free text for use as a query value ("uncle sam" → "uncle+sam")."""
    return quote_plus(text)


def _as_int(value: Any, fallback: int) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return fallback


@dataclass
class BuildQueryRequest:
    query: str
    options: Optional[Mapping[str, Any]] = field(default=None)


class BuildQueryUseCase:
    def __init__(self, defaults: QueryDefaults = FIRSTGOV_DEFAULTS):
        self.defaults = defaults

    def merged_options(self, request: BuildQueryRequest) -> Dict[str, Any]:
        options: Dict[str, Any] = dict(self.defaults.options)
        options[QUERY_FIELD] = escape_query(request.query)
        for key, value in (request.options or {}).items():
            if key == BEGIN_HIT_NUMBER_FIELD:
                continue
            options[key] = value

        if options.get(BEGIN_AT_FIELD) is not None:
            begin_at = max(_as_int(options[BEGIN_AT_FIELD], 1), 1)
            per_page = _as_int(options.get(PER_PAGE_FIELD), self.defaults.per_page)
            options[OFFSET_FIELD] = begin_at - 1 - per_page
            for name in NEXT_ACTION_FIELDS:
                options[name] = 1

        return options

    def execute(self, request: BuildQueryRequest) -> PageRequest:
        options = self.merged_options(request)
        query_string = "&".join(
            f"{key}={'' if options[key] is None else options[key]}"
            for key in sorted(options)
            if is_forwarded_option(key)
        )
        url = f"{self.defaults.search_url}?{query_string}"
        logger.debug(f"[Query] First page for {request.query!r} → {url}")
        return PageRequest(url=url)
