"""
QueryDefaults - The immutable default option set for a FirstGov query.
Handed to the query builder at construction time; never mutated.
"""

from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Any, Mapping, Optional

DEFAULT_SEARCH_URL = "http://www.firstgov.gov/fedsearch3/index.jsp"

# Name of the hidden field carrying the result offset
OFFSET_FIELD = "fr"
# Results per page (site max = 100)
PER_PAGE_FIELD = "nr"
# Free-text keywords
QUERY_FIELD = "mw0"
# Convenience field mapped onto OFFSET_FIELD, never forwarded
BEGIN_AT_FIELD = "begin_at"
# Framework-level field ignored on merge
BEGIN_HIT_NUMBER_FIELD = "begin_hit_number"
# Prefix of framework-generic options, never forwarded
GENERIC_OPTION_PREFIX = "search_"

NEXT_ACTION_FIELDS = ("act.next.x", "act.next.y")

DEFAULT_PER_PAGE = 20

_FIRSTGOV_OPTIONS = {
    "fr": 0,  # start at match 'fr' +/- 'nr' when act.next.x/.y are set
    "act.search": "Search",  # submit button
    "mt0": "all",  # "all" | "any" | "phrase" | "name" | "urls"
    "ms0": "must",  # "must" | "should" | "mustnot"
    "adv": "1111",
    "nr": DEFAULT_PER_PAGE,
    "de": "detailed",  # "detailed" | "brief"
    "dop": "anytime",  # "within" | "range" | "anytime"
    "pl": "anywhere",  # "geoRegion" | "domain" | "anywhere"
}


def _frozen(options: Mapping[str, Any]) -> Mapping[str, Any]:
    return MappingProxyType(dict(options))


@dataclass(frozen=True)
class QueryDefaults:
    search_url: str = DEFAULT_SEARCH_URL
    options: Mapping[str, Any] = field(
        default_factory=lambda: _frozen(_FIRSTGOV_OPTIONS)
    )

    @property
    def per_page(self) -> int:
        return int(self.options.get(PER_PAGE_FIELD, DEFAULT_PER_PAGE))

    def with_overrides(
        self,
        search_url: Optional[str] = None,
        options: Optional[Mapping[str, Any]] = None,
    ) -> "QueryDefaults":
        """Return a copy with a different endpoint and/or extra default options."""
        merged = dict(self.options)
        merged.update(options or {})
        return replace(
            self,
            search_url=search_url or self.search_url,
            options=_frozen(merged),
        )


FIRSTGOV_DEFAULTS = QueryDefaults()


def is_forwarded_option(key: str) -> bool:
    """True for keys that belong in the request URL."""
    return key != BEGIN_AT_FIELD and not key.startswith(GENERIC_OPTION_PREFIX)
