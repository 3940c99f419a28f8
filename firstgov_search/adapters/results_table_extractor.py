"""
ResultsTableExtractor - Implements IResultExtractor for the later
FirstGov markup, where hits live in a table that follows a
<!-- Begin Results Table --> comment.

Each hit spans three non-blank cells: rank, linked title, description.
Links go through a redirect endpoint carrying the real target in `url=`.
"""

import logging
import re
from typing import List, Optional
from urllib.parse import parse_qs, urljoin, urlsplit

from bs4 import BeautifulSoup, Comment, Tag

from ..domain.entities.page import PageExtraction, PaginationSignals, ResultPage
from ..domain.entities.query_defaults import OFFSET_FIELD, PER_PAGE_FIELD
from ..domain.entities.search_record import SearchRecord
from ..domain.interfaces.i_result_extractor import IResultExtractor
from .bs4_document_parser import collapse_whitespace, is_blank

logger = logging.getLogger(__name__)

RESULTS_MARKER = "begin results table"

COUNT_MORE_THAN = re.compile(
    r"Your search\b.*?\breturned more than (\d[\d,]*) relevant results?", re.I | re.S
)
COUNT_EXACT = re.compile(r"Your search\b.*?\breturned (\d[\d,]*) results?", re.I | re.S)
COUNT_NONE = re.compile(r"Your search\b.*?\bdid not return any documents", re.I | re.S)

NEXT_CONTROL_NAME = re.compile(r"^act\.next(\.[xy])?$", re.I)

CELLS_PER_HIT = 3


def parse_count_phrase(text: str) -> Optional[int]:
    """
    Maps the site's total-count sentence to a number.
    "more than N" becomes N + 1: the real total is unknown but above N.
    """
    m = COUNT_MORE_THAN.search(text)
    if m:
        return int(m.group(1).replace(",", "")) + 1
    m = COUNT_EXACT.search(text)
    if m:
        return int(m.group(1).replace(",", ""))
    if COUNT_NONE.search(text):
        return 0
    return None


def unwrap_redirect(href: str) -> str:
    """Returns the `url=` target of a redirect link, or the href unchanged."""
    targets = parse_qs(urlsplit(href).query).get("url")
    if targets and targets[0]:
        return targets[0]
    return href


def _is_next_control(tag: Tag) -> bool:
    if tag.name != "input":
        return False
    name = tag.get("name") or ""
    if not NEXT_CONTROL_NAME.match(name):
        return False
    # image button, or one half of its x/y coordinate pair
    return (tag.get("type") or "").lower() == "image" or name.lower() != "act.next"


class ResultsTableExtractor(IResultExtractor):
    layout_name = "Table"

    def recognizes(self, page: ResultPage) -> bool:
        soup = page.document
        if soup is None:
            return False
        if self._results_marker(soup) is not None:
            return True
        return parse_count_phrase(soup.get_text(" ")) is not None

    def extract(self, page: ResultPage) -> PageExtraction:
        soup = page.document
        if soup is None:
            return PageExtraction()
        count = self._approximate_count(soup)
        records = self._records(soup, page.url)
        logger.debug(
            f"[Table] {page.url} → {len(records)} hits | approximate_count={count}"
        )
        return PageExtraction(records=records, approximate_count=count)

    def pagination_signals(self, page: ResultPage) -> PaginationSignals:
        soup = page.document
        if soup is None:
            return PaginationSignals()
        return PaginationSignals(
            has_next_control=soup.find(_is_next_control) is not None,
            next_offset=self._next_offset(soup),
        )

    # ── Count ───────────────────────────────────────────────────────────────

    def _approximate_count(self, soup: BeautifulSoup) -> Optional[int]:
        for cell in soup.find_all(["td", "th"]):
            count = parse_count_phrase(collapse_whitespace(cell.get_text(" ")))
            if count is not None:
                return count
        # Layout drift: the sentence is no longer inside a table cell
        return parse_count_phrase(collapse_whitespace(soup.get_text(" ")))

    # ── Records ─────────────────────────────────────────────────────────────

    def _results_marker(self, soup: BeautifulSoup) -> Optional[Comment]:
        return soup.find(
            string=lambda s: isinstance(s, Comment) and RESULTS_MARKER in s.lower()
        )

    def _records(self, soup: BeautifulSoup, page_url: str) -> List[SearchRecord]:
        marker = self._results_marker(soup)
        if marker is None:
            return []
        table = self._results_table(marker)
        if table is None:
            return []

        records: List[SearchRecord] = []
        position = 0
        hit = {"count": None, "url": None, "title": None}

        for cell in table.find_all("td"):
            if cell.find("td") is not None:
                continue  # layout cell wrapping a nested table
            if is_blank(cell.get_text()):
                continue

            slot = position % CELLS_PER_HIT
            position += 1

            if slot == 0:
                hit["count"] = collapse_whitespace(cell.get_text(" "))
            elif slot == 1:
                anchor = cell.find("a", href=True)
                if anchor is not None:
                    hit["url"] = self._resolve(anchor["href"], page_url)
                    hit["title"] = collapse_whitespace(anchor.get_text(" "))
            else:
                if hit["url"]:
                    records.append(
                        SearchRecord(
                            url=hit["url"],
                            title=hit["title"] or hit["url"],
                            description=collapse_whitespace(cell.get_text(" ")),
                        )
                    )
                else:
                    logger.debug(f"[Table] Skipping hit {hit['count']!r} without a link")
                hit = {"count": None, "url": None, "title": None}

        return records

    def _results_table(self, marker: Comment) -> Optional[Tag]:
        """The table right after the marker; whitespace and other comments are skipped."""
        for sibling in marker.next_siblings:
            if isinstance(sibling, Tag):
                return sibling if sibling.name == "table" else None
            if isinstance(sibling, Comment) or is_blank(sibling):
                continue
            return None
        return None

    def _resolve(self, href: str, page_url: str) -> str:
        target = unwrap_redirect(href.strip())
        if target != href.strip():
            return target
        return urljoin(page_url, target)

    # ── Pagination ──────────────────────────────────────────────────────────

    def _next_offset(self, soup: BeautifulSoup) -> Optional[str]:
        """Offset from the form that carries both the offset and per-page fields."""
        for form in soup.find_all("form"):
            offset = form.find("input", attrs={"name": OFFSET_FIELD})
            per_page = form.find("input", attrs={"name": PER_PAGE_FIELD})
            if offset is None or per_page is None:
                continue
            value = (offset.get("value") or "").strip()
            if value.isdigit():
                return value
        return None
