"""
LegacyLineExtractor - Implements IResultExtractor for the original
(2001) FirstGov result markup.

That markup is one table row per line, so the page is read line by line
through a small state machine driven by regular expressions:

  HEADER        hidden "fr" input (next offset), "Returned: N matches" banner
  OFFSET_VALUE  the hidden input was split and its value is on a later line
  MATCHES       a URL + title row opens a hit; the "Next" image button
  URL           the score cell
  SCORE         the description cell
  DESCRIPTION   the size/date cell closes the hit

A hit is held in a local accumulator until its size/date cell appears.
If a new URL row arrives first, or the page ends, the partial hit is
flushed as is (brief format has neither score nor description).
"""

import logging
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from ..domain.entities.page import PageExtraction, PaginationSignals, ResultPage
from ..domain.entities.search_record import SearchRecord
from ..domain.interfaces.i_result_extractor import IResultExtractor
from .bs4_document_parser import is_blank, strip_tags

logger = logging.getLogger(__name__)

HIDDEN_OFFSET = re.compile(r'<input type="hidden" name="fr"(.*)', re.I)
OFFSET_VALUE = re.compile(r'value="(\d*)">', re.I)
RETURNED_BANNER = re.compile(r"<td><b>Returned:</b>\s*(\d[\d,]*) matches", re.I)
INPUT_TAG = re.compile(r"<input\b[^>]*>", re.I)
NEXT_CONTROL_NAME = re.compile(r'\bname="act\.next(\.[xy])?"', re.I)
IMAGE_INPUT = re.compile(r'\btype="?image\b', re.I)
URL_TITLE_ROW = re.compile(
    r'<TD nowrap><a href="([^"]+)">(.*)</A></TD></TR>\s*$', re.I
)
SCORE_CELL = re.compile(
    r'<TR><TD align="center" colspan="2"><FONT size="-1">(\d+)%\s*</FONT></TD>', re.I
)
DESCRIPTION_CELL = re.compile(r'<TR><TD colspan="3">(.*)</TD></TR>', re.I)
SIZE_DATE_CELL = re.compile(
    r'<TR><TD colspan="2"></TD><TD nowrap><FONT size="-1" color="#888888">'
    r"(\d+) bytes, (\d+/\d+/\d+)</FONT></TD></TR>",
    re.I,
)


def _is_next_control(line: str) -> bool:
    """The "Next" image button, or one half of its x/y coordinate pair."""
    for tag in INPUT_TAG.findall(line):
        m = NEXT_CONTROL_NAME.search(tag)
        if m and (m.group(1) or IMAGE_INPUT.search(tag)):
            return True
    return False


class _State(str, Enum):
    HEADER = "header"
    OFFSET_VALUE = "offset_value"
    MATCHES = "matches"
    URL = "url"
    SCORE = "score"
    DESCRIPTION = "description"


@dataclass
class _LineScan:
    records: List[SearchRecord] = field(default_factory=list)
    approximate_count: Optional[int] = None
    has_next_control: bool = False
    next_offset: Optional[str] = None


class LegacyLineExtractor(IResultExtractor):
    layout_name = "Legacy"

    def recognizes(self, page: ResultPage) -> bool:
        return bool(
            RETURNED_BANNER.search(page.html) or HIDDEN_OFFSET.search(page.html)
        )

    def extract(self, page: ResultPage) -> PageExtraction:
        scan = self._scan(page)
        return PageExtraction(
            records=scan.records, approximate_count=scan.approximate_count
        )

    def pagination_signals(self, page: ResultPage) -> PaginationSignals:
        scan = self._scan(page)
        return PaginationSignals(
            has_next_control=scan.has_next_control,
            next_offset=scan.next_offset or None,
        )

    def _scan(self, page: ResultPage) -> _LineScan:
        scan = _LineScan()
        state = _State.HEADER
        hit: Optional[dict] = None

        def flush() -> None:
            nonlocal hit
            if hit is not None:
                scan.records.append(SearchRecord(**hit))
            hit = None

        for line in page.lines:
            if is_blank(line):
                continue

            if state == _State.HEADER:
                m = HIDDEN_OFFSET.search(line)
                if m:
                    value = OFFSET_VALUE.search(m.group(1))
                    if value:
                        scan.next_offset = value.group(1)
                    else:
                        state = _State.OFFSET_VALUE
                    continue
                m = RETURNED_BANNER.search(line)
                if m:
                    scan.approximate_count = int(m.group(1).replace(",", ""))
                    state = _State.MATCHES
                continue

            if state == _State.OFFSET_VALUE:
                m = OFFSET_VALUE.search(line)
                if m:
                    scan.next_offset = m.group(1)
                    state = _State.HEADER
                continue

            m = URL_TITLE_ROW.search(line)
            if m:
                flush()
                hit = {"url": m.group(1), "title": strip_tags(m.group(2))}
                state = _State.URL
                continue

            if _is_next_control(line):
                scan.has_next_control = True
                continue

            if state == _State.URL:
                m = SCORE_CELL.search(line)
                if m:
                    hit["score"] = int(m.group(1))
                    state = _State.SCORE
            elif state == _State.SCORE:
                m = DESCRIPTION_CELL.search(line)
                if m:
                    hit["description"] = strip_tags(m.group(1))
                    state = _State.DESCRIPTION
            elif state == _State.DESCRIPTION:
                m = SIZE_DATE_CELL.search(line)
                if m:
                    hit["size"] = int(m.group(1))
                    hit["change_date"] = m.group(2)
                    flush()
                    state = _State.MATCHES

        flush()
        logger.debug(
            f"[Legacy] Scanned {page.url} → {len(scan.records)} hits | "
            f"next={scan.has_next_control} | fr={scan.next_offset!r}"
        )
        return scan
