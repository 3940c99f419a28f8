"""
Root conftest.py: shared fixtures and helpers for the entire test suite.

Provides:
- SearchRecord / FetchResult factory helpers
- HTML builders for both FirstGov result layouts (legacy line markup and
  the later "Begin Results Table" markup)
- Mock fetcher fixture and real parser / strategy fixtures
"""

from typing import List, Optional, Sequence
from unittest.mock import AsyncMock

import pytest

from firstgov_search.adapters.bs4_document_parser import Bs4DocumentParser
from firstgov_search.adapters.legacy_line_extractor import LegacyLineExtractor
from firstgov_search.adapters.results_table_extractor import ResultsTableExtractor
from firstgov_search.domain.entities.page import ResultPage
from firstgov_search.domain.entities.search_record import SearchRecord
from firstgov_search.domain.interfaces.i_page_fetcher import FetchResult


SEARCH_URL = "http://www.firstgov.gov/fedsearch3/index.jsp"
FIRST_PAGE_URL = (
    f"{SEARCH_URL}?act.search=Search&adv=1111&de=detailed&dop=anytime&fr=0"
    "&ms0=must&mt0=all&mw0=commerce&nr=20&pl=anywhere"
)


# ─────────────────────────────────────────────────────────────────────────────
# Domain object factories
# ─────────────────────────────────────────────────────────────────────────────


def make_record(
    url: str = "http://www.commerce.gov/",
    title: str = "Department of Commerce",
    description: Optional[str] = "Home page of the U.S. Department of Commerce",
    score: Optional[int] = 87,
    size: Optional[int] = 2048,
    change_date: Optional[str] = "2/14/2001",
) -> SearchRecord:
    """Create a SearchRecord with sensible test defaults."""
    return SearchRecord(
        url=url,
        title=title,
        description=description,
        score=score,
        size=size,
        change_date=change_date,
    )


def make_fetch_result(
    body: str = "",
    success: bool = True,
    url: str = FIRST_PAGE_URL,
    status_code: Optional[int] = 200,
    error: Optional[str] = None,
) -> FetchResult:
    return FetchResult(
        success=success, url=url, body=body, status_code=status_code, error=error
    )


def make_page(html: str, url: str = FIRST_PAGE_URL) -> ResultPage:
    """Parse HTML the way the session does."""
    return Bs4DocumentParser().parse(url, html)


# ─────────────────────────────────────────────────────────────────────────────
# Legacy (line-oriented) result page
# ─────────────────────────────────────────────────────────────────────────────


def legacy_hit_lines(record: SearchRecord, rank: int = 1) -> List[str]:
    lines = [f'<TR><TD>{rank}.</TD><TD nowrap><a href="{record.url}">{record.title}</A></TD></TR>']
    if record.score is not None:
        lines.append(
            f'<TR><TD align="center" colspan="2"><FONT size="-1">{record.score}% </FONT></TD></TR>'
        )
    if record.description is not None:
        lines.append(f'<TR><TD colspan="3">{record.description}</TD></TR>')
    if record.size is not None:
        lines.append(
            '<TR><TD colspan="2"></TD><TD nowrap><FONT size="-1" color="#888888">'
            f"{record.size} bytes, {record.change_date}</FONT></TD></TR>"
        )
    return lines


def legacy_page_html(
    records: Sequence[SearchRecord] = (),
    count: Optional[int] = 1234,
    next_offset: Optional[str] = "20",
    has_next: bool = True,
    split_offset: bool = False,
) -> str:
    lines = [
        "<html><head><title>FirstGov Search Results</title></head><body>",
        '<form action="/fedsearch3/index.jsp" method="get">',
    ]
    if next_offset is not None:
        if split_offset:
            lines += ['<input type="hidden" name="fr"', f'  value="{next_offset}">']
        else:
            lines.append(f'<input type="hidden" name="fr" value="{next_offset}">')
    lines += ['<input type="hidden" name="nr" value="20">', "</form>", "   ", "<table>"]
    if count is not None:
        lines.append(f"<tr><td><b>Returned:</b> {count} matches</td></tr>")
    lines += ["</table>", "<table>"]
    for rank, record in enumerate(records, start=1):
        lines += legacy_hit_lines(record, rank)
    lines.append("</table>")
    if has_next:
        lines.append(
            '<input type="image" src="/images/next.gif" name="act.next" border="0" '
            'VALUE="Next" WIDTH="17" HEIGHT="19">'
        )
    lines.append("</body></html>")
    return "\n".join(lines)


# ─────────────────────────────────────────────────────────────────────────────
# "Begin Results Table" result page
# ─────────────────────────────────────────────────────────────────────────────


def redirect_href(target: str, rank: int = 1) -> str:
    from urllib.parse import quote

    return f"/fedsearch/redirect.jsp?url={quote(target, safe='')}&amp;rank={rank}"


def table_hit_rows(record: SearchRecord, rank: int = 1, redirect: bool = True) -> List[str]:
    href = redirect_href(record.url, rank) if redirect else record.url
    return [
        f'<tr><td valign="top">{rank}.</td>'
        f'<td><a href="{href}">{record.title}</a></td></tr>',
        f"<tr><td>&nbsp;</td><td>{record.description or ''}</td></tr>",
    ]


def table_page_html(
    records: Sequence[SearchRecord] = (),
    count_phrase: Optional[str] = "Your search for <b>commerce</b> returned 37 results.",
    next_offset: Optional[str] = "20",
    has_next: bool = True,
    pager_has_per_page: bool = True,
    redirect: bool = True,
) -> str:
    lines = [
        "<html><head><title>FirstGov Search Results</title></head><body>",
        '<form name="search" action="/fedsearch/index.jsp">',
        '<input type="text" name="mw0" value="commerce">',
        '<input type="hidden" name="fr" value="999">',
        "</form>",
    ]
    if count_phrase is not None:
        lines.append(f"<table><tr><td>{count_phrase}</td></tr></table>")

    lines.append('<form name="pager" action="/fedsearch/index.jsp" method="get">')
    if next_offset is not None:
        lines.append(f'<input type="hidden" name="fr" value="{next_offset}">')
    if pager_has_per_page:
        lines.append('<input type="hidden" name="nr" value="20">')
    if has_next:
        lines.append('<input type="image" name="act.next" src="/images/next.gif" alt="Next">')
    lines.append("</form>")

    if records:
        lines += ["<!-- Begin Results Table -->", "<table>"]
        for rank, record in enumerate(records, start=1):
            lines += table_hit_rows(record, rank, redirect=redirect)
        lines += ["</table>", "<!-- End Results Table -->"]
    lines.append("</body></html>")
    return "\n".join(lines)


# ─────────────────────────────────────────────────────────────────────────────
# Fixtures
# ─────────────────────────────────────────────────────────────────────────────


@pytest.fixture
def mock_fetcher():
    """AsyncMock for IPageFetcher. Defaults to an empty successful page."""
    mock = AsyncMock()
    mock.fetch.return_value = make_fetch_result()
    mock.delay.return_value = None
    return mock


@pytest.fixture
def parser():
    return Bs4DocumentParser()


@pytest.fixture
def strategies():
    return [ResultsTableExtractor(), LegacyLineExtractor()]


@pytest.fixture
def sample_records():
    return [
        make_record(),
        make_record(
            url="http://www.census.gov/",
            title="U.S. Census Bureau",
            description="Population and economic statistics",
            score=74,
            size=4096,
            change_date="1/30/2001",
        ),
        make_record(
            url="http://www.uspto.gov/",
            title="Patent &amp; Trademark Office",
            description="Patents, trademarks and <b>commerce</b>",
            score=61,
            size=512,
            change_date="12/1/2000",
        ),
    ]
