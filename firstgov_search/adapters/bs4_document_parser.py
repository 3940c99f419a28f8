"""
Bs4DocumentParser - Implements IDocumentParser with BeautifulSoup.
Also home of the tag-stripping helper shared by both extractors.
"""

import re

from bs4 import BeautifulSoup

from ..domain.entities.page import ResultPage
from ..domain.interfaces.i_document_parser import IDocumentParser

_WHITESPACE = re.compile(r"\s+")


def strip_tags(fragment: str) -> str:
    """Text of an HTML fragment: markup removed, entities decoded, whitespace collapsed."""
    if not fragment:
        return ""
    text = BeautifulSoup(fragment, "html.parser").get_text(separator=" ")
    return collapse_whitespace(text)


def collapse_whitespace(text: str) -> str:
    # \s covers the non-breaking space once entities are decoded
    return _WHITESPACE.sub(" ", text).strip()


def is_blank(text: str) -> bool:
    """True for strings holding only whitespace, NBSPs or &nbsp; entities."""
    return not collapse_whitespace(text.replace("&nbsp;", " "))


class Bs4DocumentParser(IDocumentParser):
    def __init__(self, features: str = "html.parser"):
        self.features = features

    def parse(self, url: str, body: str) -> ResultPage:
        soup = BeautifulSoup(body or "", self.features)
        return ResultPage(url=url, html=body or "", document=soup)
