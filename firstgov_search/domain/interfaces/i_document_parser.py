"""
IDocumentParser - Port: turns a fetched HTML body into a ResultPage
whose `document` is a navigable tree.
"""

from abc import ABC, abstractmethod

from ..entities.page import ResultPage


class IDocumentParser(ABC):
    @abstractmethod
    def parse(self, url: str, body: str) -> ResultPage:
        pass
