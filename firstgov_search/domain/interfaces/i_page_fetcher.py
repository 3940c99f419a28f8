"""
IPageFetcher - Port: fetches one FirstGov result page over HTTP.
Implementations report failure through FetchResult instead of raising.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional


@dataclass
class FetchResult:
    success: bool
    url: str
    body: str = ""
    status_code: Optional[int] = None
    error: Optional[str] = None


class IPageFetcher(ABC):
    """Port for the blocking-per-session HTTP GET of a result page."""

    @abstractmethod
    async def fetch(self, url: str) -> FetchResult:
        """
        Performs one GET of `url`.
        Ordinary HTTP-level failures come back as success=False.
        """
        pass

    @abstractmethod
    async def delay(self) -> None:
        """Sleeps according to the polite inter-request delay policy."""
        pass
