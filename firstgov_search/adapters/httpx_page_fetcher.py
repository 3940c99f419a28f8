"""
HttpxPageFetcher - Implements IPageFetcher.
Plain GET of FirstGov result pages with httpx, a strict timeout and a
polite pause between pages of the same session.
"""

import asyncio
import logging
from typing import Optional

import httpx

from ..domain.interfaces.i_page_fetcher import FetchResult, IPageFetcher

logger = logging.getLogger(__name__)

TIMEOUT_SECONDS = 10.0
REQUEST_DELAY_SECONDS = 1.0
USER_AGENT = "Mozilla/5.0 (compatible; firstgov-search/1.0)"


class HttpxPageFetcher(IPageFetcher):
    def __init__(
        self,
        timeout: float = TIMEOUT_SECONDS,
        delay_seconds: float = REQUEST_DELAY_SECONDS,
        user_agent: str = USER_AGENT,
        contact_email: Optional[str] = None,
    ):
        self.timeout = timeout
        self.delay_seconds = delay_seconds
        self.headers = {
            "User-Agent": user_agent,
            "Accept": "text/html,application/xhtml+xml;q=0.9,*/*;q=0.8",
        }
        if contact_email:
            self.headers["From"] = contact_email

    async def fetch(self, url: str) -> FetchResult:
        logger.debug(f"[Fetch] GET {url}")
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout,
                headers=self.headers,
                follow_redirects=True,
            ) as client:
                response = await client.get(url)
                response.raise_for_status()
                return FetchResult(
                    success=True,
                    url=url,
                    body=response.text,
                    status_code=response.status_code,
                )

        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            logger.warning(f"[Fetch] HTTP {status} for {url}")
            return FetchResult(
                success=False, url=url, status_code=status, error=f"HTTP {status}"
            )
        except httpx.TimeoutException:
            logger.warning(f"[Fetch] Timeout fetching {url}")
            return FetchResult(success=False, url=url, error="Timeout")
        except httpx.HTTPError as e:
            logger.warning(f"[Fetch] Error fetching {url}: {e}")
            return FetchResult(success=False, url=url, error=str(e))

    async def delay(self) -> None:
        if self.delay_seconds > 0:
            await asyncio.sleep(self.delay_seconds)
