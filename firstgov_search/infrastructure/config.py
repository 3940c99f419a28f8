"""
Configuration: reads all settings from environment variables.
Every setting has a default; uses python-dotenv for local dev.
"""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from ..adapters.httpx_page_fetcher import (
    REQUEST_DELAY_SECONDS,
    TIMEOUT_SECONDS,
    USER_AGENT,
)
from ..domain.entities.query_defaults import DEFAULT_PER_PAGE, DEFAULT_SEARCH_URL

load_dotenv()


@dataclass(frozen=True)
class Config:
    search_url: str = DEFAULT_SEARCH_URL
    user_agent: str = USER_AGENT
    contact_email: Optional[str] = None  # sent as the From header

    # HTTP behaviour
    timeout_seconds: float = TIMEOUT_SECONDS
    request_delay_seconds: float = REQUEST_DELAY_SECONDS

    # Query defaults
    results_per_page: int = DEFAULT_PER_PAGE

    @classmethod
    def from_env(cls) -> "Config":
        invalid = []

        def number(key: str, default, cast):
            raw = os.getenv(key)
            if raw is None or raw == "":
                return default
            try:
                value = cast(raw)
            except ValueError:
                invalid.append(key)
                return default
            if value < 0:
                invalid.append(key)
                return default
            return value

        timeout = number("FIRSTGOV_TIMEOUT_SECONDS", TIMEOUT_SECONDS, float)
        delay = number("FIRSTGOV_REQUEST_DELAY_SECONDS", REQUEST_DELAY_SECONDS, float)
        per_page = number("FIRSTGOV_RESULTS_PER_PAGE", DEFAULT_PER_PAGE, int)

        if invalid:
            raise EnvironmentError(
                f"Invalid numeric environment variables: {', '.join(invalid)}\n"
                f"Expected non-negative numbers."
            )

        return cls(
            search_url=os.getenv("FIRSTGOV_SEARCH_URL") or DEFAULT_SEARCH_URL,
            user_agent=os.getenv("FIRSTGOV_USER_AGENT") or USER_AGENT,
            contact_email=os.getenv("FIRSTGOV_CONTACT_EMAIL") or None,
            timeout_seconds=timeout,
            request_delay_seconds=delay,
            results_per_page=per_page,
        )
