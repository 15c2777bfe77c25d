"""Client for the FFCV results pages hosted on resultadosffcv.isquad.es."""
from __future__ import annotations

import logging
from typing import Callable, List, Mapping, Optional, TypeVar

import requests

from .config import (
    DEFAULT_HIGHLIGHT,
    DEFAULT_SOURCES,
    DEFAULT_TIMEOUT,
    SOURCE_CALENDAR,
    SOURCE_ROUND,
    SOURCE_STANDINGS,
    AppConfig,
)
from .parsing import Match, MatchdayGroup, StandingEntry, parse_calendar, parse_round, parse_standings

LOGGER = logging.getLogger(__name__)

REQUEST_HEADERS = {
    "User-Agent": "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36"
}
HTML_ACCEPT_HEADER = {"Accept": "text/html,application/xhtml+xml"}

T = TypeVar("T")


class FfcvClient:
    """Fetch and parse the three FFCV pages for one competition.

    Every call performs a fresh GET; nothing is cached and failed requests
    are not retried.
    """

    def __init__(
        self,
        sources: Optional[Mapping[str, str]] = None,
        *,
        highlight: str = DEFAULT_HIGHLIGHT,
        timeout: int = DEFAULT_TIMEOUT,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.sources = dict(DEFAULT_SOURCES if sources is None else sources)
        self.highlight = highlight
        self.timeout = timeout
        self.session = session if session is not None else requests.Session()
        self.session.headers.update({**REQUEST_HEADERS, **HTML_ACCEPT_HEADER})

    @classmethod
    def from_config(cls, config: AppConfig, *, session: Optional[requests.Session] = None) -> "FfcvClient":
        return cls(
            config.sources,
            highlight=config.highlight,
            timeout=config.timeout,
            session=session,
        )

    def fetch_document(self, kind: str) -> str:
        """Return the raw HTML of the page registered for ``kind``."""

        url = self.sources.get(kind)
        if not url:
            raise ValueError(f"Unknown FFCV source: {kind!r}")
        response = self.session.get(url, timeout=self.timeout)
        response.raise_for_status()
        return response.text

    def _load(self, kind: str, parser: Callable[..., T]) -> T:
        try:
            html = self.fetch_document(kind)
        except requests.RequestException as exc:
            LOGGER.error("Could not fetch %s page: %s", kind, exc)
            raise
        return parser(html, highlight=self.highlight)

    def get_standings(self) -> List[StandingEntry]:
        return self._load(SOURCE_STANDINGS, parse_standings)

    def get_current_round(self) -> List[Match]:
        return self._load(SOURCE_ROUND, parse_round)

    def get_calendar(self) -> List[MatchdayGroup]:
        return self._load(SOURCE_CALENDAR, parse_calendar)


__all__ = ["FfcvClient", "REQUEST_HEADERS"]
