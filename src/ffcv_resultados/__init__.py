"""Extract standings, fixtures and calendars from FFCV results pages."""

from .config import AppConfig, load_config
from .ffcv import FfcvClient
from .parsing import (
    Match,
    MatchdayGroup,
    StandingEntry,
    is_highlighted,
    normalize_count,
    parse_calendar,
    parse_round,
    parse_standings,
)

__all__ = [
    "AppConfig",
    "FfcvClient",
    "Match",
    "MatchdayGroup",
    "StandingEntry",
    "is_highlighted",
    "load_config",
    "normalize_count",
    "parse_calendar",
    "parse_round",
    "parse_standings",
]
