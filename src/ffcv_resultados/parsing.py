"""Table parsers for the FFCV results pages (standings, round, calendar)."""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Sequence, Tuple, Union

from bs4 import BeautifulSoup, Comment, Tag

LOGGER = logging.getLogger(__name__)

HEADER_SENTINEL = "Club"
UNPLAYED_SCORE = "vs"
ROUND_TOKEN = "JORNADA"

STANDINGS_MIN_CELLS = 11
ROUND_CELLS = 8
CALENDAR_FIXTURE_CELLS = 6
MIN_TEAM_NAME_LENGTH = 3

_LEADING_COUNT_RE = re.compile(r"^-?\d+", re.ASCII)
_LEADING_INT_RE = re.compile(r"^\s*[-+]?\d+", re.ASCII)
_COMPACT_SCORE_RE = re.compile(r"^\d{2}$", re.ASCII)
_TEAMS_SEPARATOR_RE = re.compile(r"\s+-\s+")


@dataclass(frozen=True)
class StandingEntry:
    position: int
    name: str
    played: int
    won: int
    drawn: int
    lost: int
    goals_for: int
    goals_against: int
    goal_difference: int
    points: int
    is_highlighted: bool = False

    def as_dict(self) -> Dict[str, Any]:
        return {
            "position": self.position,
            "name": self.name,
            "played": self.played,
            "won": self.won,
            "drawn": self.drawn,
            "lost": self.lost,
            "goalsFor": self.goals_for,
            "goalsAgainst": self.goals_against,
            "goalDifference": self.goal_difference,
            "points": self.points,
            "isHighlighted": self.is_highlighted,
        }


@dataclass(frozen=True)
class Match:
    home: str
    away: str
    score: str = UNPLAYED_SCORE
    date: str = ""
    time: str = ""
    venue: str = ""
    is_highlighted: bool = False

    @property
    def is_played(self) -> bool:
        return self.score != UNPLAYED_SCORE

    def as_dict(self) -> Dict[str, Any]:
        return {
            "home": self.home,
            "away": self.away,
            "score": self.score,
            "date": self.date,
            "time": self.time,
            "venue": self.venue,
            "isHighlighted": self.is_highlighted,
        }


@dataclass(frozen=True)
class MatchdayGroup:
    label: str
    matches: Tuple[Match, ...] = field(default_factory=tuple)

    def as_dict(self) -> Dict[str, Any]:
        return {
            "label": self.label,
            "matches": [match.as_dict() for match in self.matches],
        }


class RowKind(Enum):
    """Classification of a calendar table row."""

    SECTION = "section"
    DATA = "data"
    NOISE = "noise"


def is_highlighted(text: str, token: Optional[str]) -> bool:
    """Return ``True`` when ``text`` contains ``token`` ignoring case.

    A blank token never highlights anything.
    """

    if not token or not token.strip():
        return False
    return token.strip().lower() in (text or "").lower()


def _first_text(cell: Union[Tag, str, None]) -> str:
    if cell is None:
        return ""
    if not isinstance(cell, Tag):
        return str(cell)
    first = next(iter(cell.contents), None)
    if first is None or isinstance(first, Comment):
        return ""
    if isinstance(first, Tag):
        return first.get_text()
    return str(first)


def normalize_count(cell: Union[Tag, str, None]) -> int:
    """Return the leading integer of a table cell, or ``0``.

    Only the first child node of the cell is inspected so that trailing
    annotations such as ``<span>(55%)</span>`` are ignored.
    """

    text = _first_text(cell).strip()
    if not text:
        return 0
    match = _LEADING_COUNT_RE.match(text)
    if not match:
        return 0
    return int(match.group(0))


def _parse_position(value: str) -> Optional[int]:
    match = _LEADING_INT_RE.match(value)
    if not match:
        return None
    return int(match.group(0))


def is_standings_row(cell_count: int, first_cell_spans: bool) -> bool:
    return cell_count >= STANDINGS_MIN_CELLS and not first_cell_spans


def is_round_row(cell_count: int, cell_texts: Sequence[str]) -> bool:
    if cell_count != ROUND_CELLS or len(cell_texts) < ROUND_CELLS:
        return False
    home = cell_texts[0].strip()
    away = cell_texts[4].strip()
    return len(home) >= MIN_TEAM_NAME_LENGTH and len(away) >= MIN_TEAM_NAME_LENGTH


def classify_calendar_row(cell_count: int, row_text: str) -> RowKind:
    if cell_count == 1 and ROUND_TOKEN in row_text.upper():
        return RowKind.SECTION
    if cell_count == CALENDAR_FIXTURE_CELLS:
        return RowKind.DATA
    return RowKind.NOISE


def resolve_round_result(raw: str) -> Tuple[str, str]:
    """Split the middle cell of a round row into ``(score, time)``."""

    cleaned = (raw or "").strip()
    if ":" in cleaned:
        return UNPLAYED_SCORE, cleaned
    if _COMPACT_SCORE_RE.match(cleaned):
        # Two digits without separator, e.g. "43" for 4-3.
        return f"{cleaned[0]}-{cleaned[1]}", ""
    if cleaned:
        return cleaned, ""
    return UNPLAYED_SCORE, ""


def split_teams(raw: str) -> Optional[Tuple[str, str]]:
    parts = _TEAMS_SEPARATOR_RE.split((raw or "").strip())
    if len(parts) < 2:
        return None
    return parts[0].strip(), parts[1].strip()


def split_date_time(raw: str) -> Tuple[str, str]:
    tokens = (raw or "").split()
    date = tokens[0] if tokens else ""
    time = tokens[1] if len(tokens) > 1 else ""
    return date, time


def normalize_calendar_score(raw: str) -> str:
    cleaned = (raw or "").strip()
    if not cleaned or cleaned == "-":
        return UNPLAYED_SCORE
    return cleaned


def _make_soup(html: Optional[str]) -> BeautifulSoup:
    return BeautifulSoup(html or "", "lxml")


def _table_rows(html: Optional[str]) -> List[Tag]:
    return _make_soup(html).select("table tr")


def parse_standings(html: Optional[str], *, highlight: Optional[str] = None) -> List[StandingEntry]:
    """Extract the ranking table from a ``clasificacion.php`` page."""

    entries: List[StandingEntry] = []
    for row in _table_rows(html):
        cells = row.find_all("td")
        first_cell_spans = bool(cells and cells[0].get("colspan"))
        if not is_standings_row(len(cells), first_cell_spans):
            continue

        position = _parse_position(cells[1].get_text().strip())
        name = cells[2].get_text().strip()
        if position is None or not name or name == HEADER_SENTINEL:
            LOGGER.debug("Skipping standings row %r", name)
            continue

        entries.append(
            StandingEntry(
                position=position,
                name=name,
                played=normalize_count(cells[3]),
                won=normalize_count(cells[4]),
                drawn=normalize_count(cells[5]),
                lost=normalize_count(cells[6]),
                goals_for=normalize_count(cells[7]),
                goals_against=normalize_count(cells[8]),
                goal_difference=normalize_count(cells[9]),
                points=normalize_count(cells[10]),
                is_highlighted=is_highlighted(name, highlight),
            )
        )
    return entries


def parse_round(html: Optional[str], *, highlight: Optional[str] = None) -> List[Match]:
    """Extract the fixtures of the current round from ``total_partidos.php``.

    Rows have eight columns: home, blank, result or kickoff, blank, away,
    venue, blank, history.
    """

    matches: List[Match] = []
    for row in _table_rows(html):
        cells = row.find_all("td")
        texts = [cell.get_text().strip() for cell in cells]
        if not is_round_row(len(cells), texts):
            continue

        home, away, venue = texts[0], texts[4], texts[5]
        score, kickoff = resolve_round_result(texts[2])
        matches.append(
            Match(
                home=home,
                away=away,
                score=score,
                date="",
                time=kickoff,
                venue=venue,
                is_highlighted=is_highlighted(home, highlight) or is_highlighted(away, highlight),
            )
        )
    return matches


def parse_calendar(html: Optional[str], *, highlight: Optional[str] = None) -> List[MatchdayGroup]:
    """Group the fixtures of ``equipo_calendario.php`` by round title.

    Fixture rows that appear before the first round title are dropped.
    """

    groups: List[Tuple[str, List[Match]]] = []
    current: Optional[List[Match]] = None

    for row in _table_rows(html):
        cells = row.find_all("td")
        row_text = row.get_text().strip().upper()
        kind = classify_calendar_row(len(cells), row_text)

        if kind is RowKind.SECTION:
            current = []
            groups.append((row_text, current))
            continue
        if kind is not RowKind.DATA:
            continue
        if current is None:
            LOGGER.debug("Dropping calendar row outside of a round: %r", row_text)
            continue

        teams = split_teams(cells[2].get_text())
        if teams is None:
            LOGGER.debug("Skipping calendar row without teams: %r", row_text)
            continue
        home, away = teams
        date, kickoff = split_date_time(cells[4].get_text().strip())
        current.append(
            Match(
                home=home,
                away=away,
                score=normalize_calendar_score(cells[3].get_text()),
                date=date,
                time=kickoff,
                venue=cells[5].get_text().strip(),
                is_highlighted=is_highlighted(home, highlight) or is_highlighted(away, highlight),
            )
        )

    return [MatchdayGroup(label=label, matches=tuple(items)) for label, items in groups]


__all__ = [
    "HEADER_SENTINEL",
    "UNPLAYED_SCORE",
    "Match",
    "MatchdayGroup",
    "RowKind",
    "StandingEntry",
    "classify_calendar_row",
    "is_highlighted",
    "is_round_row",
    "is_standings_row",
    "normalize_calendar_score",
    "normalize_count",
    "parse_calendar",
    "parse_round",
    "parse_standings",
    "resolve_round_result",
    "split_date_time",
    "split_teams",
]
