"""Render parsed FFCV records into a standalone HTML page."""
from __future__ import annotations

import logging
from datetime import datetime
from html import escape
from typing import Any, Dict, List, Optional, Sequence

from .ffcv import FfcvClient
from .parsing import Match, MatchdayGroup, StandingEntry

LOGGER = logging.getLogger(__name__)

THEME_COLORS: Dict[str, str] = {
    "primary": "#1e3a8a",
    "highlight_background": "#fef3c7",
    "highlight_border": "#f59e0b",
    "muted": "#6b7280",
}

EMPTY_MESSAGE = "No hay datos disponibles"
ERROR_MESSAGE = "No se pudieron cargar los datos"


def _empty_block(message: str) -> str:
    return f"<p class=\"empty\">{escape(message)}</p>"


def format_standings_table(entries: Optional[Sequence[StandingEntry]]) -> str:
    if entries is None:
        return _empty_block(ERROR_MESSAGE)
    if not entries:
        return _empty_block(EMPTY_MESSAGE)

    rows: List[str] = []
    for entry in entries:
        css_class = " class=\"highlight\"" if entry.is_highlighted else ""
        rows.append(
            f"<tr{css_class}>"
            f"<td>{entry.position}</td>"
            f"<td class=\"team\">{escape(entry.name)}</td>"
            f"<td><strong>{entry.points}</strong></td>"
            f"<td>{entry.played}</td>"
            f"<td>{entry.won}</td>"
            f"<td>{entry.drawn}</td>"
            f"<td>{entry.lost}</td>"
            f"<td>{entry.goals_for}</td>"
            f"<td>{entry.goals_against}</td>"
            f"<td>{entry.goal_difference}</td>"
            "</tr>"
        )
    body = "\n          ".join(rows)
    return (
        "<table class=\"standings\">\n"
        "        <thead><tr><th>Pos</th><th>Equipo</th><th>Pts</th><th>PJ</th><th>G</th>"
        "<th>E</th><th>P</th><th>GF</th><th>GC</th><th>DG</th></tr></thead>\n"
        f"        <tbody>\n          {body}\n        </tbody>\n"
        "      </table>"
    )


def format_match_card(match: Match) -> str:
    classes = "match-card highlight" if match.is_highlighted else "match-card"
    details: List[str] = []
    if match.date:
        details.append(match.date)
    if match.time:
        details.append(match.time)
    if match.venue:
        details.append(match.venue)
    details_html = ""
    if details:
        details_html = f"<div class=\"match-details\">{' · '.join(escape(part) for part in details)}</div>"
    return (
        f"<div class=\"{classes}\">"
        f"<div class=\"match-teams\"><span class=\"home\">{escape(match.home)}</span>"
        f"<span class=\"score\">{escape(match.score)}</span>"
        f"<span class=\"away\">{escape(match.away)}</span></div>"
        f"{details_html}</div>"
    )


def format_round(matches: Optional[Sequence[Match]]) -> str:
    if matches is None:
        return _empty_block(ERROR_MESSAGE)
    if not matches:
        return _empty_block("No hay partidos disponibles")
    return "\n      ".join(format_match_card(match) for match in matches)


def format_calendar(groups: Optional[Sequence[MatchdayGroup]]) -> str:
    if groups is None:
        return _empty_block(ERROR_MESSAGE)
    rendered: List[str] = []
    for group in groups:
        if not group.matches:
            continue
        cards = "\n        ".join(format_match_card(match) for match in group.matches)
        rendered.append(
            "<div class=\"matchday\">"
            f"<div class=\"matchday-title\">{escape(group.label)}</div>\n        {cards}\n      </div>"
        )
    if not rendered:
        return _empty_block("No hay calendario disponible")
    return "\n      ".join(rendered)


def collect_report_sections(client: FfcvClient) -> Dict[str, Any]:
    """Load all three sections; a section that fails to load becomes ``None``."""

    loaders = {
        "standings": client.get_standings,
        "current_round": client.get_current_round,
        "calendar": client.get_calendar,
    }
    sections: Dict[str, Any] = {}
    for name, loader in loaders.items():
        try:
            sections[name] = loader()
        except Exception as exc:
            LOGGER.warning("Section '%s' could not be loaded: %s", name, exc)
            sections[name] = None
    return sections


def build_html_report(
    *,
    standings: Optional[Sequence[StandingEntry]],
    current_round: Optional[Sequence[Match]],
    calendar: Optional[Sequence[MatchdayGroup]],
    title: str = "Resultados FFCV",
    generated_at: Optional[datetime] = None,
) -> str:
    """Build the full page. ``None`` marks a section whose data could not be loaded."""

    timestamp = (generated_at or datetime.now()).strftime("%d.%m.%Y %H:%M")
    colors = THEME_COLORS
    return f"""<!DOCTYPE html>
<html lang="es">
<head>
  <meta charset="utf-8">
  <meta name="viewport" content="width=device-width, initial-scale=1">
  <title>{escape(title)}</title>
  <style>
    body {{ font-family: system-ui, sans-serif; margin: 0 auto; max-width: 960px; padding: 1rem; }}
    h1, h2 {{ color: {colors['primary']}; }}
    table.standings {{ border-collapse: collapse; width: 100%; }}
    table.standings th, table.standings td {{ padding: 0.4rem; text-align: center; border-bottom: 1px solid #e5e7eb; }}
    table.standings td.team {{ text-align: left; }}
    .highlight {{ background: {colors['highlight_background']}; border-left: 4px solid {colors['highlight_border']}; }}
    .match-card {{ border: 1px solid #e5e7eb; border-radius: 8px; margin: 0.5rem 0; padding: 0.75rem; }}
    .match-teams {{ display: flex; justify-content: space-between; gap: 1rem; }}
    .match-teams .score {{ font-weight: bold; }}
    .match-details {{ color: {colors['muted']}; font-size: 0.85rem; margin-top: 0.25rem; }}
    .matchday-title {{ font-weight: bold; margin-top: 1.5rem; }}
    .empty {{ color: {colors['muted']}; padding: 2rem; text-align: center; }}
  </style>
</head>
<body>
  <h1>{escape(title)}</h1>
  <section id="clasificacion">
    <h2>Clasificación</h2>
      {format_standings_table(standings)}
  </section>
  <section id="jornada">
    <h2>Jornada actual</h2>
      {format_round(current_round)}
  </section>
  <section id="calendario">
    <h2>Calendario</h2>
      {format_calendar(calendar)}
  </section>
  <footer><small>Actualizado: {timestamp}</small></footer>
</body>
</html>
"""


__all__ = [
    "build_html_report",
    "collect_report_sections",
    "format_calendar",
    "format_match_card",
    "format_round",
    "format_standings_table",
]
