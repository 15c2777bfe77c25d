"""
Tests for the HTML page renderer.
"""

from datetime import datetime

from ffcv_resultados.parsing import Match, MatchdayGroup, StandingEntry
from ffcv_resultados.report import (
    build_html_report,
    format_calendar,
    format_match_card,
    format_round,
    format_standings_table,
)


def _entry(name, highlighted=False):
    return StandingEntry(
        position=1,
        name=name,
        played=3,
        won=2,
        drawn=1,
        lost=0,
        goals_for=7,
        goals_against=2,
        goal_difference=5,
        points=7,
        is_highlighted=highlighted,
    )


def test_standings_table_marks_highlighted_rows():
    html = format_standings_table([_entry("CD Meliana", True), _entry("CF Foios")])
    assert '<tr class="highlight">' in html
    assert html.count("<tr") == 3


def test_team_names_are_escaped():
    html = format_standings_table([_entry("<script>")])
    assert "<script>" not in html
    assert "&lt;script&gt;" in html


def test_empty_and_failed_sections():
    assert "No hay datos disponibles" in format_standings_table([])
    assert "No se pudieron cargar los datos" in format_standings_table(None)
    assert "No hay partidos disponibles" in format_round([])
    assert "No hay calendario disponible" in format_calendar([MatchdayGroup("JORNADA 1")])


def test_match_card_details():
    card = format_match_card(
        Match(home="CD Meliana", away="CF Foios", score="vs", date="12-10-2025", time="10:00", venue="El Clot")
    )
    assert "12-10-2025 · 10:00 · El Clot" in card
    assert "match-card highlight" not in card


def test_calendar_skips_empty_groups():
    groups = [
        MatchdayGroup("JORNADA 1", (Match(home="CD Meliana", away="CF Foios", is_highlighted=True),)),
        MatchdayGroup("JORNADA 2"),
    ]
    html = format_calendar(groups)
    assert "JORNADA 1" in html
    assert "JORNADA 2" not in html
    assert "match-card highlight" in html


def test_full_page():
    page = build_html_report(
        standings=[_entry("CD Meliana", True)],
        current_round=[],
        calendar=None,
        generated_at=datetime(2025, 10, 12, 18, 30),
    )
    assert page.startswith("<!DOCTYPE html>")
    assert "Actualizado: 12.10.2025 18:30" in page
    assert "No hay partidos disponibles" in page
    assert "No se pudieron cargar los datos" in page
