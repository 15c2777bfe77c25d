"""Configuration helpers for the ffcv_resultados toolkit."""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Mapping, Optional

import yaml

LOGGER = logging.getLogger(__name__)

SOURCE_STANDINGS = "standings"
SOURCE_ROUND = "round"
SOURCE_CALENDAR = "calendar"
SOURCE_KINDS = (SOURCE_STANDINGS, SOURCE_ROUND, SOURCE_CALENDAR)

_FFCV_BASE_URL = "https://resultadosffcv.isquad.es"
_COMPETITION_QUERY = "id_temp=21&id_modalidad=33345&id_competicion=29509572&id_torneo=905019319"

DEFAULT_SOURCES: Mapping[str, str] = {
    SOURCE_STANDINGS: f"{_FFCV_BASE_URL}/clasificacion.php?{_COMPETITION_QUERY}",
    SOURCE_ROUND: f"{_FFCV_BASE_URL}/total_partidos.php?{_COMPETITION_QUERY}",
    SOURCE_CALENDAR: (
        f"{_FFCV_BASE_URL}/equipo_calendario.php?id_temp=21&id_modalidad=33345"
        "&id_competicion=29509572&id_equipo=15228&torneo_equipo=905019319&id_torneo=905019319"
    ),
}
DEFAULT_HIGHLIGHT = "meliana"
DEFAULT_TIMEOUT = 30
DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 3000
PORT_ENV_VAR = "PORT"
CONFIG_ENV_VAR = "FFCV_RESULTADOS_CONFIG"


@dataclass(slots=True)
class ServerConfig:
    """Address the HTTP API binds to."""

    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT


@dataclass(slots=True)
class AppConfig:
    """Root configuration model."""

    highlight: str = DEFAULT_HIGHLIGHT
    timeout: int = DEFAULT_TIMEOUT
    sources: Dict[str, str] = field(default_factory=lambda: dict(DEFAULT_SOURCES))
    server: ServerConfig = field(default_factory=ServerConfig)

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, object]) -> "AppConfig":
        highlight_value = mapping.get("highlight")
        highlight = DEFAULT_HIGHLIGHT if highlight_value is None else str(highlight_value).strip()

        timeout = _coerce_int(mapping.get("timeout"), DEFAULT_TIMEOUT)
        if timeout <= 0:
            timeout = DEFAULT_TIMEOUT

        sources = dict(DEFAULT_SOURCES)
        sources_section = mapping.get("sources")
        if isinstance(sources_section, Mapping):
            for kind, url in sources_section.items():
                key = str(kind).strip().lower()
                if key not in SOURCE_KINDS:
                    LOGGER.warning("Ignoring unknown source kind '%s' in configuration", kind)
                    continue
                cleaned = str(url or "").strip()
                if cleaned:
                    sources[key] = cleaned

        server = ServerConfig()
        server_section = mapping.get("server")
        if isinstance(server_section, Mapping):
            host = str(server_section.get("host") or "").strip() or DEFAULT_HOST
            port = _coerce_int(server_section.get("port"), DEFAULT_PORT)
            server = ServerConfig(host=host, port=port)

        return cls(highlight=highlight, timeout=timeout, sources=sources, server=server)


def _coerce_int(value: object, default: int) -> int:
    if value is None or value == "":
        return default
    try:
        return int(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        LOGGER.warning("Invalid integer value %r in configuration, using %s", value, default)
        return default


def load_config(
    path: Optional[Path] = None,
    *,
    environ: Optional[Mapping[str, str]] = None,
) -> AppConfig:
    """Load the configuration from YAML and apply environment overrides.

    Without ``path`` the file named by ``FFCV_RESULTADOS_CONFIG`` is used; when
    that is unset too, the defaults apply. ``PORT`` overrides the server port.
    """

    env = os.environ if environ is None else environ
    if path is None and env.get(CONFIG_ENV_VAR):
        path = Path(env[CONFIG_ENV_VAR])

    data: object = {}
    if path is not None:
        with path.open("r", encoding="utf-8") as handle:
            data = yaml.safe_load(handle) or {}
    if not isinstance(data, Mapping):
        raise ValueError("Configuration file must contain a mapping at the root.")

    config = AppConfig.from_mapping(data)
    port_override = env.get(PORT_ENV_VAR)
    if port_override:
        config.server.port = _coerce_int(port_override, config.server.port)
    return config


__all__ = [
    "AppConfig",
    "DEFAULT_HIGHLIGHT",
    "DEFAULT_SOURCES",
    "SOURCE_CALENDAR",
    "SOURCE_KINDS",
    "SOURCE_ROUND",
    "SOURCE_STANDINGS",
    "ServerConfig",
    "load_config",
]
