from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import requests

from .config import SOURCE_CALENDAR, SOURCE_KINDS, SOURCE_ROUND, SOURCE_STANDINGS, AppConfig, load_config
from .ffcv import FfcvClient
from .report import build_html_report, collect_report_sections

DEFAULT_OUTPUT_PATH = Path("docs/index.html")
DEFAULT_EXPORT_DIR = Path("docs/data")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Clasificación, jornada y calendario de la FFCV")
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Fichero YAML con las fuentes y el equipo (por defecto: FFCV_RESULTADOS_CONFIG o valores integrados).",
    )
    parser.add_argument(
        "--highlight",
        default=None,
        help="Nombre del equipo a resaltar (sobrescribe la configuración).",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Mostrar mensajes de depuración.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    serve = subparsers.add_parser("serve", help="Arrancar la API HTTP.")
    serve.add_argument("--host", default=None, help="Dirección de escucha.")
    serve.add_argument("--port", type=int, default=None, help="Puerto (por defecto: PORT o 3000).")

    dump = subparsers.add_parser("dump", help="Imprimir los datos de una página como JSON.")
    dump.add_argument("kind", choices=SOURCE_KINDS)

    report = subparsers.add_parser("report", help="Generar la página HTML.")
    report.add_argument(
        "--output",
        type=Path,
        default=DEFAULT_OUTPUT_PATH,
        help="Ruta del fichero HTML (por defecto: docs/index.html).",
    )

    export = subparsers.add_parser("export", help="Guardar las tres páginas como ficheros JSON.")
    export.add_argument(
        "--output-dir",
        type=Path,
        default=DEFAULT_EXPORT_DIR,
        help="Directorio de salida (por defecto: docs/data).",
    )
    return parser


def _load_records(client: FfcvClient, kind: str) -> List[Dict[str, Any]]:
    loaders = {
        SOURCE_STANDINGS: client.get_standings,
        SOURCE_ROUND: client.get_current_round,
        SOURCE_CALENDAR: client.get_calendar,
    }
    return [record.as_dict() for record in loaders[kind]()]


def _write_json(path: Path, payload: Any) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(payload, ensure_ascii=False, indent=2) + "\n", encoding="utf-8")


def export_snapshots(client: FfcvClient, output_dir: Path) -> Dict[str, Path]:
    """Write one JSON file per source kind and return the written paths."""

    written: Dict[str, Path] = {}
    for kind in SOURCE_KINDS:
        target = output_dir / f"{kind}.json"
        _write_json(target, _load_records(client, kind))
        written[kind] = target
    return written


def _serve(config: AppConfig, client: FfcvClient, host: Optional[str], port: Optional[int]) -> int:
    import uvicorn

    from .api import create_app

    uvicorn.run(
        create_app(client, config=config),
        host=host or config.server.host,
        port=port or config.server.port,
    )
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = load_config(args.config)
    if args.highlight is not None:
        config.highlight = args.highlight.strip()
    client = FfcvClient.from_config(config)

    if args.command == "serve":
        return _serve(config, client, args.host, args.port)

    try:
        if args.command == "dump":
            print(json.dumps(_load_records(client, args.kind), ensure_ascii=False, indent=2))
        elif args.command == "export":
            written = export_snapshots(client, args.output_dir)
            for kind, path in written.items():
                print(f"{kind}: {path}")
        elif args.command == "report":
            sections = collect_report_sections(client)
            html = build_html_report(**sections)
            args.output.parent.mkdir(parents=True, exist_ok=True)
            args.output.write_text(html, encoding="utf-8")
            print(f"Informe guardado en {args.output}")
    except requests.RequestException as exc:
        print(f"Aviso: no se pudieron obtener los datos: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover - manual execution helper
    raise SystemExit(main())
