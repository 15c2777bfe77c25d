#!/usr/bin/env python3
"""Guarda clasificación, jornada y calendario como JSON."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path


def _add_src_to_path() -> None:
    repo_root = Path(__file__).resolve().parents[1]
    src_dir = repo_root / "src"
    if str(src_dir) not in sys.path:
        sys.path.insert(0, str(src_dir))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Descarga las tres páginas de la FFCV y actualiza los ficheros JSON.",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Fichero YAML de configuración opcional.",
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=None,
        help="Directorio de salida (por defecto: docs/data).",
    )
    return parser


def main() -> int:
    _add_src_to_path()
    from ffcv_resultados import FfcvClient, load_config
    from ffcv_resultados.__main__ import DEFAULT_EXPORT_DIR, export_snapshots

    parser = build_parser()
    args = parser.parse_args()

    client = FfcvClient.from_config(load_config(args.config))
    written = export_snapshots(client, args.output_dir or DEFAULT_EXPORT_DIR)

    print("Datos actualizados:", ", ".join(str(path) for path in written.values()))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
