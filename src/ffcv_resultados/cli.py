"""Entry point of the ``ffcv-resultados`` console script."""

from __future__ import annotations

from .__main__ import main as _run_main


def main() -> int:
    """Run the serve, dump, report and export commands of ``ffcv-resultados``."""

    return _run_main()


if __name__ == "__main__":  # pragma: no cover - manual execution helper
    raise SystemExit(main())
