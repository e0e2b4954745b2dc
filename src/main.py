"""Script de ejecución.

Permite ejecutar la CLI con `python -m main` desde `src/` durante desarrollo,
además del script `palette-lens` instalado por pip.
"""

from __future__ import annotations

import sys

# Windows terminals default to cp1252; the rich tables use box-drawing glyphs.
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8")
    sys.stderr.reconfigure(encoding="utf-8")

from cli.main import run  # noqa: E402


def main() -> None:
    run()


if __name__ == "__main__":
    main()
