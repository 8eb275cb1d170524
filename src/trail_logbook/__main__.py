"""Punto de entrada: ``python -m trail_logbook``."""

from __future__ import annotations

from trail_logbook.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
