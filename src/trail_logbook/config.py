"""Configuración del reporte (argumentos de línea de comandos + entorno)."""

from __future__ import annotations

import argparse
import logging
import os
from dataclasses import dataclass
from datetime import tzinfo
from pathlib import Path
from typing import Callable

from dateutil import tz

logger = logging.getLogger(__name__)

HOME_ENV = "TRAIL_LOGBOOK_HOME"
EnvGetter = Callable[[str], "str | None"]


@dataclass(frozen=True)
class ReportConfig:
    """Resolved settings for one report run."""

    base_dir: Path
    output_dir: Path
    log_level: str = "INFO"
    timezone: str = "UTC"

    @property
    def exports_dir(self) -> Path:
        return self.base_dir / "exports"

    def local_tz(self) -> tzinfo:
        """Resolve the configured timezone, falling back to UTC."""
        zone = tz.gettz(self.timezone)
        if zone is None:
            logger.warning("Unknown timezone '%s'. Falling back to UTC.", self.timezone)
            return tz.UTC
        return zone


def default_base_dir(getenv: EnvGetter = os.getenv) -> str:
    value = getenv(HOME_ENV)
    if value and value.strip():
        return value.strip()
    return str(Path.home() / "trail_logbook")


def from_namespace(ns: argparse.Namespace) -> ReportConfig:
    """Build the config from parsed CLI arguments."""
    base = Path(ns.base_dir).expanduser().resolve()
    output = (
        Path(ns.output_dir).expanduser().resolve()
        if getattr(ns, "output_dir", None)
        else base / "reports"
    )
    return ReportConfig(
        base_dir=base,
        output_dir=output,
        log_level=str(getattr(ns, "log_level", "INFO")).upper(),
        timezone=getattr(ns, "timezone", None) or "UTC",
    )
