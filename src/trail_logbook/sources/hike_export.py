"""Lectura de exportaciones JSON del registro de caminatas."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Any

from trail_logbook.model import HikeRecord
from trail_logbook.normalize import process_hike_data
from trail_logbook.validators import validate_hike_data

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HikeExportPaths:
    """Paths for hike JSON exports."""

    root: Path  # folder containing hikes_*.json


class HikeExportSource:
    """Hike JSON export source."""

    def __init__(self, paths: HikeExportPaths) -> None:
        self._paths = paths

    def validate(self) -> None:
        """Validate that the export directory exists.

        Raises:
            FileNotFoundError: If the directory is missing.
        """
        if not self._paths.root.exists():
            raise FileNotFoundError(str(self._paths.root))

    def newest_json(self) -> Path:
        """Return newest hikes_*.json by mtime."""
        files = sorted(
            self._paths.root.glob("hikes_*.json"),
            key=lambda p: p.stat().st_mtime,
            reverse=True,
        )
        if not files:
            raise FileNotFoundError(f"No hikes_*.json in {self._paths.root}")
        return files[0]

    def load_hikes(self, path: Path, *, now: datetime | None = None) -> list[HikeRecord]:
        """Parse a hike export into canonical records.

        Args:
            path: Path to JSON file.
            now: Timestamp used for ``updated_at``.

        Returns:
            Canonical hikes, in file order.

        Raises:
            ValueError: If the JSON shape is invalid.
        """
        text = path.read_text(encoding="utf-8")
        raw = _extract_hike_list(text)
        if not isinstance(raw, list):
            raise ValueError("Hike export must be a list or an object with 'hikes'")

        out: list[HikeRecord] = []
        for index, item in enumerate(raw):
            if not isinstance(item, dict):
                logger.warning("Skipping non-object item #%s in %s", index, path.name)
                continue
            check = validate_hike_data(item)
            if not check.valid:
                logger.warning(
                    "Hike #%s in %s has problems: %s",
                    index,
                    path.name,
                    "; ".join(check.errors),
                )
            out.append(process_hike_data(item, now=now))
        return out


def _extract_hike_list(text: str) -> Any:
    """Extract the hike list, tolerating leading non-JSON (e.g. log lines)."""
    starts = [i for i in (text.find("["), text.find("{")) if i >= 0]
    payload = json.loads(text[min(starts):]) if starts else json.loads(text)
    if isinstance(payload, dict) and "hikes" in payload:
        return payload["hikes"]
    return payload
