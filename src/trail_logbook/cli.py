"""CLI para generar el reporte Excel del registro de caminatas."""

from __future__ import annotations

import argparse
import logging
from datetime import datetime

from trail_logbook.aggregate import summarize_logbook
from trail_logbook.config import default_base_dir, from_namespace
from trail_logbook.excel_writer import ExcelLayout, write_logbook_xlsx
from trail_logbook.responses import format_success_response
from trail_logbook.sources.hike_export import HikeExportPaths, HikeExportSource

logger = logging.getLogger(__name__)


def parse_args() -> argparse.Namespace:
    """Parse command-line arguments.

    Returns:
        Parsed argparse namespace.
    """
    parser = argparse.ArgumentParser(
        description="Reporte del registro de caminatas: totales, rachas e insignias."
    )
    parser.add_argument(
        "--base-dir",
        default=default_base_dir(),
        help="Directorio base con exports/ (default: $TRAIL_LOGBOOK_HOME o ~/trail_logbook).",
    )
    parser.add_argument(
        "--output-dir",
        default=None,
        help="Directorio de salida (default: <base-dir>/reports).",
    )
    parser.add_argument(
        "--timezone",
        default="UTC",
        help="Zona horaria para el nombre del archivo (default: UTC).",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Nivel de logging (default: INFO).",
    )
    return parser.parse_args()


def main() -> int:
    """Run the report CLI.

    Returns:
        Exit code (0 on success).
    """
    config = from_namespace(parse_args())
    logging.basicConfig(
        level=getattr(logging, config.log_level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    source = HikeExportSource(HikeExportPaths(root=config.exports_dir))
    source.validate()

    export_file = source.newest_json()
    now = datetime.now(tz=config.local_tz())
    hikes = source.load_hikes(export_file, now=now)
    logger.info("Loaded %s hike(s) from %s", len(hikes), export_file)

    summary = summarize_logbook(hikes, now=now)

    ts = now.strftime("%Y-%m-%d_%H-%M-%S")
    out_path = config.output_dir / f"logbook_report_{ts}.xlsx"
    write_logbook_xlsx(summary, hikes, out_path, ExcelLayout())

    envelope = format_success_response(
        {"output": str(out_path), "hikes": summary.stats.total_hikes},
        message="Report generated",
    )
    print(f"OK: Export file: {export_file}")
    print(f"OK: Badges: {', '.join(b.name for b in summary.badges) or '-'}")
    print(f"OK: {envelope['message']}: {envelope['data']['output']}")
    return 0
