"""Generación del reporte Excel del registro de caminatas."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import pandas as pd
from openpyxl.styles import Alignment, Border, Font, Side

from trail_logbook.model import HikeRecord, LogbookSummary

_HIKE_COLUMNS: dict[str, str] = {
    "date": "Date",
    "title": "Title",
    "location": "Location",
    "difficulty": "Difficulty",
    "status": "Status",
    "distance": "Distance (km)",
    "elevation": "Elevation (m)",
    "duration": "Duration",
}

_COLUMN_WIDTHS: dict[str, int] = {
    "Date": 12,
    "Title": 28,
    "Location": 24,
    "Difficulty": 12,
    "Status": 12,
    "Distance (km)": 14,
    "Elevation (m)": 14,
    "Duration": 10,
    "Month": 10,
    "Hikes": 8,
    "Metric": 22,
    "Value": 14,
    "Badge": 20,
    "Description": 40,
}

_NUMBER_FORMATS: dict[str, str] = {
    "Date": "dd/mm/yyyy",
    "Distance (km)": "0.00",
    "Elevation (m)": "#,##0",
    "Duration": "0.0",
    "Hikes": "0",
}


@dataclass(frozen=True)
class ExcelLayout:
    """Sheet names for the logbook report."""

    hikes_sheet: str = "Hikes"
    monthly_sheet: str = "Monthly"
    summary_sheet: str = "Summary"


def hikes_frame(hikes: Sequence[HikeRecord]) -> pd.DataFrame:
    """One row per hike, oldest first; undated hikes go last."""
    rows = [
        {
            "date": h.date.date() if h.date is not None else None,
            "title": h.title,
            "location": h.location,
            "difficulty": h.difficulty,
            "status": h.status,
            "distance": h.distance,
            "elevation": h.elevation,
            "duration": h.duration,
        }
        for h in hikes
    ]
    df = pd.DataFrame(rows, columns=list(_HIKE_COLUMNS))
    if df.empty:
        return df
    return df.sort_values("date", na_position="last").reset_index(drop=True)


def monthly_frame(summary: LogbookSummary) -> pd.DataFrame:
    return pd.DataFrame(
        [{"Month": m.month, "Hikes": m.hikes, "Distance (km)": m.distance} for m in summary.monthly],
        columns=["Month", "Hikes", "Distance (km)"],
    )


def summary_frame(summary: LogbookSummary) -> pd.DataFrame:
    """Metric/value rows: totals, counters and streaks."""
    stats = summary.stats
    rows: list[tuple[str, Any]] = [
        ("Total hikes", stats.total_hikes),
        ("Total distance (km)", stats.total_distance),
        ("Total elevation (m)", stats.total_elevation),
        ("Total duration", stats.total_duration),
        ("Current streak", summary.streaks.current_streak),
        ("Longest streak", summary.streaks.longest_streak),
    ]
    rows.extend((f"Difficulty: {k}", v) for k, v in stats.by_difficulty.items())
    rows.extend((f"Status: {k}", v) for k, v in stats.by_status.items())
    return pd.DataFrame(rows, columns=["Metric", "Value"])


def badges_frame(summary: LogbookSummary) -> pd.DataFrame:
    return pd.DataFrame(
        [{"Badge": b.name, "Description": b.description} for b in summary.badges],
        columns=["Badge", "Description"],
    )


def write_logbook_xlsx(
    summary: LogbookSummary,
    hikes: Sequence[HikeRecord],
    out_path: Path,
    layout: ExcelLayout,
) -> None:
    """Write the logbook report workbook.

    Args:
        summary: Derived stats/streaks/monthly/badges.
        hikes: Canonical hikes for the detail sheet.
        out_path: Output path for the XLSX file.
        layout: Sheet names.
    """
    out_path.parent.mkdir(parents=True, exist_ok=True)

    hikes_df = hikes_frame(hikes).rename(columns=_HIKE_COLUMNS)
    summary_df = summary_frame(summary)
    badges_df = badges_frame(summary)

    with pd.ExcelWriter(out_path, engine="openpyxl") as writer:
        hikes_df.to_excel(writer, index=False, sheet_name=layout.hikes_sheet)
        monthly_frame(summary).to_excel(
            writer, index=False, sheet_name=layout.monthly_sheet
        )
        summary_df.to_excel(writer, index=False, sheet_name=layout.summary_sheet)
        # Badges sit under the metrics, one blank row apart.
        badges_df.to_excel(
            writer,
            index=False,
            sheet_name=layout.summary_sheet,
            startrow=len(summary_df) + 2,
        )
        for name in (layout.hikes_sheet, layout.monthly_sheet, layout.summary_sheet):
            _format_sheet(writer.book[name])


def _style_header_row(ws: Any) -> None:
    """Negrita, alineación y borde en la fila de cabecera."""
    thin = Side(style="thin")
    border = Border(left=thin, right=thin, top=thin, bottom=thin)
    header_font = Font(bold=True)
    center = Alignment(horizontal="center", vertical="center", wrap_text=True)
    for cell in ws[1]:
        cell.font = header_font
        cell.alignment = center
        cell.border = border


def _style_body_rows(ws: Any) -> None:
    thin = Side(style="thin")
    border = Border(left=thin, right=thin, top=thin, bottom=thin)
    left = Alignment(horizontal="left", vertical="center")
    for row in ws.iter_rows(min_row=2):
        for cell in row:
            if cell.value is None:
                continue
            cell.alignment = left
            cell.border = border


def _get_header_col_index(ws: Any) -> dict[str, int]:
    """Mapa nombre de cabecera -> índice de columna (1-based)."""
    headers = [str(cell.value) for cell in ws[1]]
    return {name: idx + 1 for idx, name in enumerate(headers)}


def _apply_column_widths(ws: Any, col_index: dict[str, int]) -> None:
    for header, width in _COLUMN_WIDTHS.items():
        idx = col_index.get(header)
        if idx is not None:
            letter = ws.cell(row=1, column=idx).column_letter
            ws.column_dimensions[letter].width = width


def _apply_number_formats(ws: Any, col_index: dict[str, int]) -> None:
    for row in ws.iter_rows(min_row=2):
        for header, fmt in _NUMBER_FORMATS.items():
            idx = col_index.get(header)
            if idx is not None and idx <= len(row):
                row[idx - 1].number_format = fmt


def _format_sheet(ws: Any) -> None:
    """Apply borders, widths and number formats to a worksheet.

    Args:
        ws: openpyxl worksheet.
    """
    _style_header_row(ws)
    _style_body_rows(ws)
    col_index = _get_header_col_index(ws)
    _apply_column_widths(ws, col_index)
    _apply_number_formats(ws, col_index)
