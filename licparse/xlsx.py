"""Utilities for exporting segmented licenses to Excel workbooks."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List

from openpyxl import Workbook  # type: ignore[import-untyped]
from openpyxl.styles import Alignment  # type: ignore[import-untyped]
from openpyxl.utils import get_column_letter  # type: ignore[import-untyped]
from openpyxl.worksheet.table import (  # type: ignore[import-untyped]
    Table,
    TableStyleInfo,
)

from licparse.json_utils import json_dumps
from licparse.segmenter import CENTERED_INDENT

Sheets = Dict[str, List[Dict[str, Any]]]


def _flatten(entries: List[Dict[str, Any]]) -> Sheets:
    """Flatten serialized license entries into tabular sheet data.

    Args:
        entries: License entries as produced by ``LicenseEntry.to_dict``.

    Returns:
        Mapping of sheet names to row dictionaries.
    """

    sheets: Sheets = {"LicenseEntry": [], "Paragraph": []}

    for entry_index, entry in enumerate(entries, start=1):
        entry_id = f"license_{entry_index}"
        paragraphs = entry.get("paragraphs", [])

        sheets["LicenseEntry"].append(
            {
                "entry_id": entry_id,
                "packages": entry.get("packages", []),
                "source": entry.get("source"),
                "paragraph_count": len(paragraphs),
            }
        )

        for par_index, paragraph in enumerate(paragraphs, start=1):
            indent = paragraph["indent"]
            sheets["Paragraph"].append(
                {
                    "par_id": f"{entry_id}_par_{par_index}",
                    "parent_id": entry_id,
                    "index": par_index,
                    "indent": None if indent == CENTERED_INDENT else indent,
                    "centered": indent == CENTERED_INDENT,
                    "text": paragraph["text"],
                }
            )

    # Drop sheets for which no data was recorded.
    return {name: rows for name, rows in sheets.items() if rows}


def write_workbook(entries: List[Dict[str, Any]], path: Path) -> None:
    """Write segmented license entries into an Excel workbook.

    Args:
        entries: License entries as produced by ``LicenseEntry.to_dict``.
        path: Destination file path for the workbook.
    """

    data = _flatten(entries)

    workbook = Workbook()

    # Remove the default sheet created by openpyxl when present.
    default_sheet = workbook.active
    if default_sheet is not None:
        workbook.remove(default_sheet)

    # A workbook needs at least one sheet to be saved.
    if not data:
        workbook.create_sheet(title="LicenseEntry").append(
            ["entry_id", "packages", "source", "paragraph_count"]
        )

    for sheet_name, rows in data.items():
        ws = workbook.create_sheet(title=sheet_name)

        # Write header row based on dictionary keys.
        headers = list(rows[0].keys())
        ws.append(headers)

        # Track which column indexes require wrapped text and custom widths.
        wrap_columns: set[int] = set()
        list_columns: set[int] = set()
        long_text_columns: set[int] = set()

        for row in rows:
            values: List[Any] = []

            for idx, header in enumerate(headers):
                cell_value = row.get(header)

                # Package lists are stored as JSON strings.
                if isinstance(cell_value, (list, dict)):
                    wrap_columns.add(idx)
                    list_columns.add(idx)
                    cell_value = json_dumps(cell_value)

                if isinstance(cell_value, str) and len(cell_value) > 50:
                    wrap_columns.add(idx)
                    long_text_columns.add(idx)

                values.append(cell_value)

            ws.append(values)

        # Apply wrap text alignment to the marked columns.
        for col_idx in wrap_columns:
            for col_cells in ws.iter_cols(
                min_col=col_idx + 1,
                max_col=col_idx + 1,
                min_row=1,
                max_row=ws.max_row,
            ):
                for cell in col_cells:
                    cell.alignment = Alignment(wrapText=True)

        # Set column widths based on the contained data type.
        for idx in range(len(headers)):
            col_letter = get_column_letter(idx + 1)
            if idx in list_columns:
                ws.column_dimensions[col_letter].width = 40
            elif idx in long_text_columns:
                ws.column_dimensions[col_letter].width = 100
            else:
                ws.column_dimensions[col_letter].width = 14

        end_column = get_column_letter(len(headers))
        end_row = len(rows) + 1
        table = Table(displayName=sheet_name, ref=f"A1:{end_column}{end_row}")

        # Apply a simple table style with row stripes for readability.
        style = TableStyleInfo(name="TableStyleMedium9", showRowStripes=True)
        table.tableStyleInfo = style

        ws.add_table(table)

    workbook.save(path)
