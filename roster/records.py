"""
Row -> StudentRecord mapping for the published roster sheet.

Header sniffing is a heuristic: a data row whose cell happens to contain a
marker is treated as a header. Pass header=True/False to skip sniffing.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Sequence, Tuple

from .decoder import Row, decode
from .models import StudentRecord
from .rules import HEADER_EXACT_CELLS, HEADER_MARKERS, STUDENT_COLUMNS

_logger = logging.getLogger(__name__)


def has_header(
    row: Sequence[str],
    markers: Sequence[str] = HEADER_MARKERS,
    exact: Sequence[str] = HEADER_EXACT_CELLS,
) -> bool:
    for cell in row:
        if cell in exact:
            return True
        if any(m in cell for m in markers):
            return True
    return False


def is_blank(row: Sequence[str]) -> bool:
    return all(cell == "" for cell in row)


def row_to_record(row: Sequence[str]) -> StudentRecord:
    """Map cells by position; missing cells become "" and extra cells are dropped."""
    values = {name: (row[i] if i < len(row) else "") for i, name in enumerate(STUDENT_COLUMNS)}
    return StudentRecord(**values)


def load_records(text: str, header: Optional[bool] = None) -> Tuple[List[StudentRecord], Dict[str, Any]]:
    """
    Decode a roster export and map its data rows to records.

    Returns (records, report) where report says whether a header row was
    dropped, whether that was sniffed, and how many blank rows were skipped.
    """
    rows: List[Row] = decode(text)

    sniffed = header is None
    if not rows:
        header_found = False
    elif sniffed:
        header_found = has_header(rows[0])
    else:
        header_found = bool(header)

    data_rows = rows[1:] if header_found else rows
    kept = [r for r in data_rows if not is_blank(r)]
    records = [row_to_record(r) for r in kept]
    skipped = len(data_rows) - len(kept)

    _logger.info("loaded %d student records (%d blank rows skipped)", len(records), skipped)

    report = {
        "records": len(records),
        "header": header_found,
        "header_sniffed": sniffed,
        "blank_rows_skipped": skipped,
    }
    return records, report
