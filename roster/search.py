"""
Diacritic, letter-shape and case insensitive search over student records.

normalize() maps text to a comparison-only form; matches() is plain
substring containment on that form, so word order in the query matters.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional

from .models import StudentRecord
from .rules import ARABIC_DIACRITIC_RANGES, LETTER_FOLDS, SEARCH_FIELDS, SEARCH_SEPARATOR, TATWEEL


def _build_table() -> Dict[int, Optional[str]]:
    table: Dict[int, Optional[str]] = {}
    for start, end in ARABIC_DIACRITIC_RANGES:
        for cp in range(start, end + 1):
            table[cp] = None
    for src, dst in LETTER_FOLDS.items():
        table[ord(src)] = dst
    table[ord(TATWEEL)] = None
    return table


# read-only after import
_TRANSLATION = _build_table()


def normalize(s: str) -> str:
    if not s:
        return ""
    s = s.translate(_TRANSLATION).casefold()
    return " ".join(s.split())


def matches(haystack: str, query: str) -> bool:
    """True if the normalized query occurs in the normalized haystack. An empty query matches anything."""
    return normalize(query) in normalize(haystack)


def search_text(record: StudentRecord) -> str:
    return SEARCH_SEPARATOR.join(getattr(record, name) for name in SEARCH_FIELDS)


def filter_records(
    records: Iterable[StudentRecord],
    query: str = "",
    level: Optional[str] = None,
) -> List[StudentRecord]:
    """
    Keep records whose composite search text contains the query and,
    when a level is given, whose level is exactly that level.
    """
    out = []
    for record in records:
        if level and record.level != level:
            continue
        if not matches(search_text(record), query):
            continue
        out.append(record)
    return out
