"""
CSV decoding for published sheet exports.

Responsibilities:
- bytes -> text (encoding detection, BOM aware)
- text -> rows (quoted fields, embedded delimiters/newlines, "" escapes,
  mixed line terminators)
- rows -> text (re-serialization that decodes back to the same rows)

Decoding is lenient and total: an unterminated quote is closed at end of
input and ragged rows are returned as-is. Callers that need a fixed shape
validate it themselves.
"""

from __future__ import annotations

import enum
import logging
from typing import List

from charset_normalizer import from_bytes

from .rules import BOM, DELIMITER, FIELD_WHITESPACE, LINE_TERMINATORS, OUTPUT_LINE_TERMINATOR, QUOTE

_logger = logging.getLogger(__name__)

Row = List[str]

_NEEDS_QUOTING = frozenset((DELIMITER, QUOTE) + LINE_TERMINATORS)


def _trim(value: str) -> str:
    return value.strip(FIELD_WHITESPACE)


class ParseState(enum.Enum):
    UNQUOTED = "unquoted"
    QUOTED = "quoted"


def decode_bytes(raw: bytes) -> str:
    """
    Turn an uploaded/fetched payload into text.

    Rules:
    - Detect encoding best-effort via charset-normalizer.
    - UTF-8 input starting with a BOM is decoded with utf-8-sig.
    - If decode fails, fall back to UTF-8, then to replacement characters.
    """
    if not raw:
        return ""

    detected = None
    match = from_bytes(raw).best()
    if match is not None:
        detected = match.encoding

    decode_used = detected or "utf-8"
    if raw.startswith(b"\xef\xbb\xbf") and (decode_used.lower().replace("-", "_") in ("utf_8", "utf8")):
        decode_used = "utf-8-sig"

    try:
        return raw.decode(decode_used)
    except (LookupError, UnicodeDecodeError):
        _logger.warning("decode with %s failed, retrying as utf-8", decode_used)

    try:
        return raw.decode("utf-8-sig")
    except UnicodeDecodeError:
        _logger.warning("utf-8 decode failed, substituting replacement characters")
        return raw.decode("utf-8", errors="replace")


def decode(text: str) -> List[Row]:
    """Split CSV text into rows of trimmed string fields."""
    if text.startswith(BOM):
        text = text[len(BOM):]

    rows: List[Row] = []
    row: Row = []
    field: List[str] = []
    state = ParseState.UNQUOTED

    i = 0
    n = len(text)
    while i < n:
        char = text[i]
        nxt = text[i + 1] if i + 1 < n else ""

        if state is ParseState.QUOTED:
            if char == QUOTE and nxt == QUOTE:
                field.append(QUOTE)
                i += 1
            elif char == QUOTE:
                state = ParseState.UNQUOTED
            else:
                field.append(char)
        elif char == QUOTE:
            state = ParseState.QUOTED
        elif char == DELIMITER:
            row.append(_trim("".join(field)))
            field = []
        elif char in LINE_TERMINATORS:
            if row or field:
                row.append(_trim("".join(field)))
                rows.append(row)
            row = []
            field = []
            if char == "\r" and nxt == "\n":
                i += 1
        else:
            field.append(char)
        i += 1

    # no trailing newline, or a quote left open at EOF
    if row or field:
        row.append(_trim("".join(field)))
        rows.append(row)

    return rows


def _encode_field(value: str) -> str:
    # a leading BOM would be stripped as the document BOM on the way back in
    if value and (value != _trim(value) or value.startswith(BOM) or any(c in _NEEDS_QUOTING for c in value)):
        return QUOTE + value.replace(QUOTE, QUOTE + QUOTE) + QUOTE
    return value


def encode(rows: List[Row]) -> str:
    """
    Serialize rows so that decode(encode(rows)) == rows for any decoded rows.

    A row made of a single empty field is written as a lone space; an
    empty line would be skipped as a blank line on the way back in.
    """
    lines = []
    for row in rows:
        if row == [""]:
            lines.append(" ")
            continue
        lines.append(DELIMITER.join(_encode_field(v) for v in row))
    return OUTPUT_LINE_TERMINATOR.join(lines)
