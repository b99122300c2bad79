"""
Static parsing and matching rules.

Everything here is data: adding a folded letter or a header marker is a
one-line change to a table, never to control flow.
"""

BOM = "\ufeff"
DELIMITER = ","
QUOTE = '"'
LINE_TERMINATORS = ("\r", "\n")
OUTPUT_LINE_TERMINATOR = "\n"

# Characters trimmed from both ends of a field: Unicode space separators,
# tab, vertical tab, form feed, line terminators and ZWNBSP. The
# information separators U+001C-U+001F and NEL (U+0085) are data.
FIELD_WHITESPACE = (
    "\t\n\x0b\x0c\r "
    "\u00a0\u1680\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000\ufeff"
)

# First-row sniffing. A row is a header if any cell contains one of the
# markers, or is exactly one of the exact cells ("م" is the serial column).
HEADER_MARKERS = ("اسم", "الدارس")
HEADER_EXACT_CELLS = ("م",)

# Positional column order of the published sheet.
STUDENT_COLUMNS = (
    "id",
    "name",
    "nationality",
    "dob",
    "phone",
    "age",
    "qualification",
    "job",
    "address",
    "reg_date",
    "level",
    "part",
    "national_id",
    "category",
    "period",
    "expiry_id",
    "teacher",
    "fees",
    "circle",
    "completion",
)

# Fields joined into one haystack for free-text search.
SEARCH_FIELDS = ("name", "phone", "teacher", "circle", "national_id")
SEARCH_SEPARATOR = " "

# Arabic harakat, Quranic annotation marks and superscript alef (inclusive ranges).
ARABIC_DIACRITIC_RANGES = (
    (0x0610, 0x061A),
    (0x064B, 0x065F),
    (0x0670, 0x0670),
    (0x06D6, 0x06DC),
    (0x06DF, 0x06E8),
    (0x06EA, 0x06ED),
)

TATWEEL = "\u0640"

LETTER_FOLDS = {
    "\u0623": "\u0627",  # alef with hamza above
    "\u0625": "\u0627",  # alef with hamza below
    "\u0622": "\u0627",  # alef with madda
    "\u0671": "\u0627",  # alef wasla
    "\u0649": "\u064a",  # alef maksura -> yeh
    "\u0629": "\u0647",  # teh marbuta -> heh
}
