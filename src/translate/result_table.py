"""Result table I/O.

The result table is a headerless UTF-8 file with one ``original,translation``
row per line. It has no quoting: the LAST comma on a line separates the two
fields, so commas survive in the original text but never in the
translation. ``format_row`` enforces that before anything is written.

Rows are only ever appended; earlier rows are never rewritten.
"""

import re
from pathlib import Path

from common.constants import RESULT_DELIMITER

from .models import ResultRow

_LINE_BREAKS = re.compile(r"[\r\n]+")


def _clean_original(text: str) -> str:
    return _LINE_BREAKS.sub(" ", text.replace('"', "")).strip()


def clean_translation(text: str) -> str:
    """Strip quotes, commas, periods and line breaks from a translation and lower-case it."""
    text = text.replace('"', "").replace(RESULT_DELIMITER, "").replace(".", "")
    return _LINE_BREAKS.sub(" ", text).lower().strip()


def format_row(original: str, translation: str) -> str:
    """
    Render one result table line (without the newline).

    Quotes and line breaks are stripped from both fields. The translation
    additionally loses commas and periods and is lower-cased.

    Example:
        >>> format_row('le "chat"', "The Cat.")
        'le chat,the cat'
    """
    return f"{_clean_original(original)}{RESULT_DELIMITER}{clean_translation(translation)}"


def parse_row(line: str) -> ResultRow:
    """Split a result table line on its last comma."""
    original, sep, translation = line.rpartition(RESULT_DELIMITER)
    if not sep:
        return ResultRow(original=line, translation="")
    return ResultRow(original=original, translation=translation)


def read_result_table(path: Path) -> list[ResultRow]:
    """
    Read every row of the result table.

    Args:
        path: Result table file

    Returns:
        Rows in file order, or an empty list if the file does not exist yet
    """
    if not path.exists():
        return []

    lines = path.read_text(encoding="utf-8").splitlines()
    return [parse_row(line) for line in lines if line.strip()]


def append_rows(path: Path, rows: list[ResultRow]) -> None:
    """
    Append rows at the end of the result table in a single write.

    A file left without a trailing newline gets one first so the new rows
    never merge into the last existing line.

    Args:
        path: Result table file (created if missing)
        rows: Rows to append, in order
    """
    if not rows:
        return

    prefix = ""
    if path.exists():
        existing = path.read_bytes()
        if existing and not existing.endswith(b"\n"):
            prefix = "\n"

    body = "".join(f"{format_row(row.original, row.translation)}\n" for row in rows)

    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "a", encoding="utf-8", newline="\n") as f:
        f.write(prefix + body)
