"""Parsing of the e-reader's bulk highlights export.

The export is a single text file of blocks separated by a ``==========``
line. Each block looks like::

    L'homme qui savait la langue des serpents (Andrus Kivirähk)
    - Your Highlight on page 12 | Location 170-171 | Added on ...

    le highlighted passage

Counting non-blank lines, line 1 is the attribution and line 3 the text.
"""

import re

from common.constants import CLIPPING_DELIMITER, CLIPPING_MIN_LINES
from common.logger import get_logger

from .models import Highlight

logger = get_logger(__name__)

_DELIMITER_LINE = re.compile(rf"^{re.escape(CLIPPING_DELIMITER)}[ \t]*$", re.MULTILINE)

# Punctuation dropped outright, and punctuation turned into a word break
_REMOVED_CHARS = ","
_SPACED_CHARS = ".:!?»«"
_SANITIZE_TABLE = str.maketrans(
    {**{c: None for c in _REMOVED_CHARS}, **{c: " " for c in _SPACED_CHARS}}
)
_WHITESPACE = re.compile(r"\s+")


def split_blocks(content: str) -> list[str]:
    """Split an export into its raw blocks, dropping empty ones."""
    content = content.lstrip("\ufeff").replace("\r\n", "\n").replace("\r", "\n")
    return [block for block in _DELIMITER_LINE.split(content) if block.strip()]


def sanitize_highlight(text: str) -> str:
    """
    Normalize a highlight for the staging list.

    Commas are removed, sentence punctuation and guillemets become spaces,
    whitespace is collapsed and the result is lower-cased.

    Example:
        >>> sanitize_highlight("Bonjour, le Monde!")
        'bonjour le monde'
    """
    text = text.translate(_SANITIZE_TABLE)
    return _WHITESPACE.sub(" ", text).lower().strip()


def parse_clippings(content: str, work_title: str) -> list[Highlight]:
    """
    Extract the highlights of one work from an export.

    Blocks with fewer than three non-blank lines are skipped without being
    counted. Ordinals are assigned among matching blocks only.

    Args:
        content: Full export text
        work_title: Substring identifying the work in the attribution line

    Returns:
        Highlights in export order
    """
    highlights = []
    ordinal = 0
    skipped = 0

    for block in split_blocks(content):
        lines = [line.strip() for line in block.split("\n") if line.strip()]
        if len(lines) < CLIPPING_MIN_LINES:
            skipped += 1
            continue

        if work_title not in lines[0].lstrip("\ufeff"):
            continue

        highlights.append(Highlight(text=sanitize_highlight(lines[2]), ordinal=ordinal))
        ordinal += 1

    if skipped:
        logger.debug(f"Skipped {skipped} malformed block(s)")

    return highlights
