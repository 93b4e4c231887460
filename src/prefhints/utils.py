"""
Utility functions shared by the hint engine.
"""

import os
import re

QUOTE_CHARS = ("'", '"')

# Tokens made only of whitespace, separators or an array opener carry no query text.
_PUNCTUATION_ONLY = re.compile(r"^[\s,:\[]*$")


def get_project_root() -> str:
    """
    Get the project root directory (parent of src/prefhints).

    Returns:
        Absolute path to the project root directory
    """
    return os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


def strip_quotes(text: str) -> str:
    """Remove one leading and one trailing quote character, if present."""
    if text[:1] in QUOTE_CHARS:
        text = text[1:]
    if text[-1:] in QUOTE_CHARS:
        text = text[:-1]
    return text


def is_punctuation_only(text: str) -> bool:
    """
    Return ``True`` when ``text`` holds only whitespace, commas, colons or ``[``.

    Such a token is a placeholder between JSON tokens rather than a partial
    key or value.
    """
    return bool(_PUNCTUATION_ONLY.match(text))


def leading_quote(text: str) -> str | None:
    """Return the quote character that opens ``text``, if any."""
    first = text[:1]
    return first if first in QUOTE_CHARS else None
