"""Query extraction from the token under the cursor."""

from __future__ import annotations

from collections.abc import Callable

from prefhints.domain.types import Context
from prefhints.utils import is_punctuation_only, strip_quotes


def compute_query(
    context: Context,
    is_disallowed: Callable[[str], bool] = is_punctuation_only,
) -> str:
    """
    Return the string used for matching.

    The token text is cut at the cursor, surrounding quotes are removed and
    the result is trimmed. Text that cannot be part of a bare key or value
    resets the query to empty.
    """
    typed = context.token.text[: context.cursor_offset_in_token]
    query = strip_quotes(typed).strip()
    if is_disallowed(query):
        return ""
    return query
