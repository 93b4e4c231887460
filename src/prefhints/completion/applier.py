"""
Insertion engine: turns an accepted candidate into a text edit.
"""

from __future__ import annotations

from collections.abc import Callable

from prefhints.config import HintsConfig
from prefhints.domain.protocols import Editor
from prefhints.domain.types import Candidate, Context, InsertionPlan, TokenType, ValueType
from prefhints.logger import get_logger
from prefhints.utils import is_punctuation_only, leading_quote

logger = get_logger("completion.applier")

# Empty value bodies appended after a new key, by declared type.
EMPTY_BODIES: dict[ValueType, str] = {
    ValueType.OBJECT: "{}",
    ValueType.ARRAY: "[]",
    ValueType.STRING: '""',
}

# Bodies after which value completion should start right away.
_CONTINUING_BODIES = (ValueType.ARRAY, ValueType.STRING)

_QUOTED_VALUE_TYPES = (None, ValueType.NONE, ValueType.STRING)


class InsertionEngine:
    """Computes and applies the edit for an accepted completion."""

    def __init__(
        self,
        config: HintsConfig | None = None,
        is_disallowed: Callable[[str], bool] = is_punctuation_only,
    ) -> None:
        self._config = config or HintsConfig()
        self._is_disallowed = is_disallowed

    def plan(self, candidate: Candidate, context: Context, cursor: int) -> InsertionPlan | None:
        """
        Compute the edit for ``candidate``.

        Args:
            candidate: The accepted candidate
            context: Cursor context resolved at acceptance time
            cursor: Absolute cursor offset

        Returns:
            The insertion plan, or ``None`` when the context has no token type.
        """
        if context.token_type is TokenType.KEY:
            return self._plan_key(candidate, context, cursor)
        if context.token_type is TokenType.VALUE:
            return self._plan_value(candidate, context, cursor)
        logger.debug("Context has no token type, nothing to insert")
        return None

    def apply(self, plan: InsertionPlan, editor: Editor) -> None:
        editor.replace_range(plan.new_text, plan.replace_from, plan.replace_to)
        editor.set_cursor(plan.new_cursor_offset)
        logger.info(
            f"Inserted {plan.new_text!r} over [{plan.replace_from}, {plan.replace_to}) "
            f"cursor={plan.new_cursor_offset} continue={plan.continue_session}"
        )

    def _plan_key(self, candidate: Candidate, context: Context, cursor: int) -> InsertionPlan:
        quote = leading_quote(context.token.text) or self._config.default_quote
        text = f"{quote}{candidate.raw_text}{quote}"

        body = ""
        if not context.should_replace_whole_token:
            body = EMPTY_BODIES.get(candidate.value_type, "")
            text = f"{text}: {body}"

        start = max(cursor - context.cursor_offset_in_token, 0)
        end = max(context.token.end_offset, start)

        if body:
            # Cursor goes between the paired characters.
            new_cursor = start + len(text) - 1
            continue_session = candidate.value_type in _CONTINUING_BODIES
        else:
            new_cursor = start + len(text)
            # Scalar keys end at ": " so value hints can start right away.
            continue_session = not context.should_replace_whole_token

        return InsertionPlan(
            replace_from=start,
            replace_to=end,
            new_text=text,
            new_cursor_offset=new_cursor,
            continue_session=continue_session,
        )

    def _plan_value(self, candidate: Candidate, context: Context, cursor: int) -> InsertionPlan:
        token = context.token

        if self._is_disallowed(token.text):
            start = end = cursor
        elif context.should_replace_whole_token:
            start, end = token.start_offset, token.end_offset
        else:
            start = max(cursor - context.cursor_offset_in_token, 0)
            end = max(token.end_offset, start)

        text = candidate.raw_text
        if candidate.value_type in _QUOTED_VALUE_TYPES:
            quote = leading_quote(token.text) or self._config.default_quote
            text = f"{quote}{text}{quote}"

        return InsertionPlan(
            replace_from=start,
            replace_to=end,
            new_text=text,
            new_cursor_offset=start + len(text),
            continue_session=False,
        )
