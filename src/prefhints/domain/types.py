"""Value objects passed between the hint engine components.

Everything here is request scoped: a ``Context`` is produced per completion
request, candidates and match records live until the presentation layer has
rendered them, and an ``InsertionPlan`` is discarded once applied.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class ValueType(str, Enum):
    """Declared type of a preference value."""

    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    OBJECT = "object"
    ARRAY = "array"
    NONE = "none"

    @classmethod
    def parse(cls, raw: object) -> "ValueType":
        """Map a raw type tag to a member, unknown tags become ``NONE``."""
        if isinstance(raw, cls):
            return raw
        try:
            return cls(str(raw).lower())
        except ValueError:
            return cls.NONE


class TokenType(Enum):
    """Whether the cursor sits on an object key or on a value."""

    KEY = "key"
    VALUE = "value"


@dataclass(frozen=True, slots=True)
class Token:
    """The document token under the cursor."""

    text: str
    start_offset: int
    end_offset: int


@dataclass(frozen=True, slots=True)
class Context:
    """Structural location of the cursor, as reported by the context analyzer.

    ``parent_key_name`` and ``key_name`` are empty strings at document root.
    """

    token_type: TokenType | None
    token: Token
    parent_key_name: str = ""
    key_name: str = ""
    cursor_offset_in_token: int = 0
    is_array_element: bool = False
    should_replace_whole_token: bool = False
    exclusion_list: frozenset[str] = field(default_factory=frozenset)


@dataclass(frozen=True, slots=True)
class Candidate:
    """A single completion string with its type and description."""

    raw_text: str
    value_type: ValueType | None = None
    description: str | None = None


@dataclass(frozen=True, slots=True)
class HighlightRange:
    """A slice of a candidate's text, flagged when it matched the query."""

    text: str
    matched: bool


@dataclass(frozen=True, slots=True)
class MatchRecord:
    """A candidate annotated with how it matched the typed query."""

    candidate: Candidate
    ranges: tuple[HighlightRange, ...]
    rank_key: tuple

    @property
    def text(self) -> str:
        return self.candidate.raw_text


@dataclass(frozen=True, slots=True)
class InsertionPlan:
    """The text edit produced when a candidate is accepted."""

    replace_from: int
    replace_to: int
    new_text: str
    new_cursor_offset: int
    continue_session: bool


@dataclass(slots=True)
class CompletionResult:
    """Ranked suggestions handed to the presentation layer."""

    candidates: list[MatchRecord]
    query: str
    select_first_by_default: bool = True
    handle_wide_results: bool = False
    show_metadata: bool = False


@dataclass(slots=True)
class ApplyResult:
    """Outcome of applying a completion to the editor."""

    continue_session: bool
