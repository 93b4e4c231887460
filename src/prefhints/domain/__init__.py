"""Domain types and collaborator protocols."""

from prefhints.domain.types import (
    ApplyResult,
    Candidate,
    CompletionResult,
    Context,
    HighlightRange,
    InsertionPlan,
    MatchRecord,
    Token,
    TokenType,
    ValueType,
)

__all__ = [
    "ApplyResult",
    "Candidate",
    "CompletionResult",
    "Context",
    "HighlightRange",
    "InsertionPlan",
    "MatchRecord",
    "Token",
    "TokenType",
    "ValueType",
]
