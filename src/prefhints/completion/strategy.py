"""
Strategy interfaces for candidate resolution.

Each strategy serves one token type, which keeps key and value
resolution in focused, separately testable components.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from prefhints.domain.types import Candidate, Context, TokenType


@dataclass(slots=True)
class CompletionRequest:
    """Snapshot of the cursor context used by completion strategies."""

    context: Context

    @property
    def token_type(self) -> TokenType | None:
        return self.context.token_type

    @property
    def parent_key_name(self) -> str:
        return self.context.parent_key_name

    @property
    def key_name(self) -> str:
        return self.context.key_name


class CompletionStrategy(Protocol):
    """Contract implemented by all candidate strategies."""

    def can_handle(self, request: CompletionRequest) -> bool:
        """Return ``True`` when this strategy should produce candidates."""

        ...

    def get_candidates(self, request: CompletionRequest) -> list[Candidate]:
        """Return unranked candidates for the current context."""

        ...
