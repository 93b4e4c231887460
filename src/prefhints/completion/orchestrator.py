"""
Candidate resolver that coordinates completion strategies.
"""

from __future__ import annotations

from collections.abc import Sequence

from prefhints.domain.types import Candidate, Context
from prefhints.logger import get_logger

from .strategy import CompletionRequest, CompletionStrategy

logger = get_logger("completion.resolver")


class CandidateResolver:
    """Selects the first strategy able to serve the current context."""

    def __init__(self, strategies: Sequence[CompletionStrategy]) -> None:
        self._strategies = list(strategies)

    def resolve(self, context: Context) -> list[Candidate]:
        request = CompletionRequest(context)
        for strategy in self._strategies:
            try:
                if strategy.can_handle(request):
                    logger.debug(f"Strategy {strategy.__class__.__name__} selected for completion")
                    return strategy.get_candidates(request)
            except Exception:
                logger.exception(f"Completion strategy {strategy.__class__.__name__} failed")
                return []
        logger.debug("No completion strategy matched current context")
        return []
