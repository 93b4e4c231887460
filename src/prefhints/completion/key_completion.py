"""
Key completion strategy for object keys.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from prefhints.config import HintsConfig
from prefhints.domain.types import Candidate, TokenType, ValueType
from prefhints.logger import get_logger
from prefhints.schema.models import SchemaEntry
from prefhints.schema.registry import SchemaRegistry

from .strategy import CompletionRequest, CompletionStrategy

logger = get_logger("completion.key")


class KeyCompletionStrategy(CompletionStrategy):
    """Suggests preference keys that are valid under the current parent key."""

    def __init__(
        self,
        registry_provider: Callable[[], SchemaRegistry],
        language_provider: Callable[[], Mapping[str, Any]],
        config: HintsConfig | None = None,
    ) -> None:
        self._registry_provider = registry_provider
        self._language_provider = language_provider
        self._config = config or HintsConfig()

    def can_handle(self, request: CompletionRequest) -> bool:
        return request.token_type is TokenType.KEY

    def get_candidates(self, request: CompletionRequest) -> list[Candidate]:
        keys = self._eligible_keys(request.parent_key_name)
        excluded = request.context.exclusion_list

        candidates = [
            Candidate(raw_text=name, value_type=value_type, description=description)
            for name, (value_type, description) in keys.items()
            if name not in excluded
        ]
        logger.debug(
            f"KeyCompletionStrategy parent={request.parent_key_name!r} "
            f"eligible={len(keys)} returned={len(candidates)}"
        )
        return candidates

    def _eligible_keys(self, parent_key: str) -> dict[str, tuple[ValueType | None, str | None]]:
        registry = self._registry_provider()

        children = registry.children_of(parent_key)
        if children is not None:
            return _describe(children)

        if parent_key == self._config.language_key:
            return {language_id: (ValueType.OBJECT, None) for language_id in self._language_provider()}

        return _describe(registry)


def _describe(entries: Mapping[str, SchemaEntry]) -> dict[str, tuple[ValueType | None, str | None]]:
    return {
        name: (entry.value_type if entry.value_type is not ValueType.NONE else None, entry.description)
        for name, entry in entries.items()
    }
