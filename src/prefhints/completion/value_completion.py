"""
Value completion strategy for preference values.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from typing import Any

from prefhints.config import HintsConfig
from prefhints.domain.protocols import LintProviderRegistry, ThemeRegistry
from prefhints.domain.types import Candidate, TokenType, ValueType
from prefhints.logger import get_logger
from prefhints.schema.models import SchemaEntry
from prefhints.schema.registry import SchemaRegistry

from .strategy import CompletionRequest, CompletionStrategy

logger = get_logger("completion.value")

BOOLEAN_VALUES = ("false", "true")

# Option types whose allowed-value list applies to a scalar value.
_SCALAR_TYPES = (ValueType.STRING, ValueType.NUMBER)


class ValueCompletionStrategy(CompletionStrategy):
    """Suggests literal values for the key under the cursor."""

    def __init__(
        self,
        registry_provider: Callable[[], SchemaRegistry],
        language_provider: Callable[[], Mapping[str, Any]],
        lint_registry: LintProviderRegistry,
        theme_registry: ThemeRegistry,
        config: HintsConfig | None = None,
    ) -> None:
        self._registry_provider = registry_provider
        self._language_provider = language_provider
        self._lint_registry = lint_registry
        self._theme_registry = theme_registry
        self._config = config or HintsConfig()

    def can_handle(self, request: CompletionRequest) -> bool:
        return request.token_type is TokenType.VALUE

    def get_candidates(self, request: CompletionRequest) -> list[Candidate]:
        option = self._registry_provider().option_for(request.parent_key_name, request.key_name)
        values = self._values_for(option, request)
        if values is None:
            logger.debug(f"No value source for key {request.key_name!r} under {request.parent_key_name!r}")
            return []

        value_type = _candidate_type(option)
        description = option.description if option is not None else None

        logger.debug(f"ValueCompletionStrategy key={request.key_name!r} returning {len(values)} values")
        return [Candidate(raw_text=_to_text(value), value_type=value_type, description=description) for value in values]

    def _values_for(self, option: SchemaEntry | None, request: CompletionRequest) -> Sequence[Any] | None:
        context = request.context
        config = self._config

        if option is not None and option.value_type is ValueType.BOOLEAN:
            return BOOLEAN_VALUES

        if option is not None and option.allowed_values is not None:
            if option.value_type in _SCALAR_TYPES or (
                option.value_type is ValueType.ARRAY and context.is_array_element
            ):
                return option.allowed_values

        if (
            context.is_array_element
            and request.key_name == config.lint_key
            and request.parent_key_name in self._language_provider()
        ):
            return list(self._lint_registry.providers_for_language(request.parent_key_name))

        if request.key_name == config.theme_key:
            return [theme.name for theme in self._theme_registry.all_themes()]

        if request.parent_key_name in config.file_map_parents:
            return list(self._language_provider())

        return None


def _candidate_type(option: SchemaEntry | None) -> ValueType | None:
    if option is None:
        return None
    element_type = option.element_type
    return None if element_type is ValueType.NONE else element_type


def _to_text(value: Any) -> str:
    """Render a value as text so matching and highlighting always work on strings."""
    if isinstance(value, bool):
        return "true" if value else "false"
    return value if isinstance(value, str) else str(value)
