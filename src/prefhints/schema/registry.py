"""
Schema registry: the static catalog of known preference keys.

The registry is built in two passes. The reserved root entries
(``language`` and ``path``) are seeded first, then every preference
descriptor that is not excluded from hints is folded in with
``merge_entries``. Descriptors that fail validation are skipped.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import Any

from pydantic import ValidationError

from prefhints.config import HintsConfig
from prefhints.domain.types import ValueType
from prefhints.logger import get_logger

from .models import PreferenceDefinition, SchemaEntry

logger = get_logger("schema.registry")


def merge_entries(existing: SchemaEntry, incoming: SchemaEntry) -> SchemaEntry:
    """
    Merge ``incoming`` over ``existing``.

    Scalar fields follow last-write-wins, except that an unset incoming
    field never erases an existing value. Nested keys are unioned, with
    incoming children merged over existing ones of the same name. Nested
    keys are dropped when the merged entry is no longer an object.
    """
    value_type = existing.value_type if incoming.value_type is ValueType.NONE else incoming.value_type

    children: dict[str, SchemaEntry] | None = None
    if value_type is ValueType.OBJECT and (existing.children or incoming.children):
        children = dict(existing.children or {})
        for name, child in (incoming.children or {}).items():
            children[name] = merge_entries(children[name], child) if name in children else child

    return SchemaEntry(
        key=existing.key,
        value_type=value_type,
        description=incoming.description if incoming.description is not None else existing.description,
        children=children,
        allowed_values=incoming.allowed_values if incoming.allowed_values is not None else existing.allowed_values,
        item_type=incoming.item_type if incoming.item_type is not None else existing.item_type,
    )


class SchemaRegistry(Mapping[str, SchemaEntry]):
    """
    Read-only mapping from root preference key to ``SchemaEntry``.

    Iteration follows registration order: built-ins first, then
    preferences in the order the store reported them.
    """

    def __init__(self, entries: Mapping[str, SchemaEntry] | None = None) -> None:
        self._entries: dict[str, SchemaEntry] = dict(entries or {})

    @classmethod
    def builtins(cls, config: HintsConfig | None = None) -> dict[str, SchemaEntry]:
        config = config or HintsConfig()
        return {
            config.language_key: SchemaEntry(
                key=config.language_key,
                value_type=ValueType.OBJECT,
                description=config.language_description,
            ),
            config.path_key: SchemaEntry(
                key=config.path_key,
                value_type=ValueType.OBJECT,
                description=config.path_description,
            ),
        }

    @classmethod
    def build(
        cls,
        preferences: Mapping[str, Any],
        config: HintsConfig | None = None,
    ) -> "SchemaRegistry":
        """
        Build a registry from a preference set.

        Args:
            preferences: Preference descriptors keyed by preference id. Values may be
                raw mappings or ``PreferenceDefinition`` instances.
            config: Hint configuration naming the reserved root entries

        Returns:
            A new registry. Building never fails; malformed descriptors are skipped.
        """
        entries = cls.builtins(config)
        skipped = 0

        for key, raw in preferences.items():
            try:
                definition = raw if isinstance(raw, PreferenceDefinition) else PreferenceDefinition.model_validate(raw)
            except ValidationError as e:
                skipped += 1
                logger.debug(f"Skipping malformed preference descriptor '{key}': {e.error_count()} error(s)")
                continue

            if definition.exclude_from_hints:
                logger.debug(f"Preference '{key}' is excluded from hints")
                continue

            entry = SchemaEntry.from_definition(key, definition)
            entries[key] = merge_entries(entries[key], entry) if key in entries else entry

        logger.info(f"Schema registry built with {len(entries)} entries ({skipped} skipped)")
        return cls(entries)

    def __getitem__(self, key: str) -> SchemaEntry:
        return self._entries[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def children_of(self, key: str) -> dict[str, SchemaEntry] | None:
        """Nested key schema of ``key``, or ``None`` when it has none."""
        entry = self._entries.get(key)
        if entry is None:
            return None
        return entry.children

    def option_for(self, parent_key: str, key: str) -> SchemaEntry | None:
        """
        Resolve the option describing ``key``.

        A nested definition under ``parent_key`` wins over a root entry of
        the same name.
        """
        children = self.children_of(parent_key)
        if children and key in children:
            return children[key]
        return self._entries.get(key)
