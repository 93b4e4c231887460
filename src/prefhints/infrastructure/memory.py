"""In-memory collaborator implementations.

These back the CLI and the test suite. A real host supplies its own
preference system, language registry and editor; the engine only relies on
the protocols in ``prefhints.domain.protocols``.
"""

from __future__ import annotations

import copy
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from textual_autocomplete import TargetState

from prefhints.domain.types import Context
from prefhints.events.bus import EventBus
from prefhints.events.types import LanguageAdded, PreferenceDefined, SettingChanged
from prefhints.logger import get_logger
from prefhints.utils import is_punctuation_only

logger = get_logger(__name__)


class InMemoryPreferenceStore:
    """Dictionary-backed preference store.

    Holds preference descriptors and current values. When an event bus is
    attached, ``define_preference`` publishes ``PreferenceDefined`` and
    ``set`` publishes ``SettingChanged``.

    Example:
        >>> store = InMemoryPreferenceStore()
        >>> store.define_preference("showCodeHints", "boolean", True)
        >>> store.get("showCodeHints")
        True
    """

    def __init__(
        self,
        definitions: Mapping[str, Mapping[str, Any]] | None = None,
        event_bus: EventBus | None = None,
    ) -> None:
        self._definitions: dict[str, dict[str, Any]] = {
            name: copy.deepcopy(dict(definition)) for name, definition in (definitions or {}).items()
        }
        self._values: dict[str, Any] = {
            name: definition["initial"] for name, definition in self._definitions.items() if "initial" in definition
        }
        self._event_bus = event_bus

    def define_preference(
        self,
        name: str,
        value_type: str,
        default: Any,
        description: str | None = None,
    ) -> None:
        definition = self._definitions.setdefault(name, {})
        definition.update({"type": value_type, "initial": default})
        if description is not None:
            definition["description"] = description
        self._values.setdefault(name, default)
        logger.debug(f"Defined preference '{name}' ({value_type}, default={default!r})")
        if self._event_bus is not None:
            self._event_bus.publish(PreferenceDefined(name=name))

    def get(self, name: str) -> Any:
        return self._values.get(name)

    def set(self, name: str, value: Any) -> None:
        self._values[name] = value
        if self._event_bus is not None:
            self._event_bus.publish(SettingChanged(name=name, value=value))

    def get_all_preferences(self) -> Mapping[str, Mapping[str, Any]]:
        return copy.deepcopy(self._definitions)


class StaticLanguageRegistry:
    """Language registry over a fixed mapping."""

    def __init__(self, languages: Mapping[str, Any] | None = None, event_bus: EventBus | None = None) -> None:
        self._languages: dict[str, Any] = dict(languages or {})
        self._event_bus = event_bus

    def get_languages(self) -> Mapping[str, Any]:
        return dict(self._languages)

    def add_language(self, language_id: str, metadata: Any = None) -> None:
        self._languages[language_id] = metadata or {}
        if self._event_bus is not None:
            self._event_bus.publish(LanguageAdded(language_id=language_id))


class StaticLintRegistry:
    """Lint provider ids registered per language."""

    def __init__(self, providers: Mapping[str, Sequence[str]] | None = None) -> None:
        self._providers = {language: list(ids) for language, ids in (providers or {}).items()}

    def providers_for_language(self, language_id: str) -> Sequence[str]:
        return list(self._providers.get(language_id, []))


@dataclass(frozen=True)
class NamedTheme:
    name: str


class StaticThemeRegistry:
    def __init__(self, theme_names: Sequence[str] | None = None) -> None:
        self._themes = [NamedTheme(name) for name in theme_names or []]

    def all_themes(self) -> Sequence[NamedTheme]:
        return list(self._themes)


class InMemoryEditor:
    """A single-buffer editor with an absolute-offset cursor."""

    def __init__(
        self,
        text: str = "",
        cursor: int | None = None,
        document_name: str = "brackets.json",
        mode: str = "application/json",
    ) -> None:
        self.text = text
        self.cursor = len(text) if cursor is None else cursor
        self._document_name = document_name
        self.mode = mode

    @property
    def document_name(self) -> str:
        return self._document_name

    def mode_for_selection(self) -> str:
        return self.mode

    def current_cursor(self) -> int:
        return self.cursor

    def set_cursor(self, offset: int) -> None:
        self.cursor = max(0, min(offset, len(self.text)))

    def replace_range(self, new_text: str, start: int, end: int) -> None:
        self.text = f"{self.text[:start]}{new_text}{self.text[end:]}"

    @property
    def target_state(self) -> TargetState:
        """Snapshot of the buffer in the shape autocomplete widgets expect."""
        return TargetState(text=self.text, cursor_position=self.cursor)

    def sync(self, state: TargetState) -> None:
        """Mirror an autocomplete target's text and cursor into this buffer."""
        self.text = state.text
        self.cursor = state.cursor_position


class StaticContextAnalyzer:
    """Analyzer that reports a preset context regardless of the cursor.

    Useful when the caller already knows where the cursor is, such as the
    CLI which builds the context from its arguments.
    """

    def __init__(self, context: Context | None) -> None:
        self.context = context

    def resolve_context(self, editor: Any, position: int, allow_nested_analysis: bool) -> Context | None:
        return self.context

    def is_disallowed_key_value_text(self, text: str) -> bool:
        return is_punctuation_only(text)
