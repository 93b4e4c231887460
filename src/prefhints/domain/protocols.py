"""Protocols for the collaborators the hint engine consumes.

The engine never tokenizes documents, stores text or owns preferences.
These structural types describe the narrow slices of those services it
relies on, so hosts can plug in their own implementations and tests can
use the in-memory ones from ``prefhints.infrastructure``.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, Protocol

from prefhints.domain.types import Context

__all__ = [
    "Editor",
    "ContextAnalyzer",
    "PreferenceStore",
    "LanguageRegistry",
    "LintProviderRegistry",
    "ThemeRegistry",
    "Theme",
]


class Editor(Protocol):
    """Text-buffer service plus the editor facts the activation gate needs."""

    @property
    def document_name(self) -> str:
        """File name of the document being edited."""
        ...

    def mode_for_selection(self) -> str:
        """Content mode (MIME type) at the current selection."""
        ...

    def current_cursor(self) -> int:
        ...

    def set_cursor(self, offset: int) -> None:
        ...

    def replace_range(self, new_text: str, start: int, end: int) -> None:
        """Replace ``[start, end)`` with ``new_text``."""
        ...


class ContextAnalyzer(Protocol):
    """Tokenizer that locates the cursor within the JSON structure."""

    def resolve_context(
        self,
        editor: Editor,
        position: int,
        allow_nested_analysis: bool,
    ) -> Context | None:
        """Return the cursor context, or ``None`` when it cannot be determined.

        Args:
            editor: Editor holding the document
            position: Absolute cursor offset
            allow_nested_analysis: Whether to walk up nested objects to find
                the parent key and the sibling exclusion list
        """
        ...

    def is_disallowed_key_value_text(self, text: str) -> bool:
        """Return ``True`` when ``text`` cannot be part of a bare key or value."""
        ...


class PreferenceStore(Protocol):
    """Read access to the host preference system."""

    def get(self, name: str) -> Any:
        ...

    def get_all_preferences(self) -> Mapping[str, Mapping[str, Any]]:
        """Return every known preference descriptor keyed by preference id."""
        ...

    def define_preference(self, name: str, value_type: str, default: Any, description: str | None = None) -> None:
        ...


class LanguageRegistry(Protocol):
    def get_languages(self) -> Mapping[str, Any]:
        """Return language metadata keyed by language id."""
        ...


class LintProviderRegistry(Protocol):
    def providers_for_language(self, language_id: str) -> Sequence[str]:
        ...


class Theme(Protocol):
    name: str


class ThemeRegistry(Protocol):
    def all_themes(self) -> Sequence[Theme]:
        ...
