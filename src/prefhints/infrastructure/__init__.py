"""In-memory implementations of the collaborator protocols."""

from .memory import (
    InMemoryEditor,
    InMemoryPreferenceStore,
    NamedTheme,
    StaticContextAnalyzer,
    StaticLanguageRegistry,
    StaticLintRegistry,
    StaticThemeRegistry,
)

__all__ = [
    "InMemoryEditor",
    "InMemoryPreferenceStore",
    "NamedTheme",
    "StaticContextAnalyzer",
    "StaticLanguageRegistry",
    "StaticLintRegistry",
    "StaticThemeRegistry",
]
