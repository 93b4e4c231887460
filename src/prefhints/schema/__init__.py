"""Schema registry and preference descriptor models."""

from .loader import HintSources, load_hint_sources
from .models import PreferenceDefinition, SchemaEntry
from .registry import SchemaRegistry, merge_entries

__all__ = [
    "HintSources",
    "load_hint_sources",
    "PreferenceDefinition",
    "SchemaEntry",
    "SchemaRegistry",
    "merge_entries",
]
