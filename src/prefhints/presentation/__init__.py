"""Presentation adapters for autocomplete widgets."""

from .dropdown import PreferenceHintSource, highlight, to_dropdown_items

__all__ = ["PreferenceHintSource", "highlight", "to_dropdown_items"]
