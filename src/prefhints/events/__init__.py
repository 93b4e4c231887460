"""Event system for preference, document and language notifications."""

from .bus import EventBus, EventHandler
from .types import ActiveDocumentChanged, Event, LanguageAdded, PreferenceDefined, SettingChanged

__all__ = [
    "EventBus",
    "EventHandler",
    "Event",
    "SettingChanged",
    "ActiveDocumentChanged",
    "LanguageAdded",
    "PreferenceDefined",
]
