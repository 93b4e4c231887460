"""Notifications the hint provider reacts to.

Hosts publish these on the ``EventBus`` when a preference changes, the
active document switches or a language is registered.
"""

import time
from dataclasses import dataclass, field
from typing import Any


@dataclass
class Event:
    """Base class for all events.

    The timestamp field is automatically set when the event is created.
    """

    timestamp: float = field(default_factory=time.time, init=False)
    """Timestamp when the event was created (Unix timestamp)."""


@dataclass
class SettingChanged(Event):
    """A named preference changed value."""

    name: str
    """Preference id, e.g. ``showCodeHints``."""
    value: Any = None
    """New value of the preference."""


@dataclass
class ActiveDocumentChanged(Event):
    """The focused editor changed.

    ``document_name`` is ``None`` when no editor is focused.
    """

    document_name: str | None = None


@dataclass
class LanguageAdded(Event):
    """A language was registered with the language registry."""

    language_id: str = ""


@dataclass
class PreferenceDefined(Event):
    """A preference definition was added or replaced.

    The schema registry is rebuilt from the store when this arrives.
    """

    name: str = ""
