"""Shared fixtures for the preference hint tests."""

from typing import Any

import pytest

from prefhints.config import HintsConfig
from prefhints.events.bus import EventBus
from prefhints.infrastructure.memory import (
    InMemoryEditor,
    InMemoryPreferenceStore,
    StaticContextAnalyzer,
    StaticLanguageRegistry,
    StaticLintRegistry,
    StaticThemeRegistry,
)
from prefhints.provider import PreferencesHintProvider
from prefhints.schema.registry import SchemaRegistry

PREFERENCES: dict[str, dict[str, Any]] = {
    "closeBrackets": {"type": "boolean", "description": "Auto close brackets", "values": ["yes", "no"]},
    "spaceUnits": {"type": "number", "description": "Spaces per indent level", "values": [2, 4, 8]},
    "fonts.fontSize": {"type": "string", "values": ["12px", "14px"]},
    "themes.theme": {"type": "string", "description": "Editor theme"},
    "linting.prefer": {"type": "array", "valueType": "string", "description": "Preferred lint providers"},
    "fileTypes": {"type": "array", "valueType": "string", "values": ["js", "css"]},
    "rulers": {"type": "array", "valueType": "number", "values": [80, 120]},
    "jslint.options": {
        "type": "object",
        "description": "JSLint options",
        "keys": {
            "es5": {"type": "boolean"},
            "indent": {"type": "number", "values": [2, 4]},
            "predef": {"type": "array"},
        },
    },
    "path": {"type": "object", "description": "Per-path overrides"},
    "styleActiveLine": {"type": "boolean", "excludeFromHints": True},
    "broken": {"type": "object", "keys": "not-a-mapping"},
}

LANGUAGES = {
    "javascript": {"name": "JavaScript"},
    "css": {"name": "CSS"},
    "json": {"name": "JSON"},
}

LINTERS = {"javascript": ["JSHint", "ESLint"], "css": ["CSSLint"]}

THEMES = ["light-theme", "dark-theme", "solarized-dark"]


@pytest.fixture
def config() -> HintsConfig:
    return HintsConfig()


@pytest.fixture
def registry(config: HintsConfig) -> SchemaRegistry:
    return SchemaRegistry.build(PREFERENCES, config)


@pytest.fixture
def event_bus() -> EventBus:
    return EventBus()


@pytest.fixture
def store(event_bus: EventBus) -> InMemoryPreferenceStore:
    return InMemoryPreferenceStore(PREFERENCES, event_bus=event_bus)


@pytest.fixture
def languages(event_bus: EventBus) -> StaticLanguageRegistry:
    return StaticLanguageRegistry(LANGUAGES, event_bus=event_bus)


@pytest.fixture
def analyzer() -> StaticContextAnalyzer:
    return StaticContextAnalyzer(None)


@pytest.fixture
def editor() -> InMemoryEditor:
    return InMemoryEditor(text="", document_name="brackets.json")


@pytest.fixture
def provider(store, analyzer, languages, event_bus, config) -> PreferencesHintProvider:
    hint_provider = PreferencesHintProvider(
        store=store,
        analyzer=analyzer,
        language_registry=languages,
        lint_registry=StaticLintRegistry(LINTERS),
        theme_registry=StaticThemeRegistry(THEMES),
        event_bus=event_bus,
        config=config,
    )
    hint_provider.gate.set_active_document("brackets.json")
    return hint_provider
