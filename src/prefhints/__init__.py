"""Context-sensitive key and value hints for JSON preference documents."""

from prefhints.config import HintsConfig
from prefhints.provider import PreferencesHintProvider

__all__ = ["HintsConfig", "PreferencesHintProvider"]
