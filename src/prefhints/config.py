"""Configuration for the preference hint provider."""

import os
from dataclasses import dataclass, replace

from dotenv import load_dotenv


@dataclass(frozen=True)
class HintsConfig:
    """Constants that shape when and how hints are offered."""

    # Enablement: hints are off when any of these settings is explicitly False
    enable_settings: tuple[str, ...] = ("showCodeHints", "codehint.PrefHints")
    hint_setting: str = "codehint.PrefHints"
    hint_setting_description: str = "Enable/disable code hints for preference files"

    # Target document
    document_name_pattern: str = r"^\.?brackets\.json$"
    content_mode: str = "application/json"

    # Parent keys whose children are free-form (no key hints)
    key_deny_parents: tuple[str, ...] = ("language.fileExtensions", "language.fileNames", "path")

    # Reserved root entries and special-cased keys
    language_key: str = "language"
    language_description: str = "Language specific preferences"
    path_key: str = "path"
    path_description: str = "Path specific preferences"
    lint_key: str = "linting.prefer"
    theme_key: str = "themes.theme"
    file_map_parents: tuple[str, ...] = ("language.fileExtensions", "language.fileNames")

    # Insertion
    default_quote: str = '"'

    @classmethod
    def from_env(cls) -> "HintsConfig":
        """Build a config, applying ``PREFHINTS_*`` overrides from the environment / .env."""
        load_dotenv()
        config = cls()
        overrides = {}

        pattern = os.getenv("PREFHINTS_DOCUMENT_PATTERN")
        if pattern:
            overrides["document_name_pattern"] = pattern

        quote = os.getenv("PREFHINTS_DEFAULT_QUOTE")
        if quote in ("'", '"'):
            overrides["default_quote"] = quote

        hint_setting = os.getenv("PREFHINTS_HINTS_SETTING")
        if hint_setting:
            enable = tuple(name for name in config.enable_settings if name != config.hint_setting)
            overrides["hint_setting"] = hint_setting
            overrides["enable_settings"] = enable + (hint_setting,)

        return replace(config, **overrides) if overrides else config
