"""Hint sources loader.

Loads a JSON file describing the preference set and the dynamic value
providers (languages, themes, lint providers). Used by the CLI and by
hosts that keep their preference metadata on disk.
"""

import json
from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, Field, ValidationError

from prefhints.logger import get_logger

logger = get_logger("schema.loader")


class HintSources(BaseModel):
    """Preference descriptors plus provider snapshots."""

    preferences: dict[str, dict[str, Any]] = Field(
        default_factory=dict, description="Raw preference descriptors keyed by preference id"
    )
    languages: dict[str, dict[str, Any]] = Field(
        default_factory=dict, description="Language metadata keyed by language id"
    )
    themes: list[str] = Field(default_factory=list, description="Installed theme names")
    linters: dict[str, list[str]] = Field(
        default_factory=dict, description="Lint provider ids keyed by language id"
    )

    class Config:
        """Pydantic configuration."""

        frozen = True


def load_hint_sources(sources_path: Optional[str | Path]) -> HintSources:
    """
    Load hint sources from a JSON file.

    Args:
        sources_path: Path to the JSON file

    Returns:
        HintSources: Parsed sources

    Raises:
        FileNotFoundError: If the file doesn't exist
        json.JSONDecodeError: If the JSON file is invalid
        ValidationError: If the top-level structure is invalid
    """
    path = Path(sources_path) if sources_path is not None else None
    if path is None or not path.exists():
        error_msg = f"Hint sources file not found: {path}"
        logger.error(error_msg)
        raise FileNotFoundError(error_msg)

    logger.info(f"Loading hint sources from: {path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        logger.error(f"Invalid JSON in hint sources file {path}: {e}")
        raise

    try:
        sources = HintSources.model_validate(data)
    except ValidationError as e:
        logger.error(f"Invalid hint sources structure in {path}: {e}")
        raise

    logger.info(
        f"Loaded {len(sources.preferences)} preference(s), {len(sources.languages)} language(s), "
        f"{len(sources.themes)} theme(s)"
    )
    return sources
