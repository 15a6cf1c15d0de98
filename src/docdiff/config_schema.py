"""Configuration schema for docdiff.

Defines Pydantic models for the config file structure with dedicated
sections for diff/merge behaviour and logging.

Usage:
    from docdiff.config_schema import build_config

    raw = load_hierarchical_config()
    unified = build_config(raw)
    unified.diff.max_lines
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from .validators import validate_label


# ---------------------------------------------------------------------------
# Section models
# ---------------------------------------------------------------------------


class DiffConfig(BaseModel):
    """Diff and merge settings.

    Every field has a default, so an empty ``diff`` section is valid.
    """

    head_label: str = Field(
        default="head", description="Label after the <<<<<<< marker"
    )
    base_label: str = Field(
        default="base", description="Label after the >>>>>>> marker"
    )
    max_lines: int = Field(
        default=10_000,
        ge=1,
        le=1_000_000,
        description="Maximum lines per side before a diff is refused (1-1000000)",
    )
    max_parallel: int = Field(
        default=4,
        ge=1,
        le=64,
        description="Maximum concurrent diffs in tree mode (1-64)",
    )
    render_markdown: bool = Field(
        default=False,
        description="Render Markdown to HTML before diffing",
    )
    debug: bool = Field(default=False, description="Enable debug logging")

    model_config = {"frozen": True}

    @field_validator("head_label", "base_label")
    @classmethod
    def _check_label(cls, value: str) -> str:
        is_valid, message = validate_label(value)
        if not is_valid:
            raise ValueError(message)
        return value


class LoggingConfig(BaseModel):
    """Logging configuration.

    Attributes:
        level: Log level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        file: Optional log file path.
    """

    level: str = Field(default="WARNING", description="Log level")
    file: str | None = Field(default=None, description="Log file path")

    model_config = {"frozen": True}


# ---------------------------------------------------------------------------
# Top-level config
# ---------------------------------------------------------------------------


class UnifiedConfig(BaseModel):
    """Top-level configuration.

    Aggregates all config sections. Every section has sensible defaults,
    so ``UnifiedConfig()`` (zero-config) is always valid.
    """

    diff: DiffConfig = Field(default_factory=DiffConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = {"frozen": True}


def build_config(raw_data: dict) -> UnifiedConfig:
    """Construct a ``UnifiedConfig`` from the raw dict returned by
    ``load_hierarchical_config()``.

    Handles missing sections gracefully -- anything absent gets defaults.

    Args:
        raw_data: Merged configuration dictionary.

    Returns:
        Validated ``UnifiedConfig`` instance.
    """
    if not raw_data:
        return UnifiedConfig()

    return UnifiedConfig(**raw_data)
