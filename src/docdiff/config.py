"""Runtime configuration for the docdiff command line.

Resolves diff settings from CLI args, environment variables, .env files,
and YAML config file fallbacks.

Precedence (highest to lowest):
    CLI args > Environment variables > .env file > YAML config > Built-in defaults

Environment variables:
    DOCDIFF_HEAD_LABEL: Label after the <<<<<<< marker (default: head)
    DOCDIFF_BASE_LABEL: Label after the >>>>>>> marker (default: base)
    DOCDIFF_MAX_LINES: Max lines per side (default: 10000)
    DOCDIFF_MAX_PARALLEL: Max concurrent diffs in tree mode (default: 4)
    DOCDIFF_RENDER_MARKDOWN: Render Markdown to HTML before diffing (default: false)
    DOCDIFF_DEBUG: Enable debug logging (default: false)
"""

import logging
import os
from dataclasses import dataclass

from .validators import validate_label

logger = logging.getLogger(__name__)


@dataclass
class Config:
    head_label: str = "head"
    base_label: str = "base"
    max_lines: int = 10_000
    max_parallel: int = 4
    render_markdown: bool = False
    debug: bool = False


def validate_config(config: Config) -> None:
    """Validate configuration values and raise ValueError if invalid.

    Args:
        config: Config instance to validate.

    Raises:
        ValueError: If a label is unusable or a limit is out of range.
    """
    config.head_label = config.head_label.strip()
    config.base_label = config.base_label.strip()

    for field_name, label in (
        ("Head label", config.head_label),
        ("Base label", config.base_label),
    ):
        is_valid, message = validate_label(label, field_name)
        if not is_valid:
            raise ValueError(message)

    if not (1 <= config.max_lines <= 1_000_000):
        raise ValueError(
            f"Invalid max_lines {config.max_lines}: must be between 1 and 1000000"
        )

    if not (1 <= config.max_parallel <= 64):
        raise ValueError(
            f"Invalid max_parallel {config.max_parallel}: must be between 1 and 64"
        )

    if config.max_lines > 50_000:
        logger.warning(
            "max_lines=%d: diffs near this size need O(n^2) memory",
            config.max_lines,
        )


def _get_bool_env(key: str) -> bool | None:
    """Return True/False from env var, or None if unset."""
    val = os.getenv(key)
    if val is None:
        return None
    return val.lower() in ("true", "1", "yes", "on")


def _get_int_env(key: str, low: int, high: int) -> int | None:
    """Return an int from env var, or None if unset.

    Raises:
        ValueError: If the value is not an integer in ``[low, high]``.
    """
    raw = os.getenv(key)
    if raw is None:
        return None
    message = f"Invalid {key} '{raw}': must be a number between {low} and {high}"
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(message) from None
    if not (low <= value <= high):
        raise ValueError(message)
    return value


def load_config(
    head_label: str | None = None,
    base_label: str | None = None,
    max_lines: int | None = None,
    render_markdown: bool = False,
    debug: bool = False,
    yaml_fallbacks: dict | None = None,
) -> Config:
    """Load configuration with unified precedence.

    Resolution order for each field (highest to lowest):
        CLI arg > env var / .env > yaml_fallbacks > built-in default

    The caller is responsible for calling ``load_dotenv()`` before this
    function so that .env values are available via ``os.getenv()``.

    Args:
        head_label: Override head label (CLI).
        base_label: Override base label (CLI).
        max_lines: Override line cap (CLI).
        render_markdown: Render Markdown before diffing (CLI flag).
        debug: Enable debug logging (CLI flag).
        yaml_fallbacks: Dict of values from the YAML config ``diff`` section.

    Returns:
        Validated Config instance.

    Raises:
        ValueError: If any resolved value is invalid.
    """
    fb = yaml_fallbacks or {}
    defaults = Config()

    # --- String fields: CLI > env > YAML > default ---

    final_head = (
        head_label
        or os.getenv("DOCDIFF_HEAD_LABEL")
        or fb.get("head_label")
        or defaults.head_label
    )
    final_base = (
        base_label
        or os.getenv("DOCDIFF_BASE_LABEL")
        or fb.get("base_label")
        or defaults.base_label
    )

    # --- Numeric fields: CLI > env > YAML > default ---

    final_max_lines = max_lines
    if final_max_lines is None:
        final_max_lines = _get_int_env("DOCDIFF_MAX_LINES", 1, 1_000_000)
    if final_max_lines is None:
        final_max_lines = int(fb.get("max_lines", defaults.max_lines))

    final_max_parallel = _get_int_env("DOCDIFF_MAX_PARALLEL", 1, 64)
    if final_max_parallel is None:
        final_max_parallel = int(
            fb.get("max_parallel", defaults.max_parallel)
        )

    # --- Boolean fields: CLI > env > YAML > default ---

    def resolve_bool(cli_value: bool, env_key: str, fb_key: str) -> bool:
        if cli_value:
            return True
        env_value = _get_bool_env(env_key)
        if env_value is not None:
            return env_value
        return bool(fb.get(fb_key, False))

    config = Config(
        head_label=final_head,
        base_label=final_base,
        max_lines=final_max_lines,
        max_parallel=final_max_parallel,
        render_markdown=resolve_bool(
            render_markdown, "DOCDIFF_RENDER_MARKDOWN", "render_markdown"
        ),
        debug=resolve_bool(debug, "DOCDIFF_DEBUG", "debug"),
    )

    validate_config(config)

    return config
