"""
Config file discovery and loading for docdiff.

Up to three YAML files feed the configuration, from highest precedence
to lowest:

    1. the file named by ``DOCDIFF_CONFIG``
    2. ``.docdiff/config.yml`` (or ``config.yaml``) in the working directory
    3. ``~/.config/docdiff/config.yml``

Top-level sections of a higher file replace the same sections of a lower
one ("project wins"); they are not deep-merged.

Usage:
    from docdiff.config_loader import load_hierarchical_config

    raw = load_hierarchical_config()
"""

import logging
import os
from pathlib import Path
from typing import Any

import yaml

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "DOCDIFF_CONFIG"
PROJECT_DIR_NAME = ".docdiff"
_PROJECT_FILE_NAMES = ("config.yml", "config.yaml")


def discover_config_files() -> list[Path]:
    """Return the config files that exist, highest precedence first."""
    found: list[Path] = []

    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        explicit = Path(env_path).expanduser().resolve()
        if explicit.is_file():
            found.append(explicit)
        else:
            logger.warning(
                "%s points to %s, which does not exist -- ignoring",
                CONFIG_ENV_VAR,
                explicit,
            )

    project_dir = Path.cwd() / PROJECT_DIR_NAME
    for name in _PROJECT_FILE_NAMES:
        if (project_dir / name).is_file():
            found.append(project_dir / name)

    user_file = Path.home() / ".config" / "docdiff" / "config.yml"
    if user_file.is_file():
        found.append(user_file)

    return found


def read_config_file(path: Path) -> dict[str, Any]:
    """Parse one config file with ``yaml.safe_load``.

    An empty file yields ``{}``.  A file whose root is not a mapping is
    skipped with a warning.

    Raises:
        ValueError: If the file is not valid YAML.
    """
    try:
        with open(path, encoding="utf-8") as fh:
            data = yaml.safe_load(fh)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in config file {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        logger.warning(
            "Config file %s has non-dict root (%s) -- skipping",
            path,
            type(data).__name__,
        )
        return {}
    return data


def load_hierarchical_config() -> dict[str, Any]:
    """Merge all discovered config files into one raw dict.

    Returns an empty dict when no config files exist (zero-config).

    Raises:
        ValueError: If any discovered file is not valid YAML.
    """
    paths = discover_config_files()
    if not paths:
        logger.debug("No config files found -- using defaults")
        return {}

    merged: dict[str, Any] = {}
    for path in reversed(paths):
        logger.debug("Loading config: %s", path)
        merged.update(read_config_file(path))
    return merged
