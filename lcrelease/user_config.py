"""Repository configuration management for lcrelease.

Handles reading the .lcrelease/config.yaml file in each
repository. Example:

    link_mode: md
    ticket_from_branch: true
    remote: origin
    max_message_width: 90
"""

from pathlib import Path

import yaml

# Keys understood in config.yaml
CONFIG_KEYS = ("link_mode", "ticket_from_branch", "remote", "max_message_width")


def get_config_dir(repo_root: Path) -> Path:
    """Get the repository config directory.

    Args:
        repo_root: The root directory of the git repository.

    Returns:
        Path to .lcrelease/
    """
    return repo_root / ".lcrelease"


def get_config_file(repo_root: Path) -> Path:
    """Return path to the config.yaml file.

    Args:
        repo_root: The root directory of the git repository.

    Returns:
        Path to .lcrelease/config.yaml
    """
    return get_config_dir(repo_root) / "config.yaml"


def load_config(repo_root: Path) -> dict:
    """Load the lcrelease configuration from config.yaml.

    The file is optional and is never created by reading.

    Args:
        repo_root: The root directory of the git repository.

    Returns:
        Configuration dictionary. Empty if the file is missing or corrupted.
    """
    config_file = get_config_file(repo_root)

    if not config_file.exists():
        return {}

    try:
        with open(config_file, "r") as f:
            config = yaml.safe_load(f) or {}
    except (yaml.YAMLError, OSError):
        # If config is corrupted, fall back to defaults
        return {}

    if not isinstance(config, dict):
        return {}
    return config


def get_release_config(repo_root: Path) -> dict:
    """Get the recognized release settings from the repository config.

    Args:
        repo_root: The root directory of the git repository.

    Returns:
        Dictionary restricted to CONFIG_KEYS.
    """
    config = load_config(repo_root)
    return {key: config[key] for key in CONFIG_KEYS if key in config}
