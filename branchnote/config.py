"""Repository configuration for branchnote.

Handles reading and writing the .branchnote/config.yaml file in each
repository. The rule options live under the ``replace_branch`` key:

    replace_branch:
      branch_pattern: '\\A(\\d+)-(\\w+).*\\Z'
      replacement_text: '[#\\1]'
      skip_if_pattern_matches_commit_message: false
      skip_if: [bash, -c, 'exit 1']
      skipped_commit_types: [merge, squash]
"""

import copy
from pathlib import Path

import yaml

from branchnote.rule.constants import DEFAULT_BRANCH_PATTERN, DEFAULT_REPLACEMENT_TEXT
from branchnote.rule.exceptions import ConfigError
from branchnote.rule.models import RuleConfig

RULE_SECTION = "replace_branch"

# Default configuration values
DEFAULT_CONFIG = {
    RULE_SECTION: {
        "branch_pattern": DEFAULT_BRANCH_PATTERN,
        "replacement_text": DEFAULT_REPLACEMENT_TEXT,
        "skip_if_pattern_matches_commit_message": False,
        "skipped_commit_types": [],
    },
}


def get_config_dir(repo_root: Path) -> Path:
    """Get the repository config directory.

    Args:
        repo_root: The root directory of the git repository.

    Returns:
        Path to .branchnote/
    """
    return repo_root / ".branchnote"


def get_config_file(repo_root: Path) -> Path:
    """Return path to the config.yaml file.

    Args:
        repo_root: The root directory of the git repository.

    Returns:
        Path to .branchnote/config.yaml
    """
    return get_config_dir(repo_root) / "config.yaml"


def load_config(repo_root: Path) -> dict:
    """Load the branchnote configuration from config.yaml.

    A missing file yields the defaults; it is not created. Missing rule
    options are filled in from the defaults.

    Args:
        repo_root: The root directory of the git repository.

    Returns:
        Configuration dictionary.

    Raises:
        ConfigError: If the file cannot be read or is not valid YAML.
    """
    config_file = get_config_file(repo_root)

    if not config_file.exists():
        return copy.deepcopy(DEFAULT_CONFIG)

    try:
        with open(config_file, "r", encoding="utf-8") as f:
            config = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"Failed to load config from {config_file}: {e}")

    if not isinstance(config, dict):
        raise ConfigError(f"Config file {config_file} must contain a mapping")

    section = config.get(RULE_SECTION)
    if section is None:
        section = {}
    if not isinstance(section, dict):
        raise ConfigError(f"'{RULE_SECTION}' in {config_file} must be a mapping")

    # Merge with defaults for any missing keys
    for key, value in DEFAULT_CONFIG[RULE_SECTION].items():
        if key not in section:
            section[key] = copy.deepcopy(value)
    config[RULE_SECTION] = section
    return config


def save_config(repo_root: Path, config: dict) -> None:
    """Write config to .branchnote/config.yaml, creating .branchnote/ if needed.

    Keys keep their insertion order so the replace_branch options read in
    the order DEFAULT_CONFIG lists them.

    Raises:
        ConfigError: If the file cannot be written.
    """
    config_file = get_config_file(repo_root)
    try:
        config_file.parent.mkdir(exist_ok=True)
        config_file.write_text(
            yaml.dump(config, default_flow_style=False, sort_keys=False, allow_unicode=True),
            encoding="utf-8",
        )
    except OSError as e:
        raise ConfigError(f"Failed to save config to {config_file}: {e}")


def load_rule_options(repo_root: Path) -> dict:
    """Get the replace_branch option mapping.

    Args:
        repo_root: The root directory of the git repository.

    Returns:
        The rule options, defaults included.
    """
    return load_config(repo_root)[RULE_SECTION]


def load_rule_config(repo_root: Path) -> RuleConfig:
    """Load and validate the replace_branch options.

    Args:
        repo_root: The root directory of the git repository.

    Returns:
        RuleConfig instance.

    Raises:
        ConfigError: If the configuration is invalid.
    """
    return RuleConfig.from_options(load_rule_options(repo_root))
