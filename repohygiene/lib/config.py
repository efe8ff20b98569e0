"""
Configuration loaders for repohygiene.

Builds a ScanConfig from command-line arguments layered over an optional
YAML config file. Precedence: flag > config file > built-in default.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

import yaml

from . import validate

logger = logging.getLogger(__name__)

CONFIG_FILENAME = ".repohygiene.yaml"


class ConfigError(Exception):
    """Configuration is unusable; the scan must not start."""


@dataclass
class ScanConfig:
    """Settings for one scan invocation."""
    base_dir: Path
    fix: bool = False
    remote_template: Optional[str] = None  # e.g. git@github.com:me/{name}.git
    default_branch: Optional[str] = None  # Used only for unborn HEADs in --fix
    quiet: bool = False
    color: bool = True
    git_timeout: Optional[float] = None  # Seconds per git call, None = wait forever


def load_config_file(config_path: Path) -> dict[str, Any]:
    """Load and validate a YAML config file.

    An empty file yields an empty dict.

    Raises:
        ConfigError: if the file is unreadable, not valid YAML, or fails schema validation
    """
    try:
        data = yaml.safe_load(config_path.read_text())
    except OSError as e:
        raise ConfigError(f"Cannot read config file {config_path}: {e}") from None
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {config_path}: {e}") from None

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {config_path} must contain a mapping")

    try:
        validate.validate(data, "config")
    except validate.ValidationError as e:
        raise ConfigError(f"Invalid config file {config_path}: {e}") from None

    return data


def resolve_config_path(base_dir: Path, explicit: Optional[str]) -> Optional[Path]:
    """Pick the config file to load, or None.

    An explicit path must exist; the implicit one in base_dir is optional.
    """
    if explicit:
        path = Path(explicit).expanduser()
        if not path.is_file():
            raise ConfigError(f"Config file not found: {explicit}")
        return path

    implicit = base_dir / CONFIG_FILENAME
    if implicit.is_file():
        return implicit
    return None


def build_scan_config(args) -> ScanConfig:
    """Build ScanConfig from parsed CLI args plus the config file.

    Args:
        args: argparse Namespace from the scan subcommand. Flags left at
              None fall back to the config file, then to defaults.

    Raises:
        ConfigError: if BASE_DIR is not a directory or the config file is invalid
    """
    base_dir = Path(args.base_dir).expanduser()
    if not base_dir.is_dir():
        raise ConfigError(f"'{args.base_dir}' is not a directory.")

    file_values: dict[str, Any] = {}
    config_path = resolve_config_path(base_dir, getattr(args, "config", None))
    if config_path is not None:
        logger.debug(f"Loading config from {config_path}")
        file_values = load_config_file(config_path)

    def pick(flag_value, key: str, default):
        if flag_value is not None:
            return flag_value
        return file_values.get(key, default)

    config = ScanConfig(
        base_dir=base_dir,
        fix=bool(args.fix),
        remote_template=pick(args.remote_template, "remote_template", None),
        default_branch=pick(args.default_branch, "default_branch", None),
        quiet=pick(args.quiet, "quiet", False),
        color=pick(args.color, "color", True),
        git_timeout=pick(args.git_timeout, "git_timeout", None),
    )

    if config.remote_template and "{name}" not in config.remote_template:
        logger.warning(
            f"Remote template '{config.remote_template}' has no {{name}} placeholder; "
            "every repo would get the same origin"
        )

    return config
