"""Load and validate ttyenum configuration from YAML."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import ValidationError

from ttyenum.config.defaults import DEFAULT_CONFIG_PATH
from ttyenum.config.schema import TtyEnumConfig


class ConfigError(Exception):
    """Raised when configuration loading or validation fails."""


def _read_mapping(config_path: Path) -> dict[str, Any]:
    try:
        raw = config_path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read config file: {e}") from e

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in config file: {e}") from e

    if data is None:
        data = {}

    if not isinstance(data, dict):
        raise ConfigError("Config file must contain a YAML mapping at the top level")

    return data


def load_config(path: str | Path | None = None) -> TtyEnumConfig:
    """Load and validate a ttyenum config from a YAML file.

    Args:
        path: Path to YAML config file. Uses default if None.

    Returns:
        Validated TtyEnumConfig instance. A missing default file gives
        the built-in defaults; a missing explicit file is an error.

    Raises:
        ConfigError: If the file is missing, unreadable, or invalid.
    """
    config_path = Path(path) if path else DEFAULT_CONFIG_PATH
    config_path = config_path.expanduser().resolve()

    if not config_path.exists():
        if path is None:
            return TtyEnumConfig()
        raise ConfigError(f"Config file not found: {config_path}")

    data = _read_mapping(config_path)

    try:
        return TtyEnumConfig(**data)
    except ValidationError as e:
        raise ConfigError(f"Config validation failed:\n{e}") from e


@dataclass(frozen=True)
class ConfigIssue:
    severity: Literal["error", "warning"]
    message: str

    def __str__(self) -> str:
        return self.message


def validate_config(path: str | Path | None = None) -> list[ConfigIssue]:
    """Validate a config file and return a list of issues (empty = valid).

    This is a softer check than load_config -- it collects all errors
    rather than raising on the first one. Warnings flag settings that
    only fail on this machine (e.g. a sysfs root checked from elsewhere).
    """
    issues: list[ConfigIssue] = []
    config_path = Path(path) if path else DEFAULT_CONFIG_PATH
    config_path = config_path.expanduser().resolve()

    if not config_path.exists():
        return [ConfigIssue("error", f"Config file not found: {config_path}")]

    try:
        data = _read_mapping(config_path)
    except ConfigError as e:
        return [ConfigIssue("error", str(e))]

    try:
        config = TtyEnumConfig(**data)
    except ValidationError as e:
        for err in e.errors():
            loc = " -> ".join(str(x) for x in err["loc"])
            issues.append(ConfigIssue("error", f"{loc}: {err['msg']}"))
        return issues

    # Semantic checks beyond Pydantic validation
    seen: set[str] = set()
    for pattern in config.discovery.patterns:
        if pattern in seen:
            issues.append(ConfigIssue(
                "error", f"discovery.patterns: '{pattern}' is listed more than once",
            ))
        seen.add(pattern)

    seen = set()
    for link_dir in config.discovery.link_dirs:
        if link_dir in seen:
            issues.append(ConfigIssue(
                "error", f"discovery.link_dirs: '{link_dir}' is listed more than once",
            ))
        seen.add(link_dir)

    if not Path(config.sysfs.tty_class_root).is_dir():
        issues.append(ConfigIssue(
            "warning",
            f"sysfs.tty_class_root '{config.sysfs.tty_class_root}' "
            "does not exist on this host",
        ))

    return issues
