"""Pydantic models for the ttyenum YAML configuration."""

from __future__ import annotations

from typing import List, Literal, Optional

from pydantic import BaseModel, Field, field_validator

from ttyenum.config.defaults import DEFAULT_LINK_DIRS, DEFAULT_PATTERNS, DEFAULT_TTY_CLASS_ROOT


class SysfsConfig(BaseModel):
    tty_class_root: str = DEFAULT_TTY_CLASS_ROOT


class DiscoveryConfig(BaseModel):
    patterns: List[str] = Field(default_factory=lambda: list(DEFAULT_PATTERNS), min_length=1)
    include_links: bool = False
    link_dirs: List[str] = Field(default_factory=lambda: list(DEFAULT_LINK_DIRS))

    @field_validator("patterns")
    @classmethod
    def patterns_are_absolute(cls, patterns: List[str]) -> List[str]:
        for pattern in patterns:
            if not pattern.startswith("/"):
                raise ValueError(f"Pattern '{pattern}' must be an absolute path glob")
        return patterns


class LoggingConfig(BaseModel):
    level: Literal["debug", "info", "warning", "error"] = "warning"
    file: Optional[str] = None
    max_size_mb: int = Field(default=10, ge=1)
    backup_count: int = Field(default=3, ge=0)


class TtyEnumConfig(BaseModel):
    """Root configuration model for ttyenum."""

    sysfs: SysfsConfig = SysfsConfig()
    discovery: DiscoveryConfig = DiscoveryConfig()
    logging: LoggingConfig = LoggingConfig()
