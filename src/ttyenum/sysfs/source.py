"""Read-only access to the sysfs device tree."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol


class AttributeSource(Protocol):
    """Where the classifier gets its view of the device tree from."""

    def resolve_symlink(self, path: Path) -> Path | None:
        """Return the canonical path for *path*, or None if it cannot be resolved."""
        ...

    def read_file(self, path: Path) -> str | None:
        """Return the first line of *path* (newline included), or None."""
        ...


class FilesystemSource:
    """AttributeSource backed by the real filesystem."""

    def resolve_symlink(self, path: Path) -> Path | None:
        try:
            return Path(path).resolve(strict=True)
        except (OSError, RuntimeError):
            # RuntimeError: symlink loop on older interpreters
            return None

    def read_file(self, path: Path) -> str | None:
        try:
            # only "\n" ends a line; descriptors may carry a bare "\r"
            with open(path, "r", encoding="utf-8", newline="\n") as f:
                return f.readline()
        except (OSError, UnicodeDecodeError):
            return None


def default_source() -> AttributeSource:
    return FilesystemSource()
