"""Single-value sysfs attribute readers.

Device metadata files are optional and differ between kernel versions,
so every reader here degrades to an absent/zero value instead of raising.
"""

from __future__ import annotations

import re
from pathlib import Path

from ttyenum.sysfs.source import AttributeSource

_HEX_RE = re.compile(r"^[0-9a-fA-F]+$")


def read_text(source: AttributeSource, directory: Path | None, filename: str) -> str | None:
    """Read the first line of ``directory/filename``, stripped.

    Returns None if *directory* is None or the file cannot be read.
    An empty file gives an empty string.
    """
    if directory is None:
        return None
    line = source.read_file(Path(directory) / filename)
    if line is None:
        return None
    return line.strip()


def read_hex16(source: AttributeSource, directory: Path | None, filename: str) -> int:
    """Read a 16-bit hex value such as ``idVendor``; 0 when absent or invalid."""
    text = read_text(source, directory, filename)
    if not text or not _HEX_RE.match(text):
        return 0
    value = int(text, 16)
    if value > 0xFFFF:
        return 0
    return value
