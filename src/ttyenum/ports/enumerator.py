"""Enumerate serial ports: glob candidate device nodes and classify each."""

from __future__ import annotations

import dataclasses
import glob
import logging
from pathlib import Path
from typing import Callable, Iterable, Iterator, Sequence

from ttyenum.config.defaults import DEFAULT_LINK_DIRS, DEFAULT_PATTERNS, DEFAULT_TTY_CLASS_ROOT
from ttyenum.ports.classifier import classify_port
from ttyenum.ports.models import PortInfo
from ttyenum.sysfs.source import AttributeSource, default_source

logger = logging.getLogger("ttyenum.enumerator")

CandidateSource = Callable[[str], Iterable[Path]]


def glob_candidates(pattern: str) -> Iterator[Path]:
    """Lazily yield paths matching *pattern*, in filesystem order."""
    for match in glob.iglob(pattern):
        yield Path(match)


def _classify(
    candidate: Path,
    source: AttributeSource,
    tty_class_root: str | Path,
) -> PortInfo | None:
    try:
        return classify_port(candidate, source, tty_class_root)
    except OSError as e:
        logger.debug("Skipping %s: %s", candidate, e)
        return None


def _iter_links(
    link_dirs: Sequence[str],
    source: AttributeSource,
    tty_class_root: str | Path,
    candidates: CandidateSource,
) -> Iterator[PortInfo]:
    """Yield alias entries for symlinks such as /dev/serial/by-id/*."""
    for link_dir in link_dirs:
        for link in candidates(str(Path(link_dir) / "*")):
            target = source.resolve_symlink(link)
            if target is None:
                logger.debug("Dangling link %s", link)
                continue
            info = _classify(target, source, tty_class_root)
            if info is not None:
                yield dataclasses.replace(info, device_path=str(link))


def iter_ports(
    patterns: Sequence[str] = DEFAULT_PATTERNS,
    *,
    source: AttributeSource | None = None,
    tty_class_root: str | Path = DEFAULT_TTY_CLASS_ROOT,
    candidates: CandidateSource = glob_candidates,
    include_links: bool = False,
    link_dirs: Sequence[str] = DEFAULT_LINK_DIRS,
) -> Iterator[PortInfo]:
    """Yield a PortInfo for every classifiable device matching *patterns*.

    Ordering follows *patterns*, then the match order of each pattern.
    With *include_links*, symlinks under *link_dirs* that point at a
    classifiable port follow as extra entries carrying the link path.
    """
    source = source or default_source()

    for pattern in patterns:
        for candidate in candidates(pattern):
            info = _classify(candidate, source, tty_class_root)
            if info is not None:
                yield info

    if include_links:
        yield from _iter_links(link_dirs, source, tty_class_root, candidates)


def list_ports(
    patterns: Sequence[str] = DEFAULT_PATTERNS,
    *,
    source: AttributeSource | None = None,
    tty_class_root: str | Path = DEFAULT_TTY_CLASS_ROOT,
    candidates: CandidateSource = glob_candidates,
    include_links: bool = False,
    link_dirs: Sequence[str] = DEFAULT_LINK_DIRS,
) -> list[PortInfo]:
    """Snapshot of the serial ports currently present."""
    return list(iter_ports(
        patterns,
        source=source,
        tty_class_root=tty_class_root,
        candidates=candidates,
        include_links=include_links,
        link_dirs=link_dirs,
    ))
