"""Recursive directory listing used by the template converter."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from .schema import DirectoryEntry

__all__ = ["scan_directory"]


LOGGER = logging.getLogger(__name__)


def scan_directory(root: str | Path, *, sort: bool = False) -> list[DirectoryEntry]:
    """List every file and directory below ``root``, depth first.

    Each directory is listed before its contents. Sibling order is whatever
    :func:`os.scandir` yields unless ``sort`` is ``True``, in which case
    siblings are ordered by name. Symbolic links to directories are followed
    without a cycle check.

    Raises
    ------
    OSError
        When ``root`` (or any directory below it) cannot be read. The error is
        propagated unchanged.
    """

    entries: list[DirectoryEntry] = []
    _walk(Path(root), entries, sort=sort)
    return entries


def _walk(directory: Path, entries: list[DirectoryEntry], *, sort: bool) -> None:
    with os.scandir(directory) as iterator:
        children = list(iterator)
    if sort:
        children.sort(key=lambda child: child.name)

    for child in children:
        path = directory / child.name
        if child.is_dir():
            LOGGER.debug("scan directory %s", path)
            entries.append(DirectoryEntry(path=path, name=child.name, is_directory=True))
            _walk(path, entries, sort=sort)
        else:
            LOGGER.debug("scan file %s", path)
            entries.append(DirectoryEntry(path=path, name=child.name, is_directory=False))
