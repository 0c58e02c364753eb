from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Iterable, List

logger = logging.getLogger(__name__)

DESKTOP_SUFFIX = ".desktop"


def _list_dir(path: str) -> list:
    try:
        with os.scandir(path) as it:
            return list(it)
    except OSError as exc:
        logger.debug("Skipping %s: %s", path, exc)
        return []


def walk_desktop_files(directory) -> List[Path]:
    """Collect ``*.desktop`` files below ``directory``, depth first.

    Unreadable or missing directories contribute nothing. Symlinks are taken
    as files, so a broken link still shows up here and fails later at parse
    time.
    """
    files: List[Path] = []
    # Entries are pushed reversed so they pop in the order scandir returned them.
    stack = list(reversed(_list_dir(os.fspath(directory))))
    while stack:
        entry = stack.pop()
        try:
            if entry.is_dir(follow_symlinks=False):
                stack.extend(reversed(_list_dir(entry.path)))
                continue
            is_candidate = entry.is_symlink() or entry.is_file(follow_symlinks=False)
        except OSError:
            continue
        if is_candidate and entry.name.endswith(DESKTOP_SUFFIX):
            files.append(Path(entry.path))
    return files


def discover_desktop_files(dirs: Iterable[Path]) -> List[Path]:
    """Walk every directory in order and concatenate the results."""
    files: List[Path] = []
    for directory in dirs:
        files.extend(walk_desktop_files(directory))
    return files
