"""Scan the search path and reduce it to one entry per desktop id."""

from __future__ import annotations

import logging
import threading
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Tuple

from gi.repository import GLib

from .categories import build_category_map
from .config import LauncherConfig
from .desktop import DesktopEntry, parse_desktop_entry
from .exec_check import exec_looks_valid
from .search_path import desktop_dirs
from .walker import discover_desktop_files

logger = logging.getLogger(__name__)

# Our own launcher entry never shows up in the list.
SELF_DESKTOP_ID = "access-launcher.desktop"


def collect_desktop_entries(
    config: Optional[LauncherConfig] = None, dirs: Optional[Sequence[Path]] = None
) -> List[DesktopEntry]:
    """Return visible applications sorted by name.

    Files are visited in search-path order. When several files share a
    desktop id, the first one with a plausible Exec line wins; if none has
    one, the first one found is kept.

    ``dirs`` overrides the search path derived from ``config``.
    """
    if config is None:
        config = LauncherConfig.from_environ()

    if dirs is None:
        dirs = desktop_dirs(config)

    files = discover_desktop_files(dirs)
    entries_by_id: Dict[str, Tuple[DesktopEntry, bool]] = {}

    for path in files:
        desktop_id = path.name
        if desktop_id == SELF_DESKTOP_ID:
            continue

        existing = entries_by_id.get(desktop_id)
        if existing is not None and existing[1]:
            continue

        entry = parse_desktop_entry(
            path, config.lang, config.current_desktops, strict=False
        )
        if entry is None:
            continue

        valid = exec_looks_valid(entry.exec)
        if existing is None or valid:
            if existing is not None:
                logger.debug("%s overrides %s", entry.path, existing[0].path)
            entries_by_id[desktop_id] = (entry, valid)

    entries = [entry for entry, _valid in entries_by_id.values()]
    entries.sort(key=lambda entry: entry.name.lower())
    logger.info("Scanned %d desktop files, kept %d applications", len(files), len(entries))
    return entries


def load_catalog(config: Optional[LauncherConfig] = None, dirs: Optional[Sequence[Path]] = None):
    """Run the whole pipeline, returning ``(entries, category_map)``."""
    entries = collect_desktop_entries(config, dirs)
    return entries, build_category_map(entries)


def load_catalog_async(callback, config=None, dispatch=GLib.idle_add, dirs=None):
    """Scan on a worker thread and hand the result to ``callback`` once.

    ``dispatch`` schedules the callback on the UI side; the default runs it
    from the GLib main loop.
    """

    def work():
        try:
            entries, category_map = load_catalog(config, dirs)
        except Exception:
            logger.exception("Application scan failed")
            entries, category_map = [], {}
        dispatch(callback, entries, category_map)

    thread = threading.Thread(target=work, name="access-launcher-scan", daemon=True)
    thread.start()
    return thread
