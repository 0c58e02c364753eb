from __future__ import annotations

import logging
import os
import subprocess

from gi.repository import Gio, GLib

logger = logging.getLogger(__name__)


class LaunchError(Exception):
    """Raised when a desktop entry could not be started."""

    def __init__(self, title, details):
        super().__init__(f"{title}: {details}")
        self.title = title
        self.details = details


def launch_entry(path, launch_context=None):
    """Start the application described by the desktop file at ``path``.

    Falls back to ``gtk-launch`` with the desktop id when GIO refuses to
    launch the entry itself.
    """
    path = os.fspath(path)
    app_info = Gio.DesktopAppInfo.new_from_filename(path)
    if app_info is None:
        logger.error("Failed to load desktop entry: %s", path)
        raise LaunchError("Failed to load application", f"Could not read desktop entry at {path}")

    try:
        app_info.launch([], launch_context)
        return
    except GLib.Error as exc:
        logger.warning("GIO could not launch %s: %s", path, exc.message)
        gio_error = exc.message

    try:
        subprocess.Popen(
            ["gtk-launch", os.path.basename(path)],
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            start_new_session=True,
        )
    except OSError as exc:
        logger.error("Failed to launch %s: %s", path, exc)
        raise LaunchError(f"Failed to launch {app_info.get_name()}", gio_error) from exc
