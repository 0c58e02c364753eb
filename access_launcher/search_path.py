from __future__ import annotations

from pathlib import Path
from typing import List

from .config import LauncherConfig

FALLBACK_DATA_DIRS = (
    Path("/usr/local/share/applications"),
    Path("/usr/share/applications"),
)
FLATPAK_SYSTEM_DIR = Path("/var/lib/flatpak/exports/share/applications")
NIX_SYSTEM_DIR = Path("/run/current-system/sw/share/applications")
NIX_DEFAULT_PROFILE_DIR = Path("/nix/var/nix/profiles/default/share/applications")


def desktop_dirs(config: LauncherConfig) -> List[Path]:
    """Return the directories to scan, highest precedence first."""
    dirs: List[Path] = []

    def push(path: Path) -> None:
        if path not in dirs:
            dirs.append(path)

    data_home = config.data_home
    if data_home is None and config.home is not None:
        data_home = config.home / ".local/share"
    if data_home is not None:
        push(data_home / "applications")
        push(data_home / "flatpak/exports/share/applications")

    if config.data_dirs:
        for data_dir in config.data_dirs:
            push(Path(data_dir) / "applications")
    else:
        for path in FALLBACK_DATA_DIRS:
            push(path)

    push(FLATPAK_SYSTEM_DIR)

    push(NIX_SYSTEM_DIR)
    push(NIX_DEFAULT_PROFILE_DIR)
    if config.home is not None:
        push(config.home / ".nix-profile/share/applications")
    if config.user:
        push(Path("/etc/profiles/per-user") / config.user / "share/applications")
    for profile in config.nix_profiles:
        push(Path(profile) / "share/applications")

    return dirs
