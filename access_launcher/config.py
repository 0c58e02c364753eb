"""Environment snapshot used by the scan pipeline."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional, Tuple


def _split(value: Optional[str], sep: Optional[str]) -> Tuple[str, ...]:
    if not value:
        return ()
    return tuple(part for part in value.split(sep) if part)


@dataclass(frozen=True)
class LauncherConfig:
    """Everything the resolver and parser would otherwise read from the environment."""

    data_home: Optional[Path] = None
    data_dirs: Tuple[str, ...] = ()
    home: Optional[Path] = None
    user: Optional[str] = None
    nix_profiles: Tuple[str, ...] = ()
    lang: Optional[str] = None
    current_desktops: Optional[Tuple[str, ...]] = None

    @classmethod
    def from_environ(cls, environ: Optional[Mapping[str, str]] = None) -> "LauncherConfig":
        env = os.environ if environ is None else environ

        home = env.get("HOME")
        if home:
            home_path = Path(home)
        elif environ is None:
            home_path = Path.home()
        else:
            home_path = None

        data_home = env.get("XDG_DATA_HOME")
        lang = env.get("LC_ALL") or env.get("LC_MESSAGES") or env.get("LANG")
        desktops = _split(env.get("XDG_CURRENT_DESKTOP"), ":")

        return cls(
            data_home=Path(data_home) if data_home else None,
            data_dirs=_split(env.get("XDG_DATA_DIRS"), ":"),
            home=home_path,
            user=env.get("USER") or env.get("LOGNAME") or None,
            nix_profiles=_split(env.get("NIX_PROFILES"), None),
            lang=lang or None,
            current_desktops=desktops or None,
        )
