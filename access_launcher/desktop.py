"""Parsing of ``.desktop`` descriptor files."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Sequence, Tuple

from .exec_check import exec_looks_valid

logger = logging.getLogger(__name__)

DESKTOP_ENTRY_GROUP = "[Desktop Entry]"
TRUE_VALUES = ("true", "1", "yes")


@dataclass(frozen=True)
class DesktopEntry:
    name: str
    exec: str
    categories: Tuple[str, ...]
    path: Path


def normalize_lang_tag(lang: str) -> str:
    """Drop the encoding and modifier, e.g. ``en_US.UTF-8`` -> ``en_US``."""
    for sep in (".", "@"):
        lang = lang.split(sep, 1)[0]
    return lang


def matches_lang_tag(tag: str, lang: str) -> bool:
    if not tag or not lang:
        return False
    lang = normalize_lang_tag(lang)
    if not lang:
        return False
    return lang == tag or lang.startswith(tag + "_") or tag.startswith(lang)


def parse_bool(value: str) -> bool:
    return value.strip().lower() in TRUE_VALUES


def _split_list(value: str) -> Tuple[str, ...]:
    return tuple(part for part in value.split(";") if part)


def parse_desktop_entry(
    path,
    current_lang: Optional[str] = None,
    current_desktops: Optional[Sequence[str]] = None,
    *,
    strict: bool = True,
) -> Optional[DesktopEntry]:
    """Parse one descriptor file.

    Returns None when the file can't be read, is not an application, is
    hidden, is scoped away from the current desktops, or (in strict mode)
    has a missing or implausible Exec line.

    With ``strict=False`` the Exec line is not checked and defaults to an
    empty string, leaving the validity decision to the caller.
    """
    path = Path(path)
    try:
        contents = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        logger.debug("Cannot read %s: %s", path, exc)
        return None

    in_entry = False
    seen_type = False
    name = None
    localized_name = None
    exec_line = None
    categories: Tuple[str, ...] = ()

    for raw_line in contents.splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if line.startswith("[") and line.endswith("]"):
            if in_entry:
                break
            in_entry = line == DESKTOP_ENTRY_GROUP
            continue
        if not in_entry:
            continue

        key, sep, value = line.partition("=")
        if not sep:
            continue
        key = key.strip()
        value = value.strip()

        if key == "Type":
            if value != "Application":
                logger.debug("Rejecting %s: Type=%s", path, value)
                return None
            seen_type = True
        elif key == "Name":
            name = value
        elif key.startswith("Name[") and key.endswith("]"):
            if current_lang and matches_lang_tag(key[5:-1], current_lang):
                localized_name = value
        elif key == "Exec":
            exec_line = value
        elif key == "Categories":
            categories = _split_list(value)
        elif key in ("NoDisplay", "Hidden"):
            if parse_bool(value):
                logger.debug("Rejecting %s: %s=%s", path, key, value)
                return None
        elif key == "OnlyShowIn":
            if current_desktops is not None:
                if not any(tag in current_desktops for tag in _split_list(value)):
                    logger.debug("Rejecting %s: OnlyShowIn=%s", path, value)
                    return None
        elif key == "NotShowIn":
            if current_desktops is not None:
                if any(tag in current_desktops for tag in _split_list(value)):
                    logger.debug("Rejecting %s: NotShowIn=%s", path, value)
                    return None

    if not seen_type:
        logger.debug("Rejecting %s: no Type=Application", path)
        return None

    if strict:
        if exec_line is None or not exec_looks_valid(exec_line):
            logger.debug("Rejecting %s: Exec=%r", path, exec_line)
            return None
    elif exec_line is None:
        exec_line = ""

    display_name = localized_name or name or path.stem
    if not display_name:
        return None

    return DesktopEntry(
        name=display_name,
        exec=exec_line,
        categories=categories,
        path=path,
    )
