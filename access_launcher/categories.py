"""Map desktop ``Categories`` tags onto the launcher's fixed buckets."""

from __future__ import annotations

from collections import defaultdict
from typing import Dict, Iterable, List, Sequence, Union

OTHER = "Other"

# Display order for the categories pane.
CATEGORY_LABELS = (
    "Accessories",
    "Audio/Video",
    "Development",
    "Games",
    "Graphics",
    "Text Editors",
    "Internet",
    "Office",
    "System",
    "Terminal Emulator",
    "Utilities",
    OTHER,
)

# Highest priority first; an app lands in the first bucket any of its tags hits.
CATEGORY_PRIORITY = (
    ("Terminal Emulator", ("TerminalEmulator", "Terminal")),
    ("Internet", ("Network", "WebBrowser", "Internet")),
    ("Games", ("Game", "Games")),
    ("Audio/Video", ("Audio", "AudioVideo", "AudioVideoEditing", "Video", "VideoConference")),
    ("Graphics", ("Graphics", "Photography")),
    ("Development", ("Development", "IDE", "Programming")),
    ("Accessories", ("Accessory", "Accessories")),
    ("Text Editors", ("TextEditor",)),
    ("Office", ("Office",)),
    ("Utilities", ("Utility", "Utilities")),
    ("System", ("System", "Settings")),
)

_TAG_RANK = {
    tag: (rank, bucket)
    for rank, (bucket, tags) in enumerate(CATEGORY_PRIORITY)
    for tag in tags
}


def split_tags(categories: Union[str, Iterable[str]]) -> List[str]:
    if isinstance(categories, str):
        categories = categories.split(";")
    return [tag for tag in categories if tag]


def map_categories(categories: Union[str, Iterable[str]]) -> str:
    """Return the bucket label for a raw tag string or a list of tags."""
    best = None
    for tag in split_tags(categories):
        hit = _TAG_RANK.get(tag)
        if hit is not None and (best is None or hit[0] < best[0]):
            best = hit
    return best[1] if best is not None else OTHER


def build_category_map(entries: Sequence) -> Dict[str, List[int]]:
    """Group entry positions by bucket, keeping the entries' order."""
    buckets = defaultdict(list)
    for index, entry in enumerate(entries):
        buckets[map_categories(entry.categories)].append(index)
    return dict(sorted(buckets.items()))
