"""
Helpers for the comma-joined tag fields (project tech stacks, post and
gallery tags). Tags are stored exactly as submitted; trimming and
de-duplication happen here, when a tag string is read.
"""
from typing import Iterable, List, Optional

TAG_SEPARATOR = ","


def split_tags(raw: Optional[str]) -> List[str]:
    """Split a stored tag string into trimmed, non-empty, unique tags (first occurrence wins)."""
    if not raw:
        return []
    seen = set()
    tags = []
    for part in raw.split(TAG_SEPARATOR):
        tag = part.strip()
        if tag and tag not in seen:
            seen.add(tag)
            tags.append(tag)
    return tags


def join_tags(tags: Iterable[str]) -> str:
    return TAG_SEPARATOR.join(t.strip() for t in tags if t and t.strip())


def collect_tags(raws: Iterable[Optional[str]]) -> List[str]:
    """Distinct tags across many stored strings, sorted case-insensitively."""
    found = set()
    for raw in raws:
        found.update(split_tags(raw))
    return sorted(found, key=lambda t: (t.lower(), t))
