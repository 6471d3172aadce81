"""Category tags derived from a record's name, primary path and explicit list."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from blockfinder.models.registry import ComponentRecord

_NAME_SPLIT = re.compile(r"[-_]")
_PATH_SPLIT = re.compile(r"[/\\]")
_MIN_TAG_LENGTH = 4

# Directory fragment (exact substring of the path) -> canonical singular tag
PATH_HINTS: tuple[tuple[tuple[str, ...], str], ...] = (
    (("buttons",), "button"),
    (("loaders",), "loader"),
    (("cards",), "card"),
    (("forms",), "form"),
    (("inputs",), "input"),
    (("modals", "dialogs"), "dialog"),
    (("navigation",), "nav"),
)


def _name_tags(name: str) -> set[str]:
    return {part.lower() for part in _NAME_SPLIT.split(name) if len(part) >= _MIN_TAG_LENGTH}


def _path_tags(path: str) -> set[str]:
    tags = {
        part.lower()
        for part in _PATH_SPLIT.split(path)
        if len(part) >= _MIN_TAG_LENGTH and "." not in part
    }
    for fragments, tag in PATH_HINTS:
        if any(fragment in path for fragment in fragments):
            tags.add(tag)
    return tags


def extract_categories(record: ComponentRecord) -> set[str]:
    """Return the lowercase category tags of ``record``.

    Deterministic and side-effect free; recomputed on every call.
    """
    categories = _name_tags(record.name)
    path = record.primary_path
    if path:
        categories |= _path_tags(path)
    categories.update(category.lower() for category in record.categories)
    return categories
