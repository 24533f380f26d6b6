"""Substring filtering of items by label."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Sequence

from .items import item_label


def filter_items(items: Sequence[Any], text: str) -> list:
    """Return items whose label contains ``text``, in their original order.

    Matching is case-sensitive. Empty text keeps every item.
    """
    if not text:
        return list(items)
    return [item for item in items if text in item_label(item)]


def extract_text(value: Any) -> str:
    """Pull the filter string out of whatever the host hands over.

    Accepts a plain string, a DOM-style event (``event.target.value``) or a
    param change event (``event.new``).
    """
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    target = getattr(value, "target", None)
    if target is not None and hasattr(target, "value"):
        return extract_text(target.value)
    if isinstance(value, Mapping) and isinstance(value.get("target"), Mapping):
        return extract_text(value["target"].get("value"))
    if hasattr(value, "new"):
        return extract_text(value.new)
    return str(value)
