"""Input validation with clear error messages."""

from __future__ import annotations

from typing import Any, Sequence

from .items import has_field


def validate_items(
    items: Any,
    name: str = "items",
    fields: Sequence[str] = ("id", "label"),
) -> list:
    """Validate that ``items`` is a list whose entries expose ``fields``.

    Returns the validated list (unchanged).
    """
    if not isinstance(items, list):
        raise TypeError(
            f"{name} must be a list of items, got {type(items).__name__}."
        )
    bad = [
        i for i, item in enumerate(items)
        if not all(has_field(item, f) for f in fields)
    ]
    if bad:
        wanted = " and ".join(f"'{f}'" for f in fields)
        raise TypeError(
            f"{name} entries need {wanted} (as attributes or keys). "
            f"Offending positions: {bad[:5]}"
            + (f" (and {len(bad) - 5} more)" if len(bad) > 5 else "")
        )
    return items
