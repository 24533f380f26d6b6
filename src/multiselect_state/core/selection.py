"""Selection transitions: pure functions over identity sets.

Every transition returns a new frozenset; nothing here mutates its input
or knows about the controller that stores the result.
"""

from __future__ import annotations

import numbers
from dataclasses import dataclass
from enum import Enum
from typing import Any, Hashable, Iterable, Sequence

from .items import ids_of, item_id

EMPTY: frozenset = frozenset()


def sort_key(value: Hashable) -> tuple:
    """Total ascending order for identities.

    Numbers sort numerically and come before everything else; other
    identities sort by their string form.
    """
    if isinstance(value, numbers.Real):
        return (0, value, "")
    return (1, 0, str(value))


def toggle_all(current: frozenset, all_ids: Iterable[Hashable]) -> frozenset:
    """Select every identity, or clear when everything is already selected."""
    all_ids = frozenset(all_ids)
    if current == all_ids:
        return EMPTY
    return all_ids


def toggle_item(current: frozenset, value: Hashable) -> frozenset:
    """Flip membership of a single identity."""
    if value in current:
        return current - {value}
    return current | {value}


def materialize(items: Sequence[Any], selection: frozenset) -> list:
    """Items whose identity is selected, ascending by identity.

    The sort is stable, so items sharing an identity keep their input order.
    """
    chosen = [item for item in items if item_id(item) in selection]
    return sorted(chosen, key=lambda item: sort_key(item_id(item)))


class ResyncAction(Enum):
    NOOP = "noop"
    REPLACE = "replace"


@dataclass(frozen=True)
class Resync:
    """Outcome of comparing an incoming controlled prop with the last one."""

    action: ResyncAction
    selection: frozenset | None = None

    @property
    def replaces(self) -> bool:
        return self.action is ResyncAction.REPLACE


def resync(old_ref: Any, new_ref: Any, new_value: Iterable[Any] | None) -> Resync:
    """Decide whether an externally supplied selection overrides ours.

    Only a new reference triggers replacement; an identical object passed
    again is a no-op even if it was mutated in place. ``None`` replaces the
    selection with an empty one.
    """
    if new_ref is old_ref:
        return Resync(ResyncAction.NOOP)
    return Resync(ResyncAction.REPLACE, ids_of(new_value or ()))
