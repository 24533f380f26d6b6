"""MultiSelectState: selection and filter state for a list of items."""

from __future__ import annotations

import logging
from typing import Any, Hashable, Protocol

import param

from .core.filtering import extract_text, filter_items
from .core.items import ids_of
from .core.selection import (
    EMPTY,
    materialize,
    resync,
    toggle_all,
    toggle_item,
)
from .core.validation import validate_items

logger = logging.getLogger(__name__)


class ListHandle(Protocol):
    """Whatever the host renders the list with; we only ever call update()."""

    def update(self) -> Any: ...


class ItemList(param.List):
    """List parameter whose entries must expose the given item fields.

    Checked before the value is stored, so a rejected assignment leaves the
    previous list and everything derived from it in place.
    """

    __slots__ = []

    item_fields: tuple[str, ...] = ("id", "label")

    def _validate_value(self, val, allow_None):
        super()._validate_value(val, allow_None)
        if val is not None:
            validate_items(val, self.name or "items", self.item_fields)


class SelectedItemList(ItemList):
    """Only identities are read from controlled selections."""

    __slots__ = []

    item_fields = ("id",)


class MultiSelectState(param.Parameterized):
    """Owns the selection and filter text for a presentational list.

    The host passes ``items`` and, optionally, ``selected_items`` and
    ``on_change``. The presentational component receives the derived
    ``filtered_items`` / ``value`` lists plus the mutator callables from
    ``props()``.

    When ``selected_items`` is supplied the controller is controlled: every
    new list reference assigned to it overwrites the internal selection
    without echoing ``on_change``. Re-assigning the same list object is
    ignored.

    ``items`` and ``selected_items`` must be lists; hosts holding other
    sequences convert them first (``MultiSelectHost`` does this).
    """

    # --- Inputs (set by the host) ---
    items = ItemList(default=[], doc="Ordered items, each with id and label")
    selected_items = SelectedItemList(
        default=None, allow_None=True,
        doc="Externally controlled selection; None means uncontrolled",
    )
    on_change = param.Callable(
        default=None, allow_None=True,
        doc="Called with the selected items after every selection mutation",
    )

    # --- Filter ---
    filter_text = param.String(default="")

    # --- Derived (read-only for the host) ---
    filtered_items = param.List(default=[], constant=True)
    value = param.List(default=[], constant=True)

    def __init__(self, **params):
        super().__init__(**params)
        self._list: ListHandle | None = None
        self._last_selected_ref = self.selected_items
        if self.selected_items is not None:
            self._selection = ids_of(self.selected_items)
        else:
            self._selection = EMPTY
        self._refilter()
        self._revalue()
        self.param.watch(self._on_items, "items", onlychanged=False)
        self.param.watch(
            self._on_selected_items, "selected_items", onlychanged=False
        )

    # --- Read-only accessors ---

    @property
    def selection(self) -> frozenset:
        """Currently selected identities (may include ids not in items)."""
        return self._selection

    @property
    def list_handle(self) -> ListHandle | None:
        return self._list

    @property
    def controlled(self) -> bool:
        return self.selected_items is not None

    # --- Mutators ---

    def select_all_items(self) -> None:
        """Select every item, or clear if all are already selected."""
        self._commit(toggle_all(self._selection, ids_of(self.items)), "select_all")

    def select_item(self, item_id: Hashable) -> None:
        """Toggle one identity in or out of the selection."""
        self._commit(toggle_item(self._selection, item_id), "select_item")

    def clear_all(self) -> None:
        """Empty the selection. Notifies even if it was already empty."""
        self._commit(EMPTY, "clear_all")

    def filter_items(self, text: Any) -> None:
        """Set the filter text from a string or a host input event."""
        self.filter_text = extract_text(text)

    def get_list(self, handle: ListHandle | None) -> None:
        """Store the host's list handle for update() after mutations."""
        self._list = handle

    def props(self) -> dict[str, Any]:
        """Props injected into the presentational component."""
        return {
            "filtered_items": self.filtered_items,
            "selected_items": self.value,
            "select_all_items": self.select_all_items,
            "select_item": self.select_item,
            "clear_all": self.clear_all,
            "filter_items": self.filter_items,
            "get_list": self.get_list,
        }

    # --- Internals ---

    def _commit(self, selection: frozenset, source: str) -> None:
        self._selection = selection
        self._revalue()
        logger.debug("%s: %d selected", source, len(self.value))
        self._notify()

    def _notify(self) -> None:
        if self.on_change is not None:
            self.on_change(list(self.value))
        if self._list is not None:
            self._list.update()

    def _refilter(self) -> None:
        with param.edit_constant(self):
            self.filtered_items = filter_items(self.items, self.filter_text)

    def _revalue(self) -> None:
        with param.edit_constant(self):
            self.value = materialize(self.items, self._selection)

    def _on_items(self, event: param.parameterized.Event) -> None:
        self._refilter()
        self._revalue()

    @param.depends("filter_text", watch=True)
    def _on_filter_text(self) -> None:
        self._refilter()

    def _on_selected_items(self, event: param.parameterized.Event) -> None:
        """Mirror a host-supplied selection into internal state."""
        outcome = resync(self._last_selected_ref, event.new, event.new)
        if not outcome.replaces:
            return
        self._last_selected_ref = event.new
        self._selection = outcome.selection
        self._revalue()
        logger.debug("resync from selected_items: %d ids", len(self._selection))

    def __repr__(self) -> str:
        return (
            f"MultiSelectState(items={len(self.items)}, "
            f"selected={len(self._selection)}, "
            f"filter={self.filter_text!r})"
        )
