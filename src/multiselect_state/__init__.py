"""multiselect-state: multi-select and filter state for list components."""

from ._version import __version__
from .core.items import Item, items_from_dataframe
from .hoc import MultiSelectHost, with_multi_select_state
from .state import ListHandle, MultiSelectState

__all__ = [
    "__version__",
    "Item",
    "items_from_dataframe",
    "ListHandle",
    "MultiSelectHost",
    "MultiSelectState",
    "with_multi_select_state",
]
