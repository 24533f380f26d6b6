"""Item records and the accessors used to read identity and label."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Hashable, Iterable

import pandas as pd


@dataclass(frozen=True)
class Item:
    """A selectable record: a stable identity plus a label to filter on."""

    id: Hashable
    label: str


def _field(item: Any, name: str) -> Any:
    if isinstance(item, Mapping):
        return item[name]
    return getattr(item, name)


def item_id(item: Any) -> Hashable:
    """Identity of an item, read as attribute or mapping key."""
    return _field(item, "id")


def item_label(item: Any) -> str:
    """Label of an item as a string."""
    label = _field(item, "label")
    return label if isinstance(label, str) else str(label)


def has_field(item: Any, name: str) -> bool:
    if isinstance(item, Mapping):
        return name in item
    return hasattr(item, name)


def ids_of(items: Iterable[Any]) -> frozenset:
    """Set of identities of the given items."""
    return frozenset(item_id(item) for item in items)


def items_from_dataframe(
    df: pd.DataFrame,
    label_column: str,
    id_column: str | None = None,
) -> list[Item]:
    """Build Items from a DataFrame, one per row, in row order.

    Parameters
    ----------
    df : pd.DataFrame
        Source table.
    label_column : str
        Column whose values become item labels.
    id_column : str, optional
        Column holding identities. The index is used when omitted.
    """
    if not isinstance(df, pd.DataFrame):
        raise TypeError(
            f"Expected a pandas DataFrame, got {type(df).__name__}."
        )
    for col in (label_column, id_column):
        if col is not None and col not in df.columns:
            raise KeyError(
                f"Column '{col}' not found. Available: {list(df.columns)}"
            )
    ids = df.index if id_column is None else df[id_column]
    labels = df[label_column]
    return [
        Item(id=i, label=str(label))
        for i, label in zip(ids.tolist(), labels.tolist())
    ]
