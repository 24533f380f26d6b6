"""Shared test fixtures for multiselect-state."""

import pytest

from multiselect_state import Item


@pytest.fixture
def items():
    """Three dict items with ascending integer ids."""
    return [
        {"id": 0, "label": "item 0"},
        {"id": 1, "label": "item 1"},
        {"id": 2, "label": "item 2"},
    ]


@pytest.fixture
def record_items():
    """Item records with string ids, deliberately not in id order."""
    return [
        Item(id="gene_C", label="CD8A"),
        Item(id="gene_A", label="CD4"),
        Item(id="gene_B", label="FOXP3"),
    ]


class Recorder:
    """Collects calls made to it, for on_change and list handles."""

    def __init__(self):
        self.calls = []

    def __call__(self, *args):
        self.calls.append(args)

    def update(self):
        self.calls.append(("update",))

    @property
    def count(self):
        return len(self.calls)

    @property
    def last(self):
        return self.calls[-1][0]


@pytest.fixture
def on_change():
    return Recorder()


@pytest.fixture
def handle():
    return Recorder()
