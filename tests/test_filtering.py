"""Tests for label filtering and filter-text extraction."""

from types import SimpleNamespace

from multiselect_state import Item
from multiselect_state.core.filtering import extract_text, filter_items


class TestFilterItems:
    def test_empty_text_keeps_all(self, items):
        result = filter_items(items, "")
        assert result == items
        assert result is not items

    def test_substring_match(self, items):
        assert filter_items(items, "2") == [items[2]]

    def test_preserves_input_order(self, record_items):
        result = filter_items(record_items, "CD")
        assert [i.id for i in result] == ["gene_C", "gene_A"]

    def test_case_sensitive(self, record_items):
        assert filter_items(record_items, "cd") == []

    def test_no_match(self, items):
        assert filter_items(items, "zzz") == []

    def test_non_string_label(self):
        items = [Item(id=1, label=2024), Item(id=2, label=1999)]
        assert filter_items(items, "20") == [items[0]]


class TestExtractText:
    def test_plain_string(self):
        assert extract_text("abc") == "abc"

    def test_dom_style_event(self):
        event = SimpleNamespace(target=SimpleNamespace(value="2"))
        assert extract_text(event) == "2"

    def test_dict_event(self):
        assert extract_text({"target": {"value": "2"}}) == "2"

    def test_dict_event_with_plain_target(self):
        assert extract_text({"target": "2"}) == str({"target": "2"})

    def test_param_event(self):
        event = SimpleNamespace(new="foo", old="")
        assert extract_text(event) == "foo"

    def test_none_is_empty(self):
        assert extract_text(None) == ""

    def test_other_values_stringified(self):
        assert extract_text(42) == "42"
