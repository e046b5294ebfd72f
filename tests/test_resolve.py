from __future__ import annotations

import sys
from pathlib import Path

sys.path.append(str(Path(__file__).resolve().parents[1]))

from layoutpreview.core.resolve import as_mapping, first_present, optional_str, pick, pick_list, pick_sequence


def test_first_present_skips_falsy_candidates() -> None:
    assert first_present(None, "", 0, False, "value", "later") == "value"
    assert first_present(None, "", default="fallback") == "fallback"
    assert first_present() is None


def test_pick_reads_keys_in_order() -> None:
    props = {"subtitle": "", "content": "Body", "title": "Heading"}
    assert pick(props, "subtitle", "content", default="x") == "Body"
    assert pick(props, "missing", default="x") == "x"
    assert pick("not a mapping", "title", default="x") == "x"


def test_pick_sequence_takes_first_non_empty_list() -> None:
    props = {"items": [], "cards": [{"a": 1}], "destinations": [{"b": 2}]}
    assert pick_sequence(props, "items", "cards", "destinations") == [{"a": 1}]


def test_pick_sequence_ignores_strings_and_mappings() -> None:
    props = {"items": "abc", "cards": {"a": 1}, "destinations": ({"c": 3},)}
    assert pick_sequence(props, "items", "cards", "destinations") == [{"c": 3}]
    assert pick_sequence({}, "items") == []
    assert pick_sequence(None, "items") == []


def test_as_mapping_and_optional_str() -> None:
    assert as_mapping({"a": 1}) == {"a": 1}
    assert as_mapping(["a"]) == {}
    assert optional_str("x") == "x"
    assert optional_str(None) is None
    assert optional_str(12) is None


def test_pick_list_keeps_empty_lists() -> None:
    assert pick_list({"data": [], "items": [1]}, "data", "items") == []
    assert pick_list({"data": "x", "items": [1]}, "data", "items") == [1]
    assert pick_list({}, "data", "items") == []
    assert pick_list(None, "data") == []
