import copy

import pytest

from feedfilter.tools.walker import DocumentWalker, keep_item, walk


def test_keep_item_threshold_boundary():
    assert keep_item({"stat": {"view": 5000}}, 5000)
    assert not keep_item({"stat": {"view": 4999}}, 5000)


def test_keep_item_unknown_popularity():
    assert keep_item({"title": "x"}, 10 ** 9)
    assert keep_item("not an item", 10 ** 9)


def test_scalars_unchanged():
    for v in (None, 1, 1.5, "s", True):
        assert walk(v, 100) == v


def test_structure_without_candidates_is_identical():
    doc = {"a": [1, 2, {"b": "c"}], "d": {"e": [{"tag": "x"}, {"tag": "y"}]}, "f": None}
    original = copy.deepcopy(doc)
    assert walk(doc, 100) == original


def test_order_preserved():
    items = [{"view": v, "id": i} for i, v in enumerate([10, 500, 20, 700, 900, 5])]
    out = walk(items, 100)
    assert [x["id"] for x in out] == [1, 3, 4]


def test_nested_discovery():
    doc = {"l1": {"l2": {"l3": {"cards": [{"stat": {"play": 1}}, {"stat": {"play": 50}}]}}}}
    assert walk(doc, 10) == {"l1": {"l2": {"l3": {"cards": [{"stat": {"play": 50}}]}}}}


def test_surviving_items_are_walked():
    doc = [
        {"view": 100, "related": [{"view": 1}, {"view": 200}]},
        {"view": 2, "related": [{"view": 1}]},
    ]
    assert walk(doc, 50) == [{"view": 100, "related": [{"view": 200}]}]


def test_minority_object_list_left_unfiltered():
    arr = [{"stat": {"view": 10000}}, "a", "b"]
    assert walk(arr, 50000) == arr


def test_disabled_walks_but_does_not_filter():
    doc = {"items": [{"view": 1}, {"view": 2}]}
    walker = DocumentWalker(100, enabled=False)
    assert walker.walk(doc) == doc
    assert walker.lists_matched == 1
    assert walker.items_dropped == 0


def test_counters():
    walker = DocumentWalker(10)
    walker.walk({"a": [{"view": 1}, {"view": 20}], "b": [{"play": 3}]})
    assert walker.lists_matched == 2
    assert walker.items_dropped == 2


def test_failing_property_left_unmodified(monkeypatch):
    walker = DocumentWalker(10)
    real_walk = walker.walk
    bad = [{"view": 1}]

    def flaky(node):
        if node is bad:
            raise RuntimeError("boom")
        return real_walk(node)

    monkeypatch.setattr(walker, "walk", flaky)
    out = walker._walk_dict({"bad": bad, "good": [{"view": 1}, {"view": 50}]})
    assert out["bad"] is bad
    assert out["good"] == [{"view": 50}]


def test_recursion_error_is_not_swallowed():
    doc = [{"view": 1}]
    for _ in range(600):
        doc = {"a": doc}
    with pytest.raises(RecursionError):
        walk({"items": [{"view": 1}, {"view": 9}], "deep": doc}, 5)
