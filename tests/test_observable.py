"""Tests for ObservableData, the read/write interception layer."""

from ripplestate import Store


class TestObservableData:
    def test_item_syntax(self):
        d = Store({"a": 1}).data
        assert d["a"] == 1
        d["b"] = 2
        assert d["b"] == 2
        assert d.get("b") == 2

    def test_missing_key_is_none(self):
        d = Store().data
        assert d["missing"] is None
        assert d.get("missing") is None
        assert d.get("missing", "fallback") == "fallback"

    def test_contains(self):
        d = Store({"a": None}).data
        assert "a" in d
        assert "b" not in d

    def test_contains_is_tracked(self):
        s = Store()
        d = s.data
        s.computed(has_token=lambda: "token" in d)
        assert d["has_token"] is False
        d["token"] = "abc"
        assert d["has_token"] is True

    def test_untracked_views(self):
        s = Store({"a": 1, "b": 2})
        d = s.data
        s.computed(size=lambda: len(d), names=lambda: sorted(d))
        assert d["size"] == 2
        assert d["names"] == ["a", "b", "size"]
        d["a"] = 10
        assert d["size"] == 2
        assert s.dependents("a") == ()

    def test_to_dict_is_a_copy(self):
        d = Store({"a": 1}).data
        snapshot = d.to_dict()
        snapshot["a"] = 99
        assert d["a"] == 1
        assert set(d.keys()) == {"a"}

    def test_reads_outside_evaluation_record_nothing(self):
        s = Store({"a": 1})
        s.data["a"]
        assert s._anchor.dependencies == {}

    def test_repr(self):
        s = Store({"a": 1})
        assert repr(s.data) == "ObservableData({'a': 1})"
        d = s.data
        s.destroy()
        assert repr(d) == "ObservableData(<destroyed>)"
