import pytest

from tonekit.pkgerror.sets import StringSet, string_key_set


def test_insert_returns_same_set_and_adds():
    s = StringSet()
    result = s.insert("a", "b", "a")
    assert result is s
    assert s == {"a", "b"}


def test_delete_removes_and_ignores_missing():
    s = StringSet(["a", "b", "c"])
    s.delete("b", "zz")
    assert s == {"a", "c"}


def test_has_queries():
    s = StringSet(["x", "y"])
    assert s.has("x")
    assert not s.has("z")
    assert s.has_all("x", "y")
    assert not s.has_all("x", "z")
    assert s.has_any("z", "y")
    assert not s.has_any("p", "q")


def test_has_all_of_nothing_is_true_and_has_any_of_nothing_is_false():
    s = StringSet()
    assert s.has_all() is True
    assert s.has_any() is False


def test_sorted_list_is_sorted():
    s = StringSet(["c", "a", "b"])
    assert s.sorted_list() == sorted(["c", "a", "b"])


def test_pop_any_removes_element():
    s = StringSet(["only"])
    assert s.pop_any() == "only"
    assert len(s) == 0
    assert s.pop_any() is None


def test_set_operations_from_examples():
    s = StringSet(["a1", "a2", "a3"])
    s2 = StringSet(["a1", "a2", "a4", "a5"])
    assert s - s2 == {"a3"}
    assert s2 - s == {"a4", "a5"}
    assert s & s2 == {"a1", "a2"}
    assert s | s2 == {"a1", "a2", "a3", "a4", "a5"}


def test_string_key_set_from_mapping():
    keys = string_key_set({"k1": 1, "k2": None})
    assert isinstance(keys, StringSet)
    assert keys == {"k1", "k2"}


def test_string_key_set_rejects_non_mapping():
    with pytest.raises(TypeError):
        string_key_set(["a", "b"])


def test_string_key_set_rejects_non_string_keys():
    with pytest.raises(TypeError):
        string_key_set({1: "a"})