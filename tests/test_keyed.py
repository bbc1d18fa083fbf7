import pytest

from dokumenty.keyed import CaseInsensitiveMap


def test_lookup_ignores_case():
    mapping = CaseInsensitiveMap()
    mapping.insert("Partida", 1)
    assert mapping["partida"] == 1
    assert mapping["PARTIDA"] == 1
    assert "pArTiDa" in mapping


def test_insert_does_not_overwrite():
    mapping = CaseInsensitiveMap()
    assert mapping.insert("uno", "a") is True
    assert mapping.insert("UNO", "b") is False
    assert mapping["uno"] == "a"
    assert len(mapping) == 1


def test_first_spelling_is_kept():
    mapping = CaseInsensitiveMap([("Alpha", 1), ("ALPHA", 2)])
    assert list(mapping) == ["Alpha"]


def test_iteration_follows_insertion_order():
    keys = ["c", "a", "b", "z"]
    mapping = CaseInsensitiveMap((key, index) for index, key in enumerate(keys))
    assert list(mapping) == keys
    assert list(mapping.values()) == [0, 1, 2, 3]
    assert list(mapping.items()) == list(zip(keys, range(4)))


def test_init_from_dict():
    mapping = CaseInsensitiveMap({"x": 1, "y": 2})
    assert len(mapping) == 2
    assert mapping["Y"] == 2


def test_pop_removes_and_returns():
    mapping = CaseInsensitiveMap({"key": "value"})
    assert mapping.pop("KEY") == "value"
    assert "key" not in mapping
    assert len(mapping) == 0


def test_pop_missing_raises():
    with pytest.raises(KeyError):
        CaseInsensitiveMap().pop("nothing")


def test_getitem_missing_raises():
    with pytest.raises(KeyError):
        CaseInsensitiveMap({"a": 1})["b"]


def test_delitem():
    mapping = CaseInsensitiveMap({"a": 1, "b": 2})
    del mapping["A"]
    assert list(mapping) == ["b"]
    with pytest.raises(KeyError):
        del mapping["a"]


def test_get_with_default():
    mapping = CaseInsensitiveMap({"a": 1})
    assert mapping.get("A") == 1
    assert mapping.get("missing") is None
    assert mapping.get("missing", 7) == 7


def test_reinsert_after_removal():
    mapping = CaseInsensitiveMap({"a": 1})
    mapping.pop("a")
    assert mapping.insert("A", 2) is True
    assert mapping["a"] == 2


def test_non_string_is_not_contained():
    assert (5 in CaseInsensitiveMap({"5": 1})) is False


def test_many_numeric_keys():
    mapping = CaseInsensitiveMap((str(i), i) for i in range(2000))
    assert len(mapping) == 2000
    assert all(mapping[str(i)] == i for i in range(0, 2000, 97))