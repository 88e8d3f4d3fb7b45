from orderedini import OrderedMap
import pytest


class TestOrderedMap:

    def test_iterates_in_insertion_order(self):
        m = OrderedMap()
        for key in ("c", "b", "a"):
            m.insert(key, key.upper())
        assert list(m) == ["c", "b", "a"]
        assert list(m.keys()) == ["c", "b", "a"]
        assert list(m.values()) == ["C", "B", "A"]

    def test_reinsert_keeps_position(self):
        m = OrderedMap([("c", 1), ("b", 2), ("a", 3)])
        assert m.insert("b", 20) == 2
        assert list(m.items()) == [("c", 1), ("b", 20), ("a", 3)]

    def test_insert_returns_none_for_new_key(self):
        m = OrderedMap()
        assert m.insert("a", 1) is None
        assert m.get("a") == 1
        assert m.get("b") is None
        assert "a" in m and "b" not in m

    def test_order_is_not_hash_order(self):
        keys = [str(i) for i in range(100, 0, -1)] + ["z", "a", "m"]
        m = OrderedMap((k, None) for k in keys)
        assert list(m) == keys

    def test_remove_keeps_order_of_remaining(self):
        m = OrderedMap(a=1, b=2, c=3, d=4)
        assert m.remove("b") == 2
        assert list(m) == ["a", "c", "d"]
        assert len(m) == 3

    def test_remove_absent(self):
        m = OrderedMap(a=1)
        assert m.remove("b") is None
        with pytest.raises(KeyError):
            del m["b"]
        with pytest.raises(KeyError):
            m["b"]

    def test_removed_key_is_appended_when_reinserted(self):
        m = OrderedMap(a=1, b=2, c=3)
        del m["a"]
        m["a"] = 10
        assert list(m.items()) == [("b", 2), ("c", 3), ("a", 10)]

    def test_iteration_is_restartable(self):
        m = OrderedMap(a=1, b=2)
        assert list(m.items()) == list(m.items()) == [("a", 1), ("b", 2)]

    def test_reassign_values_while_iterating(self):
        m = OrderedMap(a=1, b=2, c=3)
        for key, value in m.items():
            m[key] = value + 1
        assert list(m.items()) == [("a", 2), ("b", 3), ("c", 4)]

    @pytest.mark.parametrize(
        "mutate",
        [
            lambda m: m.insert("z", 0),
            lambda m: m.remove("b"),
            lambda m: m.clear(),
        ],
    )
    def test_structural_change_while_iterating(self, mutate):
        m = OrderedMap(a=1, b=2, c=3)
        with pytest.raises(RuntimeError):
            for _ in m:
                mutate(m)

    def test_equality(self):
        assert OrderedMap(a=1, b=2) == OrderedMap(a=1, b=2)
        assert OrderedMap(a=1, b=2) != OrderedMap(b=2, a=1)
        # against other mappings order doesn't matter
        assert OrderedMap(a=1, b=2) == {"b": 2, "a": 1}
        assert OrderedMap(a=1) != OrderedMap(a=2)

    def test_copy(self):
        m = OrderedMap(a=1, b=2)
        c = m.copy()
        c["c"] = 3
        assert list(m) == ["a", "b"]
        assert list(c) == ["a", "b", "c"]
        assert type(c) is OrderedMap

    def test_mutable_mapping_methods(self):
        m = OrderedMap()
        assert m.setdefault("a", 1) == 1
        assert m.setdefault("a", 2) == 1
        m.update({"b": 2}, c=3)
        assert m.pop("b") == 2
        assert list(m.items()) == [("a", 1), ("c", 3)]
        m.clear()
        assert len(m) == 0

    def test_repr(self):
        assert repr(OrderedMap(a=1)) == "OrderedMap([('a', 1)])"


class TestILoc:

    m = OrderedMap(a=1, b=2, c=3, d=4)

    @pytest.mark.parametrize(
        "index,result",
        [
            (0, ("a", 1)),
            (-1, ("d", 4)),
            ([0, 2], [("a", 1), ("c", 3)]),
            (slice(1, 3), [("b", 2), ("c", 3)]),
            (slice(-2, None), [("c", 3), ("d", 4)]),
        ],
    )
    def test_getitem(self, index, result):
        assert self.m.iloc[index] == result

    def test_out_of_range(self):
        with pytest.raises(IndexError):
            self.m.iloc[4]
        with pytest.raises(TypeError):
            self.m.iloc["a"]

    def test_setitem(self):
        m = OrderedMap(a=1, b=2, c=3)
        m.iloc[-1] = 30
        m.iloc[0:2] = [10, 20]
        assert list(m.items()) == [("a", 10), ("b", 20), ("c", 30)]
        with pytest.raises(TypeError):
            m.iloc[[0]] = 1
