import pytest

from jsonnetcore.stdcollections import (
    filter_array,
    flat_map,
    join,
    length,
    make_array,
    make_range,
    object_fields_ex,
    object_has_ex,
    reverse,
    sort_array,
)
from jsonnetcore.values import JsonnetRuntimeError


def test_length_of_containers_matches_python_len():
    for value in ([1, 2, 3], "héllo", {"a": 1, "b": 2}, []):
        assert length(value) == len(value)


def test_length_of_function_counts_required_parameters():
    def f(a, b, c=1):
        return a

    def g(a, b):
        return a

    assert length(f) == length(g)
    assert length(lambda: 0) == 0


def test_length_rejects_numbers():
    with pytest.raises(JsonnetRuntimeError, match="Unexpected type number"):
        length(3)


def test_join_strings_skips_null():
    assert join("-", ["x", None, "y"]) == join("-", ["x", "y"])
    assert join(",", ["a", "b"]) == "a,b"


def test_join_arrays():
    assert join([0], [[1], None, [2, 3]]) == [1, 0, 2, 3]


def test_join_wrong_element_type():
    with pytest.raises(JsonnetRuntimeError, match="expected string"):
        join(",", ["a", 1])
    with pytest.raises(JsonnetRuntimeError, match="expected array"):
        join([], [[1], "a"])


def test_join_bad_separator():
    with pytest.raises(JsonnetRuntimeError, match="join first parameter should be string or array, got number"):
        join(1, [])


def test_reverse_is_involution():
    data = [1, "a", None, [2]]
    assert reverse(reverse(data)) == data
    assert reverse(data)[0] == data[-1]


def test_filter_keeps_order_and_matching():
    data = [5, 1, 8, 3, 9]
    result = filter_array(lambda v: v > 4, data)
    assert all(v > 4 for v in result)
    assert result == [v for v in data if v in result]


def test_filter_requires_boolean_result():
    with pytest.raises(JsonnetRuntimeError, match="expected boolean"):
        filter_array(lambda v: 1, [1])


def test_filter_requires_function():
    with pytest.raises(JsonnetRuntimeError, match="expected function"):
        filter_array(3, [1])


def test_flat_map_array_concatenates():
    result = flat_map(lambda v: [v, v], ["p", "q"])
    assert result == ["p", "p", "q", "q"]


def test_flat_map_string():
    assert flat_map(lambda c: c + c, "ab") == "aabb"
    with pytest.raises(JsonnetRuntimeError, match="expected string"):
        flat_map(lambda c: 1, "ab")


def test_flat_map_bad_input():
    with pytest.raises(JsonnetRuntimeError, match="std.flatMap second param must be array / string, got number"):
        flat_map(lambda v: [v], 5)


def test_sort_is_ordered_permutation():
    data = [3, 1, 2, 5, 4]
    result = sort_array(data)
    assert sorted(result) == result
    assert sorted(data) == result


def test_sort_is_stable_with_key():
    data = [[1, "b"], [0, "x"], [1, "a"]]
    result = sort_array(data, lambda v: v[0])
    assert result == [data[1], data[0], data[2]]


def test_sort_mixed_types_fails():
    with pytest.raises(JsonnetRuntimeError):
        sort_array([1, "a"])


def test_make_range_inclusive():
    result = make_range(2, 6)
    assert result[0] == 2 and result[-1] == 6
    assert len(result) == 6 - 2 + 1


def test_make_range_empty_and_non_integer():
    assert make_range(4, 3) == []
    with pytest.raises(JsonnetRuntimeError):
        make_range(1.5, 3)


def test_make_array_indices():
    result = make_array(4, lambda i: i)
    assert result == make_range(0, 3)
    assert make_array(0, lambda i: i) == []


def test_object_fields_sorted():
    obj = {"b": 1, "a": 2, "c": 3}
    assert object_fields_ex(obj, False) == sorted(obj)
    with pytest.raises(JsonnetRuntimeError, match="expected boolean"):
        object_fields_ex(obj, 1)


def test_object_has():
    obj = {"k": None}
    assert object_has_ex(obj, "k", True) is True
    assert object_has_ex(obj, "z", True) is False
    with pytest.raises(JsonnetRuntimeError, match="expected object"):
        object_has_ex([], "k", True)