"""Tests for IdentityHasher equivalence and hash codes."""

import io
import struct
from collections import OrderedDict

import numpy as np
import pytest

from equivalence import IdentityHasher, ValueHasher
from equivalence.utils.bits import INT32_MAX, INT32_MIN

INF = float("inf")
NAN = float("nan")

OBJECT = object()
HANDLE = io.BytesIO()


def single_bits(value):
    """Reference IEEE-754 single-precision reinterpretation."""
    return struct.unpack("<i", struct.pack("<f", value))[0]


EQUIVALENT_VALUES = [
    (10, 10),
    (0, 0),
    (1.7, 1.7),
    (INF, INF),
    (-INF, -INF),
    (0.0, -0.0),
    ("abc", "abc"),
    ("", ""),
    (b"abc", bytearray(b"abc")),
    (True, True),
    (False, False),
    (None, None),
    (OBJECT, OBJECT),
    (HANDLE, HANDLE),
    ([], []),
    ([1, None, True], [1, None, True]),
    ([1, None, True], (1, None, True)),
    ({0: "a", 1: "b"}, ["a", "b"]),
    ({"a": 1, "b": [2, 3]}, {"a": 1, "b": [2, 3]}),
    ([OBJECT, 2], [OBJECT, 2]),
    (np.int64(5), 5),
    (np.float64(1.5), 1.5),
    (np.bool_(True), True),
]

NON_EQUIVALENT_VALUES = [
    (10, 11),
    (INF, -INF),
    (NAN, NAN),
    (0, 0.0),
    (1.7, 1.71),
    ("abc", "ab"),
    ("", 0),
    ("abc", b"abc"),
    (False, True),
    (True, 1),
    (False, 0),
    (None, 0),
    (None, False),
    (None, ""),
    (True, object()),
    (object(), object()),
    (io.BytesIO(), io.BytesIO()),
    ([1, None, True], [1, True, None]),
    ([1, None], [1]),
    ([1], [True]),
    ([0], [False]),
    ([0], [None]),
    ([False], [None]),
    ([True], [object()]),
    ([object()], [object()]),
    ([1, 2, 3], [3, 2, 1]),
    ({"a": 1, "b": 2}, {"b": 2, "a": 1}),
    ([1, None, 2], {"a": 1, "b": None, "c": 2}),
    ({0: 1}, {"0": 1}),
    ([], {}.keys()),
    ([1], 1),
]


@pytest.fixture
def hasher():
    return IdentityHasher()


class TestStrategyEquality:
    """Identity hashers are interchangeable with each other only."""

    def test_equals_same_class(self, hasher):
        other = IdentityHasher()

        assert hasher.equals(hasher)
        assert hasher.equals(other)
        assert other.equals(hasher)
        assert hasher == other
        assert hash(hasher) == hash(other)

    def test_not_equal_to_subclass(self, hasher):
        class CustomHasher(IdentityHasher):
            pass

        assert not hasher.equals(CustomHasher())
        assert not hasher.equals(ValueHasher())
        assert not hasher.equals(object())

    def test_get_hash_is_stable(self, hasher):
        assert hasher.get_hash() == IdentityHasher().get_hash()


class TestEquivalence:
    """Equivalence is reflexive, symmetric and transitive."""

    @pytest.mark.parametrize("left,right", EQUIVALENT_VALUES)
    def test_equivalent_values(self, hasher, left, right):
        assert hasher.equivalent(left, right)

    @pytest.mark.parametrize("left,right", NON_EQUIVALENT_VALUES)
    def test_non_equivalent_values(self, hasher, left, right):
        assert not hasher.equivalent(left, right)

    @pytest.mark.parametrize("left,right", EQUIVALENT_VALUES + NON_EQUIVALENT_VALUES)
    def test_symmetry(self, hasher, left, right):
        assert hasher.equivalent(left, right) == hasher.equivalent(right, left)

    @pytest.mark.parametrize("value", [
        10, 1.7, INF, "abc", "", b"", True, False, None,
        object(), io.BytesIO(), [], [1, None, True], {"a": {"b": [1]}},
    ])
    def test_reflexivity(self, hasher, value):
        assert hasher.equivalent(value, value)

    @pytest.mark.parametrize("a,b,c", [
        (10, 10, 10),
        ("abc", "abc", "abc"),
        ("", "", ""),
        (True, True, True),
        (None, None, None),
        (OBJECT, OBJECT, OBJECT),
        (HANDLE, HANDLE, HANDLE),
        ([1, None, True], (1, None, True), {0: 1, 1: None, 2: True}),
    ])
    def test_transitivity(self, hasher, a, b, c):
        assert hasher.equivalent(a, b)
        assert hasher.equivalent(b, c)
        assert hasher.equivalent(a, c)

    def test_nan_never_equivalent_even_with_same_bits(self, hasher):
        nan = float("nan")
        assert hasher.hash(nan) == hasher.hash(nan)
        assert not hasher.equivalent(nan, nan)

    def test_nested_arrays_recurse(self, hasher):
        assert hasher.equivalent([[1, [2]], {"k": (3,)}], [[1, [2]], {"k": [3]}])
        assert not hasher.equivalent([[1, [2]]], [[1, [2.0]]])

    def test_ordered_dict_and_dict_with_same_order(self, hasher):
        assert hasher.equivalent(OrderedDict([("a", 1), ("b", 2)]), {"a": 1, "b": 2})


class TestHashing:
    """Hash codes follow the documented recurrences."""

    @pytest.mark.parametrize("left,right", EQUIVALENT_VALUES)
    def test_hash_is_consistent_with_equivalent(self, hasher, left, right):
        assert hasher.equivalent(left, right)
        assert hasher.hash(left) == hasher.hash(right)

    def test_constants(self, hasher):
        assert hasher.hash(None) == 0
        assert hasher.hash(True) == 1231
        assert hasher.hash(False) == 1237
        assert hasher.hash([]) == 991
        assert hasher.hash({}) == 991

    def test_integer_is_its_own_hash(self, hasher):
        assert hasher.hash(0) == 0
        assert hasher.hash(42) == 42
        assert hasher.hash(-7) == -7

    def test_integer_wraps_to_32_bits(self, hasher):
        assert hasher.hash(2 ** 31) == INT32_MIN
        assert hasher.hash(2 ** 32 + 5) == 5
        assert hasher.hash(2 ** 40) == 0

    @pytest.mark.parametrize("value", [1.5, -1.0, 0.1, 3.4e38, 1e-45, INF, -INF])
    def test_float_is_single_precision_bit_pattern(self, hasher, value):
        assert hasher.hash(value) == single_bits(value)

    def test_float_known_values(self, hasher):
        assert hasher.hash(1.5) == 0x3FC00000
        assert hasher.hash(-1.0) == -1082130432

    def test_negative_zero_hashes_like_zero(self, hasher):
        assert hasher.hash(-0.0) == hasher.hash(0.0) == 0

    def test_float_out_of_single_range_saturates(self, hasher):
        assert hasher.hash(1e300) == hasher.hash(INF) == 0x7F800000

    def test_empty_string_is_seed(self, hasher):
        assert hasher.hash("") == IdentityHasher.HASH_STRING == 1321

    def test_string_polynomial_recurrence(self, hasher):
        after_a = 1321 * 31 + ord("a")
        after_ab = after_a * 31 + ord("b")

        assert hasher.hash("a") == after_a == 41048
        assert hasher.hash("ab") == after_ab == 1272586

    def test_bytes_hash_like_ascii_text(self, hasher):
        assert hasher.hash(b"abc") == hasher.hash("abc")

    def test_long_string_stays_in_32_bits(self, hasher):
        code = hasher.hash("x" * 1000)
        assert INT32_MIN <= code <= INT32_MAX

    def test_array_recurrence(self, hasher):
        key_hash = hasher.hash("0")
        assert key_hash == 1321 * 31 + ord("0")
        assert hasher.hash([1]) == 991 * 31 + (key_hash ^ 1)

    def test_mapping_keys_hash_as_text(self, hasher):
        assert hasher.hash({"0": 1}) == hasher.hash([1])

    def test_non_text_mapping_keys(self, hasher):
        key = (1, 2)
        expected = 991 * 31 + (hasher.hash(key) ^ hasher.hash("v"))
        assert hasher.hash({key: "v"}) == expected

    def test_deep_array_stays_in_32_bits(self, hasher):
        value = [list(range(50)) for _ in range(50)]
        code = hasher.hash(value)
        assert INT32_MIN <= code <= INT32_MAX

    def test_object_hash_is_stable_per_instance(self, hasher):
        value = object()
        assert hasher.hash(value) == hasher.hash(value)

    def test_resource_hash_is_stable_per_instance(self, hasher):
        handle = io.StringIO()
        assert hasher.hash(handle) == hasher.hash(handle)


class TestEndToEnd:
    def test_list_scenario(self, hasher):
        assert hasher.equivalent([1, None, True], [1, None, True]) is True
        assert hasher.equivalent([1, None, True], [1, True, None]) is False


def nested_list(depth):
    value = []
    for _ in range(depth):
        value = [value]
    return value


class TestRecursion:
    def test_deeply_nested_array_exceeds_recursion_limit(self, hasher):
        value = nested_list(5000)

        with pytest.raises(RecursionError):
            hasher.hash(value)

        with pytest.raises(RecursionError):
            hasher.equivalent(value, nested_list(5000))

    def test_self_containing_array(self, hasher):
        value = [1]
        value.append(value)

        with pytest.raises(RecursionError):
            hasher.hash(value)

        with pytest.raises(RecursionError):
            hasher.equivalent(value, value)
