"""Tests for fractional order keys."""

from __future__ import annotations

import random

import pytest

from issy.roadmap.order_keys import (
    decrement_integer,
    generate_batch_order_keys,
    generate_key_between,
    generate_n_keys_between,
    increment_integer,
    is_valid_order_key,
    midpoint,
    validate_order_key,
)


class TestGenerateKeyBetween:
    def test_initial_key(self):
        assert generate_key_between(None, None) == "a0"

    def test_append(self):
        assert generate_key_between("a0", None) == "a1"
        assert generate_key_between("a1", None) == "a2"

    def test_prepend(self):
        assert generate_key_between(None, "a0") == "Zz"

    @pytest.mark.parametrize(
        "lo,hi",
        [("a0", "a1"), ("a0", "a0V"), ("a1", "a2"), ("Zz", "a0"), ("a0", "b00"), ("a0V", "a1"), ("a00V", "a01")],
    )
    def test_strictly_between(self, lo, hi):
        key = generate_key_between(lo, hi)
        assert lo < key < hi

    def test_between_adjacent_integers(self):
        key = generate_key_between("a0", "a1")
        assert key == "a0V"

    def test_rolls_over_integer_length(self):
        assert generate_key_between("az", None) == "b00"
        assert generate_key_between(None, "b00") == "az"

    def test_rejects_inverted_bounds(self):
        with pytest.raises(ValueError):
            generate_key_between("a1", "a0")

    def test_rejects_equal_bounds(self):
        with pytest.raises(ValueError):
            generate_key_between("a1", "a1")

    def test_rejects_malformed_key(self):
        with pytest.raises(ValueError):
            generate_key_between("a10", None)  # trailing zero
        with pytest.raises(ValueError):
            generate_key_between("!", None)


class TestRepeatedInsertion:
    def test_thousand_inserts_after_same_target(self):
        target, following = "a0", "a1"
        keys = []
        for _ in range(1000):
            key = generate_key_between(target, following)
            assert target < key < following
            keys.append(key)
            following = key
        assert len(set(keys)) == 1000
        # each new key lands before the previous one
        assert keys == sorted(keys, reverse=True)

    def test_thousand_inserts_before_same_target(self):
        previous, target = "a0", "a1"
        keys = []
        for _ in range(1000):
            key = generate_key_between(previous, target)
            assert previous < key < target
            keys.append(key)
            previous = key
        assert len(set(keys)) == 1000
        assert keys == sorted(keys)

    def test_thousand_prepends(self):
        first = "a0"
        keys = []
        for _ in range(1000):
            first = generate_key_between(None, first)
            keys.append(first)
        assert keys == sorted(keys, reverse=True)
        assert len(set(keys)) == 1000

    def test_thousand_appends(self):
        last = None
        keys = []
        for _ in range(1000):
            last = generate_key_between(last, None)
            keys.append(last)
        assert keys == sorted(keys)
        assert len(set(keys)) == 1000

    def test_random_insertions_keep_intended_order(self):
        rng = random.Random(1234)
        ordered: list[str] = []
        for _ in range(500):
            slot = rng.randint(0, len(ordered))
            lo = ordered[slot - 1] if slot > 0 else None
            hi = ordered[slot] if slot < len(ordered) else None
            ordered.insert(slot, generate_key_between(lo, hi))
        assert ordered == sorted(ordered)
        assert len(set(ordered)) == len(ordered)
        assert all(is_valid_order_key(k) for k in ordered)


class TestGenerateNKeys:
    def test_count_and_order(self):
        keys = generate_n_keys_between("a0", "a1", 7)
        assert len(keys) == 7
        assert keys == sorted(keys)
        assert all("a0" < k < "a1" for k in keys)

    def test_zero(self):
        assert generate_n_keys_between(None, None, 0) == []

    def test_unbounded_below(self):
        keys = generate_n_keys_between(None, "a0", 3)
        assert keys == sorted(keys)
        assert keys[-1] < "a0"


class TestBatchOrderKeys:
    def test_generates_requested_count(self):
        assert len(generate_batch_order_keys(5)) == 5

    def test_strictly_increasing(self):
        keys = generate_batch_order_keys(100)
        assert all(a < b for a, b in zip(keys, keys[1:]))

    def test_single_key(self):
        assert generate_batch_order_keys(1) == ["a0"]

    def test_starts_at_initial_key(self):
        assert generate_batch_order_keys(3) == ["a0", "a1", "a2"]


class TestHelpers:
    def test_midpoint_basic(self):
        assert midpoint("", None) == "V"
        assert "" < midpoint("", "1") < "1"

    def test_increment_integer(self):
        assert increment_integer("a0") == "a1"
        assert increment_integer("az") == "b00"
        assert increment_integer("Zz") == "a0"
        assert increment_integer("z" + "z" * 26) is None

    def test_decrement_integer(self):
        assert decrement_integer("a1") == "a0"
        assert decrement_integer("a0") == "Zz"
        assert decrement_integer("b00") == "az"
        assert decrement_integer("A" + "0" * 26) is None

    @pytest.mark.parametrize("key", ["a0", "a0V", "Zz", "b00", "b00V"])
    def test_valid_keys(self, key):
        validate_order_key(key)

    @pytest.mark.parametrize("key", ["", "a", "a0V0", "A" + "0" * 26, "a0!", "1"])
    def test_invalid_keys(self, key):
        assert not is_valid_order_key(key)
