import itertools
import random

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from shardkit import errors
from shardkit.polynomial import Polynomial
from shardkit.shamir import combine, interpolate_polynomial, share_coordinate, split


def test_split():
    secret = b"test"
    out = split(secret, 5, 3)
    assert len(out) == 5
    for share in out:
        assert len(share) == len(secret) + 1
    xs = {share_coordinate(share) for share in out}
    assert len(xs) == 5
    assert all(1 <= x <= 255 for x in xs)


def test_combine_any_three_of_five():
    secret = b"test"
    out = split(secret, 5, 3)
    for subset in itertools.permutations(out, 3):
        assert combine(list(subset)) == secret


def test_combine_with_more_than_threshold(rng):
    secret = b"correct horse battery staple"
    shares = split(secret, 6, 4, rng=rng)
    assert combine(shares[:4]) == secret
    assert combine(shares) == secret
    assert combine(list(reversed(shares[1:]))) == secret


def test_combine_below_threshold_is_wrong(rng):
    secret = bytes(range(16))
    shares = split(secret, 5, 4, rng=rng)
    assert combine(shares[:3]) != secret


def test_split_is_deterministic_for_seeded_source():
    first = split(b"seed me", 4, 2, rng=random.Random(99))
    second = split(b"seed me", 4, 2, rng=random.Random(99))
    assert first == second


def test_edge_cases(rng):
    one_byte = split(b"\x00", 2, 2, rng=rng)
    assert combine(one_byte) == b"\x00"

    all_required = split(b"\xff\x01", 4, 4, rng=rng)
    assert combine(all_required) == b"\xff\x01"


def test_max_parts_and_threshold(rng):
    shares = split(b"Z", 255, 255, rng=rng)
    assert sorted(share_coordinate(s) for s in shares) == list(range(1, 256))
    assert combine(shares) == b"Z"


@pytest.mark.parametrize(
    "secret, parts, threshold, expected",
    [
        (b"test", 2, 3, errors.PartsBelowThresholdError),
        (b"test", 0, 1, errors.PartsBelowThresholdError),
        (b"test", 1000, 3, errors.PartsOutOfRangeError),
        (b"test", 10, 1, errors.ThresholdTooLowError),
        (b"test", 10, 0, errors.ThresholdTooLowError),
        (b"", 5, 3, errors.EmptySecretError),
        # earlier checks win
        (b"", 2, 3, errors.PartsBelowThresholdError),
        (b"", 1000, 1, errors.PartsOutOfRangeError),
        (b"", 3, 1, errors.ThresholdTooLowError),
    ],
)
def test_split_invalid(secret, parts, threshold, expected):
    with pytest.raises(expected):
        split(secret, parts, threshold)


@pytest.mark.parametrize(
    "parts, expected_kind",
    [
        ([], "TooFewShares"),
        ([b"foo"], "TooFewShares"),
        ([b"foo", b"ba"], "MalformedOrMismatchedShares"),
        ([b"f", b"b"], "MalformedOrMismatchedShares"),
        ([b"foo", b"foo"], "DuplicateShareCoordinate"),
        ([b"foo", b"bao"], "DuplicateShareCoordinate"),
    ],
)
def test_combine_invalid(parts, expected_kind):
    with pytest.raises(errors.ShamirError) as exc:
        combine(parts)
    assert exc.value.kind == expected_kind


def test_errors_are_value_errors():
    with pytest.raises(ValueError):
        split(b"test", 2, 3)


def test_interpolate_rand(rng):
    for i in range(256):
        p = Polynomial.random(i, 2, rng)
        x_vals = [1, 2, 3]
        y_vals = [p.evaluate(1), p.evaluate(2), p.evaluate(3)]
        assert interpolate_polynomial(x_vals, y_vals, 0) == i


def test_interpolate_at_sample_point(rng):
    p = Polynomial.random(77, 3, rng)
    x_vals = [5, 9, 200, 31]
    y_vals = [p.evaluate(x) for x in x_vals]
    assert interpolate_polynomial(x_vals, y_vals, 9) == p.evaluate(9)
    assert interpolate_polynomial(x_vals, y_vals, 100) == p.evaluate(100)


@settings(max_examples=50, deadline=None)
@given(
    secret=st.binary(min_size=1, max_size=32),
    threshold=st.integers(min_value=2, max_value=8),
    extra=st.integers(min_value=0, max_value=6),
    seed=st.integers(min_value=0, max_value=2**32 - 1),
)
def test_round_trip(secret, threshold, extra, seed):
    rng = random.Random(seed)
    parts = threshold + extra
    shares = split(secret, parts, threshold, rng=rng)
    subset = rng.sample(shares, threshold)
    assert combine(subset) == secret
