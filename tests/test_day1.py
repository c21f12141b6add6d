import pytest

from advent24.day1 import parse_lists, similarity_score, total_distance

EXAMPLE = [
    "3   4",
    "4   3",
    "2   5",
    "1   3",
    "3   9",
    "3   3",
]


def test_example_total_distance():
    left, right = parse_lists(EXAMPLE)
    assert total_distance(left, right) == 11


def test_example_similarity_score():
    left, right = parse_lists(EXAMPLE)
    assert similarity_score(left, right) == 31


def test_parse_round_trip():
    left = [10, 20, 30]
    right = [7, 8, 9]
    lines = [f"{a}   {b}" for a, b in zip(left, right)]
    assert parse_lists(lines) == (left, right)


def test_parse_rejects_malformed_line():
    with pytest.raises(ValueError):
        parse_lists(["12"])


def test_parse_rejects_non_numbers():
    with pytest.raises(ValueError):
        parse_lists(["a   b"])


def test_distance_of_identical_lists_is_zero():
    values = [5, 1, 9, 3]
    assert total_distance(values, list(reversed(values))) == 0


def test_distance_is_symmetric():
    left, right = parse_lists(EXAMPLE)
    assert total_distance(left, right) == total_distance(right, left)


def test_distance_rejects_lists_of_different_length():
    with pytest.raises(ValueError):
        total_distance([1, 2], [1])


def test_similarity_ignores_order():
    left, right = parse_lists(EXAMPLE)
    assert similarity_score(left, right) == similarity_score(
        sorted(left), sorted(right, reverse=True)
    )


def test_similarity_with_no_shared_numbers():
    assert similarity_score([1, 2, 3], [4, 5, 6]) == 0