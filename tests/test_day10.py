import pytest

from advent24.day10 import parse_topo, trailhead_rating, trailhead_score

EXAMPLE = [
    "89010123",
    "78121874",
    "87430965",
    "96549874",
    "45678903",
    "32019012",
    "01329801",
    "10456732",
]


def _transposed(rows):
    return ["".join(column) for column in zip(*rows)]


def _mirrored(rows):
    return [row[::-1] for row in rows]


def test_parse_topo_reads_digits():
    assert parse_topo(["012", "345"]) == [[0, 1, 2], [3, 4, 5]]


def test_parse_topo_rejects_non_digits():
    with pytest.raises(ValueError):
        parse_topo(["01a"])


def test_single_trail():
    topo = parse_topo(["0123456789"])
    assert trailhead_score(topo) == 1
    assert trailhead_rating(topo) == trailhead_score(topo)


def test_example_score():
    assert trailhead_score(parse_topo(EXAMPLE)) == 36


def test_example_rating():
    assert trailhead_rating(parse_topo(EXAMPLE)) == 81


def test_rating_is_at_least_score():
    topo = parse_topo(EXAMPLE)
    assert trailhead_rating(topo) >= trailhead_score(topo)


@pytest.mark.parametrize("transform", [_transposed, _mirrored])
def test_score_and_rating_do_not_depend_on_orientation(transform):
    original = parse_topo(EXAMPLE)
    changed = parse_topo(transform(EXAMPLE))
    assert trailhead_score(changed) == trailhead_score(original)
    assert trailhead_rating(changed) == trailhead_rating(original)


def test_trails_counted_from_each_trailhead():
    single = parse_topo(["0123456789"])
    double = parse_topo(["0123456789", "0123456789"])
    assert trailhead_rating(double) > trailhead_rating(single)
    assert trailhead_score(double) == 2 * trailhead_score(single)