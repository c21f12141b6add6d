import pytest

from advent24.common import Position
from advent24.day12 import bulk_fence_price, fence_price, parse_garden, regions

EXAMPLE = ["AAAA", "BBCD", "BBCC", "EEEC"]

RECTANGLES = [["A"], ["AAAA"], ["AAA", "AAA"], ["AA", "AA", "AA"]]


def test_parse_garden_splits_characters():
    assert parse_garden(["AB", "CD"]) == [["A", "B"], ["C", "D"]]


def test_regions_use_column_and_row():
    assert regions(parse_garden(["AB"])) == [
        ("A", frozenset({Position(0, 0)})),
        ("B", frozenset({Position(1, 0)})),
    ]


def test_disconnected_plants_form_separate_regions():
    found = regions(parse_garden(["ABA"]))
    assert [plant for plant, _ in found] == ["A", "B", "A"]


def test_regions_cover_the_garden():
    found = regions(parse_garden(EXAMPLE))
    cells = [pos for _, region in found for pos in region]
    assert len(cells) == len(set(cells)) == len(EXAMPLE) * len(EXAMPLE[0])
    assert {plant for plant, _ in found} == set("".join(EXAMPLE))


def test_empty_cells_are_skipped():
    found = regions(parse_garden([".A"]))
    assert found == [("A", frozenset({Position(1, 0)}))]
    assert fence_price(parse_garden(["A."])) == fence_price(parse_garden(["A"]))


def test_example_fence_price():
    assert fence_price(parse_garden(EXAMPLE)) == 140


def test_example_bulk_fence_price():
    assert bulk_fence_price(parse_garden(EXAMPLE)) == 80


@pytest.mark.parametrize("rows", RECTANGLES)
def test_rectangle_fence_price(rows):
    height, width = len(rows), len(rows[0])
    assert fence_price(parse_garden(rows)) == height * width * 2 * (height + width)


@pytest.mark.parametrize("rows", RECTANGLES)
def test_rectangle_has_four_sides(rows):
    area = len(rows) * len(rows[0])
    assert bulk_fence_price(parse_garden(rows)) == 4 * area


def test_bulk_price_never_exceeds_price():
    garden = parse_garden(EXAMPLE)
    assert bulk_fence_price(garden) <= fence_price(garden)