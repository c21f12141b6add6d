import pytest

from advent24.day3 import (
    parse_memory,
    sum_enabled_multiplications,
    sum_multiplications,
)

EXAMPLE1 = "xmul(2,4)%&mul[3,7]!@^do_not_mul(5,5)+mul(32,64]then(mul(11,8)mul(8,5))"
EXAMPLE2 = "xmul(2,4)&mul[3,7]!^don't()_mul(5,5)+mul(32,64](mul(11,8)undo()?mul(8,5))"


def test_example_sum():
    assert sum_multiplications(EXAMPLE1) == 161


def test_example_enabled_sum():
    assert sum_enabled_multiplications(EXAMPLE2) == 48


def test_without_switches_enabled_sum_equals_total():
    assert sum_enabled_multiplications(EXAMPLE1) == sum_multiplications(EXAMPLE1)


def test_switches_do_not_change_plain_sum():
    assert sum_multiplications(EXAMPLE2) == sum_multiplications(
        EXAMPLE2.replace("don't()", "").replace("do()", "")
    )


def test_parse_memory_joins_lines():
    lines = ["mul(2,", "3)"]
    assert parse_memory(lines) == "mul(2,3)"
    assert sum_multiplications(parse_memory(lines)) == sum_multiplications("mul(2,3)")


def test_disabled_prefix_suppresses_everything():
    assert sum_enabled_multiplications("don't()" + EXAMPLE1) == (
        sum_enabled_multiplications("don't()")
    )


def test_do_reenables():
    assert sum_enabled_multiplications("don't()do()" + EXAMPLE1) == (
        sum_multiplications(EXAMPLE1)
    )


def test_no_instruction_raises():
    with pytest.raises(ValueError):
        sum_multiplications("mul[1,2] nothing here")
    with pytest.raises(ValueError):
        sum_enabled_multiplications("")


def test_non_ascii_digits_are_ignored():
    assert sum_multiplications("mul(\u0663,4)mul(2,3)") == sum_multiplications("mul(2,3)")