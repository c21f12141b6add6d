"""Print Queue: checking and repairing page orderings of safety manual updates."""

from __future__ import annotations

from typing import Iterable, Sequence

Ordering = dict[int, set[int]]


def parse_rules(lines: Iterable[str]) -> tuple[Ordering, list[list[int]]]:
    """Parse ordering rules and updates separated by a blank line.

    The ordering maps each page to the set of pages that must be printed
    before it.
    """
    ordering: Ordering = {}
    updates: list[list[int]] = []
    in_updates = False
    for line in lines:
        if line == "":
            in_updates = True
            continue
        if in_updates:
            updates.append([int(value) for value in line.split(",")])
        else:
            before, after = line.split("|")
            ordering.setdefault(int(after), set()).add(int(before))
    return ordering, updates


def is_correct(update: Sequence[int], ordering: Ordering) -> bool:
    """True if no page is followed by a page that must come before it."""
    return not any(
        ordering.get(page, set()).intersection(update[index + 1:])
        for index, page in enumerate(update)
    )


def middle_page(update: Sequence[int]) -> int:
    """The page in the middle of the update."""
    if not update:
        raise ValueError("an empty update has no middle page")
    return update[len(update) // 2]


def fix_update(update: Sequence[int], ordering: Ordering) -> list[int]:
    """Bubble-sort the pages against the rules.

    Pages that the rules place later end up first, so the result is the
    corrected update read backwards; its middle page is the same for an
    update of odd length.
    """
    pages = list(update)
    swapped = True
    while swapped:
        swapped = False
        for j in range(len(pages) - 1):
            if pages[j] in ordering.get(pages[j + 1], set()):
                pages[j], pages[j + 1] = pages[j + 1], pages[j]
                swapped = True
    return pages


def sum_correct_middles(ordering: Ordering, updates: Iterable[Sequence[int]]) -> int:
    """Sum of the middle pages of the correctly ordered updates."""
    return sum(
        middle_page(update) for update in updates if is_correct(update, ordering)
    )


def sum_fixed_middles(ordering: Ordering, updates: Iterable[Sequence[int]]) -> int:
    """Sum of the middle pages of the incorrect updates once repaired."""
    return sum(
        middle_page(fix_update(update, ordering))
        for update in updates
        if not is_correct(update, ordering)
    )