"""Greedy and small dynamic-programming problems over arrays."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence

_MISSING_PICK = -100_000
_ACTIVITY_SHIFT = {0: 0, 1: 21, 2: 0, 3: 9, 4: 18, 5: 5, 6: 6, 7: 25, 8: 14, 9: 23}


def max_candy_gift(types: Sequence[int]) -> int:
    """Largest gift in which every candy type appears a distinct number of times."""
    if not types:
        raise ValueError("types must not be empty")
    counts = sorted(Counter(types).values(), reverse=True)
    limit = counts[0]
    total = 0
    for count in counts:
        if limit == 0:
            break
        take = min(count, limit)
        total += take
        limit = take - 1
    return total


def can_finish_jobs(jobs: Sequence[tuple[int, int]]) -> bool:
    """Whether (duration, deadline) jobs can all be done in deadline order."""
    elapsed = 0
    for duration, deadline in sorted(jobs, key=lambda job: job[1]):
        elapsed += duration
        if elapsed > deadline:
            return False
    return True


def strong_vertices(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """Sorted 1-based positions where a[i] - b[i] reaches its maximum."""
    if len(a) != len(b):
        raise ValueError("a and b must have the same length")
    if not a:
        raise ValueError("a and b must not be empty")
    differences = [x - y for x, y in zip(a, b)]
    best = max(differences)
    return [index for index, d in enumerate(differences, 1) if d == best]


def _top_three(values: Sequence[int]) -> list[tuple[int, int]]:
    return sorted((value, index) for index, value in enumerate(values))[-3:]


def max_three_activities(a: Sequence[int], b: Sequence[int], c: Sequence[int]) -> int:
    """Best total from one day for each of three activities.

    Only the three best days of each activity are considered, and the
    search marks a candidate as used even on the branch that skips it.
    """
    n = len(a)
    if len(b) != n or len(c) != n:
        raise ValueError("a, b and c must have the same length")
    if n < 3:
        raise ValueError("at least three days are needed")

    friend_ids: dict[int, int] = {}
    items: list[tuple[int, int, int]] = []
    columns = [_top_three(a), _top_three(b), _top_three(c)]
    for rank in range(3):
        for activity, column in enumerate(columns):
            value, day = column[rank]
            friend = friend_ids.setdefault(day, len(friend_ids) + 1)
            items.append((value, friend, activity))

    def search(i: int, activities: frozenset, days: frozenset, count: int) -> int:
        if i >= len(items):
            return 0 if count == 3 else _MISSING_PICK
        value, day, activity = items[i]
        take = 0
        if activity not in activities and day not in days:
            activities = activities | {activity}
            days = days | {day}
            take = value + search(i + 1, activities, days, count + 1)
        skip = search(i + 1, activities, days, count)
        return max(take, skip)

    return search(0, frozenset(), frozenset(), 0)


def can_equalize_mod10(values: Sequence[int]) -> bool:
    """Whether repeatedly adding a value's last digit can make all values equal."""
    adjusted = [value + _ACTIVITY_SHIFT[value % 10] for value in values]
    if any(value % 10 == 0 for value in adjusted):
        return len(set(adjusted)) <= 1
    return len({value % 20 for value in adjusted}) <= 1


def min_block_deletions(values: Sequence[int]) -> int:
    """Fewest deletions leaving a sequence of blocks, each a length then that many items."""
    if any(value < 0 for value in values):
        raise ValueError("values must not be negative")
    n = len(values)
    best = [0] * (n + 1)
    for i in range(n - 1, -1, -1):
        delete = 1 + best[i + 1]
        jump = i + values[i] + 1
        best[i] = min(delete, best[jump]) if jump <= n else delete
    return best[0]


def max_sum_after_negations(values: Sequence[int]) -> int:
    """Largest sum reachable by negating adjacent pairs any number of times."""
    total = sum(abs(v) for v in values)
    negatives = sum(1 for v in values if v < 0)
    zeros = sum(1 for v in values if v == 0)
    if negatives % 2 == 1 and (negatives + zeros) % 2 == 1:
        total -= 2 * min(abs(v) for v in values)
    return total


def has_balanced_subarray(values: Sequence[int]) -> bool:
    """Whether some subarray has equal sums at odd and even positions."""
    seen = {0}
    current = 0
    for index, value in enumerate(values):
        current += value if index % 2 == 0 else -value
        if current in seen:
            return True
        seen.add(current)
    return False