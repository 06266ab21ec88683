"""Problems answered by binary search over a monotone condition."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from itertools import accumulate
from math import isqrt

_SEARCH_LIMIT = 10**15
_STEPS_LIMIT = 10**11
_MACHINE_CAP = 10**9


def _first_true(lo: int, hi: int, holds: Callable[[int], bool]) -> int | None:
    """Smallest value in [lo, hi] where a monotone condition holds."""
    found = None
    while lo <= hi:
        mid = (lo + hi) // 2
        if holds(mid):
            found = mid
            hi = mid - 1
        else:
            lo = mid + 1
    return found


def _last_true(lo: int, hi: int, holds: Callable[[int], bool]) -> int | None:
    """Largest value in [lo, hi] where a monotone condition holds."""
    found = None
    while lo <= hi:
        mid = (lo + hi) // 2
        if holds(mid):
            found = mid
            lo = mid + 1
        else:
            hi = mid - 1
    return found


def min_largest_subarray_sum(values: Sequence[int], k: int) -> int:
    """Smallest possible maximum sum when splitting values into at most k pieces."""

    def fits(limit: int) -> bool:
        segments, current = 1, 0
        for value in values:
            if value > limit:
                return False
            if current + value <= limit:
                current += value
            else:
                current = value
                segments += 1
        return segments <= k

    found = _first_true(1, _SEARCH_LIMIT, fits)
    return 0 if found is None else found


def min_production_time(machines: Sequence[int], k: int) -> int:
    """Shortest time in which machines with the given cycle times make k products."""
    if not machines:
        raise ValueError("at least one machine is needed")
    if any(m <= 0 for m in machines):
        raise ValueError("machine times must be positive")
    upper = min(min(machines), _MACHINE_CAP) * k

    def enough(time: int) -> bool:
        return sum(time // m for m in machines) >= k

    found = _first_true(1, upper, enough)
    return 0 if found is None else found


def multiplication_table_median(n: int) -> int:
    """Median entry of the n-by-n multiplication table."""
    if n < 1:
        raise ValueError("n must be positive")
    wanted = n * n // 2 + 1

    def reaches(value: int) -> bool:
        return sum(min(value // row, n) for row in range(1, n + 1)) >= wanted

    found = _first_true(1, n * n, reaches)
    return 0 if found is None else found


def max_aquarium_height(heights: Sequence[int], water: int) -> int:
    """Tallest tank that the given amount of water can fill over the coral."""

    def affordable(level: int) -> bool:
        return sum(level - h for h in heights if h < level) <= water

    found = _last_true(0, _SEARCH_LIMIT, affordable)
    return 0 if found is None else found


def min_set_or_decrease_steps(values: Sequence[int], k: int) -> int:
    """Fewest decrement-or-copy steps that bring the sum down to at most k."""
    if not values:
        raise ValueError("values must not be empty")
    ordered = sorted(values)
    n = len(ordered)
    first = ordered[0]
    prefix = list(accumulate(ordered))
    total = prefix[-1]

    def feasible(steps: int) -> bool:
        if total - steps <= k:
            return True
        for i in range(n - 1, max(1, n - steps) - 1, -1):
            copies = n - i
            lowered = first - (steps - copies)
            if prefix[i - 1] - first + lowered * (copies + 1) <= k:
                return True
        return False

    found = _first_true(0, _STEPS_LIMIT, feasible)
    if found is None:
        raise ValueError(f"no step count up to {_STEPS_LIMIT} is enough")
    return found


def cardboard_width(sizes: Sequence[int], total: int) -> int:
    """Border width w such that the squares (s + 2w)^2 use the given cardboard."""
    if not sizes:
        raise ValueError("sizes must not be empty")
    n = len(sizes)
    squares = sum(s * s for s in sizes)
    if total < squares:
        raise ValueError("total is smaller than the pictures themselves")
    mean = sum(sizes) // n
    spare = (total - squares) // (4 * n)
    return (isqrt(mean * mean + 4 * spare) - mean) // 2


def sage_birthday(prices: Sequence[int]) -> tuple[int, list[int]]:
    """Most cheap spheres achievable and an arrangement achieving them.

    A sphere is cheap when it is strictly cheaper than both neighbours.
    """
    ordered = sorted(prices)
    n = len(ordered)

    def possible(count: int) -> bool:
        return all(
            ordered[n - 1 - t] > ordered[count - 1 - t]
            and ordered[n - 2 - t] > ordered[count - 1 - t]
            for t in range(count)
        )

    found = _last_true(1, (n + 1) // 2 - 1, possible)
    cheap = 0 if found is None else found

    large = reversed(ordered[cheap:])
    small = reversed(ordered[:cheap])
    small_left = cheap
    arrangement = []
    for position in range(n):
        if position % 2 == 1 and small_left:
            arrangement.append(next(small))
            small_left -= 1
        else:
            arrangement.append(next(large))
    return cheap, arrangement


def iva_pav_queries(
    values: Sequence[int], queries: Sequence[tuple[int, int]]
) -> list[int]:
    """For each (l, k), the largest r with AND of values[l..r] at least k, else -1.

    Positions are 1-based.
    """
    n = len(values)
    table = [list(values)]
    width = 1
    while 2 * width <= n:
        previous = table[-1]
        table.append(
            [previous[i] & previous[i + width] for i in range(n - 2 * width + 1)]
        )
        width *= 2

    def range_and(lo: int, hi: int) -> int:
        level = (hi - lo + 1).bit_length() - 1
        row = table[level]
        return row[lo] & row[hi - (1 << level) + 1]

    answers = []
    for left, threshold in queries:
        start = left - 1
        if not 0 <= start < n:
            raise ValueError(f"query position {left} is outside 1..{n}")
        if values[start] < threshold:
            answers.append(-1)
            continue
        end = _last_true(start, n - 1, lambda e: range_and(start, e) >= threshold)
        answers.append(-1 if end is None else end + 1)
    return answers