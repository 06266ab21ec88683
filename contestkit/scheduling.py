"""Interval scheduling, matching and greedy stacking problems."""

from __future__ import annotations

import heapq
from bisect import bisect_right, insort
from collections.abc import Sequence


def max_movies_watched(movies: Sequence[tuple[int, int]], k: int) -> int:
    """Most (start, end) movies that k club members can watch in total."""
    if k < 0:
        raise ValueError("k must not be negative")
    free_at = [-1] * k
    watched = 0
    for start, end in sorted(movies, key=lambda movie: (movie[1], movie[0])):
        position = bisect_right(free_at, start)
        if position:
            del free_at[position - 1]
            insort(free_at, end)
            watched += 1
    return watched


def allocate_rooms(intervals: Sequence[tuple[int, int]]) -> tuple[int, list[int]]:
    """Assign rooms to (arrival, departure) stays.

    Returns the number of rooms used and the room of each stay, listed in
    the order of the stays sorted by (departure, arrival).
    """
    if not intervals:
        raise ValueError("intervals must not be empty")
    ordered = sorted((end, start) for start, end in intervals)
    first_end = ordered[0][0]
    busy = [(first_end, 1)]
    rooms = [1]
    most = 1
    for end, start in ordered[1:]:
        if busy[0][0] < start:
            _, room = heapq.heappop(busy)
        else:
            room = len(busy) + 1
        heapq.heappush(busy, (end, room))
        rooms.append(room)
        most = max(most, len(busy))
    return most, rooms


def stick_cost(lengths: Sequence[int]) -> int:
    """Least total change to make all sticks the same length."""
    if not lengths:
        raise ValueError("lengths must not be empty")
    ordered = sorted(lengths)
    median = ordered[len(ordered) // 2]
    return sum(abs(length - median) for length in ordered)


def three_values_sum(
    values: Sequence[int], target: int
) -> tuple[int, int, int] | None:
    """Three distinct 1-based positions whose values add up to target, or None."""
    indexed = sorted((value, index) for index, value in enumerate(values, 1))
    size = len(indexed)
    for i, (value, index) in enumerate(indexed):
        need = target - value
        lo, hi = i + 1, size - 1
        while lo < hi:
            pair = indexed[lo][0] + indexed[hi][0]
            if pair == need:
                return index, indexed[lo][1], indexed[hi][1]
            if pair < need:
                lo += 1
            else:
                hi -= 1
    return None


def count_towers(cubes: Sequence[int]) -> int:
    """Fewest towers when each cube goes on a strictly larger top cube."""
    tops: list[int] = []
    for cube in cubes:
        position = bisect_right(tops, cube)
        if position == len(tops):
            tops.append(cube)
        else:
            tops[position] = cube
    return len(tops)