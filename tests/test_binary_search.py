from functools import reduce
from itertools import combinations, pairwise, permutations

import pytest

from contestkit.binary_search import (
    cardboard_width,
    iva_pav_queries,
    max_aquarium_height,
    min_largest_subarray_sum,
    min_production_time,
    min_set_or_decrease_steps,
    multiplication_table_median,
    sage_birthday,
)


def _best_split(values, k):
    n = len(values)
    best = None
    for pieces in range(1, min(k, n) + 1):
        for cuts in combinations(range(1, n), pieces - 1):
            bounds = (0, *cuts, n)
            worst = max(sum(values[a:b]) for a, b in pairwise(bounds))
            best = worst if best is None else min(best, worst)
    return best


@pytest.mark.parametrize(
    "values, k",
    [([2, 4, 7, 3, 5], 3), ([1, 1, 1, 1], 2), ([5, 1, 9, 2, 2, 8], 4), ([7], 1)],
)
def test_array_division_matches_brute_force(values, k):
    assert min_largest_subarray_sum(values, k) == _best_split(values, k)


def test_array_division_extremes():
    values = [4, 9, 2, 6]
    assert min_largest_subarray_sum(values, 1) == sum(values)
    assert min_largest_subarray_sum(values, len(values)) == max(values)


@pytest.mark.parametrize(
    "machines, k", [([3, 2, 5], 7), ([1], 10), ([4, 6], 5), ([10, 10, 10], 3)]
)
def test_production_time_is_the_first_sufficient_time(machines, k):
    time = min_production_time(machines, k)
    assert sum(time // m for m in machines) >= k
    assert sum((time - 1) // m for m in machines) < k


def test_production_time_single_machine():
    assert min_production_time([7], 4) == 7 * 4


def test_production_time_needs_machines():
    with pytest.raises(ValueError):
        min_production_time([], 3)


@pytest.mark.parametrize("n", range(1, 9))
def test_multiplication_table_median_matches_sorted_table(n):
    table = sorted(i * j for i in range(1, n + 1) for j in range(1, n + 1))
    assert multiplication_table_median(n) == table[n * n // 2]


def test_multiplication_table_rejects_zero():
    with pytest.raises(ValueError):
        multiplication_table_median(0)


@pytest.mark.parametrize(
    "heights, water", [([3, 1, 2, 4, 6, 2, 5], 9), ([1, 1, 1], 1), ([10], 5)]
)
def test_aquarium_height_is_the_last_affordable(heights, water):
    level = max_aquarium_height(heights, water)

    def used(h):
        return sum(max(0, h - x) for x in heights)

    assert used(level) <= water
    assert used(level + 1) > water


def test_aquarium_without_water_stays_at_lowest_coral():
    heights = [3, 1, 2]
    assert max_aquarium_height(heights, 0) == min(heights)


def test_set_or_decrease_example():
    assert min_set_or_decrease_steps([1, 2, 1, 3, 1, 2, 1], 8) == 2


def test_set_or_decrease_already_small():
    assert min_set_or_decrease_steps([6, 9], 69) == 0


def test_set_or_decrease_single_value():
    values = [20]
    k = 10
    assert min_set_or_decrease_steps(values, k) == values[0] - k


def test_set_or_decrease_monotone_in_k():
    values = [1, 2, 3, 1, 2, 6, 1, 6, 8, 10]
    steps = [min_set_or_decrease_steps(values, k) for k in range(1, 40)]
    assert all(a >= b for a, b in pairwise(steps))
    assert steps[0] <= sum(values) - 1


def test_set_or_decrease_empty():
    with pytest.raises(ValueError):
        min_set_or_decrease_steps([], 5)


@pytest.mark.parametrize("width", range(1, 6))
def test_cardboard_round_trip(width):
    sizes = [3, 2, 1]
    total = sum((s + 2 * width) ** 2 for s in sizes)
    assert cardboard_width(sizes, total) == width


def test_cardboard_rejects_too_little_card():
    with pytest.raises(ValueError):
        cardboard_width([5, 5], 10)


def test_cardboard_rejects_empty():
    with pytest.raises(ValueError):
        cardboard_width([], 10)


def _cheap_count(arrangement):
    return sum(
        1
        for i in range(1, len(arrangement) - 1)
        if arrangement[i] < arrangement[i - 1] and arrangement[i] < arrangement[i + 1]
    )


def test_sage_birthday_example():
    prices = [1, 3, 2, 2, 4, 5, 4]
    cheap, arrangement = sage_birthday(prices)
    assert cheap == 3
    assert sorted(arrangement) == sorted(prices)
    assert _cheap_count(arrangement) >= cheap


@pytest.mark.parametrize(
    "prices",
    [[1, 1, 2, 2], [5, 4, 3, 2, 1], [2, 2, 2, 2, 2], [1, 3, 3, 2, 2, 4], [7, 1, 7]],
)
def test_sage_birthday_is_optimal(prices):
    cheap, arrangement = sage_birthday(prices)
    best = max(_cheap_count(p) for p in permutations(prices))
    assert cheap == best
    assert sorted(arrangement) == sorted(prices)
    assert _cheap_count(arrangement) >= cheap


def _brute_iva(values, left, threshold):
    best = -1
    for end in range(left, len(values) + 1):
        if reduce(lambda a, b: a & b, values[left - 1 : end]) >= threshold:
            best = end
    return best


def test_iva_pav_matches_brute_force():
    values = [15, 14, 17, 42, 34, 7, 6, 3, 12, 13]
    queries = [(l, k) for l in range(1, len(values) + 1) for k in (0, 1, 2, 6, 14, 40)]
    expected = [_brute_iva(values, l, k) for l, k in queries]
    assert iva_pav_queries(values, queries) == expected


def test_iva_pav_rejects_bad_position():
    with pytest.raises(ValueError):
        iva_pav_queries([1, 2, 3], [(4, 1)])