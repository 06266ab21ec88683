import random

import pytest

from contestkit.greedy import (
    can_equalize_mod10,
    can_finish_jobs,
    has_balanced_subarray,
    max_candy_gift,
    max_sum_after_negations,
    max_three_activities,
    min_block_deletions,
    strong_vertices,
)


def test_candy_gift_example():
    assert max_candy_gift([1, 4, 8, 4, 5, 6, 3, 8]) == 3


def test_candy_gift_single_type_takes_all():
    assert max_candy_gift([7] * 9) == 9


def test_candy_gift_distinct_types_take_one():
    assert max_candy_gift([1, 2, 3, 4]) == 1


def test_candy_gift_bounded_by_count():
    rng = random.Random(3)
    for _ in range(50):
        types = [rng.randint(1, 5) for _ in range(rng.randint(1, 20))]
        assert 1 <= max_candy_gift(types) <= len(types)


def test_candy_gift_empty_raises():
    with pytest.raises(ValueError):
        max_candy_gift([])


def test_jobs_examples():
    assert can_finish_jobs([(2, 4), (1, 9), (1, 8), (4, 9), (3, 12)]) is True
    assert can_finish_jobs([(334, 1000), (334, 1000), (334, 1000)]) is False


def test_jobs_single():
    assert can_finish_jobs([(5, 5)]) is True
    assert can_finish_jobs([(6, 5)]) is False
    assert can_finish_jobs([]) is True


def test_jobs_order_does_not_matter():
    rng = random.Random(11)
    for _ in range(30):
        jobs = [(rng.randint(1, 5), rng.randint(1, 20)) for _ in range(6)]
        shuffled = jobs[:]
        rng.shuffle(shuffled)
        assert can_finish_jobs(jobs) == can_finish_jobs(shuffled)


def test_strong_vertices_all_equal():
    assert strong_vertices([5, 6, 7], [1, 2, 3]) == [1, 2, 3]


def test_strong_vertices_unique_max():
    assert strong_vertices([3, 1, 2, 4], [4, 3, 2, 1]) == [4]


def test_strong_vertices_sorted_and_maximal():
    rng = random.Random(5)
    a = [rng.randint(-5, 5) for _ in range(12)]
    b = [rng.randint(-5, 5) for _ in range(12)]
    result = strong_vertices(a, b)
    assert result == sorted(result)
    best = max(x - y for x, y in zip(a, b))
    assert all(a[i - 1] - b[i - 1] == best for i in result)


def test_strong_vertices_errors():
    with pytest.raises(ValueError):
        strong_vertices([], [])
    with pytest.raises(ValueError):
        strong_vertices([1], [1, 2])


def test_three_activities_bounded():
    rng = random.Random(7)
    for _ in range(20):
        n = rng.randint(3, 7)
        a = [rng.randint(1, 50) for _ in range(n)]
        b = [rng.randint(1, 50) for _ in range(n)]
        c = [rng.randint(1, 50) for _ in range(n)]
        result = max_three_activities(a, b, c)
        assert 0 <= result <= max(a) + max(b) + max(c)


def test_three_activities_errors():
    with pytest.raises(ValueError):
        max_three_activities([1, 2], [1, 2], [1, 2])
    with pytest.raises(ValueError):
        max_three_activities([1, 2, 3], [1, 2, 3], [1, 2])


def test_mod10_examples():
    assert can_equalize_mod10([6, 11]) is True
    assert can_equalize_mod10([2, 18, 22]) is False
    assert can_equalize_mod10([5, 10]) is True
    assert can_equalize_mod10([1, 2, 4, 8]) is True


def test_mod10_trivial_cases():
    assert can_equalize_mod10([]) is True
    assert can_equalize_mod10([37]) is True
    assert can_equalize_mod10([5, 15]) is False


def test_block_deletions_examples():
    assert min_block_deletions([3, 3, 4, 5, 2, 6, 1]) == 0
    assert min_block_deletions([5, 6, 3, 2]) == 4
    assert min_block_deletions([1, 4, 3]) == 1


def test_block_deletions_bounded_by_length():
    rng = random.Random(9)
    for _ in range(40):
        values = [rng.randint(1, 6) for _ in range(rng.randint(0, 12))]
        assert 0 <= min_block_deletions(values) <= len(values)
    assert min_block_deletions([]) == 0


def test_block_deletions_negative_raises():
    with pytest.raises(ValueError):
        min_block_deletions([1, -1])


def test_negations_examples():
    assert max_sum_after_negations([-1, -1, -1]) == 1
    assert max_sum_after_negations([1, 5, -5, 0, 2]) == 13
    assert max_sum_after_negations([-1, 10, 9, 8, 7, 6]) == 39


def test_negations_invariants():
    assert max_sum_after_negations([1, 2, 3]) == 6
    assert max_sum_after_negations([-4, -4]) == 8
    rng = random.Random(13)
    for _ in range(40):
        values = [rng.randint(-9, 9) for _ in range(rng.randint(1, 10))]
        result = max_sum_after_negations(values)
        assert result <= sum(abs(v) for v in values)
        assert result >= sum(values)


def test_balanced_subarray():
    assert has_balanced_subarray([1, 3, 2]) is True
    assert has_balanced_subarray([1, 1, 1, 1, 1, 1]) is True
    assert has_balanced_subarray([0]) is True
    assert has_balanced_subarray([1, 2]) is False
    assert has_balanced_subarray([]) is False