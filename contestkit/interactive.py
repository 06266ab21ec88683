"""Interactive problems solved against a caller-supplied judge function."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from itertools import accumulate


def _first_true(lo: int, hi: int, holds: Callable[[int], bool]) -> int | None:
    found = None
    while lo <= hi:
        mid = (lo + hi) // 2
        if holds(mid):
            found = mid
            hi = mid - 1
        else:
            lo = mid + 1
    return found


def find_heavy_prefix(
    weights: Sequence[int], ask: Callable[[list[int]], int]
) -> int:
    """Locate the pile with an extra stone.

    ``weights`` are the expected weights of piles 1..n; ``ask(indices)``
    returns the measured total of the given 1-based piles. Returns the first
    prefix length whose measurement exceeds expectation, or -1.
    """
    expected = list(accumulate(weights, initial=0))

    def heavier(m: int) -> bool:
        return ask(list(range(1, m + 1))) != expected[m]

    found = _first_true(1, len(weights), heavier)
    return -1 if found is None else found


def guess_kth_zero(n: int, k: int, ask: Callable[[int, int], int]) -> int:
    """Position of the k-th zero in a hidden 0/1 array of length n.

    ``ask(l, r)`` returns how many ones lie in the 1-based range [l, r].
    """
    answer = n
    lo, hi = 1, n
    while lo <= hi:
        mid = (lo + hi) // 2
        zeros = mid - ask(1, mid)
        if zeros == k:
            answer = mid
        if zeros >= k:
            hi = mid - 1
        else:
            lo = mid + 1
    return answer


def recover_flamingoes(n: int, ask: Callable[[int, int], int]) -> list[int]:
    """Recover n hidden counts using n range-sum queries ``ask(l, r)``."""
    if n < 3:
        raise ValueError("at least three cages are needed")
    pair_sums = [ask(i, i + 1) for i in range(1, n)]
    first_three = ask(1, 3)
    second = pair_sums[0] + pair_sums[1] - first_three
    counts = [pair_sums[0] - second, second]
    for pair_sum in pair_sums[1:]:
        counts.append(pair_sum - counts[-1])
    return counts