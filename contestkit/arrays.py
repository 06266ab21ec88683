"""Array problems: prefix scans, counting pairs and positional queries."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence
from functools import reduce
from itertools import groupby
from math import gcd

_INT64_MIN = -(1 << 63)
_INT64_MAX = (1 << 63) - 1
_SCORING_SPAN = 18
_FACTORIALS = [1]
for _i in range(1, _SCORING_SPAN + 1):
    _FACTORIALS.append(_FACTORIALS[-1] * _i)


def paint_array(values: Sequence[int]) -> int:
    """A d dividing every value at one parity of position and none at the other.

    Returns 0 when no such d exists.
    """
    if len(values) < 2:
        raise ValueError("at least two values are needed")
    if any(v <= 0 for v in values):
        raise ValueError("values must be positive")
    evens, odds = values[0::2], values[1::2]
    even_gcd = reduce(gcd, evens)
    odd_gcd = reduce(gcd, odds)
    answer = 0
    if all(v % even_gcd for v in odds):
        answer = even_gcd
    if all(v % odd_gcd for v in evens):
        answer = odd_gcd
    return answer


def max_quest_experience(a: Sequence[int], b: Sequence[int], k: int) -> int:
    """Most experience from k quest completions.

    Quest i gives a[i] the first time and b[i] after; quests unlock in order.
    """
    best = total = best_repeat = 0
    for i, (first, repeat) in enumerate(zip(a, b)):
        if i >= k:
            break
        total += first
        best_repeat = max(best_repeat, repeat)
        best = max(best, total + (k - i - 1) * best_repeat)
    return best


def _truncated_div(numerator: int, denominator: int) -> int:
    quotient = abs(numerator) // denominator
    return -quotient if numerator < 0 else quotient


def scoring_lengths(values: Sequence[int]) -> list[int]:
    """For each prefix, the longest suffix length reaching the best score.

    A suffix of length L scores the product of its values divided by L!.
    """
    lengths = []
    for i in range(len(values)):
        best_score, best_length, product = 1, 0, 1
        window = values[max(0, i - _SCORING_SPAN + 1):i + 1]
        for j, value in enumerate(reversed(window)):
            product *= value
            if not _INT64_MIN <= product <= _INT64_MAX:
                break
            score = _truncated_div(product, _FACTORIALS[j + 1])
            if score > best_score:
                best_score, best_length = score, j + 1
            elif score == best_score:
                best_length = max(best_length, j + 1)
        lengths.append(max(best_length, 1))
    return lengths


def count_ski_periods(temps: Sequence[int], k: int, q: int) -> int:
    """Number of periods of at least k consecutive days all at most q degrees."""
    if not 1 <= k <= len(temps):
        raise ValueError("k must lie between 1 and the number of days")
    total = 0
    for cold, group in groupby(temps, key=lambda t: t <= q):
        if cold:
            length = len(list(group))
            if length >= k:
                total += (length - k + 1) * (length - k + 2) // 2
    return total


def max_alternating_parity_sum(values: Sequence[int]) -> int:
    """Largest sum of a non-empty subarray whose neighbours differ in parity."""
    if not values:
        raise ValueError("values must not be empty")
    best = current = values[0]
    for previous, value in zip(values, values[1:]):
        if (previous - value) % 2:
            current = max(current, 0) + value
        else:
            current = value
        best = max(best, current)
    return best


def card_deck_positions(deck: Sequence[int], queries: Sequence[int]) -> list[int]:
    """Answer colour queries by position, moving each queried colour to the front.

    Distinct colours are tracked starting in increasing colour order.
    """
    order = sorted(set(deck))
    answers = []
    for color in queries:
        try:
            position = order.index(color)
        except ValueError:
            raise ValueError(f"colour {color!r} is not in the deck") from None
        answers.append(position + 1)
        order.insert(0, order.pop(position))
    return answers


def count_same_differences(values: Sequence[int]) -> int:
    """Pairs i < j with values[j] - values[i] == j - i."""
    counts = Counter(value - index for index, value in enumerate(values))
    return sum(c * (c - 1) // 2 for c in counts.values())


def count_divisible_pairs(values: Sequence[int], x: int, y: int) -> int:
    """Pairs whose sum is divisible by x and whose difference is divisible by y."""
    if x <= 0 or y <= 0:
        raise ValueError("x and y must be positive")
    seen: Counter = Counter()
    pairs = 0
    for value in reversed(values):
        pairs += seen[((-value) % x, value % y)]
        seen[(value % x, value % y)] += 1
    return pairs


def different_pairs(
    values: Sequence[int], queries: Sequence[tuple[int, int]]
) -> list[tuple[int, int]]:
    """For each 1-based (l, r), two positions in range holding different values.

    Returns (-1, -1) for a range whose values are all equal.
    """
    n = len(values)
    next_change = [-1] * n
    for i in range(n - 2, -1, -1):
        next_change[i] = i + 1 if values[i] != values[i + 1] else next_change[i + 1]
    answers = []
    for left, right in queries:
        if not 1 <= left <= n:
            raise ValueError(f"query position {left} is outside 1..{n}")
        change = next_change[left - 1]
        if change != -1 and change < right:
            answers.append((left, change + 1))
        else:
            answers.append((-1, -1))
    return answers


def zero_remainder_moves(values: Sequence[int], k: int) -> int:
    """Fewest moves to make every value divisible by k with a rising counter."""
    if k <= 0:
        raise ValueError("k must be positive")
    needs = Counter(need for value in values if (need := (-value) % k))
    best = max(((count - 1) * k + need for need, count in needs.items()), default=0)
    return best + 1 if best else 0