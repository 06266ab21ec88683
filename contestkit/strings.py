"""String and digit-sequence problems."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence
from itertools import groupby
from string import ascii_lowercase

ALTERNATING_MOD = 998_244_353
_DIGITS = frozenset("0123456789")
_BITS = frozenset("01")


def alternating_ops(s: str) -> tuple[int, int]:
    """Fewest deletions that make s alternate, and how many ordered ways do it.

    The count of ways is taken modulo 998244353.
    """
    runs = [len(list(group)) for _, group in groupby(s)]
    ops = sum(run - 1 for run in runs)
    ways = 1
    for run in runs:
        ways = ways * run % ALTERNATING_MOD
    for factor in range(2, ops + 1):
        ways = ways * factor % ALTERNATING_MOD
    return ops, ways


def minimize_integer(s: str) -> str:
    """One right-to-left pass swapping adjacent digits of different parity.

    A pair is swapped when the left digit is the larger one.
    """
    if not set(s) <= _DIGITS:
        raise ValueError("s must consist of decimal digits")
    digits = list(s)
    for j in range(len(digits) - 1, 0, -1):
        current, previous = int(digits[j]), int(digits[j - 1])
        if previous > current and (previous - current) % 2:
            digits[j - 1], digits[j] = digits[j], digits[j - 1]
    return "".join(digits)


def make_simple(s: str) -> str:
    """Change as few letters as needed so that no two neighbours are equal."""
    chars = list(s)
    for i in range(1, len(chars)):
        if chars[i] == chars[i - 1]:
            after = chars[i + 1] if i + 1 < len(chars) else None
            chars[i] = next(
                letter
                for letter in ascii_lowercase
                if letter != chars[i - 1] and letter != after
            )
    return "".join(chars)


def shortest_all_kinds(s: str) -> int:
    """Length of the shortest substring holding every distinct character of s."""
    if not s:
        raise ValueError("s must not be empty")
    kinds = len(set(s))
    window: Counter = Counter()
    best = len(s)
    left = 0
    for right, char in enumerate(s):
        window[char] += 1
        while len(window) == kinds:
            best = min(best, right - left + 1)
            leaving = s[left]
            window[leaving] -= 1
            if not window[leaving]:
                del window[leaving]
            left += 1
    return best


def removal_cost(s: str) -> int:
    """Least total cost to remove every 0-marked number from 1..n.

    Removing the smallest multiple of k costs k; numbers marked 1 must stay.
    """
    if not set(s) <= _BITS:
        raise ValueError("s must consist of 0 and 1")
    n = len(s)
    removed = [False] * n
    cost = 0
    for step in range(1, n + 1):
        for number in range(step, n + 1, step):
            if s[number - 1] == "1":
                break
            if not removed[number - 1]:
                removed[number - 1] = True
                cost += step
    return cost


def _trailing_zeros(value: int) -> int:
    count = 0
    while value > 0 and value % 10 == 0:
        count += 1
        value //= 10
    return count


def valentine_winner(values: Sequence[int], m: int) -> str:
    """Winner of the reverse-and-concatenate game: "Anna" or "Sasha".

    Sasha wins when the final number has at least m + 1 digits.
    """
    ranked = sorted(values, key=lambda value: (_trailing_zeros(value), value))
    total = 0
    for turn, value in enumerate(reversed(ranked)):
        digits = len(str(value))
        if turn % 2 == 0:
            total += digits - _trailing_zeros(value)
        else:
            total += digits
    return "Sasha" if total >= m + 1 else "Anna"