"""Number-theory problems: factorials, divisors, factorisations and coprimality."""

from __future__ import annotations

from bisect import bisect_right
from collections import Counter
from functools import lru_cache
from math import gcd, isqrt, lcm

MOD = 1_000_000_007
_PYTHAGOREAN_LIMIT = 100_000
_COPRIME_LIMIT = 1000


def christmas_party(n: int) -> int:
    """Return (n - 1)! modulo 1e9+7 (1 when n <= 1)."""
    result = 1
    for i in range(1, n):
        result = result * i % MOD
    return result


def max_common_divisor(values: list[int]) -> int:
    """Largest d dividing at least two of the values; 1 if there is none."""
    counts = Counter(values)
    if any(v <= 0 for v in counts):
        raise ValueError("values must be positive")
    if not counts:
        return 1
    top = max(counts)
    for divisor in range(top, 0, -1):
        hits = 0
        for multiple in range(divisor, top + 1, divisor):
            hits += counts.get(multiple, 0)
            if hits > 1:
                return divisor
    return 1


def div_game_moves(n: int) -> int:
    """How many times n can be divided by distinct prime powers."""
    if n < 1:
        raise ValueError("n must be positive")
    moves = 0
    factor = 2
    while factor * factor <= n:
        exponent = 0
        while n % factor == 0:
            n //= factor
            exponent += 1
        taken = 0
        while (taken + 1) * (taken + 2) // 2 <= exponent:
            taken += 1
        moves += taken
        factor += 1
    if n > 1:
        moves += 1
    return moves


def make_it_round(n: int, m: int) -> int:
    """Return n*k, 1 <= k <= m, with most trailing zeros, then largest."""
    twos = fives = 0
    rest = n
    while rest % 2 == 0:
        rest //= 2
        twos += 1
    while rest % 5 == 0:
        rest //= 5
        fives += 1
    k = 1
    while fives > twos and k * 2 <= m:
        k *= 2
        twos += 1
    while twos > fives and k * 5 <= m:
        k *= 5
        fives += 1
    while k * 10 <= m:
        k *= 10
    k *= m // k
    return n * k


def plus_minus_score(n: int, x: int, y: int) -> int:
    """Best value of sum at multiples of x minus sum at multiples of y."""
    both = n // lcm(x, y)
    plus = n // x - both
    minus = n // y - both
    start = n - plus
    return n * (n + 1) // 2 - start * (start + 1) // 2 - minus * (minus + 1) // 2


@lru_cache(maxsize=None)
def _hypotenuses() -> tuple[int, ...]:
    return (0,) + tuple(
        (a * a) // 2 + 1 for a in range(3, _PYTHAGOREAN_LIMIT + 1) if a % 2 == 1
    )


def count_pythagorean_triples(n: int) -> int:
    """Count triples with c = a*a - b that are also Pythagorean and c <= n."""
    return bisect_right(_hypotenuses(), n) - 1


def _multiplicity(n: int, p: int) -> int:
    count = 0
    while n % p == 0:
        n //= p
        count += 1
    return count


def product_of_three(n: int) -> tuple[int, int, int] | None:
    """Split n into three distinct factors, each at least 2, or return None."""
    if n < 1:
        raise ValueError("n must be positive")
    if not any(n % i == 0 for i in range(2, isqrt(n) + 1)):
        return None
    primes: list[int] = []
    rest = n
    factor = 2
    while factor * factor <= rest:
        if rest % factor == 0:
            while rest % factor == 0:
                rest //= factor
            primes.append(factor)
            if len(primes) >= 3:
                break
        factor += 1
    if rest > 1:
        primes.append(rest)

    if len(primes) >= 3:
        a, b = primes[0], primes[1]
        return a, b, n // (a * b)
    if len(primes) == 2:
        a, b = primes
        if _multiplicity(n, a) + _multiplicity(n, b) < 4:
            return None
        return a, b, n // (a * b)
    p = primes[0]
    if _multiplicity(n, p) <= 5:
        return None
    return p, p * p, n // (p * p * p)


def min_packages(n: int, k: int) -> int:
    """Fewest equal packages (size at most k) that add up to exactly n."""
    if n <= k:
        return 1
    best = 0
    for size in range(2, min(isqrt(n), k) + 1):
        if n % size == 0:
            best = max(best, size)
            if n // size <= k:
                best = max(best, n // size)
    return n if best == 0 else n // best


def _prime_factors(value: int) -> Counter:
    factors: Counter = Counter()
    factor = 2
    while factor * factor <= value:
        while value % factor == 0:
            value //= factor
            factors[factor] += 1
        factor += 1
    if value != 1:
        factors[value] += 1
    return factors


def can_divide_and_equalize(values: list[int]) -> bool:
    """Whether moving prime factors between values can make them all equal."""
    if not values:
        raise ValueError("values must not be empty")
    if any(v < 1 for v in values):
        raise ValueError("values must be positive")
    total: Counter = Counter()
    for value in values:
        total.update(_prime_factors(value))
    return all(count % len(values) == 0 for count in total.values())


def max_coprime_index_sum(values: list[int]) -> int:
    """Largest sum of 1-based indices of a coprime pair; -1 if none."""
    last: dict[int, int] = {}
    for index, value in enumerate(values, 1):
        if not 1 <= value <= _COPRIME_LIMIT:
            raise ValueError(f"values must lie in 1..{_COPRIME_LIMIT}")
        last[value] = index
    best = 2 * last[1] if 1 in last else -1
    others = sorted(v for v in last if v != 1)
    for position, a in enumerate(others):
        for b in others[position + 1:]:
            if gcd(a, b) == 1:
                best = max(best, last[a] + last[b])
    return best