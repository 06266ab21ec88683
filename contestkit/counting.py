"""Counting problems: two pointers, sliding windows, bit counts and tree sums."""

from __future__ import annotations

from bisect import bisect_left, insort
from collections import Counter
from collections.abc import Sequence
from itertools import accumulate

MOD = 1_000_000_007
_BIT_COUNT = 31


def max_eaten_candies(weights: Sequence[int]) -> int:
    """Most candies eaten when one eater takes a prefix, the other a suffix.

    Both must eat the same total weight and the two parts may not overlap.
    """
    if any(w <= 0 for w in weights):
        raise ValueError("weights must be positive")
    prefix = list(accumulate(weights))
    n = len(weights)
    best = 0
    suffix = 0
    for i in range(n - 1, -1, -1):
        suffix += weights[i]
        idx = bisect_left(prefix, suffix)
        if idx < i and prefix[idx] == suffix:
            best = max(best, idx + 1 + n - i)
    return best


def count_dance_sets(levels: Sequence[int], m: int) -> int:
    """Ways to pick m dancers with distinct levels spanning less than m.

    The count is taken modulo 1e9+7.
    """
    freq = Counter(levels)
    unique = sorted(freq)
    total = 0
    product = 1
    left = 0
    for right, level in enumerate(unique):
        product = product * freq[level] % MOD
        if right - left + 1 == m:
            if level - unique[left] < m:
                total = (total + product) % MOD
            product = product * pow(freq[unique[left]], MOD - 2, MOD) % MOD
            left += 1
    return total


def longest_money_segment(
    fruits: Sequence[int], heights: Sequence[int], k: int
) -> int:
    """Longest run of trees, each height divisible by the next, with fruit at most k."""
    if len(fruits) != len(heights):
        raise ValueError("fruits and heights must have the same length")
    if any(h <= 0 for h in heights):
        raise ValueError("heights must be positive")
    best = 0
    left = 0
    current = 0
    for right, fruit in enumerate(fruits):
        if right > 0 and heights[right - 1] % heights[right] != 0:
            left = right
            current = 0
        current += fruit
        while current > k and left <= right:
            current -= fruits[left]
            left += 1
        best = max(best, right - left + 1)
    if best == 0 and any(fruit <= k for fruit in fruits):
        best = 1
    return best


def max_frogs_caught(hops: Sequence[int]) -> int:
    """Most frogs landing on one cell 1..n, where n is the number of frogs."""
    if any(h <= 0 for h in hops):
        raise ValueError("hop lengths must be positive")
    n = len(hops)
    caught = [0] * (n + 1)
    for hop, count in Counter(hops).items():
        for cell in range(hop, n + 1, hop):
            caught[cell] += count
    return max(caught)


def count_inequality_pairs(values: Sequence[int]) -> int:
    """Pairs i < j (1-based) with a[i] < i < a[j] < j."""
    valid: list[int] = []
    pairs = 0
    for j, value in enumerate(values, 1):
        if value < j:
            pairs += bisect_left(valid, value)
            valid.append(j)
    return pairs


def min_dance_operations(a: Sequence[int], b: Sequence[int], k: int) -> int:
    """Fewest removals so each remaining a-value is below its paired b-value.

    ``a`` holds all but the first value of the first array; ``k`` is the first.
    """
    if len(a) + 1 != len(b):
        raise ValueError("b must hold exactly one more value than a")
    first = sorted([k, *a])
    second = sorted(b)
    n = len(second)
    i = j = pairs = 0
    while i < n and j < n:
        if first[i] < second[j]:
            pairs += 1
            i += 1
        j += 1
    return n - pairs


def max_teleporters(costs: Sequence[int], coins: int) -> int:
    """Most teleporters usable from point 0, paying position plus cost for each."""
    total = sorted(index + cost for index, cost in enumerate(costs, 1))
    used = 0
    for price in total:
        if price > coins:
            break
        coins -= price
        used += 1
    return used


def can_build_by_subsequence_addition(values: Sequence[int]) -> bool:
    """Whether values can grow from [1] by appending sums of subsequences."""
    ordered = sorted(values)
    if ordered and ordered[0] != 1:
        return False
    running = 0
    for position, value in enumerate(ordered):
        if position and value > running:
            return False
        running += value
    return True


def count_balanced_subtrees(parents: Sequence[int], colors: str) -> int:
    """Subtrees with as many 'W' as other vertices, in a tree rooted at 1.

    ``parents`` lists the parents of vertices 2..n.
    """
    n = len(colors)
    if len(parents) != n - 1:
        raise ValueError("colors must have one more entry than parents")
    if n == 0:
        raise ValueError("the tree must have a vertex")
    adjacency: list[list[int]] = [[] for _ in range(n + 1)]
    for child, parent in enumerate(parents, 2):
        if not 1 <= parent <= n:
            raise ValueError(f"parent {parent} is outside 1..{n}")
        adjacency[child].append(parent)
        adjacency[parent].append(child)

    order: list[int] = []
    came_from = [0] * (n + 1)
    came_from[1] = -1
    stack = [1]
    while stack:
        node = stack.pop()
        order.append(node)
        for neighbour in adjacency[node]:
            if neighbour != came_from[node]:
                came_from[neighbour] = node
                stack.append(neighbour)

    balance = [0] * (n + 1)
    balanced = 0
    for node in reversed(order):
        balance[node] += 1 if colors[node - 1] == "W" else -1
        if balance[node] == 0:
            balanced += 1
        parent = came_from[node]
        if parent > 0:
            balance[parent] += balance[node]
    return balanced


def maximal_and(values: Sequence[int], k: int) -> int:
    """Largest AND of all values after setting at most k bits in total."""
    n = len(values)
    result = 0
    for bit in range(_BIT_COUNT - 1, -1, -1):
        mask = 1 << bit
        have = sum(1 for value in values if value & mask)
        if have == n:
            result |= mask
        elif have + k >= n:
            k -= n - have
            result |= mask
    return result


def sliding_window_medians(values: Sequence[int], k: int) -> list[int]:
    """Lower median of each window of k consecutive values."""
    if k < 1:
        raise ValueError("k must be positive")
    if k > len(values):
        return []
    window: list[tuple[int, int]] = sorted(
        (value, index) for index, value in enumerate(values[: k - 1])
    )
    medians = []
    for i in range(k - 1, len(values)):
        insort(window, (values[i], i))
        medians.append(window[(k - 1) // 2][0])
        leaving = (values[i - k + 1], i - k + 1)
        del window[bisect_left(window, leaving)]
    return medians