"""Competitive-programming problem solutions and a DES-style block cipher."""

__version__ = "0.1.0"

__all__ = [
    "arrays",
    "binary_search",
    "counting",
    "des",
    "greedy",
    "interactive",
    "number_theory",
    "scheduling",
    "strings",
]