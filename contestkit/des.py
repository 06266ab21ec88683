"""A single-block DES-style cipher over 64-bit integers."""

from __future__ import annotations

import argparse

_MASK28 = (1 << 28) - 1
_MASK32 = (1 << 32) - 1

DEFAULT_KEY = 0x133457799BBCDFF1
DEFAULT_PLAINTEXT = 0x0123456789ABCDEF

ROUNDS = 16


def _descending(starts: tuple[int, ...], count: int = 8) -> list[int]:
    """Columns of bit positions, each walking down from its start in steps of 8."""
    return [start - 8 * step for start in starts for step in range(count)]


def _positions(text: str) -> tuple[int, ...]:
    return tuple(int(token) for token in text.split())


INITIAL_PERMUTATION = tuple(_descending((58, 60, 62, 64, 57, 59, 61, 63)))

FINAL_PERMUTATION = tuple(
    INITIAL_PERMUTATION.index(bit) + 1 for bit in range(1, 65)
)

EXPANSION = tuple(
    (4 * block + offset - 1) % 32 + 1 for block in range(8) for offset in range(6)
)

_S_BOX_HEX = (
    "E4D12FB83A6C5907 0F74E2D1A6CB9538 41E8D62BFC973A50 FC8249175B3EA06D",
    "F18E6B34972DC05A 3D47F28EC01A69B5 0E7BA4D158C6932F D8A13F42B67C05E9",
    "A09E63F51DC7B428 D70934A6285ECBF1 D6498F30B12C5AE7 1AD069874FE3B52C",
    "7DE3069A1285BC4F D8B56F03472C1AE9 A690CB7DF13E5284 3F06A1D8945BC72E",
    "2C417AB6853FD0E9 EB2C47D150FA3986 421BAD78F9C5630E B8C71E2D6F09A453",
    "C1AF92680D34E75B AF427C9561DE0B38 9EF528C3704A1DB6 432C95FABE17608D",
    "4B2EF08D3C975A61 D0B7491AE35C2F86 14BDC37EAF680592 6BD814A7950FE23C",
    "D2846FB1A93E50C7 1FD8A374C56B0E92 7B419CE206ADF358 21E74A8DFC90356B",
)

S_BOXES = tuple(
    tuple(tuple(int(digit, 16) for digit in row) for row in box.split())
    for box in _S_BOX_HEX
)

PERMUTATION = _positions(
    "16 7 20 21 29 12 28 17 1 15 23 26 5 18 31 10 "
    "2 8 24 14 32 27 3 9 19 13 30 6 22 11 4 25"
)

SHIFTS = tuple(1 if round_ in (0, 1, 8, 15) else 2 for round_ in range(ROUNDS))

_PC1_COLUMNS = _descending((57, 58, 59, 60)) + _descending((63, 62, 61))
PERMUTED_CHOICE_1 = tuple(
    _PC1_COLUMNS[:28] + _PC1_COLUMNS[32:] + _PC1_COLUMNS[28:32]
)

PERMUTED_CHOICE_2 = _positions(
    "14 17 11 24 1 5 3 28 15 6 21 10 23 19 12 4 26 8 16 7 27 20 13 2 "
    "41 52 31 37 47 55 30 40 51 45 33 48 44 49 39 56 34 53 46 42 50 36 29 32"
)


def _check_width(name: str, value: int, bits: int) -> None:
    if not 0 <= value < (1 << bits):
        raise ValueError(f"{name} must fit in {bits} unsigned bits, got {value!r}")


def _permute(value: int, table: tuple[int, ...], width: int) -> int:
    """Pick bits of ``value`` (numbered 1 = most significant) in table order."""
    result = 0
    for position in table:
        result = (result << 1) | ((value >> (width - position)) & 1)
    return result


def _rotate_half(value: int, shift: int) -> int:
    """Rotate a 28-bit half toward its low end by ``shift`` places."""
    return ((value >> shift) | (value << (28 - shift))) & _MASK28


def generate_round_keys(key: int) -> list[int]:
    """Derive the sixteen 48-bit round keys from a 64-bit key."""
    _check_width("key", key, 64)
    permuted = _permute(key, PERMUTED_CHOICE_1, 64)
    left = permuted >> 28
    right = permuted & _MASK28
    round_keys = []
    for shift in SHIFTS:
        left = _rotate_half(left, shift)
        right = _rotate_half(right, shift)
        combined = (right << 28) | left
        round_keys.append(_permute(combined, PERMUTED_CHOICE_2, 56))
    return round_keys


def feistel(right: int, round_key: int) -> int:
    """The round function: expand, mix with the key, substitute, permute."""
    _check_width("right", right, 32)
    _check_width("round_key", round_key, 48)
    expanded = _permute(right, EXPANSION, 32) ^ round_key
    output = 0
    for index, box in enumerate(S_BOXES):
        chunk = (expanded >> (42 - 6 * index)) & 0x3F
        row = ((chunk >> 4) & 0b10) | (chunk & 1)
        column = (chunk >> 1) & 0xF
        output = (output << 4) | box[row][column]
    return _permute(output, PERMUTATION, 32)


def encrypt_block(plaintext: int, round_keys: list[int]) -> int:
    """Encrypt one 64-bit block with sixteen round keys."""
    _check_width("plaintext", plaintext, 64)
    if len(round_keys) != ROUNDS:
        raise ValueError(f"expected {ROUNDS} round keys, got {len(round_keys)}")
    block = _permute(plaintext, INITIAL_PERMUTATION, 64)
    left, right = block >> 32, block & _MASK32
    for round_key in round_keys:
        left, right = right, left ^ feistel(right, round_key)
    return _permute((left << 32) | right, FINAL_PERMUTATION, 64)


def _hex(text: str) -> int:
    return int(text, 16)


def main(argv: list[str] | None = None) -> int:
    """Encrypt a block and print the ciphertext in upper-case hexadecimal."""
    parser = argparse.ArgumentParser(description="Encrypt one 64-bit block.")
    parser.add_argument("--key", type=_hex, default=DEFAULT_KEY, help="key in hex")
    parser.add_argument(
        "--plaintext", type=_hex, default=DEFAULT_PLAINTEXT, help="block in hex"
    )
    args = parser.parse_args(argv)
    ciphertext = encrypt_block(args.plaintext, generate_round_keys(args.key))
    print(f"Ciphertext: {ciphertext:X}")
    return 0