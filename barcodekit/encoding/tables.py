"""
encoding/tables.py

(Краткое RU: Таблицы кодирования цифр UPC-A/EAN-13 по GS1 General Specifications.)

EN: Canonical digit-pattern tables for the UPC/EAN family, copied from the
GS1 General Specifications. Pure data, no logic: each entry is a 7-module
pattern where ``"1"`` is a bar and ``"0"`` is a space.

Structural relationships of the standard (asserted in tests, not derived here):
    - R[d] is the bitwise complement of L[d]
    - G[d] is R[d] read in reverse order
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Final, Mapping, Tuple

__all__ = [
    "L_CODES",
    "G_CODES",
    "R_CODES",
    "PARITY_PATTERNS",
    "LEFT_HAND_CODES",
    "LEFT_RIGHT_GUARD",
    "CENTER_GUARD",
    "DIGIT_MODULES",
    "DEFAULT_QUIET_ZONE_MODULES",
    "UPCA_SYMBOL_MODULES",
]

# Odd parity, left half.
L_CODES: Final[Tuple[str, ...]] = (
    "0001101",
    "0011001",
    "0010011",
    "0111101",
    "0100011",
    "0110001",
    "0101111",
    "0111011",
    "0110111",
    "0001011",
)

# Even parity, left half.
G_CODES: Final[Tuple[str, ...]] = (
    "0100111",
    "0110011",
    "0011011",
    "0100001",
    "0011101",
    "0111001",
    "0000101",
    "0010001",
    "0001001",
    "0010111",
)

# Right half.
R_CODES: Final[Tuple[str, ...]] = (
    "1110010",
    "1100110",
    "1101100",
    "1000010",
    "1011100",
    "1001110",
    "1010000",
    "1000100",
    "1001000",
    "1110100",
)

# Keyed by the number-system (leading GTIN-13) digit.
PARITY_PATTERNS: Final[Tuple[str, ...]] = (
    "LLLLLL",
    "LLGLGG",
    "LLGGLG",
    "LLGGGL",
    "LGLLGG",
    "LGGLLG",
    "LGGGLL",
    "LGLGLG",
    "LGLGGL",
    "LGGLGL",
)

LEFT_HAND_CODES: Final[Mapping[str, Tuple[str, ...]]] = MappingProxyType(
    {"L": L_CODES, "G": G_CODES}
)

LEFT_RIGHT_GUARD: Final[str] = "101"
CENTER_GUARD: Final[str] = "01010"

DIGIT_MODULES: Final[int] = 7
DEFAULT_QUIET_ZONE_MODULES: Final[int] = 9  # GS1 minimum for UPC-A

# 3 + 6*7 + 5 + 6*7 + 3
UPCA_SYMBOL_MODULES: Final[int] = 95
