"""Parity-pattern lookup for the left half of UPC/EAN symbols."""

from __future__ import annotations

from barcodekit.encoding.tables import PARITY_PATTERNS

__all__ = ["select_parity_pattern"]


def select_parity_pattern(number_system_digit: int) -> str:
    """
    Return the 6-character L/G pattern for the leading (number-system) digit.

    Position *i* tells whether the *i*-th left-hand digit is encoded from the
    L table or the G table. The caller guarantees a digit in 0..9.
    """
    if not 0 <= number_system_digit <= 9:
        raise IndexError(f"number-system digit out of range: {number_system_digit}")
    return PARITY_PATTERNS[number_system_digit]
