"""
encoding/checksum.py

Контрольная цифра UPC-A (взвешенная сумма по модулю 10) и проверка
формата цифровых строк.
"""

from __future__ import annotations

import logging
from typing import AbstractSet

from barcodekit.exceptions import FormatError
from barcodekit.model.enums import Symbology

logger = logging.getLogger(__name__)

__all__ = ["compute_check_digit", "ensure_digit_string", "is_digit_string"]

UPCA_DATA_DIGITS = 11


def is_digit_string(value: object) -> bool:
    """True for a non-empty ``str`` made only of ASCII ``0``-``9``."""
    return isinstance(value, str) and value.isascii() and value.isdigit()


def ensure_digit_string(
    value: object,
    lengths: AbstractSet[int],
    symbology: Symbology = Symbology.UPCA,
) -> str:
    """
    Проверить, что ``value`` - строка из ASCII-цифр допустимой длины.

    Returns:
        Ту же строку (для удобной цепочки вызовов).

    Raises:
        FormatError: неверный тип, длина или символы.
    """
    allowed = " or ".join(str(n) for n in sorted(lengths))
    if not isinstance(value, str):
        logger.debug("Rejected non-string input: %r", type(value))
        raise FormatError(
            f"Value must be a string of {allowed} digits, got {type(value).__name__}",
            symbology=symbology.value,
        )
    if len(value) not in lengths:
        logger.debug("Rejected input of length %d", len(value))
        raise FormatError(
            f"{symbology.localized_name('en')} value must be {allowed} digits, "
            f"got {len(value)}",
            symbology=symbology.value,
            context={"length": len(value)},
        )
    if not is_digit_string(value):
        position = next(i for i, c in enumerate(value) if not ("0" <= c <= "9"))
        logger.debug("Rejected non-digit character at position %d", position)
        raise FormatError(
            f"{symbology.localized_name('en')} value must contain digits only "
            f"(invalid character at position {position})",
            symbology=symbology.value,
            context={"position": position},
        )
    return value


def compute_check_digit(eleven_digits: str) -> int:
    """
    Вычислить контрольную цифру UPC-A по 11 цифрам данных.

    Цифры на нечётных позициях (1, 3, ..., 11) суммируются и умножаются
    на 3, к ним прибавляется сумма цифр на чётных позициях; результат
    ``(10 - total % 10) % 10``.

    Example:
        >>> compute_check_digit("03600029145")
        2

    Raises:
        FormatError: если вход не ровно 11 ASCII-цифр.
    """
    ensure_digit_string(eleven_digits, {UPCA_DATA_DIGITS})
    odd = sum(int(c) for c in eleven_digits[0::2])
    even = sum(int(c) for c in eleven_digits[1::2])
    total = odd * 3 + even
    return (10 - total % 10) % 10
