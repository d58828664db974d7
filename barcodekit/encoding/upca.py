from __future__ import annotations

import logging
from typing import Optional

from barcodekit.encoding.checksum import (
    UPCA_DATA_DIGITS,
    compute_check_digit,
    ensure_digit_string,
    is_digit_string,
)
from barcodekit.encoding.options import EncodeOptions, resolve_options
from barcodekit.encoding.parity import select_parity_pattern
from barcodekit.encoding.tables import (
    CENTER_GUARD,
    LEFT_HAND_CODES,
    LEFT_RIGHT_GUARD,
    R_CODES,
)
from barcodekit.exceptions import ChecksumError
from barcodekit.model.enums import Symbology
from barcodekit.model.modules import ModuleSequence

logger = logging.getLogger(__name__)

__all__ = [
    "UPCAEncoder",
    "encode_upca",
    "normalize_upca",
    "is_valid_upca",
]

UPCA_LENGTHS = frozenset({UPCA_DATA_DIGITS, UPCA_DATA_DIGITS + 1})

# UPC-A is the GTIN-13 symbol with an implicit leading zero.
_UPCA_NUMBER_SYSTEM = "0"


class UPCAEncoder:
    """
    UPC-A encoder: digit string -> 95-module symbol plus quiet zones.

    Stateless apart from its options; one instance may be shared across
    threads.

    Args:
        options: Optional :class:`EncodeOptions` (check-digit verification,
            quiet-zone width).

    Example:
        >>> seq = UPCAEncoder().encode("03600029145")
        >>> seq.core_length
        95
    """

    symbology = Symbology.UPCA

    def __init__(self, options: Optional[EncodeOptions] = None) -> None:
        resolved = resolve_options(options)
        self.verify_check_digit = resolved.verify_check_digit
        self.quiet_zone_modules = resolved.quiet_zone_modules

    def resolve(self, value: str) -> str:
        """
        Проверить формат и вернуть 12-значное значение символа.

        11 цифр - контрольная цифра дописывается; 12 цифр - при
        ``verify_check_digit`` контрольная цифра пересчитывается и сверяется.

        Raises:
            FormatError: не 11/12 ASCII-цифр.
            ChecksumError: 12-я цифра не совпала (только при проверке).
        """
        ensure_digit_string(value, UPCA_LENGTHS, self.symbology)
        data = value[:UPCA_DATA_DIGITS]
        if len(value) == UPCA_DATA_DIGITS:
            return data + str(compute_check_digit(data))

        if self.verify_check_digit:
            expected = compute_check_digit(data)
            actual = int(value[-1])
            if expected != actual:
                logger.debug(
                    "Check digit mismatch for %s: expected %d, got %d",
                    value,
                    expected,
                    actual,
                )
                raise ChecksumError(
                    f"UPC-A check digit mismatch: expected {expected}, got {actual}",
                    expected=expected,
                    actual=actual,
                    symbology=self.symbology.value,
                )
        return value

    def encode(self, value: str) -> ModuleSequence:
        """
        Закодировать значение в последовательность модулей.

        Стадии: формат -> 12-значное значение -> шаблон чётности ->
        левая половина (L/G) -> правая половина (R) -> охранные шаблоны ->
        пустые зоны.
        """
        digits = self.resolve(value)
        gtin13 = _UPCA_NUMBER_SYSTEM + digits
        parity = select_parity_pattern(int(gtin13[0]))

        left = "".join(
            LEFT_HAND_CODES[table][int(d)] for table, d in zip(parity, gtin13[1:7])
        )
        right = "".join(R_CODES[int(d)] for d in gtin13[7:])
        bits = LEFT_RIGHT_GUARD + left + CENTER_GUARD + right + LEFT_RIGHT_GUARD

        logger.debug("Encoded UPC-A %s (quiet zone %d)", digits, self.quiet_zone_modules)
        return ModuleSequence.from_bits(
            bits,
            quiet_zone_modules=self.quiet_zone_modules,
            symbology=self.symbology,
        )


def encode_upca(value: str, options: Optional[EncodeOptions] = None) -> ModuleSequence:
    """Encode ``value`` as UPC-A with the given options."""
    return UPCAEncoder(options).encode(value)


def normalize_upca(value: str, *, verify_check_digit: bool = True) -> str:
    """
    Return the full 12-digit UPC-A value: appends the check digit to 11
    digits, verifies (or trusts) a supplied 12th.
    """
    return UPCAEncoder({"verify_check_digit": verify_check_digit}).resolve(value)


def is_valid_upca(value: object) -> bool:
    """True for a 12-digit UPC-A value whose check digit is correct."""
    if not is_digit_string(value) or len(value) != UPCA_DATA_DIGITS + 1:  # type: ignore[arg-type]
        return False
    return compute_check_digit(value[:UPCA_DATA_DIGITS]) == int(value[-1])  # type: ignore[index]
