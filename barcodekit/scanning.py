# -*- coding: utf-8 -*-
"""
RU: Обработка результатов внешнего декодера при непрерывном сканировании с камеры.
"Не найдено" в кадре - не ошибка и игнорируется; ошибки декодирования (контрольная
сумма, формат) подавляются во время сканирования и возвращаются один раз при отказе
от сканирования. Потокобезопасно через RLock (декодер вызывает колбэки асинхронно).

EN: Continuous-scan result handling for an external frame decoder. No camera or
optical decoding lives here: an adapter feeds per-frame outcomes into
:class:`ContinuousScanSession`, which delivers the first good result and stops.

Examples:
    >>> seen = []
    >>> session = ContinuousScanSession(seen.append)
    >>> session.feed(error=DecodeNotFound())
    False
    >>> session.feed(ScanResult("036000291452", "upca"))
    True
    >>> session.active
    False
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Callable, Optional

from barcodekit.encoding.checksum import is_digit_string
from barcodekit.encoding.upca import is_valid_upca
from barcodekit.model.enums import Symbology

logger = logging.getLogger(__name__)

__all__ = [
    "ScanResult",
    "DecodeError",
    "DecodeNotFound",
    "DecodeChecksumError",
    "DecodeFormatError",
    "ContinuousScanSession",
]


@dataclass(frozen=True)
class ScanResult:
    decoded_text: str
    symbology: str


class DecodeError(Exception):
    """Per-frame outcome reported by a decoder adapter."""


class DecodeNotFound(DecodeError):
    """No symbol in this frame. Not an error during continuous scanning."""


class DecodeChecksumError(DecodeError):
    """A symbol was found but its check digit is wrong."""


class DecodeFormatError(DecodeError):
    """A symbol was found but could not be decoded."""


class ContinuousScanSession:
    """
    Continuous-scan state: active until the first valid result or
    :meth:`abandon`.

    Args:
        on_result: Called once with the first accepted :class:`ScanResult`.

    Errors that are not :class:`DecodeError` (camera failures and the like)
    are re-raised from :meth:`feed` unchanged.
    """

    def __init__(self, on_result: Callable[[ScanResult], None]) -> None:
        self._on_result = on_result
        self._lock = threading.RLock()
        self._active = True
        self._last_error: Optional[DecodeError] = None
        self._error_reported = False

    @property
    def active(self) -> bool:
        with self._lock:
            return self._active

    def feed(
        self,
        result: Optional[ScanResult] = None,
        error: Optional[BaseException] = None,
    ) -> bool:
        """
        Process one frame outcome.

        Returns:
            True if ``result`` was accepted and delivered to ``on_result``.
        """
        with self._lock:
            if not self._active:
                return False
            if error is not None:
                if isinstance(error, DecodeNotFound):
                    return False
                if isinstance(error, DecodeError):
                    logger.debug("Suppressed decode error: %s", error)
                    self._last_error = error
                    return False
                raise error
            if result is None:
                return False

            rejection = self._check(result)
            if rejection is not None:
                logger.debug("Suppressed decode error: %s", rejection)
                self._last_error = rejection
                return False

            self._active = False
        logger.info("Scan accepted: %s (%s)", result.decoded_text, result.symbology)
        self._on_result(result)
        return True

    def abandon(self) -> Optional[DecodeError]:
        """
        Stop scanning. Returns the last suppressed decode error the first
        time it is called, ``None`` afterwards or if nothing went wrong.
        """
        with self._lock:
            self._active = False
            if self._error_reported:
                return None
            self._error_reported = True
            error, self._last_error = self._last_error, None
        if error is not None:
            logger.warning("Scanning abandoned after decode error: %s", error)
        return error

    @staticmethod
    def _check(result: ScanResult) -> Optional[DecodeError]:
        try:
            symbology = Symbology.parse(result.symbology)
        except ValueError:
            return None
        if symbology is not Symbology.UPCA or is_valid_upca(result.decoded_text):
            return None
        text = result.decoded_text
        if not is_digit_string(text) or len(text) != 12:
            return DecodeFormatError(f"Decoded UPC-A text {text!r} is not 12 digits")
        return DecodeChecksumError(f"UPC-A value {text!r} failed check-digit verification")
