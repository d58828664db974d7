"""
Исключения пакета barcodekit.

Иерархия типизированных исключений кодера и рендерера штрихкодов.
Ошибки всегда поднимаются синхронно в месте обнаружения; частичных
результатов и "заглушек" вместо штрихкода не бывает.

Example:
    >>> from barcodekit.exceptions import EncodingError
    >>> try:
    ...     encode("12345")
    ... except EncodingError as e:
    ...     print(e.symbology, e.context)

Иерархия:
    BarcodeError (базовое)
    ├── EncodingError
    │   ├── FormatError
    │   ├── ChecksumError
    │   └── UnsupportedSymbologyError
    └── RenderError
        └── EmptySequenceError
"""

from __future__ import annotations

from typing import Any, Dict, Optional

__all__: list[str] = [
    "BarcodeError",
    "EncodingError",
    "FormatError",
    "ChecksumError",
    "UnsupportedSymbologyError",
    "RenderError",
    "EmptySequenceError",
]


# ==============================================================================
# BASE EXCEPTION
# ==============================================================================


class BarcodeError(Exception):
    """
    Базовое исключение для всех ошибок barcodekit.

    Attributes:
        message: Человекочитаемое сообщение об ошибке (для логов, не для UI)
        symbology: Имя символики, вызвавшей ошибку (опционально)
        context: Дополнительный структурированный контекст
    """

    def __init__(
        self,
        message: str,
        *,
        symbology: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.symbology = symbology
        self.context = context or {}

    def __str__(self) -> str:
        if self.symbology:
            return f"[{self.symbology}] {self.message}"
        return self.message

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"symbology={self.symbology!r}, "
            f"context={self.context!r})"
        )


# ==============================================================================
# ENCODING ERRORS
# ==============================================================================


class EncodingError(BarcodeError):
    """Ошибка кодирования значения в последовательность модулей."""


class FormatError(EncodingError):
    """
    Входная строка имеет неверную длину или содержит не-цифры.

    Всегда исправляется вызывающей стороной; повтор без изменения
    входа бессмыслен.
    """


class ChecksumError(EncodingError):
    """
    Переданная контрольная цифра не совпадает с вычисленной.

    Attributes:
        expected: Вычисленная контрольная цифра
        actual: Контрольная цифра из входной строки
    """

    def __init__(
        self,
        message: str,
        *,
        expected: int,
        actual: int,
        symbology: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ) -> None:
        ctx = dict(context or {})
        ctx.setdefault("expected", expected)
        ctx.setdefault("actual", actual)
        super().__init__(message, symbology=symbology, context=ctx)
        self.expected = expected
        self.actual = actual


class UnsupportedSymbologyError(EncodingError):
    """Запрошена символика, для которой нет соответствующего стандарту кодера."""


# ==============================================================================
# RENDER ERRORS
# ==============================================================================


class RenderError(BarcodeError):
    """Ошибка отрисовки последовательности модулей."""


class EmptySequenceError(RenderError):
    """Рендереру передана пустая последовательность модулей."""
