"""
model/enums.py

(Краткое RU: Перечисления символик штрихкодов.)

EN: Symbology enum for the barcode model. Lists the linear symbologies the
package knows by name; which of them can actually be encoded is decided by
the encoder registry in ``barcodekit.encoding``.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Dict, Final, Literal

_logger: Final[logging.Logger] = logging.getLogger(__name__)


class Symbology(str, Enum):
    UPCA = "upca"
    UPCE = "upce"
    EAN8 = "ean8"
    EAN13 = "ean13"
    CODE39 = "code39"
    CODE128 = "code128"

    def localized_name(self, lang: Literal["ru", "en"] = "ru") -> str:
        names_ru = {
            Symbology.UPCA: "UPC-A",
            Symbology.UPCE: "UPC-E",
            Symbology.EAN8: "EAN-8",
            Symbology.EAN13: "EAN-13",
            Symbology.CODE39: "Code 39",
            Symbology.CODE128: "Code 128",
        }
        names_en = {
            Symbology.UPCA: "UPC-A",
            Symbology.UPCE: "UPC-E",
            Symbology.EAN8: "EAN-8",
            Symbology.EAN13: "EAN-13",
            Symbology.CODE39: "Code 39",
            Symbology.CODE128: "Code 128",
        }
        return names_ru[self] if lang == "ru" else names_en[self]

    @classmethod
    def parse(cls, text: str) -> "Symbology":
        """
        Разобрать имя символики с учётом распространённых написаний.

        >>> Symbology.parse("UPC-A")
        <Symbology.UPCA: 'upca'>

        Raises:
            ValueError: если имя не распознано.
        """
        key = text.strip().lower().replace("-", "").replace("_", "").replace(" ", "")
        try:
            return _ALIASES[key]
        except KeyError:
            _logger.debug("Unknown symbology name: %r", text)
            raise ValueError(f"Unknown symbology: {text!r}") from None


_ALIASES: Final[Dict[str, Symbology]] = {
    "upca": Symbology.UPCA,
    "upc": Symbology.UPCA,
    "upce": Symbology.UPCE,
    "ean8": Symbology.EAN8,
    "ean13": Symbology.EAN13,
    "gtin13": Symbology.EAN13,
    "code39": Symbology.CODE39,
    "code128": Symbology.CODE128,
}
