"""
encoding/encoder.py

Единая точка входа кодирования: выбор кодера по символике.

Символика без соответствующего стандарту кодера приводит к
UnsupportedSymbologyError - никаких "заглушек" вместо штрихкода.
"""

from __future__ import annotations

import logging
from typing import Dict, Optional, Set, Type, Union

from barcodekit.encoding.options import EncodeOptions
from barcodekit.encoding.upca import UPCAEncoder
from barcodekit.exceptions import UnsupportedSymbologyError
from barcodekit.model.enums import Symbology
from barcodekit.model.modules import ModuleSequence

logger = logging.getLogger(__name__)

__all__ = ["encode", "supported_symbologies", "get_encoder"]

_ENCODERS: Dict[Symbology, Type[UPCAEncoder]] = {
    Symbology.UPCA: UPCAEncoder,
}


def supported_symbologies() -> Set[Symbology]:
    return set(_ENCODERS)


def get_encoder(
    symbology: Union[Symbology, str] = Symbology.UPCA,
    options: Optional[EncodeOptions] = None,
) -> UPCAEncoder:
    """
    Return an encoder instance for ``symbology``.

    Raises:
        UnsupportedSymbologyError: unknown name or no conforming encoder.
    """
    if not isinstance(symbology, Symbology):
        try:
            symbology = Symbology.parse(str(symbology))
        except ValueError as e:
            raise UnsupportedSymbologyError(
                f"Unknown symbology: {symbology!r}",
                symbology=str(symbology),
            ) from e

    encoder_cls = _ENCODERS.get(symbology)
    if encoder_cls is None:
        logger.debug("No encoder registered for %s", symbology.value)
        raise UnsupportedSymbologyError(
            f"{symbology.localized_name('en')} encoding is not supported",
            symbology=symbology.value,
            context={"supported": sorted(s.value for s in _ENCODERS)},
        )
    return encoder_cls(options)


def encode(
    value: str,
    symbology: Union[Symbology, str] = Symbology.UPCA,
    options: Optional[EncodeOptions] = None,
) -> ModuleSequence:
    """
    Encode ``value`` into a :class:`ModuleSequence`.

    Pure and synchronous: identical arguments always give equal results,
    and the call is safe from any number of threads.

    Raises:
        FormatError, ChecksumError, UnsupportedSymbologyError
    """
    return get_encoder(symbology, options).encode(value)
