"""
encoding

Кодирование цифровых строк в последовательности модулей штрихкода.

Public API:
    - encode: кодирование по символике (UPC-A по умолчанию)
    - supported_symbologies / get_encoder: реестр кодеров
    - UPCAEncoder, encode_upca, normalize_upca, is_valid_upca
    - compute_check_digit: контрольная цифра UPC-A
    - select_parity_pattern: шаблон чётности L/G по ведущей цифре
    - EncodeOptions: типобезопасные опции (TypedDict)
"""

from barcodekit.encoding.checksum import compute_check_digit
from barcodekit.encoding.encoder import encode, get_encoder, supported_symbologies
from barcodekit.encoding.options import EncodeOptions, encode_options_from_config
from barcodekit.encoding.parity import select_parity_pattern
from barcodekit.encoding.upca import (
    UPCAEncoder,
    encode_upca,
    is_valid_upca,
    normalize_upca,
)

__all__ = [
    "encode",
    "get_encoder",
    "supported_symbologies",
    "compute_check_digit",
    "select_parity_pattern",
    "EncodeOptions",
    "encode_options_from_config",
    "UPCAEncoder",
    "encode_upca",
    "is_valid_upca",
    "normalize_upca",
]
