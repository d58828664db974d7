"""
encoding/options.py

Типобезопасные опции кодирования и их проверка по allowlist.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional, TypedDict

from barcodekit.encoding.tables import DEFAULT_QUIET_ZONE_MODULES

__all__ = ["EncodeOptions", "ResolvedOptions", "resolve_options", "encode_options_from_config"]


class EncodeOptions(TypedDict, total=False):
    """
    Опции кодирования. Все поля опциональны (total=False).

    Example:
        >>> options: EncodeOptions = {"verify_check_digit": False, "quiet_zone_modules": 0}
        >>> encode("036000291452", options=options)
    """

    verify_check_digit: bool  # Проверять 12-ю цифру (по умолчанию True)
    quiet_zone_modules: int  # Пустая зона с каждой стороны, в модулях (по умолчанию 9)


_OPTIONS_ALLOWLIST = frozenset(EncodeOptions.__annotations__)


@dataclass(frozen=True)
class ResolvedOptions:
    verify_check_digit: bool = True
    quiet_zone_modules: int = DEFAULT_QUIET_ZONE_MODULES


def resolve_options(options: Optional[Mapping[str, Any]] = None) -> ResolvedOptions:
    """
    Merge ``options`` over the defaults and validate them.

    Raises:
        ValueError: unknown key, wrong type, or negative quiet zone.
    """
    if not options:
        return ResolvedOptions()
    for key in options:
        if key not in _OPTIONS_ALLOWLIST:
            raise ValueError(f"Unknown encode option: {key!r}")

    verify = options.get("verify_check_digit", True)
    if not isinstance(verify, bool):
        raise ValueError(
            f"verify_check_digit must be bool, got {type(verify).__name__}"
        )
    quiet = options.get("quiet_zone_modules", DEFAULT_QUIET_ZONE_MODULES)
    if not isinstance(quiet, int) or isinstance(quiet, bool):
        raise ValueError(
            f"quiet_zone_modules must be int, got {type(quiet).__name__}"
        )
    if quiet < 0:
        raise ValueError(f"quiet_zone_modules must be >= 0, got {quiet}")
    return ResolvedOptions(verify_check_digit=verify, quiet_zone_modules=quiet)


def encode_options_from_config(config: Mapping[str, Any]) -> EncodeOptions:
    """Pick the encoder-related keys out of a loaded configuration dict."""
    options: EncodeOptions = {}
    if "verify_check_digit" in config:
        options["verify_check_digit"] = config["verify_check_digit"]
    if "quiet_zone_modules" in config:
        options["quiet_zone_modules"] = config["quiet_zone_modules"]
    return options
