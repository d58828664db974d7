# RU: Модель последовательности модулей (штрих/пробел) - единый формат передачи от кодера к рендереру.
# EN: Bar/space module model: the renderer-agnostic handoff format between encoders and renderers.

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Tuple, Union, overload

from .enums import Symbology

__all__ = ["BarModule", "ModuleSequence", "BAR", "SPACE"]


@dataclass(frozen=True)
class BarModule:
    """
    Atomic bar (dark) or space (light) element of a linear symbol.

    ``width_factor`` is expressed in units of the symbol's base module width.
    Every UPC-A module has ``width_factor == 1``.
    """

    is_bar: bool
    width_factor: int = 1

    def __post_init__(self) -> None:
        if not isinstance(self.width_factor, int) or isinstance(self.width_factor, bool):
            raise ValueError(
                f"width_factor must be int, got {type(self.width_factor).__name__}"
            )
        if self.width_factor < 1:
            raise ValueError(f"width_factor must be >= 1, got {self.width_factor}")


BAR = BarModule(is_bar=True)
SPACE = BarModule(is_bar=False)


class ModuleSequence:
    """
    Immutable ordered sequence of :class:`BarModule`.

    Quiet-zone modules are stored as part of the sequence (so a renderer can
    draw it as-is) but are tracked separately: :attr:`core` and
    :attr:`core_length` exclude them.

    Examples:
        >>> seq = ModuleSequence.from_bits("101", quiet_zone_modules=2)
        >>> len(seq), seq.core_length
        (7, 3)
        >>> seq.to_bits()
        '0010100'
    """

    __slots__ = ("_modules", "_quiet_zone_modules", "_symbology")

    def __init__(
        self,
        modules: Iterable[BarModule],
        *,
        quiet_zone_modules: int = 0,
        symbology: Optional[Symbology] = None,
    ) -> None:
        items: Tuple[BarModule, ...] = tuple(modules)
        for m in items:
            if not isinstance(m, BarModule):
                raise TypeError(f"Expected BarModule, got {type(m).__name__}")
        if quiet_zone_modules < 0:
            raise ValueError("quiet_zone_modules must be >= 0")
        if 2 * quiet_zone_modules > len(items):
            raise ValueError("quiet zones exceed sequence length")
        qz = items[:quiet_zone_modules] + items[len(items) - quiet_zone_modules :]
        if any(m.is_bar for m in qz):
            raise ValueError("quiet zone must contain only spaces")
        self._modules = items
        self._quiet_zone_modules = quiet_zone_modules
        self._symbology = symbology

    @classmethod
    def from_bits(
        cls,
        bits: str,
        *,
        quiet_zone_modules: int = 0,
        symbology: Optional[Symbology] = None,
    ) -> "ModuleSequence":
        """
        Build a sequence from a ``"1"``/``"0"`` core pattern, padding it with
        ``quiet_zone_modules`` spaces on each side.
        """
        if any(c not in "01" for c in bits):
            raise ValueError("bits must contain only '0' and '1'")
        quiet = (SPACE,) * quiet_zone_modules
        core = tuple(BAR if c == "1" else SPACE for c in bits)
        return cls(
            quiet + core + quiet,
            quiet_zone_modules=quiet_zone_modules,
            symbology=symbology,
        )

    @property
    def modules(self) -> Tuple[BarModule, ...]:
        return self._modules

    @property
    def quiet_zone_modules(self) -> int:
        return self._quiet_zone_modules

    @property
    def symbology(self) -> Optional[Symbology]:
        return self._symbology

    @property
    def core(self) -> Tuple[BarModule, ...]:
        """Modules of the symbol itself, quiet zones stripped."""
        qz = self._quiet_zone_modules
        return self._modules[qz : len(self._modules) - qz]

    @property
    def core_length(self) -> int:
        return len(self._modules) - 2 * self._quiet_zone_modules

    def to_bits(self, *, include_quiet_zones: bool = True) -> str:
        """One character per unit of width: ``"1"`` for bar, ``"0"`` for space."""
        source = self._modules if include_quiet_zones else self.core
        return "".join(("1" if m.is_bar else "0") * m.width_factor for m in source)

    def total_width(self) -> int:
        """Sum of width factors (in base module units), quiet zones included."""
        return sum(m.width_factor for m in self._modules)

    def __len__(self) -> int:
        return len(self._modules)

    def __iter__(self) -> Iterator[BarModule]:
        return iter(self._modules)

    @overload
    def __getitem__(self, index: int) -> BarModule: ...

    @overload
    def __getitem__(self, index: slice) -> Tuple[BarModule, ...]: ...

    def __getitem__(
        self, index: Union[int, slice]
    ) -> Union[BarModule, Tuple[BarModule, ...]]:
        return self._modules[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ModuleSequence):
            return NotImplemented
        return (
            self._modules == other._modules
            and self._quiet_zone_modules == other._quiet_zone_modules
            and self._symbology == other._symbology
        )

    def __hash__(self) -> int:
        return hash((self._modules, self._quiet_zone_modules, self._symbology))

    def __repr__(self) -> str:
        name = self._symbology.value if self._symbology else None
        return (
            f"ModuleSequence(symbology={name!r}, core_length={self.core_length}, "
            f"quiet_zone_modules={self._quiet_zone_modules})"
        )
