"""
model

Доменная модель штрихкода: символики и последовательности модулей.

Public API:
    - Symbology: перечисление символик (Enum)
    - BarModule: штрих или пробел заданной ширины (frozen dataclass)
    - ModuleSequence: неизменяемая последовательность модулей
"""

from barcodekit.model.enums import Symbology
from barcodekit.model.modules import BAR, SPACE, BarModule, ModuleSequence

__all__ = [
    "Symbology",
    "BarModule",
    "ModuleSequence",
    "BAR",
    "SPACE",
]
