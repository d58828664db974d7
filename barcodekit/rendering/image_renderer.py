from __future__ import annotations

import logging
from dataclasses import dataclass
from io import BytesIO
from typing import Any, Mapping, Tuple, Union

from PIL import Image, ImageDraw

from barcodekit.exceptions import EmptySequenceError
from barcodekit.model.modules import ModuleSequence

logger = logging.getLogger(__name__)

__all__ = ["RenderScale", "render", "render_bytes", "render_text"]

Color = Union[str, Tuple[int, int, int]]


@dataclass(frozen=True)
class RenderScale:
    """
    Параметры отрисовки последовательности модулей.

    Attributes:
        base_module_width: Ширина одного модуля в пикселях.
        height: Высота штрихов в пикселях (округляется до целого пикселя).
        bar_color: Цвет штрихов (любой цвет, понятный Pillow).
        space_color: Цвет пробелов и фона.

    Examples:
        >>> RenderScale(base_module_width=2, height=80).bar_color
        'black'
    """

    base_module_width: float = 2
    height: float = 80
    bar_color: Color = "black"
    space_color: Color = "white"

    def __post_init__(self) -> None:
        if self.base_module_width <= 0:
            raise ValueError("base_module_width must be > 0")
        if self.height <= 0:
            raise ValueError("height must be > 0")

    @classmethod
    def from_config(cls, config: Mapping[str, Any]) -> "RenderScale":
        """Build from a loaded configuration dict (missing keys use defaults)."""
        defaults = cls()
        return cls(
            base_module_width=config.get("base_module_width", defaults.base_module_width),
            height=config.get("bar_height", defaults.height),
            bar_color=config.get("bar_color", defaults.bar_color),
            space_color=config.get("space_color", defaults.space_color),
        )


def _require_modules(sequence: ModuleSequence) -> None:
    if len(sequence) == 0:
        raise EmptySequenceError("Cannot render an empty module sequence")


def render(sequence: ModuleSequence, scale: RenderScale = RenderScale()) -> Image.Image:
    """
    Нарисовать последовательность модулей в RGB-изображение.

    Каждый модуль становится полосой шириной
    ``width_factor * base_module_width`` пикселей. Никакой логики
    символик здесь нет.

    Raises:
        EmptySequenceError: пустая последовательность.
    """
    _require_modules(sequence)
    total_units = sequence.total_width()
    width = max(1, round(total_units * scale.base_module_width))
    height = max(1, round(scale.height))
    logger.debug(
        "Rendering %d modules (%d units) at %dx%d px",
        len(sequence),
        total_units,
        width,
        height,
    )

    img = Image.new("RGB", (width, height), color=scale.space_color)
    draw = ImageDraw.Draw(img)
    units = 0
    for module in sequence:
        x0 = round(units * scale.base_module_width)
        units += module.width_factor
        x1 = round(units * scale.base_module_width) - 1
        if module.is_bar and x1 >= x0:
            draw.rectangle((x0, 0, x1, height - 1), fill=scale.bar_color)
    return img


def render_bytes(
    sequence: ModuleSequence,
    scale: RenderScale = RenderScale(),
    image_format: str = "PNG",
) -> bytes:
    img = render(sequence, scale)
    buf = BytesIO()
    img.save(buf, format=image_format)
    buf.seek(0)
    return buf.read()


def render_text(sequence: ModuleSequence, bar: str = "█", space: str = " ") -> str:
    """Single-line terminal preview, one character per module unit."""
    _require_modules(sequence)
    return "".join((bar if m.is_bar else space) * m.width_factor for m in sequence)
