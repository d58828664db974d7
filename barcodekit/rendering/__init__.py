"""
rendering

Отрисовка последовательностей модулей (Pillow). Рендерер ничего не знает
о символиках, контрольных цифрах и охранных шаблонах.

Public API:
    - RenderScale: параметры отрисовки (frozen dataclass)
    - render: ModuleSequence -> PIL.Image.Image
    - render_bytes: ModuleSequence -> PNG bytes
    - render_text: ModuleSequence -> строка для терминала

Зависимости:
    Pillow
"""

from barcodekit.rendering.image_renderer import (
    RenderScale,
    render,
    render_bytes,
    render_text,
)

__all__ = ["RenderScale", "render", "render_bytes", "render_text"]
