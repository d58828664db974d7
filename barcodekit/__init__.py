"""
Пакет barcodekit
================

Кодирование линейных штрихкодов в последовательности модулей (штрих/пробел)
и их отрисовка.

Этот пакет предоставляет:
    - Кодер UPC-A с вычислением и проверкой контрольной цифры
    - Таблицы L/G/R и шаблонов чётности по GS1 General Specifications
    - Независимую от рендерера модель ModuleSequence
    - Рендерер на Pillow (PNG/изображение/текст)
    - Обработку результатов непрерывного сканирования

Пример базового использования:
    >>> from barcodekit import encode, render, RenderScale
    >>>
    >>> seq = encode("03600029145")
    >>> seq.core_length
    95
    >>> img = render(seq, RenderScale(base_module_width=3, height=100))

Управление конфигурацией:
    >>> import os
    >>> os.environ['BARCODEKIT_LOG_LEVEL'] = 'DEBUG'
    >>>
    >>> from barcodekit import load_config, encode_options_from_config
    >>>
    >>> config = load_config()
    >>> seq = encode("036000291452", options=encode_options_from_config(config))

Версия: 0.1.0
Лицензия: MIT
Python: 3.11+
"""

import json
import logging
import logging.handlers
import os
import sys
from pathlib import Path
from typing import Any, Dict, Optional

# =============================================================================
# МЕТАДАННЫЕ ВЕРСИИ
# =============================================================================

__version__ = "0.1.0"
__description__ = "UPC-A barcode encoder with a renderer-agnostic module model"
__license__ = "MIT"
__python_requires__ = ">=3.11"

VERSION_MAJOR = 0
VERSION_MINOR = 1
VERSION_PATCH = 0

_ROOT_LOGGER_NAME = "barcodekit"
_LOG_LEVEL_ENV = "BARCODEKIT_LOG_LEVEL"

# Атрибут, которым помечаются обработчики, установленные самим пакетом.
_HANDLER_TAG = "_barcodekit_handler"

_LOG_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}

# =============================================================================
# КОНФИГУРАЦИЯ ЛОГИРОВАНИЯ
# =============================================================================


def _setup_logging() -> None:
    """
    Инициализировать логирование пакета.

    - Консольный обработчик (stderr) для WARNING и выше
    - Ротирующий файловый обработчик, если задана BARCODEKIT_LOG_FILE
    - Уровень из BARCODEKIT_LOG_LEVEL (DEBUG, INFO, WARNING, ERROR, CRITICAL)

    Идемпотентна: повторные вызовы не добавляют обработчиков. Учитываются
    только обработчики пакета; чужие (например, захват логов pytest) не мешают.
    """
    log_level = _LOG_LEVELS.get(
        os.environ.get(_LOG_LEVEL_ENV, "INFO").upper(), logging.INFO
    )

    root_logger = logging.getLogger(_ROOT_LOGGER_NAME)
    if any(getattr(h, _HANDLER_TAG, False) for h in root_logger.handlers):
        return

    root_logger.setLevel(log_level)

    formatter = logging.Formatter(
        fmt="[%(asctime)s] %(levelname)-8s [%(name)s.%(funcName)s:%(lineno)d] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(logging.WARNING)
    console_handler.setFormatter(formatter)
    setattr(console_handler, _HANDLER_TAG, True)
    root_logger.addHandler(console_handler)

    log_file = os.environ.get("BARCODEKIT_LOG_FILE")
    if log_file:
        try:
            file_handler = logging.handlers.RotatingFileHandler(
                filename=log_file,
                maxBytes=10 * 1024 * 1024,  # 10 МБ
                backupCount=5,
                encoding="utf-8",
            )
            file_handler.setLevel(log_level)
            file_handler.setFormatter(formatter)
            setattr(file_handler, _HANDLER_TAG, True)
            root_logger.addHandler(file_handler)
        except OSError as e:
            root_logger.warning(
                "Не удалось инициализировать файловое логирование: %s. "
                "Используется только консоль.",
                e,
            )

    root_logger.propagate = False


def get_logger(module_name: str) -> logging.Logger:
    """
    Получить логгер в пространстве имён ``barcodekit``.

    Пример:
        >>> get_logger("my_plugin").name
        'barcodekit.my_plugin'
        >>> get_logger("barcodekit.encoding").name
        'barcodekit.encoding'
    """
    if module_name == _ROOT_LOGGER_NAME or module_name.startswith(_ROOT_LOGGER_NAME + "."):
        return logging.getLogger(module_name)
    if module_name == "__main__":
        return logging.getLogger(f"{_ROOT_LOGGER_NAME}.main")
    clean_name = module_name.lstrip(".")
    return logging.getLogger(f"{_ROOT_LOGGER_NAME}.{clean_name}")


# =============================================================================
# УПРАВЛЕНИЕ КОНФИГУРАЦИЕЙ
# =============================================================================

_DEFAULT_CONFIG: Dict[str, Any] = {
    "verify_check_digit": True,
    "quiet_zone_modules": 9,
    "base_module_width": 2,
    "bar_height": 80,
    "bar_color": "black",
    "space_color": "white",
    "log_level": "INFO",
}


def _apply_config_log_level(level_name: Any) -> None:
    """Применить уровень из конфигурации; BARCODEKIT_LOG_LEVEL имеет приоритет."""
    if _LOG_LEVEL_ENV in os.environ:
        return
    level = _LOG_LEVELS.get(str(level_name).upper())
    if level is None:
        raise ValueError(f"Неизвестный уровень логирования: {level_name!r}")
    logging.getLogger(_ROOT_LOGGER_NAME).setLevel(level)


def load_config(config_path: Optional[Path] = None) -> Dict[str, Any]:
    """
    Загрузить конфигурацию из JSON-файла поверх значений по умолчанию.

    Ключи конфигурации:
        - verify_check_digit: bool - Проверять переданную 12-ю цифру UPC-A
        - quiet_zone_modules: int - Пустая зона с каждой стороны (модули)
        - base_module_width: float - Ширина модуля при отрисовке (px)
        - bar_height: float - Высота штрихов (px, округляется при отрисовке)
        - bar_color / space_color: str - Цвета Pillow
        - log_level: str - Уровень логирования пакета; применяется к логгеру
          ``barcodekit``, если не задана переменная BARCODEKIT_LOG_LEVEL

    Аргументы:
        config_path: Путь к файлу. Если None, ищется 'barcodekit.json'
                    в текущем каталоге.

    Возвращает:
        Словарь со всеми ключами по умолчанию, переопределёнными
        значениями из файла. Недопустимый или нечитаемый файл даёт
        предупреждение в лог и конфигурацию по умолчанию.
    """
    logger = get_logger(__name__)

    if config_path is None:
        config_path = Path("barcodekit.json")

    config = _DEFAULT_CONFIG.copy()

    if not config_path.exists():
        logger.info(
            "Файл конфигурации %s не найден. Используется конфигурация по умолчанию.",
            config_path,
        )
        return config

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            user_config = json.load(f)
        if not isinstance(user_config, dict):
            raise ValueError(
                f"Файл конфигурации должен содержать JSON-объект, "
                f"получен {type(user_config).__name__}"
            )
        config.update(user_config)
        if "log_level" in user_config:
            _apply_config_log_level(user_config["log_level"])
        logger.info("Конфигурация загружена из %s", config_path)
        logger.debug("Конфигурация: %s", config)
    except json.JSONDecodeError as e:
        logger.warning(
            "Не удалось разобрать %s: недопустимый JSON в строке %d, столбце %d. "
            "Используется конфигурация по умолчанию.",
            config_path,
            e.lineno,
            e.colno,
        )
        config = _DEFAULT_CONFIG.copy()
    except OSError as e:
        logger.warning(
            "Не удалось прочитать %s: %s. Используется конфигурация по умолчанию.",
            config_path,
            e,
        )
        config = _DEFAULT_CONFIG.copy()
    except ValueError as e:
        logger.warning(
            "Недопустимый формат конфигурации: %s. Используется конфигурация по умолчанию.",
            e,
        )
        config = _DEFAULT_CONFIG.copy()

    return config


# =============================================================================
# ПУБЛИЧНЫЙ API
# =============================================================================

from barcodekit.encoding import (  # noqa: E402
    EncodeOptions,
    UPCAEncoder,
    compute_check_digit,
    encode,
    encode_options_from_config,
    is_valid_upca,
    normalize_upca,
    select_parity_pattern,
    supported_symbologies,
)
from barcodekit.exceptions import (  # noqa: E402
    BarcodeError,
    ChecksumError,
    EmptySequenceError,
    EncodingError,
    FormatError,
    RenderError,
    UnsupportedSymbologyError,
)
from barcodekit.model import BarModule, ModuleSequence, Symbology  # noqa: E402
from barcodekit.rendering import RenderScale, render, render_bytes, render_text  # noqa: E402
from barcodekit.scanning import ContinuousScanSession, ScanResult  # noqa: E402

__all__ = [
    # Метаданные версии
    "__version__",
    "__description__",
    "__license__",
    "__python_requires__",
    "VERSION_MAJOR",
    "VERSION_MINOR",
    "VERSION_PATCH",
    # Утилиты
    "get_logger",
    "load_config",
    # Модель
    "Symbology",
    "BarModule",
    "ModuleSequence",
    # Кодирование
    "encode",
    "supported_symbologies",
    "compute_check_digit",
    "select_parity_pattern",
    "EncodeOptions",
    "encode_options_from_config",
    "UPCAEncoder",
    "normalize_upca",
    "is_valid_upca",
    # Отрисовка
    "RenderScale",
    "render",
    "render_bytes",
    "render_text",
    # Сканирование
    "ContinuousScanSession",
    "ScanResult",
    # Исключения
    "BarcodeError",
    "EncodingError",
    "FormatError",
    "ChecksumError",
    "UnsupportedSymbologyError",
    "RenderError",
    "EmptySequenceError",
]

_setup_logging()
