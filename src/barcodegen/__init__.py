"""
barcodegen
==========

Движок кодирования одномерных штрихкодов: текст превращается в
последовательность ширин штрихов/пробелов и позиции подписей.

Поддерживаемые символики:
    - EAN-13, EAN-8 (с добавками из 2 и 5 цифр)
    - UPC-A, UPC-E (с добавками)
    - ISBN (как EAN-13 с префиксом 978)
    - Code 39 и Code 39 extended
    - Code 128-C
    - Interleaved 2 of 5

Пример:
    >>> from barcodegen import BarcodeRequest, encode
    >>> symbol = encode(BarcodeRequest("400638133393"))
    >>> symbol.symbology_name
    'EAN-13'
    >>> symbol.text_info.split()[-1]
    '94:12:1'

Логирование:
    >>> import os
    >>> os.environ['BARCODEGEN_LOG_LEVEL'] = 'DEBUG'
    >>> from barcodegen import get_logger
    >>> get_logger(__name__).debug("Отладочное логирование включено")

Зависимости:
    Pillow (превью)
"""

import logging
import logging.handlers
import os
import sys

__version__ = "0.1.0"

# =============================================================================
# КОНФИГУРАЦИЯ ЛОГИРОВАНИЯ
# =============================================================================

_ROOT_LOGGER_NAME = "barcodegen"


def _setup_logging() -> None:
    """
    Инициализировать логирование пакета.

    - Уровень из переменной окружения BARCODEGEN_LOG_LEVEL (по умолчанию WARNING)
    - Консольный обработчик (stderr)
    - Ротирующий файловый обработчик, только если задан BARCODEGEN_LOG_FILE

    Идемпотентна: повторные вызовы ничего не меняют.
    """
    log_level_str = os.environ.get("BARCODEGEN_LOG_LEVEL", "WARNING").upper()
    log_level_map = {
        "DEBUG": logging.DEBUG,
        "INFO": logging.INFO,
        "WARNING": logging.WARNING,
        "ERROR": logging.ERROR,
        "CRITICAL": logging.CRITICAL,
    }
    log_level = log_level_map.get(log_level_str, logging.WARNING)

    root_logger = logging.getLogger(_ROOT_LOGGER_NAME)
    if root_logger.handlers:
        return

    root_logger.setLevel(log_level)

    formatter = logging.Formatter(
        fmt=("[%(asctime)s] %(levelname)-8s " "[%(name)s.%(funcName)s:%(lineno)d] %(message)s"),
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    log_file = os.environ.get("BARCODEGEN_LOG_FILE")
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
            root_logger.addHandler(file_handler)
        except OSError as e:
            root_logger.warning(
                f"Не удалось инициализировать файловое логирование: {e}. "
                f"Используется только консоль."
            )


def get_logger(module_name: str) -> logging.Logger:
    """
    Получить логгер в пространстве имён 'barcodegen'.

    Аргументы:
        module_name: Обычно ``__name__``.

    Пример:
        >>> logger = get_logger("my_plugin")
        >>> logger.name
        'barcodegen.my_plugin'
    """
    if module_name == _ROOT_LOGGER_NAME or module_name.startswith(_ROOT_LOGGER_NAME + "."):
        return logging.getLogger(module_name)
    if module_name == "__main__":
        return logging.getLogger(f"{_ROOT_LOGGER_NAME}.main")
    return logging.getLogger(f"{_ROOT_LOGGER_NAME}.{module_name.lstrip('.')}")


_setup_logging()

# =============================================================================
# ПУБЛИЧНЫЙ API
# =============================================================================

# Импорты размещены после настройки логирования: модули пакета
# получают логгеры через get_logger при импорте.

from barcodegen.config import BarcodeConfig, load_config  # noqa: E402
from barcodegen.encoder import BarcodeRequest, detect_symbology, encode, verify  # noqa: E402
from barcodegen.enums import Symbology, TextPlacement  # noqa: E402
from barcodegen.exceptions import (  # noqa: E402
    BarcodeError,
    InternalInconsistencyError,
    InvalidInputError,
    MissingInputError,
    NoSuitableSymbologyError,
    PatternSyntaxError,
    RenderError,
    ResourceExhaustedError,
    UnsupportedSymbologyError,
)
from barcodegen.generator import BarcodeGenerator  # noqa: E402
from barcodegen.pattern import (  # noqa: E402
    EncodedSymbol,
    Geometry,
    PatternElement,
    TextAnnotation,
    format_text_info,
    parse_pattern,
    parse_text_info,
)
from barcodegen.registry import SymbologyDescriptor, SymbologyRegistry  # noqa: E402

__all__ = [
    "__version__",
    "get_logger",
    "BarcodeConfig",
    "load_config",
    "BarcodeRequest",
    "encode",
    "detect_symbology",
    "verify",
    "Symbology",
    "TextPlacement",
    "BarcodeError",
    "InvalidInputError",
    "MissingInputError",
    "NoSuitableSymbologyError",
    "UnsupportedSymbologyError",
    "ResourceExhaustedError",
    "InternalInconsistencyError",
    "PatternSyntaxError",
    "RenderError",
    "BarcodeGenerator",
    "EncodedSymbol",
    "Geometry",
    "PatternElement",
    "TextAnnotation",
    "format_text_info",
    "parse_pattern",
    "parse_text_info",
    "SymbologyDescriptor",
    "SymbologyRegistry",
]
