"""
Настройки рендеринга и логирования.

Значения по умолчанию совпадают с PostScript back-end: поле 10 точек,
высота 80, шрифт 12. Пользовательский JSON накладывается поверх значений
по умолчанию, затем применяются переменные окружения ``BARCODEGEN_*``.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import asdict, dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from barcodegen import get_logger
from barcodegen.pattern import DEFAULT_MARGIN

__all__ = ["BarcodeConfig", "DEFAULT_CONFIG", "load_config", "ENV_PREFIX"]

ENV_PREFIX = "BARCODEGEN_"

DEFAULT_FONT_SIZE = 12

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class BarcodeConfig:
    """
    Параметры превью по умолчанию.

    Attributes:
        margin: Белое поле вокруг символа, в точках
        height: Высота символа, если не задана в Geometry
        font_size: Кегль основной подписи; размеры аннотаций масштабируются
            относительно 12 (значение по умолчанию)
        show_text: Печатать ли человекочитаемый текст
        dpi: Разрешение растра (72 = одна точка на пиксель)
        log_level: Уровень логирования пакета; load_config применяет его
            к логгеру 'barcodegen' и его обработчикам
    """

    margin: int = DEFAULT_MARGIN
    height: int = 80
    font_size: int = DEFAULT_FONT_SIZE
    show_text: bool = True
    dpi: int = 72
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        if self.margin < 0:
            raise ValueError("margin must be >= 0")
        if self.height <= 0:
            raise ValueError("height must be > 0")
        if self.font_size <= 0:
            raise ValueError("font_size must be > 0")
        if not (36 <= self.dpi <= 1200):
            raise ValueError("dpi must be between 36 and 1200")
        if self.log_level.upper() not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {_LOG_LEVELS}")

    @property
    def pixels_per_point(self) -> float:
        return self.dpi / 72.0

    @property
    def font_scale(self) -> float:
        """Множитель размеров аннотаций относительно кегля 12."""
        return self.font_size / DEFAULT_FONT_SIZE

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


DEFAULT_CONFIG = BarcodeConfig()


def _coerce(name: str, raw: Any, default: Any) -> Any:
    """Привести значение из JSON или окружения к типу поля."""
    if isinstance(default, bool):
        if isinstance(raw, bool):
            return raw
        if isinstance(raw, str):
            value = raw.strip().lower()
            if value in ("1", "true", "yes", "on"):
                return True
            if value in ("0", "false", "no", "off"):
                return False
        raise ValueError(f"{name}: expected a boolean, got {raw!r}")
    if isinstance(default, int):
        if isinstance(raw, bool):
            raise ValueError(f"{name}: expected an integer, got {raw!r}")
        return int(raw)
    return str(raw)


def _merge(base: BarcodeConfig, values: Mapping[str, Any], source: str) -> BarcodeConfig:
    logger = get_logger(__name__)
    known = {f.name: getattr(base, f.name) for f in fields(base)}
    changes: Dict[str, Any] = {}
    for key, raw in values.items():
        if key not in known:
            logger.warning(f"Неизвестный ключ конфигурации '{key}' в {source}, пропущен")
            continue
        changes[key] = _coerce(key, raw, known[key])
    return replace(base, **changes)


def _apply_log_level(level_name: str) -> None:
    """Выставить уровень логгеру пакета и всем его обработчикам."""
    level = getattr(logging, level_name.upper())
    root_logger = logging.getLogger("barcodegen")
    root_logger.setLevel(level)
    for handler in root_logger.handlers:
        handler.setLevel(level)


def _env_overrides(environ: Mapping[str, str]) -> Dict[str, str]:
    overrides = {}
    for f in fields(BarcodeConfig):
        value = environ.get(ENV_PREFIX + f.name.upper())
        if value is not None:
            overrides[f.name] = value
    return overrides


def load_config(
    config_path: Optional[Path] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> BarcodeConfig:
    """
    Загрузить конфигурацию из JSON-файла или использовать значения по умолчанию.

    Нечитаемый файл, недопустимый JSON или недопустимые значения не
    прерывают работу: пишется предупреждение и используются значения по
    умолчанию. Переменные окружения (``BARCODEGEN_MARGIN``,
    ``BARCODEGEN_DPI``, ...) применяются последними; недопустимое
    значение переменной приводит к ValueError.

    Аргументы:
        config_path: Путь к JSON-файлу. Если None, ищет 'barcodegen.json'
            в текущем каталоге.
        environ: Окружение (по умолчанию ``os.environ``).

    Пример:
        >>> config = load_config(Path("missing.json"), environ={})
        >>> config.margin
        10
    """
    logger = get_logger(__name__)
    if config_path is None:
        config_path = Path("barcodegen.json")
    if environ is None:
        environ = os.environ

    config = DEFAULT_CONFIG

    if config_path.exists():
        try:
            with open(config_path, "r", encoding="utf-8") as f:
                user_config = json.load(f)

            if not isinstance(user_config, dict):
                raise ValueError(
                    f"Файл конфигурации должен содержать JSON-объект, "
                    f"получен {type(user_config).__name__}"
                )

            config = _merge(config, user_config, str(config_path))
            logger.info(f"Конфигурация загружена из {config_path}")
            logger.debug(f"Конфигурация: {config}")

        except json.JSONDecodeError as e:
            logger.warning(
                f"Не удалось разобрать {config_path}: недопустимый JSON "
                f"в строке {e.lineno}, столбце {e.colno}. "
                f"Используется конфигурация по умолчанию."
            )
            config = DEFAULT_CONFIG
        except OSError as e:
            logger.warning(
                f"Не удалось прочитать {config_path}: {e}. "
                f"Используется конфигурация по умолчанию."
            )
            config = DEFAULT_CONFIG
        except (TypeError, ValueError) as e:
            logger.warning(
                f"Недопустимый формат конфигурации: {e}. "
                f"Используется конфигурация по умолчанию."
            )
            config = DEFAULT_CONFIG
    else:
        logger.info(
            f"Файл конфигурации {config_path} не найден. "
            f"Используется конфигурация по умолчанию."
        )

    overrides = _env_overrides(environ)
    if overrides:
        config = _merge(config, overrides, "environment")
        logger.debug(f"Переопределения из окружения: {sorted(overrides)}")

    _apply_log_level(config.log_level)
    return config
