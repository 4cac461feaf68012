"""
Реестр символик штрихкодов.

Thread-safe Singleton: хранит по одному дескриптору на символику
(verify + encode) и отдаёт их диспетчеру. Заполняется один раз при первом
обращении, дальше только читается.

Example:
    >>> from barcodegen.registry import SymbologyRegistry
    >>> registry = SymbologyRegistry.get_instance()
    >>> registry.get(Symbology.EAN).verify("400638133393")
    True

Thread Safety:
    Регистрация и создание экземпляра идут под RLock; чтение работает с
    неизменяемым снимком (tuple), поэтому не блокирует.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Callable, Dict, Optional, Tuple

from barcodegen.enums import DETECTION_ORDER, Symbology
from barcodegen.exceptions import UnsupportedSymbologyError
from barcodegen.pattern import EncodedSymbol
from barcodegen.symbologies import (
    encode_code39,
    encode_code39ext,
    encode_code128c,
    encode_ean,
    encode_i25,
    encode_isbn,
    encode_upc,
    verify_code39,
    verify_code39ext,
    verify_code128c,
    verify_ean,
    verify_i25,
    verify_isbn,
    verify_upc,
)

logger = logging.getLogger(__name__)

__all__ = ["SymbologyDescriptor", "SymbologyRegistry", "builtin_descriptors"]

VerifyFunc = Callable[[str], bool]
EncodeFunc = Callable[[Optional[str], bool], EncodedSymbol]


@dataclass(frozen=True)
class SymbologyDescriptor:
    """
    Описание одной символики.

    Attributes:
        symbology: Идентификатор символики
        name: Имя по умолчанию (кодер может уточнить: EAN-13 / EAN-8)
        verify: Проверка текста, без побочных эффектов
        encode: Построение EncodedSymbol, бросает BarcodeError
    """

    symbology: Symbology
    name: str
    verify: VerifyFunc
    encode: EncodeFunc


def builtin_descriptors() -> Tuple[SymbologyDescriptor, ...]:
    """Дескрипторы встроенных символик в порядке автоопределения."""
    table = {
        Symbology.EAN: SymbologyDescriptor(Symbology.EAN, "EAN", verify_ean, encode_ean),
        Symbology.UPC: SymbologyDescriptor(Symbology.UPC, "UPC", verify_upc, encode_upc),
        Symbology.ISBN: SymbologyDescriptor(
            Symbology.ISBN, "ISBN", verify_isbn, encode_isbn
        ),
        Symbology.CODE128C: SymbologyDescriptor(
            Symbology.CODE128C, "code 128-C", verify_code128c, encode_code128c
        ),
        Symbology.CODE39: SymbologyDescriptor(
            Symbology.CODE39, "code 39", verify_code39, encode_code39
        ),
        Symbology.CODE39EXT: SymbologyDescriptor(
            Symbology.CODE39EXT, "code 39 extended", verify_code39ext, encode_code39ext
        ),
        Symbology.I25: SymbologyDescriptor(
            Symbology.I25, "interleaved 2 of 5", verify_i25, encode_i25
        ),
    }
    return tuple(table[symbology] for symbology in DETECTION_ORDER)


class SymbologyRegistry:
    """
    Thread-safe реестр дескрипторов символик.

    Attributes:
        _instance: Singleton instance
        _lock: RLock для thread-safety
        _entries: Снимок дескрипторов в порядке автоопределения

    Example:
        >>> registry = SymbologyRegistry.get_instance()
        >>> [d.symbology.value for d in registry.list()][:3]
        ['ean', 'upc', 'isbn']
    """

    _instance: Optional[SymbologyRegistry] = None
    _lock: threading.RLock = threading.RLock()

    def __init__(self, *, populate: bool = True) -> None:
        self._entries: Tuple[SymbologyDescriptor, ...] = ()
        if populate:
            for descriptor in builtin_descriptors():
                self.register(descriptor)

    @classmethod
    def get_instance(cls) -> SymbologyRegistry:
        """
        Получить singleton instance реестра (double-checked locking).

        Example:
            >>> SymbologyRegistry.get_instance() is SymbologyRegistry.get_instance()
            True
        """
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = cls()
                    logger.debug(
                        "SymbologyRegistry initialized with %d symbologies",
                        len(cls._instance._entries),
                    )
        return cls._instance

    @classmethod
    def reset_instance(cls) -> None:
        """Сбросить singleton (только для тестов)."""
        with cls._lock:
            cls._instance = None
            logger.warning("SymbologyRegistry instance reset (testing only!)")

    def register(self, descriptor: SymbologyDescriptor) -> None:
        """
        Добавить дескриптор в конец порядка автоопределения.

        Raises:
            ValueError: Если символика уже зарегистрирована
            TypeError: Если verify/encode не callable
        """
        with self._lock:
            if not callable(descriptor.verify) or not callable(descriptor.encode):
                raise TypeError(
                    f"verify/encode must be callable for {descriptor.symbology!r}"
                )
            if any(d.symbology is descriptor.symbology for d in self._entries):
                raise ValueError(
                    f"Symbology {descriptor.symbology.value!r} is already registered"
                )
            self._entries = self._entries + (descriptor,)
            logger.debug("Registered symbology: %s", descriptor.name)

    def get(self, symbology: Symbology) -> SymbologyDescriptor:
        """
        Raises:
            UnsupportedSymbologyError: Если символика не зарегистрирована
        """
        for descriptor in self._entries:
            if descriptor.symbology is symbology:
                return descriptor
        raise UnsupportedSymbologyError(
            f"Symbology {symbology.value!r} is not registered", symbology=symbology
        )

    def list(self) -> Tuple[SymbologyDescriptor, ...]:
        """Все дескрипторы в порядке автоопределения."""
        return self._entries

    def name_map(self) -> Dict[Symbology, str]:
        return {d.symbology: d.name for d in self._entries}

    def __contains__(self, symbology: object) -> bool:
        return any(d.symbology is symbology for d in self._entries)

    def __len__(self) -> int:
        return len(self._entries)
