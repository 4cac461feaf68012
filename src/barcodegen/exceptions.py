# -*- coding: utf-8 -*-
"""
RU: Централизованная иерархия исключений движка кодирования штрихкодов.

EN: Centralized exception hierarchy for the barcode encoding engine.

Иерархия:
    BarcodeError (базовое)
    ├── InvalidInputError            (текст не прошёл валидацию)
    ├── MissingInputError            (текст отсутствует)
    ├── NoSuitableSymbologyError     (автоопределение не нашло символику)
    ├── UnsupportedSymbologyError    (символика не зарегистрирована)
    ├── ResourceExhaustedError       (MemoryError при кодировании)
    ├── InternalInconsistencyError   (валидатор и кодировщик разошлись)
    ├── PatternSyntaxError           (ошибка разбора wire-строки)
    └── RenderError                  (ошибка растрового превью)

Guidelines:
- Errors are raised before any partial result is handed back to the caller.
- Messages name the offending text and symbology; the caller decides how to
  surface them.
"""

from __future__ import annotations

from typing import Any, Optional

__all__ = [
    "BarcodeError",
    "InvalidInputError",
    "MissingInputError",
    "NoSuitableSymbologyError",
    "UnsupportedSymbologyError",
    "ResourceExhaustedError",
    "InternalInconsistencyError",
    "PatternSyntaxError",
    "RenderError",
]


class BarcodeError(Exception):
    """
    Базовое исключение для всех ошибок кодирования штрихкодов.

    Attributes:
        message: Человекочитаемое сообщение об ошибке
        text: Текст, вызвавший ошибку (опционально)
        symbology: Символика, в контексте которой произошла ошибка (опционально)

    Example:
        >>> try:
        ...     encode(BarcodeRequest(text="12AB", symbology=Symbology.EAN))
        ... except BarcodeError as e:
        ...     print(e.text, e.symbology)
    """

    def __init__(
        self,
        message: str = "",
        *,
        text: Optional[str] = None,
        symbology: Optional[Any] = None,
        cause: Optional[BaseException] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.text = text
        self.symbology = symbology
        if cause is not None:
            self.__cause__ = cause

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}({self.message!r}, "
            f"text={self.text!r}, symbology={self.symbology!r})"
        )


class InvalidInputError(BarcodeError):
    """Raised when text fails validation (length, alphabet, mixed case)."""


class MissingInputError(BarcodeError):
    """Raised when no text was supplied at all."""


class NoSuitableSymbologyError(BarcodeError):
    """Raised when autodetection finds no symbology accepting the text."""


class UnsupportedSymbologyError(BarcodeError):
    """Raised when an explicit symbology has no registered handler."""


class ResourceExhaustedError(BarcodeError):
    """Raised when the interpreter runs out of memory while encoding."""


class InternalInconsistencyError(BarcodeError):
    """Raised when validated text is rejected by the encoder (validator bug)."""


class PatternSyntaxError(BarcodeError):
    """Raised when a pattern or text-info wire string cannot be parsed."""


class RenderError(BarcodeError):
    """Raised when the preview renderer cannot draw an encoded symbol."""
