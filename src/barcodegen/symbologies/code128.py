"""Code 128, subset C: pairs of digits, one symbol per pair."""

from __future__ import annotations

from typing import List, Optional

from barcodegen.checksum import code128c_checksum, digit_values
from barcodegen.enums import Symbology
from barcodegen.exceptions import InternalInconsistencyError
from barcodegen.pattern import EncodedSymbol, TextAnnotation
from barcodegen.symbologies._common import is_digits, require_text
from barcodegen.tables import (
    CODE128_START_C,
    CODE128_STOP,
    CODE128_SYMBOL_WIDTH,
    CODE128_SYMBOLS,
)

__all__ = ["verify_code128c", "encode_code128c"]

_FONT_SIZE = 9


def verify_code128c(text: str) -> bool:
    return is_digits(text) and len(text) % 2 == 0


def encode_code128c(text: Optional[str], no_checksum: bool = False) -> EncodedSymbol:
    """
    Encode an even number of digits as Code 128-C.

    The check symbol is part of the symbology and always emitted, so
    ``no_checksum`` has no effect.

    Example:
        >>> encode_code128c("1234").text_info
        '11:9:1 16.5:9:2 22:9:3 27.5:9:4'
    """
    text = require_text(text, Symbology.CODE128C)
    if len(text) % 2:
        raise InternalInconsistencyError(
            "Code 128-C needs an even number of digits",
            text=text,
            symbology=Symbology.CODE128C,
        )
    values = digit_values(text)
    pairs = tuple(values[i] * 10 + values[i + 1] for i in range(0, len(values), 2))

    chunks: List[str] = ["0", CODE128_SYMBOLS[CODE128_START_C]]
    annotations: List[TextAnnotation] = []
    position: float = CODE128_SYMBOL_WIDTH
    for k, value in enumerate(pairs):
        chunks.append(CODE128_SYMBOLS[value])
        annotations.append(TextAnnotation(position, _FONT_SIZE, text[2 * k]))
        annotations.append(
            TextAnnotation(
                position + CODE128_SYMBOL_WIDTH / 2, _FONT_SIZE, text[2 * k + 1]
            )
        )
        position += CODE128_SYMBOL_WIDTH

    chunks.append(CODE128_SYMBOLS[code128c_checksum(pairs)])
    chunks.append(CODE128_SYMBOLS[CODE128_STOP])

    return EncodedSymbol(
        text=text,
        symbology=Symbology.CODE128C,
        symbology_name="code 128-C",
        pattern="".join(chunks),
        text_annotations=tuple(annotations),
    )
