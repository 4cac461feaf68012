"""
Interleaved 2 of 5.

Digits go in pairs: the first digit of a pair is drawn with the bars, the
second with the spaces in between. An odd count is padded with a leading
zero; the optional check digit counts toward the parity.
"""

from __future__ import annotations

from typing import List, Optional

from barcodegen.checksum import digit_values, i25_checksum
from barcodegen.enums import Symbology
from barcodegen.pattern import EncodedSymbol, TextAnnotation
from barcodegen.symbologies._common import is_digits, require_text
from barcodegen.tables import I25_DIGITS, I25_GUARD_END, I25_GUARD_START, I25_PAIR_WIDTH

__all__ = ["verify_i25", "encode_i25", "i25_payload"]

_FONT_SIZE = 12
_FIRST_TEXT_POS = 4


def verify_i25(text: str) -> bool:
    return is_digits(text)


def i25_payload(text: str, no_checksum: bool = False) -> str:
    """
    Digits actually drawn: padding zero, input, check digit.

    Example:
        >>> i25_payload("0123456789")
        '001234567895'
    """
    use_checksum = not no_checksum
    padded = "0" + text if (len(text) + use_checksum) % 2 else text
    if use_checksum:
        padded += str(i25_checksum(padded))
    return padded


def encode_i25(text: Optional[str], no_checksum: bool = False) -> EncodedSymbol:
    """Encode digits as Interleaved 2 of 5; only the input digits are annotated."""
    text = require_text(text, Symbology.I25)
    payload = i25_payload(text, no_checksum)
    values = digit_values(payload)
    # index range of input digits inside the payload
    first = len(payload) - len(text) - (0 if no_checksum else 1)
    last = first + len(text)

    chunks: List[str] = ["0", I25_GUARD_START]
    annotations: List[TextAnnotation] = []
    position = _FIRST_TEXT_POS
    for i in range(0, len(values), 2):
        bars, spaces = I25_DIGITS[values[i]], I25_DIGITS[values[i + 1]]
        chunks.append("".join(b + s for b, s in zip(bars, spaces)))
        for offset in (0, 1):
            if first <= i + offset < last:
                annotations.append(
                    TextAnnotation(
                        position + offset * I25_PAIR_WIDTH // 2,
                        _FONT_SIZE,
                        payload[i + offset],
                    )
                )
        position += I25_PAIR_WIDTH
    chunks.append(I25_GUARD_END)

    return EncodedSymbol(
        text=text,
        symbology=Symbology.I25,
        symbology_name="interleaved 2 of 5",
        pattern="".join(chunks),
        text_annotations=tuple(annotations),
    )
