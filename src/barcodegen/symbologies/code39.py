"""
Code 39 and Code 39 extended.

Every symbol is five bars and four spaces, three of them wide; symbols are
separated by a narrow space. The extended variant reaches all of ASCII by
rewriting each character as one or two plain Code 39 characters.
"""

from __future__ import annotations

from typing import List, Optional

from barcodegen.checksum import code39_checksum
from barcodegen.enums import Symbology
from barcodegen.exceptions import InternalInconsistencyError
from barcodegen.pattern import EncodedSymbol, TextAnnotation
from barcodegen.symbologies._common import require_text
from barcodegen.tables import (
    CODE39_ALPHABET,
    CODE39_BARS,
    CODE39_EXTENDED,
    CODE39_FIRST_TEXT_POS,
    CODE39_HEAD,
    CODE39_SPACES,
    CODE39_SPECIAL_BARS,
    CODE39_SPECIAL_SPACES,
    CODE39_SYMBOL_WIDTH,
    CODE39_TAIL,
)

__all__ = [
    "verify_code39",
    "verify_code39ext",
    "encode_code39",
    "encode_code39ext",
    "to_extended",
]

_FONT_SIZE = 12
# "*" is the start/stop character and never part of the payload.
_PAYLOAD_ALPHABET = CODE39_ALPHABET.replace("*", "")


def verify_code39(text: str) -> bool:
    """Non-empty, single case, every character in the 43 character alphabet."""
    if not text:
        return False
    has_upper = has_lower = False
    for ch in text:
        if "A" <= ch <= "Z":
            has_upper = True
        elif "a" <= ch <= "z":
            has_lower = True
        if not ch.isascii() or ch.upper() not in _PAYLOAD_ALPHABET:
            return False
    return not (has_upper and has_lower)


def verify_code39ext(text: str) -> bool:
    """Any non-empty 7-bit ASCII text."""
    return bool(text) and all(ord(ch) < 128 for ch in text)


def _symbol(code: int) -> str:
    if code < 40:
        bars, spaces = CODE39_BARS[code % 10], CODE39_SPACES[code // 10]
    else:
        bars, spaces = CODE39_SPECIAL_BARS[code - 40], CODE39_SPECIAL_SPACES[code - 40]
    # narrow separator, then bar/space interleaved ending on a bar
    return "1" + "".join(b + s for b, s in zip(bars, spaces)) + bars[4]


def _code_of(ch: str, text: str) -> int:
    code = CODE39_ALPHABET.find(ch)
    if code < 0 or ch == "*":
        raise InternalInconsistencyError(
            f"Character {ch!r} cannot be encoded in Code 39",
            text=text,
            symbology=Symbology.CODE39,
        )
    return code


def _encode(
    text: str, original: str, symbology: Symbology, name: str, no_checksum: bool
) -> EncodedSymbol:
    upper = text.upper()
    chunks: List[str] = [CODE39_HEAD]
    annotations: List[TextAnnotation] = []
    position = CODE39_FIRST_TEXT_POS

    for ch in upper:
        chunks.append(_symbol(_code_of(ch, original)))
        annotations.append(TextAnnotation(position, _FONT_SIZE, ch))
        position += CODE39_SYMBOL_WIDTH

    if not no_checksum:
        # encoded but not printed
        chunks.append(_symbol(_code_of(code39_checksum(upper), original)))
    chunks.append(CODE39_TAIL)

    return EncodedSymbol(
        text=original,
        symbology=symbology,
        symbology_name=name,
        pattern="".join(chunks),
        text_annotations=tuple(annotations),
    )


def encode_code39(text: Optional[str], no_checksum: bool = False) -> EncodedSymbol:
    """
    Encode Code 39; lower case is folded to upper case.

    Example:
        >>> encode_code39("code 39").text_info.split()[0]
        '22:12:C'
    """
    text = require_text(text, Symbology.CODE39)
    return _encode(text, text, Symbology.CODE39, "code 39", no_checksum)


def to_extended(text: str) -> str:
    """
    Rewrite ASCII text into the plain Code 39 characters that represent it.

    Example:
        >>> to_extended("a")
        '+A'
    """
    out = []
    for ch in text:
        code = ord(ch)
        if code > 127:
            raise InternalInconsistencyError(
                f"Character {ch!r} is outside 7-bit ASCII",
                text=text,
                symbology=Symbology.CODE39EXT,
            )
        out.append(CODE39_EXTENDED[code])
    return "".join(out)


def encode_code39ext(text: Optional[str], no_checksum: bool = False) -> EncodedSymbol:
    """Encode full ASCII through the extended substitution table."""
    text = require_text(text, Symbology.CODE39EXT)
    return _encode(
        to_extended(text), text, Symbology.CODE39EXT, "code 39 extended", no_checksum
    )
