"""
EAN, UPC and ISBN encoding.

The ten digits have a single width encoding; the different UPC/EAN
"alphabets" only differ by mirroring (reversing the four widths). EAN-13
encodes its extra leading digit by mirroring part of the left half, UPC-E and
the add-on codes encode their check value the same way but with the inverse
sense ("mirror unless flagged").

Supported forms:
    EAN:  12 digits (EAN-13), 7 digits (EAN-8), 12 digits + " " + 2/5 digits
    UPC:  11 digits (UPC-A), 6 digits (UPC-E), 11 digits + " " + 2/5 digits
    ISBN: 9 digits, hyphens allowed, optional check char, optional " " + 5 digits

The check digit is always computed here; a check character given in an ISBN
is ignored and recomputed.
"""

from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

from barcodegen.checksum import (
    addon2_parity_index,
    digit_values,
    ean_addon5_checksum,
    ean_checksum,
    upce_to_upca,
)
from barcodegen.enums import Symbology, TextPlacement
from barcodegen.exceptions import InternalInconsistencyError
from barcodegen.pattern import EncodedSymbol, TextAnnotation, chunk_width, lower_width
from barcodegen.symbologies._common import DIGITS, is_digits, require_text
from barcodegen.tables import (
    ADDON2_MIRROR,
    ADDON_GUARD_HEAD,
    ADDON_GUARD_SEPARATOR,
    EAN_DIGIT_WIDTH,
    EAN_DIGITS,
    EAN_GUARD_END,
    EAN_GUARD_MIDDLE,
    EAN_GUARD_START,
    EAN_LEADING_SPACE,
    EAN_MIRROR,
    UPC_MIRROR,
    UPCE_GUARD_END,
    UPCE_GUARD_START,
)

__all__ = [
    "verify_ean",
    "verify_upc",
    "verify_isbn",
    "encode_ean",
    "encode_upc",
    "encode_isbn",
]

_FONT_SIZE = 12
_SMALL_FONT_SIZE = 10  # UPC-A digits printed outside the guards


# =============================================================================
# VALIDATION
# =============================================================================


def _verify_with_addon(text: str, plain_lengths: Tuple[int, ...], body: int) -> bool:
    length = len(text)
    if length in plain_lengths:
        return is_digits(text)
    if length in (body + 3, body + 6):
        return (
            text[body] == " "
            and is_digits(text[:body])
            and is_digits(text[body + 1 :])
        )
    return False


def verify_ean(text: str) -> bool:
    """12 digits (EAN-13) or 7 (EAN-8); EAN-13 may carry a 2 or 5 digit add-on."""
    return _verify_with_addon(text, (12, 7), 12)


def verify_upc(text: str) -> bool:
    """11 digits (UPC-A) or 6 (UPC-E); UPC-A may carry a 2 or 5 digit add-on."""
    return _verify_with_addon(text, (11, 6), 11)


def verify_isbn(text: str) -> bool:
    """
    Accept an ISBN-10 body: 9 digits with optional hyphens, an optional check
    character (digit or X) and an optional " " + 5 digit price add-on.
    """
    count = 0
    i = 0
    while i < len(text):
        ch = text[i]
        i += 1
        if ch == "-":
            continue
        if ch not in DIGITS:
            return False
        count += 1
        if count == 9:
            break
    if count != 9:
        return False

    rest = text[i:]
    if rest.startswith("-"):
        rest = rest[1:]
    if rest and (rest[0] in DIGITS or rest[0] in "xX"):
        rest = rest[1:]
    if not rest:
        return True
    return len(rest) == 6 and rest[0] == " " and is_digits(rest[1:])


# =============================================================================
# ENCODING
# =============================================================================


def _mirrored(widths: str) -> str:
    return widths[::-1]


def _lowered(widths: str, positions: Sequence[int]) -> str:
    chars = list(widths)
    for position in positions:
        chars[position] = lower_width(chars[position])
    return "".join(chars)


def _split_addon(text: str) -> Tuple[str, Optional[str]]:
    body, sep, addon = text.partition(" ")
    if not sep:
        return body, None
    if len(addon) not in (2, 5):
        raise InternalInconsistencyError(
            f"Add-on must have 2 or 5 digits, got {addon!r}", text=text
        )
    return body, addon


def _encode_addon(
    addon: str, xpos: int, chunks: List[str], annotations: List[TextAnnotation]
) -> int:
    """Append an add-2/add-5 symbol printed to the right, text above the bars."""
    if len(addon) == 5:
        mirror = UPC_MIRROR[ean_addon5_checksum(addon)][1:]
    else:
        mirror = ADDON2_MIRROR[addon2_parity_index(addon)]

    chunks.append(TextPlacement.ABOVE.value)
    for i, value in enumerate(digit_values(addon)):
        guard = ADDON_GUARD_HEAD if i == 0 else ADDON_GUARD_SEPARATOR
        chunks.append(guard)
        xpos += chunk_width(guard)
        widths = EAN_DIGITS[value]
        if mirror[i] != "1":  # inverse sense of EAN-13
            widths = _mirrored(widths)
        chunks.append(widths)
        annotations.append(
            TextAnnotation(xpos, _FONT_SIZE, addon[i], TextPlacement.ABOVE)
        )
        xpos += EAN_DIGIT_WIDTH
    return xpos


def _encode_ean13(
    body: str, addon: Optional[str], upca: bool
) -> Tuple[str, List[TextAnnotation]]:
    """Shared EAN-13 / UPC-A / ISBN engine; ``body`` has 12 digits."""
    digits = body + str(ean_checksum(body))
    values = digit_values(digits)
    annotations: List[TextAnnotation] = []

    head = EAN_LEADING_SPACE + EAN_GUARD_START[1:]
    chunks = [head]
    xpos = chunk_width(head)
    if not upca:
        annotations.append(TextAnnotation(0, _FONT_SIZE, digits[0]))
    mirror = EAN_MIRROR[values[0]]

    for i in range(1, 7):
        widths = EAN_DIGITS[values[i]]
        if mirror[i - 1] == "1":
            widths = _mirrored(widths)
        if upca and i == 1:
            # first UPC-A digit sits left of the bars, its bars run long
            annotations.append(TextAnnotation(0, _SMALL_FONT_SIZE, digits[i]))
            widths = _lowered(widths, (1, 3))
        else:
            annotations.append(TextAnnotation(xpos, _FONT_SIZE, digits[i]))
        chunks.append(widths)
        xpos += EAN_DIGIT_WIDTH

    chunks.append(EAN_GUARD_MIDDLE)
    xpos += chunk_width(EAN_GUARD_MIDDLE)

    for i in range(7, 13):
        widths = EAN_DIGITS[values[i]]
        if upca and i == 12:
            annotations.append(
                TextAnnotation(xpos + 13, _SMALL_FONT_SIZE, digits[i])
            )
            widths = _lowered(widths, (0, 2))
        else:
            annotations.append(TextAnnotation(xpos, _FONT_SIZE, digits[i]))
        chunks.append(widths)
        xpos += EAN_DIGIT_WIDTH

    chunks.append(EAN_GUARD_END)
    xpos += chunk_width(EAN_GUARD_END)

    if addon:
        _encode_addon(addon, xpos, chunks, annotations)
    return "".join(chunks), annotations


def _encode_ean8(body: str) -> Tuple[str, List[TextAnnotation]]:
    digits = body + str(ean_checksum(body))
    values = digit_values(digits)
    annotations: List[TextAnnotation] = []
    chunks = [EAN_GUARD_START]
    xpos = chunk_width(EAN_GUARD_START[1:])

    for i in range(8):
        if i == 4:
            chunks.append(EAN_GUARD_MIDDLE)
            xpos += chunk_width(EAN_GUARD_MIDDLE)
        chunks.append(EAN_DIGITS[values[i]])
        annotations.append(TextAnnotation(xpos, _FONT_SIZE, digits[i]))
        xpos += EAN_DIGIT_WIDTH

    chunks.append(EAN_GUARD_END)
    return "".join(chunks), annotations


def _encode_upce(body: str) -> Tuple[str, List[TextAnnotation]]:
    # The check digit is not printed: it only selects the parity pattern.
    mirror = UPC_MIRROR[ean_checksum(upce_to_upca(body))]
    annotations: List[TextAnnotation] = []
    chunks = [UPCE_GUARD_START]
    xpos = chunk_width(UPCE_GUARD_START[1:])

    for i, value in enumerate(digit_values(body)):
        widths = EAN_DIGITS[value]
        if mirror[i] != "1":
            widths = _mirrored(widths)
        chunks.append(widths)
        annotations.append(TextAnnotation(xpos, _FONT_SIZE, body[i]))
        xpos += EAN_DIGIT_WIDTH

    chunks.append(UPCE_GUARD_END)
    return "".join(chunks), annotations


def _build(
    text: str,
    symbology: Symbology,
    name: str,
    encoded: Tuple[str, List[TextAnnotation]],
) -> EncodedSymbol:
    pattern, annotations = encoded
    return EncodedSymbol(
        text=text,
        symbology=symbology,
        symbology_name=name,
        pattern=pattern,
        text_annotations=tuple(annotations),
    )


def encode_ean(text: Optional[str], no_checksum: bool = False) -> EncodedSymbol:
    """
    Encode EAN-13 (12 digits, optional add-on) or EAN-8 (7 digits).

    The check digit is mandatory for EAN, so ``no_checksum`` is ignored.

    Example:
        >>> encode_ean("400638133393").text_annotations[-1].char
        '1'
    """
    text = require_text(text, Symbology.EAN)
    body, addon = _split_addon(text)
    if len(body) == 12:
        return _build(text, Symbology.EAN, "EAN-13", _encode_ean13(body, addon, False))
    if len(body) == 7 and addon is None:
        return _build(text, Symbology.EAN, "EAN-8", _encode_ean8(body))
    raise InternalInconsistencyError(
        f"Cannot pick an EAN variant for {len(body)} digits",
        text=text,
        symbology=Symbology.EAN,
    )


def encode_upc(text: Optional[str], no_checksum: bool = False) -> EncodedSymbol:
    """Encode UPC-A (11 digits, optional add-on) or UPC-E (6 digits)."""
    text = require_text(text, Symbology.UPC)
    body, addon = _split_addon(text)
    if len(body) == 11:
        return _build(
            text, Symbology.UPC, "UPC-A", _encode_ean13("0" + body, addon, True)
        )
    if len(body) == 6 and addon is None:
        return _build(text, Symbology.UPC, "UPC-E", _encode_upce(body))
    raise InternalInconsistencyError(
        f"Cannot pick a UPC variant for {len(body)} digits",
        text=text,
        symbology=Symbology.UPC,
    )


def normalize_isbn(text: str) -> str:
    """
    Rewrite an ISBN as the 12 digit EAN-13 body plus any add-on.

    Example:
        >>> normalize_isbn("0-306-40615")
        '978030640615'
    """
    body, sep, addon = text.partition(" ")
    digits = "".join(ch for ch in body if ch in DIGITS)[:9]
    return "978" + digits + sep + addon


def encode_isbn(text: Optional[str], no_checksum: bool = False) -> EncodedSymbol:
    """Encode an ISBN as EAN-13 with the 978 prefix, check character recomputed."""
    text = require_text(text, Symbology.ISBN)
    body, addon = _split_addon(normalize_isbn(text))
    if len(body) != 12:
        raise InternalInconsistencyError(
            "ISBN must contain 9 digits", text=text, symbology=Symbology.ISBN
        )
    return _build(text, Symbology.ISBN, "ISBN", _encode_ean13(body, addon, False))
