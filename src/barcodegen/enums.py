"""
barcodegen/enums.py

(Краткое RU: Перечисления символик и режимов размещения текста.)

EN: Domain enums for the encoding engine: the closed set of supported
symbologies, their autodetection priority and text placement modes.
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, Final, Optional, Tuple, Union

from barcodegen.exceptions import UnsupportedSymbologyError


class Symbology(str, Enum):
    EAN = "ean"  # EAN-13, EAN-8 by length
    UPC = "upc"  # UPC-A, UPC-E by length
    ISBN = "isbn"  # EAN-13 with the 978 prefix
    CODE128C = "code128c"  # digit pairs only, A/B subsets are not implemented
    CODE39 = "code39"
    CODE39EXT = "code39ext"  # full ASCII through two-character substitution
    I25 = "i25"

    @classmethod
    def from_name(cls, name: Union["Symbology", str, None]) -> Optional["Symbology"]:
        """
        Resolve a user supplied selector to a symbology.

        ``None``, ``""`` and ``"auto"`` mean autodetection and return None.
        Aliases are matched case-insensitively.

        Raises:
            UnsupportedSymbologyError: for an unknown name.
        """
        if name is None or isinstance(name, Symbology):
            return name
        key = name.strip().lower()
        if key in ("", "auto", "any"):
            return None
        try:
            return _ALIASES[key]
        except KeyError:
            raise UnsupportedSymbologyError(
                f"Unknown symbology '{name}'", symbology=name
            ) from None


class TextPlacement(str, Enum):
    """Where a text annotation is printed relative to the bars."""

    BELOW = "-"
    ABOVE = "+"


_ALIASES: Final[Dict[str, Symbology]] = {
    "ean": Symbology.EAN,
    "ean13": Symbology.EAN,
    "ean-13": Symbology.EAN,
    "ean8": Symbology.EAN,
    "ean-8": Symbology.EAN,
    "upc": Symbology.UPC,
    "upc-a": Symbology.UPC,
    "upca": Symbology.UPC,
    "upc-e": Symbology.UPC,
    "upce": Symbology.UPC,
    "isbn": Symbology.ISBN,
    "128c": Symbology.CODE128C,
    "code128c": Symbology.CODE128C,
    "code128-c": Symbology.CODE128C,
    "39": Symbology.CODE39,
    "code39": Symbology.CODE39,
    "39ext": Symbology.CODE39EXT,
    "code39ext": Symbology.CODE39EXT,
    "i25": Symbology.I25,
    "itf": Symbology.I25,
    "interleaved2of5": Symbology.I25,
}

# First match wins during autodetection, so this order is part of the contract.
DETECTION_ORDER: Final[Tuple[Symbology, ...]] = (
    Symbology.EAN,
    Symbology.UPC,
    Symbology.ISBN,
    Symbology.CODE128C,
    Symbology.CODE39,
    Symbology.CODE39EXT,
    Symbology.I25,
)

DEFAULT_TEXT_PLACEMENT: Final[TextPlacement] = TextPlacement.BELOW


__all__ = [
    "Symbology",
    "TextPlacement",
    "DETECTION_ORDER",
    "DEFAULT_TEXT_PLACEMENT",
]
