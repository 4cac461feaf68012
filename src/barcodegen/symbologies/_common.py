"""Helpers shared by the symbology modules."""

from __future__ import annotations

from typing import Any, Optional

from barcodegen.exceptions import MissingInputError

DIGITS = "0123456789"


def is_digits(text: str) -> bool:
    """True for a non-empty string of ASCII digits (str.isdigit accepts too much)."""
    return bool(text) and all(ch in DIGITS for ch in text)


def require_text(text: Optional[str], symbology: Any) -> str:
    if text is None:
        raise MissingInputError("No text to encode", symbology=symbology)
    return text
