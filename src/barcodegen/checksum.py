"""
Checksum algorithms for the supported symbologies.

All functions are pure and take digit strings (or Code 39 text) that were
already validated; a stray character surfaces as ``InternalInconsistencyError``.
"""

from __future__ import annotations

from typing import Final, Tuple

from barcodegen.exceptions import InternalInconsistencyError
from barcodegen.tables import CODE128_START_C, CODE39_CHECKBET

__all__ = [
    "digit_values",
    "ean_checksum",
    "ean_addon5_checksum",
    "addon2_parity_index",
    "upce_to_upca",
    "code39_checksum",
    "code128c_checksum",
    "i25_checksum",
]

_DIGITS: Final[str] = "0123456789"


def digit_values(digits: str) -> Tuple[int, ...]:
    """Convert an ASCII digit string to integers, rejecting anything else."""
    values = []
    for ch in digits:
        index = _DIGITS.find(ch)
        if index < 0:
            raise InternalInconsistencyError(
                f"Non-digit character {ch!r} reached the encoder", text=digits
            )
        values.append(index)
    return tuple(values)


def _weighted_sums(digits: str) -> Tuple[int, int]:
    """Return (even, odd) sums, counting positions from the right; rightmost is even."""
    values = digit_values(digits)
    even = sum(values[-1::-2])
    odd = sum(values[-2::-2])
    return even, odd


def ean_checksum(digits: str) -> int:
    """
    Standard EAN/UPC check digit.

    Example:
        >>> ean_checksum("400638133393")
        1
    """
    even, odd = _weighted_sums(digits)
    return (10 - (3 * even + odd) % 10) % 10


def ean_addon5_checksum(digits: str) -> int:
    """Parity selector for the five digit add-on: (3*even + 9*odd) mod 10."""
    even, odd = _weighted_sums(digits)
    return (3 * even + 9 * odd) % 10


def addon2_parity_index(digits: str) -> int:
    """Parity selector for the two digit add-on: numeric value mod 4."""
    tens, units = digit_values(digits)
    return (tens * 10 + units) % 4


def upce_to_upca(digits: str) -> str:
    """
    Expand a six digit UPC-E payload to the 11 digit UPC-A body (number system 0).

    The last digit selects where the manufacturer code ends and how many
    zeros the product code carries.

    Example:
        >>> upce_to_upca("425261")
        '04210000526'
    """
    d = digits
    digit_values(d)
    if len(d) != 6:
        raise InternalInconsistencyError("UPC-E payload must have 6 digits", text=d)
    last = d[5]
    if last in "012":
        manufacturer, product = d[0:2] + last + "00", "00" + d[2:5]
    elif last == "3":
        manufacturer, product = d[0:3] + "00", "000" + d[3:5]
    elif last == "4":
        manufacturer, product = d[0:4] + "0", "0000" + d[4]
    else:
        manufacturer, product = d[0:5], "0000" + last
    return "0" + manufacturer + product


def code39_checksum(text: str) -> str:
    """
    Code 39 modulo-43 check character.

    Example:
        >>> code39_checksum("CODE 39")
        'R'
    """
    total = 0
    for ch in text:
        index = CODE39_CHECKBET.find(ch)
        if index < 0:
            raise InternalInconsistencyError(
                f"Character {ch!r} has no Code 39 check value", text=text
            )
        total += index
    return CODE39_CHECKBET[total % 43]


def code128c_checksum(pair_values: Tuple[int, ...]) -> int:
    """Start value plus each pair value weighted by its 1-based position, mod 103."""
    total = CODE128_START_C
    for position, value in enumerate(pair_values, start=1):
        total += value * position
    return total % 103


def i25_checksum(digits: str) -> int:
    """
    Interleaved 2 of 5 check digit over an odd-length digit string.

    Positions are counted from the left, 1-based; odd positions weigh 3.
    """
    values = digit_values(digits)
    odd = sum(values[0::2])
    even = sum(values[1::2])
    return (10 - (3 * odd + even) % 10) % 10
