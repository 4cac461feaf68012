"""
Intermediate representation handed to renderers, and its wire grammar.

Pattern string
    The first character (``0``-``9``) is extra space reserved left of the
    bars (EAN-13 prints its leading digit there). The rest alternate
    bar, space, bar, ... Each is a width ``1``-``9``, or ``a``-``i`` for the
    same width drawn lower than the others (guard bars). Upper-case letters
    are accepted as synonyms. A ``+`` or ``-`` switches text placement to
    above/below the bars for what follows and takes no bar/space slot.

Text info string
    Space-separated ``x:size:char`` tokens; a standalone ``+`` or ``-`` token
    switches placement, mirroring the pattern convention.

Example:
    >>> parse_pattern("9a1a")
    (9, (PatternElement(width=1, is_bar=True, low=True, ...), ...))
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Pattern, Tuple, Union

from barcodegen.enums import DEFAULT_TEXT_PLACEMENT, Symbology, TextPlacement
from barcodegen.exceptions import PatternSyntaxError

__all__ = [
    "DEFAULT_MARGIN",
    "PatternElement",
    "TextAnnotation",
    "Geometry",
    "EncodedSymbol",
    "parse_pattern",
    "pattern_width",
    "chunk_width",
    "parse_text_info",
    "format_text_info",
    "lower_width",
]

DEFAULT_MARGIN = 10

_TEXT_TOKEN: Pattern[str] = re.compile(
    r"(?P<mode>[+-])(?= |$)"
    r"|(?P<x>-?\d+(?:\.\d+)?):(?P<size>\d+(?:\.\d+)?):(?P<char>.)",
    re.DOTALL,
)


def _format_number(value: float) -> str:
    """Plain decimal without exponent: 94 -> '94', 16.5 -> '16.5'."""
    if float(value).is_integer():
        return str(int(value))
    return f"{value:f}".rstrip("0").rstrip(".")


@dataclass(frozen=True)
class PatternElement:
    """One bar or space of the pattern."""

    width: int
    is_bar: bool
    low: bool = False
    placement: TextPlacement = DEFAULT_TEXT_PLACEMENT


@dataclass(frozen=True)
class TextAnnotation:
    """A human readable character and where to print it (x in module units)."""

    x: float
    size: float
    char: str
    placement: TextPlacement = DEFAULT_TEXT_PLACEMENT

    def to_token(self) -> str:
        return f"{_format_number(self.x)}:{_format_number(self.size)}:{self.char}"


@dataclass(frozen=True)
class Geometry:
    """
    Placement hints for the renderer. Zero means "compute a default".

    Attributes:
        width: Requested overall width in points.
        height: Requested overall height in points.
        margin: White margin around the symbol; None takes the
            renderer's configured margin.
        xoff: Horizontal offset on the page.
        yoff: Vertical offset on the page.
        scale: Scale factor; 0 derives it from ``width``.
    """

    width: int = 0
    height: int = 0
    margin: Optional[int] = None
    xoff: int = 0
    yoff: int = 0
    scale: float = 0.0

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError("width and height must be >= 0")
        if self.margin is not None and self.margin < 0:
            raise ValueError("margin must be >= 0")
        if self.scale < 0:
            raise ValueError("scale must be >= 0")


def lower_width(width_char: str) -> str:
    """Turn a normal width digit into its low variant ('3' -> 'c')."""
    if width_char in "123456789":
        return chr(ord("a") + int(width_char) - 1)
    return width_char


def _decode_width(ch: str, position: int, pattern: str) -> Tuple[int, bool]:
    if "1" <= ch <= "9":
        return int(ch), False
    if "a" <= ch <= "i":
        return ord(ch) - ord("a") + 1, True
    if "A" <= ch <= "I":
        return ord(ch) - ord("A") + 1, True
    raise PatternSyntaxError(
        f"Invalid width character {ch!r} at position {position} in {pattern!r}"
    )


def parse_pattern(pattern: str) -> Tuple[int, Tuple[PatternElement, ...]]:
    """
    Split a pattern string into its leading space and bar/space elements.

    Raises:
        PatternSyntaxError: On an empty string, a bad leading character or
            an unknown width character.
    """
    if not pattern or not ("0" <= pattern[0] <= "9"):
        raise PatternSyntaxError(f"Pattern must start with a digit: {pattern!r}")
    leading = int(pattern[0])
    placement = DEFAULT_TEXT_PLACEMENT
    elements: List[PatternElement] = []
    for position, ch in enumerate(pattern[1:], start=1):
        if ch in "+-":
            placement = TextPlacement(ch)
            continue
        width, low = _decode_width(ch, position, pattern)
        elements.append(
            PatternElement(
                width=width,
                is_bar=len(elements) % 2 == 0,
                low=low,
                placement=placement,
            )
        )
    return leading, tuple(elements)


def pattern_width(pattern: str) -> int:
    """Total width in modules, leading space included."""
    leading, elements = parse_pattern(pattern)
    return leading + sum(element.width for element in elements)


def chunk_width(chunk: str) -> int:
    """Width of a pattern fragment without a leading-space character."""
    total = 0
    for position, ch in enumerate(chunk):
        if ch in "+-":
            continue
        total += _decode_width(ch, position, chunk)[0]
    return total


def parse_text_info(text_info: str) -> Tuple[TextAnnotation, ...]:
    """
    Parse a text info string into annotations.

    The character of a token may be a space, ``+`` or ``-``; only standalone
    ``+``/``-`` words switch placement.
    """
    placement = DEFAULT_TEXT_PLACEMENT
    annotations: List[TextAnnotation] = []
    position = 0
    length = len(text_info)
    while position < length:
        if text_info[position] == " ":
            position += 1
            continue
        match = _TEXT_TOKEN.match(text_info, position)
        if match is None:
            raise PatternSyntaxError(
                f"Invalid text token at position {position} in {text_info!r}"
            )
        if match.group("mode"):
            placement = TextPlacement(match.group("mode"))
        else:
            annotations.append(
                TextAnnotation(
                    x=float(match.group("x")),
                    size=float(match.group("size")),
                    char=match.group("char"),
                    placement=placement,
                )
            )
        position = match.end()
    return tuple(annotations)


def format_text_info(annotations: Iterable[TextAnnotation]) -> str:
    """Serialize annotations, inserting a mode token whenever placement changes."""
    tokens: List[str] = []
    placement = DEFAULT_TEXT_PLACEMENT
    for annotation in annotations:
        if annotation.placement is not placement:
            placement = annotation.placement
            tokens.append(placement.value)
        tokens.append(annotation.to_token())
    return " ".join(tokens)


@dataclass(frozen=True)
class EncodedSymbol:
    """
    Result of one encode call: the pattern, the text annotations and the
    resolved symbology name. Built fresh per call and never mutated.
    """

    text: str
    symbology: Symbology
    symbology_name: str
    pattern: str
    text_annotations: Tuple[TextAnnotation, ...] = ()
    geometry: Geometry = field(default_factory=Geometry)

    def __post_init__(self) -> None:
        # Fails early on a malformed pattern so no broken symbol escapes.
        parse_pattern(self.pattern)

    @property
    def elements(self) -> Tuple[PatternElement, ...]:
        return parse_pattern(self.pattern)[1]

    @property
    def leading_space(self) -> int:
        return int(self.pattern[0])

    @property
    def bar_length(self) -> int:
        return pattern_width(self.pattern)

    @property
    def text_info(self) -> str:
        return format_text_info(self.text_annotations)

    @property
    def widths(self) -> str:
        """Plain digit widths, the way PostScript comments print them."""
        return "".join(str(element.width) for element in self.elements)

    def with_geometry(self, geometry: Optional[Geometry]) -> "EncodedSymbol":
        if geometry is None or geometry == self.geometry:
            return self
        return EncodedSymbol(
            text=self.text,
            symbology=self.symbology,
            symbology_name=self.symbology_name,
            pattern=self.pattern,
            text_annotations=self.text_annotations,
            geometry=geometry,
        )

    def to_dict(self) -> dict[str, Union[str, int, float, None]]:
        return {
            "text": self.text,
            "symbology": self.symbology.value,
            "symbology_name": self.symbology_name,
            "pattern": self.pattern,
            "text_info": self.text_info,
            "width": self.geometry.width,
            "height": self.geometry.height,
            "margin": self.geometry.margin,
            "xoff": self.geometry.xoff,
            "yoff": self.geometry.yoff,
            "scale": self.geometry.scale,
        }

    def __str__(self) -> str:
        shown = self.text[:16] + ("..." if len(self.text) > 16 else "")
        return f"<EncodedSymbol {self.symbology_name} text={shown!r}>"
