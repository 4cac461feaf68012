"""
Raster preview of an EncodedSymbol with Pillow.

Layout follows the PostScript back-end: the scale factor comes from the
requested width (or one point per module), the default height is 80 points,
an area too small for the bars is enlarged, and bars are shortened to leave
room for the text below them or, in ``+`` mode, above them. One point maps to
``dpi / 72`` pixels.

Example:
    >>> img = render_image(encode(BarcodeRequest("400638133393")))
    >>> img.mode
    'L'
"""

from __future__ import annotations

from dataclasses import dataclass
from io import BytesIO
from typing import Dict, Optional, Tuple, Union

from PIL import Image, ImageDraw, ImageFont
from PIL.ImageFont import FreeTypeFont
from PIL.ImageFont import ImageFont as PILImageFont

from barcodegen import get_logger
from barcodegen.config import DEFAULT_CONFIG, BarcodeConfig
from barcodegen.enums import TextPlacement
from barcodegen.exceptions import BarcodeError, RenderError
from barcodegen.pattern import EncodedSymbol

logger = get_logger(__name__)

__all__ = ["ResolvedGeometry", "resolve_geometry", "render_image", "render_png"]

# Line width reduction of each bar, in points, to compensate ink spread.
SHRINK_AMOUNT = 0.15

_WHITE = 255
_BLACK = 0

Font = Union[FreeTypeFont, PILImageFont]


@dataclass(frozen=True)
class ResolvedGeometry:
    """Geometry with every default filled in; lengths in points."""

    width: int
    height: int
    margin: int
    xoff: int
    yoff: int
    scale: float
    bar_length: int

    @property
    def page_size(self) -> Tuple[int, int]:
        return self.width + 2 * self.margin, self.height + 2 * self.margin


def resolve_geometry(
    symbol: EncodedSymbol,
    show_text: bool = True,
    config: BarcodeConfig = DEFAULT_CONFIG,
) -> ResolvedGeometry:
    """
    Fill in width, height and scale the way the PostScript back-end does.

    Example:
        >>> g = resolve_geometry(encode(BarcodeRequest("1234", "128c")))
        >>> g.scale, g.width
        (1.0, 57)
    """
    geometry = symbol.geometry
    bar_length = symbol.bar_length
    width, height = geometry.width, geometry.height
    xoff, yoff = geometry.xoff, geometry.yoff
    margin = geometry.margin if geometry.margin is not None else config.margin

    scale = geometry.scale
    if not scale:
        if not width:
            width = bar_length
        scale = width / bar_length

    if not width:
        width = int(bar_length * scale + 1)

    # too narrow for the bars: enlarge and center, never past the left edge
    if width < bar_length * scale:
        enlarged = int(bar_length * scale + 1)
        xoff -= (enlarged - width) // 2
        width = enlarged
        if xoff < 0:
            width += -xoff
            xoff = 0

    if not height:
        height = int(config.height * scale)

    minimum = 20 + 20 * show_text
    if height < minimum * scale:
        enlarged = int(minimum * scale)
        yoff -= enlarged // 2
        height = enlarged
        if yoff < 0:
            height += -yoff
            yoff = 0

    return ResolvedGeometry(
        width=width,
        height=height,
        margin=margin,
        xoff=xoff,
        yoff=yoff,
        scale=scale,
        bar_length=bar_length,
    )


def _load_font(size: float, font_path: Optional[str]) -> Font:
    pixels = max(1, int(round(size)))
    if font_path:
        try:
            return ImageFont.truetype(font_path, pixels)
        except OSError as e:
            logger.warning("Failed to load font (%r): %r", font_path, e)
    return ImageFont.load_default(size=pixels)


def render_image(
    symbol: EncodedSymbol,
    *,
    show_text: Optional[bool] = None,
    config: BarcodeConfig = DEFAULT_CONFIG,
    font_path: Optional[str] = None,
) -> Image.Image:
    """
    Draw the symbol on a white grayscale image.

    Args:
        symbol: Encoded symbol with optional geometry hints.
        show_text: Print the annotations; defaults to ``config.show_text``.
        config: Margin, height and dpi defaults.
        font_path: TrueType font for the annotations; Pillow's default font
            otherwise.

    Raises:
        RenderError: If Pillow cannot build the image.
    """
    if show_text is None:
        show_text = config.show_text
    try:
        return _draw(symbol, show_text, config, font_path)
    except BarcodeError:
        raise
    except Exception as e:
        raise RenderError(
            f"Preview rendering failed for {symbol.symbology_name}",
            text=symbol.text,
            symbology=symbol.symbology,
        ) from e


def _draw(
    symbol: EncodedSymbol,
    show_text: bool,
    config: BarcodeConfig,
    font_path: Optional[str],
) -> Image.Image:
    geometry = resolve_geometry(symbol, show_text, config)
    ppp = config.pixels_per_point
    scale = geometry.scale
    margin = geometry.margin
    page_w, page_h = geometry.page_size

    img = Image.new("L", (max(1, round(page_w * ppp)), max(1, round(page_h * ppp))), _WHITE)
    draw = ImageDraw.Draw(img)

    def to_px(y_from_bottom: float) -> int:
        return round((page_h - y_from_bottom) * ppp)

    xpos = margin + symbol.leading_space * scale
    for element in symbol.elements:
        advance = element.width * scale
        if element.is_bar:
            y0 = float(margin)
            yr = float(geometry.height)
            if show_text:
                if element.placement is TextPlacement.BELOW:
                    lift = (5 if element.low else 10) * scale
                    y0 += lift
                    yr -= lift
                else:
                    y0 += (0 if element.low else 10) * scale
                    yr -= (10 if element.low else 20) * scale
            half_shrink = SHRINK_AMOUNT / 2
            left = round((xpos + half_shrink) * ppp)
            right = max(left + 1, round((xpos + advance - half_shrink) * ppp))
            top, bottom = to_px(y0 + yr), to_px(y0)
            if bottom > top:
                draw.rectangle((left, top, right - 1, bottom - 1), fill=_BLACK)
        xpos += advance

    if show_text:
        fonts: Dict[float, Font] = {}
        for annotation in symbol.text_annotations:
            font = fonts.get(annotation.size)
            if font is None:
                size = annotation.size * config.font_scale * scale * ppp
                font = _load_font(size, font_path)
                fonts[annotation.size] = font
            if annotation.placement is TextPlacement.BELOW:
                baseline = float(margin)
            else:
                baseline = margin + geometry.height - 8 * scale
            bbox = font.getbbox(annotation.char)
            x = round((annotation.x * scale + margin) * ppp)
            draw.text((x, to_px(baseline) - bbox[3]), annotation.char, font=font, fill=_BLACK)

    logger.debug(
        "Rendered %s preview %dx%d px (scale %.2f)",
        symbol.symbology_name,
        img.width,
        img.height,
        scale,
    )
    return img


def render_png(
    symbol: EncodedSymbol,
    *,
    show_text: Optional[bool] = None,
    config: BarcodeConfig = DEFAULT_CONFIG,
    font_path: Optional[str] = None,
) -> bytes:
    """Render the preview and return it as PNG bytes."""
    img = render_image(symbol, show_text=show_text, config=config, font_path=font_path)
    buf = BytesIO()
    try:
        img.save(buf, format="PNG", dpi=(config.dpi, config.dpi))
    except OSError as e:
        raise RenderError(
            "PNG encoding failed", text=symbol.text, symbology=symbol.symbology
        ) from e
    return buf.getvalue()
