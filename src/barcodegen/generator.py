from __future__ import annotations

from typing import Any, Dict, Optional, Set, TypedDict, Union

from PIL import Image

from barcodegen import get_logger
from barcodegen.config import DEFAULT_CONFIG, BarcodeConfig
from barcodegen.encoder import BarcodeRequest, encode
from barcodegen.enums import Symbology
from barcodegen.exceptions import BarcodeError, InvalidInputError
from barcodegen.pattern import EncodedSymbol, Geometry
from barcodegen.preview import render_image, render_png
from barcodegen.registry import SymbologyRegistry

logger = get_logger(__name__)

__all__ = [
    "BarcodeGenerator",
    "BarcodeOptions",
    "BarcodeRenderOptions",
]


class BarcodeRenderOptions(TypedDict, total=False):
    """Типобезопасные опции рендеринга превью."""

    show_text: bool
    font_path: str
    dpi: int


class BarcodeOptions(TypedDict, total=False):
    """
    Типобезопасные опции кодирования. Все поля опциональны (total=False).

    Example:
        >>> options: BarcodeOptions = {"no_checksum": True, "width": 200}
        >>> gen = BarcodeGenerator(Symbology.CODE39, "TEST", options)
    """

    no_checksum: bool  # Не добавлять необязательную контрольную цифру
    width: int  # Ширина области в точках (0 = по длине символа)
    height: int  # Высота области в точках (0 = 80 * масштаб)
    margin: int  # Белое поле вокруг символа
    xoff: int
    yoff: int
    scale: float  # Масштаб; 0 = вычислить из ширины


_GEOMETRY_KEYS = ("width", "height", "margin", "xoff", "yoff", "scale")


class BarcodeGenerator:
    """
    Universal API for 1D barcode encoding and preview.

    Args:
        symbology: Symbology enum, alias string, or None for autodetection
        data: Payload string
        options: Optional encoding options and geometry hints

    Example:
        >>> gen = BarcodeGenerator(Symbology.EAN, "400638133393")
        >>> gen.encode().text_annotations[-1].char
        '1'
    """

    def __init__(
        self,
        symbology: Union[Symbology, str, None],
        data: str,
        options: Optional[BarcodeOptions] = None,
        config: BarcodeConfig = DEFAULT_CONFIG,
    ) -> None:
        if symbology is not None and not isinstance(symbology, (Symbology, str)):
            raise TypeError(
                f"symbology must be Symbology enum or str, got {type(symbology)!r}"
            )
        self.symbology: Optional[Symbology] = Symbology.from_name(symbology)
        self.data = data
        self.options: Dict[str, Any] = dict(options) if options else {}
        self.config = config
        self.error: Optional[str] = None

    def _request(self) -> BarcodeRequest:
        geometry = Geometry(
            **{k: self.options[k] for k in _GEOMETRY_KEYS if k in self.options}
        )
        return BarcodeRequest(
            text=self.data,
            symbology=self.symbology,
            no_checksum=bool(self.options.get("no_checksum", False)),
            geometry=geometry,
        )

    def validate(self) -> None:
        """
        Проверяет входные данные по правилам выбранной символики.

        Raises:
            InvalidInputError: если данные не подходят (или ни одна символика
                не подходит при автоопределении).
        """
        if not isinstance(self.data, str) or not self.data:
            raise InvalidInputError(
                "Barcode data must be non-empty string", symbology=self.symbology
            )
        registry = SymbologyRegistry.get_instance()
        if self.symbology is None:
            if not any(d.verify(self.data) for d in registry.list()):
                raise InvalidInputError(
                    f"No symbology accepts {self.data!r}", text=self.data
                )
            return
        descriptor = registry.get(self.symbology)
        if not descriptor.verify(self.data):
            raise InvalidInputError(
                f"{descriptor.name} cannot encode {self.data!r}",
                text=self.data,
                symbology=self.symbology,
            )

    def encode(self) -> EncodedSymbol:
        """Build the intermediate representation; raises BarcodeError."""
        self.error = None
        return encode(self._request())

    def try_encode(self) -> Optional[EncodedSymbol]:
        """
        Как encode(), но вместо исключения запоминает сообщение в ``self.error``.

        Returns:
            EncodedSymbol или None при ошибке.
        """
        try:
            return self.encode()
        except BarcodeError as e:
            self.error = e.message or type(e).__name__
            logger.warning("Barcode encoding failed: %s", self.error)
            return None

    def _config_for(self, options: Optional[BarcodeRenderOptions]) -> BarcodeConfig:
        if options and "dpi" in options:
            return BarcodeConfig(**{**self.config.to_dict(), "dpi": options["dpi"]})
        return self.config

    def render_image(
        self, options: Optional[BarcodeRenderOptions] = None
    ) -> Image.Image:
        """
        Рендеринг превью штрихкода (grayscale PIL Image).

        Raises:
            BarcodeError: при ошибке данных или рендеринга.
        """
        symbol = self.encode()
        logger.debug(
            "Rendering image for barcode [%s] data=%s",
            symbol.symbology_name,
            self.data,
        )
        opts = options or {}
        return render_image(
            symbol,
            show_text=opts.get("show_text"),
            config=self._config_for(options),
            font_path=opts.get("font_path"),
        )

    def render_bytes(self, options: Optional[BarcodeRenderOptions] = None) -> bytes:
        opts = options or {}
        return render_png(
            self.encode(),
            show_text=opts.get("show_text"),
            config=self._config_for(options),
            font_path=opts.get("font_path"),
        )

    @classmethod
    def supported_types(cls) -> Set[Symbology]:
        return {d.symbology for d in SymbologyRegistry.get_instance().list()}

    @classmethod
    def name_map(cls) -> Dict[Symbology, str]:
        return SymbologyRegistry.get_instance().name_map()
