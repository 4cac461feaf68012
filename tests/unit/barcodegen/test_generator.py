from io import BytesIO
from typing import Any
from unittest.mock import Mock, patch

import pytest
from PIL import Image

from barcodegen.config import BarcodeConfig
from barcodegen.enums import Symbology
from barcodegen.exceptions import (
    BarcodeError,
    InvalidInputError,
    UnsupportedSymbologyError,
)
from barcodegen.generator import BarcodeGenerator, BarcodeOptions


class TestBarcodeGenerator:
    """Test suite for BarcodeGenerator: validation, encoding, preview."""

    @pytest.fixture
    def valid_ean13_generator(self) -> BarcodeGenerator:
        return BarcodeGenerator(Symbology.EAN, "400638133393")

    @pytest.fixture
    def valid_code39_generator(self) -> BarcodeGenerator:
        return BarcodeGenerator(Symbology.CODE39, "ABC123")

    # === Initialization ===
    def test_init_basic(self) -> None:
        gen = BarcodeGenerator(Symbology.EAN, "400638133393")
        assert gen.symbology is Symbology.EAN
        assert gen.data == "400638133393"
        assert gen.options == {}
        assert gen.error is None

    def test_init_alias(self) -> None:
        assert BarcodeGenerator("128c", "1234").symbology is Symbology.CODE128C

    def test_init_auto(self) -> None:
        assert BarcodeGenerator("auto", "1234").symbology is None
        assert BarcodeGenerator(None, "1234").symbology is None

    def test_init_with_options(self) -> None:
        options: BarcodeOptions = {"no_checksum": True, "width": 200}
        gen = BarcodeGenerator(Symbology.CODE39, "TEST", options)
        assert gen.options == {"no_checksum": True, "width": 200}

    # === Validation ===
    def test_validate_success_ean13(self, valid_ean13_generator: BarcodeGenerator) -> None:
        valid_ean13_generator.validate()

    def test_validate_success_code39(self, valid_code39_generator: BarcodeGenerator) -> None:
        valid_code39_generator.validate()

    def test_validate_empty_data(self) -> None:
        gen = BarcodeGenerator(Symbology.EAN, "")
        with pytest.raises(InvalidInputError, match="non-empty"):
            gen.validate()

    @pytest.mark.parametrize(
        "symbology,valid_data,invalid_data",
        [
            (Symbology.EAN, "400638133393", "4006381333931"),
            (Symbology.UPC, "03600029145", "036000291452"),
            (Symbology.ISBN, "0-306-40615-2", "0-306-4061"),
            (Symbology.CODE128C, "1234", "12A4"),
            (Symbology.CODE39, "CODE 39", "Code 39"),
            (Symbology.CODE39EXT, "Code 39", "Cödé"),
            (Symbology.I25, "12345", "12 45"),
        ],
    )
    def test_validate_per_symbology(
        self, symbology: Symbology, valid_data: str, invalid_data: str
    ) -> None:
        BarcodeGenerator(symbology, valid_data).validate()
        with pytest.raises(InvalidInputError) as exc_info:
            BarcodeGenerator(symbology, invalid_data).validate()
        assert exc_info.value.symbology is symbology

    def test_validate_autodetect_rejects(self) -> None:
        with pytest.raises(InvalidInputError, match="No symbology"):
            BarcodeGenerator(None, "héllo").validate()

    # === Encoding ===
    def test_encode(self, valid_ean13_generator: BarcodeGenerator) -> None:
        symbol = valid_ean13_generator.encode()
        assert symbol.symbology_name == "EAN-13"
        assert symbol.bar_length == 104

    def test_encode_passes_geometry(self) -> None:
        gen = BarcodeGenerator(Symbology.I25, "1234", {"width": 300, "margin": 4})
        symbol = gen.encode()
        assert symbol.geometry.width == 300
        assert symbol.geometry.margin == 4

    def test_encode_no_checksum(self) -> None:
        with_check = BarcodeGenerator(Symbology.CODE39, "ABC").encode()
        without = BarcodeGenerator(Symbology.CODE39, "ABC", {"no_checksum": True}).encode()
        assert with_check.bar_length > without.bar_length

    def test_try_encode_records_error(self) -> None:
        gen = BarcodeGenerator(Symbology.EAN, "12AB")
        assert gen.try_encode() is None
        assert gen.error

    def test_try_encode_clears_error(self) -> None:
        gen = BarcodeGenerator(Symbology.EAN, "12AB")
        gen.try_encode()
        gen.data = "400638133393"
        assert gen.try_encode() is not None
        assert gen.error is None

    # === Rendering ===
    def test_render_image_success(self) -> None:
        img = BarcodeGenerator(Symbology.CODE128C, "1234").render_image()
        assert isinstance(img, Image.Image)
        assert img.size == (77, 100)

    def test_render_image_dpi(self) -> None:
        img = BarcodeGenerator(Symbology.CODE128C, "1234").render_image({"dpi": 144})
        assert img.size == (154, 200)

    def test_render_image_uses_config(self) -> None:
        gen = BarcodeGenerator(Symbology.CODE128C, "1234", config=BarcodeConfig(margin=0))
        assert gen.render_image().size == (57, 80)

    def test_render_image_invalid_data(self) -> None:
        with pytest.raises(BarcodeError):
            BarcodeGenerator(Symbology.UPC, "12345670").render_image()

    @patch.object(BarcodeGenerator, "render_image")
    def test_render_image_mock(self, mock_render_image: Mock) -> None:
        mock_render_image.return_value = Image.new("L", (10, 10), 255)
        img = BarcodeGenerator(Symbology.EAN, "400638133393").render_image()
        assert img.size == (10, 10)
        mock_render_image.assert_called_once()

    def test_supported_types(self) -> None:
        assert BarcodeGenerator.supported_types() == set(Symbology)

    def test_name_map(self) -> None:
        name_map = BarcodeGenerator.name_map()
        assert name_map[Symbology.I25] == "interleaved 2 of 5"
        assert name_map[Symbology.ISBN] == "ISBN"


def test_render_bytes_is_correct_type() -> None:
    gen = BarcodeGenerator(Symbology.CODE39, "DATA")
    data_bytes = gen.render_bytes()
    assert isinstance(data_bytes, bytes)
    assert data_bytes[:4] == b"\x89PNG"  # PNG magic bytes
    with Image.open(BytesIO(data_bytes)) as img:
        assert img.mode == "L"


def test_supported_types_and_name_map_are_consistent() -> None:
    types = BarcodeGenerator.supported_types()
    name_map = BarcodeGenerator.name_map()
    for t in types:
        assert t in name_map


@pytest.mark.parametrize("invalid_type", [999, 1.5, object()])
def test_init_with_invalid_type_fails(invalid_type: Any) -> None:
    with pytest.raises(TypeError):
        BarcodeGenerator(invalid_type, "123")


def test_init_with_unknown_name_fails() -> None:
    with pytest.raises(UnsupportedSymbologyError):
        BarcodeGenerator("UNKNOWN", "123")
