"""
Модульные тесты для barcodegen/symbologies/ean.py
EAN-13, EAN-8, UPC-A, UPC-E, ISBN и добавки из 2/5 цифр.
"""

import random

import pytest

from barcodegen.enums import Symbology, TextPlacement
from barcodegen.exceptions import InternalInconsistencyError, MissingInputError
from barcodegen.symbologies.ean import (
    encode_ean,
    encode_isbn,
    encode_upc,
    normalize_isbn,
    verify_ean,
    verify_isbn,
    verify_upc,
)


class TestVerify:
    @pytest.mark.parametrize(
        "text", ["400638133393", "1234567", "400638133393 12", "400638133393 51995"]
    )
    def test_ean_accepts(self, text: str) -> None:
        assert verify_ean(text)

    @pytest.mark.parametrize(
        "text",
        [
            "",
            "40063813339",
            "4006381333931",
            "40063813339A",
            "400638133393 1",
            "400638133393 123",
            "400638133393-12",
            "1234567 12",
            "４００６３８１３３３９３",
        ],
    )
    def test_ean_rejects(self, text: str) -> None:
        assert not verify_ean(text)

    @pytest.mark.parametrize("text", ["03600029145", "425261", "03600029145 12"])
    def test_upc_accepts(self, text: str) -> None:
        assert verify_upc(text)

    @pytest.mark.parametrize("text", ["12345670", "0360002914", "425261 12", ""])
    def test_upc_rejects(self, text: str) -> None:
        assert not verify_upc(text)

    @pytest.mark.parametrize(
        "text",
        [
            "0-306-40615",
            "0-306-40615-2",
            "0306406152",
            "030640615X",
            "030640615x",
            "0-306-40615-2 51995",
            "030640615 51995",
        ],
    )
    def test_isbn_accepts(self, text: str) -> None:
        assert verify_isbn(text)

    @pytest.mark.parametrize(
        "text",
        [
            "",
            "03064061",
            "0-306-4061A",
            "0306406152 123",
            "0306406152 5199",
            "0306406152  51995",
            "03064061523",
        ],
    )
    def test_isbn_rejects(self, text: str) -> None:
        assert not verify_isbn(text)


class TestEan13:
    def test_checksum_is_last_annotation(self) -> None:
        symbol = encode_ean("400638133393")
        assert symbol.symbology_name == "EAN-13"
        assert symbol.symbology is Symbology.EAN
        assert "".join(a.char for a in symbol.text_annotations) == "4006381333931"

    def test_pattern(self) -> None:
        symbol = encode_ean("400638133393")
        # leading 4 mirrors digits 2, 5 and 6 of the left half
        assert symbol.pattern == (
            "9a1a"
            "3211" "1123" "1114" "1411" "3121" "1222"
            "1a1a1"
            "1411" "1411" "1411" "3112" "1411" "2221"
            "a1a"
        )
        assert symbol.bar_length == 104

    def test_text_positions(self) -> None:
        symbol = encode_ean("400638133393")
        assert symbol.text_info == (
            "0:12:4 12:12:0 19:12:0 26:12:6 33:12:3 40:12:8 47:12:1 "
            "59:12:3 66:12:3 73:12:3 80:12:9 87:12:3 94:12:1"
        )

    def test_keeps_original_text(self) -> None:
        assert encode_ean("400638133393").text == "400638133393"

    def test_no_checksum_flag_is_ignored(self) -> None:
        assert encode_ean("400638133393", True) == encode_ean("400638133393")

    def test_none_text(self) -> None:
        with pytest.raises(MissingInputError):
            encode_ean(None)

    def test_non_digit_reaching_encoder(self) -> None:
        with pytest.raises(InternalInconsistencyError):
            encode_ean("40063813339X")

    def test_unknown_length_reaching_encoder(self) -> None:
        with pytest.raises(InternalInconsistencyError):
            encode_ean("12345")


class TestAddOn:
    def test_addon2(self) -> None:
        symbol = encode_ean("400638133393 12")
        base = encode_ean("400638133393")
        # 12 % 4 == 0: neither digit mirrored
        assert symbol.pattern == base.pattern + "+" + "9112" + "2221" + "11" + "2122"
        assert symbol.text_info == base.text_info + " + 117:12:1 126:12:2"

    def test_addon5(self) -> None:
        symbol = encode_ean("400638133393 51995")
        base = encode_ean("400638133393")
        # parity 7: second and fourth digits mirrored
        assert symbol.pattern == base.pattern + (
            "+9112" "1231" "11" "1222" "11" "3112" "11" "2113" "11" "1231"
        )
        above = [a for a in symbol.text_annotations if a.placement is TextPlacement.ABOVE]
        assert [a.x for a in above] == [117, 126, 135, 144, 153]
        assert "".join(a.char for a in above) == "51995"
        assert all(a.size == 12 for a in above)

    def test_addon_markers_take_no_bar_slot(self) -> None:
        elements = encode_ean("400638133393 12").elements
        assert len(elements) % 2 == 1
        assert elements[-1].is_bar
        assert elements[-1].placement is TextPlacement.ABOVE

    def test_upc_addon(self) -> None:
        symbol = encode_upc("03600029145 12")
        assert symbol.symbology_name == "UPC-A"
        assert "+" in symbol.pattern


class TestEan8:
    def test_encoding(self) -> None:
        symbol = encode_ean("1234567")
        assert symbol.symbology_name == "EAN-8"
        assert symbol.pattern == (
            "0a1a" "2221" "2122" "1411" "1132" "1a1a1" "1231" "1114" "1312" "3211" "a1a"
        )
        assert symbol.text_info == (
            "3:12:1 10:12:2 17:12:3 24:12:4 36:12:5 43:12:6 50:12:7 57:12:0"
        )
        assert symbol.bar_length == 67


class TestUpcA:
    def test_encoding(self) -> None:
        symbol = encode_upc("03600029145")
        assert symbol.symbology is Symbology.UPC
        assert symbol.symbology_name == "UPC-A"
        assert symbol.pattern == (
            "9a1a"
            "3b1a" "1411" "1114" "3211" "3211" "3211"
            "1a1a1"
            "2122" "3112" "2221" "1132" "1231" "b1b2"
            "a1a"
        )
        assert symbol.text_info == (
            "0:10:0 19:12:3 26:12:6 33:12:0 40:12:0 47:12:0 "
            "59:12:2 66:12:9 73:12:1 80:12:4 87:12:5 107:10:2"
        )

    def test_same_widths_as_zero_padded_ean13(self) -> None:
        assert encode_upc("03600029145").widths == encode_ean("003600029145").widths

    @pytest.mark.parametrize("seed", range(10))
    def test_same_widths_as_zero_padded_ean13_random(self, seed: int) -> None:
        rng = random.Random(seed)
        body = "".join(rng.choice("0123456789") for _ in range(11))
        assert encode_upc(body).widths == encode_ean("0" + body).widths


class TestUpcE:
    def test_encoding(self) -> None:
        symbol = encode_upc("425261")
        assert symbol.symbology_name == "UPC-E"
        # check digit 4 (not printed): digits 1, 3 and 4 mirrored
        assert symbol.pattern == (
            "0a1a" "2311" "2122" "1321" "2212" "1114" "2221" "1a1a1a"
        )
        assert [a.x for a in symbol.text_annotations] == [3, 10, 17, 24, 31, 38]
        assert "".join(a.char for a in symbol.text_annotations) == "425261"


class TestIsbn:
    def test_normalize(self) -> None:
        assert normalize_isbn("0-306-40615-2") == "978030640615"
        assert normalize_isbn("0-306-40615 51995") == "978030640615 51995"

    def test_encoding(self) -> None:
        symbol = encode_isbn("0-306-40615")
        assert symbol.symbology is Symbology.ISBN
        assert symbol.symbology_name == "ISBN"
        assert symbol.text == "0-306-40615"
        assert "".join(a.char for a in symbol.text_annotations) == "9780306406157"

    def test_check_character_is_recomputed(self) -> None:
        assert encode_isbn("0-306-40615-X").pattern == encode_ean("978030640615").pattern

    def test_with_addon(self) -> None:
        symbol = encode_isbn("0306406152 51995")
        assert symbol.pattern == encode_ean("978030640615 51995").pattern
