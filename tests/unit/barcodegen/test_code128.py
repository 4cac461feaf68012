"""
Модульные тесты для barcodegen/symbologies/code128.py
"""

import pytest

from barcodegen.enums import Symbology
from barcodegen.exceptions import InternalInconsistencyError
from barcodegen.pattern import parse_text_info
from barcodegen.symbologies.code128 import encode_code128c, verify_code128c


class TestVerifyCode128C:
    @pytest.mark.parametrize("text", ["12", "1234", "00"])
    def test_accepts(self, text: str) -> None:
        assert verify_code128c(text)

    @pytest.mark.parametrize("text", ["", "123", "12A4", "12 4"])
    def test_rejects(self, text: str) -> None:
        assert not verify_code128c(text)


class TestEncodeCode128C:
    def test_pattern(self) -> None:
        symbol = encode_code128c("1234")
        # START-C, 12, 34, check (105 + 12 + 68) % 103 = 82, STOP
        assert symbol.pattern == "0" "b1a2c2" "112232" "131123" "121241" "b3c1a1b"
        assert symbol.symbology is Symbology.CODE128C
        assert symbol.symbology_name == "code 128-C"
        assert symbol.bar_length == 57

    def test_text_positions(self) -> None:
        assert encode_code128c("1234").text_info == "11:9:1 16.5:9:2 22:9:3 27.5:9:4"

    def test_checksum_always_emitted(self) -> None:
        assert encode_code128c("1234", no_checksum=True) == encode_code128c("1234")

    def test_odd_length_reaching_encoder(self) -> None:
        with pytest.raises(InternalInconsistencyError):
            encode_code128c("123")

    def test_elements_alternate(self) -> None:
        elements = encode_code128c("998877").elements
        assert [e.is_bar for e in elements] == [i % 2 == 0 for i in range(len(elements))]
        assert elements[-1].is_bar

    def test_long_input_text_info_round_trips(self) -> None:
        symbol = encode_code128c("12" * 10000)
        last = symbol.text_annotations[-1]
        assert last.x == 110005.5
        assert symbol.text_info.endswith(" 110005.5:9:2")
        assert parse_text_info(symbol.text_info) == symbol.text_annotations
