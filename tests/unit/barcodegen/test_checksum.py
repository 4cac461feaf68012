"""
Модульные тесты для barcodegen/checksum.py
Контрольные суммы EAN/UPC, добавок, Code 39, Code 128-C и I25.
"""

import random

import pytest

from barcodegen.checksum import (
    addon2_parity_index,
    code39_checksum,
    code128c_checksum,
    digit_values,
    ean_addon5_checksum,
    ean_checksum,
    i25_checksum,
    upce_to_upca,
)
from barcodegen.exceptions import InternalInconsistencyError


class TestDigitValues:
    def test_converts_ascii_digits(self) -> None:
        assert digit_values("0907") == (0, 9, 0, 7)

    @pytest.mark.parametrize("bad", ["12a", " 1", "١٢"])
    def test_rejects_non_ascii_digits(self, bad: str) -> None:
        with pytest.raises(InternalInconsistencyError):
            digit_values(bad)


class TestEanChecksum:
    @pytest.mark.parametrize(
        "body,expected",
        [
            ("400638133393", 1),
            ("978030640615", 7),
            ("003600029145", 2),
            ("1234567", 0),
            ("04210000526", 4),
        ],
    )
    def test_known_values(self, body: str, expected: int) -> None:
        assert ean_checksum(body) == expected

    @pytest.mark.parametrize("seed", range(5))
    def test_weighted_sum_of_full_code_is_multiple_of_ten(self, seed: int) -> None:
        rng = random.Random(seed)
        body = "".join(rng.choice("0123456789") for _ in range(12))
        full = body + str(ean_checksum(body))
        # weights 1,3,1,3,... from the left for 13 digits
        total = sum(int(d) * (3 if i % 2 else 1) for i, d in enumerate(full))
        assert total % 10 == 0

    def test_addon5_parity(self) -> None:
        # 3*(5+9+5) + 9*(1+9) = 147
        assert ean_addon5_checksum("51995") == 7

    @pytest.mark.parametrize("addon,expected", [("12", 0), ("13", 1), ("06", 2), ("99", 3)])
    def test_addon2_parity(self, addon: str, expected: int) -> None:
        assert addon2_parity_index(addon) == expected


class TestUpcE:
    @pytest.mark.parametrize(
        "upce,upca",
        [
            ("425261", "04210000526"),
            ("123450", "01200000345"),
            ("123451", "01210000345"),
            ("123453", "01230000045"),
            ("123454", "01234000005"),
            ("123457", "01234500007"),
        ],
    )
    def test_expansion(self, upce: str, upca: str) -> None:
        assert upce_to_upca(upce) == upca

    def test_wrong_length(self) -> None:
        with pytest.raises(InternalInconsistencyError):
            upce_to_upca("12345")


class TestCode39Checksum:
    def test_code_39(self) -> None:
        assert code39_checksum("CODE 39") == "R"

    def test_wraps_modulo_43(self) -> None:
        # % is 42, 42 + 1 = 43 -> 0
        assert code39_checksum("%1") == "0"

    def test_star_has_no_value(self) -> None:
        with pytest.raises(InternalInconsistencyError):
            code39_checksum("A*B")


class TestCode128Checksum:
    def test_pairs(self) -> None:
        assert code128c_checksum((12, 34)) == 82

    def test_empty_is_start_value(self) -> None:
        assert code128c_checksum(()) == 105 % 103


class TestI25Checksum:
    def test_padded_digits(self) -> None:
        assert i25_checksum("00123456789") == 5

    def test_zero(self) -> None:
        assert i25_checksum("000") == 0
