"""
Width tables for every supported symbology.

Each entry is a string of single-digit widths (``1``-``9``) or low widths
(``a``-``i``), in the same alphabet as the pattern wire string, so encoders
can concatenate entries without conversion. All tables are immutable tuples
shared read-only between concurrent encode calls.

Reference: GNU barcode 0.98 (ean.c, code39.c, code128.c, i25.c)
"""

from __future__ import annotations

from typing import Final, Tuple

# =============================================================================
# EAN / UPC / ISBN
# =============================================================================

# space,bar,space,bar for digits 0-9; a mirrored digit is this string reversed.
# Odd and even parity encodings only differ by mirroring.
EAN_DIGITS: Final[Tuple[str, ...]] = (
    "3211", "2221", "2122", "1411", "1132",
    "1231", "1114", "1312", "1213", "3112",
)

# Indexed by the EAN-13 leading digit, "1" means mirror that left-half digit.
EAN_MIRROR: Final[Tuple[str, ...]] = (
    "------", "--1-11", "--11-1", "--111-", "-1--11",
    "-11--1", "-111--", "-1-1-1", "-1-11-", "-11-1-",
)

# Indexed by a check value; UPC-E and add-5 mirror where this is NOT "1".
UPC_MIRROR: Final[Tuple[str, ...]] = (
    "---111", "--1-11", "--11-1", "--111-", "-1--11",
    "-11--1", "-111--", "-1-1-1", "-1-11-", "-11-1-",
)

# Add-2 parity, indexed by value % 4, same inverted sense as UPC_MIRROR.
ADDON2_MIRROR: Final[Tuple[str, ...]] = ("11", "1-", "-1", "--")

EAN_GUARD_START: Final[str] = "0a1a"
EAN_GUARD_MIDDLE: Final[str] = "1a1a1"
EAN_GUARD_END: Final[str] = "a1a"
# EAN-13, ISBN and UPC-A print one digit left of the bars.
EAN_LEADING_SPACE: Final[str] = "9"

UPCE_GUARD_START: Final[str] = "0a1a"
UPCE_GUARD_END: Final[str] = "1a1a1a"

ADDON_GUARD_HEAD: Final[str] = "9112"
ADDON_GUARD_SEPARATOR: Final[str] = "11"

EAN_DIGIT_WIDTH: Final[int] = 7

# =============================================================================
# CODE 39
# =============================================================================

# Ordered in decades so that code % 10 selects bars and code // 10 spaces.
CODE39_ALPHABET: Final[str] = (
    "1234567890" "ABCDEFGHIJ" "KLMNOPQRST" "UVWXYZ-. *" "$/+%"
)

# Checksum weights come from this ordering (no "*", "$" moved into decade 4).
CODE39_CHECKBET: Final[str] = (
    "0123456789" "ABCDEFGHIJ" "KLMNOPQRST" "UVWXYZ-. $" "/+%"
)

CODE39_BARS: Final[Tuple[str, ...]] = (
    "31113", "13113", "33111", "11313", "31311",
    "13311", "11133", "31131", "13131", "11331",
)

CODE39_SPACES: Final[Tuple[str, ...]] = ("1311", "1131", "1113", "3111")

# $ / + %
CODE39_SPECIAL_BARS: Final[Tuple[str, ...]] = ("11111", "11111", "11111", "11111")
CODE39_SPECIAL_SPACES: Final[Tuple[str, ...]] = ("3331", "3313", "3133", "1333")

# The wide "*" start/stop symbols with their low bars.
CODE39_HEAD: Final[str] = "0a3a1c1c1a"
CODE39_TAIL: Final[str] = "1a3a1c1c1a"

CODE39_SYMBOL_WIDTH: Final[int] = 16
CODE39_FIRST_TEXT_POS: Final[int] = 22

# Code 39 extended: one entry per ASCII code 0-127.
CODE39_EXTENDED: Final[Tuple[str, ...]] = (
    "%U",
    "$A", "$B", "$C", "$D", "$E", "$F", "$G", "$H", "$I", "$J", "$K", "$L", "$M",
    "$N", "$O", "$P", "$Q", "$R", "$S", "$T", "$U", "$V", "$W", "$X", "$Y", "$Z",
    "%A", "%B", "%C", "%D", "%E", " ",
    "/A", "/B", "/C", "/D", "/E", "/F", "/G", "/H", "/I", "/J", "/K", "/L", "-",
    ".", "/O", "0", "1", "2", "3", "4", "5", "6", "7", "8", "9", "/Z",
    "%F", "%G", "%H", "%I", "%J", "%V",
    "A", "B", "C", "D", "E", "F", "G", "H", "I", "J", "K", "L", "M",
    "N", "O", "P", "Q", "R", "S", "T", "U", "V", "W", "X", "Y", "Z",
    "%K", "%L", "%M", "%N", "%O", "%W",
    "+A", "+B", "+C", "+D", "+E", "+F", "+G", "+H", "+I", "+J", "+K", "+L", "+M",
    "+N", "+O", "+P", "+Q", "+R", "+S", "+T", "+U", "+V", "+W", "+X", "+Y", "+Z",
    "%P", "%Q", "%R", "%S", "%T",
)

# =============================================================================
# CODE 128
# =============================================================================

CODE128_SYMBOLS: Final[Tuple[str, ...]] = (
    "212222", "222122", "222221", "121223", "121322",  # 0 - 4
    "131222", "122213", "122312", "132212", "221213",
    "221312", "231212", "112232", "122132", "122231",  # 10 - 14
    "113222", "123122", "123221", "223211", "221132",
    "221231", "213212", "223112", "312131", "311222",  # 20 - 24
    "321122", "321221", "312212", "322112", "322211",
    "212123", "212321", "232121", "111323", "131123",  # 30 - 34
    "131321", "112313", "132113", "132311", "211313",
    "231113", "231311", "112133", "112331", "132131",  # 40 - 44
    "113123", "113321", "133121", "313121", "211331",
    "231131", "213113", "213311", "213131", "311123",  # 50 - 54
    "311321", "331121", "312113", "312311", "332111",
    "314111", "221411", "431111", "111224", "111422",  # 60 - 64
    "121124", "121421", "141122", "141221", "112214",
    "112412", "122114", "122411", "142112", "142211",  # 70 - 74
    "241211", "221114", "413111", "241112", "134111",
    "111242", "121142", "121241", "114212", "124112",  # 80 - 84
    "124211", "411212", "421112", "421211", "212141",
    "214121", "412121", "111143", "111341", "131141",  # 90 - 94
    "114113", "114311", "411113", "411311", "113141",
    "114131", "311141", "411131", "b1a4a2", "b1a2a4",  # 100 - 104
    "b1a2c2", "b3c1a1b",
)

CODE128_START_C: Final[int] = 105
CODE128_STOP: Final[int] = 106

CODE128_SYMBOL_WIDTH: Final[int] = 11

# =============================================================================
# INTERLEAVED 2 OF 5
# =============================================================================

# Five widths per digit; the first digit of a pair becomes bars, the second spaces.
I25_DIGITS: Final[Tuple[str, ...]] = (
    "11331", "31113", "13113", "33111", "11313",
    "31311", "13311", "11133", "31131", "13131",
)

I25_GUARD_START: Final[str] = "a1a1"
I25_GUARD_END: Final[str] = "c1a"

I25_PAIR_WIDTH: Final[int] = 18


__all__ = [
    "EAN_DIGITS",
    "EAN_MIRROR",
    "UPC_MIRROR",
    "ADDON2_MIRROR",
    "EAN_GUARD_START",
    "EAN_GUARD_MIDDLE",
    "EAN_GUARD_END",
    "EAN_LEADING_SPACE",
    "UPCE_GUARD_START",
    "UPCE_GUARD_END",
    "ADDON_GUARD_HEAD",
    "ADDON_GUARD_SEPARATOR",
    "EAN_DIGIT_WIDTH",
    "CODE39_ALPHABET",
    "CODE39_CHECKBET",
    "CODE39_BARS",
    "CODE39_SPACES",
    "CODE39_SPECIAL_BARS",
    "CODE39_SPECIAL_SPACES",
    "CODE39_HEAD",
    "CODE39_TAIL",
    "CODE39_SYMBOL_WIDTH",
    "CODE39_FIRST_TEXT_POS",
    "CODE39_EXTENDED",
    "CODE128_SYMBOLS",
    "CODE128_START_C",
    "CODE128_STOP",
    "CODE128_SYMBOL_WIDTH",
    "I25_DIGITS",
    "I25_GUARD_START",
    "I25_GUARD_END",
    "I25_PAIR_WIDTH",
]
