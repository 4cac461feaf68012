"""
symbologies

Per-symbology validators and encoders. Every module exposes pure
``verify_*(text) -> bool`` and ``encode_*(text, no_checksum=False) ->
EncodedSymbol`` functions; nothing is shared between calls.

Public API:
    - verify_ean / encode_ean: EAN-13, EAN-8 (+ add-2/add-5)
    - verify_upc / encode_upc: UPC-A, UPC-E (+ add-2/add-5)
    - verify_isbn / encode_isbn: ISBN as EAN-13 with the 978 prefix (+ add-5)
    - verify_code39 / encode_code39: Code 39
    - verify_code39ext / encode_code39ext: Code 39 extended (full ASCII)
    - verify_code128c / encode_code128c: Code 128, subset C only
    - verify_i25 / encode_i25: Interleaved 2 of 5
"""

from barcodegen.symbologies.code39 import (
    encode_code39,
    encode_code39ext,
    verify_code39,
    verify_code39ext,
)
from barcodegen.symbologies.code128 import encode_code128c, verify_code128c
from barcodegen.symbologies.ean import (
    encode_ean,
    encode_isbn,
    encode_upc,
    verify_ean,
    verify_isbn,
    verify_upc,
)
from barcodegen.symbologies.i25 import encode_i25, verify_i25

__all__ = [
    "verify_ean",
    "encode_ean",
    "verify_upc",
    "encode_upc",
    "verify_isbn",
    "encode_isbn",
    "verify_code39",
    "encode_code39",
    "verify_code39ext",
    "encode_code39ext",
    "verify_code128c",
    "encode_code128c",
    "verify_i25",
    "encode_i25",
]
