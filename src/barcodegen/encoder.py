"""
Dispatcher: picks a symbology for a request, validates the text and runs the
encoder.

Example:
    >>> symbol = encode(BarcodeRequest("400638133393"))
    >>> symbol.symbology_name
    'EAN-13'
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Union

from barcodegen import get_logger
from barcodegen.enums import Symbology
from barcodegen.exceptions import (
    BarcodeError,
    InvalidInputError,
    MissingInputError,
    NoSuitableSymbologyError,
    ResourceExhaustedError,
)
from barcodegen.pattern import EncodedSymbol, Geometry
from barcodegen.registry import SymbologyDescriptor, SymbologyRegistry

logger = get_logger(__name__)

__all__ = ["BarcodeRequest", "encode", "detect_symbology", "verify"]


@dataclass(frozen=True)
class BarcodeRequest:
    """
    One encode call.

    Attributes:
        text: Text to encode.
        symbology: Explicit symbology, an alias such as ``"ean13"``, or None /
            ``"auto"`` to pick the first symbology that accepts the text.
        no_checksum: Omit the optional check character (Code 39, I25).
        geometry: Placement hints copied into the result.
    """

    text: Optional[str]
    symbology: Union[Symbology, str, None] = None
    no_checksum: bool = False
    geometry: Geometry = field(default_factory=Geometry)


def _registry(registry: Optional[SymbologyRegistry]) -> SymbologyRegistry:
    return registry if registry is not None else SymbologyRegistry.get_instance()


def detect_symbology(
    text: Optional[str], registry: Optional[SymbologyRegistry] = None
) -> Symbology:
    """
    Return the first symbology, in priority order, whose validator accepts text.

    Raises:
        MissingInputError: text is None.
        NoSuitableSymbologyError: nothing accepts the text.
    """
    return _detect(text, _registry(registry)).symbology


def _detect(text: Optional[str], registry: SymbologyRegistry) -> SymbologyDescriptor:
    if text is None:
        raise MissingInputError("No text to encode")
    for descriptor in registry.list():
        if descriptor.verify(text):
            logger.debug("Autodetected %s for %r", descriptor.name, text)
            return descriptor
    raise NoSuitableSymbologyError(
        f"No symbology can encode {text!r}", text=text
    )


def verify(
    text: str,
    symbology: Union[Symbology, str],
    registry: Optional[SymbologyRegistry] = None,
) -> bool:
    """True if ``symbology`` accepts ``text``; unknown names raise."""
    resolved = Symbology.from_name(symbology)
    if resolved is None:
        raise ValueError("verify() needs an explicit symbology")
    return _registry(registry).get(resolved).verify(text)


def encode(
    request: BarcodeRequest, registry: Optional[SymbologyRegistry] = None
) -> EncodedSymbol:
    """
    Encode a request into an EncodedSymbol.

    Raises:
        MissingInputError: No text.
        UnsupportedSymbologyError: Unknown or unregistered symbology.
        InvalidInputError: The chosen symbology rejects the text.
        NoSuitableSymbologyError: Autodetection found nothing.
        ResourceExhaustedError: Out of memory.
        InternalInconsistencyError: The encoder rejected validated text.
    """
    registry = _registry(registry)
    text = request.text
    if text is None:
        raise MissingInputError("No text to encode", symbology=request.symbology)

    symbology = Symbology.from_name(request.symbology)
    if symbology is None:
        descriptor = _detect(text, registry)
    else:
        descriptor = registry.get(symbology)
        if not descriptor.verify(text):
            raise InvalidInputError(
                f"Text {text!r} is not valid for {descriptor.name}",
                text=text,
                symbology=symbology,
            )

    try:
        symbol = descriptor.encode(text, request.no_checksum)
    except MemoryError as exc:
        raise ResourceExhaustedError(
            "Out of memory while encoding",
            text=text,
            symbology=descriptor.symbology,
            cause=exc,
        ) from exc
    except BarcodeError:
        logger.debug("Encoding %r as %s failed", text, descriptor.name, exc_info=True)
        raise

    logger.debug(
        "Encoded %r as %s (%d modules)", text, symbol.symbology_name, symbol.bar_length
    )
    return symbol.with_geometry(request.geometry)
