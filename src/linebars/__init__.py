"""Linear barcode encoder and layout engine.

Encodes content into EAN/UPC, Code 39/93/128/11, 2 of 5, MSI, Codabar,
Pharmacode and FIM symbols and computes bar and caption geometry for a
drawing backend."""
from .caption import caption_text, caption_zones
from .code import CaptionZone, CharacterRole, Code, CodeCharacter
from .encoding import compress_upca, encode, expand_upce
from .errors import (
    BarcodeError,
    ChecksumMismatchError,
    ConfigurationError,
    ContentError,
    EmptyContentError,
    EncodingError,
    InternalTableError,
    InvalidCharacterError,
    InvalidLengthError,
    LayoutError,
    OutOfRangeError,
)
from .layout import Geometry, layout, measure
from .options import RenderOptions
from .symbology import Symbology, symbology_info
from .validation import validate

__version__ = "0.1.0"
