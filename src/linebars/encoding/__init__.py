from ..symbology import Symbology
from .codabar import Codabar
from .code11 import Code11
from .code39 import Code39, Code39Mod43
from .code93 import Code93
from .code128 import Code128
from .ean import Ean2, Ean5, Ean8, Ean13, UpcE, compress_upca, expand_upce
from .fim import Fim
from .msi import Msi
from .pharmacode import Pharmacode
from .two_of_five import Interleaved2of5, Standard2of5

ENCODINGS = {
    encoding.symbology: encoding
    for encoding in (
        Ean8, Ean13, UpcE, Ean2, Ean5, Code39, Code39Mod43, Code93, Code128,
        Code11, Interleaved2of5, Standard2of5, Msi, Codabar, Pharmacode, Fim,
    )
}


def get_encoding(symbology):
    """Encoding class of a symbology given as Symbology or short name"""
    return ENCODINGS[Symbology.get(symbology)]


def encode(content, symbology, strict=False):
    """Encodes content into a Code of the given symbology.

    :param str content:     Content string, check digits are computed
    :param symbology:       Symbology member or its short name
    :param bool strict:     Reject content instead of normalizing it
    :return:                Code
    :raises ContentError:   If content can't be encoded"""
    return get_encoding(symbology).encode(content, strict)


__all__ = [
    "ENCODINGS",
    "compress_upca",
    "encode",
    "expand_upce",
    "get_encoding",
]
