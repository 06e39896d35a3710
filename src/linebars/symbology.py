from collections import namedtuple
from enum import Enum


class Symbology(Enum):
    EAN8 = "ean8"
    EAN13 = "ean13"
    UPCE = "upce"
    EAN2 = "ean2"
    EAN5 = "ean5"
    CODE39 = "code39"
    CODE39_MOD43 = "code39mod43"
    CODE93 = "code93"
    CODE128 = "code128"
    CODE11 = "code11"
    INTERLEAVED_2OF5 = "itf"
    STANDARD_2OF5 = "standard2of5"
    MSI = "msi"
    CODABAR = "codabar"
    PHARMACODE = "pharmacode"
    FIM = "fim"

    @classmethod
    def get(cls, symbology):
        """Accepts a Symbology or its short name"""
        if isinstance(symbology, cls):
            return symbology
        try:
            return cls(str(symbology).lower())
        except ValueError:
            raise ValueError(
                "Unknown barcode symbology {!r}".format(symbology)
            ) from None


SymbologyInfo = namedtuple("SymbologyInfo", [
    "name",
    "description",
    "standard",
    "quiet_zone",               # modules left and right of the symbol
    "aspect_ratio",             # width / height, if no fixed height
    "fixed_height",             # modules, or None
    "caption_height",           # modules taken by the caption band
    "allows_marker_overlap",
    "allows_quiet_zone_fill",
    "requires_caption",
    "shows_check_digits",       # check digits printed regardless of options
    "default_font",
    "split_caption",            # left/right number zones instead of text zone
])


def _ean(name, description, quiet_zone, aspect_ratio):
    return SymbologyInfo(
        name=name,
        description=description,
        standard="International Standard ISO/IEC 15420",
        quiet_zone=quiet_zone,
        aspect_ratio=aspect_ratio,
        fixed_height=None,
        caption_height=9,
        allows_marker_overlap=True,
        allows_quiet_zone_fill=True,
        requires_caption=True,
        shows_check_digits=True,
        default_font="OCRB",
        split_caption=True
    )


def _supplement(name, description, aspect_ratio):
    return SymbologyInfo(
        name=name,
        description=description,
        standard="no international standard",
        quiet_zone=5,
        aspect_ratio=aspect_ratio,
        fixed_height=None,
        caption_height=9,
        allows_marker_overlap=False,
        allows_quiet_zone_fill=True,
        requires_caption=True,
        shows_check_digits=False,
        default_font="OCRB",
        split_caption=False
    )


def _linear(name, description, standard, quiet_zone=10, fixed_height=50,
            requires_caption=True):
    return SymbologyInfo(
        name=name,
        description=description,
        standard=standard,
        quiet_zone=quiet_zone,
        aspect_ratio=1.0,
        fixed_height=fixed_height,
        caption_height=10,
        allows_marker_overlap=False,
        allows_quiet_zone_fill=False,
        requires_caption=requires_caption,
        shows_check_digits=False,
        default_font="Helvetica",
        split_caption=False
    )


_NO_STANDARD = "no international standard"

SYMBOLOGIES = {
    Symbology.EAN13: _ean("ean13", "EAN-13", 11, 1.45),
    Symbology.EAN8: _ean("ean8", "EAN-8", 7, 1.28),
    Symbology.UPCE: _ean("upce", "UPC-E", 9, 0.9),
    Symbology.EAN2: _supplement("ean2", "EAN-2 Supplement", 0.4),
    Symbology.EAN5: _supplement("ean5", "EAN-5 Supplement", 0.75),
    Symbology.CODE39: _linear(
        "code39", "Code 39", "International Standard ISO/IEC 16388"
    ),
    Symbology.CODE39_MOD43: _linear(
        "code39mod43", "Code 39 Mod 43",
        "International Standard ISO/IEC 16388"
    ),
    Symbology.CODE93: _linear("code93", "Code 93", _NO_STANDARD),
    Symbology.CODE128: _linear(
        "code128", "Code 128", "International Standard ISO/IEC 15417"
    ),
    Symbology.CODE11: _linear("code11", "Code 11", _NO_STANDARD),
    Symbology.INTERLEAVED_2OF5: _linear(
        "itf", "Interleaved 2 of 5", "International Standard ISO/IEC 16390"
    ),
    Symbology.STANDARD_2OF5: _linear(
        "standard2of5", "Standard 2 of 5", _NO_STANDARD
    ),
    Symbology.MSI: _linear("msi", "MSI (Modified Plessey)", _NO_STANDARD),
    Symbology.CODABAR: _linear("codabar", "Codabar", _NO_STANDARD),
    Symbology.PHARMACODE: _linear(
        "pharmacode", "Pharmacode One Track", _NO_STANDARD,
        quiet_zone=6, fixed_height=24, requires_caption=False
    ),
    Symbology.FIM: _linear(
        "fim", "Facing Identification Mark", _NO_STANDARD,
        quiet_zone=0, fixed_height=20, requires_caption=False
    ),
}


def symbology_info(symbology):
    """Returns name, standard and capability flags of a symbology.

    :param symbology:   Symbology member or its short name
    :return:            SymbologyInfo"""
    return SYMBOLOGIES[Symbology.get(symbology)]
