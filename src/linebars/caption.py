from .code import CaptionZone
from .encoding import get_encoding
from .options import RenderOptions
from .symbology import symbology_info

SPLIT_ZONES = (
    CaptionZone.LEFT_QUIET_ZONE,
    CaptionZone.LEFT_NUMBER_ZONE,
    CaptionZone.RIGHT_NUMBER_ZONE,
    CaptionZone.RIGHT_QUIET_ZONE,
)

TEXT_ZONES = (
    CaptionZone.LEFT_QUIET_ZONE,
    CaptionZone.TEXT_ZONE,
    CaptionZone.RIGHT_QUIET_ZONE,
)


def caption_zones(symbology):
    """Caption zones used by a symbology, left to right"""
    if symbology_info(symbology).split_caption:
        return SPLIT_ZONES
    return TEXT_ZONES


def caption_text(code, zone, options=None):
    """Text printed in a caption zone, or None for no text.

    :param code:        Code
    :param zone:        CaptionZone
    :param options:     RenderOptions, dict or None
    :return:            Caption string or None"""
    options = RenderOptions.coerce(options)
    info = symbology_info(code.symbology)
    show_check_digits = options.show_check_digits or info.shows_check_digits
    return get_encoding(code.symbology).caption_text(
        code, zone, show_check_digits
    )
