import math
from collections import namedtuple
from numbers import Real

from .errors import ConfigurationError

_FIELDS = (
    "bar_scale",
    "print_caption",
    "caption_font_name",
    "marker_overlap_percent",
    "fill_empty_quiet_zones",
    "debug",
    "show_check_digits",
)

DEFAULT_BAR_SCALE = 1
DEFAULT_MARKER_OVERLAP = 1.0


class RenderOptions(namedtuple("RenderOptions", _FIELDS)):
    """Options for laying out a barcode.

    bar_scale               Multiplier for the bar width, greater than 0
    print_caption           Whether the caption should be printed
    caption_font_name       Font face name of the caption, None for the
                            symbology default ("OCRB" for EAN/UPC,
                            "Helvetica" otherwise)
    marker_overlap_percent  Part of the caption height covered by elongated
                            marker bars, 0 to 1. Only for symbologies which
                            allow marker overlap.
    fill_empty_quiet_zones  Whether empty quiet zones get angle brackets,
                            only for symbologies which allow it
    debug                   Whether caption zones should be tinted
    show_check_digits       Whether check digits are printed in the caption
    """
    __slots__ = ()

    def __new__(cls, bar_scale=DEFAULT_BAR_SCALE, print_caption=False,
                caption_font_name=None,
                marker_overlap_percent=DEFAULT_MARKER_OVERLAP,
                fill_empty_quiet_zones=False, debug=False,
                show_check_digits=False):
        if isinstance(bar_scale, bool) or not isinstance(bar_scale, Real) \
                or not bar_scale > 0 or not math.isfinite(bar_scale):
            raise ConfigurationError(
                "Bar scale must be a finite number greater than 0, "
                "got {!r}".format(bar_scale)
            )
        if isinstance(marker_overlap_percent, bool) \
                or not isinstance(marker_overlap_percent, Real) \
                or not 0 <= marker_overlap_percent <= 1:
            raise ConfigurationError(
                "Marker overlap must be a number between 0 and 1, "
                "got {!r}".format(marker_overlap_percent)
            )
        if caption_font_name is not None and \
                not isinstance(caption_font_name, str):
            raise ConfigurationError(
                "Caption font name must be a string, "
                "got {!r}".format(caption_font_name)
            )
        return super().__new__(
            cls, bar_scale, bool(print_caption), caption_font_name,
            marker_overlap_percent, bool(fill_empty_quiet_zones),
            bool(debug), bool(show_check_digits)
        )

    @classmethod
    def from_dict(cls, options):
        """Options from a mapping, unrecognized keys are ignored"""
        return cls(**{
            key: value for key, value in options.items() if key in cls._fields
        })

    @classmethod
    def coerce(cls, options):
        """Accepts RenderOptions, a mapping of options or None"""
        if options is None:
            return cls()
        if isinstance(options, cls):
            return options
        if isinstance(options, dict):
            return cls.from_dict(options)
        raise ConfigurationError(
            "Expected RenderOptions or dict, got {!r}".format(type(options))
        )
