"""Geometry of a barcode: bar rectangles, quiet zones and caption zones.

All positions are computed in modules first and multiplied by the bar scale
last, so a code laid out with bar scale 2 has every coordinate doubled."""
import logging
from collections import namedtuple

from .caption import caption_text
from .code import CaptionZone, CharacterRole
from .options import DEFAULT_MARKER_OVERLAP, RenderOptions
from .symbology import symbology_info

logger = logging.getLogger(__name__)

Size = namedtuple("Size", "width height")
Rect = namedtuple("Rect", "x y width height")
Bar = namedtuple("Bar", "x y width height marker")
Caption = namedtuple("Caption", "rect text")
Filler = namedtuple("Filler", "zone rect glyph")
Tint = namedtuple("Tint", "zone rect colour")
Geometry = namedtuple(
    "Geometry", "size bars captions fillers tints font_name"
)

# markers delimiting the number zones of split captions
ZONE_MARKERS = (CharacterRole.START, CharacterRole.MIDDLE, CharacterRole.STOP)

FILLER_GLYPHS = (
    (CaptionZone.LEFT_QUIET_ZONE, "<"),
    (CaptionZone.RIGHT_QUIET_ZONE, ">"),
)

DEBUG_TINTS = {
    CaptionZone.LEFT_QUIET_ZONE: "#ff000040",
    CaptionZone.LEFT_NUMBER_ZONE: "#00ff0040",
    CaptionZone.RIGHT_NUMBER_ZONE: "#0000ff40",
    CaptionZone.RIGHT_QUIET_ZONE: "#ffff0040",
    CaptionZone.TEXT_ZONE: "#00ffff40",
}


def _dimensions(code, info):
    """Width and height of the whole image in modules"""
    width = code.width + 2 * info.quiet_zone
    if info.fixed_height is not None:
        return width, info.fixed_height
    return width, width / info.aspect_ratio


def _runs(bits):
    """Yields (offset, length) of every run of black modules"""
    start = None
    for i, bit in enumerate(bits):
        if bit and start is None:
            start = i
        elif not bit and start is not None:
            yield start, i - start
            start = None
    if start is not None:
        # character ending with a black bar
        yield start, len(bits) - start


def _marker_overlap(options, info, caption_height):
    if not info.allows_marker_overlap:
        if options.marker_overlap_percent != DEFAULT_MARKER_OVERLAP:
            logger.warning(
                "%s markers can't overlap the caption, ignoring marker "
                "overlap %r", info.description, options.marker_overlap_percent
            )
        return 0
    return options.marker_overlap_percent * caption_height


def _zone_spans(code, info, spans, total_width):
    """Start and end module of every caption zone of the code"""
    left = info.quiet_zone
    right = left + code.width
    characters = code.characters
    zones = {CaptionZone.LEFT_QUIET_ZONE: (0, left)}
    if info.split_caption:
        markers = [
            span for character, span in zip(characters, spans)
            if character.role in ZONE_MARKERS
        ]
        zones[CaptionZone.LEFT_NUMBER_ZONE] = (markers[0][1], markers[1][0])
        if len(markers) > 2:
            zones[CaptionZone.RIGHT_NUMBER_ZONE] = (
                markers[1][1], markers[2][0]
            )
    else:
        start, end = left, right
        i = 0
        while i < len(characters) and characters[i].is_marker:
            start = spans[i][1]
            i += 1
        j = len(characters) - 1
        while j > i and characters[j].is_marker:
            end = spans[j][0]
            j -= 1
        if start >= end:
            start, end = left, right
        zones[CaptionZone.TEXT_ZONE] = (start, end)
    zones[CaptionZone.RIGHT_QUIET_ZONE] = (right, total_width)
    return zones


def measure(code, options=None):
    """Size of the laid out code, without computing its geometry.

    :param code:        Code
    :param options:     RenderOptions, dict or None
    :return:            Size"""
    options = RenderOptions.coerce(options)
    width, height = _dimensions(code, symbology_info(code.symbology))
    return Size(width * options.bar_scale, height * options.bar_scale)


def layout(code, options=None):
    """Computes bar rectangles and caption zones of a code.

    :param code:        Code
    :param options:     RenderOptions, dict or None
    :return:            Geometry
    :raises ConfigurationError: If options are invalid"""
    options = RenderOptions.coerce(options)
    info = symbology_info(code.symbology)
    scale = options.bar_scale
    width, height = _dimensions(code, info)

    captioned = options.print_caption and info.requires_caption
    caption_height = info.caption_height if captioned else 0
    bar_height = height - caption_height
    overlap = _marker_overlap(options, info, caption_height)

    bars = []
    spans = []
    x = info.quiet_zone
    for character in code.characters:
        spans.append((x, x + character.width))
        character_height = bar_height
        if character.is_marker:
            character_height += overlap
        for offset, length in _runs(character.bits):
            bars.append(Bar(
                x=(x + offset) * scale,
                y=0,
                width=length * scale,
                height=character_height * scale,
                marker=character.is_marker
            ))
        x += character.width

    captions = {}
    fillers = []
    tints = []
    if captioned:
        for zone, (start, end) in _zone_spans(
                code, info, spans, width).items():
            rect = Rect(
                start * scale, bar_height * scale,
                (end - start) * scale, caption_height * scale
            )
            captions[zone] = Caption(rect, caption_text(code, zone, options))
            if options.debug:
                tints.append(Tint(zone, rect, DEBUG_TINTS[zone]))
        if options.fill_empty_quiet_zones:
            if info.allows_quiet_zone_fill:
                for zone, glyph in FILLER_GLYPHS:
                    caption = captions[zone]
                    if caption.text is None and caption.rect.width > 0:
                        fillers.append(Filler(zone, caption.rect, glyph))
            else:
                logger.warning(
                    "%s quiet zones can't be filled, ignoring option",
                    info.description
                )

    return Geometry(
        size=Size(width * scale, height * scale),
        bars=tuple(bars),
        captions=captions,
        fillers=tuple(fillers),
        tints=tuple(tints),
        font_name=options.caption_font_name or info.default_font
    )
