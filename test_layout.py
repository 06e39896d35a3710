import logging

import pytest

from linebars import (
    CaptionZone,
    ConfigurationError,
    RenderOptions,
    encode,
    layout,
    measure,
)
from linebars.layout import Size

EAN13 = "400638133393"


def marker_heights(geometry):
    return sorted({bar.height for bar in geometry.bars if bar.marker})


def content_heights(geometry):
    return sorted({bar.height for bar in geometry.bars if not bar.marker})


def test_ean13_size():
    code = encode(EAN13, "ean13")
    geometry = layout(code)
    assert geometry.size.width == 95 + 2 * 11
    assert geometry.size.height == pytest.approx(117 / 1.45)
    assert geometry.bars[0].x == 11
    assert geometry.captions == {}
    assert geometry.fillers == ()
    assert geometry.tints == ()


def test_fixed_height():
    geometry = layout(encode("CODE39", "code39"))
    assert geometry.size == Size(103 + 20, 50)
    geometry = layout(encode("3", "pharmacode"))
    assert geometry.size == Size(4 + 12, 24)
    geometry = layout(encode("A", "fim"))
    assert geometry.size == Size(9, 20)
    assert geometry.bars[0].x == 0


def test_bars_cover_black_modules():
    code = encode("TEST93", "code93")
    geometry = layout(code)
    covered = set()
    for bar in geometry.bars:
        assert bar.width > 0
        for x in range(int(bar.x), int(bar.x + bar.width)):
            covered.add(x - 10)
    assert covered == {i for i, bit in enumerate(code.bits) if bit}


def test_scale_doubles_geometry():
    code = encode(EAN13, "ean13")
    options = {"print_caption": True, "fill_empty_quiet_zones": True}
    single = layout(code, options)
    double = layout(code, dict(options, bar_scale=2))
    assert double.size == Size(2 * single.size.width, 2 * single.size.height)
    assert len(single.bars) == len(double.bars)
    for a, b in zip(single.bars, double.bars):
        assert b.x == 2 * a.x
        assert b.width == 2 * a.width
        assert b.height == pytest.approx(2 * a.height)
    for zone, caption in single.captions.items():
        rect = double.captions[zone].rect
        assert rect.x == 2 * caption.rect.x
        assert rect.width == 2 * caption.rect.width
        assert rect.height == 2 * caption.rect.height
    assert [f.rect.width * 2 for f in single.fillers] == \
        [f.rect.width for f in double.fillers]


@pytest.mark.parametrize("scale", [1, 2, 0.5, 3.25])
def test_measure_matches_layout(scale):
    for content, symbology in (
        (EAN13, "ean13"), ("0425261", "upce"), ("PJJ123C", "code128"),
        ("52495", "ean5"), ("131070", "pharmacode"),
    ):
        code = encode(content, symbology)
        options = RenderOptions(bar_scale=scale, print_caption=True)
        assert measure(code, options) == layout(code, options).size


def test_markers_extend_into_caption():
    code = encode(EAN13, "ean13")
    geometry = layout(code, {"print_caption": True})
    height = geometry.size.height
    assert marker_heights(geometry) == pytest.approx([height])
    assert content_heights(geometry) == pytest.approx([height - 9])

    geometry = layout(
        code, {"print_caption": True, "marker_overlap_percent": 0.5}
    )
    assert marker_heights(geometry) == pytest.approx([height - 4.5])

    geometry = layout(
        code, {"print_caption": True, "marker_overlap_percent": 0}
    )
    assert marker_heights(geometry) == pytest.approx([height - 9])


def test_no_caption_keeps_full_height_bars():
    geometry = layout(encode(EAN13, "ean13"))
    heights = sorted({bar.height for bar in geometry.bars})
    assert heights == pytest.approx([geometry.size.height])


def test_overlap_ignored_where_not_allowed(caplog):
    code = encode("PJJ123C", "code128")
    full = layout(code, {"print_caption": True})
    with caplog.at_level(logging.WARNING, logger="linebars.layout"):
        partial = layout(
            code, {"print_caption": True, "marker_overlap_percent": 0.2}
        )
    assert full.bars == partial.bars
    assert marker_heights(full) == content_heights(full) == [40]
    assert "overlap" in caplog.text


def test_split_caption_zones():
    geometry = layout(encode(EAN13, "ean13"), {"print_caption": True})
    bar_height = geometry.size.height - 9
    captions = geometry.captions
    assert set(captions) == {
        CaptionZone.LEFT_QUIET_ZONE, CaptionZone.LEFT_NUMBER_ZONE,
        CaptionZone.RIGHT_NUMBER_ZONE, CaptionZone.RIGHT_QUIET_ZONE,
    }
    left = captions[CaptionZone.LEFT_NUMBER_ZONE]
    assert (left.rect.x, left.rect.width) == (14, 42)
    assert left.rect.y == pytest.approx(bar_height)
    assert left.rect.height == 9
    assert left.text == "006381"
    right = captions[CaptionZone.RIGHT_NUMBER_ZONE]
    assert (right.rect.x, right.rect.width) == (61, 42)
    assert right.text == "333931"
    assert captions[CaptionZone.LEFT_QUIET_ZONE].rect.width == 11
    assert captions[CaptionZone.LEFT_QUIET_ZONE].text == "4"
    quiet = captions[CaptionZone.RIGHT_QUIET_ZONE]
    assert (quiet.rect.x, quiet.rect.width) == (106, 11)
    assert quiet.text is None


def test_upce_caption_zones():
    geometry = layout(encode("0425261", "upce"), {"print_caption": True})
    captions = geometry.captions
    assert CaptionZone.RIGHT_NUMBER_ZONE not in captions
    left = captions[CaptionZone.LEFT_NUMBER_ZONE]
    assert (left.rect.x, left.rect.width) == (12, 42)
    assert left.text == "425261"
    assert captions[CaptionZone.LEFT_QUIET_ZONE].text == "0"
    assert captions[CaptionZone.RIGHT_QUIET_ZONE].text == "4"


def test_text_zone_between_markers():
    geometry = layout(encode("CODE39", "code39"), {"print_caption": True})
    text = geometry.captions[CaptionZone.TEXT_ZONE]
    assert (text.rect.x, text.rect.y) == (23, 40)
    assert (text.rect.width, text.rect.height) == (78, 10)
    assert text.text == "CODE39"
    assert geometry.captions[CaptionZone.LEFT_QUIET_ZONE].text is None


def test_supplement_text_zone():
    geometry = layout(encode("52495", "ean5"), {"print_caption": True})
    text = geometry.captions[CaptionZone.TEXT_ZONE]
    assert text.text == "52495"
    # start marker only, separators belong to the text
    assert (text.rect.x, text.rect.width) == (5 + 4, 43)


def test_caption_not_laid_out_without_option():
    geometry = layout(encode("CODE39", "code39"))
    assert geometry.captions == {}
    assert content_heights(geometry) == [50]


def test_symbology_without_caption():
    geometry = layout(encode("131070", "pharmacode"), {"print_caption": True})
    assert geometry.captions == {}
    assert {bar.height for bar in geometry.bars} == {24}


def test_fill_empty_quiet_zones():
    options = {"print_caption": True, "fill_empty_quiet_zones": True}
    geometry = layout(encode("9638507", "ean8"), options)
    assert [(f.zone, f.glyph) for f in geometry.fillers] == [
        (CaptionZone.LEFT_QUIET_ZONE, "<"),
        (CaptionZone.RIGHT_QUIET_ZONE, ">"),
    ]
    assert geometry.fillers[0].rect == \
        geometry.captions[CaptionZone.LEFT_QUIET_ZONE].rect

    geometry = layout(encode(EAN13, "ean13"), options)
    assert [f.glyph for f in geometry.fillers] == [">"]

    geometry = layout(encode("0425261", "upce"), options)
    assert geometry.fillers == ()


def test_fill_ignored_where_not_allowed(caplog):
    with caplog.at_level(logging.WARNING, logger="linebars.layout"):
        geometry = layout(
            encode("CODE39", "code39"),
            {"print_caption": True, "fill_empty_quiet_zones": True}
        )
    assert geometry.fillers == ()
    assert "quiet zones" in caplog.text


def test_debug_tints():
    geometry = layout(
        encode(EAN13, "ean13"), {"print_caption": True, "debug": True}
    )
    assert len(geometry.tints) == 4
    for tint in geometry.tints:
        assert tint.rect == geometry.captions[tint.zone].rect
    geometry = layout(encode(EAN13, "ean13"), {"debug": True})
    assert geometry.tints == ()


def test_font_name():
    assert layout(encode(EAN13, "ean13")).font_name == "OCRB"
    assert layout(encode("CODE39", "code39")).font_name == "Helvetica"
    geometry = layout(
        encode(EAN13, "ean13"), {"caption_font_name": "Courier"}
    )
    assert geometry.font_name == "Courier"


def test_options_defaults():
    options = RenderOptions()
    assert options.bar_scale == 1
    assert options.print_caption is False
    assert options.caption_font_name is None
    assert options.marker_overlap_percent == 1.0
    assert options.fill_empty_quiet_zones is False
    assert options.debug is False
    assert options.show_check_digits is False
    assert RenderOptions.coerce(None) == options


def test_options_from_dict_ignores_unknown_keys():
    options = RenderOptions.from_dict({"bar_scale": 2, "colour": "red"})
    assert options == RenderOptions(bar_scale=2)


@pytest.mark.parametrize("options", [
    {"bar_scale": 0},
    {"bar_scale": -1},
    {"bar_scale": "2"},
    {"bar_scale": True},
    {"bar_scale": float("inf")},
    {"bar_scale": float("nan")},
    {"marker_overlap_percent": 1.5},
    {"marker_overlap_percent": -0.1},
    {"caption_font_name": 12},
])
def test_invalid_options(options):
    with pytest.raises(ConfigurationError):
        layout(encode(EAN13, "ean13"), options)
    with pytest.raises(ConfigurationError):
        measure(encode(EAN13, "ean13"), options)


def test_options_must_be_mapping():
    with pytest.raises(ConfigurationError):
        layout(encode(EAN13, "ean13"), ["bar_scale", 2])
