from linebars import CaptionZone, RenderOptions, caption_text, caption_zones, \
    encode
from linebars.caption import SPLIT_ZONES, TEXT_ZONES

SHOW = RenderOptions(show_check_digits=True)


def test_caption_zones():
    assert caption_zones("ean13") == SPLIT_ZONES
    assert caption_zones("upce") == SPLIT_ZONES
    assert caption_zones("ean5") == TEXT_ZONES
    assert caption_zones("code128") == TEXT_ZONES


def test_check_digit_hidden_by_default():
    code = encode("TEST93", "code93")
    assert caption_text(code, CaptionZone.TEXT_ZONE) == "TEST93"
    assert caption_text(code, CaptionZone.TEXT_ZONE, SHOW) == "TEST93+6"
    assert caption_text(
        code, CaptionZone.TEXT_ZONE, {"show_check_digits": True}
    ) == "TEST93+6"

    code = encode("1234567", "msi")
    assert caption_text(code, CaptionZone.TEXT_ZONE) == "1234567"
    assert caption_text(code, CaptionZone.TEXT_ZONE, SHOW) == "12345674"

    code = encode("CODE39", "code39mod43")
    assert caption_text(code, CaptionZone.TEXT_ZONE) == "CODE39"
    assert caption_text(code, CaptionZone.TEXT_ZONE, SHOW) == "CODE39W"


def test_ean_always_shows_check_digit():
    code = encode("400638133393", "ean13")
    for options in (None, SHOW):
        assert caption_text(code, CaptionZone.LEFT_QUIET_ZONE, options) == "4"
        assert caption_text(
            code, CaptionZone.LEFT_NUMBER_ZONE, options
        ) == "006381"
        assert caption_text(
            code, CaptionZone.RIGHT_NUMBER_ZONE, options
        ) == "333931"
        assert caption_text(
            code, CaptionZone.RIGHT_QUIET_ZONE, options
        ) is None
        assert caption_text(code, CaptionZone.TEXT_ZONE, options) is None


def test_ean8_number_zones():
    code = encode("9638507", "ean8")
    assert caption_text(code, CaptionZone.LEFT_QUIET_ZONE) is None
    assert caption_text(code, CaptionZone.LEFT_NUMBER_ZONE) == "9638"
    assert caption_text(code, CaptionZone.RIGHT_NUMBER_ZONE) == "5074"


def test_upce_check_digit_in_right_quiet_zone():
    code = encode("0425261", "upce")
    assert caption_text(code, CaptionZone.LEFT_QUIET_ZONE) == "0"
    assert caption_text(code, CaptionZone.LEFT_NUMBER_ZONE) == "425261"
    assert caption_text(code, CaptionZone.RIGHT_NUMBER_ZONE) is None
    assert caption_text(code, CaptionZone.RIGHT_QUIET_ZONE) == "4"


def test_markers_are_not_captioned():
    code = encode("A40156B", "codabar")
    assert caption_text(code, CaptionZone.TEXT_ZONE) == "40156"
    code = encode("ABC1234567", "code128")
    assert caption_text(code, CaptionZone.TEXT_ZONE, SHOW) == "ABC1234567"
    code = encode("52495", "ean5")
    assert caption_text(code, CaptionZone.TEXT_ZONE) == "52495"


def test_escaped_characters_captioned_once():
    code = encode("Hello", "code93")
    assert caption_text(code, CaptionZone.TEXT_ZONE) == "Hello"


def test_text_symbologies_leave_other_zones_empty():
    code = encode("TEST93", "code93")
    for zone in (
        CaptionZone.LEFT_QUIET_ZONE, CaptionZone.LEFT_NUMBER_ZONE,
        CaptionZone.RIGHT_NUMBER_ZONE, CaptionZone.RIGHT_QUIET_ZONE,
    ):
        assert caption_text(code, zone) is None


def test_pharmacode_has_no_text():
    code = encode("1234", "pharmacode")
    assert caption_text(code, CaptionZone.TEXT_ZONE) is None
