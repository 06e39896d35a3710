"""Content rules of the supported symbologies.

validate() returns normalized content or raises a ContentError subclass.
Non-strict validation normalizes content where the symbology has an obvious
reading of it (upper-casing, zero padding, default Codabar start/stop
characters); strict validation rejects the same content instead."""
from .checksum import mod10_weighted
from .errors import (
    ChecksumMismatchError,
    ContentError,
    EmptyContentError,
    InvalidCharacterError,
    InvalidLengthError,
    OutOfRangeError,
)
from .symbology import Symbology

DIGITS = "0123456789"
CODE39_CHARACTERS = DIGITS + "ABCDEFGHIJKLMNOPQRSTUVWXYZ-. $/+%"
CODE11_CHARACTERS = DIGITS + "-"
CODABAR_CHARACTERS = DIGITS + "-$:/.+"
CODABAR_START_STOP = "ABCD"
FIM_CHARACTERS = "ABCDE"

PHARMACODE_MIN = 3
PHARMACODE_MAX = 131070


def check_charset(content, allowed, symbology):
    for index, char in enumerate(content):
        if char not in allowed:
            raise InvalidCharacterError(index, char, symbology)


def check_ascii(content, symbology):
    for index, char in enumerate(content):
        if ord(char) > 127:
            raise InvalidCharacterError(index, char, symbology)


def _digits(content):
    return [ord(char) - ord("0") for char in content]


def _verify_check_digit(content, symbology):
    """Strips and verifies a caller supplied mod 10 check digit"""
    payload, supplied = content[:-1], content[-1]
    expected = str(mod10_weighted(_digits(payload)))
    if supplied != expected:
        raise ChecksumMismatchError(expected, supplied, symbology)
    return payload


def _validate_ean(content, symbology, payload_length):
    check_charset(content, DIGITS, symbology)
    if len(content) == payload_length + 1:
        return _verify_check_digit(content, symbology)
    if len(content) != payload_length:
        raise InvalidLengthError(
            len(content),
            "{} or {} digits".format(payload_length, payload_length + 1),
            symbology
        )
    return content


def validate_ean13(content, strict):
    return _validate_ean(content, Symbology.EAN13, 12)


def validate_ean8(content, strict):
    return _validate_ean(content, Symbology.EAN8, 7)


def validate_upce(content, strict):
    # imported here, ean imports this module
    from .encoding.ean import expand_upce

    symbology = Symbology.UPCE
    check_charset(content, DIGITS, symbology)
    if len(content) == 6:
        content = "0" + content
    elif len(content) not in (7, 8):
        raise InvalidLengthError(len(content), "6, 7 or 8 digits", symbology)
    if content[0] not in "01":
        raise InvalidCharacterError(0, content[0], symbology)
    if len(content) == 8:
        expected = expand_upce(content[:7])[-1]
        if content[7] != expected:
            raise ChecksumMismatchError(expected, content[7], symbology)
        content = content[:7]
    return content


def _fixed_digits(symbology, length):
    def validate_fixed(content, strict):
        check_charset(content, DIGITS, symbology)
        if len(content) != length:
            raise InvalidLengthError(
                len(content), "{} digits".format(length), symbology
            )
        return content
    return validate_fixed


def _charset(symbology, allowed, upper=False):
    def validate_charset(content, strict):
        if upper and not strict:
            content = content.upper()
        check_charset(content, allowed, symbology)
        return content
    return validate_charset


def validate_ascii(symbology):
    def validate_full_ascii(content, strict):
        check_ascii(content, symbology)
        return content
    return validate_full_ascii


def validate_itf(content, strict):
    symbology = Symbology.INTERLEAVED_2OF5
    check_charset(content, DIGITS, symbology)
    if len(content) % 2:
        if strict:
            raise InvalidLengthError(
                len(content), "even number of digits", symbology
            )
        content = "0" + content
    return content


def validate_codabar(content, strict):
    symbology = Symbology.CODABAR
    if not strict:
        content = content.upper()
        if content[0] not in CODABAR_START_STOP and \
                content[-1] not in CODABAR_START_STOP:
            content = "A" + content + "A"
    if content[0] not in CODABAR_START_STOP:
        raise InvalidCharacterError(0, content[0], symbology)
    last = len(content) - 1
    if last > 0 and content[last] not in CODABAR_START_STOP:
        raise InvalidCharacterError(last, content[last], symbology)
    if last < 2:
        raise InvalidLengthError(
            len(content), "at least one character between start and stop",
            symbology
        )
    for index in range(1, last):
        if content[index] not in CODABAR_CHARACTERS:
            raise InvalidCharacterError(index, content[index], symbology)
    return content


def validate_pharmacode(content, strict):
    symbology = Symbology.PHARMACODE
    check_charset(content, DIGITS, symbology)
    content = content.lstrip("0") or "0"
    # longer digit strings are out of range, int() may refuse them
    if len(content) > len(str(PHARMACODE_MAX)):
        raise OutOfRangeError(
            "Pharmacode value must be at most {}, got {} digits".format(
                PHARMACODE_MAX, len(content)
            ),
            symbology
        )
    value = int(content)
    if not PHARMACODE_MIN <= value <= PHARMACODE_MAX:
        raise OutOfRangeError(
            "Pharmacode value must be between {} and {}, got {}".format(
                PHARMACODE_MIN, PHARMACODE_MAX, value
            ),
            symbology
        )
    return content


def validate_fim(content, strict):
    symbology = Symbology.FIM
    if not strict:
        content = content.upper()
    if len(content) != 1:
        raise InvalidLengthError(len(content), "1 character", symbology)
    check_charset(content, FIM_CHARACTERS, symbology)
    return content


VALIDATORS = {
    Symbology.EAN13: validate_ean13,
    Symbology.EAN8: validate_ean8,
    Symbology.UPCE: validate_upce,
    Symbology.EAN2: _fixed_digits(Symbology.EAN2, 2),
    Symbology.EAN5: _fixed_digits(Symbology.EAN5, 5),
    Symbology.CODE39: _charset(Symbology.CODE39, CODE39_CHARACTERS, True),
    Symbology.CODE39_MOD43: _charset(
        Symbology.CODE39_MOD43, CODE39_CHARACTERS, True
    ),
    Symbology.CODE93: validate_ascii(Symbology.CODE93),
    Symbology.CODE128: validate_ascii(Symbology.CODE128),
    Symbology.CODE11: _charset(Symbology.CODE11, CODE11_CHARACTERS),
    Symbology.INTERLEAVED_2OF5: validate_itf,
    Symbology.STANDARD_2OF5: _charset(Symbology.STANDARD_2OF5, DIGITS),
    Symbology.MSI: _charset(Symbology.MSI, DIGITS),
    Symbology.CODABAR: validate_codabar,
    Symbology.PHARMACODE: validate_pharmacode,
    Symbology.FIM: validate_fim,
}


def validate(content, symbology, strict=False):
    """Checks that content is encodable by symbology.

    :param str content:     Content without computed check digits. EAN and
                            UPC content may carry its check digit, which is
                            then verified and stripped.
    :param symbology:       Symbology member or its short name
    :param bool strict:     Reject content instead of normalizing it
    :return:                Normalized content"""
    symbology = Symbology.get(symbology)
    if not isinstance(content, str):
        raise ContentError(
            "Content must be a string, got {!r}".format(type(content)),
            symbology
        )
    if not content:
        raise EmptyContentError(
            "{} content can't be empty".format(symbology.name), symbology
        )
    return VALIDATORS[symbology](content, strict)
