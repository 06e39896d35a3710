from abc import abstractmethod

from ..checksum import ean5_checksum, mod10_weighted
from ..code import CaptionZone, CharacterRole
from ..errors import ContentError
from ..symbology import Symbology
from .encoding import BarcodeEncoding

L, G, R = 0, 1, 2


def _digits(content):
    return [ord(char) - ord("0") for char in content]


def expand_upce(content):
    """Expands zero-suppressed UPC-E to the 12 digit UPC-A.

    :param str content:     Number system digit and 6 digits, optionally
                            followed by the check digit
    :return:                UPC-A digits, check digit included"""
    if len(content) not in (7, 8):
        raise ValueError("UPC-E expansion needs 7 or 8 digits")
    number_system, d = content[0], content[1:7]
    last = d[5]
    if last in "012":
        manufacturer = d[0:2] + last + "00"
        product = "00" + d[2:5]
    elif last == "3":
        manufacturer = d[0:3] + "00"
        product = "000" + d[3:5]
    elif last == "4":
        manufacturer = d[0:4] + "0"
        product = "0000" + d[4]
    else:
        manufacturer = d[0:5]
        product = "0000" + last
    upca = number_system + manufacturer + product
    return upca + str(mod10_weighted(_digits(upca)))


def compress_upca(content):
    """Zero-suppresses UPC-A to UPC-E, first matching rule wins.

    :param str content:     11 or 12 UPC-A digits
    :return:                Number system digit and 6 UPC-E digits
    :raises ContentError:   If the code has no zero-suppressed form"""
    if len(content) not in (11, 12) or content[0] not in "01":
        raise ContentError(
            "{!r} is not a number system 0 or 1 UPC-A code".format(content),
            Symbology.UPCE
        )
    number_system = content[0]
    manufacturer, product = content[1:6], content[6:11]
    if manufacturer[2:] in ("000", "100", "200") and product[:2] == "00":
        suppressed = manufacturer[:2] + product[2:] + manufacturer[2]
    elif manufacturer[3:] == "00" and product[:3] == "000":
        suppressed = manufacturer[:3] + product[3:] + "3"
    elif manufacturer[4] == "0" and product[:4] == "0000":
        suppressed = manufacturer[:4] + product[4] + "4"
    elif manufacturer[4] != "0" and product[:4] == "0000" \
            and product[4] in "56789":
        suppressed = manufacturer + product[4]
    else:
        raise ContentError(
            "UPC-A {!r} can't be zero-suppressed".format(content),
            Symbology.UPCE
        )
    return number_system + suppressed


class Ean(BarcodeEncoding):
    """Common tables of the EAN/UPC family"""
    patterns = (
        # L pattern, G pattern, R pattern
        (0b0001101, 0b0100111, 0b1110010),  # 0
        (0b0011001, 0b0110011, 0b1100110),  # 1
        (0b0010011, 0b0011011, 0b1101100),  # 2
        (0b0111101, 0b0100001, 0b1000010),  # 3
        (0b0100011, 0b0011101, 0b1011100),  # 4
        (0b0110001, 0b0111001, 0b1001110),  # 5
        (0b0101111, 0b0000101, 0b1010000),  # 6
        (0b0111011, 0b0010001, 0b1000100),  # 7
        (0b0110111, 0b0001001, 0b1001000),  # 8
        (0b0001011, 0b0010111, 0b1110100)   # 9
    )

    code_bitlength = 7

    @classmethod
    def digit(cls, char, lgr_index, role=CharacterRole.CONTENT):
        number = ord(char) - ord("0")
        pattern = cls.lookup(cls.lookup(cls.patterns, number), lgr_index)
        return cls.character(pattern, cls.code_bitlength, char, role)

    @classmethod
    def marker(cls, pattern, bit_length, role):
        return cls.character(pattern, bit_length, None, role)

    @classmethod
    def number_text(cls, code, start, end, show_check_digits):
        """Display text of content and check characters between
character indexes start and end"""
        return "".join(
            character.text for character in code.characters[start:end]
            if character.role is CharacterRole.CONTENT or (
                character.role is CharacterRole.CHECK and show_check_digits
            )
        ) or None


class Ean13(Ean):
    symbology = Symbology.EAN13

    # LG pattern chosen by first digit. 0 bit for L, 1 bit for G
    lg_pattern_ean13 = (
        0b000000, 0b001011, 0b001101, 0b001110, 0b010011,
        0b011001, 0b011100, 0b010101, 0b010110, 0b011010
    )

    @classmethod
    def code_characters(cls, content):
        check = str(mod10_weighted(_digits(content)))
        lg_pattern = cls.lookup(cls.lg_pattern_ean13, int(content[0]))

        yield cls.marker(0b101, 3, CharacterRole.START)
        for i, char in enumerate(content[1:7]):
            yield cls.digit(char, (lg_pattern >> (5 - i)) & 1)
        # middle separator, between first 6 and last 6 digits
        yield cls.marker(0b01010, 5, CharacterRole.MIDDLE)
        for char in content[7:]:
            yield cls.digit(char, R)
        yield cls.digit(check, R, CharacterRole.CHECK)
        yield cls.marker(0b101, 3, CharacterRole.STOP)

    @classmethod
    def caption_text(cls, code, zone, show_check_digits=False):
        # characters: start, 6 left digits, middle, 6 right digits, end
        if zone is CaptionZone.LEFT_QUIET_ZONE:
            return code.content[0]
        if zone is CaptionZone.LEFT_NUMBER_ZONE:
            return cls.number_text(code, 1, 7, show_check_digits)
        if zone is CaptionZone.RIGHT_NUMBER_ZONE:
            return cls.number_text(code, 8, 14, show_check_digits)
        return None


class Ean8(Ean):
    symbology = Symbology.EAN8

    @classmethod
    def code_characters(cls, content):
        check = str(mod10_weighted(_digits(content)))

        yield cls.marker(0b101, 3, CharacterRole.START)
        for char in content[:4]:
            yield cls.digit(char, L)
        yield cls.marker(0b01010, 5, CharacterRole.MIDDLE)
        for char in content[4:]:
            yield cls.digit(char, R)
        yield cls.digit(check, R, CharacterRole.CHECK)
        yield cls.marker(0b101, 3, CharacterRole.STOP)

    @classmethod
    def caption_text(cls, code, zone, show_check_digits=False):
        if zone is CaptionZone.LEFT_NUMBER_ZONE:
            return cls.number_text(code, 1, 5, show_check_digits)
        if zone is CaptionZone.RIGHT_NUMBER_ZONE:
            return cls.number_text(code, 6, 10, show_check_digits)
        return None


class UpcE(Ean):
    symbology = Symbology.UPCE

    # odd/even parity chosen by check digit for number system 0,
    # 1 bit for even (G pattern); number system 1 inverts it
    parity_upce = (
        0b111000, 0b110100, 0b110010, 0b110001, 0b101100,
        0b100110, 0b100011, 0b101010, 0b101001, 0b100101
    )

    @classmethod
    def code_characters(cls, content):
        check = expand_upce(content)[-1]
        parity = cls.lookup(cls.parity_upce, int(check))
        if content[0] == "1":
            parity ^= 0b111111

        yield cls.marker(0b101, 3, CharacterRole.START)
        for i, char in enumerate(content[1:]):
            yield cls.digit(char, (parity >> (5 - i)) & 1)
        # check digit has no bars of its own, only the parity carries it
        yield cls.bit_string_character("", check, CharacterRole.CHECK)
        yield cls.marker(0b010101, 6, CharacterRole.STOP)

    @classmethod
    def caption_text(cls, code, zone, show_check_digits=False):
        if zone is CaptionZone.LEFT_QUIET_ZONE:
            return code.content[0]
        if zone is CaptionZone.LEFT_NUMBER_ZONE:
            return code.content[1:]
        if zone is CaptionZone.RIGHT_QUIET_ZONE and show_check_digits:
            return code.check_text
        return None


class EanSupplement(Ean):
    start = 0b1011
    separator = 0b01

    @classmethod
    @abstractmethod
    def parity(cls, content):
        """Parity bits of the digits, 1 bit for G pattern"""
        raise NotImplementedError

    @classmethod
    def code_characters(cls, content):
        parity = cls.parity(content)
        last = len(content) - 1

        yield cls.marker(cls.start, 4, CharacterRole.START)
        for i, char in enumerate(content):
            yield cls.digit(char, (parity >> (last - i)) & 1)
            if i < last:
                yield cls.marker(cls.separator, 2, CharacterRole.SEPARATOR)


class Ean2(EanSupplement):
    symbology = Symbology.EAN2

    @classmethod
    def parity(cls, content):
        # value mod 4 gives LL, LG, GL, GG
        return int(content) % 4


class Ean5(EanSupplement):
    symbology = Symbology.EAN5

    # parity chosen by checksum, 1 bit for G pattern
    parity_ean5 = (
        0b11000, 0b10100, 0b10010, 0b10001, 0b01100,
        0b00110, 0b00011, 0b01010, 0b01001, 0b00101
    )

    @classmethod
    def parity(cls, content):
        return cls.lookup(cls.parity_ean5, ean5_checksum(_digits(content)))
