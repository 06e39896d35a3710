from ..checksum import code93_check_values
from ..code import CharacterRole
from ..errors import InternalTableError
from ..symbology import Symbology
from .encoding import BarcodeEncoding


class Code93(BarcodeEncoding):
    """Encoder for full ASCII Code93 barcodes."""
    symbology = Symbology.CODE93

    # stripe patterns, 1 for black, 0 for background white
    pattern = [
        0b100010100, 0b101001000, 0b101000100, 0b101000010, 0b100101000,
        0b100100100, 0b100100010, 0b101010000, 0b100010010, 0b100001010,
        0b110101000, 0b110100100, 0b110100010, 0b110010100, 0b110010010,
        0b110001010, 0b101101000, 0b101100100, 0b101100010, 0b100110100,
        0b100011010, 0b101011000, 0b101001100, 0b101000110, 0b100101100,
        0b100010110, 0b110110100, 0b110110010, 0b110101100, 0b110100110,
        0b110010110, 0b110011010, 0b101101100, 0b101100110, 0b100110110,
        0b100111010, 0b100101110, 0b111010100, 0b111010010, 0b111001010,
        0b101101110, 0b101110110, 0b110101110, 0b100100110, 0b111011010,
        0b111010110, 0b100110010, 0b101011110
    ]

    # caption text of character values, escape codes written in brackets
    values_text = list("0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ-. $/+%") + \
        ["($)", "(%)", "(/)", "(+)"]

    # escape codes
    esc1 = 43
    esc2 = 44
    esc3 = 45
    esc4 = 46

    # nonalphabetical characters encoded without escape codes
    enc = {"-": 36, ".": 37, " ": 38, "$": 39, "/": 40, "+": 41, "%": 42}

    # bit patterns symbolizing start and stop
    start = 47
    stop = 47

    code_bitlength = 9

    @classmethod
    def _encode_upper(cls, char):
        """Encodes uppercase character

    :param str char:    string of length one to encode
    :return:            yields character code"""
        yield ord(char) - ord("A") + 10

    @classmethod
    def _encode_lower(cls, char):
        """Encodes lowercase character

    :param str char:    string of length one to encode
    :return:            yields two integers, escape code
                        and character code"""
        yield cls.esc4
        yield ord(char) - ord("a") + 10

    @classmethod
    def _encode_other(cls, char):
        """Encodes non-alphabetic character

    :param str char:    string of length one to encode
    :return:            yields integer of character code, in some
                        cases preceded by escape code"""
        i = ord(char)
        if char in cls.enc:
            yield cls.enc[char]
        elif i == 0:
            yield cls.esc2
            yield 30
        elif i <= 26:
            yield cls.esc1
            yield i + 9
        elif i <= 31:
            yield cls.esc2
            yield i - 17
        elif 33 <= i <= 35 or 38 <= i <= 42 or i == 44 or i == 58:
            yield cls.esc3
            yield i - 23
        elif 59 <= i <= 63:
            yield cls.esc2
            yield i - 44
        elif i == 64:
            yield cls.esc2
            yield 31
        elif 91 <= i <= 95:
            yield cls.esc2
            yield i - 71
        elif i == 96:
            yield cls.esc2
            yield 32
        elif 123 <= i <= 127:
            yield cls.esc2
            yield i - 98
        else:
            raise InternalTableError(
                "Code93 has no encoding for {!r}".format(char)
            )

    @classmethod
    def encode_char(cls, char):
        """Encodes one content character to its character codes

    :param str char:    ASCII character
    :return:            List of one or two codes"""
        if "0" <= char <= "9":
            return [ord(char) - ord("0")]
        if "A" <= char <= "Z":
            return list(cls._encode_upper(char))
        if "a" <= char <= "z":
            return list(cls._encode_lower(char))
        return list(cls._encode_other(char))

    @classmethod
    def code_characters(cls, content):
        codes = []
        yield cls.character(
            cls.pattern[cls.start], cls.code_bitlength, None,
            CharacterRole.START
        )
        for char in content:
            text = char
            for code in cls.encode_char(char):
                yield cls.character(
                    cls.lookup(cls.pattern, code), cls.code_bitlength, text
                )
                codes.append(code)
                # only the first code of an escape pair carries the text
                text = None
        for check in code93_check_values(codes):
            yield cls.character(
                cls.pattern[check], cls.code_bitlength,
                cls.values_text[check], CharacterRole.CHECK
            )
        # stop pattern followed by termination bar
        yield cls.character(
            (cls.pattern[cls.stop] << 1) | 1, cls.code_bitlength + 1, None,
            CharacterRole.STOP
        )
