from ..checksum import code11_check_values
from ..code import CharacterRole
from ..symbology import Symbology
from .encoding import BarcodeEncoding


class Code11(BarcodeEncoding):
    """Encoder for Code 11 barcodes.

    Characters have different widths, wide elements are two modules."""
    symbology = Symbology.CODE11

    alphabet = "0123456789-"

    patterns = {
        "0": "101011", "1": "1101011", "2": "1001011", "3": "1100101",
        "4": "1011011", "5": "1101101", "6": "1001101", "7": "1010011",
        "8": "1101001", "9": "110101", "-": "101101",
    }

    start_stop = "1011001"

    # narrow space between characters
    gap = "0"

    @classmethod
    def code_characters(cls, content):
        yield cls.bit_string_character(
            cls.start_stop + cls.gap, None, CharacterRole.START
        )
        for char in content:
            yield cls.bit_string_character(
                cls.lookup(cls.patterns, char) + cls.gap, char
            )
        values = [cls.alphabet.index(char) for char in content]
        for check in code11_check_values(values):
            char = cls.alphabet[check]
            yield cls.bit_string_character(
                cls.patterns[char] + cls.gap, char, CharacterRole.CHECK
            )
        yield cls.bit_string_character(
            cls.start_stop, None, CharacterRole.STOP
        )
