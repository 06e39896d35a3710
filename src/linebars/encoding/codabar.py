from ..code import CharacterRole
from ..symbology import Symbology
from .encoding import BarcodeEncoding


class Codabar(BarcodeEncoding):
    """Encoder for Codabar. Content starts and ends with one of the start/stop
characters A-D, there is no check character."""
    symbology = Symbology.CODABAR

    patterns = {
        "0": "101010011", "1": "101011001", "2": "101001011",
        "3": "110010101", "4": "101101001", "5": "110101001",
        "6": "100101011", "7": "100101101", "8": "100110101",
        "9": "110100101", "-": "101001101", "$": "101100101",
        ":": "1101011011", "/": "1101101011", ".": "1101101101",
        "+": "1011011011", "A": "1011001001", "B": "1001001011",
        "C": "1010010011", "D": "1010011001",
    }

    gap = "0"

    @classmethod
    def code_characters(cls, content):
        last = len(content) - 1
        for i, char in enumerate(content):
            pattern = cls.lookup(cls.patterns, char)
            if i == 0:
                yield cls.bit_string_character(
                    pattern + cls.gap, char, CharacterRole.START
                )
            elif i == last:
                yield cls.bit_string_character(
                    pattern, char, CharacterRole.STOP
                )
            else:
                yield cls.bit_string_character(pattern + cls.gap, char)
