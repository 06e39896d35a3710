from ..checksum import mod43
from ..code import CharacterRole
from ..symbology import Symbology
from .encoding import BarcodeEncoding


class Code39(BarcodeEncoding):
    """Encoder for Code 39 barcodes, wide elements twice the narrow ones."""
    symbology = Symbology.CODE39

    # character values, index is also the modulo 43 value
    alphabet = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ-. $/+%"

    # stripe patterns, 1 for black, 0 for background white
    patterns = {
        "0": 0b101001101101, "1": 0b110100101011, "2": 0b101100101011,
        "3": 0b110110010101, "4": 0b101001101011, "5": 0b110100110101,
        "6": 0b101100110101, "7": 0b101001011011, "8": 0b110100101101,
        "9": 0b101100101101, "A": 0b110101001011, "B": 0b101101001011,
        "C": 0b110110100101, "D": 0b101011001011, "E": 0b110101100101,
        "F": 0b101101100101, "G": 0b101010011011, "H": 0b110101001101,
        "I": 0b101101001101, "J": 0b101011001101, "K": 0b110101010011,
        "L": 0b101101010011, "M": 0b110110101001, "N": 0b101011010011,
        "O": 0b110101101001, "P": 0b101101101001, "Q": 0b101010110011,
        "R": 0b110101011001, "S": 0b101101011001, "T": 0b101011011001,
        "U": 0b110010101011, "V": 0b100110101011, "W": 0b110011010101,
        "X": 0b100101101011, "Y": 0b110010110101, "Z": 0b100110110101,
        "-": 0b100101011011, ".": 0b110010101101, " ": 0b100110101101,
        "$": 0b100100100101, "/": 0b100100101001, "+": 0b100101001001,
        "%": 0b101001001001,
    }

    # start and stop character "*"
    start_stop = 0b100101101101

    code_bitlength = 12

    with_check_character = False

    @classmethod
    def _char(cls, char, role=CharacterRole.CONTENT):
        # narrow space between characters
        pattern = cls.lookup(cls.patterns, char) << 1
        return cls.character(pattern, cls.code_bitlength + 1, char, role)

    @classmethod
    def code_characters(cls, content):
        yield cls.character(
            cls.start_stop << 1, cls.code_bitlength + 1, None,
            CharacterRole.START
        )
        for char in content:
            yield cls._char(char)
        if cls.with_check_character:
            check = mod43(cls.alphabet.index(char) for char in content)
            yield cls._char(cls.alphabet[check], CharacterRole.CHECK)
        yield cls.character(
            cls.start_stop, cls.code_bitlength, None, CharacterRole.STOP
        )


class Code39Mod43(Code39):
    symbology = Symbology.CODE39_MOD43
    with_check_character = True

