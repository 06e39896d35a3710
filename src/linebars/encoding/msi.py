from ..checksum import msi_mod10
from ..code import CharacterRole
from ..symbology import Symbology
from .encoding import BarcodeEncoding


class Msi(BarcodeEncoding):
    """Encoder for MSI (Modified Plessey) with modulo 10 check digit.

    Every digit is written as 4 binary coded bits, most significant first."""
    symbology = Symbology.MSI

    one = "110"
    zero = "100"

    start = "110"
    stop = "1001"

    code_bitlength = 4

    @classmethod
    def _digit(cls, char, role=CharacterRole.CONTENT):
        bits = cls.bits(ord(char) - ord("0"), cls.code_bitlength)
        return cls.bit_string_character(
            "".join(cls.one if bit else cls.zero for bit in bits), char, role
        )

    @classmethod
    def code_characters(cls, content):
        yield cls.bit_string_character(cls.start, None, CharacterRole.START)
        for char in content:
            yield cls._digit(char)
        check = msi_mod10([ord(char) - ord("0") for char in content])
        yield cls._digit(str(check), CharacterRole.CHECK)
        yield cls.bit_string_character(cls.stop, None, CharacterRole.STOP)
