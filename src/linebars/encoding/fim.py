from ..symbology import Symbology
from .encoding import BarcodeEncoding


class Fim(BarcodeEncoding):
    """Facing Identification Mark of US postal mail, one of five fixed
patterns"""
    symbology = Symbology.FIM

    patterns = {
        "A": 0b110010011,
        "B": 0b101101101,
        "C": 0b110101011,
        "D": 0b111010111,
        "E": 0b101000101,
    }

    code_bitlength = 9

    @classmethod
    def code_characters(cls, content):
        yield cls.character(
            cls.lookup(cls.patterns, content), cls.code_bitlength, content
        )
