from ..code import CharacterRole
from ..symbology import Symbology
from .encoding import BarcodeEncoding


class TwoOfFive(BarcodeEncoding):
    """Common table of the 2 of 5 family: every digit has two wide out of
five elements."""
    elements = {
        "0": "nnwwn", "1": "wnnnw", "2": "nwnnw", "3": "wwnnn", "4": "nnwnw",
        "5": "wnwnn", "6": "nwwnn", "7": "nnnww", "8": "wnnwn", "9": "nwnwn",
    }

    # wide element width in modules
    wide = 3


class Interleaved2of5(TwoOfFive):
    """Digit pairs, first digit in bars, second digit in spaces"""
    symbology = Symbology.INTERLEAVED_2OF5

    start = "1010"
    stop = "11101"

    @classmethod
    def code_characters(cls, content):
        yield cls.bit_string_character(cls.start, None, CharacterRole.START)
        for i in range(0, len(content), 2):
            pair = content[i:i + 2]
            bars = cls.lookup(cls.elements, pair[0])
            spaces = cls.lookup(cls.elements, pair[1])
            interleaved = "".join(
                bar + space for bar, space in zip(bars, spaces)
            )
            yield cls.bit_string_character(
                cls.wide_narrow(interleaved, cls.wide), pair
            )
        yield cls.bit_string_character(cls.stop, None, CharacterRole.STOP)


class Standard2of5(TwoOfFive):
    """Industrial 2 of 5, information in bars only, spaces are narrow"""
    symbology = Symbology.STANDARD_2OF5

    start = "wwn"
    stop = "wnw"

    @classmethod
    def _bars(cls, elements, trailing_space=True):
        # every bar followed by narrow space
        bits = "0".join(
            cls.wide_narrow(element, cls.wide) for element in elements
        )
        return bits + "0" if trailing_space else bits

    @classmethod
    def code_characters(cls, content):
        yield cls.bit_string_character(
            cls._bars(cls.start), None, CharacterRole.START
        )
        for char in content:
            yield cls.bit_string_character(
                cls._bars(cls.lookup(cls.elements, char)), char
            )
        yield cls.bit_string_character(
            cls._bars(cls.stop, False), None, CharacterRole.STOP
        )
