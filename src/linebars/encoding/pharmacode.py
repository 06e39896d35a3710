from ..symbology import Symbology
from .encoding import BarcodeEncoding


class Pharmacode(BarcodeEncoding):
    """Encoder for one track Pharmacode, an integer written as narrow and
wide bars. There are no markers and no caption."""
    symbology = Symbology.PHARMACODE

    narrow = "1"
    wide = "111"
    space = "00"

    @classmethod
    def bar_widths(cls, value):
        """Bars of value from the right, then reversed to render order"""
        bars = []
        while value > 0:
            if value % 2 == 0:
                bars.append(cls.wide)
                value = (value - 2) // 2
            else:
                bars.append(cls.narrow)
                value = (value - 1) // 2
        bars.reverse()
        return bars

    @classmethod
    def code_characters(cls, content):
        bars = cls.bar_widths(int(content))
        for i, bar in enumerate(bars):
            if i < len(bars) - 1:
                bar += cls.space
            yield cls.bit_string_character(bar)
