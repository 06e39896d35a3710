from ..checksum import code128_checksum
from ..code import CharacterRole
from ..symbology import Symbology
from .encoding import BarcodeEncoding


class Code128(BarcodeEncoding):
    """
    Encoder for Code128 barcodes, switching between A, B and C alphabets
    to keep the symbol short.
    """
    symbology = Symbology.CODE128

    # stripe patterns written as a number, 1 bit for black stripe,
    # 0 bit for white background, 11 bits long
    pattern = [
        1740, 1644, 1638, 1176, 1164, 1100, 1224, 1220, 1124, 1608, 1604,
        1572, 1436, 1244, 1230, 1484, 1260, 1254, 1650, 1628, 1614, 1764,
        1652, 1902, 1868, 1836, 1830, 1892, 1844, 1842, 1752, 1734, 1590,
        1304, 1112, 1094, 1416, 1128, 1122, 1672, 1576, 1570, 1464, 1422,
        1134, 1496, 1478, 1142, 1910, 1678, 1582, 1768, 1762, 1774, 1880,
        1862, 1814, 1896, 1890, 1818, 1914, 1602, 1930, 1328, 1292, 1200,
        1158, 1068, 1062, 1424, 1412, 1232, 1218, 1076, 1074, 1554, 1616,
        1978, 1556, 1146, 1340, 1212, 1182, 1508, 1268, 1266, 1956, 1940,
        1938, 1758, 1782, 1974, 1400, 1310, 1118, 1512, 1506, 1960, 1954,
        1502, 1518, 1886, 1966, 1668, 1680, 1692
    ]

    # start pattern, different for every encoding
    start = {"A": 103, "B": 104, "C": 105}

    # patterns for switching from one encoding to another,
    # same code from either of the other two alphabets
    switch_to = {"A": 101, "B": 100, "C": 99}

    # stop pattern including termination bar, 13 bits long
    stop = 6379

    # bit length of non-control characters
    code_bitlength = 11

    @classmethod
    def _enc_A(cls, char):
        """Encode single character from A alphabet

        :param str char:    A character
        :return:           Character code integer"""
        code = ord(char)
        if code < 32:
            return code + 64
        return code - 32

    @classmethod
    def _enc_B(cls, char):
        """Encode single character from B alphabet

        :param str char:    A character
        :return:           Character code integer"""
        return ord(char) - 32

    @classmethod
    def _enc_C(cls, two_chars):
        """Encode pair of integer digit characters into C alphabet code

        :param str char:    Two digit characters
        :return:            Character code integer
        """
        return int(two_chars)

    @classmethod
    def _in_A(cls, char):
        return ord(char) < 96

    @classmethod
    def _in_B(cls, char):
        return 32 <= ord(char) < 128

    @classmethod
    def _digit_run(cls, s, i):
        end = i
        while end < len(s) and "0" <= s[end] <= "9":
            end += 1
        return end - i

    @classmethod
    def _preferred(cls, s, i):
        """A if a control character comes before any lowercase one"""
        for char in s[i:]:
            if not cls._in_B(char):
                return "A"
            if not cls._in_A(char):
                return "B"
        return "B"

    @classmethod
    def encode_auto(cls, s):
        """Chooses alphabets and encodes string to character codes

        :param str s:       ASCII string
        :return:            Yields (code, text, role) of every character,
                            start character included"""
        run = cls._digit_run(s, 0)
        if run >= 4 or (run == len(s) and run % 2 == 0):
            alphabet = "C"
        else:
            alphabet = cls._preferred(s, 0)
        yield cls.start[alphabet], None, CharacterRole.START

        i = 0
        while i < len(s):
            run = cls._digit_run(s, i)
            if alphabet == "C":
                if run >= 2:
                    yield cls._enc_C(s[i:i + 2]), s[i:i + 2], \
                        CharacterRole.CONTENT
                    i += 2
                    continue
                alphabet = cls._preferred(s, i)
                yield cls.switch_to[alphabet], None, CharacterRole.CONTROL
                continue
            if run >= 6 or (run >= 4 and i + run == len(s)):
                if run % 2:
                    # odd digit stays in current alphabet
                    yield cls._encode_one(alphabet, s[i]), s[i], \
                        CharacterRole.CONTENT
                    i += 1
                alphabet = "C"
                yield cls.switch_to[alphabet], None, CharacterRole.CONTROL
                continue
            char = s[i]
            if alphabet == "A" and not cls._in_A(char):
                alphabet = "B"
                yield cls.switch_to[alphabet], None, CharacterRole.CONTROL
            elif alphabet == "B" and not cls._in_B(char):
                alphabet = "A"
                yield cls.switch_to[alphabet], None, CharacterRole.CONTROL
            yield cls._encode_one(alphabet, char), char, CharacterRole.CONTENT
            i += 1

    @classmethod
    def _encode_one(cls, alphabet, s):
        """Encode a character or pair of digits into character code
of chosen alphabet

        :param str alphabet: "A", "B" or "C" alphabet
        :param str s:        Character or pair of digits
        :return:             Character code (integer)"""
        if alphabet == "A":
            return cls._enc_A(s)
        elif alphabet == "B":
            return cls._enc_B(s)
        elif alphabet == "C":
            return cls._enc_C(s)
        raise ValueError("Unknown encoding: {!r}".format(alphabet))

    @classmethod
    def code_characters(cls, content):
        codes = []
        for code, text, role in cls.encode_auto(content):
            yield cls.character(
                cls.lookup(cls.pattern, code), cls.code_bitlength, text, role
            )
            codes.append(code)
        checksum = code128_checksum(codes)
        yield cls.character(
            cls.pattern[checksum], cls.code_bitlength, None,
            CharacterRole.CHECK
        )
        yield cls.character(cls.stop, 13, None, CharacterRole.STOP)
