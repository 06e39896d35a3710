import logging
from abc import ABC, abstractmethod

from ..code import CaptionZone, CharacterRole, Code, CodeCharacter
from ..errors import InternalTableError
from ..validation import validate

logger = logging.getLogger(__name__)


class BarcodeEncoding(ABC):
    """Linear barcode base class"""
    symbology = None

    @classmethod
    def bits(cls, number, bit_length):
        for shift in range(bit_length - 1, -1, -1):
            yield (number >> shift) & 1

    @classmethod
    def character(cls, number, bit_length, text=None,
                  role=CharacterRole.CONTENT):
        """Code character from pattern written as a number"""
        return CodeCharacter(role, tuple(cls.bits(number, bit_length)), text)

    @classmethod
    def bit_string_character(cls, bit_string, text=None,
                             role=CharacterRole.CONTENT):
        """Code character from pattern written as string of 0 and 1"""
        return CodeCharacter(
            role, tuple(1 if bit == "1" else 0 for bit in bit_string), text
        )

    @classmethod
    def wide_narrow(cls, elements, wide, bar=True):
        """Expands n/w element widths to a bit string.

    :param str elements:    Element widths, "n" narrow, "w" wide, starting
                            with a bar unless bar is False
    :param int wide:        Width of a wide element in modules
    :return:                String of 0 and 1"""
        out = []
        for element in elements:
            out.append(("1" if bar else "0") * (wide if element == "w" else 1))
            bar = not bar
        return "".join(out)

    @classmethod
    def lookup(cls, table, key):
        try:
            return table[key]
        except (KeyError, IndexError):
            raise InternalTableError(
                "{} has no pattern for {!r}".format(cls.__name__, key)
            ) from None

    @classmethod
    def encode(cls, content, strict=False):
        """Validates content and builds its Code.

    :param str content:     Content string
    :param bool strict:     Reject content instead of normalizing it
    :return:                Code"""
        normalized = validate(content, cls.symbology, strict)
        characters = tuple(cls.code_characters(normalized))
        if not characters:
            raise InternalTableError(
                "{} produced no characters for {!r}".format(
                    cls.__name__, normalized
                )
            )
        code = Code(cls.symbology, normalized, characters)
        logger.debug(
            "Encoded %r as %s, %d characters, %d modules",
            normalized, cls.symbology.name, len(characters), code.width
        )
        return code

    @classmethod
    @abstractmethod
    def code_characters(cls, content):
        """Yields code characters of validated content in render order"""
        raise NotImplementedError

    @classmethod
    def caption_text(cls, code, zone, show_check_digits=False):
        """Caption text of one caption zone, or None.

    Symbologies without left/right split print content in the text zone."""
        if zone is not CaptionZone.TEXT_ZONE:
            return None
        roles = (CharacterRole.CONTENT, CharacterRole.CHECK) \
            if show_check_digits else (CharacterRole.CONTENT,)
        text = "".join(
            character.text for character in code.characters
            if character.role in roles and character.text is not None
        )
        return text or None
