from collections import namedtuple
from enum import Enum


class CharacterRole(Enum):
    CONTENT = "content"
    CHECK = "check"
    START = "start"
    MIDDLE = "middle"
    STOP = "stop"
    SEPARATOR = "separator"
    CONTROL = "control"


MARKER_ROLES = frozenset((
    CharacterRole.START,
    CharacterRole.MIDDLE,
    CharacterRole.STOP,
    CharacterRole.SEPARATOR,
))


class CaptionZone(Enum):
    LEFT_QUIET_ZONE = "left_quiet_zone"
    LEFT_NUMBER_ZONE = "left_number_zone"
    RIGHT_NUMBER_ZONE = "right_number_zone"
    RIGHT_QUIET_ZONE = "right_quiet_zone"
    TEXT_ZONE = "text_zone"


class CodeCharacter(namedtuple("CodeCharacter", "role bits text")):
    """One symbol unit of a barcode.

    bits is a tuple of modules, 1 for black bar and 0 for background.
    text is the character shown in the caption, or None."""
    __slots__ = ()

    @property
    def width(self):
        return len(self.bits)

    @property
    def is_marker(self):
        return self.role in MARKER_ROLES

    @property
    def modules(self):
        """Run lengths of bars and spaces, alternating and starting with
a bar. A character starting with a space has zero width first bar."""
        runs = []
        expected = 1
        length = 0
        for bit in self.bits:
            if bit != expected:
                runs.append(length)
                expected = bit
                length = 0
            length += 1
        runs.append(length)
        return tuple(runs)

    def __str__(self):
        return "".join(str(bit) for bit in self.bits)


class Code(namedtuple("Code", "symbology content characters")):
    """Encoded barcode: normalized content and code characters in render
order, left to right. Built by linebars.encoding.encode."""
    __slots__ = ()

    @property
    def width(self):
        """Symbol width in modules, quiet zones excluded"""
        return sum(character.width for character in self.characters)

    @property
    def bits(self):
        return tuple(
            bit for character in self.characters for bit in character.bits
        )

    @property
    def check_characters(self):
        return tuple(
            character for character in self.characters
            if character.role is CharacterRole.CHECK
        )

    @property
    def check_text(self):
        return "".join(
            character.text or "" for character in self.check_characters
        )

    @property
    def full_content(self):
        return self.content + self.check_text
