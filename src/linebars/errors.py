class BarcodeError(Exception):
    """Base class of all errors raised by linebars"""


class EncodingError(BarcodeError):
    """Content could not be turned into a Code"""


class ContentError(EncodingError, ValueError):
    """Content string is not encodable by the requested symbology.

    :param str message:     Human readable reason
    :param symbology:       Symbology the content was validated against"""
    def __init__(self, message, symbology=None):
        super().__init__(message)
        self.symbology = symbology


class EmptyContentError(ContentError):
    pass


class InvalidCharacterError(ContentError):
    def __init__(self, index, character, symbology=None):
        super().__init__(
            "Character {!r} at index {} can't be encoded in {}".format(
                character, index, _name(symbology)
            ),
            symbology
        )
        self.index = index
        self.character = character


class InvalidLengthError(ContentError):
    def __init__(self, length, expected, symbology=None):
        super().__init__(
            "Invalid {} content length {}. Expected {}".format(
                _name(symbology), length, expected
            ),
            symbology
        )
        self.length = length


class ChecksumMismatchError(ContentError):
    def __init__(self, expected, supplied, symbology=None):
        super().__init__(
            "Supplied check digit {!r} is invalid, expected {!r}".format(
                supplied, expected
            ),
            symbology
        )
        self.expected = expected
        self.supplied = supplied


class OutOfRangeError(ContentError):
    pass


class InternalTableError(EncodingError, RuntimeError):
    """Validated content has no pattern in the symbology tables.

    Never a user error: validator and tables disagree."""


class LayoutError(BarcodeError, ValueError):
    """Code can't be laid out with the given options"""


class ConfigurationError(LayoutError):
    """A rendering option has an invalid value"""


def _name(symbology):
    if symbology is None:
        return "this symbology"
    return getattr(symbology, "name", str(symbology))
