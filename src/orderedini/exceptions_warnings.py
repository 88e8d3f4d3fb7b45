"""orderedini-specific exceptions and warnings"""

# ---------- #
# Exceptions
# ---------- #


class IniError(Exception):
    """Base class of all errors raised by orderedini."""


class ParseError(IniError):
    """Raised when a line of ini content is malformed.

    Args:
        line (int): The 1-based number of the offending line.
    """

    description = "Parse error"

    def __init__(self, line: int) -> None:
        self.line = line
        super().__init__(f"{self.description} at line {line}")

    def __reduce__(self):
        return (self.__class__, (self.line,))


class IncorrectSection(ParseError):
    """Raised when a line starts with '[' but has no closing ']'."""

    description = "Incorrect section syntax"


class IncorrectSyntax(ParseError):
    """Raised when a line is neither empty, a section name nor an option."""

    description = "Incorrect syntax"


class EmptyKey(ParseError):
    """Raised when an option's key is empty."""

    description = "Key is empty"


class IniIOError(IniError):
    """Raised when ini content could not be read or written. The underlying error is
    available as __cause__."""


class ExtractionError(Exception):
    """Raised when an entity could not be extracted."""


class WrongType(Exception):
    """Raised by converter processors when a string can't be converted."""


# ---------- #
# Warnings
# ---------- #


class IniStructureWarning(Warning):
    """Raised when the ini content has an unusual but readable structure."""


class UnnamedSectionWarning(IniStructureWarning):
    """Raised when options are encountered before any section name."""
