"""Ini entities are either a blank line, a section name or an option."""

from typing import overload, Self, Final
from dataclasses import dataclass
import re
from .exceptions_warnings import ExtractionError
from .globals import VALID_MARKERS, SECTION_OPEN, SECTION_CLOSE


class Blank:
    """An empty line or a line holding only a comment."""

    _instance: "Blank | None" = None

    def __new__(cls) -> Self:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "BLANK"


BLANK: Final = Blank()


type OptionValue = str
"""An option's value."""
type OptionKey = str
"""An option's key."""


@dataclass(slots=True, frozen=True)
class Option:
    """Option holding a key and its value as string."""

    key: OptionKey
    value: OptionValue = ""

    def to_string(self, delimiter: VALID_MARKERS) -> str:
        """Convert the Option into an ini string.

        Args:
            delimiter (VALID_MARKERS): The delimiter to use for separating option key
                and value.

        Returns:
            str: The ini string.
        """
        return f"{self.key} {delimiter} {self.value}"

    @classmethod
    def from_string(
        cls,
        string: str,
        delimiter: VALID_MARKERS | tuple[VALID_MARKERS, ...],
    ) -> Self:
        """Create an Option from a string.

        Args:
            string (str): The string that contains the option key and value.
            delimiter (VALID_MARKERS | tuple[VALID_MARKERS, ...]): One or more
                delimiters that can separate option key and value. The first
                occurrence of any of them is used.

        Raises:
            ExtractionError: If the string holds no delimiter or the key is empty.

        Returns:
            Self: A new option with the extracted key and value.
        """
        if not isinstance(delimiter, tuple):
            delimiter = (delimiter,)
        # extracting left and right side of delimiter
        lr = re.split(
            rf"[{''.join(re.escape(deli) for deli in delimiter)}]",
            string,
            maxsplit=1,
        )

        if len(lr) == 2 and (key := lr[0].strip()):
            return cls(key=key, value=lr[1].strip())

        raise ExtractionError("Option could not be extracted.")


class SectionName(str):
    """A configuration section's name."""

    @overload
    def __new__(cls, name: str = ..., name_with_brackets: None = ...) -> Self: ...

    @overload
    def __new__(cls, name: None = ..., name_with_brackets: str = ...) -> Self: ...

    def __new__(
        cls, name: str | None = None, name_with_brackets: str | None = None
    ) -> Self:
        """
        Args:
            name (str | None, optional): Name of the section. Should be
                None if name_with_brackets is provided, otherwise name_with_brackets
                will be ignored. Defaults to None.
            name_with_brackets (str | None, optional): The name of the section within
                brackets (to extract the name from). If provided, name argument should
                be None, otherwise will be ignored. Defaults to None.
        """
        if name is not None:
            return super().__new__(cls, name)
        if name_with_brackets is not None:
            content = name_with_brackets.strip()
            if content.startswith(SECTION_OPEN) and content.endswith(SECTION_CLOSE):
                # remove all bracket characters at both ends, "[[name]]" is "name"
                section_name = content.strip(SECTION_OPEN + SECTION_CLOSE)
                return super().__new__(cls, section_name.strip())
            raise ExtractionError(
                f"Could not extract section name from {name_with_brackets}"
            )
        raise ValueError(
            "name or name_with_brackets must be provided for"
            " initialization of a SectionName"
        )

    def to_string(self) -> str:
        """Convert the SectionName into an ini string."""
        return f"{SECTION_OPEN}{self}{SECTION_CLOSE}"


type ParsedLine = Blank | SectionName | Option
"""Result of parsing a single line."""
