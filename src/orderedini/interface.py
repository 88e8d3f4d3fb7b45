"""Interface classes exist for coder interaction, to simplify the process
behind orderedini."""

from typing import (
    Any,
    IO,
    Iterable,
    Iterator,
    Mapping,
    Self,
)
from pathlib import Path
import warnings
from charset_normalizer import from_bytes as read_from_bytes
from .exceptions_warnings import IniIOError, UnnamedSectionWarning
from .entities import Option, OptionKey, OptionValue, SectionName
from .args import Parameters
from .globals import UNNAMED_SECTION_NAME, WRITE_ENCODING
from .parser import parse_line
from .utils import OrderedMap, copy_doc
from .type_converters.converters import (
    TypeConverter,
    list_converter,
    _any_to_string,
    _type_to_converter,
)


class Section(OrderedMap[OptionKey, OptionValue]):
    """A configuration section. Holds option keys and their values in insertion
    order. Values are always stored as strings.
    """

    def insert(self, key: OptionKey, value: Any) -> OptionValue | None:
        """Insert an option. A new key is appended, an existing key keeps its position.

        Args:
            key (OptionKey): The option key.
            value (Any): The option value. Non-string values are stored as their
                string representation.

        Returns:
            OptionValue | None: The previous value or None if the key was absent.
        """
        return super().insert(str(key), _any_to_string(value))

    def to_string(self, name: str, delimiter: str) -> str:
        """Convert the Section into an ini string.

        Args:
            name (str): The section's name.
            delimiter (str): The delimiter for separating option keys and values.

        Returns:
            str: The ini string without trailing newline.
        """
        return "\n".join(
            [
                SectionName(name).to_string(),
                *(Option(k, v).to_string(delimiter) for k, v in self.items()),
            ]
        )


class _EmptySection(Section):
    """Permanently empty Section, returned for sections that don't exist."""

    def insert(self, key: OptionKey, value: Any) -> OptionValue | None:
        raise TypeError(
            "Can't add options to the empty section of a missing section name."
        )


class Ini:
    """An ini document. Holds Sections by name in insertion order."""

    def __init__(self, parameters: Parameters | None = None) -> None:
        """
        Args:
            parameters (Parameters | None, optional): Parameters for reading and
                writing. If None, default Parameters are used. Defaults to None.
        """
        self._default_parameters = parameters if parameters is not None else Parameters()
        self._sections: OrderedMap[str, Section] = OrderedMap()
        self._empty_section = _EmptySection()

    @property
    def parameters(self) -> Parameters:
        return self._default_parameters

    # ----
    # sections
    # ----

    def __iter__(self) -> Iterator[str]:
        return iter(self._sections)

    def __len__(self) -> int:
        return len(self._sections)

    def __contains__(self, name: object) -> bool:
        return name in self._sections

    def items(self) -> Iterator[tuple[str, Section]]:
        """Iterate over section names and Sections in insertion order. Option values
        may be reassigned during iteration and keep their position. Adding or
        removing sections while iterating raises a RuntimeError.
        """
        return iter(self._sections.items())

    def get_section(self, name: str) -> Section:
        """Get a Section by name.

        Args:
            name (str): The section name.

        Returns:
            Section: The Section or an empty, read-only Section if the section
                doesn't exist.
        """
        return self._sections.get(name, self._empty_section)

    def section_iter(self, name: str) -> Iterator[tuple[OptionKey, OptionValue]]:
        """Iterate over the options of a section. Yields nothing if the section
        doesn't exist."""
        return iter(self.get_section(name).items())

    def add_section(self, name: str) -> Section:
        """Get a Section by name, creating it at the end if it doesn't exist."""
        if (section := self._sections.get(name)) is None:
            section = self._sections[name] = Section()
        return section

    def remove_section(self, name: str) -> Section | None:
        """Remove a section.

        Returns:
            Section | None: The removed Section or None if it didn't exist.
        """
        return self._sections.remove(name)

    # ----
    # options
    # ----

    def set(self, section: str, key: OptionKey, value: Any) -> OptionValue | None:
        """Set an option, creating the section if necessary.

        Args:
            section (str): The section name.
            key (OptionKey): The option key.
            value (Any): The value. Non-string values are stored as their string
                representation.

        Returns:
            OptionValue | None: The previous value or None.
        """
        return self.add_section(section).insert(key, value)

    def set_vec(
        self,
        section: str,
        key: OptionKey,
        values: Iterable[Any],
        sep: str | None = None,
    ) -> OptionValue | None:
        """Set an option to a list of values.

        Args:
            section (str): The section name.
            key (OptionKey): The option key.
            values (Iterable[Any]): The values to join.
            sep (str | None, optional): Separator to join with. If None, uses
                Parameters.write_list_separator. Defaults to None.

        Returns:
            OptionValue | None: The previous value or None.
        """
        if sep is None:
            sep = self._default_parameters.write_list_separator
        return self.set(section, key, sep.join(_any_to_string(v) for v in values))

    def remove(self, section: str, key: OptionKey) -> OptionValue | None:
        """Remove an option. The section stays, even if it becomes empty.

        Returns:
            OptionValue | None: The removed value or None if it didn't exist.
        """
        if (sec := self._sections.get(section)) is None:
            return None
        return sec.remove(key)

    def get_raw(self, section: str, key: OptionKey) -> OptionValue | None:
        """Get the string value of an option or None if section or option don't
        exist."""
        return self.get_section(section).get(key)

    def get[T](
        self,
        section: str,
        key: OptionKey,
        as_type: type[T] | TypeConverter[T] = str,
    ) -> T | None:
        """Get the value of an option converted to a type.

        Args:
            section (str): The section name.
            key (OptionKey): The option key.
            as_type (type[T] | TypeConverter[T], optional): The type to convert to.
                Either a type (str, bool, int, float, complex, list, list[T] or any
                type that can be constructed from a string) or a TypeConverter.
                list and list[T] are split by Parameters.list_separator.
                Defaults to str.

        Returns:
            T | None: The converted value or None if the option doesn't exist or
                couldn't be converted.
        """
        if (raw := self.get_raw(section, key)) is None:
            return None
        return _type_to_converter(
            as_type, self._default_parameters.list_separator
        )(raw)

    def get_vec[T](
        self,
        section: str,
        key: OptionKey,
        as_type: type[T] | TypeConverter[T] = str,
    ) -> list[T] | None:
        """Get the value of an option as list, split by Parameters.list_separator.
        Cf. get_vec_with_sep."""
        return self.get_vec_with_sep(
            section, key, self._default_parameters.list_separator, as_type
        )

    def get_vec_with_sep[T](
        self,
        section: str,
        key: OptionKey,
        sep: str,
        as_type: type[T] | TypeConverter[T] = str,
    ) -> list[T] | None:
        """Get the value of an option as list.

        Args:
            section (str): The section name.
            key (OptionKey): The option key.
            sep (str): The separator between items. Whitespace around items is removed.
            as_type (type[T] | TypeConverter[T], optional): The type to convert every
                item to. Defaults to str.

        Returns:
            list[T] | None: The converted items or None if the option doesn't exist
                or any item couldn't be converted.
        """
        if (raw := self.get_raw(section, key)) is None:
            return None
        return list_converter(
            delimiter=sep, item_converter=_type_to_converter(as_type)
        )(raw)

    # ----
    # reading and writing
    # ----

    @classmethod
    def builder(cls, parameters: Parameters | None = None) -> "IniBuilder":
        """Create an IniBuilder for constructing a document by method chaining."""
        return IniBuilder(parameters)

    @classmethod
    def from_string(cls, content: str, parameters: Parameters | None = None) -> Self:
        """Parse ini content. Parsing stops at the first malformed line.

        Args:
            content (str): The ini content.
            parameters (Parameters | None, optional): Parameters for reading. Will
                be kept as default parameters of the document. Defaults to None.

        Raises:
            ParseError: IncorrectSection, IncorrectSyntax or EmptyKey for the first
                malformed line.

        Returns:
            Self: The parsed document.
        """
        ini = cls(parameters)
        _ReadIni(target=ini, content=content)
        return ini

    @classmethod
    def from_reader(cls, reader: IO[str] | IO[bytes], parameters: Parameters | None = None) -> Self:
        """Parse ini content from a text or binary stream. Cf. from_string.

        Raises:
            IniIOError: If the stream could not be read or decoded.
        """
        parameters = parameters if parameters is not None else Parameters()
        try:
            content = reader.read()
        except OSError as err:
            raise IniIOError("Could not read ini content from stream.") from err
        if isinstance(content, bytes):
            content = _decode(content, parameters.encoding)
        return cls.from_string(content, parameters)

    @classmethod
    def from_file(cls, path: str | Path, parameters: Parameters | None = None) -> Self:
        """Parse an ini file. Cf. from_string.

        Args:
            path (str | Path): Path to the ini file. If Parameters.encoding is None,
                its encoding is detected.
            parameters (Parameters | None, optional): Parameters for reading.
                Defaults to None.

        Raises:
            IniIOError: If the file could not be read or decoded.
        """
        parameters = parameters if parameters is not None else Parameters()
        try:
            payload = Path(path).read_bytes()
        except OSError as err:
            raise IniIOError(f"Could not read '{path}'.") from err
        return cls.from_string(_decode(payload, parameters.encoding), parameters)

    def to_string(self) -> str:
        """Convert the document into ini content. Sections are separated by one empty
        line, there is no trailing newline. Comments are not written.

        Returns:
            str: The ini content.
        """
        delimiter = self._default_parameters.option_delimiters[0]
        return "\n\n".join(
            section.to_string(name, delimiter) for name, section in self.items()
        )

    def to_writer(self, writer: IO[str] | IO[bytes]) -> None:
        """Write the ini content to a text or binary stream.

        Raises:
            IniIOError: If the stream could not be written to.
        """
        content = self.to_string()
        try:
            try:
                writer.write(content)  # type: ignore[arg-type]
            except TypeError:
                # binary stream
                writer.write(  # type: ignore[arg-type]
                    content.encode(self._default_parameters.encoding or WRITE_ENCODING)
                )
        except OSError as err:
            raise IniIOError("Could not write ini content to stream.") from err

    def to_file(self, path: str | Path) -> None:
        """Write the ini content to a file.

        Raises:
            IniIOError: If the file could not be written.
        """
        try:
            Path(path).write_text(
                self.to_string(),
                encoding=self._default_parameters.encoding or WRITE_ENCODING,
            )
        except OSError as err:
            raise IniIOError(f"Could not write '{path}'.") from err

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self.items())!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Ini):
            return NotImplemented
        return self._sections == other._sections


def _decode(payload: bytes, encoding: str | None) -> str:
    """Decode ini content, detecting the encoding if none is given."""
    if not payload:
        return ""
    if encoding is not None:
        try:
            return payload.decode(encoding)
        except (UnicodeDecodeError, LookupError) as err:
            raise IniIOError(f"Could not decode ini content as {encoding}.") from err
    if (best := read_from_bytes(payload).best()) is None:
        raise IniIOError("Could not detect the encoding of the ini content.")
    return str(best).removeprefix("\ufeff")


@copy_doc(Ini.from_string)
def parse_document(content: str, parameters: Parameters | None = None) -> Ini:
    return Ini.from_string(content, parameters)


@copy_doc(Ini.to_string)
def to_text(ini: Ini) -> str:
    return ini.to_string()


class _ReadIni:

    def __init__(self, target: Ini, content: str) -> None:
        """Read ini content into target, line by line. Sections are only created
        once they get their first option. For more info cf. Ini.from_string."""
        self.target = target
        self.parameters = target.parameters

        # ----
        # define variables for read process
        # ----
        self.current_section_name: SectionName | None = None
        """None as long as no section name was read."""
        self.current_line_number: int = 0
        self.warned_unnamed: bool = False
        # ----

        for self.current_line_number, line in enumerate(content.split("\n"), start=1):
            match parse_line(line, self.current_line_number, self.parameters):
                case SectionName() as section_name:
                    self.current_section_name = section_name
                case Option() as option:
                    self._handle_option(option)
                case _:
                    # blank line or comment
                    pass

    def _handle_option(self, option: Option) -> None:
        """Add an option to the current section (creating the section if necessary).

        Args:
            option (Option): Extracted option to handle.
        """
        if self.current_section_name is None:
            if self.parameters.warn_unnamed and not self.warned_unnamed:
                warnings.warn(
                    f"Line {self.current_line_number} is stored in the unnamed section"
                    " because no section name was read before.",
                    UnnamedSectionWarning,
                )
                self.warned_unnamed = True
            section_name = UNNAMED_SECTION_NAME
        else:
            section_name = self.current_section_name
        self.target.add_section(str(section_name)).insert(option.key, option.value)


class IniBuilder:
    """Builds an Ini by method chaining. Keeps track of the section that items are
    added to."""

    def __init__(self, parameters: Parameters | None = None) -> None:
        self._ini = Ini(parameters)
        self._current_section_name: str = UNNAMED_SECTION_NAME

    def section(self, name: str) -> Self:
        """Select the section that following items are added to. The section is
        created with its first item."""
        self._current_section_name = name
        return self

    def item(self, key: OptionKey, value: Any) -> Self:
        """Add an option to the current section (or update it in place)."""
        self._ini.set(self._current_section_name, key, value)
        return self

    def item_vec(self, key: OptionKey, values: Iterable[Any]) -> Self:
        """Add a list option joined by Parameters.write_list_separator."""
        self._ini.set_vec(self._current_section_name, key, values)
        return self

    def item_vec_with_sep(self, key: OptionKey, values: Iterable[Any], sep: str) -> Self:
        """Add a list option joined by sep."""
        self._ini.set_vec(self._current_section_name, key, values, sep)
        return self

    def items(self, items: Mapping[Any, Any] | Iterable[tuple[Any, Any]]) -> Self:
        """Add several options to the current section."""
        if isinstance(items, Mapping):
            items = items.items()
        for key, value in items:
            self.item(key, value)
        return self

    def clear(self) -> Self:
        """Remove the current section."""
        self._ini.remove_section(self._current_section_name)
        return self

    def erase(self, key: OptionKey) -> Self:
        """Remove an option of the current section."""
        self._ini.remove(self._current_section_name, key)
        return self

    def build(self) -> Ini:
        """Get the built document."""
        return self._ini
