from .globals import (
    VALID_MARKERS,
    DEFAULT_COMMENT_PREFIX,
    DEFAULT_OPTION_DELIMITER,
    DEFAULT_LIST_SEPARATOR,
    DEFAULT_WRITE_LIST_SEPARATOR,
    SECTION_OPEN,
    SECTION_CLOSE,
)
import copy


class Parameters:
    """Parameters for reading and writing."""

    def __init__(
        self,
        comment_prefixes: VALID_MARKERS | tuple[VALID_MARKERS, ...] = DEFAULT_COMMENT_PREFIX,
        option_delimiters: VALID_MARKERS | tuple[VALID_MARKERS, ...] = DEFAULT_OPTION_DELIMITER,
        list_separator: str = DEFAULT_LIST_SEPARATOR,
        write_list_separator: str = DEFAULT_WRITE_LIST_SEPARATOR,
        encoding: str | None = None,
        warn_unnamed: bool = True,
    ) -> None:
        """
        Args:
            comment_prefixes (VALID_MARKERS | tuple[VALID_MARKERS,...], optional):
                Character(s) that start a comment. Everything from the first of them
                up to the end of the line is discarded. Defaults to ";".
            option_delimiters (VALID_MARKERS | tuple[VALID_MARKERS,...], optional):
                Delimiter character(s) that delimit option keys from values. The first
                occurrence of any of them splits the line. If multiple are given, the
                first will be taken for writing. Defaults to "=".
            list_separator (str, optional): Separator for splitting option values into
                lists. Defaults to ",".
            write_list_separator (str, optional): Separator for joining lists into
                option values. Defaults to ", ".
            encoding (str | None, optional): Encoding for reading and writing files
                and binary streams. If None, the encoding is detected on reading and
                utf-8 is used for writing. Defaults to None.
            warn_unnamed (bool, optional): Whether to issue an UnnamedSectionWarning
                when options are read before any section name. Defaults to True.
        """
        # because comment_prefixes and option_delimiters check each other on setting
        self._comment_prefixes = ()
        self._option_delimiters = ()
        self._list_separator = ""

        self.comment_prefixes = comment_prefixes
        self.option_delimiters = option_delimiters
        self.list_separator = list_separator
        self.write_list_separator = write_list_separator
        self.encoding = encoding
        self.warn_unnamed = warn_unnamed

    @property
    def comment_prefixes(self) -> tuple[VALID_MARKERS, ...]:
        return self._comment_prefixes

    @comment_prefixes.setter
    def comment_prefixes(
        self, value: VALID_MARKERS | tuple[VALID_MARKERS, ...]
    ) -> None:
        if not isinstance(value, tuple):
            value = (value,)
        self.verify_marker(value, "comment prefix")
        self.verify_between_markers(comment_prefixes=value)
        self._comment_prefixes = value

    @property
    def option_delimiters(self) -> tuple[VALID_MARKERS, ...]:
        return self._option_delimiters

    @option_delimiters.setter
    def option_delimiters(
        self, value: VALID_MARKERS | tuple[VALID_MARKERS, ...]
    ) -> None:
        if not isinstance(value, tuple):
            value = (value,)
        if not value:
            raise ValueError("At least one option delimiter is required.")
        self.verify_marker(value, "option delimiter")
        self.verify_between_markers(option_delimiters=value)
        self._option_delimiters = value

    @property
    def list_separator(self) -> str:
        return self._list_separator

    @list_separator.setter
    def list_separator(self, value: str) -> None:
        if not value:
            raise ValueError("The list separator must not be empty.")
        self.verify_between_markers(list_separator=value)
        self._list_separator = value

    @property
    def write_list_separator(self) -> str:
        return self._write_list_separator

    @write_list_separator.setter
    def write_list_separator(self, value: str) -> None:
        if not value:
            raise ValueError("The write list separator must not be empty.")
        self._write_list_separator = value

    def verify_marker(self, marker: tuple[str, ...], name: str) -> None:
        for val in marker:
            if len(val) != 1:
                raise ValueError(f"A {name} must be a single character.")
            if val in (SECTION_OPEN, SECTION_CLOSE):
                raise ValueError(
                    f"'{val}' (section name identifier) is not allowed as a {name}."
                )
            if "," in val:
                raise ValueError(f"Comma is not allowed inside of a {name}.")

    def verify_between_markers(
        self,
        comment_prefixes: tuple[str, ...] | None = None,
        option_delimiters: tuple[str, ...] | None = None,
        list_separator: str | None = None,
    ) -> None:
        """Check that markers don't collide. Markers that are not passed are taken
        from self, so candidates can be checked before they are set."""
        if comment_prefixes is None:
            comment_prefixes = self.comment_prefixes
        if option_delimiters is None:
            option_delimiters = self.option_delimiters
        if list_separator is None:
            list_separator = self.list_separator

        cps = set(comment_prefixes)
        if cps.intersection(option_delimiters):
            raise ValueError(
                "Comment prefixes and option delimiters have to be distinct from each other."
            )
        if cps.intersection(list_separator):
            raise ValueError("The list separator must not contain a comment prefix.")

    def update(self, **kwargs) -> None:
        """Update parameters with kwargs. Either all of them are applied or, if one
        is invalid, none.

        Args:
            **kwargs: Keyword-arguments to update the parameters with.
        """
        candidate = copy.copy(self)
        for k, v in kwargs.items():
            setattr(candidate, k, v)
        self.__dict__.update(candidate.__dict__)
