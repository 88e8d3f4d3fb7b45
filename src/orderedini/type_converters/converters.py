"""Converter classes and functions."""

from functools import wraps
from typing import (
    Callable,
    Any,
    get_args,
    get_origin,
)
import re
import contextlib
from ..exceptions_warnings import WrongType
from ..globals import DEFAULT_LIST_SEPARATOR

type Numerics = int | float | complex
"""Possible numeric conversion result types."""


type TypeConverter[ConvertedType] = Callable[[str], ConvertedType | None]
"""Type of type converter functions. Returns None if conversion was impossible. To
create a type converter, use converter decorator."""


def converter[T](processor: Callable[[str], T]) -> TypeConverter[T]:
    """Create a new TypeConverter.

    Args:
        processor (Callable[[str], T]): Callable to process the string input and
            convert it into an instance of arbitrary type. If conversion is not
            possible, should raise exceptions_warnings.WrongType (ValueError and
            TypeError are treated the same).

    Returns:
        TypeConverter[T]: TypeConverter that will return the processed input on call
            or None if conversion was not possible.
    """

    @wraps(processor)
    def convert(value: str) -> T | None:
        """Convert value.

        Args:
            value (str): The value to convert.

        Returns:
            T | None: The converted value or None if conversion was impossible.
        """
        if isinstance(value, str):
            with contextlib.suppress(WrongType, ValueError, TypeError):
                return processor(value)
        return None

    return convert


@converter
def string_converter(string: str) -> str:
    """Strip leading and trailing whitespace from a string."""
    return string.strip()


def bool_converter(
    true: str | tuple[str, ...] = ("1", "true", "yes", "y"),
    false: str | tuple[str, ...] = ("0", "false", "no", "n"),
) -> TypeConverter[bool]:
    """Create a new bool converter.

    Args:
        true (str | tuple[str, ...], optional): String(s) that should be regarded as True.
            Defaults to ("1", "true", "yes", "y").
        false (str | tuple[str, ...], optional): String(s) that should be regarded as False.
            Defaults to ("0", "false", "no", "n").

    Returns:
        TypeConverter[bool]: The bool converter.
    """

    if not isinstance(true, tuple):
        true = (true,)
    true = tuple(i.lower() for i in true)

    if not isinstance(false, tuple):
        false = (false,)
    false = tuple(i.lower() for i in false)

    @converter
    def to_bool(string: str) -> bool:
        """Converts a string to bool.

        Args:
            string (str): The string to convert.

        Raises:
            WrongType: If conversion was unsuccessful.

        Returns:
            bool: The converted boolean.
        """
        string = string.lower().strip()
        if string in true:
            return True
        elif string in false:
            return False
        raise WrongType

    return to_bool


def numeric_converter[
    T: Numerics
](
    numeric_type: type[T] | tuple[type[T], ...] = (int, float, complex),
) -> TypeConverter[T]:
    """Create a new numeric type converter.

    Args:
        numeric_type (type[Numerics] | tuple[type[Numerics], ...], optional): The type
            to convert to. If multiple are given, the type converter will return the
            first type that the conversion was successful for.
            Defaults to (int, float, complex).

    Returns:
        TypeConverter[int | float | complex]: The numeric type converter.
    """

    if not isinstance(numeric_type, tuple):
        numeric_type = (numeric_type,)

    @converter
    def to_num(string: str) -> T:
        """Convert string to numeric type.

        Args:
            string (str): The string to convert.

        Raises:
            WrongType: If conversion was unsuccessful.

        Returns:
            Numerics: Converted string.
        """
        string = string.strip()
        for numeric in numeric_type:
            with contextlib.suppress(ValueError):
                return numeric(string)
        raise WrongType

    return to_num


def list_converter[
    T
](
    delimiter: str = DEFAULT_LIST_SEPARATOR,
    item_converter: TypeConverter[T] | None = None,
) -> TypeConverter[list[T]]:
    """Create a new list type converter. Conversion fails as a whole if a single item
    can't be converted.

    Args:
        delimiter (str, optional): Delimiter that separates list items. Defaults to ",".
        item_converter (TypeConverter[T] | None): TypeConverter to convert each list
            item with. If None, items stay strings. Defaults to None.

    Returns:
        TypeConverter[list]: The new list type converter.
    """

    if item_converter is None:
        item_converter = DEFAULT_STRING_CONVERTER

    split_delimiter = rf"\s*{re.escape(delimiter)}\s*"

    @converter
    def to_list(string: str) -> list[T]:
        """Convert a string to a list.

        Args:
            string (str): The string to convert.

        Raises:
            WrongType: If an item could not be converted.

        Returns:
            list: Converted list.
        """
        string = string.strip()
        items = []
        for s in re.split(pattern=split_delimiter, string=string):
            if (item := item_converter(s)) is None:
                raise WrongType
            items.append(item)
        return items

    return to_list


def _type_to_converter[T](
    as_type: type[T] | TypeConverter[T], list_separator: str = DEFAULT_LIST_SEPARATOR
) -> TypeConverter[T]:
    """Convert a type to its respective TypeConverter.

    Args:
        as_type (type | TypeConverter): The type to convert to. list[T] results in a
            list converter with an item converter for T. Any other callable taking a
            string is wrapped as converter.
        list_separator (str, optional): Separator for list and list[T].
            Defaults to ",".

    Raises:
        TypeError: If as_type is neither a type nor a callable.

    Returns:
        TypeConverter: The matching TypeConverter.
    """
    if (origin := get_origin(as_type)) and origin is list:
        if (list_args := get_args(as_type)) and len(list_args) == 1:
            # list has exactly one type hint -> get item converter
            return list_converter(
                delimiter=list_separator,
                item_converter=_type_to_converter(list_args[0], list_separator),
            )
        return list_converter(delimiter=list_separator)

    if as_type in {int, float, complex}:
        return numeric_converter(numeric_type=as_type)
    if as_type is bool:
        return DEFAULT_BOOL_CONVERTER
    if as_type is list:
        return list_converter(delimiter=list_separator)
    if as_type is str:
        return DEFAULT_STRING_CONVERTER
    if isinstance(as_type, Callable):
        return converter(as_type)

    raise TypeError(f"Can't convert to '{as_type}'.")


# default converters
DEFAULT_STRING_CONVERTER = string_converter
"""String converter."""
DEFAULT_BOOL_CONVERTER = bool_converter()
"""Bool converter with default conversion parameters."""


def _any_to_string(value: Any) -> str:
    """Convert a value to its ini string. Booleans are written in lower case."""
    if isinstance(value, bool):
        return str(value).lower()
    return str(value)
