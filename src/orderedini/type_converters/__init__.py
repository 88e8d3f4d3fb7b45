from .converters import (
    TypeConverter,
    converter,
    string_converter,
    bool_converter,
    numeric_converter,
    list_converter,
)
