from typing import Literal

UNNAMED_SECTION_NAME = ""
"""Name of the section that holds options found before any section name."""
SECTION_OPEN = "["
SECTION_CLOSE = "]"
DEFAULT_COMMENT_PREFIX = ";"
DEFAULT_OPTION_DELIMITER = "="
DEFAULT_LIST_SEPARATOR = ","
DEFAULT_WRITE_LIST_SEPARATOR = ", "
WRITE_ENCODING = "utf-8"
VALID_MARKERS = Literal[
    "\\",
    "!",
    '"',
    "§",
    "%",
    "&",
    "/",
    "(",
    ")",
    "?",
    ":",
    ";",
    "#",
    "'",
    "*",
    ">",
    "<",
    "=",
]
"""Valid characters for markers (option delimiter or comment prefix)."""
