from .interface import Ini, IniBuilder, Section, parse_document, to_text
from .args import Parameters
from .parser import parse_line
from .entities import BLANK, Blank, Option, SectionName
from .utils import OrderedMap
from .exceptions_warnings import (
    IniError,
    ParseError,
    IncorrectSection,
    IncorrectSyntax,
    EmptyKey,
    IniIOError,
)
from .globals import UNNAMED_SECTION_NAME, VALID_MARKERS
