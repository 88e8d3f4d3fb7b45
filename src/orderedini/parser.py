"""Classification of single lines of ini content."""

import contextlib
import re
from .args import Parameters
from .entities import BLANK, Option, ParsedLine, SectionName
from .exceptions_warnings import (
    EmptyKey,
    ExtractionError,
    IncorrectSection,
    IncorrectSyntax,
)
from .globals import SECTION_OPEN

DEFAULT_PARAMETERS = Parameters()


def strip_comment(line: str, comment_prefixes: tuple[str, ...]) -> str:
    """Remove everything from the first comment prefix onward and strip whitespace.
    Comment prefixes can't be escaped.

    Args:
        line (str): The line to strip.
        comment_prefixes (tuple[str, ...]): Characters that start a comment.

    Returns:
        str: The remaining content.
    """
    if comment_prefixes:
        line = re.split(
            rf"[{''.join(re.escape(prefix) for prefix in comment_prefixes)}]",
            line,
            maxsplit=1,
        )[0]
    return line.strip()


def parse_line(
    line: str, line_number: int, parameters: Parameters | None = None
) -> ParsedLine:
    """Classify a single line.

    Args:
        line (str): The line to parse.
        line_number (int): 1-based number of the line, used for error reporting.
        parameters (Parameters | None, optional): Markers to use. If None, default
            Parameters are used. Defaults to None.

    Raises:
        IncorrectSection: If the line starts with '[' but doesn't end with ']'.
        EmptyKey: If the line is an option with an empty key.
        IncorrectSyntax: If the line is none of the above.

    Returns:
        ParsedLine: BLANK, a SectionName or an Option.
    """
    parameters = parameters or DEFAULT_PARAMETERS
    content = strip_comment(line, parameters.comment_prefixes)

    if not content:
        return BLANK

    if content.startswith(SECTION_OPEN):
        try:
            return SectionName(name_with_brackets=content)
        except ExtractionError:
            raise IncorrectSection(line_number) from None

    if any(delimiter in content for delimiter in parameters.option_delimiters):
        with contextlib.suppress(ExtractionError):
            return Option.from_string(content, parameters.option_delimiters)
        # a delimiter is present, so only the key can be missing
        raise EmptyKey(line_number)

    raise IncorrectSyntax(line_number)
