from orderedini import (
    BLANK,
    Option,
    Parameters,
    SectionName,
    parse_line,
    EmptyKey,
    IncorrectSection,
    IncorrectSyntax,
    ParseError,
)
import pytest


class TestParseLine:

    @pytest.mark.parametrize(
        "line",
        ["", "   ", "\t \t", ";------", "; foo", "   ; indented comment", "\r"],
    )
    def test_blank(self, line):
        assert parse_line(line, 1) is BLANK

    @pytest.mark.parametrize(
        "line,key,value",
        [
            ("name1 = 100 ; comment", "name1", "100"),
            ("_.,:(){}-#@&*| = 100", "_.,:(){}-#@&*|", "100"),
            ("text_name = hello world!", "text_name", "hello world!"),
            ("a =", "a", ""),
            ("a = ; only a comment", "a", ""),
            ("  spaced key   =   spaced value  ", "spaced key", "spaced value"),
            ("url = http://host/?a=1&b=2", "url", "http://host/?a=1&b=2"),
            ("k=v", "k", "v"),
            ("k = v\r", "k", "v"),
        ],
    )
    def test_option(self, line, key, value):
        assert parse_line(line, 1) == Option(key, value)

    @pytest.mark.parametrize(
        "line,name",
        [
            ("[section]", "section"),
            ("  [section]  ; comment", "section"),
            ("[[section]]", "section"),
            ("[ spaced name ]", "spaced name"),
            ("[]", ""),
            ("[a = b]", "a = b"),
            ("[]a[]", "a"),
        ],
    )
    def test_section_name(self, line, name):
        result = parse_line(line, 1)
        assert isinstance(result, SectionName)
        assert result == name

    @pytest.mark.parametrize(
        "line,error",
        [
            ("[", IncorrectSection),
            ("[section", IncorrectSection),
            ("[section = 1, 2 = value", IncorrectSection),
            ("[section ; ]", IncorrectSection),
            ("= 3", EmptyKey),
            ("   =", EmptyKey),
            ("\t- b", IncorrectSyntax),
            ("just words", IncorrectSyntax),
            ("section]", IncorrectSyntax),
        ],
    )
    def test_errors(self, line, error):
        with pytest.raises(error) as exc_info:
            parse_line(line, 7)
        assert isinstance(exc_info.value, ParseError)
        assert exc_info.value.line == 7

    @pytest.mark.parametrize(
        "error,message",
        [
            (IncorrectSection, "Incorrect section syntax at line 3"),
            (IncorrectSyntax, "Incorrect syntax at line 3"),
            (EmptyKey, "Key is empty at line 3"),
        ],
    )
    def test_error_messages(self, error, message):
        assert str(error(3)) == message

    def test_custom_markers(self):
        parameters = Parameters(comment_prefixes=("#", "!"), option_delimiters=":")
        assert parse_line("key: value # comment", 1, parameters) == Option("key", "value")
        assert parse_line("! comment", 1, parameters) is BLANK
        assert parse_line("a = b : c", 1, parameters) == Option("a = b", "c")
        # ';' is no comment prefix anymore
        assert parse_line("k: a;b", 1, parameters) == Option("k", "a;b")
        with pytest.raises(IncorrectSyntax):
            parse_line("a = b", 1, parameters)

    def test_first_of_several_delimiters(self):
        parameters = Parameters(option_delimiters=("=", ":"))
        assert parse_line("a: b = c", 1, parameters) == Option("a", "b = c")
        assert parse_line("a = b: c", 1, parameters) == Option("a", "b: c")


class TestEntities:

    def test_option_to_string(self):
        assert Option("key", "value").to_string("=") == "key = value"
        assert Option("key").to_string(":") == "key : "

    def test_section_name_to_string(self):
        assert SectionName("name").to_string() == "[name]"

    def test_section_name_requires_input(self):
        with pytest.raises(ValueError):
            SectionName()
