import pytest
from norm.errors import (
    NormError,
    ParsingError,
    MissingSentinelError,
    FormatError,
    UnknownDirectiveError,
    HeaderOrderError,
    CodeGenerationError,
    TemplateRenderError,
    NameCollisionError,
    FormatterError,
)


def test_base_error():
    """Test the base NormError class."""
    error = NormError("Base error message")
    assert str(error) == "Base error message"
    assert isinstance(error, Exception)


def test_parsing_error_basic():
    """Test ParsingError with basic message."""
    error = ParsingError("Failed to scan")
    assert str(error) == "Failed to scan"
    assert isinstance(error, NormError)


def test_parsing_error_with_line_number_and_line():
    """Test ParsingError with line number and raw line."""
    error = ParsingError("Failed to scan", line_number=42, line="-- !input x")
    assert str(error) == 'Failed to scan on line 42: "-- !input x"'
    assert error.line_number == 42
    assert error.line == "-- !input x"


def test_parsing_error_with_file_name():
    """Test ParsingError with file name."""
    error = ParsingError("Failed to scan", file_name="queries.norm.sql")
    assert str(error) == "Failed to scan in file 'queries.norm.sql'"


def test_parsing_error_truncates_long_lines():
    """Test that ParsingError truncates long lines."""
    long_line = "-- !doc " + "x" * 200
    error = ParsingError("Failed to scan", line_number=1, line=long_line)
    assert "..." in str(error)
    assert error.line == long_line
    assert len(str(error)) < len(long_line)


def test_missing_sentinel_error():
    error = MissingSentinelError(1, "SELECT 1")
    assert str(error) == 'Not a valid norm file on line 1: "SELECT 1"'
    assert isinstance(error, ParsingError)


def test_missing_sentinel_error_without_line():
    assert str(MissingSentinelError()) == "Not a valid norm file"


def test_format_error_wording():
    error = FormatError(4, "-- !input email")
    assert str(error) == 'Format error on line 4: "-- !input email"'
    assert isinstance(error, ParsingError)


def test_format_error_with_hint():
    error = FormatError(9, "-- !package late", hint="too late")
    assert str(error) == 'Format error on line 9: "-- !package late" (too late)'


def test_unknown_directive_error_wording():
    error = UnknownDirectiveError(3, "-- !foo x")
    assert str(error) == 'Unknown command on line 3: "-- !foo x"'
    assert isinstance(error, ParsingError)


def test_quoted_line_escapes_control_characters():
    error = UnknownDirectiveError(2, "-- !foo\tx \"y\"")
    assert str(error) == 'Unknown command on line 2: "-- !foo\\tx \\"y\\""'


def test_header_order_error_wording():
    error = HeaderOrderError(6, "-- !package late", file_name="q.norm.sql")
    assert str(error) == 'Header directive after the first command in file \'q.norm.sql\' on line 6: "-- !package late"'
    assert isinstance(error, ParsingError)
    assert not isinstance(error, FormatError)


def test_name_collision_error_names_command_and_line():
    error = NameCollisionError("Generated name 'get_user' is already defined", command_name="getUser", line_number=12)
    assert str(error) == "Generated name 'get_user' is already defined for command 'getUser' on line 12"
    assert error.line_number == 12
    assert isinstance(error, CodeGenerationError)


def test_template_render_error():
    error = TemplateRenderError("Failed to render template", command_name="GetUsers")
    assert str(error) == "Failed to render template for command 'GetUsers'"
    assert error.command_name == "GetUsers"
    assert isinstance(error, CodeGenerationError)


def test_formatter_error_keeps_source():
    error = FormatterError("Generated code could not be formatted", source="def (:")
    assert error.source == "def (:"
    assert isinstance(error, NormError)


def test_error_hierarchy():
    """Test that all errors inherit from NormError."""
    errors = [
        ParsingError("test"),
        MissingSentinelError(),
        FormatError(1, "x"),
        UnknownDirectiveError(1, "x"),
        HeaderOrderError(1, "x"),
        CodeGenerationError("test"),
        TemplateRenderError("test"),
        NameCollisionError("test"),
        FormatterError("test"),
    ]
    for error in errors:
        assert isinstance(error, NormError)

    with pytest.raises(NormError):
        raise FormatError(1, "-- !read")
