"""Unit tests for the formatter boundary."""

import pytest

from norm.errors import FormatterError
from norm.formatter import format_source


def test_formats_valid_source():
    assert format_source("x = ( 1,2 )\n") == "x = (1, 2)\n"


def test_formatting_is_idempotent():
    once = format_source("def f(a,b):\n  return {'a':a,'b':b}\n")
    assert format_source(once) == once


def test_unparsable_source_is_rejected():
    with pytest.raises(FormatterError) as exc_info:
        format_source("def broken(:\n    pass\n")
    assert exc_info.value.source == "def broken(:\n    pass\n"


def test_source_that_does_not_compile_is_rejected():
    # Valid grammar, but duplicate parameter names only fail at compile time
    with pytest.raises(FormatterError) as exc_info:
        format_source("def f(conn, conn):\n    pass\n")
    assert "does not compile" in str(exc_info.value)
