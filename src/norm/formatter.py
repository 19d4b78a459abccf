# ===== SECTION: IMPORTS =====
import logging

import black


# Local imports
from .errors import FormatterError


# ===== SECTION: FUNCTIONS =====

def format_source(source: str, file_name: str = "<generated>") -> str:
    """
    Canonicalizes generated Python source.

    The source is formatted with black and then compiled, so that both
    grammar errors and compile-time errors such as duplicate parameter
    names are reported before anything is written.

    Args:
        source: Unformatted module source from generate_python_code()
        file_name: Name used in compiler messages

    Returns:
        str: The formatted source

    Raises:
        FormatterError: If black or the compiler rejects the source
    """
    try:
        formatted = black.format_str(source, mode=black.Mode())
    except black.InvalidInput as e:
        raise FormatterError(f"Generated code could not be formatted: {e}", source=source) from e

    try:
        compile(formatted, file_name, "exec", dont_inherit=True)
    except SyntaxError as e:
        raise FormatterError(f"Generated code does not compile: {e}", source=formatted) from e

    logging.debug(f"Formatted generated code: {len(formatted.splitlines())} lines")
    return formatted
