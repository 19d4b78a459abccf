# ===== SECTION: IMPORTS AND SETUP =====
# Standard library and third-party imports
from typing import Sequence

import inflection  # Using inflection library for snake_case / CamelCase names

# Local imports
from ..constants import (
    CURSOR_CLASS_SUFFIX,
    OUTPUT_CLASS_SUFFIX,
    OUTPUT_LOCAL_PREFIX,
    SCAN_FUNCTION_SUFFIX,
    SQL_CONSTANT_SUFFIX,
    VERBATIM_IMPORT_PREFIXES,
)
from ..models import Arg


# ===== SECTION: NAMING =====

def function_name(name: str) -> str:
    """
    Converts a command name to the name of its generated function.

    Examples:
        >>> function_name("GetUsers")
        'get_users'
        >>> function_name("add_user")
        'add_user'
    """
    return inflection.underscore(name)


def scan_function_name(name: str) -> str:
    return function_name(name) + SCAN_FUNCTION_SUFFIX


def class_name(name: str) -> str:
    """
    Converts a command name to CamelCase for generated classes.

    Examples:
        >>> class_name("get_users")
        'GetUsers'
    """
    return inflection.camelize(name)


def output_class_name(name: str) -> str:
    return class_name(name) + OUTPUT_CLASS_SUFFIX


def cursor_class_name(name: str) -> str:
    return class_name(name) + CURSOR_CLASS_SUFFIX


def sql_constant_name(name: str) -> str:
    return function_name(name).upper() + SQL_CONSTANT_SUFFIX


# ===== SECTION: SIGNATURE HELPERS =====
# Each helper keeps the order of its Arg sequence; that order is the
# placeholder order for inputs and the column order for outputs.

def param_list(args: Sequence[Arg]) -> str:
    """Parameters following `conn`, e.g. ', limit: int, offset: int'."""
    return "".join(f", {a.name}: {a.type}" for a in args)


def call_args(args: Sequence[Arg]) -> str:
    """Arguments following `conn` in a call, e.g. ', limit, offset'."""
    return "".join(f", {a.name}" for a in args)


def bind_args(args: Sequence[Arg]) -> str:
    """
    The parameter argument of cursor.execute(), including the leading comma.

    No inputs means no parameter argument at all, so drivers do not try to
    interpret placeholders in a statement that has none.
    """
    if not args:
        return ""
    if len(args) == 1:
        return f", ({args[0].name},)"
    return ", (" + ", ".join(a.name for a in args) + ")"


def output_locals(args: Sequence[Arg]) -> str:
    """Assignment targets for a scanned row, e.g. '_o_ID, _o_Email'."""
    names = [OUTPUT_LOCAL_PREFIX + a.name for a in args]
    if len(names) == 1:
        return names[0] + ","
    return ", ".join(names)


def keyword_binding(args: Sequence[Arg]) -> str:
    """Constructor keywords binding scanned values, e.g. 'ID=_o_ID, Email=_o_Email'."""
    return ", ".join(f"{a.name}={OUTPUT_LOCAL_PREFIX}{a.name}" for a in args)


def tuple_type(args: Sequence[Arg]) -> str:
    if not args:
        return "Tuple[()]"
    return "Tuple[" + ", ".join(a.type for a in args) + "]"


# ===== SECTION: LITERALS =====

def _fits_triple_quotes(text: str) -> bool:
    if "\\" in text or '"""' in text or text.endswith('"'):
        return False
    return all(ch in "\n\t" or ch.isprintable() for ch in text)


def python_string_literal(text: str) -> str:
    """
    Renders text as a Python string literal with the same value.

    Multi-line text is kept readable in triple quotes when that is exact;
    everything else falls back to repr().
    """
    if "\n" in text and _fits_triple_quotes(text):
        return f'"""{text}"""'
    return repr(text)


def docstring(lines: Sequence[str], indent: str = "    ") -> str:
    """
    Renders documentation lines as an indented docstring.

    Backslashes and double quotes are escaped so the docstring's value is
    exactly the joined lines.
    """
    escaped = [line.replace("\\", "\\\\").replace('"', '\\"') for line in lines]
    if len(escaped) == 1:
        return f'{indent}"""{escaped[0]}"""'
    docstring_lines = [f'{indent}"""{escaped[0]}']
    for line in escaped[1:]:
        docstring_lines.append(f"{indent}{line}" if line else "")
    docstring_lines.append(f'{indent}"""')
    return "\n".join(docstring_lines)


def import_line(entry: str) -> str:
    """
    Converts an `!import` entry to an import statement.

    Entries that already are statements ('from x import y', 'import x as z')
    are used verbatim; anything else is imported as a module.
    """
    if entry.startswith(VERBATIM_IMPORT_PREFIXES):
        return entry
    return f"import {entry}"
