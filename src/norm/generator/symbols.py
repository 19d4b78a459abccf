# ===== SECTION: IMPORTS AND SETUP =====
import logging
from typing import Dict, List, Tuple

# Local imports
from ..constants import PREAMBLE_NAMES
from ..errors import NameCollisionError
from ..models import Command, CommandKind, HeaderConfig
from .utils import (
    cursor_class_name,
    function_name,
    output_class_name,
    scan_function_name,
    sql_constant_name,
)


# ===== SECTION: MODULE NAMES =====

def imported_names(entry: str) -> List[str]:
    """
    Names an `!import` entry binds in the generated module.

    Examples:
        >>> imported_names("from app.models import User, Team as T")
        ['User', 'T']
        >>> imported_names("os.path")
        ['os']
    """
    if entry.startswith("from "):
        _, _, names = entry.partition(" import ")
        names = names.strip().strip("()")
        return [part.split(" as ")[-1].strip() for part in names.split(",") if part.strip()]

    if entry.startswith("import "):
        entry = entry[len("import "):]
    bound = []
    for part in entry.split(","):
        module, _, alias = part.strip().partition(" as ")
        bound.append(alias.strip() or module.split(".")[0])
    return bound


def reserved_names(header: HeaderConfig) -> Dict[str, str]:
    """Module-level names owned by the preamble, mapped to where they come from."""
    reserved = {name: "the module preamble" for name in PREAMBLE_NAMES}
    reserved[header.driver_lib.split(".")[0]] = "the driver import"
    for entry in header.imports:
        for name in imported_names(entry):
            reserved[name] = f"the import '{entry}'"
    return reserved


def generated_symbols(command: Command) -> List[str]:
    """Module-level names the command's code defines."""
    symbols = [sql_constant_name(command.name), function_name(command.name)]
    if command.kind is CommandKind.READ_MANY:
        symbols += [scan_function_name(command.name), cursor_class_name(command.name)]
    if command.kind is not CommandKind.EXEC and not command.model:
        symbols.append(output_class_name(command.name))
    return symbols


def _body_names(command: Command) -> List[str]:
    # Module-level names the function bodies look up besides the preamble's
    names = [sql_constant_name(command.name)]
    if command.kind is CommandKind.READ_MANY:
        names += [scan_function_name(command.name), cursor_class_name(command.name)]
    if command.kind is not CommandKind.EXEC:
        names.append(command.model or output_class_name(command.name))
    return names


# ===== SECTION: CHECKS =====

def check_symbols(header: HeaderConfig, commands: List[Command]) -> None:
    """
    Verifies that every generated name is defined exactly once.

    Python silently rebinds a repeated module-level name, so a command
    whose symbols clash with the preamble, an import or another command
    would replace that definition without any error.

    Raises:
        NameCollisionError: On the first clashing symbol or shadowing input
    """
    owners: Dict[str, Tuple[str, str]] = {}
    reserved = reserved_names(header)

    for command in commands:
        for symbol in generated_symbols(command):
            if symbol in reserved:
                raise NameCollisionError(
                    f"Generated name '{symbol}' is already defined by {reserved[symbol]}",
                    command_name=command.name,
                    line_number=command.line_number,
                )
            if symbol in owners:
                other_name, other_line = owners[symbol]
                raise NameCollisionError(
                    f"Generated name '{symbol}' is already defined by command '{other_name}' on line {other_line}",
                    command_name=command.name,
                    line_number=command.line_number,
                )
            owners[symbol] = (command.name, command.line_number)

        body_names = set(_body_names(command))
        for arg in command.inputs:
            if arg.name in body_names:
                raise NameCollisionError(
                    f"Input '{arg.name}' shadows a name the generated function uses",
                    command_name=command.name,
                    line_number=command.line_number,
                )

    logging.debug(f"Checked {len(owners)} generated name(s) for collisions")
