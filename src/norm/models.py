# ===== SECTION: IMPORTS =====
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple

from .constants import (
    DEFAULT_DRIVER_LIB,
    DEFAULT_DRIVER_NAME,
    DEFAULT_OUTPUT_FILE,
    DEFAULT_PACKAGE,
)


# ===== SECTION: DATA STRUCTURES =====
# Core data structures for representing a parsed norm file

class CommandKind(Enum):
    """The kind of statement a command block describes."""
    READ_MANY = "read"
    READ_ONE = "read_one"
    EXEC = "exec"


@dataclass(frozen=True)
class Arg:
    """
    A positional input parameter or output column.

    Attributes:
        name (str): Parameter or field name, used verbatim in generated code
        type (str): Python type expression, used verbatim in generated code
    """
    name: str
    type: str


@dataclass(frozen=True)
class HeaderConfig:
    """
    File-wide settings collected from header directives.

    Attributes:
        output_file (str): Path the generated module is written to
        package (str): Package name recorded in the generated module
        driver_lib (str): DB-API module always imported by the generated module
        driver_name (str): DB-API module whose connect() opens connections
        imports (Tuple[str, ...]): Extra import entries, in declaration order
    """
    output_file: str = DEFAULT_OUTPUT_FILE
    package: str = DEFAULT_PACKAGE
    driver_lib: str = DEFAULT_DRIVER_LIB
    driver_name: str = DEFAULT_DRIVER_NAME
    imports: Tuple[str, ...] = ()


@dataclass
class HeaderDraft:
    """Mutable header state while the top of the file is being scanned."""
    output_file: str = DEFAULT_OUTPUT_FILE
    package: str = DEFAULT_PACKAGE
    driver_lib: str = DEFAULT_DRIVER_LIB
    driver_name: str = DEFAULT_DRIVER_NAME
    imports: List[str] = field(default_factory=list)

    def freeze(self) -> HeaderConfig:
        return HeaderConfig(
            output_file=self.output_file,
            package=self.package,
            driver_lib=self.driver_lib,
            driver_name=self.driver_name,
            imports=tuple(self.imports),
        )


@dataclass(frozen=True)
class Command:
    """
    One command block of a norm file.

    This is the unit the code emitter consumes: one Command yields the
    generated function(s) and supporting types for one SQL statement.

    Attributes:
        kind (CommandKind): Which template renders this command
        name (str): Base for every generated symbol of this command
        inputs (Tuple[Arg, ...]): Parameters, bound to placeholders by position
        outputs (Tuple[Arg, ...]): Result columns, bound by position
        model (Optional[str]): Externally defined type the outputs bind into
        doc (Tuple[str, ...]): Documentation lines
        body (Tuple[str, ...]): SQL lines, passed through verbatim
        line_number (int): Line of the directive that started the block
    """
    kind: CommandKind
    name: str
    inputs: Tuple[Arg, ...] = ()
    outputs: Tuple[Arg, ...] = ()
    model: Optional[str] = None
    doc: Tuple[str, ...] = ()
    body: Tuple[str, ...] = ()
    line_number: int = 0

    @property
    def body_string(self) -> str:
        return "\n".join(self.body)
