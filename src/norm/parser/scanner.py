# ===== SECTION: IMPORTS =====
import logging
from typing import Iterator, List, Optional, Tuple

from ..constants import GENERATED_LOCALS, PREAMBLE_NAMES, SENTINEL
from ..errors import FormatError, HeaderOrderError, MissingSentinelError, UnknownDirectiveError
from ..models import Command, HeaderConfig, HeaderDraft
from .builder import CommandBuilder
from .grammar import Directive, DirectiveScope, is_blank, lookup_directive


NumberedLine = Tuple[int, str]


# ===== SECTION: SCANNER =====

class NormScanner:
    """
    Scans a norm file into a header configuration and a command list.

    The scanner is a two-level state machine. At the top level it reads
    header directives and waits for a command-start directive; inside a
    command block it feeds every line to a CommandBuilder until the first
    blank line or the end of input closes the block. A closed block is never
    resumed.
    """

    def __init__(self, file_name: str = None):
        self.file_name = file_name
        self.header = HeaderDraft()
        self.commands: List[Command] = []
        self._builder: Optional[CommandBuilder] = None
        self._frozen_header: Optional[HeaderConfig] = None

    def scan(self, text: str) -> Tuple[HeaderConfig, List[Command]]:
        """
        Scans the full text of a norm file.

        Args:
            text: Contents of the norm file

        Returns:
            Tuple[HeaderConfig, List[Command]]: Header settings and the commands
            in file order

        Raises:
            MissingSentinelError: If the first non-blank line is not `-- !norm`
            FormatError: If a directive has the wrong shape or an input uses a
                reserved name
            HeaderOrderError: If a header directive follows the first command
            UnknownDirectiveError: If a `-- !` line names no directive valid
                at its position
        """
        lines = self._numbered(text)
        self._expect_sentinel(lines)

        for line_number, line in lines:
            if self._builder is not None:
                self._scan_block_line(line_number, line)
            else:
                self._scan_top_line(line_number, line)

        # End of input closes an open block
        self._close_block()
        header = self._frozen_header or self.header.freeze()
        logging.debug(f"Scanned {len(self.commands)} command(s); header: {header}")
        return header, self.commands

    # --- Line sources ---

    @staticmethod
    def _numbered(text: str) -> Iterator[NumberedLine]:
        # Split on '\n' only and drop a trailing '\r', so line numbers match editors
        return ((number, line[:-1] if line.endswith("\r") else line)
                for number, line in enumerate(text.split("\n"), start=1))

    def _expect_sentinel(self, lines: Iterator[NumberedLine]) -> None:
        for line_number, line in lines:
            if is_blank(line):
                continue
            if line != SENTINEL:
                raise MissingSentinelError(line_number, line, file_name=self.file_name)
            return
        raise MissingSentinelError(file_name=self.file_name)

    # --- Top level ---

    def _scan_top_line(self, line_number: int, line: str) -> None:
        is_directive, directive = lookup_directive(line)
        if not is_directive:
            if not is_blank(line):
                logging.debug(f"Ignoring text outside of command blocks on line {line_number}")
            return

        if directive is None or directive.scope in (DirectiveScope.SENTINEL, DirectiveScope.BLOCK):
            raise UnknownDirectiveError(line_number, line, file_name=self.file_name)

        args = directive.arguments(line, line_number, self.file_name)

        if directive.scope is DirectiveScope.HEADER:
            if self._frozen_header is not None:
                raise HeaderOrderError(line_number, line, file_name=self.file_name)
            self._apply_header(directive, args)
            return

        # Command start: the header is final from here on
        if self._frozen_header is None:
            self._frozen_header = self.header.freeze()
        self._builder = CommandBuilder(directive.starts, args[0], line_number)
        logging.debug(f"Line {line_number}: start of {directive.starts.value} command '{args[0]}'")

    def _apply_header(self, directive: Directive, args: Tuple[str, ...]) -> None:
        value = args[0]
        if directive.name == "file":
            self.header.output_file = value
        elif directive.name == "package":
            self.header.package = value
        elif directive.name == "driver_lib":
            self.header.driver_lib = value
        elif directive.name == "driver_name":
            self.header.driver_name = value
        elif directive.name == "import":
            self.header.imports.append(value)

    # --- Block level ---

    def _scan_block_line(self, line_number: int, line: str) -> None:
        if is_blank(line):
            self._close_block()
            return

        is_directive, directive = lookup_directive(line)
        if not is_directive:
            self._builder.add_body_line(line)
            return

        if directive is None or not directive.allowed_in(self._builder.kind):
            raise UnknownDirectiveError(line_number, line, file_name=self.file_name)

        args = directive.arguments(line, line_number, self.file_name)
        if directive.name == "input":
            self._check_input_name(line_number, line, args[0])
        self._builder.apply(directive.name, args)

    def _check_input_name(self, line_number: int, line: str, name: str) -> None:
        # Inputs become parameters of the generated function; they must not
        # shadow its locals or the module-level names its body uses
        if name in GENERATED_LOCALS or name in PREAMBLE_NAMES:
            raise FormatError(
                line_number,
                line,
                file_name=self.file_name,
                hint=f"input name '{name}' is reserved",
            )

    def _close_block(self) -> None:
        if self._builder is None:
            return
        self.commands.append(self._builder.build())
        self._builder = None


# ===== SECTION: PUBLIC API =====

def parse_norm(text: str, file_name: str = None) -> Tuple[HeaderConfig, List[Command]]:
    """
    Parses the text of a norm file.

    This is the main entry point of the parser package. It logs a warning
    for command names that are declared more than once; both definitions are
    kept, and code generation rejects the clash.

    Args:
        text: Contents of the norm file
        file_name: Optional file name used in error messages

    Returns:
        Tuple[HeaderConfig, List[Command]]: Header settings and commands
    """
    header, commands = NormScanner(file_name=file_name).scan(text)

    seen = {}
    for command in commands:
        if command.name in seen:
            logging.warning(
                f"Command '{command.name}' on line {command.line_number} redefines the command "
                f"on line {seen[command.name]}; both will be generated"
            )
        else:
            seen[command.name] = command.line_number

    return header, commands
