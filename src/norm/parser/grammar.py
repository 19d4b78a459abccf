# ===== SECTION: IMPORTS =====
import re
from dataclasses import dataclass
from enum import Enum
from typing import Dict, FrozenSet, Optional, Tuple

from ..constants import DIRECTIVE_PREFIX
from ..errors import FormatError
from ..models import CommandKind


# ===== SECTION: REGEX DEFINITIONS =====
# A directive word is whatever follows the prefix up to the first whitespace
DIRECTIVE_WORD_REGEX = re.compile(r"^" + re.escape(DIRECTIVE_PREFIX) + r"(\S*)")

# A single-token argument may not contain whitespace
TOKEN_ARG = r"([^\s]+)"
# A rest-of-line argument takes everything after the separating space
REST_ARG = r"(.+)"


# ===== SECTION: DIRECTIVE TABLE =====

class DirectiveScope(Enum):
    """Where in a norm file a directive may appear."""
    SENTINEL = "sentinel"
    HEADER = "header"
    START = "start"
    BLOCK = "block"


ALL_KINDS = frozenset(CommandKind)
READ_KINDS = frozenset({CommandKind.READ_MANY, CommandKind.READ_ONE})


@dataclass(frozen=True)
class Directive:
    """
    One row of the directive table.

    Attributes:
        name (str): Directive word, e.g. 'input' for `-- !input`
        scope (DirectiveScope): Where the directive may appear
        arg_patterns (Tuple[str, ...]): One regex group per argument
        kinds (FrozenSet[CommandKind]): Command kinds a block directive is valid in
        starts (Optional[CommandKind]): Kind of block a start directive opens
    """
    name: str
    scope: DirectiveScope
    arg_patterns: Tuple[str, ...] = ()
    kinds: FrozenSet[CommandKind] = ALL_KINDS
    starts: Optional[CommandKind] = None

    @property
    def arity(self) -> int:
        return len(self.arg_patterns)

    @property
    def regex(self) -> "re.Pattern[str]":
        parts = [re.escape(DIRECTIVE_PREFIX + self.name)]
        parts.extend(" " + p for p in self.arg_patterns)
        return re.compile("^" + "".join(parts) + "$")

    def allowed_in(self, kind: CommandKind) -> bool:
        return self.scope is DirectiveScope.BLOCK and kind in self.kinds

    def arguments(self, line: str, line_number: int, file_name: str = None) -> Tuple[str, ...]:
        """
        Extracts the arguments of a directive line.

        Raises:
            FormatError: If the line does not have this directive's shape
        """
        match = self.regex.match(line)
        if match is None:
            raise FormatError(line_number, line, file_name=file_name)
        return match.groups()


def _table(*directives: Directive) -> Dict[str, Directive]:
    return {d.name: d for d in directives}


DIRECTIVES: Dict[str, Directive] = _table(
    Directive("norm", DirectiveScope.SENTINEL),
    Directive("file", DirectiveScope.HEADER, (TOKEN_ARG,)),
    Directive("package", DirectiveScope.HEADER, (TOKEN_ARG,)),
    Directive("driver_lib", DirectiveScope.HEADER, (TOKEN_ARG,)),
    Directive("driver_name", DirectiveScope.HEADER, (TOKEN_ARG,)),
    Directive("import", DirectiveScope.HEADER, (REST_ARG,)),
    Directive("read", DirectiveScope.START, (TOKEN_ARG,), starts=CommandKind.READ_MANY),
    Directive("read_one", DirectiveScope.START, (TOKEN_ARG,), starts=CommandKind.READ_ONE),
    Directive("exec", DirectiveScope.START, (TOKEN_ARG,), starts=CommandKind.EXEC),
    Directive("input", DirectiveScope.BLOCK, (TOKEN_ARG, TOKEN_ARG)),
    Directive("output", DirectiveScope.BLOCK, (TOKEN_ARG, TOKEN_ARG), kinds=READ_KINDS),
    Directive("model", DirectiveScope.BLOCK, (TOKEN_ARG,), kinds=READ_KINDS),
    Directive("doc", DirectiveScope.BLOCK, (REST_ARG,)),
)


# ===== SECTION: FUNCTIONS =====

def directive_word(line: str) -> Optional[str]:
    """
    Returns the directive word of a line, or None if the line is not a directive.

    A line is a directive line exactly when it starts with the directive prefix;
    anything after the prefix up to the first whitespace is the word. The word
    may be empty or unknown; the caller decides what that means at its position.
    """
    match = DIRECTIVE_WORD_REGEX.match(line)
    if match is None:
        return None
    return match.group(1)


def lookup_directive(line: str) -> Tuple[bool, Optional[Directive]]:
    """
    Classifies a line against the directive table.

    Returns:
        Tuple[bool, Optional[Directive]]: Whether the line is a directive line,
        and the matching table entry (None for unknown words)
    """
    word = directive_word(line)
    if word is None:
        return False, None
    return True, DIRECTIVES.get(word)


def is_blank(line: str) -> bool:
    return not line.strip()
