# This file makes parser a package
# Re-export the models the parser produces for convenience
from ..models import Arg
from ..models import Command
from ..models import CommandKind
from ..models import HeaderConfig
from .builder import CommandBuilder
from .grammar import DIRECTIVES
from .grammar import Directive
from .grammar import DirectiveScope
from .scanner import NormScanner
from .scanner import parse_norm


__all__ = [
    "Arg",
    "Command",
    "CommandBuilder",
    "CommandKind",
    "DIRECTIVES",
    "Directive",
    "DirectiveScope",
    "HeaderConfig",
    "NormScanner",
    "parse_norm",
]
