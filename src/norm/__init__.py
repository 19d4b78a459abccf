"""norm - Generate typed Python data-access functions from annotated SQL"""

__version__ = "0.1.0"

from . import constants
from . import generator
from . import models
from . import parser

from .formatter import format_source
from .generator import generate_python_code
from .parser import parse_norm
from .pipeline import compile_norm


__all__ = ["compile_norm", "format_source", "generate_python_code", "parse_norm"]
