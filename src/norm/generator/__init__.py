# This file makes generator a package
from .core import generate_python_code
from .renderers import CommandRenderer
from .renderers import HeaderRenderer
from .renderers import build_header_renderer
from .renderers import build_renderers
from .renderers import make_environment


__all__ = [
    "CommandRenderer",
    "HeaderRenderer",
    "build_header_renderer",
    "build_renderers",
    "generate_python_code",
    "make_environment",
]
