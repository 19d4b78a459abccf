# ===== SECTION: IMPORTS =====
import logging
from datetime import datetime
from pathlib import Path
from typing import Tuple

from .formatter import format_source
from .generator import generate_python_code
from .models import HeaderConfig
from .parser import parse_norm
from .writer import write_atomic


# ===== SECTION: FUNCTIONS =====

def compile_norm(text: str, file_name: str = None, now: datetime = None) -> Tuple[HeaderConfig, str]:
    """
    Turns the text of a norm file into formatted Python source.

    Everything happens in memory; nothing is written.

    Returns:
        Tuple[HeaderConfig, str]: The header settings (which name the output
        file) and the formatted module source
    """
    header, commands = parse_norm(text, file_name=file_name)
    if not commands:
        logging.warning("No commands found; the generated module will only contain the connection helpers")
    source = generate_python_code(header, commands, now=now)
    return header, format_source(source, file_name=header.output_file)


def resolve_output_path(input_file: Path, header: HeaderConfig) -> Path:
    """Resolves the configured output path; relative paths are taken from the input file's directory."""
    output = Path(header.output_file)
    if output.is_absolute():
        return output
    return Path(input_file).parent / output


def generate_file(input_file: Path, now: datetime = None) -> Path:
    """
    Reads a norm file, generates its module and writes it.

    The output is written only after parsing, rendering and formatting all
    succeeded.

    Returns:
        Path: Where the generated module was written

    Raises:
        NormError: On any parsing, rendering or formatting failure
        OSError: If the input cannot be read or the output cannot be written
    """
    input_file = Path(input_file)
    text = input_file.read_text(encoding="utf-8")
    header, code = compile_norm(text, file_name=input_file.name, now=now)
    output_path = resolve_output_path(input_file, header)
    write_atomic(output_path, code)
    return output_path
