# ===== SECTION: IMPORTS AND SETUP =====
# Standard library and third-party imports
import logging
from datetime import datetime
from typing import List, Mapping

# Local imports
from ..errors import TemplateRenderError
from ..models import Command, CommandKind, HeaderConfig
from .renderers import CommandRenderer, HeaderRenderer, build_header_renderer, build_renderers
from .symbols import check_symbols


def generate_python_code(
    header: HeaderConfig,
    commands: List[Command],
    now: datetime = None,
    renderers: Mapping[CommandKind, CommandRenderer] = None,
    header_renderer: HeaderRenderer = None,
) -> str:
    """
    Generates the full Python module code as a string.

    Args:
        header (HeaderConfig): Header settings of the norm file
        commands (List[Command]): Commands in file order
        now (datetime, optional): Generation time stamped into the header;
            the current time by default
        renderers (Mapping[CommandKind, CommandRenderer], optional): Renderer
            per command kind; build_renderers() by default
        header_renderer (HeaderRenderer, optional): Preamble renderer

    Returns:
        str: Unformatted Python source; pass it through format_source()

    Raises:
        TemplateRenderError: If a command has no renderer or a template fails
        NameCollisionError: If a generated name is defined twice in the module

    Notes:
        - The header is rendered once, then each command in file order
        - Output for identical inputs differs only in the header time stamp
    """
    now = now or datetime.now()
    renderers = renderers if renderers is not None else build_renderers()
    header_renderer = header_renderer or build_header_renderer()
    check_symbols(header, commands)

    parts = [header_renderer.render(header, now)]
    for command in commands:
        renderer = renderers.get(command.kind)
        if renderer is None:
            raise TemplateRenderError(f"No renderer for {command.kind.value} commands", command_name=command.name)
        logging.info(f"Generating {command.kind.value} command: {command.name}")
        parts.append(renderer.render(command))

    return "\n\n".join(part.strip("\n") for part in parts) + "\n"
