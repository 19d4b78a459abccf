# ===== SECTION: IMPORTS AND SETUP =====
# Standard library and third-party imports
import logging
from datetime import datetime
from types import MappingProxyType
from typing import Any, Dict, Mapping

from jinja2 import DictLoader, Environment, StrictUndefined, Template, TemplateError

# Local imports
from ..constants import PING_QUERY
from ..errors import TemplateRenderError
from ..models import Command, CommandKind, HeaderConfig
from . import utils
from .templates import TEMPLATES


# ===== SECTION: ENVIRONMENT =====

FILTERS = {
    "pystr": utils.python_string_literal,
    "docstring": utils.docstring,
    "import_line": utils.import_line,
    "param_list": utils.param_list,
    "call_args": utils.call_args,
    "bind_args": utils.bind_args,
    "output_locals": utils.output_locals,
    "keyword_binding": utils.keyword_binding,
    "tuple_type": utils.tuple_type,
}

# Template used for each command kind
KIND_TEMPLATES = {
    CommandKind.EXEC: "exec",
    CommandKind.READ_ONE: "read_one",
    CommandKind.READ_MANY: "read",
}


def make_environment() -> Environment:
    """Creates the Jinja2 environment holding all norm templates."""
    env = Environment(
        loader=DictLoader(TEMPLATES),
        undefined=StrictUndefined,
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
        autoescape=False,
    )
    env.filters.update(FILTERS)
    return env


def _load(env: Environment, name: str) -> Template:
    try:
        return env.get_template(name)
    except TemplateError as e:
        raise TemplateRenderError(f"Failed to load template '{name}': {e}") from e


# ===== SECTION: RENDERERS =====

class HeaderRenderer:
    """Renders the module preamble from the header configuration."""

    def __init__(self, template: Template):
        self.template = template

    def render(self, header: HeaderConfig, now: datetime) -> str:
        try:
            return self.template.render(
                date=now.isoformat(sep=" ", timespec="seconds"),
                package=header.package,
                driver_lib=header.driver_lib,
                driver_name=header.driver_name,
                imports=header.imports,
                ping_query=PING_QUERY,
            )
        except TemplateError as e:
            raise TemplateRenderError(f"Failed to render module header: {e}") from e


class CommandRenderer:
    """Renders one command through the template of its kind."""

    def __init__(self, kind: CommandKind, template: Template):
        self.kind = kind
        self.template = template

    @staticmethod
    def context(command: Command) -> Dict[str, Any]:
        """
        Builds the template context for a command.

        Generated names all derive from the command name; the result type
        is the declared model when there is one, else the generated record.
        """
        output_class = utils.output_class_name(command.name)
        return {
            "command": command,
            "func": utils.function_name(command.name),
            "scan_func": utils.scan_function_name(command.name),
            "sql_const": utils.sql_constant_name(command.name),
            "output_class": output_class,
            "cursor_class": utils.cursor_class_name(command.name),
            "result_type": command.model or output_class,
        }

    def render(self, command: Command) -> str:
        if command.kind is not self.kind:
            raise TemplateRenderError(
                f"{self.kind.value} renderer cannot render a {command.kind.value} command",
                command_name=command.name,
            )
        logging.debug(f"Rendering {command.kind.value} command '{command.name}'")
        try:
            return self.template.render(**self.context(command))
        except TemplateError as e:
            raise TemplateRenderError(f"Failed to render template: {e}", command_name=command.name) from e


def build_renderers(env: Environment = None) -> Mapping[CommandKind, CommandRenderer]:
    """
    Builds the read-only mapping from command kind to renderer.

    Args:
        env: Jinja2 environment to load templates from; a fresh one by default

    Returns:
        Mapping[CommandKind, CommandRenderer]: One renderer per command kind
    """
    env = env or make_environment()
    return MappingProxyType({
        kind: CommandRenderer(kind, _load(env, name))
        for kind, name in KIND_TEMPLATES.items()
    })


def build_header_renderer(env: Environment = None) -> HeaderRenderer:
    env = env or make_environment()
    return HeaderRenderer(_load(env, "header"))
