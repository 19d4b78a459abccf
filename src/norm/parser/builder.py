# ===== SECTION: IMPORTS =====
import logging
from typing import List, Optional

from ..models import Arg, Command, CommandKind


# ===== SECTION: BUILDER =====

class CommandBuilder:
    """
    Accumulates one command block into a Command.

    Fields keep the order in which their directives were encountered, no
    matter how directives and SQL lines are interleaved.
    """

    def __init__(self, kind: CommandKind, name: str, line_number: int = 0):
        self.kind = kind
        self.name = name
        self.line_number = line_number
        self.inputs: List[Arg] = []
        self.outputs: List[Arg] = []
        self.model: Optional[str] = None
        self.doc: List[str] = []
        self.body: List[str] = []

    def add_input(self, name: str, type_: str) -> None:
        self.inputs.append(Arg(name, type_))

    def add_output(self, name: str, type_: str) -> None:
        self.outputs.append(Arg(name, type_))

    def add_doc(self, text: str) -> None:
        self.doc.append(text)

    def set_model(self, model: str) -> None:
        if self.model is not None and self.model != model:
            logging.warning(f"Command '{self.name}' declares model '{self.model}' and then '{model}'; using '{model}'")
        self.model = model

    def add_body_line(self, line: str) -> None:
        self.body.append(line)

    def apply(self, directive_name: str, args: tuple) -> None:
        """Applies a block directive by name."""
        handlers = {
            "input": self.add_input,
            "output": self.add_output,
            "doc": self.add_doc,
            "model": self.set_model,
        }
        handlers[directive_name](*args)

    def build(self) -> Command:
        return Command(
            kind=self.kind,
            name=self.name,
            inputs=tuple(self.inputs),
            outputs=tuple(self.outputs),
            model=self.model,
            doc=tuple(self.doc),
            body=tuple(self.body),
            line_number=self.line_number,
        )
