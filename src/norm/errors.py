import json


# ===== SECTION: ERROR CLASSES =====
# Custom exception classes for norm

class NormError(Exception):
    """Base class for all norm errors."""
    pass


class ParsingError(NormError):
    """Error while scanning a norm file."""
    def __init__(self, message: str, line_number: int = None, line: str = None, file_name: str = None, hint: str = None):
        self.line_number = line_number
        self.line = line
        self.file_name = file_name

        details = ""
        if file_name:
            details += f" in file '{file_name}'"
        if line_number is not None:
            details += f" on line {line_number}"
        if line is not None:
            # Truncate very long lines
            snippet = line if len(line) <= 100 else line[:97] + "..."
            # Quoted and escaped so invisible characters show
            details += f": {json.dumps(snippet, ensure_ascii=False)}"
        if hint:
            details += f" ({hint})"

        super().__init__(f"{message}{details}")


class MissingSentinelError(ParsingError):
    """The file does not start with the `-- !norm` marker."""
    def __init__(self, line_number: int = None, line: str = None, file_name: str = None):
        super().__init__("Not a valid norm file", line_number=line_number, line=line, file_name=file_name)


class FormatError(ParsingError):
    """A known directive with the wrong number or shape of arguments."""
    def __init__(self, line_number: int, line: str, file_name: str = None, hint: str = None):
        super().__init__("Format error", line_number=line_number, line=line, file_name=file_name, hint=hint)


class UnknownDirectiveError(ParsingError):
    """A `-- !` line that names no directive valid at its position."""
    def __init__(self, line_number: int, line: str, file_name: str = None):
        super().__init__("Unknown command", line_number=line_number, line=line, file_name=file_name)


class HeaderOrderError(ParsingError):
    """A well-formed header directive that appears after the first command."""
    def __init__(self, line_number: int, line: str, file_name: str = None):
        super().__init__(
            "Header directive after the first command",
            line_number=line_number,
            line=line,
            file_name=file_name,
        )


class CodeGenerationError(NormError):
    """Error during Python code generation."""
    def __init__(self, message: str, command_name: str = None, line_number: int = None):
        self.command_name = command_name
        self.line_number = line_number

        details = ""
        if command_name:
            details += f" for command '{command_name}'"
        if line_number is not None:
            details += f" on line {line_number}"

        super().__init__(f"{message}{details}")


class TemplateRenderError(CodeGenerationError):
    """A template failed to render; this points at a defect in the templates."""
    pass


class NameCollisionError(CodeGenerationError):
    """A command would generate a name that is already defined in the module."""
    pass


class FormatterError(NormError):
    """The generated source was rejected by the formatter."""
    def __init__(self, message: str, source: str = None):
        self.source = source
        super().__init__(message)
