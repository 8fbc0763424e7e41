from .ansi import (
    Ansi,
    ASSISTANT_LABEL,
    ERROR_LABEL,
    console,
)
from .files import read_context_file
from .prompt import display_directory, format_input_prefix
from .render import RenderError, render_response
from .spinner import Spinner

__all__ = [
    "Ansi",
    "ASSISTANT_LABEL",
    "ERROR_LABEL",
    "console",
    "read_context_file",
    "display_directory",
    "format_input_prefix",
    "RenderError",
    "render_response",
    "Spinner",
]
