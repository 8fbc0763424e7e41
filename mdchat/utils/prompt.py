"""Input prompt prefix shown before each REPL read."""

import os
from pathlib import Path

from .ansi import Ansi


def display_directory() -> str:
    """Return the working directory with the home directory shown as ``~``."""
    try:
        current = os.getcwd()
    except OSError:
        return "unknown"

    try:
        home = str(Path.home())
    except RuntimeError:
        return current

    if current.startswith(home):
        return "~" + current[len(home):]
    return current


def format_input_prefix(directory: str, multiline: bool) -> str:
    formatted_dir = Ansi.style(f"({directory})", Ansi.FG_DIR)
    formatted_you = Ansi.style("You", Ansi.FG_YOU, Ansi.BOLD)

    if multiline:
        indicator = Ansi.style("[Multiline]", Ansi.FG_MULTILINE)
        return f"{formatted_dir} {indicator} {formatted_you}: "
    return f"{formatted_dir} {formatted_you}: "
