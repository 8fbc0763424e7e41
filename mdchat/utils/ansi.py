"""Colour and styling helpers built on :mod:`rich`."""

import os
from rich.console import Console
from rich.markup import escape


console = Console(highlight=False)


class Ansi:
    """Lightweight collection of style names used throughout the app."""

    BOLD = "bold"

    FG_GREEN = "green"
    FG_RED = "red"

    # 256-colour palette entries used by the prompt and the reply header
    FG_DIR = "color(86)"
    FG_YOU = "color(183)"
    FG_MULTILINE = "color(204)"
    FG_AI_NAME = "color(39)"
    FG_MODEL = "color(178)"

    @staticmethod
    def style(text: str, *codes: str) -> str:
        """Return *text* escaped and wrapped in rich markup unless ``NO_COLOR`` is set."""
        if os.getenv("NO_COLOR") is not None:
            return escape(text)
        style = " ".join(codes)
        return f"[{style}]{escape(text)}[/]"


# Common labels used throughout the application
ASSISTANT_LABEL = Ansi.style("assistant", Ansi.FG_GREEN, Ansi.BOLD)
ERROR_LABEL = Ansi.style("error", Ansi.FG_RED, Ansi.BOLD)
