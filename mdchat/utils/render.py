"""Markdown rendering of model replies using :mod:`rich`.

Styles are JSON files in ``styles/`` (or ``$MDCHAT_STYLES_DIR``). Each one is
an object mapping rich theme names such as ``markdown.h1`` or
``markdown.code`` to style definitions, with an optional ``code_theme`` key
naming the pygments theme used for fenced code blocks::

    {
        "code_theme": "monokai",
        "markdown.h1": "bold color(39)",
        "markdown.code": "color(203) on color(236)"
    }
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Dict, Tuple

from rich.errors import StyleSyntaxError
from rich.markdown import Markdown
from rich.theme import Theme

from .ansi import Ansi, console

LOGGER = logging.getLogger(__name__)

STYLES_DIR_ENV_VAR = "MDCHAT_STYLES_DIR"
DEFAULT_STYLES_DIR = "styles"
DEFAULT_CODE_THEME = "monokai"
WORD_WRAP = 100


class RenderError(Exception):
    """Raised when a reply cannot be rendered, e.g. the style is unusable."""


def style_path(style: str) -> Path:
    styles_dir = Path(os.getenv(STYLES_DIR_ENV_VAR) or DEFAULT_STYLES_DIR)
    return styles_dir / f"{style}.json"


def load_style(style: str) -> Tuple[Theme, str]:
    """Return the rich theme and code theme for the named style."""
    path = style_path(style)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise RenderError(f"cannot load style '{style}' from {path}: {exc.strerror or exc}") from exc
    except UnicodeDecodeError as exc:
        raise RenderError(f"style file {path} is not valid UTF-8: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise RenderError(f"style file {path} is not valid JSON: {exc}") from exc

    if not isinstance(data, dict):
        raise RenderError(f"style file {path} must contain a JSON object")

    code_theme = data.pop("code_theme", DEFAULT_CODE_THEME)
    styles: Dict[str, str] = {}
    for name, definition in data.items():
        if not isinstance(definition, str):
            raise RenderError(f"style '{name}' in {path} must be a string")
        styles[name] = definition

    try:
        theme = Theme(styles)
    except StyleSyntaxError as exc:
        raise RenderError(f"invalid style definition in {path}: {exc}") from exc

    LOGGER.debug("loaded style %s (%d entries) from %s", style, len(styles), path)
    return theme, str(code_theme)


def render_response(response: str, style: str, ai_name: str, model: str) -> None:
    """Print *response* as Markdown under an ``ai_name (model):`` header."""
    theme, code_theme = load_style(style)

    formatted_ai_name = Ansi.style(ai_name, Ansi.FG_AI_NAME, Ansi.BOLD)
    formatted_model = Ansi.style(f"({model})", Ansi.FG_MODEL)

    console.print()
    console.print(f"{formatted_ai_name} {formatted_model}: ")
    with console.use_theme(theme):
        console.print(Markdown(response, code_theme=code_theme), width=WORD_WRAP)
