"""Reading files attached to the conversation with ``:file``."""

from pathlib import Path


def read_context_file(name: str) -> str:
    """Return the full text of *name*; ``OSError`` and decode errors propagate."""
    return Path(name).read_text(encoding="utf-8")
