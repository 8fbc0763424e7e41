"""Classification of raw REPL input lines into commands."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Union

CMD_QUIT = ":q"
CMD_MULTI = ":multi"
CMD_END = ":end"
CMD_REMOVE = ":remove"
CMD_FILE = ":file "


class Mode(enum.Enum):
    SINGLE_LINE = "single-line"
    MULTI_LINE = "multi-line"


@dataclass(frozen=True)
class Quit:
    pass


@dataclass(frozen=True)
class EnterMultiline:
    pass


@dataclass(frozen=True)
class ExitMultiline:
    pass


@dataclass(frozen=True)
class RemoveLast:
    pass


@dataclass(frozen=True)
class End:
    pass


@dataclass(frozen=True)
class LoadFile:
    name: str


@dataclass(frozen=True)
class PlainText:
    text: str


Command = Union[Quit, EnterMultiline, ExitMultiline, RemoveLast, End, LoadFile, PlainText]


def classify(line: str, mode: Mode) -> Command:
    """Return the command *line* stands for in *mode*.

    Command tokens match case-insensitively. The ``:file `` prefix and any
    captured text are taken verbatim. In multi-line mode every line that is
    not one of ``:multi``, ``:remove``, ``:end`` or ``:q`` is plain content,
    even when it starts with a colon.
    """
    command = line.lower()

    if command == CMD_QUIT:
        return Quit()

    if mode is Mode.MULTI_LINE:
        if command == CMD_MULTI:
            return ExitMultiline()
        if command == CMD_REMOVE:
            return RemoveLast()
        if command == CMD_END:
            return End()
        return PlainText(line)

    if command == CMD_MULTI:
        return EnterMultiline()
    if line.startswith(CMD_FILE):
        return LoadFile(line[len(CMD_FILE):])
    return PlainText(line)
