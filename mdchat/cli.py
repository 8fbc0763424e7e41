"""Terminal chat client for OpenAI models with Markdown replies.

Runs either a single prompt (``--prompt``) or an interactive REPL
(``--interactive``) that keeps the whole conversation in memory.
"""
from __future__ import annotations

import argparse
import logging
import os
import sys
import readline  # noqa: F401 – side-effect: history & line editing
from typing import Callable, List, Optional, Sequence

from openai import OpenAI  # type: ignore
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel

from .core import ChatConfig, ConfigError, Mode, Transcript, classify, load_config
from .core.client import CompletionError, OpenAIClientWrapper
from .core.commands import (
    CMD_END,
    CMD_MULTI,
    CMD_QUIT,
    CMD_REMOVE,
    Command,
    End,
    EnterMultiline,
    ExitMultiline,
    LoadFile,
    PlainText,
    Quit,
    RemoveLast,
)
from .core.config import resolve_config_path
from .utils import (
    ERROR_LABEL,
    RenderError,
    console,
    display_directory,
    format_input_prefix,
    read_context_file,
    render_response,
)

LOGGER = logging.getLogger(__name__)

Renderer = Callable[[str, str, str, str], None]
FileReader = Callable[[str], str]


def _report_error(message: str) -> None:
    console.print(f"\\[{ERROR_LABEL}] {escape(message)}")


def _notice(message: str) -> None:
    console.print(escape(message))
    console.print()


# ---------------------------------------------------------------------------
# Session controller
# ---------------------------------------------------------------------------


class ChatCLI:
    """High-level orchestration class for the interactive REPL.

    Owns the transcript, the input mode, the pending multi-line buffer and
    the attached context file. Nothing else mutates them.
    """

    def __init__(
        self,
        config: ChatConfig,
        client_wrapper: OpenAIClientWrapper,
        render: Renderer = render_response,
        read_file: FileReader = read_context_file,
    ):
        self.config = config
        self.client = client_wrapper
        self._render = render
        self._read_file = read_file

        self._transcript = Transcript(config.system_prompt)
        self._mode = Mode.SINGLE_LINE
        self._pending: List[str] = []
        self._context_file: Optional[str] = None

    @property
    def transcript(self) -> Transcript:
        return self._transcript

    @property
    def mode(self) -> Mode:
        return self._mode

    @property
    def pending_lines(self) -> List[str]:
        return list(self._pending)

    @property
    def context_file(self) -> Optional[str]:
        return self._context_file

    # ---------------- Command handling ---------------

    def handle_line(self, line: str) -> bool:
        """Interpret one raw input line in the current mode. Return False to exit REPL."""
        return self.dispatch(classify(line, self._mode))

    def dispatch(self, command: Command) -> bool:
        if isinstance(command, Quit):
            console.print("Exiting interactive mode.")
            console.print()
            return False

        if isinstance(command, EnterMultiline):
            self._pending.clear()
            self._mode = Mode.MULTI_LINE
            LOGGER.debug("entered multi-line mode")
            _notice(
                f"Multiline mode. Type {CMD_END} to finish input, "
                f"{CMD_REMOVE} to delete the most recent line."
            )

        elif isinstance(command, ExitMultiline):
            self._pending.clear()
            self._mode = Mode.SINGLE_LINE
            LOGGER.debug("left multi-line mode")
            _notice("Exiting multiline mode.")

        elif isinstance(command, RemoveLast):
            if self._pending:
                self._pending.pop()
                _notice("Last line removed.")
            else:
                _notice("No lines to remove.")

        elif isinstance(command, End):
            self._flush_pending()

        elif isinstance(command, LoadFile):
            self._load_file(command.name)

        elif isinstance(command, PlainText):
            if self._mode is Mode.MULTI_LINE:
                self._pending.append(command.text)
            else:
                self._send_user_turn(self._with_context(command.text))

        else:  # pragma: no cover - the command set is closed
            raise TypeError(f"unknown command: {command!r}")

        return True

    def _with_context(self, text: str) -> str:
        if self._context_file:
            return f"(Context: {self._context_file}) {text}"
        return text

    def _flush_pending(self) -> None:
        # The session stays in multi-line mode after a flush; only :multi leaves it.
        lines, self._pending = self._pending, []
        if not lines:
            return
        self._send_user_turn("\n".join(lines))

    def _load_file(self, name: str) -> None:
        try:
            content = self._read_file(name)
        except (OSError, UnicodeDecodeError) as exc:
            _report_error(f"Error reading file: {exc}")
            return

        self._context_file = name
        self._transcript.add_user_message(f"Content of {name}:\n{content}")
        LOGGER.debug("attached %s (%d characters)", name, len(content))
        _notice(f"Added {name} to the context.")

    def _send_user_turn(self, content: str) -> None:
        self._transcript.add_user_message(content)

        try:
            reply = self.client.chat_completion(
                model=self.config.model,
                messages=self._transcript.snapshot(),
            )
        except CompletionError as exc:
            _report_error(f"Error communicating with AI: {exc}")
            return

        self._transcript.add_assistant_message(reply)

        try:
            self._render(reply, self.config.style, self.config.ai_name, self.config.model)
        except RenderError as exc:
            _report_error(f"Error formatting response: {exc}")
        console.print()

    # ---------------- Interaction loop ---------------

    def _read_multiline(self) -> bool:
        """Collect lines until :end, :multi or :q. Return False to exit REPL."""
        console.print()
        while True:
            command = classify(console.input(), self._mode)
            if not self.dispatch(command):
                return False
            if isinstance(command, (End, ExitMultiline)):
                return True

    def repl(self) -> None:
        """Run the interactive read–eval–print-loop until :q."""
        console.print(
            Panel.fit(escape(f"{self.config.ai_name} ({self.config.model})"), style="bold magenta")
        )
        _notice(
            f"Entering interactive mode. Type {CMD_QUIT} to exit or "
            f"{CMD_MULTI} to enter multiline mode."
        )

        while True:
            prefix = format_input_prefix(display_directory(), self._mode is Mode.MULTI_LINE)
            try:
                if self._mode is Mode.MULTI_LINE:
                    console.print(prefix, end="")
                    keep_going = self._read_multiline()
                else:
                    keep_going = self.handle_line(console.input(prefix))
            except KeyboardInterrupt:
                if self._mode is Mode.MULTI_LINE:
                    self._pending.clear()
                    console.print()
                    _report_error("Error reading input: interrupted, multiline input discarded")
                    continue
                console.print(escape("\n[signal caught – exiting]"))
                break
            except EOFError:
                console.print(escape("\n[end of input – exiting]"))
                break

            if not keep_going:
                break


# ---------------------------------------------------------------------------
# Single-shot runner
# ---------------------------------------------------------------------------


def run_single_shot(
    config: ChatConfig,
    client_wrapper: OpenAIClientWrapper,
    prompt: str,
    render: Renderer = render_response,
) -> int:
    """Send one prompt with the system prompt, render the reply, return the exit status."""
    transcript = Transcript(config.system_prompt)
    transcript.add_user_message(prompt)

    try:
        reply = client_wrapper.chat_completion(model=config.model, messages=transcript.snapshot())
    except CompletionError as exc:
        _report_error(f"Error: {exc}")
        return 1

    try:
        render(reply, config.style, config.ai_name, config.model)
    except RenderError as exc:
        _report_error(f"Error formatting response: {exc}")
        return 1
    return 0


# ---------------------------------------------------------------------------
# Entrypoint helpers (keeping it separate simplifies __main__ handling)
# ---------------------------------------------------------------------------


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mdchat",
        description="Chat with OpenAI models from the terminal with Markdown-rendered replies.",
    )
    parser.add_argument("--prompt", "-p", default="", help="Prompt for the LLM")
    parser.add_argument(
        "--interactive", "-i", action="store_true", help="Run in interactive mode"
    )
    parser.add_argument(
        "--config",
        help="Path to the JSON config file (default: $MDCHAT_CONFIG or ./config.json)",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    return parser


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


def run_cli(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    try:
        config = load_config(resolve_config_path(args.config))
    except ConfigError as exc:
        sys.stderr.write(f"Error loading config: {exc}\n")
        return 1

    api_key = os.getenv("OPENAI_API_KEY")
    if not api_key:
        sys.stderr.write("Error: OPENAI_API_KEY not found in env\n")
        return 1

    client_kwargs = {"api_key": api_key}
    base_url = os.getenv("OPENAI_BASE_URL")
    if base_url:
        client_kwargs["base_url"] = base_url

    client = OpenAI(**client_kwargs)  # type: ignore[arg-type]
    wrapper = OpenAIClientWrapper(client)

    if args.interactive:
        ChatCLI(config, wrapper).repl()
        return 0

    if not args.prompt:
        sys.stderr.write("Error: prompt is required in non-interactive mode\n")
        parser.print_usage(sys.stderr)
        return 1

    return run_single_shot(config, wrapper, args.prompt)


def main() -> None:  # pragma: no cover
    sys.exit(run_cli())


if __name__ == "__main__":  # pragma: no cover
    main()
