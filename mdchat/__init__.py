"""Terminal chat client for OpenAI models with Markdown-rendered replies.

Usage
-----
    mdchat --prompt "explain rebase vs merge"      # single-shot
    mdchat --interactive                           # REPL

Interactive commands (enter them as a line at the prompt):

    :q              – exit
    :multi          – enter multi-line mode (type it again to leave)
    :end            – send the lines typed in multi-line mode
    :remove         – drop the most recent multi-line line
    :file PATH      – add a file's content to the conversation

Run `python -m mdchat` or use the `mdchat` console script.
"""
# Re-export useful symbols for convenience
from .core import ChatConfig, Message, Mode, Role, Transcript, classify, load_config
from .core.client import CompletionError, OpenAIClientWrapper
from .cli import ChatCLI, run_cli, run_single_shot

__all__ = [
    "ChatConfig",
    "Message",
    "Mode",
    "Role",
    "Transcript",
    "classify",
    "load_config",
    "CompletionError",
    "OpenAIClientWrapper",
    "ChatCLI",
    "run_cli",
    "run_single_shot",
]
