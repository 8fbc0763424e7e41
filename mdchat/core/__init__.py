from .transcript import Message, Role, Transcript
from .commands import Mode, classify
from .config import ChatConfig, ConfigError, load_config

__all__ = [
    "Message",
    "Role",
    "Transcript",
    "Mode",
    "classify",
    "ChatConfig",
    "ConfigError",
    "load_config",
]
