"""Conversation history replayed to the model on every turn."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Dict, Iterator, List, Tuple


class Role(str, enum.Enum):
    SYSTEM = "system"
    USER = "user"
    ASSISTANT = "assistant"


@dataclass(frozen=True)
class Message:
    """A single role-tagged chat message."""

    role: Role
    content: str

    def as_dict(self) -> Dict[str, str]:
        return {"role": self.role.value, "content": self.content}


class Transcript:
    """Ordered, append-only list of messages starting with the system prompt.

    Element 0 is always the one system message given at construction time.
    The whole history is sent with every request; nothing is ever windowed
    or dropped.
    """

    def __init__(self, system_prompt: str) -> None:
        self._messages: List[Message] = [Message(Role.SYSTEM, system_prompt)]

    def __len__(self) -> int:
        return len(self._messages)

    def __iter__(self) -> Iterator[Message]:
        return iter(self._messages)

    @property
    def messages(self) -> Tuple[Message, ...]:
        return tuple(self._messages)

    @property
    def system_prompt(self) -> str:
        return self._messages[0].content

    def append(self, role: Role, content: str) -> "Transcript":
        role = Role(role)
        if role is Role.SYSTEM:
            raise ValueError("the system prompt can only be set when the transcript is created")
        self._messages.append(Message(role, content))
        return self

    def add_user_message(self, content: str) -> None:
        self.append(Role.USER, content)

    def add_assistant_message(self, content: str) -> None:
        self.append(Role.ASSISTANT, content)

    def snapshot(self) -> List[Dict[str, str]]:
        """Return the full history in the shape the chat API expects."""
        return [message.as_dict() for message in self._messages]
