"""Append-only conversation log owned by a single agent."""

import logging
from typing import Iterable, Iterator

from google.genai import types

from maestro.models.chat import ChatMessage, FileReference, Role, Turn

logger = logging.getLogger(__name__)


def normalize_role(role: str | None) -> Role:
    """Map an external role onto the service's two roles.

    Only the exact string "assistant" becomes "model"; everything else,
    including "system" and "model" itself, is sent as "user".
    """
    return "model" if role == "assistant" else "user"


class ConversationLog:
    """Ordered turns sent as context with every generation call.

    Turns are never edited or removed. Role order is not enforced, any
    sequence is passed through as-is.
    """

    def __init__(self) -> None:
        self._turns: list[Turn] = []

    def __len__(self) -> int:
        return len(self._turns)

    def __iter__(self) -> Iterator[Turn]:
        return iter(self._turns)

    @property
    def turns(self) -> tuple[Turn, ...]:
        """Read-only snapshot of the log."""
        return tuple(self._turns)

    def append_text(self, role: Role, text: str) -> Turn:
        """Append a text turn."""
        turn = Turn(role=role, content=text)
        self._turns.append(turn)
        return turn

    def append_file(self, reference: FileReference, role: Role = "user") -> Turn:
        """Append a file reference turn."""
        turn = Turn(role=role, content=reference)
        self._turns.append(turn)
        return turn

    def extend_messages(self, messages: Iterable[ChatMessage]) -> int:
        """Append external messages with normalized roles. Returns how many were added."""
        added = 0
        for message in messages:
            self.append_text(normalize_role(message.role), message.message)
            added += 1
        if added:
            logger.debug(f"Conversation log extended by {added} turns (total={len(self._turns)})")
        return added

    def to_contents(self) -> list[types.Content]:
        """Render the whole log as SDK contents, in insertion order."""
        return [turn.to_content() for turn in self._turns]
