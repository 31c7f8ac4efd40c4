"""Public entry points: agents, the shared client and audio transcription."""

from .agent import GeminiAgent
from .client import AgentClient
from .transcription import TranscriptionService

__all__ = [
    "AgentClient",
    "GeminiAgent",
    "TranscriptionService",
]
