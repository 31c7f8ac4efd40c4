"""Request and response models for the HTTP API."""

from typing import Any

from pydantic import Field

from maestro.models.base import BaseSchema
from maestro.models.chat import ChatMessage, Turn
from maestro.models.gemini import GeminiModel, ReasoningEffort


class AgentInfo(BaseSchema):
    """Public view of a live agent."""

    id: str
    model: GeminiModel
    system_prompt: str
    current_prompt: str
    reasoning_effort: ReasoningEffort
    temperature: float
    history: list[Turn] = Field(default_factory=list)


class PromptUpdate(BaseSchema):
    """Payload for replacing an agent's current prompt."""

    prompt: str


class MemoryUpdate(BaseSchema):
    """Payload for seeding an agent's memory."""

    messages: list[ChatMessage] = Field(default_factory=list)


class InvokeRequest(BaseSchema):
    """Payload for an invoke call.

    ``response_schema`` is a JSON-schema-like dict in the SDK's Schema shape.
    """

    prompt: str | None = None
    web_search: bool = False
    response_schema: dict[str, Any] | None = None


class ErrorPayload(BaseSchema):
    """Payload for error responses."""

    code: str
    message: str
    recoverable: bool = True
