"""Conversation, attachment and result models."""

from typing import Literal

from google.genai import types
from pydantic import ConfigDict, Field

from maestro.core.config import settings
from maestro.models.base import BaseSchema
from maestro.models.gemini import GeminiModel, ReasoningEffort

Role = Literal["user", "model"]
AttachmentState = Literal["processing", "active", "failed"]


class FileReference(BaseSchema):
    """Pointer to a file already ingested by the file service."""

    model_config = ConfigDict(frozen=True)

    uri: str
    mime_type: str


class Turn(BaseSchema):
    """One entry of the conversation log.

    Content is either plain text or a file reference, never both. A file
    and the prompt that goes with it are stored as two separate turns.
    """

    model_config = ConfigDict(frozen=True)

    role: Role
    content: str | FileReference

    @property
    def is_file(self) -> bool:
        return isinstance(self.content, FileReference)

    def to_content(self) -> types.Content:
        """Convert to the SDK's Content shape for a generation request."""
        if isinstance(self.content, FileReference):
            part = types.Part(
                file_data=types.FileData(
                    file_uri=self.content.uri,
                    mime_type=self.content.mime_type,
                )
            )
        else:
            part = types.Part(text=self.content)
        return types.Content(role=self.role, parts=[part])


class ChatMessage(BaseSchema):
    """Externally supplied memory entry (retrieved context, prior replies)."""

    role: str
    message: str


class Attachment(BaseSchema):
    """A local file uploaded to the file service."""

    local_path: str
    name: str | None = None
    remote_uri: str | None = None
    mime_type: str | None = None
    state: AttachmentState = "processing"

    def to_reference(self) -> FileReference:
        return FileReference(uri=self.remote_uri or "", mime_type=self.mime_type or "")


class AgentConfig(BaseSchema):
    """Parameters used to create an agent.

    Omitted model, reasoning effort and temperature fall back to settings.
    """

    model: GeminiModel = Field(default_factory=lambda: GeminiModel(settings.default_model))
    system_prompt: str | None = None
    user_prompt: str = ""
    reasoning_effort: ReasoningEffort = Field(
        default_factory=lambda: ReasoningEffort(settings.default_reasoning_effort)
    )
    temperature: float = Field(default_factory=lambda: settings.default_temperature)


class ChatResponse(BaseSchema):
    """Uniform result of every successful generation call.

    ``content`` is plain text, or a raw JSON document when a response schema
    was requested. Token counters are 0 when the service did not report them.
    """

    content: str = ""
    input_tokens: int = Field(default=0, ge=0)
    output_tokens: int = Field(default=0, ge=0)
    total_tokens: int = Field(default=0, ge=0)
