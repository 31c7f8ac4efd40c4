"""Gemini agent sessions.

An agent owns one conversation log and exposes the invoke variants used by
callers: plain chat, chat grounded with Google Search, structured output and
multimodal (file + prompt). Every invoke appends its user turn(s) before the
remote call and never rolls them back.

Agents are not safe for concurrent use: run at most one operation per agent
at a time (the AgentRegistry serializes this for the HTTP layer).
"""

import asyncio
import logging
import os
import uuid
from typing import Iterable

from google import genai
from google.genai import types

from maestro.core.errors import InvalidArgument, RemoteCallFailed
from maestro.models.chat import AgentConfig, ChatMessage, ChatResponse, Turn
from maestro.models.gemini import GeminiModel, ReasoningEffort
from maestro.prompts import DEFAULT_SYSTEM_PROMPT
from maestro.services.attachments import AttachmentUploader
from maestro.services.capabilities import model_id
from maestro.services.conversation import ConversationLog
from maestro.services.normalizer import normalize_response
from maestro.services.request_config import build_request_config

logger = logging.getLogger(__name__)


class GeminiAgent:
    """A single chat session against the Gemini generation service."""

    def __init__(
        self,
        client: genai.Client,
        config: AgentConfig | None = None,
        uploader: AttachmentUploader | None = None,
        agent_id: str | None = None,
    ) -> None:
        if client is None:
            raise InvalidArgument("A Gemini client is required")
        config = config or AgentConfig()

        self.agent_id = agent_id or str(uuid.uuid4())
        self.model: GeminiModel = config.model
        self.system_prompt: str = config.system_prompt or DEFAULT_SYSTEM_PROMPT
        self.temperature: float = config.temperature
        self.reasoning_effort: ReasoningEffort = config.reasoning_effort
        self.current_prompt: str = config.user_prompt
        self._client = client
        self._uploader = uploader or AttachmentUploader(client)
        self._log = ConversationLog()

    @property
    def history(self) -> tuple[Turn, ...]:
        """Snapshot of the conversation log."""
        return self._log.turns

    def set_prompt(self, prompt: str) -> None:
        """Replace the prompt sent by the next invoke. The log is untouched."""
        self.current_prompt = prompt

    def update_memory(self, messages: Iterable[ChatMessage] | None) -> None:
        """Append externally supplied messages (retrieved context, prior replies)."""
        if not messages:
            return
        added = self._log.extend_messages(messages)
        logger.info(f"Agent {self.agent_id} memory updated with {added} messages")

    async def invoke(self, *, response_schema: types.Schema | None = None) -> ChatResponse:
        """Send the current prompt with the full history as context."""
        if response_schema is not None:
            raise InvalidArgument("Use invoke_with_structured_output for structured outputs")
        config = build_request_config(self)
        self._log.append_text("user", self.current_prompt)
        return await self._generate(config)

    async def invoke_with_web_search(
        self, *, response_schema: types.Schema | None = None
    ) -> ChatResponse:
        """Like invoke, with Google Search grounding enabled."""
        if response_schema is not None:
            raise InvalidArgument("Structured output is not available with web search")
        config = build_request_config(self, with_search_tool=True)
        self._log.append_text("user", self.current_prompt)
        return await self._generate(config)

    async def invoke_with_structured_output(self, response_schema: types.Schema) -> ChatResponse:
        """Like invoke, constraining the answer to ``response_schema``.

        The returned content is the raw JSON document; decode it with
        ``decode_structured_output`` or your own parser.
        """
        if response_schema is None:
            raise InvalidArgument("A response schema is required for structured output")
        config = build_request_config(self, response_schema=response_schema)
        self._log.append_text("user", self.current_prompt)
        return await self._generate(config)

    async def invoke_multimodal(
        self,
        file_path: str,
        response_schema: types.Schema | None = None,
    ) -> ChatResponse:
        """Upload ``file_path`` and send it with the current prompt.

        Appends two user turns: the file reference, then the prompt.

        Raises:
            InvalidArgument: file_path is empty or not an existing file.
            AttachmentFailed: The file service could not process the upload.
            RemoteCallFailed: The generation call raised.
        """
        if not file_path:
            raise InvalidArgument(
                "A file path is required for multimodal calls, use invoke for text only"
            )
        if not os.path.isfile(file_path):
            raise InvalidArgument(f"File not found: {file_path}")

        config = build_request_config(self, response_schema=response_schema)
        attachment = await self._uploader.upload(file_path)

        self._log.append_file(attachment.to_reference())
        self._log.append_text("user", self.current_prompt)
        return await self._generate(config)

    async def _generate(self, config: types.GenerateContentConfig) -> ChatResponse:
        model = model_id(self.model)
        extra = {"agent_id": self.agent_id}
        logger.info(f"Calling {model} with {len(self._log)} turns", extra=extra)
        try:
            raw = await self._client.aio.models.generate_content(
                model=model,
                contents=self._log.to_contents(),
                config=config,
            )
        except asyncio.CancelledError:
            raise
        except Exception as e:
            logger.error(f"Generation call to {model} failed: {e}", exc_info=True, extra=extra)
            raise RemoteCallFailed(f"Generation call to {model} failed: {e}") from e

        response = normalize_response(raw)
        logger.info(
            f"Got {len(response.content)} chars "
            f"(tokens in={response.input_tokens} out={response.output_tokens} "
            f"total={response.total_tokens})",
            extra=extra,
        )
        return response
