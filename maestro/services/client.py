"""Shared Gemini client holder and agent factory."""

import logging

from google import genai

from maestro.core.config import settings
from maestro.core.errors import InvalidArgument, NotConfigured
from maestro.models.chat import AgentConfig
from maestro.services.agent import GeminiAgent
from maestro.services.attachments import AttachmentUploader

logger = logging.getLogger(__name__)


class AgentClient:
    """Owns one genai.Client and creates agents bound to it.

    Agents created here share the client (and its connection pool) but
    nothing else.
    """

    def __init__(
        self,
        api_key: str | None = None,
        client: genai.Client | None = None,
    ) -> None:
        if client is None:
            if not api_key or not api_key.strip():
                raise InvalidArgument("API key cannot be empty")
            client = genai.Client(api_key=api_key)
        self.client = client

    @classmethod
    def from_settings(cls) -> "AgentClient":
        """Build a client from GEMINI_API_KEY."""
        if not settings.gemini_api_key:
            raise NotConfigured("GEMINI_API_KEY is not configured")
        return cls(api_key=settings.gemini_api_key)

    def create_agent(self, config: AgentConfig | None = None) -> GeminiAgent:
        """Create a new agent with its own empty conversation log."""
        agent = GeminiAgent(
            self.client,
            config,
            uploader=AttachmentUploader(self.client),
        )
        logger.info(f"Created agent {agent.agent_id} (model={agent.model.value})")
        return agent
