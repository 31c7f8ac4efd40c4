"""In-process registry of live agents.

Agents are not safe for concurrent use, so every operation that touches an
agent through the registry runs under that agent's lock. Independent agents
never block each other.
"""

import asyncio
import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from maestro.models.chat import AgentConfig
from maestro.services.agent import GeminiAgent
from maestro.services.client import AgentClient

logger = logging.getLogger(__name__)


class AgentNotFound(KeyError):
    """No agent is registered under the given id."""


class AgentRegistry:
    """Creates, looks up and serializes access to agents."""

    def __init__(self, agent_client: AgentClient | None = None) -> None:
        self._agent_client = agent_client
        self.agents: dict[str, GeminiAgent] = {}
        self._locks: dict[str, asyncio.Lock] = {}

    @property
    def agent_client(self) -> AgentClient:
        """Shared client, built from settings on first use."""
        if self._agent_client is None:
            self._agent_client = AgentClient.from_settings()
        return self._agent_client

    @agent_client.setter
    def agent_client(self, value: AgentClient | None) -> None:
        self._agent_client = value

    def create(self, config: AgentConfig | None = None) -> GeminiAgent:
        """Create and register a new agent."""
        agent = self.agent_client.create_agent(config)
        self.agents[agent.agent_id] = agent
        self._locks[agent.agent_id] = asyncio.Lock()
        return agent

    def get(self, agent_id: str) -> GeminiAgent:
        """Get a registered agent or raise AgentNotFound."""
        agent = self.agents.get(agent_id)
        if agent is None:
            raise AgentNotFound(agent_id)
        return agent

    @asynccontextmanager
    async def acquire(self, agent_id: str) -> AsyncIterator[GeminiAgent]:
        """Hold the agent's lock for the duration of one operation."""
        agent = self.get(agent_id)
        lock = self._locks[agent_id]
        if lock.locked():
            logger.info(f"Agent {agent_id} busy, waiting for the in-flight call")
        async with lock:
            yield agent

    def remove(self, agent_id: str) -> None:
        """Forget an agent. In-flight calls finish on the detached instance."""
        if self.agents.pop(agent_id, None) is None:
            raise AgentNotFound(agent_id)
        self._locks.pop(agent_id, None)
        logger.info(f"Agent removed: {agent_id}")

    def clear(self) -> None:
        self.agents.clear()
        self._locks.clear()


# Singleton instance
agent_registry = AgentRegistry()
