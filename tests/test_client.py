"""Agent client factory tests."""

from unittest.mock import patch

import pytest

from maestro.core.errors import InvalidArgument, NotConfigured
from maestro.models.chat import AgentConfig, ChatMessage
from maestro.models.gemini import GeminiModel
from maestro.services.client import AgentClient


@pytest.mark.parametrize("api_key", ["", "   ", None])
def test_api_key_is_required(api_key):
    with pytest.raises(InvalidArgument):
        AgentClient(api_key=api_key)


def test_api_key_builds_genai_client():
    with patch("maestro.services.client.genai.Client") as client_cls:
        agent_client = AgentClient(api_key="test-key")
    client_cls.assert_called_once_with(api_key="test-key")
    assert agent_client.client is client_cls.return_value


def test_from_settings_without_key():
    with patch("maestro.services.client.settings") as mock_settings:
        mock_settings.gemini_api_key = ""
        with pytest.raises(NotConfigured):
            AgentClient.from_settings()


def test_agents_share_client_but_not_history(genai_client):
    agent_client = AgentClient(client=genai_client)
    first = agent_client.create_agent(AgentConfig(model=GeminiModel.GEMINI_2_5_PRO))
    second = agent_client.create_agent()

    first.update_memory([ChatMessage(role="user", message="only for first")])

    assert first.agent_id != second.agent_id
    assert first.model == GeminiModel.GEMINI_2_5_PRO
    assert len(first.history) == 1
    assert second.history == ()


def test_public_entry_points():
    from maestro.services import AgentClient as Exported, GeminiAgent, TranscriptionService

    assert Exported is AgentClient
    assert GeminiAgent.__name__ == "GeminiAgent"
    assert TranscriptionService.__name__ == "TranscriptionService"
