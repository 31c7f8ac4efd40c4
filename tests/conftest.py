"""Shared fixtures: a genai.Client-shaped fake and response builders."""

from unittest.mock import AsyncMock, MagicMock

import pytest
from google.genai import types

from maestro.services.attachments import AttachmentUploader
from maestro.services.client import AgentClient
from maestro.services.registry import agent_registry


def make_response(
    *texts: str,
    usage: tuple[int, int, int] | None = None,
    candidates: list[types.Candidate] | None = None,
) -> types.GenerateContentResponse:
    """Build a GenerateContentResponse with one candidate holding ``texts`` as parts."""
    if candidates is None:
        candidates = []
        if texts:
            candidates.append(types.Candidate(
                content=types.Content(role="model", parts=[types.Part(text=t) for t in texts])
            ))
    usage_metadata = None
    if usage is not None:
        usage_metadata = types.GenerateContentResponseUsageMetadata(
            prompt_token_count=usage[0],
            candidates_token_count=usage[1],
            total_token_count=usage[2],
        )
    return types.GenerateContentResponse(candidates=candidates, usage_metadata=usage_metadata)


def make_file(state: str, name: str = "files/abc123") -> types.File:
    """Build a file handle in the given state."""
    return types.File(
        name=name,
        uri=f"https://generativelanguage.googleapis.com/v1beta/{name}",
        mime_type="audio/wav",
        state=types.FileState(state),
    )


@pytest.fixture
def genai_client() -> MagicMock:
    """Fake genai.Client exposing the async models/files surface."""
    client = MagicMock()
    client.aio.models.generate_content = AsyncMock(return_value=make_response("ok"))
    client.aio.files.upload = AsyncMock(return_value=make_file("ACTIVE"))
    client.aio.files.get = AsyncMock(return_value=make_file("ACTIVE"))
    return client


@pytest.fixture
def uploader(genai_client) -> AttachmentUploader:
    """Uploader that polls without sleeping."""
    return AttachmentUploader(genai_client, poll_interval=0, max_poll_attempts=5)


@pytest.fixture
def wav_file(tmp_path):
    """A 44-byte file with a WAV header."""
    path = tmp_path / "sample.wav"
    path.write_bytes(b"RIFF\x00\x00\x00\x00WAVE" + b"\x00" * 32)
    return str(path)


@pytest.fixture
def registry_client(genai_client):
    """Point the global agent registry at the fake client."""
    agent_registry.agent_client = AgentClient(client=genai_client)
    yield genai_client
    agent_registry.clear()
    agent_registry.agent_client = None
