"""Agent API endpoints."""

import logging

from fastapi import APIRouter, HTTPException, Response
from google.genai import types
from pydantic import ValidationError

from maestro.core.errors import InvalidArgument
from maestro.models.api import AgentInfo, InvokeRequest, MemoryUpdate, PromptUpdate
from maestro.models.chat import AgentConfig, ChatResponse
from maestro.services.agent import GeminiAgent
from maestro.services.registry import AgentNotFound, agent_registry

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/agents", tags=["agents"])


def _info(agent: GeminiAgent) -> AgentInfo:
    return AgentInfo(
        id=agent.agent_id,
        model=agent.model,
        system_prompt=agent.system_prompt,
        current_prompt=agent.current_prompt,
        reasoning_effort=agent.reasoning_effort,
        temperature=agent.temperature,
        history=list(agent.history),
    )


def _not_found(agent_id: str) -> HTTPException:
    return HTTPException(status_code=404, detail=f"Agent not found: {agent_id}")


@router.post("", response_model=AgentInfo, status_code=201)
async def create_agent(config: AgentConfig) -> AgentInfo:
    """Create a new agent with an empty conversation log."""
    agent = agent_registry.create(config)
    return _info(agent)


@router.get("/{agent_id}", response_model=AgentInfo)
async def get_agent(agent_id: str) -> AgentInfo:
    """Get agent parameters and its conversation log."""
    try:
        return _info(agent_registry.get(agent_id))
    except AgentNotFound:
        raise _not_found(agent_id)


@router.delete("/{agent_id}", status_code=204)
async def delete_agent(agent_id: str) -> Response:
    """Drop an agent and its conversation log."""
    try:
        agent_registry.remove(agent_id)
    except AgentNotFound:
        raise _not_found(agent_id)
    return Response(status_code=204)


@router.put("/{agent_id}/prompt", response_model=AgentInfo)
async def set_prompt(agent_id: str, update: PromptUpdate) -> AgentInfo:
    """Replace the prompt used by the next invoke."""
    try:
        async with agent_registry.acquire(agent_id) as agent:
            agent.set_prompt(update.prompt)
            return _info(agent)
    except AgentNotFound:
        raise _not_found(agent_id)


@router.post("/{agent_id}/memory", response_model=AgentInfo)
async def update_memory(agent_id: str, update: MemoryUpdate) -> AgentInfo:
    """Append external messages to the conversation log."""
    try:
        async with agent_registry.acquire(agent_id) as agent:
            agent.update_memory(update.messages)
            return _info(agent)
    except AgentNotFound:
        raise _not_found(agent_id)


@router.post("/{agent_id}/invoke", response_model=ChatResponse)
async def invoke(agent_id: str, request: InvokeRequest) -> ChatResponse:
    """Run one generation call on the agent.

    Routes to the structured-output path when a schema is given and to the
    web-search path when requested. Asking for both is rejected.
    """
    schema = None
    if request.response_schema is not None:
        try:
            schema = types.Schema.model_validate(request.response_schema)
        except ValidationError as e:
            raise InvalidArgument(f"Invalid response schema: {e}") from e
    if request.web_search and schema is not None:
        raise InvalidArgument("Structured output is not available with web search")

    try:
        async with agent_registry.acquire(agent_id) as agent:
            if request.prompt is not None:
                agent.set_prompt(request.prompt)
            if request.web_search:
                return await agent.invoke_with_web_search(response_schema=schema)
            if schema is not None:
                return await agent.invoke_with_structured_output(schema)
            return await agent.invoke()
    except AgentNotFound:
        raise _not_found(agent_id)
