"""Build the GenerateContentConfig sent with each generation call."""

import logging
from typing import TYPE_CHECKING, Any

from google.genai import types

from maestro.core.errors import InvalidArgument
from maestro.prompts import DEFAULT_SYSTEM_PROMPT
from maestro.services.capabilities import model_id, supports_reasoning_control

if TYPE_CHECKING:
    from maestro.services.agent import GeminiAgent

logger = logging.getLogger(__name__)


def build_request_config(
    agent: "GeminiAgent",
    *,
    with_search_tool: bool = False,
    response_schema: types.Schema | None = None,
) -> types.GenerateContentConfig:
    """Build a fresh request config from the agent's parameters.

    The thinking config is only attached for models that accept it.
    Structured output and the search tool cannot be combined on one call.
    """
    if with_search_tool and response_schema is not None:
        raise InvalidArgument("Structured output cannot be combined with the web search tool")

    options: dict[str, Any] = {
        "system_instruction": types.Content(
            parts=[types.Part(text=agent.system_prompt or DEFAULT_SYSTEM_PROMPT)]
        ),
        "temperature": agent.temperature if agent.temperature is not None else 0.0,
    }

    if supports_reasoning_control(agent.model):
        options["thinking_config"] = types.ThinkingConfig(
            thinking_level=agent.reasoning_effort.to_thinking_level()
        )

    if response_schema is not None:
        options["response_mime_type"] = "application/json"
        options["response_schema"] = response_schema

    if with_search_tool:
        options["tools"] = [types.Tool(google_search=types.GoogleSearch())]

    config = types.GenerateContentConfig(**options)

    logger.debug(
        f"Built request config for {model_id(agent.model)}: "
        f"thinking={config.thinking_config is not None}, "
        f"schema={response_schema is not None}, search={with_search_tool}"
    )
    return config
