"""Normalize raw generation responses into ChatResponse.

Only the first candidate and its first part are ever read: agents request a
single completion, and later parts (thought summaries, tool calls) are not
part of the answer text.
"""

import logging
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from maestro.core.errors import SchemaDecodeFailed
from maestro.models.chat import ChatResponse

logger = logging.getLogger(__name__)

OutputT = TypeVar("OutputT", bound=BaseModel)


def _count(usage: Any, field: str) -> int:
    value = getattr(usage, field, None) if usage is not None else None
    if not isinstance(value, int) or value < 0:
        return 0
    return value


def _usage_counters(raw: Any) -> dict[str, int]:
    usage = getattr(raw, "usage_metadata", None)
    return {
        "input_tokens": _count(usage, "prompt_token_count"),
        "output_tokens": _count(usage, "candidates_token_count"),
        "total_tokens": _count(usage, "total_token_count"),
    }


def normalize_response(raw: Any) -> ChatResponse:
    """Map a GenerateContentResponse onto the uniform result.

    Never raises. Token counters are read regardless of whether any text was
    produced, so a blocked or tool-only answer still reports its usage.
    """
    counters = _usage_counters(raw)

    candidates = getattr(raw, "candidates", None)
    if not candidates:
        logger.debug("Response has no candidates")
        return ChatResponse(content="", **counters)

    content = getattr(candidates[0], "content", None)
    parts = getattr(content, "parts", None) if content is not None else None
    if not parts:
        logger.debug("First candidate has no content parts")
        return ChatResponse(content="", **counters)

    text = getattr(parts[0], "text", None)
    return ChatResponse(content=text if isinstance(text, str) else "", **counters)


def decode_structured_output(response: ChatResponse, output_type: type[OutputT]) -> OutputT:
    """Decode a structured-output completion into a pydantic model.

    Raises:
        SchemaDecodeFailed: The content is empty, not JSON, or does not fit output_type.
    """
    if not response.content.strip():
        raise SchemaDecodeFailed(f"Empty structured output for {output_type.__name__}")
    try:
        return output_type.model_validate_json(response.content)
    except ValidationError as e:
        logger.warning(f"Structured output did not match {output_type.__name__}: {e.error_count()} errors")
        raise SchemaDecodeFailed(
            f"Structured output did not match {output_type.__name__}: {e}"
        ) from e
