"""Supported Gemini models and reasoning-effort levels."""

from enum import Enum

from google.genai import types


class GeminiModel(str, Enum):
    """Model identifiers accepted by the generation service."""

    GEMINI_3_PRO = "gemini-3-pro-preview"
    GEMINI_3_FLASH = "gemini-3-flash-preview"
    GEMINI_2_5_FLASH = "gemini-2.5-flash"
    GEMINI_2_5_FLASH_LITE = "gemini-2.5-flash-lite"
    GEMINI_2_5_PRO = "gemini-2.5-pro"
    GEMINI_2_0_FLASH = "gemini-2.0-flash"


class ReasoningEffort(str, Enum):
    """How much thinking the model may spend before answering."""

    MINIMAL = "minimal"
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

    def to_thinking_level(self) -> types.ThinkingLevel:
        """Map onto the SDK's thinking level enum."""
        return types.ThinkingLevel(self.value.upper())
