"""Session-oriented Gemini agents with multimodal and structured-output calls."""

__version__ = "0.1.0"
