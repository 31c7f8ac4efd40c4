"""Capability table tests."""

import pytest

from maestro.models.gemini import GeminiModel
from maestro.services.capabilities import MODELS_WITHOUT_REASONING_CONTROL, supports_reasoning_control


@pytest.mark.parametrize("model", [
    GeminiModel.GEMINI_2_5_FLASH,
    GeminiModel.GEMINI_2_5_FLASH_LITE,
    GeminiModel.GEMINI_2_5_PRO,
    GeminiModel.GEMINI_2_0_FLASH,
])
def test_models_without_reasoning_control(model):
    """Listed models never get a reasoning control."""
    assert not supports_reasoning_control(model)
    assert not supports_reasoning_control(model.value)


def test_gemini_3_models_support_reasoning_control():
    """Gemini 3 models accept a thinking level."""
    assert supports_reasoning_control(GeminiModel.GEMINI_3_PRO)
    assert supports_reasoning_control(GeminiModel.GEMINI_3_FLASH)


def test_unknown_models_are_assumed_to_support_it():
    """Future or unlisted identifiers default to supported."""
    assert supports_reasoning_control("gemini-4-ultra")
    assert supports_reasoning_control("")


def test_table_covers_only_known_models():
    known = {m.value for m in GeminiModel}
    assert MODELS_WITHOUT_REASONING_CONTROL <= known
