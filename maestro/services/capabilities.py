"""Model capability lookups.

Sending a thinking config to a model that has no reasoning-effort control is
rejected by the service, so every request builder asks here first.
"""

from maestro.models.gemini import GeminiModel

# Models that do not accept a thinking level
MODELS_WITHOUT_REASONING_CONTROL = frozenset({
    GeminiModel.GEMINI_2_5_FLASH.value,
    GeminiModel.GEMINI_2_5_FLASH_LITE.value,
    GeminiModel.GEMINI_2_5_PRO.value,
    GeminiModel.GEMINI_2_0_FLASH.value,
})


def model_id(model: GeminiModel | str) -> str:
    """Return the wire identifier for a model enum or raw string."""
    if isinstance(model, GeminiModel):
        return model.value
    return str(model)


def supports_reasoning_control(model: GeminiModel | str) -> bool:
    """Check whether a model accepts a reasoning-effort control.

    Unlisted identifiers, including future models, are assumed to support it.
    """
    return model_id(model) not in MODELS_WITHOUT_REASONING_CONTROL
