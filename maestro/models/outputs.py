"""Structured-output schemas and their decoded models."""

from google.genai import types

from maestro.models.base import BaseSchema

# Transcription plus dominant-feeling analysis of an audio file
FEELING_ANALYSIS_SCHEMA = types.Schema(
    type=types.Type.OBJECT,
    properties={
        "transcriptedText": types.Schema(type=types.Type.STRING),
        "feelingAnalysys": types.Schema(
            type=types.Type.OBJECT,
            properties={
                "dominantFeeling": types.Schema(type=types.Type.STRING),
                "confidenceLevel": types.Schema(type=types.Type.STRING),
                "justification": types.Schema(type=types.Type.STRING),
            },
            required=["dominantFeeling", "confidenceLevel", "justification"],
        ),
    },
    required=["transcriptedText", "feelingAnalysys"],
)


class FeelingAnalysisDetail(BaseSchema):
    """Dominant feeling with a confidence label and a quoted justification."""

    dominant_feeling: str
    confidence_level: str
    justification: str


class FeelingAnalysisOutput(BaseSchema):
    """Decoded result of FEELING_ANALYSIS_SCHEMA."""

    transcripted_text: str
    feeling_analysys: FeelingAnalysisDetail


# Template for callers writing their own schema: a recipe with a list of ingredients
RECIPE_SCHEMA = types.Schema(
    type=types.Type.OBJECT,
    properties={
        "recipeName": types.Schema(type=types.Type.STRING),
        "ingredients": types.Schema(
            type=types.Type.ARRAY,
            items=types.Schema(type=types.Type.STRING),
        ),
    },
    required=["recipeName", "ingredients"],
)


class Recipe(BaseSchema):
    """Decoded result of RECIPE_SCHEMA."""

    recipe_name: str
    ingredients: list[str]
