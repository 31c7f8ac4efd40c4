"""Audio transcription and feeling analysis built on multimodal agents."""

import logging

from maestro.models.chat import AgentConfig
from maestro.models.gemini import GeminiModel
from maestro.models.outputs import FEELING_ANALYSIS_SCHEMA, FeelingAnalysisOutput
from maestro.prompts import AudioTranscription, FeelingAnalysis
from maestro.services.audio import validate_audio_file
from maestro.services.client import AgentClient
from maestro.services.normalizer import decode_structured_output

logger = logging.getLogger(__name__)

TRANSCRIPTION_MODEL = GeminiModel.GEMINI_2_5_FLASH


class TranscriptionService:
    """Transcribes audio files, optionally with a feeling analysis.

    Each call runs on a fresh agent so transcriptions never share context.
    """

    def __init__(self, agent_client: AgentClient, model: GeminiModel = TRANSCRIPTION_MODEL) -> None:
        self.agent_client = agent_client
        self.model = model

    async def transcribe_audio(self, audio_path: str) -> str:
        """Return the verbatim transcription of an audio file."""
        validate_audio_file(audio_path)

        agent = self.agent_client.create_agent(AgentConfig(
            model=self.model,
            system_prompt=AudioTranscription.system_prompt,
            user_prompt=AudioTranscription.user_prompt,
        ))
        response = await agent.invoke_multimodal(audio_path)
        logger.info(f"Transcribed {audio_path} ({len(response.content)} chars)")
        return response.content

    async def transcribe_and_analyze(self, audio_path: str) -> FeelingAnalysisOutput:
        """Transcribe an audio file and classify the speaker's dominant feeling."""
        validate_audio_file(audio_path)

        agent = self.agent_client.create_agent(AgentConfig(
            model=self.model,
            system_prompt=FeelingAnalysis.system_prompt,
            user_prompt=FeelingAnalysis.user_prompt,
        ))
        response = await agent.invoke_multimodal(audio_path, response_schema=FEELING_ANALYSIS_SCHEMA)
        return decode_structured_output(response, FeelingAnalysisOutput)
