"""GroqTranscriptionClient — Groq Whisper backend on its OpenAI-compatible endpoint."""
import logging
from typing import Any

from src.constants import (
    GROQ_BASE_URL,
    GROQ_DEFAULT_MODEL,
    GROQ_KEY_PREFIX,
    GROQ_MODELS,
    MSG_MODEL_FALLBACK,
)
from src.transcription.compatible import OpenAICompatibleClient
from src.transcription.kind import ProviderKind

logger = logging.getLogger(__name__)


class GroqTranscriptionClient(OpenAICompatibleClient):
    kind = ProviderKind.GROQ
    base_url = GROQ_BASE_URL
    key_prefix = GROQ_KEY_PREFIX

    def resolve_model(self, model: str) -> str:
        match (model or "").strip():
            case m if m in GROQ_MODELS:
                return m
            case "":
                return GROQ_DEFAULT_MODEL
            case m:
                logger.warning(MSG_MODEL_FALLBACK, self.kind.label, m, GROQ_DEFAULT_MODEL)
                return GROQ_DEFAULT_MODEL

    def temperature_params(self, temperature: float) -> dict[str, Any]:
        return {"temperature": temperature} if temperature > 0 else {}
