"""OpenAITranscriptionClient — OpenAI speech-to-text backend."""
import logging

from src.constants import (
    MSG_MODEL_PASSTHROUGH,
    OPENAI_BASE_URL,
    OPENAI_DEFAULT_MODEL,
    OPENAI_KEY_PREFIX,
    OPENAI_MODELS,
)
from src.transcription.compatible import OpenAICompatibleClient
from src.transcription.kind import ProviderKind

logger = logging.getLogger(__name__)


class OpenAITranscriptionClient(OpenAICompatibleClient):
    kind = ProviderKind.OPENAI
    base_url = OPENAI_BASE_URL
    key_prefix = OPENAI_KEY_PREFIX

    def resolve_model(self, model: str) -> str:
        match (model or "").strip():
            case "":
                return OPENAI_DEFAULT_MODEL
            case m if m in OPENAI_MODELS:
                return m
            case m:
                # The API answers 400 for models it does not serve.
                logger.info(MSG_MODEL_PASSTHROUGH, m)
                return m
