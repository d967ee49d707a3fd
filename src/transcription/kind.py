"""ProviderKind — the closed set of transcription backends."""
from enum import Enum

from src.constants import PROVIDER_GROQ, PROVIDER_OPENAI


class ProviderKind(str, Enum):
    OPENAI = PROVIDER_OPENAI
    GROQ = PROVIDER_GROQ

    @property
    def label(self) -> str:
        match self:
            case ProviderKind.OPENAI:
                return "OpenAI"
            case ProviderKind.GROQ:
                return "Groq"
