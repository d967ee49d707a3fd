from dataclasses import dataclass
from typing import Optional
import os
from dotenv import load_dotenv

from src.constants import (
    DEFAULT_LANGUAGE,
    DEFAULT_LOG_LEVEL,
    DEFAULT_MAX_RETRIES,
    DEFAULT_PROVIDER,
    DEFAULT_REQUEST_TIMEOUT,
    DEFAULT_TEMPERATURE,
)
from src.transcription.kind import ProviderKind


def _parse_number(name: str, raw: str, kind: type) -> float | int:
    try:
        return kind(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}") from None


@dataclass(frozen=True)
class Config:
    provider: ProviderKind
    openai_api_key: Optional[str]
    groq_api_key: Optional[str]
    model: Optional[str]
    temperature: float
    language: str
    request_timeout: float
    max_retries: int
    log_level: str

    @classmethod
    def from_env(cls) -> "Config":
        load_dotenv()

        provider = os.getenv("TRANSCRIPTION_PROVIDER", DEFAULT_PROVIDER)
        openai_api_key = os.getenv("OPENAI_API_KEY") or None
        groq_api_key = os.getenv("GROQ_API_KEY") or None
        model = os.getenv("TRANSCRIPTION_MODEL") or None
        temperature = os.getenv("TRANSCRIPTION_TEMPERATURE", DEFAULT_TEMPERATURE)
        language = os.getenv("TRANSCRIPTION_LANGUAGE", DEFAULT_LANGUAGE)
        request_timeout = os.getenv("REQUEST_TIMEOUT", DEFAULT_REQUEST_TIMEOUT)
        max_retries = os.getenv("MAX_RETRIES", DEFAULT_MAX_RETRIES)
        log_level = os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL)

        return cls._validate(
            provider=provider,
            openai_api_key=openai_api_key,
            groq_api_key=groq_api_key,
            model=model,
            temperature=_parse_number("TRANSCRIPTION_TEMPERATURE", temperature, float),
            language=language.strip(),
            request_timeout=_parse_number("REQUEST_TIMEOUT", request_timeout, float),
            max_retries=_parse_number("MAX_RETRIES", max_retries, int),
            log_level=log_level,
        )

    @staticmethod
    def _validate(
        provider: str,
        openai_api_key: Optional[str],
        groq_api_key: Optional[str],
        model: Optional[str],
        temperature: float,
        language: str,
        request_timeout: float,
        max_retries: int,
        log_level: str,
    ) -> "Config":
        match provider.strip().lower():
            case ProviderKind.OPENAI.value | ProviderKind.GROQ.value as name:
                kind = ProviderKind(name)
            case _:
                raise ValueError(
                    f"TRANSCRIPTION_PROVIDER must be one of "
                    f"{', '.join(k.value for k in ProviderKind)}, got {provider!r}"
                )

        match request_timeout:
            case t if t > 0:
                pass
            case _:
                raise ValueError("REQUEST_TIMEOUT must be positive")

        match max_retries:
            case r if r >= 0:
                pass
            case _:
                raise ValueError("MAX_RETRIES must not be negative")

        return Config(
            provider=kind,
            openai_api_key=openai_api_key,
            groq_api_key=groq_api_key,
            model=model,
            temperature=temperature,
            language=language,
            request_timeout=request_timeout,
            max_retries=max_retries,
            log_level=log_level,
        )

    def api_key_for(self, kind: ProviderKind) -> Optional[str]:
        match kind:
            case ProviderKind.OPENAI:
                return self.openai_api_key
            case ProviderKind.GROQ:
                return self.groq_api_key
