"""OpenAICompatibleClient — shared backend for APIs speaking the OpenAI REST dialect.

Both OpenAI and Groq expose `GET /models` and `POST /audio/transcriptions`
with the same request and response shapes, so a backend only differs in its
base URL, the models it serves and how it treats temperature.
"""
import asyncio
import io
import logging
import math
import time
from pathlib import Path
from typing import Any, Optional

from openai import AsyncOpenAI

from src.config import Config
from src.constants import (
    MIN_KEY_LENGTH,
    MSG_AUDIO_EMPTY,
    MSG_BAD_TEMPERATURE,
    MSG_EMPTY_TRANSCRIPT,
    MSG_KEY_FORMAT_UNUSUAL,
    MSG_KEY_REJECTED,
    MSG_KEY_VALID,
    MSG_NO_TEXT,
    MSG_TEMPERATURE_CLAMPED,
    MSG_TRANSCRIBE_FAILED,
    MSG_TRANSCRIBED,
    MSG_TRANSCRIBING,
    MSG_VALIDATING_KEY,
    RESPONSE_FORMAT,
    TEMPERATURE_MAX,
    TEMPERATURE_MIN,
)
from src.credentials import credential_problem, mask_credential
from src.transcription.client import TranscriptionClient
from src.transcription.errors import classify_exception
from src.transcription.kind import ProviderKind
from src.transcription.result import (
    ErrorKind,
    Failure,
    Success,
    TranscriptionError,
    TranscriptionResult,
)

logger = logging.getLogger(__name__)


class MalformedTranscript(ValueError):
    """The response parsed but carried no usable `text` field."""


def clamp_temperature(temperature: float) -> float:
    """Clamp into the range every backend accepts. Raises ValueError if not finite."""
    if not math.isfinite(temperature):
        raise ValueError(MSG_BAD_TEMPERATURE % temperature)
    clamped = min(max(float(temperature), TEMPERATURE_MIN), TEMPERATURE_MAX)
    if clamped != temperature:
        logger.warning(MSG_TEMPERATURE_CLAMPED, temperature, clamped)
    return clamped


class OpenAICompatibleClient(TranscriptionClient):
    kind: ProviderKind
    base_url: str
    key_prefix: str

    def __init__(
        self,
        fallback_credential: Optional[str] = None,
        timeout: float = 30.0,
        max_retries: int = 1,
    ) -> None:
        super().__init__()
        self._fallback_credential = fallback_credential
        self._timeout = timeout
        self._max_retries = max_retries

    @classmethod
    def from_config(cls, config: Config) -> "OpenAICompatibleClient":
        return cls(
            fallback_credential=config.api_key_for(cls.kind),
            timeout=config.request_timeout,
            max_retries=config.max_retries,
        )

    # ── backend hooks ─────────────────────────────────────────────────────────

    def resolve_model(self, model: str) -> str:
        return model

    def temperature_params(self, temperature: float) -> dict[str, Any]:
        return {"temperature": temperature}

    # ── helpers ───────────────────────────────────────────────────────────────

    def _resolve_credential(self, credential: str) -> str:
        return (credential or "").strip() or (self._fallback_credential or "")

    def _make_client(self, key: str) -> AsyncOpenAI:
        return AsyncOpenAI(
            api_key=key,
            base_url=self.base_url,
            timeout=self._timeout,
            max_retries=self._max_retries,
        )

    def _warn_on_unusual_key(self, key: str) -> None:
        if not key.startswith(self.key_prefix) or len(key) < MIN_KEY_LENGTH:
            logger.warning(MSG_KEY_FORMAT_UNUSUAL, self.kind.label, mask_credential(key))

    def _fail(self, error: TranscriptionError) -> Failure:
        self.last_error = error.describe()
        logger.error(MSG_TRANSCRIBE_FAILED, self.kind.label, self.last_error)
        return Failure(error)

    # ── TranscriptionClient interface ─────────────────────────────────────────

    async def validate_credential(self, credential: str) -> bool:
        key = self._resolve_credential(credential)
        logger.info(MSG_VALIDATING_KEY, self.kind.label, mask_credential(key))

        match credential_problem(key):
            case str() as problem:
                self.last_error = TranscriptionError(ErrorKind.CREDENTIAL_REJECTED, problem).describe()
                logger.error(MSG_KEY_REJECTED, self.kind.label, problem)
                return False
            case None:
                self._warn_on_unusual_key(key)

        client = self._make_client(key)
        try:
            await client.models.list()
        except (Exception, asyncio.CancelledError) as exc:
            self.last_error = classify_exception(exc).describe()
            logger.error(MSG_KEY_REJECTED, self.kind.label, self.last_error)
            return False
        finally:
            await client.close()

        self.last_error = None
        logger.info(MSG_KEY_VALID, self.kind.label)
        return True

    async def transcribe(
        self,
        audio_path: Path,
        credential: str,
        model: str,
        temperature: float,
        language: str,
    ) -> TranscriptionResult:
        audio_path = Path(audio_path)
        key = self._resolve_credential(credential)

        match credential_problem(key):
            case str() as problem:
                return self._fail(TranscriptionError(ErrorKind.CREDENTIAL_REJECTED, problem))
            case None:
                pass

        try:
            temperature = clamp_temperature(temperature)
        except (TypeError, ValueError) as exc:
            return self._fail(TranscriptionError(ErrorKind.UNSUPPORTED_PARAMETER, str(exc)))

        model = self.resolve_model(model)
        logger.info(MSG_TRANSCRIBING, audio_path.name, self.kind.label, model)
        started = time.monotonic()

        try:
            audio = await asyncio.to_thread(audio_path.read_bytes)
        except (Exception, asyncio.CancelledError) as exc:
            return self._fail(classify_exception(exc))

        if not audio:
            return self._fail(TranscriptionError(ErrorKind.AUDIO_UNAVAILABLE, MSG_AUDIO_EMPTY))

        audio_file = io.BytesIO(audio)
        audio_file.name = audio_path.name
        params: dict[str, Any] = {
            "model": model,
            "file": audio_file,
            "response_format": RESPONSE_FORMAT,
            **self.temperature_params(temperature),
        }
        if language:
            params["language"] = language

        client = self._make_client(key)
        try:
            response = await client.audio.transcriptions.create(**params)
            text = _transcript_text(response)
        except (Exception, asyncio.CancelledError) as exc:
            return self._fail(classify_exception(exc))
        finally:
            await client.close()

        if not text:
            return self._fail(TranscriptionError(ErrorKind.NO_SPEECH, MSG_EMPTY_TRANSCRIPT))

        self.last_error = None
        logger.info(MSG_TRANSCRIBED, self.kind.label, audio_path.name, time.monotonic() - started)
        return Success(text)


def _transcript_text(response: Any) -> str:
    match getattr(response, "text", None):
        case str() as text:
            return text.strip()
        case _:
            raise MalformedTranscript(MSG_NO_TEXT)
