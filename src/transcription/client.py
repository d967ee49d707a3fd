"""TranscriptionClient — abstract base for speech-to-text backends."""
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional

from src.transcription.result import TranscriptionResult


class TranscriptionClient(ABC):
    """One instance per backend, shared by every caller.

    `last_error` holds the message of the most recently completed failing
    operation and is cleared by the next success. Concurrent calls race on
    it; the per-call result is the authoritative error.
    """

    def __init__(self) -> None:
        self.last_error: Optional[str] = None

    @abstractmethod
    async def validate_credential(self, credential: str) -> bool:
        """True iff the remote service accepts `credential`. Never raises."""
        ...

    @abstractmethod
    async def transcribe(
        self,
        audio_path: Path,
        credential: str,
        model: str,
        temperature: float,
        language: str,
    ) -> TranscriptionResult:
        """Convert the audio file to text. Failures come back as `Failure`, never raised."""
        ...
