"""Typed outcome of a transcription call."""
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class ErrorKind(Enum):
    CREDENTIAL_REJECTED = "Credential rejected"
    NETWORK_FAILURE = "Network failure"
    QUOTA_EXCEEDED = "Quota exceeded"
    MALFORMED_RESPONSE = "Malformed response"
    UNSUPPORTED_PARAMETER = "Unsupported parameter"
    CANCELLED = "Cancelled"
    AUDIO_UNAVAILABLE = "Audio unavailable"
    NO_SPEECH = "No speech"


@dataclass(frozen=True)
class TranscriptionError:
    kind: ErrorKind
    message: str
    status_code: Optional[int] = None

    def describe(self) -> str:
        match self.status_code:
            case None:
                return f"{self.kind.value}: {self.message}"
            case code:
                return f"{self.kind.value} (status {code}): {self.message}"


@dataclass(frozen=True)
class Success:
    text: str


@dataclass(frozen=True)
class Failure:
    error: TranscriptionError


TranscriptionResult = Success | Failure
