"""Exception → TranscriptionError conversion at the provider boundary."""
import asyncio

import openai

from src.constants import MSG_AUDIO_UNREADABLE, MSG_CANCELLED, MSG_UNKNOWN_ERROR
from src.transcription.result import ErrorKind, TranscriptionError


def _server_reason(exc: openai.APIError) -> str:
    """Prefer the `error.message` the server sent over the SDK's summary."""
    body = exc.body
    match body:
        case {"error": {"message": str() as message}} if message:
            return message
        case {"message": str() as message} if message:
            return message
        case str() as message if message:
            return message
        case _:
            return exc.message or MSG_UNKNOWN_ERROR


def _status_kind(exc: openai.APIStatusError) -> ErrorKind:
    match exc:
        case openai.AuthenticationError() | openai.PermissionDeniedError():
            return ErrorKind.CREDENTIAL_REJECTED
        case openai.RateLimitError():
            return ErrorKind.QUOTA_EXCEEDED
        case openai.BadRequestError() | openai.NotFoundError() | openai.UnprocessableEntityError():
            return ErrorKind.UNSUPPORTED_PARAMETER
        case openai.InternalServerError():
            return ErrorKind.NETWORK_FAILURE
        case _:
            return ErrorKind.MALFORMED_RESPONSE


def classify_exception(exc: BaseException) -> TranscriptionError:
    match exc:
        case asyncio.CancelledError():
            return TranscriptionError(ErrorKind.CANCELLED, MSG_CANCELLED)
        case openai.APIStatusError() as err:
            return TranscriptionError(_status_kind(err), _server_reason(err), err.status_code)
        case openai.APIConnectionError() as err:
            return TranscriptionError(ErrorKind.NETWORK_FAILURE, err.message or str(err))
        case openai.APIResponseValidationError() as err:
            return TranscriptionError(ErrorKind.MALFORMED_RESPONSE, err.message, err.status_code)
        case OSError() as err:
            return TranscriptionError(ErrorKind.AUDIO_UNAVAILABLE, MSG_AUDIO_UNREADABLE % err)
        case _:
            return TranscriptionError(ErrorKind.MALFORMED_RESPONSE, str(exc) or MSG_UNKNOWN_ERROR)
