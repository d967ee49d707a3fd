"""ProviderRegistry — resolves a ProviderKind to its one shared client instance."""
import logging
from typing import Callable, Mapping, Optional

from src.config import Config
from src.constants import MSG_PROVIDER_CREATED
from src.transcription.client import TranscriptionClient
from src.transcription.groq import GroqTranscriptionClient
from src.transcription.kind import ProviderKind
from src.transcription.openai import OpenAITranscriptionClient

logger = logging.getLogger(__name__)

Builder = Callable[[Config], TranscriptionClient]

BUILDERS: Mapping[ProviderKind, Builder] = {
    ProviderKind.OPENAI: OpenAITranscriptionClient.from_config,
    ProviderKind.GROQ: GroqTranscriptionClient.from_config,
}


class ProviderRegistry:
    """Built once at startup and handed to callers.

    Each kind is constructed lazily on first `get` and the same instance is
    returned afterwards, so `last_error` is shared by everyone holding it.
    """

    def __init__(self, config: Config, builders: Optional[Mapping[ProviderKind, Builder]] = None) -> None:
        self._config = config
        self._builders = dict(BUILDERS if builders is None else builders)
        self._instances: dict[ProviderKind, TranscriptionClient] = {}

    def kinds(self) -> tuple[ProviderKind, ...]:
        return tuple(self._builders)

    def get(self, kind: ProviderKind) -> TranscriptionClient:
        match self._instances.get(kind):
            case None:
                # KeyError here means a kind was added without a builder.
                instance = self._builders[kind](self._config)
                self._instances[kind] = instance
                logger.debug(MSG_PROVIDER_CREATED, kind.label)
                return instance
            case instance:
                return instance

    def active(self) -> TranscriptionClient:
        return self.get(self._config.provider)
