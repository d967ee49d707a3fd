"""Entry point tests"""
from pathlib import Path

import pytest

from src import main as entry
from src.transcription.client import TranscriptionClient
from src.transcription.kind import ProviderKind
from src.transcription.registry import ProviderRegistry
from src.transcription.result import ErrorKind, Failure, Success, TranscriptionError


class FakeProvider(TranscriptionClient):
    def __init__(self, accept: bool = True, result=None) -> None:
        super().__init__()
        self.accept = accept
        self.result = result or Success("hello from voice")
        self.calls: list[tuple] = []

    async def validate_credential(self, credential: str) -> bool:
        self.calls.append(("validate", credential))
        if not self.accept:
            self.last_error = "Credential rejected (status 401): Invalid API Key"
        return self.accept

    async def transcribe(self, audio_path: Path, credential: str, model: str, temperature: float, language: str):
        self.calls.append(("transcribe", audio_path, credential, model, temperature, language))
        return self.result


@pytest.fixture
def env(monkeypatch):
    monkeypatch.setattr("src.config.load_dotenv", lambda **_: None)
    monkeypatch.setattr("src.main._setup_logging", lambda level: None)
    monkeypatch.setenv("TRANSCRIPTION_PROVIDER", "groq")
    monkeypatch.setenv("TRANSCRIPTION_LANGUAGE", "en")
    monkeypatch.setenv("TRANSCRIPTION_TEMPERATURE", "0.2")
    monkeypatch.delenv("TRANSCRIPTION_MODEL", raising=False)


def install(monkeypatch, provider: FakeProvider) -> None:
    builders = {kind: (lambda _config: provider) for kind in ProviderKind}
    monkeypatch.setattr("src.main.ProviderRegistry", lambda config: ProviderRegistry(config, builders))


def test_check_key_success(env, monkeypatch, capsys):
    provider = FakeProvider()
    install(monkeypatch, provider)

    assert entry.main(["--key", "gsk_test-key-1234567890", "check-key"]) == 0

    assert "accepted by Groq" in capsys.readouterr().out
    assert provider.calls == [("validate", "gsk_test-key-1234567890")]


def test_check_key_failure_prints_last_error(env, monkeypatch, capsys):
    install(monkeypatch, FakeProvider(accept=False))

    assert entry.main(["check-key"]) == 1

    assert "Invalid API Key" in capsys.readouterr().err


def test_transcribe_prints_text_with_config_defaults(env, monkeypatch, capsys):
    provider = FakeProvider()
    install(monkeypatch, provider)

    assert entry.main(["transcribe", "voice.wav"]) == 0

    assert capsys.readouterr().out.strip() == "hello from voice"
    assert provider.calls == [("transcribe", Path("voice.wav"), "", "", 0.2, "en")]


def test_transcribe_arguments_override_config(env, monkeypatch):
    provider = FakeProvider()
    install(monkeypatch, provider)

    entry.main([
        "--provider", "openai", "--key", "sk-test-key-1234567890",
        "transcribe", "voice.wav", "--model", "whisper-1", "--temperature", "0.7", "--language", "uk",
    ])

    assert provider.calls == [("transcribe", Path("voice.wav"), "sk-test-key-1234567890", "whisper-1", 0.7, "uk")]


def test_check_key_accepts_options_after_command(env, monkeypatch, capsys):
    provider = FakeProvider()
    install(monkeypatch, provider)

    assert entry.main(["check-key", "--provider", "openai", "--key", "sk-test-key-1234567890"]) == 0

    assert "accepted by OpenAI" in capsys.readouterr().out
    assert provider.calls == [("validate", "sk-test-key-1234567890")]


def test_transcribe_accepts_options_after_command(env, monkeypatch):
    provider = FakeProvider()
    install(monkeypatch, provider)

    assert entry.main(["transcribe", "voice.wav", "--provider", "openai", "--key", "sk-test-key-1234567890"]) == 0

    assert provider.calls == [("transcribe", Path("voice.wav"), "sk-test-key-1234567890", "", 0.2, "en")]


def test_options_before_command_survive_subcommand_defaults(env, monkeypatch, capsys):
    install(monkeypatch, FakeProvider())

    entry.main(["--provider", "openai", "check-key"])

    assert "accepted by OpenAI" in capsys.readouterr().out


def test_transcribe_failure_exits_nonzero(env, monkeypatch, capsys):
    error = TranscriptionError(ErrorKind.QUOTA_EXCEEDED, "Rate limit reached", 429)
    install(monkeypatch, FakeProvider(result=Failure(error)))

    assert entry.main(["transcribe", "voice.wav"]) == 1

    assert "Quota exceeded (status 429): Rate limit reached" in capsys.readouterr().err


def test_unknown_provider_is_rejected(env, monkeypatch):
    install(monkeypatch, FakeProvider())

    with pytest.raises(SystemExit):
        entry.main(["--provider", "azure", "check-key"])
