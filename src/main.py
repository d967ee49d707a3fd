"""Entry point — wires Config → ProviderRegistry → TranscriptionClient."""
import argparse
import asyncio
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from rich.logging import RichHandler

from src.config import Config
from src.constants import (
    CMD_CHECK_KEY,
    CMD_TRANSCRIBE,
    MSG_CLI_FAILED,
    MSG_CLI_KEY_BAD,
    MSG_CLI_KEY_OK,
    MSG_STARTING,
)
from src.credentials import mask_credential
from src.transcription.kind import ProviderKind
from src.transcription.registry import ProviderRegistry
from src.transcription.result import Failure, Success


def _setup_logging(level: str) -> None:
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    list(map(root.removeHandler, root.handlers[:]))
    root.addHandler(RichHandler(rich_tracebacks=True))


def _add_common_options(parser: argparse.ArgumentParser, provider, key) -> None:
    parser.add_argument(
        "--provider",
        type=ProviderKind,
        choices=list(ProviderKind),
        default=provider,
        metavar="{" + ",".join(k.value for k in ProviderKind) + "}",
    )
    parser.add_argument("--key", default=key, help="API key (defaults to the provider's env key)")


def _build_parser(config: Config) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="dictation", description="Cloud speech-to-text client")
    _add_common_options(parser, provider=config.provider, key="")

    # Accepted after the command too; SUPPRESS keeps the top-level value unless repeated here.
    common = argparse.ArgumentParser(add_help=False)
    _add_common_options(common, provider=argparse.SUPPRESS, key=argparse.SUPPRESS)

    commands = parser.add_subparsers(dest="command", required=True)

    commands.add_parser(CMD_CHECK_KEY, parents=[common], help="check that the API key is accepted")

    transcribe = commands.add_parser(CMD_TRANSCRIBE, parents=[common], help="transcribe an audio file")
    transcribe.add_argument("audio", type=Path)
    transcribe.add_argument("--model", default=config.model or "")
    transcribe.add_argument("--temperature", type=float, default=config.temperature)
    transcribe.add_argument("--language", default=config.language)
    return parser


async def run(args: argparse.Namespace, registry: ProviderRegistry) -> int:
    provider = registry.get(args.provider)

    if args.command == CMD_CHECK_KEY:
        if await provider.validate_credential(args.key):
            print(MSG_CLI_KEY_OK % args.provider.label)
            return 0
        print(MSG_CLI_KEY_BAD % (args.provider.label, provider.last_error), file=sys.stderr)
        return 1

    result = await provider.transcribe(
        args.audio,
        credential=args.key,
        model=args.model,
        temperature=args.temperature,
        language=args.language,
    )
    match result:
        case Success(text=text):
            print(text)
            return 0
        case Failure(error=error):
            print(MSG_CLI_FAILED % error.describe(), file=sys.stderr)
            return 1


def main(argv: Optional[Sequence[str]] = None) -> int:
    config = Config.from_env()
    _setup_logging(config.log_level)
    args = _build_parser(config).parse_args(argv)

    logger = logging.getLogger(__name__)
    logger.info(MSG_STARTING, args.provider.label, mask_credential(args.key or config.api_key_for(args.provider)))

    registry = ProviderRegistry(config)
    return asyncio.run(run(args, registry))


if __name__ == "__main__":
    sys.exit(main())
