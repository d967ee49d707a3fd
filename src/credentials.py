"""Credential helpers — masking for logs and a local syntax check."""
from src.constants import (
    MASK_EMPTY,
    MASK_FILL,
    MASK_SHORT,
    MASK_VISIBLE_CHARS,
    MSG_KEY_EMPTY,
    MSG_KEY_NOT_ASCII,
    MSG_KEY_WHITESPACE,
)


def mask_credential(key: str | None) -> str:
    match key:
        case None | "":
            return MASK_EMPTY
        case k if len(k) <= MASK_VISIBLE_CHARS * 2:
            return MASK_SHORT
        case k:
            return f"{k[:MASK_VISIBLE_CHARS]}{MASK_FILL}{k[-MASK_VISIBLE_CHARS:]}"


def credential_problem(key: str | None) -> str | None:
    """Return why `key` can never be a valid bearer token, or None if it might be."""
    match key:
        case None | "":
            return MSG_KEY_EMPTY
        case k if any(c.isspace() for c in k):
            return MSG_KEY_WHITESPACE
        case k if not (k.isascii() and k.isprintable()):
            return MSG_KEY_NOT_ASCII
        case _:
            return None
