"""CSRF token issuance."""

from __future__ import annotations

import secrets
import string
from datetime import datetime

from ..envelope import DEFAULT_DIGEST, sign_message
from .errors import MIN_NONCE_LENGTH, NonceInsufficientError
from .types import Claim, Token

SEPARATOR = "$"
DEFAULT_NONCE_LENGTH = 64

_NONCE_ALPHABET = string.ascii_letters + string.digits


def generate_nonce(length: int = DEFAULT_NONCE_LENGTH) -> str:
    """Return a random alphanumeric nonce from the OS CSPRNG."""
    return "".join(secrets.choice(_NONCE_ALPHABET) for _ in range(length))


def sign(key: bytes, claim: Claim, *, digest: str = DEFAULT_DIGEST) -> Token:
    """Sign ``claim`` under ``key`` and return ``<signature>$<encoded-claim>``."""
    if claim.nonce_length < MIN_NONCE_LENGTH:
        raise NonceInsufficientError()
    encoded, signature = sign_message(key, claim.to_payload(), digest=digest)
    return signature + SEPARATOR + encoded


def issue(key: bytes, expires: datetime, *, digest: str = DEFAULT_DIGEST) -> Token:
    """Issue a token for a fresh random nonce expiring at ``expires``."""
    return sign(key, Claim(nonce=generate_nonce(), expires=expires), digest=digest)
