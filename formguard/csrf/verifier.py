"""CSRF token verification."""

from __future__ import annotations

from datetime import datetime

from ..envelope import DEFAULT_DIGEST, EnvelopeError, verify_message
from ..utils.time import ensure_utc, utc_now
from .errors import (
    MIN_NONCE_LENGTH,
    NonceInsufficientError,
    TokenEmptyError,
    TokenExpiredError,
    TokenInvalidError,
    TokenMalformedError,
)
from .issuer import SEPARATOR
from .types import Claim, Token


def verify(key: bytes, token: Token, now: datetime | None = None, *, digest: str = DEFAULT_DIGEST) -> Claim:
    """Authenticate ``token`` under ``key`` and return its claim.

    Checks run in a fixed order and the first failure wins: empty, malformed,
    invalid, expired, then nonce strength. Expiry is only evaluated once the
    signature has been accepted.
    """
    if not token:
        raise TokenEmptyError()

    signature, sep, encoded = token.partition(SEPARATOR)
    if not sep:
        raise TokenMalformedError()

    try:
        payload = verify_message(key, signature, encoded, digest=digest)
    except EnvelopeError:
        raise TokenInvalidError() from None
    try:
        claim = Claim.from_payload(payload)
    except (TypeError, ValueError, OverflowError):
        raise TokenInvalidError() from None

    current = utc_now() if now is None else ensure_utc(now)
    if current > claim.expires:
        raise TokenExpiredError(claim)

    if claim.nonce_length < MIN_NONCE_LENGTH:
        raise NonceInsufficientError(claim)

    return claim
