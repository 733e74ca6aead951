"""CSRF token error taxonomy."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .types import Claim

MIN_NONCE_LENGTH = 16


class CSRFErrorKind(str, Enum):
    """Reason a token was refused."""

    TOKEN_EMPTY = "token_empty"
    TOKEN_MALFORMED = "token_malformed"
    TOKEN_INVALID = "token_invalid"
    TOKEN_EXPIRED = "token_expired"
    NONCE_INSUFFICIENT = "nonce_insufficient"


class CSRFError(Exception):
    """Base class for every token rejection."""

    kind: CSRFErrorKind
    message: str

    def __init__(self) -> None:
        super().__init__(self.message)

    def __reduce__(self):
        return (type(self), ())


class TokenEmptyError(CSRFError):
    kind = CSRFErrorKind.TOKEN_EMPTY
    message = "CSRF token empty"


class TokenMalformedError(CSRFError):
    kind = CSRFErrorKind.TOKEN_MALFORMED
    message = "CSRF token malformed"


class TokenInvalidError(CSRFError):
    """Signature or claim decoding failed; deliberately carries no detail."""

    kind = CSRFErrorKind.TOKEN_INVALID
    message = "CSRF token invalid"


class TokenExpiredError(CSRFError):
    kind = CSRFErrorKind.TOKEN_EXPIRED
    message = "CSRF token expired"

    def __init__(self, claim: Claim) -> None:
        super().__init__()
        self.claim = claim

    def __reduce__(self):
        return (type(self), (self.claim,))


class NonceInsufficientError(CSRFError):
    kind = CSRFErrorKind.NONCE_INSUFFICIENT
    message = f"CSRF nonce must be >= {MIN_NONCE_LENGTH} bytes"

    def __init__(self, claim: Claim | None = None) -> None:
        super().__init__()
        self.claim = claim

    def __reduce__(self):
        return (type(self), (self.claim,))
