"""Stateless CSRF token issuance and verification."""

from .config import CSRFConfig
from .errors import (
    MIN_NONCE_LENGTH,
    CSRFError,
    CSRFErrorKind,
    NonceInsufficientError,
    TokenEmptyError,
    TokenExpiredError,
    TokenInvalidError,
    TokenMalformedError,
)
from .issuer import DEFAULT_NONCE_LENGTH, SEPARATOR, generate_nonce, issue, sign
from .manager import CSRFTokenManager
from .types import Claim, IssuedToken, Token, VerificationResult
from .verifier import verify

__all__ = [
    "issue",
    "sign",
    "verify",
    "generate_nonce",
    "Claim",
    "Token",
    "IssuedToken",
    "VerificationResult",
    "CSRFConfig",
    "CSRFTokenManager",
    "CSRFError",
    "CSRFErrorKind",
    "TokenEmptyError",
    "TokenMalformedError",
    "TokenInvalidError",
    "TokenExpiredError",
    "NonceInsufficientError",
    "SEPARATOR",
    "MIN_NONCE_LENGTH",
    "DEFAULT_NONCE_LENGTH",
]
