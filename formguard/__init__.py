"""formguard package.

Stateless anti-forgery tokens for web forms: a random nonce and an expiry
instant, signed with a server-held key into an opaque string.
"""

from .csrf import (
    Claim,
    CSRFError,
    CSRFErrorKind,
    CSRFTokenManager,
    issue,
    sign,
    verify,
)

__all__ = [
    "issue",
    "sign",
    "verify",
    "Claim",
    "CSRFError",
    "CSRFErrorKind",
    "CSRFTokenManager",
]
