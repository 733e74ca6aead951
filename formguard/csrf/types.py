"""CSRF token datatypes."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any

from ..utils.time import ensure_utc, format_rfc3339, parse_rfc3339

# Opaque ``<signature>$<encoded-claim>`` string.
Token = str


@dataclass(frozen=True)
class Claim:
    """The signed (nonce, expiry) pair."""

    nonce: str
    expires: datetime

    def __post_init__(self) -> None:
        if not isinstance(self.nonce, str):
            raise TypeError(f"nonce must be str, got {type(self.nonce).__name__}")
        object.__setattr__(self, "expires", ensure_utc(self.expires))

    @property
    def nonce_length(self) -> int:
        """Nonce length in UTF-8 bytes."""
        return len(self.nonce.encode("utf-8"))

    def to_payload(self) -> dict[str, Any]:
        return {"nonce": self.nonce, "expires": format_rfc3339(self.expires)}

    @classmethod
    def from_payload(cls, payload: Any) -> "Claim":
        """Rebuild a claim from a decoded payload, raising ``ValueError``/``TypeError`` on bad shape."""
        if not isinstance(payload, dict):
            raise TypeError("claim payload must be an object")
        nonce = payload.get("nonce")
        expires = payload.get("expires")
        if not isinstance(nonce, str) or not isinstance(expires, str):
            raise TypeError("claim payload requires string 'nonce' and 'expires'")
        return cls(nonce=nonce, expires=parse_rfc3339(expires))


@dataclass(frozen=True)
class IssuedToken:
    token: Token
    expires: datetime
    ttl_seconds: int


@dataclass(frozen=True)
class VerificationResult:
    valid: bool
    reason: str
    claim: Claim | None = None
