"""HMAC signed envelopes for small JSON payloads.

A payload is serialized to canonical JSON, MACed with the caller's key and
returned as a pair of printable strings: the base64url encoding of the
canonical bytes and the hex signature over those same bytes. Verification
authenticates the bytes before anything is parsed.
"""

from __future__ import annotations

import base64
import binascii
import hashlib
import hmac
import json
from typing import Any

from ..utils.hashing import canonical_json

SUPPORTED_DIGESTS = ("sha256", "sha384", "sha512")
DEFAULT_DIGEST = "sha256"


class EnvelopeError(Exception):
    """Raised when an envelope fails authentication or decoding."""


def _digestmod(digest: str):
    if digest not in SUPPORTED_DIGESTS:
        raise ValueError(f"Unsupported digest '{digest}'. Expected one of: {', '.join(SUPPORTED_DIGESTS)}.")
    return getattr(hashlib, digest)


def _mac(key: bytes, data: bytes, digest: str) -> str:
    return hmac.new(key, data, _digestmod(digest)).hexdigest()


def canonical_bytes(payload: Any) -> bytes:
    """Return the canonical UTF-8 JSON encoding of ``payload``."""
    return canonical_json(payload).encode("utf-8")


def sign_message(key: bytes, payload: Any, *, digest: str = DEFAULT_DIGEST) -> tuple[str, str]:
    """Sign ``payload`` and return ``(encoded, signature)``."""
    if not key:
        raise ValueError("Signing key must not be empty.")
    raw = canonical_bytes(payload)
    signature = _mac(key, raw, digest)
    encoded = base64.urlsafe_b64encode(raw).decode("ascii")
    return encoded, signature


def verify_message(key: bytes, signature: str, encoded: str, *, digest: str = DEFAULT_DIGEST) -> Any:
    """Authenticate ``encoded`` against ``signature`` and return the decoded payload.

    Every failure surfaces as :class:`EnvelopeError` with no detail about
    which step rejected the input.
    """
    digestmod = _digestmod(digest)
    try:
        encoded_raw = encoded.encode("ascii")
        raw = base64.b64decode(encoded_raw, altchars=b"-_", validate=True)
    except (binascii.Error, UnicodeEncodeError, ValueError):
        raise EnvelopeError("envelope verification failed") from None
    # Only the exact base64url form produced by sign_message is accepted.
    if base64.urlsafe_b64encode(raw) != encoded_raw:
        raise EnvelopeError("envelope verification failed")

    expected = hmac.new(key, raw, digestmod).hexdigest()
    if not hmac.compare_digest(expected.encode("ascii"), signature.encode("utf-8", "replace")):
        raise EnvelopeError("envelope verification failed")

    try:
        return json.loads(raw.decode("utf-8"))
    except (UnicodeDecodeError, ValueError):
        raise EnvelopeError("envelope verification failed") from None
