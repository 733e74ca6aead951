"""Keyed-MAC signed envelopes."""

from .signer import (
    DEFAULT_DIGEST,
    SUPPORTED_DIGESTS,
    EnvelopeError,
    canonical_bytes,
    sign_message,
    verify_message,
)

__all__ = [
    "DEFAULT_DIGEST",
    "SUPPORTED_DIGESTS",
    "EnvelopeError",
    "canonical_bytes",
    "sign_message",
    "verify_message",
]
