"""Utility helpers for hashing and time operations."""

from .hashing import canonical_json, fingerprint, sha256_hex
from .time import ensure_utc, format_rfc3339, parse_rfc3339, utc_now

__all__ = [
    "canonical_json",
    "sha256_hex",
    "fingerprint",
    "utc_now",
    "ensure_utc",
    "format_rfc3339",
    "parse_rfc3339",
]
