"""Hashing and canonical encoding helpers."""

from __future__ import annotations

import hashlib
import json
from typing import Any


def canonical_json(value: Any) -> str:
    """Return stable compact JSON with sorted keys."""
    return json.dumps(value, sort_keys=True, separators=(",", ":"), ensure_ascii=False)


def sha256_hex(value: str) -> str:
    """Return SHA-256 hex digest for the provided string value."""
    return hashlib.sha256(value.encode("utf-8")).hexdigest()


def fingerprint(value: str, length: int = 12) -> str:
    """Short SHA-256 prefix, safe to log in place of a secret-bearing value."""
    return sha256_hex(value)[:length]
