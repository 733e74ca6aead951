"""Configuration for the CSRF token manager."""

from __future__ import annotations

import os
from dataclasses import dataclass, field

from ..envelope import DEFAULT_DIGEST, SUPPORTED_DIGESTS

ENV_SECRET = "FORMGUARD_CSRF_SECRET"
ENV_TTL_SECONDS = "FORMGUARD_CSRF_TTL_SECONDS"
ENV_DIGEST = "FORMGUARD_CSRF_DIGEST"

DEV_SECRET = "dev-csrf-secret"
DEFAULT_TTL_SECONDS = 3600


@dataclass(frozen=True)
class CSRFConfig:
    """Signing settings; ``secret`` of ``None`` means fall back to the development secret."""

    secret: str | bytes | None = field(default=None, repr=False)
    ttl_seconds: int = DEFAULT_TTL_SECONDS
    digest: str = DEFAULT_DIGEST

    def __post_init__(self) -> None:
        if isinstance(self.ttl_seconds, bool) or not isinstance(self.ttl_seconds, int) or self.ttl_seconds <= 0:
            raise ValueError(f"ttl_seconds must be a positive integer, got {self.ttl_seconds!r}.")
        if self.digest not in SUPPORTED_DIGESTS:
            raise ValueError(f"Unsupported digest '{self.digest}'. Expected one of: {', '.join(SUPPORTED_DIGESTS)}.")

    @classmethod
    def from_env(cls) -> "CSRFConfig":
        """Build a config from ``FORMGUARD_CSRF_*`` environment variables."""
        raw_ttl = os.getenv(ENV_TTL_SECONDS)
        ttl_seconds = DEFAULT_TTL_SECONDS
        if raw_ttl:
            try:
                ttl_seconds = int(raw_ttl)
            except ValueError:
                raise ValueError(f"{ENV_TTL_SECONDS} must be an integer, got {raw_ttl!r}.") from None
        return cls(
            secret=os.getenv(ENV_SECRET) or None,
            ttl_seconds=ttl_seconds,
            digest=os.getenv(ENV_DIGEST) or DEFAULT_DIGEST,
        )
