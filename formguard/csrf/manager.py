"""Configured CSRF token manager."""

from __future__ import annotations

import logging
import os
from datetime import datetime, timedelta

from ..envelope import DEFAULT_DIGEST
from ..utils.hashing import fingerprint
from ..utils.time import ensure_utc, utc_now
from .config import DEFAULT_TTL_SECONDS, DEV_SECRET, ENV_SECRET, CSRFConfig
from .errors import CSRFError
from .issuer import issue
from .types import Claim, IssuedToken, Token, VerificationResult
from .verifier import verify

logger = logging.getLogger(__name__)


class CSRFTokenManager:
    """Issue and verify CSRF tokens under one server secret and TTL."""

    def __init__(
        self,
        secret: str | bytes | None = None,
        *,
        ttl_seconds: int = DEFAULT_TTL_SECONDS,
        digest: str = DEFAULT_DIGEST,
    ) -> None:
        secret = secret or os.getenv(ENV_SECRET)
        if not secret:
            logger.warning("%s not set; using development CSRF secret", ENV_SECRET)
            secret = DEV_SECRET
        self.config = CSRFConfig(secret=secret, ttl_seconds=ttl_seconds, digest=digest)
        self._key = secret if isinstance(secret, bytes) else secret.encode("utf-8")

    @classmethod
    def from_config(cls, config: CSRFConfig) -> "CSRFTokenManager":
        return cls(config.secret, ttl_seconds=config.ttl_seconds, digest=config.digest)

    @classmethod
    def from_env(cls) -> "CSRFTokenManager":
        return cls.from_config(CSRFConfig.from_env())

    @property
    def ttl_seconds(self) -> int:
        return self.config.ttl_seconds

    def issue(self, now: datetime | None = None) -> IssuedToken:
        current = utc_now() if now is None else ensure_utc(now)
        expires = current + timedelta(seconds=self.ttl_seconds)
        token = issue(self._key, expires, digest=self.config.digest)
        return IssuedToken(token=token, expires=expires, ttl_seconds=self.ttl_seconds)

    def verify(self, token: Token, now: datetime | None = None) -> Claim:
        """Return the token's claim or raise a :class:`CSRFError` subclass."""
        try:
            return verify(self._key, token, now, digest=self.config.digest)
        except CSRFError as err:
            logger.debug("CSRF token rejected: reason=%s token=%s", err.kind.value, fingerprint(token or ""))
            raise

    def check(self, token: Token, now: datetime | None = None) -> VerificationResult:
        """Like :meth:`verify` but reports rejection as a result instead of raising."""
        try:
            claim = self.verify(token, now)
        except CSRFError as err:
            return VerificationResult(False, err.kind.value, claim=getattr(err, "claim", None))
        return VerificationResult(True, "ok", claim=claim)
