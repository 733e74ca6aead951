import logging
from datetime import datetime, timedelta, timezone

import pytest

from formguard.csrf import (
    CSRFConfig,
    CSRFTokenManager,
    TokenExpiredError,
    TokenInvalidError,
    verify,
)
from formguard.csrf.config import DEV_SECRET

NOW = datetime(2024, 3, 1, 12, 0, 0, tzinfo=timezone.utc)


def test_issue_and_verify() -> None:
    tm = CSRFTokenManager(secret="unit-secret", ttl_seconds=60)
    issued = tm.issue(NOW)
    assert issued.ttl_seconds == 60
    assert issued.expires == NOW + timedelta(seconds=60)
    claim = tm.verify(issued.token, NOW + timedelta(seconds=30))
    assert claim.expires == issued.expires


def test_manager_tokens_verify_with_raw_key() -> None:
    tm = CSRFTokenManager(secret=b"unit-secret")
    issued = tm.issue(NOW)
    assert verify(b"unit-secret", issued.token, NOW).expires == issued.expires


def test_expired_token_rejected() -> None:
    tm = CSRFTokenManager(secret="unit-secret", ttl_seconds=1)
    issued = tm.issue(NOW)
    with pytest.raises(TokenExpiredError):
        tm.verify(issued.token, NOW + timedelta(seconds=2))


def test_rotated_secret_invalidates_tokens() -> None:
    old = CSRFTokenManager(secret="old-secret")
    new = CSRFTokenManager(secret="new-secret")
    issued = old.issue(NOW)
    with pytest.raises(TokenInvalidError):
        new.verify(issued.token, NOW)


def test_check_reports_reason() -> None:
    tm = CSRFTokenManager(secret="unit-secret", ttl_seconds=60)
    issued = tm.issue(NOW)

    ok = tm.check(issued.token, NOW)
    assert ok.valid is True
    assert ok.reason == "ok"
    assert ok.claim is not None

    assert tm.check("", NOW).reason == "token_empty"
    assert tm.check("nope", NOW).reason == "token_malformed"

    forged = CSRFTokenManager(secret="other").issue(NOW)
    invalid = tm.check(forged.token, NOW)
    assert invalid.valid is False
    assert invalid.reason == "token_invalid"
    assert invalid.claim is None

    expired = tm.check(issued.token, NOW + timedelta(hours=1))
    assert expired.reason == "token_expired"
    assert expired.claim is not None


def test_rejection_is_logged_without_token(caplog) -> None:
    tm = CSRFTokenManager(secret="unit-secret")
    token = CSRFTokenManager(secret="other").issue(NOW).token
    with caplog.at_level(logging.DEBUG, logger="formguard.csrf.manager"):
        tm.check(token, NOW)
    assert "reason=token_invalid" in caplog.text
    assert token not in caplog.text


def test_dev_secret_fallback_warns(monkeypatch, caplog) -> None:
    monkeypatch.delenv("FORMGUARD_CSRF_SECRET", raising=False)
    with caplog.at_level(logging.WARNING, logger="formguard.csrf.manager"):
        tm = CSRFTokenManager()
    assert "development CSRF secret" in caplog.text
    issued = tm.issue(NOW)
    assert verify(DEV_SECRET.encode("utf-8"), issued.token, NOW)


def test_secret_from_env(monkeypatch) -> None:
    monkeypatch.setenv("FORMGUARD_CSRF_SECRET", "env-secret")
    issued = CSRFTokenManager().issue(NOW)
    assert verify(b"env-secret", issued.token, NOW)


def test_config_from_env(monkeypatch) -> None:
    monkeypatch.setenv("FORMGUARD_CSRF_SECRET", "env-secret")
    monkeypatch.setenv("FORMGUARD_CSRF_TTL_SECONDS", "120")
    monkeypatch.setenv("FORMGUARD_CSRF_DIGEST", "sha512")
    config = CSRFConfig.from_env()
    assert config == CSRFConfig(secret="env-secret", ttl_seconds=120, digest="sha512")

    tm = CSRFTokenManager.from_env()
    issued = tm.issue(NOW)
    assert issued.expires == NOW + timedelta(seconds=120)
    assert verify(b"env-secret", issued.token, NOW, digest="sha512")


def test_config_defaults(monkeypatch) -> None:
    for name in ("FORMGUARD_CSRF_SECRET", "FORMGUARD_CSRF_TTL_SECONDS", "FORMGUARD_CSRF_DIGEST"):
        monkeypatch.delenv(name, raising=False)
    assert CSRFConfig.from_env() == CSRFConfig()


@pytest.mark.parametrize("raw", ["soon", "0", "-5"])
def test_config_rejects_bad_ttl(monkeypatch, raw: str) -> None:
    monkeypatch.setenv("FORMGUARD_CSRF_TTL_SECONDS", raw)
    with pytest.raises(ValueError):
        CSRFConfig.from_env()


def test_config_rejects_unknown_digest() -> None:
    with pytest.raises(ValueError):
        CSRFConfig(digest="md5")


def test_config_keeps_secret_out_of_repr() -> None:
    tm = CSRFTokenManager(secret="unit-secret", ttl_seconds=90, digest="sha384")
    assert tm.config == CSRFConfig(secret="unit-secret", ttl_seconds=90, digest="sha384")
    assert "unit-secret" not in repr(tm.config)


def test_from_config_round_trips_secret() -> None:
    config = CSRFConfig(secret="unit-secret", ttl_seconds=90)
    tm = CSRFTokenManager.from_config(config)
    assert tm.config == config
    assert verify(b"unit-secret", tm.issue(NOW).token, NOW)


def test_config_records_dev_secret_fallback(monkeypatch) -> None:
    monkeypatch.delenv("FORMGUARD_CSRF_SECRET", raising=False)
    assert CSRFTokenManager().config.secret == DEV_SECRET


def test_issue_defaults_to_current_time() -> None:
    tm = CSRFTokenManager(secret="unit-secret", ttl_seconds=60)
    before = datetime.now(timezone.utc)
    issued = tm.issue()
    after = datetime.now(timezone.utc)
    assert before + timedelta(seconds=60) <= issued.expires <= after + timedelta(seconds=60)
    assert tm.verify(issued.token).expires == issued.expires
