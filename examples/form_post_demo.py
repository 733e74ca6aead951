"""Example: protect a form submission with a CSRF token."""

from __future__ import annotations

import logging
from datetime import timedelta

from formguard.csrf import CSRFError, CSRFTokenManager
from formguard.utils import utc_now


def render_form(manager: CSRFTokenManager) -> dict:
    issued = manager.issue()
    return {"action": "/transfer", "csrf_token": issued.token, "expires": issued.expires.isoformat()}


def handle_post(manager: CSRFTokenManager, form: dict) -> dict:
    try:
        manager.verify(form.get("csrf_token", ""))
    except CSRFError as err:
        return {"status": 403, "error": err.kind.value}
    return {"status": 200, "message": "transfer accepted"}


def main() -> None:
    logging.basicConfig(level=logging.DEBUG, format="%(asctime)s %(levelname)s %(name)s %(message)s")
    manager = CSRFTokenManager(secret="example-secret", ttl_seconds=300)

    form = render_form(manager)
    print("rendered:", form)
    print("genuine post:", handle_post(manager, {"csrf_token": form["csrf_token"]}))
    print("missing token:", handle_post(manager, {}))

    attacker = CSRFTokenManager(secret="attacker-guess")
    print("forged token:", handle_post(manager, {"csrf_token": attacker.issue().token}))

    stale = manager.issue(utc_now() - timedelta(hours=1))
    print("stale token:", handle_post(manager, {"csrf_token": stale.token}))


if __name__ == "__main__":
    main()
