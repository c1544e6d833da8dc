"""CSRF State Generator."""

import secrets

STATE_BYTES = 32


def generate_state() -> str:
    """URL-safe 랜덤 state 생성."""
    return secrets.token_urlsafe(STATE_BYTES)
