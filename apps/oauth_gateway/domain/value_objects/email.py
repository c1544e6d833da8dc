"""Email Validation."""

from __future__ import annotations

import re

# 최소 형태 검사 (local@domain.tld)
EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


def is_valid_email(value: str) -> bool:
    """이메일이 기본 형태를 만족하는지 검사."""
    return len(value) <= 320 and EMAIL_PATTERN.match(value) is not None


def mask_email(value: str | None) -> str | None:
    """로그용 이메일 마스킹 (ab***@domain)."""
    if not value or "@" not in value:
        return value
    local, domain = value.split("@", 1)
    return f"{local[:2]}***@{domain}"
