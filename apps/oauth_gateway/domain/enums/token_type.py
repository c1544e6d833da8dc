"""Token Type Enum."""

from enum import Enum


class TokenType(str, Enum):
    """세션 토큰 종류."""

    ACCESS = "access"
    REFRESH = "refresh"
