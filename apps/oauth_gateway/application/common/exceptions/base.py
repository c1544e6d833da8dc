"""Application Base Exception."""


class ApplicationError(Exception):
    """애플리케이션 예외 기본 클래스."""

    def __init__(self, message: str = "Application error") -> None:
        self.message = message
        super().__init__(message)
