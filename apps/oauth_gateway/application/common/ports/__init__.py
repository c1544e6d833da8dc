"""Common Ports."""

from apps.oauth_gateway.application.common.ports.transaction_manager import (
    TransactionManager,
)

__all__ = ["TransactionManager"]
