"""PostgreSQL Adapters."""

from apps.oauth_gateway.infrastructure.persistence_postgres.adapters.transaction_manager_sqla import (
    SqlaTransactionManager,
)
from apps.oauth_gateway.infrastructure.persistence_postgres.adapters.user_store_sqla import (
    SqlaUserStore,
)

__all__ = ["SqlaTransactionManager", "SqlaUserStore"]
