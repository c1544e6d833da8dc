"""TransactionManager Port."""

from typing import Protocol


class TransactionManager(Protocol):
    """트랜잭션 관리자 인터페이스.

    구현체:
        - SqlaTransactionManager (infrastructure/persistence_postgres/)
    """

    async def commit(self) -> None:
        """트랜잭션 커밋."""
        ...

    async def rollback(self) -> None:
        """트랜잭션 롤백."""
        ...
