"""SQLAlchemy implementation of transaction manager."""

from __future__ import annotations

import logging

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from apps.oauth_gateway.application.common.exceptions import InternalError
from apps.oauth_gateway.domain.exceptions.user import ConflictError

logger = logging.getLogger(__name__)


class SqlaTransactionManager:
    """트랜잭션 관리자 SQLAlchemy 구현.

    커밋 시점의 unique 위반은 ConflictError, 그 외 DB 오류는 InternalError로 변환합니다.
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def commit(self) -> None:
        try:
            await self._session.commit()
        except IntegrityError as e:
            raise ConflictError() from e
        except SQLAlchemyError as e:
            logger.error("Commit failed", extra={"error_type": type(e).__name__})
            raise InternalError() from e

    async def rollback(self) -> None:
        await self._session.rollback()
