import logging
from contextlib import asynccontextmanager
from datetime import datetime
from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import Session

from db import session_commit, session_rollback

logger = logging.getLogger(__name__)


class TransactionManager:
    """
    Utility class for grouping several writes into one all-or-nothing unit
    on the request's session.

    No isolation level is set and no rows are locked: the unit relies on the
    database defaults. Callers that validate state before entering the unit
    (e.g. stock checks) are not protected against concurrent writers.
    """

    @staticmethod
    @asynccontextmanager
    async def atomic_transaction(session: AsyncSession | Session) -> AsyncGenerator[AsyncSession | Session, None]:
        """
        Commit everything written inside the block, or roll all of it back.

        Usage:
            async with TransactionManager.atomic_transaction(session):
                await OrderRepository.create(...)
                await ProductRepository.decrement_stock(...)

        Any exception raised inside the block triggers a rollback and is re-raised
        unchanged; there is no retry.
        """
        transaction_start = datetime.now()
        logger.debug(f"Transaction started at {transaction_start}")
        try:
            yield session
            await session_commit(session)
        except Exception as e:
            try:
                await session_rollback(session)
                logger.info(f"Transaction rolled back due to error: {type(e).__name__}: {e}")
            except Exception as rollback_error:
                logger.critical(f"Failed to rollback transaction: {str(rollback_error)}")
            raise
        duration = (datetime.now() - transaction_start).total_seconds()
        logger.debug(f"Transaction committed successfully in {duration:.2f}s")
