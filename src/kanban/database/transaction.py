"""
`@transactional`: one transaction around a mutating operation.

The wrapped coroutine must receive the request's AsyncSession, either as the
`session` keyword (how FastAPI passes dependencies) or as a positional
argument. Repositories only flush; this wrapper is where the unit of work is
committed or rolled back.
"""

import functools
import logging
import time
import uuid

from sqlalchemy.ext.asyncio import AsyncSession

logger = logging.getLogger(__name__)


def _find_session(args: tuple, kwargs: dict) -> AsyncSession:
    session = kwargs.get("session")
    if isinstance(session, AsyncSession):
        return session
    for value in (*args, *kwargs.values()):
        if isinstance(value, AsyncSession):
            return value
    raise TypeError("@transactional requires an AsyncSession argument")


def transactional(func):
    """
    Commit when `func` returns, roll back when it raises (cancellation
    included), and hand the result or the error back unchanged.

    Each run gets a short tx_id so begin/commit/rollback lines can be
    correlated in the logs.
    """

    @functools.wraps(func)
    async def wrapper(*args, **kwargs):
        session = _find_session(args, kwargs)
        tx_id = uuid.uuid4().hex[:8]
        operation = func.__qualname__
        start = time.perf_counter()

        logger.debug("tx.begin", extra={"tx_id": tx_id, "operation": operation})
        try:
            result = await func(*args, **kwargs)
        except BaseException as exc:
            await session.rollback()
            logger.info(
                "tx.rollback",
                extra={
                    "tx_id": tx_id,
                    "operation": operation,
                    "error_type": type(exc).__name__,
                },
            )
            raise

        await session.commit()
        logger.debug(
            "tx.commit",
            extra={
                "tx_id": tx_id,
                "operation": operation,
                "duration_ms": int((time.perf_counter() - start) * 1000),
            },
        )
        return result

    return wrapper
