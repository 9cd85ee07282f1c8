"""
Store Guard

Turns repository failures raised inside a use case into Result errors so
routers see the same Error-code contract for every failure.
"""

import functools
import logging

from src.libs.result import Error, Return
from src.app.repositories.errors import DuplicateRecordError, StoreUnavailableError

logger = logging.getLogger(__name__)


def store_guarded(func):
    """Decorate an async use case method returning Result"""

    @functools.wraps(func)
    async def wrapper(*args, **kwargs):
        try:
            return await func(*args, **kwargs)
        except DuplicateRecordError as exc:
            logger.warning(f"Conflict in {func.__qualname__}: {exc.message}")
            return Return.err(Error("CONFLICT", "Record already exists"))
        except StoreUnavailableError as exc:
            logger.error(f"Store unavailable in {func.__qualname__}: {exc.message}")
            return Return.err(
                Error("STORE_UNAVAILABLE", "Session store is unavailable")
            )

    return wrapper
