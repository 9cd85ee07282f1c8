import functools
import logging

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from src.app.repositories.errors import DuplicateRecordError, StoreUnavailableError

logger = logging.getLogger(__name__)


def translate_store_errors(func):
    """Map SQLAlchemy failures raised by a repository coroutine to repository errors"""

    @functools.wraps(func)
    async def wrapper(*args, **kwargs):
        try:
            return await func(*args, **kwargs)
        except IntegrityError as exc:
            raise DuplicateRecordError(f"{func.__qualname__}: constraint violated") from exc
        except SQLAlchemyError as exc:
            logger.error(f"Store failure in {func.__qualname__}: {exc.__class__.__name__}")
            raise StoreUnavailableError(f"{func.__qualname__}: store unavailable") from exc

    return wrapper
