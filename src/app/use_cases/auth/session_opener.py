import logging
from typing import Tuple

from src.api.utils.jwt import TokenPair, issue_token_pair
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import Session
from .dtos import ClientInfo

logger = logging.getLogger(__name__)


async def open_session(
    uow: UnitOfWork, user_id: int, client: ClientInfo
) -> Tuple[Session, TokenPair]:
    """
    Issue a fresh token pair and persist an Active session bound to it.

    Shared by register and login. The caller owns the transaction and
    commits once both the session row and its own writes are staged.
    """
    tokens = issue_token_pair(user_id)
    session = Session(
        user_id=user_id,
        refresh_token=tokens.refresh_token,
        user_agent=client.user_agent,
        ip_address=client.ip_address,
    )
    session = await uow.sessions.create(session)
    logger.info(f"Session {session.id} opened for user {user_id}")
    return session, tokens
