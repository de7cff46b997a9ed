"""
Shared route dependencies: authenticated user and trip repository.
"""
import logging
from typing import Optional
from fastapi import Depends
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.orm import Session
from trip_tracker.core.errors import UnauthenticatedError
from trip_tracker.core.security import decode_access_token
from trip_tracker.db.session import get_db
from trip_tracker.models.user import User
from trip_tracker.services.trip_repository import TripRepository

logger = logging.getLogger(__name__)

# auto_error=False so a missing header goes through UnauthenticatedError
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/auth/login", auto_error=False)


async def get_current_user(
    token: Optional[str] = Depends(oauth2_scheme),
    db: Session = Depends(get_db)
) -> User:
    """Resolve the bearer token to an active user or raise 401."""
    if token is None:
        raise UnauthenticatedError("Not authenticated: Token is missing")

    payload = decode_access_token(token)
    if payload is None:
        logger.warning("Rejected invalid or expired bearer token")
        raise UnauthenticatedError()

    user_id = payload.get("user_id")
    if user_id is None:
        raise UnauthenticatedError()

    user = db.query(User).filter(User.id == user_id).first()
    if not user or not user.is_active:
        logger.warning(f"Rejected token for unknown or inactive user {user_id}")
        raise UnauthenticatedError()

    return user


def get_trip_repository(db: Session = Depends(get_db)) -> TripRepository:
    """Dependency for a request-scoped trip repository."""
    return TripRepository(db)
