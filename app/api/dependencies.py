"""
Shared API dependencies.

Reusable FastAPI dependencies for caller identity, entitlements and
database access.  Identity is owned by an upstream collaborator that
forwards the authenticated user id in the ``X-User-Id`` header.
"""

from typing import Callable

from fastapi import Depends, Header, HTTPException, status
from sqlmodel import Session

from app.core.entitlements import EntitlementChecker, get_entitlement_checker
from app.db.session import get_db
from app.models.user import User
from app.services.user_service import UserService


def get_current_user(x_user_id: int = Header(..., alias="X-User-Id"), db: Session = Depends(get_db), ) -> User:
    """Resolve the caller from the ``X-User-Id`` header."""
    user = UserService(db).get_user_by_id(x_user_id)
    if not user:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Unknown user")
    if not user.is_active:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="User account is inactive")
    return user


def require_entitlement(feature: str) -> Callable[..., User]:
    """Build a dependency that lets the request through only if *feature* is unlocked."""

    def _check(user: User = Depends(get_current_user),
               checker: EntitlementChecker = Depends(get_entitlement_checker), ) -> User:
        if not checker.is_entitled(user, feature):
            raise HTTPException(status_code=status.HTTP_403_FORBIDDEN,
                                detail=f"'{feature}' requires a premium subscription")
        return user

    return _check
