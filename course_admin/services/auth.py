"""Credential verification, principal resolution and administrator sign-in."""

from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from course_admin.core.config import Settings
from course_admin.core.errors import NotFoundError
from course_admin.core.errors import UnauthorizedError
from course_admin.core.security import CredentialError
from course_admin.core.security import decode_credential
from course_admin.core.security import issue_credential
from course_admin.core.security import verify_password
from course_admin.db.models.user import ADMIN_ROLE
from course_admin.db.models.user import User
from course_admin.db.repository.users import get_user
from course_admin.db.repository.users import get_user_by_login
from course_admin.schemas.auth import SignInRequest

logger = logging.getLogger(__name__)


def resolve_principal(session: Session, settings: Settings, token: str | None) -> User:
    """Verify the credential and load its principal fresh from storage."""
    if not token:
        logger.warning("auth.rejected reason=missing_credential")
        raise UnauthorizedError(message="Authentication is required to access this endpoint")

    try:
        user_id = decode_credential(settings, token)
    except CredentialError as exc:
        logger.warning("auth.rejected reason=invalid_credential detail=%s", exc)
        raise UnauthorizedError(message="Authentication credential is invalid or expired") from exc

    user = get_user(session, user_id)
    if user is None:
        logger.warning("auth.rejected reason=unknown_principal principal_id=%s", user_id)
        raise UnauthorizedError(message="Authentication credential is invalid or expired")
    return user


def require_role(user: User, role: int = ADMIN_ROLE) -> User:
    """Reject principals whose role differs from ``role``; reported as 401."""
    if user.role != role:
        logger.warning("auth.rejected reason=role_mismatch principal_id=%s role=%s", user.id, user.role)
        raise UnauthorizedError(message="You do not have permission to use this endpoint")
    return user


def sign_in_service(session: Session, settings: Settings, payload: SignInRequest) -> str:
    """Check administrator credentials and return a freshly signed token."""
    user = get_user_by_login(session, payload.login)
    if user is None:
        raise NotFoundError(message="User not found, cannot sign in")

    if not verify_password(payload.password, user.password):
        logger.warning("auth.sign_in_rejected reason=bad_password principal_id=%s", user.id)
        raise UnauthorizedError(message="Incorrect password")

    require_role(user)
    logger.info("auth.sign_in principal_id=%s", user.id)
    return issue_credential(settings, user_id=user.id)
