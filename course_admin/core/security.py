"""Credential and password helpers."""

from __future__ import annotations

from datetime import datetime
from datetime import timedelta
from datetime import timezone
from typing import Any

import bcrypt
import jwt

from course_admin.core.config import Settings


class CredentialError(RuntimeError):
    """Raised when a credential cannot be verified or decoded."""


def hash_password(plain_password: str) -> str:
    password = (plain_password or "").encode("utf-8")
    if not password:
        raise ValueError("Password is empty.")
    return bcrypt.hashpw(password, bcrypt.gensalt()).decode("utf-8")


def verify_password(plain_password: str, password_hash: str) -> bool:
    password = (plain_password or "").encode("utf-8")
    hashed = (password_hash or "").encode("utf-8")
    if not password or not hashed:
        return False
    try:
        return bcrypt.checkpw(password, hashed)
    except ValueError:
        return False


def issue_credential(settings: Settings, *, user_id: int, now: datetime | None = None) -> str:
    """Sign a credential carrying the principal id and an expiry."""
    issued_at = now or datetime.now(timezone.utc)
    payload = {
        "userId": user_id,
        "iat": issued_at,
        "exp": issued_at + timedelta(days=settings.token_expire_days),
    }
    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def decode_credential(settings: Settings, token: str) -> int:
    """Verify signature and expiry, then return the principal id."""
    raw = (token or "").strip()
    if not raw:
        raise CredentialError("Credential is empty.")

    try:
        payload: dict[str, Any] = jwt.decode(
            raw,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            options={"require": ["exp"]},
        )
    except jwt.ExpiredSignatureError as exc:
        raise CredentialError("Credential has expired.") from exc
    except jwt.InvalidTokenError as exc:
        raise CredentialError("Invalid credential.") from exc

    user_id = payload.get("userId")
    if isinstance(user_id, bool) or not isinstance(user_id, int):
        raise CredentialError("Credential does not carry a principal id.")
    return user_id
