"""Pydantic schemas for administrator sign-in."""

from __future__ import annotations

from pydantic import Field

from course_admin.schemas.common import CamelModel


class SignInRequest(CamelModel):
    """Email or username plus password."""

    login: str = Field(min_length=1)
    password: str = Field(min_length=1)


class SignInResult(CamelModel):
    token: str
