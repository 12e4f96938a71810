"""Response envelope schemas shared across API handlers."""

from __future__ import annotations

from typing import Generic
from typing import TypeVar

from pydantic import BaseModel

DataT = TypeVar("DataT")


class SuccessResponse(BaseModel, Generic[DataT]):
    """Top-level success envelope."""

    success: bool = True
    message: str
    data: DataT | None = None


class ErrorResponse(BaseModel):
    """Top-level error envelope."""

    success: bool = False
    message: str
    errors: list[str] | None = None
