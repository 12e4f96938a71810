"""Success envelope helpers."""

from __future__ import annotations

from typing import Any


def success(message: str, data: Any = None) -> dict[str, Any]:
    """Build the success envelope; the route's response model serializes it."""
    return {"success": True, "message": message, "data": data}
