"""Partial-update payload handling shared by the update services."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel
from pydantic.alias_generators import to_camel
from sqlalchemy import inspect

from course_admin.core.errors import BadRequestError


def collect_changes(payload: BaseModel, model: type[Any]) -> dict[str, Any]:
    """Return only the fields the client sent.

    An explicit ``null`` clears a nullable column; on a NOT NULL column it is
    rejected rather than silently ignored.
    """
    changes = payload.model_dump(exclude_unset=True)
    columns = inspect(model).columns
    for key, value in changes.items():
        if value is None and not columns[key].nullable:
            field = to_camel(key)
            raise BadRequestError(message=f"{field} cannot be null", field=field)
    return changes
