"""Query-spec construction and list payload shaping for list endpoints."""

from __future__ import annotations

from collections.abc import Mapping
from collections.abc import Sequence
from typing import Any

from course_admin.core.config import get_settings
from course_admin.core.errors import BadRequestError
from course_admin.db.query import FilterField
from course_admin.db.query import QueryBuilder
from course_admin.db.query import QueryParamError
from course_admin.db.query import QuerySpec


def build_query_spec(
    *,
    page_num: str | None,
    page_size: str | None,
    filters: Mapping[str, str | None],
    fields: Sequence[FilterField],
    order_by: Sequence[Any],
) -> QuerySpec:
    """Turn raw list parameters into a bounded, allowlisted query spec."""
    builder = QueryBuilder(
        fields=fields,
        order_by=order_by,
        max_page_size=get_settings().max_page_size,
    )
    try:
        return builder.paginate(page_num, page_size).filter_by(filters).build()
    except QueryParamError as exc:
        raise BadRequestError(message=exc.message, field=exc.param) from exc


def list_payload(spec: QuerySpec, total: int, rows: Sequence[Any]) -> dict[str, Any]:
    """Shape one page of rows into the ``{list, pagination}`` payload."""
    return {
        "list": list(rows),
        "pagination": {
            "page_num": spec.page_num,
            "page_size": spec.page_size,
            "total": total,
            "total_page": spec.total_pages(total),
        },
    }
