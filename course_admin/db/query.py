"""Pagination and filter builder shared by every list endpoint.

Raw query parameters are untrusted. Only fields declared in a
``FilterField`` allowlist can contribute a clause, values are always bound
as parameters, and every accepted clause is ANDed into a single
``QuerySpec``.
"""

from __future__ import annotations

from collections.abc import Callable
from collections.abc import Mapping
from collections.abc import Sequence
from dataclasses import dataclass
from dataclasses import field
from enum import Enum
import math
from typing import Any

from sqlalchemy import ColumnElement
from sqlalchemy import Select
from sqlalchemy import func
from sqlalchemy import select
from sqlalchemy.orm import InstrumentedAttribute
from sqlalchemy.orm import Session

DEFAULT_PAGE_NUM = 1
DEFAULT_PAGE_SIZE = 10
# Integer columns are 32-bit; LIMIT/OFFSET are 64-bit.
INT32_MAX = 2**31 - 1
INT64_MAX = 2**63 - 1


class MatchMode(str, Enum):
    EXACT = "exact"
    CONTAINS = "contains"


class QueryParamError(ValueError):
    """Raised when an allowlisted parameter carries an unusable value."""

    def __init__(self, param: str, message: str) -> None:
        super().__init__(message)
        self.param = param
        self.message = message


def to_int(raw: str) -> int:
    value = int(raw.strip())
    if not -INT32_MAX - 1 <= value <= INT32_MAX:
        raise ValueError(f"{value} is outside the integer column range")
    return value


def to_bool(raw: str) -> bool:
    return raw.strip().lower() == "true"


def to_str(raw: str) -> str:
    return raw


@dataclass(frozen=True)
class FilterField:
    """One client-facing filter parameter bound to a fixed column."""

    param: str
    column: InstrumentedAttribute[Any]
    mode: MatchMode = MatchMode.EXACT
    coerce: Callable[[str], Any] = to_str

    def clause(self, raw: str) -> ColumnElement[bool]:
        try:
            value = self.coerce(raw)
        except ValueError as exc:
            raise QueryParamError(self.param, f"{self.param} has an invalid value") from exc
        if self.mode is MatchMode.CONTAINS:
            return self.column.contains(value, autoescape=True)
        return self.column == value


@dataclass(frozen=True)
class QuerySpec:
    """Normalized pagination, predicates and ordering for one list query."""

    page_num: int
    page_size: int
    clauses: tuple[ColumnElement[bool], ...] = ()
    order_by: tuple[Any, ...] = ()

    @property
    def offset(self) -> int:
        return (self.page_num - 1) * self.page_size

    @property
    def limit(self) -> int:
        return self.page_size

    def total_pages(self, total: int) -> int:
        return math.ceil(total / self.page_size)

    def count_statement(self, model: type[Any]) -> Select[tuple[int]]:
        return select(func.count()).select_from(model).where(*self.clauses)

    def rows_statement(self, stmt: Select[Any]) -> Select[Any]:
        return stmt.where(*self.clauses).order_by(*self.order_by).limit(self.limit).offset(self.offset)


def parse_positive_int(raw: str | int | None, default: int) -> int:
    """Parse a page parameter; absolute value, falling back on junk or zero."""
    if raw is None:
        return default
    try:
        value = abs(int(str(raw).strip()))
    except ValueError:
        return default
    return value or default


@dataclass
class QueryBuilder:
    """Accumulates predicate clauses and page bounds into a ``QuerySpec``."""

    fields: Sequence[FilterField]
    order_by: Sequence[Any]
    max_page_size: int | None = None
    page_num: int = DEFAULT_PAGE_NUM
    page_size: int = DEFAULT_PAGE_SIZE
    clauses: list[ColumnElement[bool]] = field(default_factory=list)

    def paginate(self, page_num: str | int | None, page_size: str | int | None) -> QueryBuilder:
        self.page_num = parse_positive_int(page_num, DEFAULT_PAGE_NUM)
        self.page_size = parse_positive_int(page_size, DEFAULT_PAGE_SIZE)
        if self.max_page_size is not None:
            self.page_size = min(self.page_size, self.max_page_size)
        if self.page_size > INT64_MAX:
            raise QueryParamError("pageSize", "pageSize is out of range")
        if (self.page_num - 1) * self.page_size > INT64_MAX:
            raise QueryParamError("pageNum", "pageNum is out of range")
        return self

    def where(self, clause: ColumnElement[bool]) -> QueryBuilder:
        self.clauses.append(clause)
        return self

    def filter_by(self, params: Mapping[str, str | None]) -> QueryBuilder:
        for filter_field in self.fields:
            raw = params.get(filter_field.param)
            if raw is None or raw == "":
                continue
            self.where(filter_field.clause(raw))
        return self

    def build(self) -> QuerySpec:
        return QuerySpec(
            page_num=self.page_num,
            page_size=self.page_size,
            clauses=tuple(self.clauses),
            order_by=tuple(self.order_by),
        )


def fetch_page(
    session: Session,
    model: type[Any],
    spec: QuerySpec,
    *,
    options: Sequence[Any] = (),
) -> tuple[int, list[Any]]:
    """Return the total match count and the rows of the requested page."""
    total = session.scalar(spec.count_statement(model)) or 0
    rows = list(session.scalars(spec.rows_statement(select(model).options(*options))))
    return total, rows
