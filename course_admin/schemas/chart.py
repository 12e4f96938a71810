"""Pydantic schemas for dashboard chart payloads."""

from __future__ import annotations

from pydantic import Field

from course_admin.schemas.common import CamelModel


class ChartItem(CamelModel):
    value: int
    name: str


class SexChart(CamelModel):
    items: list[ChartItem] = Field(alias="list")


class MonthlySeries(CamelModel):
    """Parallel month labels (``YYYY-MM``) and counts, oldest first."""

    months: list[str]
    values: list[int]
