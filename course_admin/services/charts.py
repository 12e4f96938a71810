"""Aggregations behind the admin dashboard charts."""

from __future__ import annotations

from collections import Counter

from sqlalchemy.orm import Session

from course_admin.db.models.user import SexEnum
from course_admin.db.repository.users import count_users_by_sex
from course_admin.db.repository.users import list_user_created_at

SEX_LABELS = (
    (SexEnum.MALE, "male"),
    (SexEnum.FEMALE, "female"),
    (SexEnum.UNSPECIFIED, "unspecified"),
)


def user_sex_chart_service(session: Session) -> dict[str, list[dict[str, object]]]:
    """Count users per sex, always reporting all three buckets."""
    counts = count_users_by_sex(session)
    return {"list": [{"value": counts.get(int(sex), 0), "name": label} for sex, label in SEX_LABELS]}


def monthly_users_chart_service(session: Session) -> dict[str, list]:
    """Count user sign-ups per calendar month, oldest month first."""
    per_month = Counter(created_at.strftime("%Y-%m") for created_at in list_user_created_at(session))
    months = sorted(per_month)
    return {"months": months, "values": [per_month[month] for month in months]}
