"""Dashboard chart routes."""

from __future__ import annotations

from fastapi import APIRouter
from fastapi import Depends
from sqlalchemy.orm import Session

from course_admin.api.dependencies import get_current_admin
from course_admin.core.responses import success
from course_admin.db.base import get_db_session
from course_admin.schemas.chart import MonthlySeries
from course_admin.schemas.chart import SexChart
from course_admin.schemas.envelope import SuccessResponse
from course_admin.services.charts import monthly_users_chart_service
from course_admin.services.charts import user_sex_chart_service

router = APIRouter(prefix="/admin/charts", tags=["charts"], dependencies=[Depends(get_current_admin)])


@router.get("/sex", response_model=SuccessResponse[SexChart])
def user_sex_chart_endpoint(session: Session = Depends(get_db_session)):
    """User counts per sex."""
    return success("User sex distribution fetched", user_sex_chart_service(session))


@router.get("/user", response_model=SuccessResponse[MonthlySeries])
def monthly_users_chart_endpoint(session: Session = Depends(get_db_session)):
    """New users per month."""
    return success("Monthly user counts fetched", monthly_users_chart_service(session))
