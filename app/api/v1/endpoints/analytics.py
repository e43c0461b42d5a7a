"""
Analytics endpoints — per-metric streaks and statistics, wellness insights.
"""

import datetime
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlmodel import Session

from app.api.dependencies import get_current_user, require_entitlement
from app.core.entitlements import EntitlementChecker, get_entitlement_checker
from app.db.session import get_db
from app.models.user import User
from app.schemas.analytics import MetricAnalytics, WellnessInsights
from app.schemas.logs import MetricKind
from app.services.analytics_service import AnalyticsService

router = APIRouter()

# Windows above this length need the long-window entitlement.
FREE_WINDOW_DAYS = 30


@router.get(
    "/insights",
    summary="Get combined wellness insights (calmness, sleep, mood, meditation).",
    response_model=WellnessInsights,
)
def get_wellness_insights(
    as_of: Optional[datetime.date] = Query(None, description="Reference date (defaults to today)"),
    window_days: int = Query(7, description="Window length in days"),
    db: Session = Depends(get_db),
    user: User = Depends(require_entitlement("wellness_insights")),
):
    ref_date = as_of or datetime.date.today()
    return AnalyticsService(db).wellness_insights(user.id, ref_date, window_days)


@router.get(
    "/{metric}",
    summary="Get streak, rolling averages and stability for a metric.",
    response_model=MetricAnalytics,
)
def get_metric_analytics(
    metric: MetricKind,
    as_of: Optional[datetime.date] = Query(None, description="Reference date (defaults to today)"),
    window_days: int = Query(7, description="Window length in days"),
    habit_id: Optional[str] = Query(None, description="Restrict habit analytics to one habit"),
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
    checker: EntitlementChecker = Depends(get_entitlement_checker),
):
    if window_days > FREE_WINDOW_DAYS and not checker.is_entitled(user, "long_window_analytics"):
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN,
                            detail="'long_window_analytics' requires a premium subscription")
    ref_date = as_of or datetime.date.today()
    return AnalyticsService(db).metric_analytics(user.id, metric, ref_date, window_days, habit_id)
