"""
Plan endpoints — regeneration, active plans and plan history.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlmodel import Session

from app.api.dependencies import get_current_user, require_entitlement
from app.db.session import get_db
from app.models.user import User
from app.schemas.plans import PlanKind, StoredPlanResponse
from app.services.plan_service import PlanService

router = APIRouter()


@router.post("/regenerate", summary="Generate new nutrition, fitness and wellness plans.",
             response_model=list[StoredPlanResponse], status_code=status.HTTP_201_CREATED, )
def regenerate_plans(
    seed: Optional[int] = Query(None, description="Tie-break seed; omit for rule-ranked plans"),
    strict: bool = Query(True, description="Fail with 409 instead of storing plans with empty slots"),
    db: Session = Depends(get_db),
    user: User = Depends(require_entitlement("plan_regeneration")),
):
    """The previous plans stay active if generation fails."""
    return PlanService(db).regenerate(user.id, seed=seed, strict=strict)


@router.get("/active", summary="Get the active plans.", response_model=list[StoredPlanResponse], )
def get_active_plans(db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    return PlanService(db).get_active(user.id)


@router.get("/history", summary="List past and active plans, newest first.",
            response_model=list[StoredPlanResponse], )
def get_plan_history(
    kind: Optional[PlanKind] = Query(None, description="Filter by plan kind"),
    skip: int = Query(0, ge=0, description="Records to skip"),
    limit: int = Query(50, ge=1, le=200, description="Max records to return"),
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    return PlanService(db).get_history(user.id, kind, skip, limit)
