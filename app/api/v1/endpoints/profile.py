"""
Profile endpoints — onboarding, versioned updates and daily targets.
"""

from fastapi import APIRouter, Depends, status
from sqlmodel import Session

from app.api.dependencies import get_current_user
from app.db.session import get_db
from app.models.user import User
from app.schemas.profile import OnboardingAnswers, ProfileUpdate, ProfileVersionResponse, ProfileWithTargets
from app.schemas.targets import TargetSet
from app.services.profile_service import ProfileService

router = APIRouter()


@router.post("/onboarding", summary="Complete onboarding (any units) and compute targets.",
             response_model=ProfileWithTargets, status_code=status.HTTP_201_CREATED, )
def complete_onboarding(answers: OnboardingAnswers, db: Session = Depends(get_db),
                        user: User = Depends(get_current_user), ):
    """Answers are converted to kg / cm once, here, and stored as a new profile version."""
    return ProfileService(db).onboard(user.id, answers)


@router.patch("", summary="Update the profile (creates a new version).", response_model=ProfileWithTargets, )
def update_profile(data: ProfileUpdate, db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    return ProfileService(db).update(user.id, data)


@router.get("", summary="Get the current profile version.", response_model=ProfileVersionResponse, )
def get_profile(db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    return ProfileService(db).get_current(user.id)


@router.get("/history", summary="List all profile versions, newest first.",
            response_model=list[ProfileVersionResponse], )
def get_profile_history(db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    return ProfileService(db).get_history(user.id)


@router.get("/targets", summary="Get daily energy and macro targets.", response_model=TargetSet, )
def get_targets(db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    return ProfileService(db).get_targets(user.id)
