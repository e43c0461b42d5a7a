"""
User endpoints.

Registration mirrors an account from the identity collaborator; the
returned id is what callers send in ``X-User-Id``.
"""

from fastapi import APIRouter, Depends, status
from sqlmodel import Session

from app.api.dependencies import get_current_user
from app.db.session import get_db
from app.models.user import User
from app.schemas.user import UserCreate, UserResponse, UserUpdate
from app.services.user_service import UserService

router = APIRouter()


@router.post("", summary="Register a user.", response_model=UserResponse, status_code=status.HTTP_201_CREATED, )
def register(user_data: UserCreate, db: Session = Depends(get_db)):
    return UserService(db).register(user_data)


@router.get("/me", summary="Get the calling user.", response_model=UserResponse)
def read_me(user: User = Depends(get_current_user)):
    return user


@router.patch("/me", summary="Update the calling user.", response_model=UserResponse)
def update_me(data: UserUpdate, db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    return UserService(db).update(user, data)
