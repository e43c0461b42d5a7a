"""
Daily log endpoints.

Append-only from the engine's point of view; edits and deletes here are
picked up by the next analytics read because streaks are never cached.
"""

import datetime
from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlmodel import Session

from app.api.dependencies import get_current_user
from app.db.session import get_db
from app.models.user import User
from app.schemas.logs import DailyLogEntryCreate, DailyLogEntryResponse, DailyLogEntryUpdate, MetricKind
from app.services.log_service import LogService

router = APIRouter()


@router.post("", summary="Append a log entry.", response_model=DailyLogEntryResponse,
             status_code=status.HTTP_201_CREATED, )
def create_log_entry(data: DailyLogEntryCreate, db: Session = Depends(get_db),
                     user: User = Depends(get_current_user), ):
    return LogService(db).append(user.id, data)


@router.get("", summary="List log entries in a date range.", response_model=list[DailyLogEntryResponse], )
def list_log_entries(
    start: datetime.date = Query(..., description="Range start (inclusive)"),
    end: datetime.date = Query(..., description="Range end (inclusive)"),
    metric: Optional[MetricKind] = Query(None, description="Only this metric"),
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    return LogService(db).get_range(user.id, start, end, metric)


@router.get("/{entry_id}", summary="Get a log entry.", response_model=DailyLogEntryResponse, )
def get_log_entry(entry_id: int, db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    return LogService(db).get_by_id(user.id, entry_id)


@router.put("/{entry_id}", summary="Edit a log entry.", response_model=DailyLogEntryResponse, )
def update_log_entry(entry_id: int, data: DailyLogEntryUpdate, db: Session = Depends(get_db),
                     user: User = Depends(get_current_user), ):
    return LogService(db).update(user.id, entry_id, data)


@router.delete("/{entry_id}", summary="Delete a log entry.", status_code=status.HTTP_204_NO_CONTENT, )
def delete_log_entry(entry_id: int, db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    LogService(db).delete(user.id, entry_id)
