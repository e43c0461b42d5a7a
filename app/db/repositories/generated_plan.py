"""
Generated plan repository.

Handles database operations for :class:`GeneratedPlan`.
:meth:`replace_active` is the only write path: it deactivates the
current plans and inserts their replacements in one transaction.
"""

from typing import Optional

from sqlmodel import Session, select

from app.core.clock import utc_now
from app.models.generated_plan import GeneratedPlan


class GeneratedPlanRepository:
    """Repository for GeneratedPlan database operations."""

    def __init__(self, session: Session):
        self.session = session

    def get_by_id(self, plan_id: int) -> Optional[GeneratedPlan]:
        return self.session.get(GeneratedPlan, plan_id)

    def get_active(self, user_id: int) -> list[GeneratedPlan]:
        statement = (
            select(GeneratedPlan)
            .where(GeneratedPlan.user_id == user_id, GeneratedPlan.is_active == True)  # noqa: E712
            .order_by(GeneratedPlan.kind)
        )
        return list(self.session.exec(statement).all())

    def get_history(
        self, user_id: int, kind: Optional[str] = None, skip: int = 0, limit: int = 50,
    ) -> list[GeneratedPlan]:
        """All plans for a user (active and retired), newest first."""
        statement = select(GeneratedPlan).where(GeneratedPlan.user_id == user_id)
        if kind is not None:
            statement = statement.where(GeneratedPlan.kind == kind)
        statement = statement.order_by(GeneratedPlan.created_at.desc(), GeneratedPlan.id.desc()).offset(skip).limit(limit)
        return list(self.session.exec(statement).all())

    def replace_active(self, user_id: int, plans: list[GeneratedPlan]) -> list[GeneratedPlan]:
        """Deactivate the user's active plans of the same kinds and insert *plans*.

        Either every change is committed or none is.
        """
        kinds = {p.kind for p in plans}
        now = utc_now()
        try:
            for old in self.get_active(user_id):
                if old.kind in kinds:
                    old.is_active = False
                    old.deactivated_at = now
                    self.session.add(old)
            for plan in plans:
                plan.user_id = user_id
                plan.is_active = True
                self.session.add(plan)
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise
        for plan in plans:
            self.session.refresh(plan)
        return plans
