"""
Plan service.

Regeneration is all-or-nothing: the three plans are generated first
(strictly by default, so catalog gaps raise
:class:`~app.engine.errors.InsufficientCatalogError`), and only then are
the previous plans deactivated and the new ones inserted in a single
commit.  Any failure leaves the previously active plans untouched.
"""

import logging
from typing import Optional

from sqlmodel import Session

from app.catalog.archetypes import Catalog
from app.catalog.builtin import get_builtin_catalog
from app.core.config import settings
from app.db.repositories.generated_plan import GeneratedPlanRepository
from app.engine.planning import PlanConfig
from app.engine.plans import generate_plans
from app.engine.targets import TargetConfig, compute_targets
from app.models.generated_plan import GeneratedPlan
from app.schemas.plans import GeneratedPlans, PlanKind, StoredPlanResponse
from app.services.profile_service import ProfileService

logger = logging.getLogger(__name__)


class PlanService:
    """Service for generated-plan business logic."""

    def __init__(
        self,
        session: Session,
        catalog: Optional[Catalog] = None,
        plan_config: Optional[PlanConfig] = None,
        target_config: Optional[TargetConfig] = None,
    ):
        self.repository = GeneratedPlanRepository(session)
        self.profiles = ProfileService(session, target_config)
        self.catalog = catalog or get_builtin_catalog()
        self.plan_config = plan_config

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def regenerate(self, user_id: int, seed: Optional[int] = None, strict: bool = True) -> list[StoredPlanResponse]:
        """Generate fresh plans from the current profile and make them active."""
        profile, version = self.profiles.get_current_profile(user_id)
        targets = compute_targets(profile, self.profiles.target_config)
        effective_seed = seed if seed is not None else settings.PLAN_SEED

        plans = generate_plans(profile, targets, self.catalog, self.plan_config, seed=effective_seed, strict=strict)

        records = self.repository.replace_active(user_id, self._to_records(plans, version))
        logger.info("User %s plans regenerated (profile v%s, catalog %s, seed %s)",
                    user_id, version, plans.catalog_version, effective_seed)
        return [self._to_response(r) for r in records]

    def get_active(self, user_id: int) -> list[StoredPlanResponse]:
        return [self._to_response(r) for r in self.repository.get_active(user_id)]

    def get_history(
        self, user_id: int, kind: Optional[PlanKind] = None, skip: int = 0, limit: int = 50,
    ) -> list[StoredPlanResponse]:
        records = self.repository.get_history(user_id, kind.value if kind else None, skip, limit)
        return [self._to_response(r) for r in records]

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _to_records(plans: GeneratedPlans, profile_version: int) -> list[GeneratedPlan]:
        by_kind = {
            PlanKind.NUTRITION: plans.nutrition_plan,
            PlanKind.FITNESS: plans.fitness_plan,
            PlanKind.WELLNESS: plans.wellness_plan,
        }
        return [
            GeneratedPlan(
                kind=kind.value,
                profile_version=profile_version,
                catalog_version=plans.catalog_version,
                seed=plans.seed,
                payload=plan.model_dump(mode="json"),
                warnings=[w.model_dump(mode="json") for w in plans.warnings if w.plan == kind],
            )
            for kind, plan in by_kind.items()
        ]

    @staticmethod
    def _to_response(record: GeneratedPlan) -> StoredPlanResponse:
        return StoredPlanResponse(
            id=record.id,
            kind=PlanKind(record.kind),
            is_active=record.is_active,
            profile_version=record.profile_version,
            catalog_version=record.catalog_version,
            seed=record.seed,
            payload=record.payload,
            warnings=record.warnings,
            created_at=record.created_at,
        )
