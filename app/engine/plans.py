"""
Plan generator — profile + targets + catalog → the three plans.

Generation is a pure function of its inputs.  With ``seed=None`` the
output is fully rule-ranked and therefore identical for identical
inputs; an integer seed only reorders equally ranked archetypes.

Catalog gaps never produce invented content.  In the default mode the
affected slot is left empty and a :class:`PlanWarning` is returned with
the plans; with ``strict=True`` the warnings for empty slots are raised
as :class:`InsufficientCatalogError` so a caller can refuse to replace
an existing plan with a degraded one.
"""

from __future__ import annotations

import logging
from typing import Optional

from app.catalog.archetypes import Catalog
from app.engine.errors import InsufficientCatalogError
from app.engine.fitness import generate_fitness_plan
from app.engine.nutrition import generate_nutrition_plan
from app.engine.planning import DEFAULT_PLAN_CONFIG, PlanConfig, make_rng
from app.engine.wellness import generate_wellness_plan
from app.schemas.plans import GeneratedPlans
from app.schemas.profile import UserProfile
from app.schemas.targets import TargetSet

logger = logging.getLogger(__name__)

# Warnings that leave a meal slot or workout day empty.
BLOCKING_WARNING_CODES = frozenset({"no_meal_suggestions", "no_exercises"})


def generate_plans(
    profile: UserProfile,
    targets: TargetSet,
    catalog: Catalog,
    config: Optional[PlanConfig] = None,
    seed: Optional[int] = None,
    strict: bool = False,
) -> GeneratedPlans:
    """Generate nutrition, fitness and wellness plans.

    Args:
        profile: Canonical SI profile.
        targets: Output of :func:`~app.engine.targets.compute_targets`
            for *profile*.
        catalog: Read-only archetype catalog.
        config: Optional :class:`PlanConfig` (``DEFAULT_PLAN_CONFIG``
            if ``None``).
        seed: Tie-break seed; ``None`` means rule-ranked only.
        strict: Raise instead of returning warnings when a slot or
            workout day would be left empty.

    Raises:
        InvalidProfileError: unsupported ``meals_per_day``.
        InsufficientCatalogError: *strict* and a slot could not be filled.
    """
    cfg = config or DEFAULT_PLAN_CONFIG
    rng = make_rng(seed)

    nutrition, nutrition_warnings = generate_nutrition_plan(profile, targets, catalog, cfg, rng)
    fitness, fitness_warnings = generate_fitness_plan(profile, catalog, cfg, rng)
    wellness = generate_wellness_plan(profile, catalog, cfg, rng)

    warnings = nutrition_warnings + fitness_warnings
    empty_slots = [w for w in warnings if w.code in BLOCKING_WARNING_CODES]
    if empty_slots and strict:
        raise InsufficientCatalogError(empty_slots)

    logger.debug(
        "Generated plans: %d meal slots, %d workouts, %d habits (catalog=%s seed=%s warnings=%d)",
        len(nutrition.meal_templates), len(fitness.workouts), len(wellness.recommended_habits),
        catalog.version, seed, len(warnings),
    )
    return GeneratedPlans(
        nutrition_plan=nutrition,
        fitness_plan=fitness,
        wellness_plan=wellness,
        catalog_version=catalog.version,
        seed=seed,
        warnings=warnings,
    )
