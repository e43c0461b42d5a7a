"""
Engine error taxonomy.

All engine entry points validate their inputs eagerly and raise one of
these instead of returning partially computed results.  They carry
enough structure for the HTTP layer to build a useful response.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from app.schemas.plans import PlanWarning


class EngineError(Exception):
    """Base class for every error raised by the engine."""


class InvalidProfileError(EngineError):
    """A biometric or enum field of the profile is missing or out of range."""

    def __init__(self, field: str, reason: str):
        self.field = field
        self.reason = reason
        super().__init__(f"Invalid profile field '{field}': {reason}")


class InsufficientCatalogError(EngineError):
    """Strict plan generation found catalog slots it could not fill."""

    def __init__(self, warnings: list[PlanWarning]):
        self.warnings = list(warnings)
        slots = ", ".join(f"{w.plan.value}:{w.slot}" for w in self.warnings) or "unknown"
        super().__init__(f"Catalog has no matching archetypes for: {slots}")


class InvalidWindowError(EngineError):
    """Analytics requested over an empty or inverted date window."""

    def __init__(self, reason: str, window_days: Optional[int] = None):
        self.reason = reason
        self.window_days = window_days
        super().__init__(f"Invalid analytics window: {reason}")


class InvalidMetricError(EngineError):
    """The requested metric is unknown or has no registered spec."""

    def __init__(self, metric: str, available: Optional[list[str]] = None):
        self.metric = metric
        self.available = list(available or [])
        super().__init__(f"Unknown metric '{metric}'. Available: {self.available}")
