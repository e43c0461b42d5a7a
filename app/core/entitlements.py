"""
Entitlement checks.

Decides which features a user may *see*.  Only the presentation layer
consults it (see ``require_entitlement`` in ``app.api.dependencies``);
the engine computes every value regardless of tier.
"""

from abc import ABC, abstractmethod
from typing import Iterable, Optional

from app.core.config import settings
from app.models.user import User

ACTIVE_SUBSCRIPTION_STATUSES = frozenset({"active", "trialing", "pro"})


class EntitlementChecker(ABC):
    """Interface to the billing / entitlement collaborator."""

    @abstractmethod
    def is_entitled(self, user: User, feature: str) -> bool:
        """Return ``True`` if *user* may use *feature*."""


class SubscriptionEntitlementChecker(EntitlementChecker):
    """Gates the configured premium features on the user's subscription flags.

    Features not listed in ``premium_features`` are open to everyone.
    """

    def __init__(self, premium_features: Optional[Iterable[str]] = None):
        features = settings.PREMIUM_FEATURES if premium_features is None else premium_features
        self.premium_features = frozenset(features)

    def is_entitled(self, user: User, feature: str) -> bool:
        if feature not in self.premium_features:
            return True
        if user.is_admin or user.is_premium:
            return True
        return user.subscription_status in ACTIVE_SUBSCRIPTION_STATUSES


def get_entitlement_checker() -> EntitlementChecker:
    """FastAPI dependency; override in tests or when wiring a billing service."""
    return SubscriptionEntitlementChecker()
