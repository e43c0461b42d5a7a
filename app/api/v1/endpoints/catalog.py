"""
Catalog endpoints — read-only view of the built-in archetypes.
"""

from fastapi import APIRouter

from app.catalog.archetypes import Catalog
from app.catalog.builtin import get_builtin_catalog
from app.engine.metrics import MetricRegistry

router = APIRouter()


@router.get("", summary="Get the built-in meal, exercise and habit catalog.", response_model=Catalog, )
def get_catalog():
    return get_builtin_catalog()


@router.get("/metrics", summary="List loggable metrics and how they aggregate.", )
def list_metrics():
    return [
        {"metric": spec.metric.value, "aggregation": spec.aggregation, "unit": spec.unit,
         "min_value": spec.min_value, "max_value": spec.max_value}
        for spec in MetricRegistry.all().values()
    ]
