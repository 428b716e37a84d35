import logging
from typing import Annotated

from fastapi import APIRouter, Query

from subscription_service.entities import plan as Plan
from subscription_service.models import PlanQuery
from ..deps import StoreDep

logger = logging.getLogger(__name__)

router = APIRouter(tags=["subscriptions"])


@router.get("/plans")
async def list_plans(query: Annotated[PlanQuery, Query()], store: StoreDep):
    """Get all service plans by country."""
    country = query.country.upper()
    logger.debug(f"Querying all service plans for Country: {country}")

    plans = await Plan.by_country(store, country)

    return {
        "plans": [plan.to_client() for plan in plans],
        "country": country,
    }
