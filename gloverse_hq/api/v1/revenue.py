"""
Platform revenue from ad campaigns

gloverse_hq/api/v1/revenue.py

"""
from fastapi import APIRouter, Depends, HTTPException, status
from gloverse_hq.api.deps import require_session
from gloverse_hq.core.database import AD_CAMPAIGNS, get_database
from gloverse_hq.models.advertising import RevenueResponse
from gloverse_hq.models.base import CampaignStatus
from gloverse_hq.services.revenue import revenue_report
import logging

logger = logging.getLogger(__name__)

router = APIRouter(dependencies=[Depends(require_session)])


async def active_campaigns() -> list:
    db = get_database()
    cursor = db[AD_CAMPAIGNS].find(
        {"status": CampaignStatus.ACTIVE.value},
        {"viewCount": 1, "createdAt": 1}
    )
    return [doc async for doc in cursor]


@router.get("/summary", response_model=RevenueResponse)
async def get_revenue_summary():
    """Revenue today, over the last 7 days, this month and in total (IST)"""
    try:
        campaigns = await active_campaigns()
    except Exception as e:
        logger.error(f"Error fetching ad campaigns: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch revenue data."
        )
    return revenue_report(campaigns)
