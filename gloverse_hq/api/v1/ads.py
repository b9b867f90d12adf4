"""
Ad request review

gloverse_hq/api/v1/ads.py

"""
from typing import List
from fastapi import APIRouter, Depends, HTTPException, status
from gloverse_hq.api.deps import require_session
from gloverse_hq.core.database import AD_CAMPAIGNS, get_database, id_filter, serialize_document
from gloverse_hq.models.advertising import AdCampaign
from gloverse_hq.models.base import CampaignStatus, MessageResponse, parse_document
import logging

logger = logging.getLogger(__name__)

router = APIRouter(dependencies=[Depends(require_session)])


@router.get("/pending", response_model=List[AdCampaign])
async def list_pending_campaigns():
    """Campaigns waiting for review"""
    db = get_database()
    try:
        cursor = db[AD_CAMPAIGNS].find({"status": CampaignStatus.PENDING.value})
        campaigns = [parse_document(AdCampaign, serialize_document(doc)) async for doc in cursor]
    except Exception as e:
        logger.error(f"Error fetching ad campaigns: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch pending ad requests."
        )
    return [campaign for campaign in campaigns if campaign is not None]


async def _set_campaign_status(campaign_id: str, new_status: CampaignStatus) -> MessageResponse:
    db = get_database()
    try:
        result = await db[AD_CAMPAIGNS].update_one(
            id_filter(campaign_id),
            {"$set": {"status": new_status.value}}
        )
    except Exception as e:
        logger.error(f"Error updating campaign status to {new_status.value}: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Could not update campaign status."
        )

    if result.matched_count == 0:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Campaign not found"
        )

    verb = "approved" if new_status == CampaignStatus.ACTIVE else "rejected"
    logger.info(f"Campaign {campaign_id} {verb}")
    return MessageResponse(message=f"Campaign has been {verb}.")


@router.post("/{campaign_id}/approve", response_model=MessageResponse)
async def approve_campaign(campaign_id: str):
    return await _set_campaign_status(campaign_id, CampaignStatus.ACTIVE)


@router.post("/{campaign_id}/reject", response_model=MessageResponse)
async def reject_campaign(campaign_id: str):
    return await _set_campaign_status(campaign_id, CampaignStatus.REJECTED)
