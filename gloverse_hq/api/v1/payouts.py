"""
User payout requests

gloverse_hq/api/v1/payouts.py

"""
from typing import List
from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel, Field
from gloverse_hq.api.deps import require_session
from gloverse_hq.core.database import ANALYTICS, USERS, get_database, id_filter
from gloverse_hq.models.base import MessageResponse, PayoutStatus
from gloverse_hq.models.user import GloStar
from gloverse_hq.services import accounts
from gloverse_hq.services.formatting import format_usd, parse_amount
import logging

logger = logging.getLogger(__name__)

router = APIRouter(dependencies=[Depends(require_session)])

class TotalRevenue(BaseModel):
    total_revenue: float = Field(serialization_alias="totalRevenue")
    formatted: str


@router.get("/requests", response_model=List[GloStar])
async def list_payout_requests():
    """Users with an open payout request"""
    return await accounts.list_accounts(USERS, GloStar, query={"payoutRequested": True})


@router.get("/total-revenue", response_model=TotalRevenue)
async def get_total_revenue():
    """Sum of totalRevenue across analytics documents"""
    db = get_database()
    total = 0.0
    try:
        async for doc in db[ANALYTICS].find({}, {"totalRevenue": 1}):
            total += parse_amount(doc.get("totalRevenue")) or 0
    except Exception as e:
        logger.error(f"Error fetching analytics: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch revenue data."
        )
    return TotalRevenue(total_revenue=total, formatted=format_usd(total))


def _open_request(doc: dict) -> None:
    if doc.get("payoutRequested") is not True:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=f"@{doc.get('handle')} has no open payout request."
        )


@router.post("/requests/{user_id}/approve", response_model=MessageResponse)
async def approve_payout(user_id: str):
    """Debit the requested amount from the wallet and close the request"""
    doc = await accounts.get_account(USERS, user_id)
    _open_request(doc)
    amount = parse_amount(doc.get("payoutRequestAmount")) or 0
    balance = parse_amount(doc.get("walletBalance")) or 0

    if balance < amount:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Insufficient wallet balance to approve this payout."
        )

    db = get_database()
    # The request must still be open and the balance still cover it at write time
    condition = {**id_filter(user_id), "payoutRequested": True}
    if amount > 0:
        condition["walletBalance"] = {"$gte": amount}
    try:
        result = await db[USERS].update_one(
            condition,
            {
                "$inc": {"walletBalance": -amount},
                "$set": {"payoutStatus": PayoutStatus.PAID.value, "payoutRequested": False},
            }
        )
    except Exception as e:
        logger.error(f"Error approving payout: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Could not approve payout."
        )

    if result.matched_count == 0:
        _open_request(await accounts.get_account(USERS, user_id))
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Insufficient wallet balance to approve this payout."
        )

    logger.info(f"Payout of {amount} approved for user {user_id}")
    return MessageResponse(message=f"Payout of {format_usd(amount)} approved for @{doc.get('handle')}.")


@router.post("/requests/{user_id}/reject", response_model=MessageResponse)
async def reject_payout(user_id: str):
    doc = await accounts.get_account(USERS, user_id)
    _open_request(doc)
    db = get_database()
    try:
        result = await db[USERS].update_one(
            {**id_filter(user_id), "payoutRequested": True},
            {"$set": {"payoutStatus": PayoutStatus.REJECTED.value, "payoutRequested": False}}
        )
    except Exception as e:
        logger.error(f"Error rejecting payout: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Could not reject payout."
        )
    if result.matched_count == 0:
        _open_request(await accounts.get_account(USERS, user_id))
    logger.info(f"Payout request rejected for user {user_id}")
    return MessageResponse(message=f"Payout request for @{doc.get('handle')} has been rejected.")
