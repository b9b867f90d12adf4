"""
Creator monetization requests and payouts

gloverse_hq/api/v1/monetization.py

"""
from typing import List
from fastapi import APIRouter, Depends, HTTPException, status
from gloverse_hq.api.deps import require_session
from gloverse_hq.core.database import CHANNELS, get_database, id_filter, serialize_document
from gloverse_hq.models.base import MessageResponse, MonetizationStatus
from gloverse_hq.models.user import Channel, MonetizedCreator, PayLinkResponse
from gloverse_hq.services import accounts
from gloverse_hq.services.formatting import upi_payment_link
import logging

logger = logging.getLogger(__name__)

router = APIRouter(dependencies=[Depends(require_session)])


@router.get("/requests", response_model=List[Channel])
async def list_monetization_requests():
    """Channels that applied for monetization"""
    return await accounts.list_accounts(
        CHANNELS, Channel, query={"monetizationStatus": MonetizationStatus.PENDING.value}
    )


async def _decide(creator_id: str, decision: MonetizationStatus) -> MessageResponse:
    await accounts.get_account(CHANNELS, creator_id)
    await accounts.update_account(
        CHANNELS,
        creator_id,
        {
            "monetizationStatus": decision.value,
            "isMonetized": decision == MonetizationStatus.APPROVED,
        },
        "update creator status"
    )
    logger.info(f"Monetization for channel {creator_id} {decision.value}")
    return MessageResponse(message=f"Creator has been {decision.value}.")


@router.post("/requests/{creator_id}/approve", response_model=MessageResponse)
async def approve_monetization(creator_id: str):
    return await _decide(creator_id, MonetizationStatus.APPROVED)


@router.post("/requests/{creator_id}/reject", response_model=MessageResponse)
async def reject_monetization(creator_id: str):
    return await _decide(creator_id, MonetizationStatus.REJECTED)


@router.get("/creators", response_model=List[MonetizedCreator])
async def list_monetized_creators():
    """Monetized creators with their wallet balances"""
    return await accounts.list_accounts(CHANNELS, MonetizedCreator, query={"isMonetized": True})


@router.get("/creators/{creator_id}/pay-link", response_model=PayLinkResponse)
async def get_pay_link(creator_id: str):
    """UPI deep link paying out the creator's whole balance"""
    doc = await accounts.get_account(CHANNELS, creator_id)
    creator = MonetizedCreator.model_validate(serialize_document(doc))
    if not creator.upi_id or not creator.full_name or not creator.wallet_balance:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="UPI ID, name, or balance is missing for this creator."
        )
    return PayLinkResponse(
        link=upi_payment_link(creator.upi_id, creator.full_name, creator.wallet_balance),
        message=f"Preparing payment for {creator.full_name}."
    )


@router.post("/creators/{creator_id}/mark-paid", response_model=MessageResponse)
async def mark_as_paid(creator_id: str):
    """Record an off-platform payment by zeroing the wallet"""
    await accounts.get_account(CHANNELS, creator_id)
    await accounts.update_account(CHANNELS, creator_id, {"walletBalance": 0}, "reset creator's balance")
    logger.info(f"Channel {creator_id} marked as paid")
    return MessageResponse(title="Payment Recorded", message="Creator's balance has been reset to zero.")
