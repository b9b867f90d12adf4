"""
Advertiser wallets and payment requests

gloverse_hq/api/v1/advertisers.py

"""
from typing import List, Optional
from datetime import datetime
from fastapi import APIRouter, Depends, HTTPException, Query, status
from gloverse_hq.api.deps import require_session
from gloverse_hq.core.database import (
    ADVERTISERS, PAYMENT_REQUESTS, get_database, id_filter, serialize_document
)
from gloverse_hq.models.advertising import Advertiser, BonusRequest, PaymentRequest
from gloverse_hq.models.base import MessageResponse, PaymentRequestStatus, parse_document
from gloverse_hq.services.formatting import format_inr, parse_amount
import logging

logger = logging.getLogger(__name__)

router = APIRouter(dependencies=[Depends(require_session)])


def _matches(advertiser: Advertiser, search: Optional[str]) -> bool:
    if not search:
        return True
    needle = search.lower()
    return any(
        value and needle in value.lower()
        for value in (advertiser.business_name, advertiser.email)
    )


@router.get("/", response_model=List[Advertiser])
async def list_advertisers(
    search: Optional[str] = Query(None, description="Filter by business name or email")
):
    db = get_database()
    try:
        advertisers = [
            parse_document(Advertiser, serialize_document(doc))
            async for doc in db[ADVERTISERS].find({})
        ]
    except Exception as e:
        logger.error(f"Error fetching advertisers: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch advertisers."
        )
    return [
        advertiser for advertiser in advertisers
        if advertiser is not None and _matches(advertiser, search)
    ]


@router.post("/{advertiser_id}/bonus", response_model=MessageResponse)
async def add_bonus(advertiser_id: str, body: BonusRequest):
    """Credit a bonus to the advertiser's wallet"""
    amount = parse_amount(body.amount)
    if amount is None or amount <= 0:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Please enter a valid positive number for the bonus."
        )

    db = get_database()
    advertiser = await db[ADVERTISERS].find_one(id_filter(advertiser_id))
    if not advertiser:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Advertiser not found"
        )

    try:
        await db[ADVERTISERS].update_one(
            id_filter(advertiser_id),
            {"$inc": {"walletBalance": amount}}
        )
    except Exception as e:
        logger.error(f"Error adding bonus: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Could not add bonus to wallet."
        )

    logger.info(f"Bonus of {amount} credited to advertiser {advertiser_id}")
    return MessageResponse(
        title="Bonus Added!",
        message=f"{format_inr(amount)} has been added to {advertiser.get('businessName')}'s wallet."
    )


@router.get("/payment-requests", response_model=List[PaymentRequest])
async def list_payment_requests(
    status_filter: Optional[PaymentRequestStatus] = Query(
        PaymentRequestStatus.PENDING, alias="status", description="Filter by request status"
    )
):
    """Advertiser top-ups, newest first, with the business name joined in"""
    db = get_database()
    query = {"status": status_filter.value} if status_filter else {}
    try:
        requests = [doc async for doc in db[PAYMENT_REQUESTS].find(query).sort("createdAt", -1)]
        names = {}
        for request in requests:
            advertiser_id = request.get("advertiserId")
            if advertiser_id is None or str(advertiser_id) in names:
                continue
            advertiser = await db[ADVERTISERS].find_one(id_filter(str(advertiser_id)))
            names[str(advertiser_id)] = advertiser.get("businessName") if advertiser else None
    except Exception as e:
        logger.error(f"Error fetching payment requests: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch payment requests."
        )

    result = []
    for request in requests:
        request = serialize_document(request)
        if request.get("advertiserId") is not None:
            request["advertiserId"] = str(request["advertiserId"])
            request["businessName"] = names.get(request["advertiserId"])
        parsed = parse_document(PaymentRequest, request)
        if parsed is not None:
            result.append(parsed)
    return result


async def _pending_request(request_id: str) -> dict:
    db = get_database()
    request = await db[PAYMENT_REQUESTS].find_one(id_filter(request_id))
    if not request:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Payment request not found"
        )
    if request.get("status") != PaymentRequestStatus.PENDING.value:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=f"Payment request is already {request.get('status')}."
        )
    return request


async def _close_request(request_id: str, new_status: PaymentRequestStatus) -> bool:
    """Move a request out of pending; False if someone else already did"""
    db = get_database()
    result = await db[PAYMENT_REQUESTS].update_one(
        {**id_filter(request_id), "status": PaymentRequestStatus.PENDING.value},
        {"$set": {"status": new_status.value, "reviewedAt": datetime.utcnow()}}
    )
    return result.modified_count == 1


async def _reopen_request(request_id: str, closed_as: PaymentRequestStatus) -> None:
    """Put a request back to pending after its side effect failed"""
    db = get_database()
    try:
        await db[PAYMENT_REQUESTS].update_one(
            {**id_filter(request_id), "status": closed_as.value},
            {
                "$set": {"status": PaymentRequestStatus.PENDING.value},
                "$unset": {"reviewedAt": ""},
            }
        )
    except Exception as e:
        logger.error(f"Could not reopen payment request {request_id}: {e}")


@router.post("/payment-requests/{request_id}/approve", response_model=MessageResponse)
async def approve_payment_request(request_id: str):
    """Confirm a top-up and credit the advertiser's wallet"""
    request = await _pending_request(request_id)
    amount = parse_amount(request.get("amount"))
    if amount is None or amount <= 0:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Payment request has no valid amount."
        )
    advertiser_id = request.get("advertiserId")
    db = get_database()
    advertiser = await db[ADVERTISERS].find_one(id_filter(str(advertiser_id))) if advertiser_id else None
    if not advertiser:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Advertiser not found"
        )

    try:
        closed = await _close_request(request_id, PaymentRequestStatus.APPROVED)
    except Exception as e:
        logger.error(f"Error approving payment request {request_id}: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Could not approve payment request."
        )
    if not closed:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Payment request is no longer pending."
        )

    try:
        await db[ADVERTISERS].update_one(
            {"_id": advertiser["_id"]},
            {"$inc": {"walletBalance": amount}}
        )
    except Exception as e:
        logger.error(f"Error crediting wallet for payment request {request_id}: {e}")
        await _reopen_request(request_id, PaymentRequestStatus.APPROVED)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Could not approve payment request."
        )

    logger.info(f"Payment request {request_id} approved ({amount} to {advertiser_id})")
    return MessageResponse(
        message=f"{format_inr(amount)} has been added to {advertiser.get('businessName')}'s wallet."
    )


@router.post("/payment-requests/{request_id}/decline", response_model=MessageResponse)
async def decline_payment_request(request_id: str):
    await _pending_request(request_id)
    try:
        closed = await _close_request(request_id, PaymentRequestStatus.DECLINED)
    except Exception as e:
        logger.error(f"Error declining payment request {request_id}: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Could not decline payment request."
        )
    if not closed:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Payment request is no longer pending."
        )
    logger.info(f"Payment request {request_id} declined")
    return MessageResponse(message="Payment request has been declined.")
