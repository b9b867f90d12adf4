"""
Account moderation shared by the channels and GloStars collections

gloverse_hq/services/accounts.py
"""
from typing import Any, Dict, List, Optional, Type
from fastapi import HTTPException, status
from gloverse_hq.core.database import get_database, id_filter, serialize_document
from gloverse_hq.core.security import get_password_hash
from gloverse_hq.models.base import MessageResponse, parse_document
from gloverse_hq.models.user import AccountBase
from gloverse_hq.services.formatting import matches_handle, parse_amount
import logging

logger = logging.getLogger(__name__)


async def list_accounts(
    collection: str,
    model: Type[AccountBase],
    search: Optional[str] = None,
    query: Optional[Dict[str, Any]] = None,
) -> List[AccountBase]:
    """All accounts of a collection, optionally narrowed by @handle"""
    db = get_database()
    try:
        accounts = []
        async for doc in db[collection].find(query or {}):
            account = parse_document(model, serialize_document(doc))
            if account is not None and matches_handle(account.handle, search):
                accounts.append(account)
    except Exception as e:
        logger.error(f"Error fetching {collection}: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to fetch {collection}."
        )
    return accounts


async def get_account(collection: str, account_id: str) -> Dict[str, Any]:
    db = get_database()
    doc = await db[collection].find_one(id_filter(account_id))
    if not doc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="User not found"
        )
    return doc


async def update_account(collection: str, account_id: str, changes: Dict[str, Any], action: str) -> None:
    """Single-document $set; failures surface as a 500 naming the action"""
    db = get_database()
    try:
        await db[collection].update_one(id_filter(account_id), {"$set": changes})
    except Exception as e:
        logger.error(f"Error updating {collection}/{account_id} ({action}): {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Could not {action}."
        )


async def toggle_verification(collection: str, account_id: str) -> MessageResponse:
    doc = await get_account(collection, account_id)
    verified = not doc.get("isVerified", False)
    await update_account(collection, account_id, {"isVerified": verified}, "update verification")
    logger.info(f"{collection}/{account_id} verified={verified}")
    return MessageResponse(
        message=f"{doc.get('fullName')} has been {'verified' if verified else 'unverified'}."
    )


async def toggle_ban(collection: str, account_id: str) -> MessageResponse:
    doc = await get_account(collection, account_id)
    banned = not doc.get("isBanned", False)
    await update_account(collection, account_id, {"isBanned": banned}, "update ban status")
    logger.info(f"{collection}/{account_id} banned={banned}")
    return MessageResponse(
        message=f"{doc.get('fullName')} has been {'banned' if banned else 'unbanned'}."
    )


async def reset_password(collection: str, account_id: str, new_password: str) -> MessageResponse:
    if not new_password:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Password cannot be empty."
        )
    doc = await get_account(collection, account_id)
    await update_account(
        collection,
        account_id,
        {"password": get_password_hash(new_password)},
        "reset password"
    )
    logger.info(f"Password for {collection}/{account_id} manually updated")
    return MessageResponse(message=f"Password for @{doc.get('handle')} has been manually updated.")


async def set_watch_hours(collection: str, account_id: str, hours: Any) -> MessageResponse:
    if hours is None or (isinstance(hours, str) and not hours.strip()):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Please enter a value for watch hours."
        )
    hours_number = parse_amount(hours)
    if hours_number is None or hours_number < 0:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Please enter a valid non-negative number for watch hours."
        )
    if hours_number.is_integer():
        hours_number = int(hours_number)

    doc = await get_account(collection, account_id)
    await update_account(collection, account_id, {"watchHours": hours_number}, "update watch hours")
    return MessageResponse(
        message=f"Watch hours for @{doc.get('handle')} have been updated to {hours_number}."
    )
