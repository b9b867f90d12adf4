"""
GloStars: accounts in the platform users collection

gloverse_hq/api/v1/glostars.py

"""
from typing import List, Optional
from fastapi import APIRouter, Depends, Query
from gloverse_hq.api.deps import require_session
from gloverse_hq.core.database import USERS
from gloverse_hq.models.base import MessageResponse
from gloverse_hq.models.user import GloStar, PasswordReset
from gloverse_hq.services import accounts

router = APIRouter(dependencies=[Depends(require_session)])


@router.get("/", response_model=List[GloStar])
async def list_glostars(
    search: Optional[str] = Query(None, description="Filter by @handle")
):
    return await accounts.list_accounts(USERS, GloStar, search=search)


@router.post("/{user_id}/verify", response_model=MessageResponse)
async def toggle_glostar_verification(user_id: str):
    return await accounts.toggle_verification(USERS, user_id)


@router.post("/{user_id}/ban", response_model=MessageResponse)
async def toggle_glostar_ban(user_id: str):
    return await accounts.toggle_ban(USERS, user_id)


@router.post("/{user_id}/password", response_model=MessageResponse)
async def reset_glostar_password(user_id: str, body: PasswordReset):
    return await accounts.reset_password(USERS, user_id, body.password)
