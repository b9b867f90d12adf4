"""
Channel moderation (the dashboard's Users page)

gloverse_hq/api/v1/channels.py

"""
from typing import List, Optional
from fastapi import APIRouter, Depends, Query
from gloverse_hq.api.deps import require_session
from gloverse_hq.core.database import CHANNELS
from gloverse_hq.models.base import MessageResponse
from gloverse_hq.models.user import Channel, PasswordReset, WatchHoursUpdate
from gloverse_hq.services import accounts

router = APIRouter(dependencies=[Depends(require_session)])


@router.get("/", response_model=List[Channel])
async def list_channels(
    search: Optional[str] = Query(None, description="Filter by @handle")
):
    return await accounts.list_accounts(CHANNELS, Channel, search=search)


@router.post("/{channel_id}/verify", response_model=MessageResponse)
async def toggle_channel_verification(channel_id: str):
    return await accounts.toggle_verification(CHANNELS, channel_id)


@router.post("/{channel_id}/ban", response_model=MessageResponse)
async def toggle_channel_ban(channel_id: str):
    return await accounts.toggle_ban(CHANNELS, channel_id)


@router.post("/{channel_id}/password", response_model=MessageResponse)
async def force_password_reset(channel_id: str, body: PasswordReset):
    """Overwrite the channel's password; the owner is not notified"""
    return await accounts.reset_password(CHANNELS, channel_id, body.password)


@router.post("/{channel_id}/watch-hours", response_model=MessageResponse)
async def set_watch_hours(channel_id: str, body: WatchHoursUpdate):
    return await accounts.set_watch_hours(CHANNELS, channel_id, body.hours)
