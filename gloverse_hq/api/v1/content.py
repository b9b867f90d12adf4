"""
Video content moderation

gloverse_hq/api/v1/content.py

"""
from typing import List
from fastapi import APIRouter, Depends, HTTPException, status
from gloverse_hq.api.deps import require_session
from gloverse_hq.core.database import VIDEOS, get_database, id_filter, serialize_document
from gloverse_hq.models.base import MessageResponse, parse_document
from gloverse_hq.models.video import Video
import logging

logger = logging.getLogger(__name__)

router = APIRouter(dependencies=[Depends(require_session)])


async def _get_video(video_id: str) -> Video:
    db = get_database()
    doc = await db[VIDEOS].find_one(id_filter(video_id))
    if not doc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Video not found"
        )
    return Video.model_validate(serialize_document(doc))


@router.get("/", response_model=List[Video])
async def list_videos():
    """All videos on the platform"""
    db = get_database()
    try:
        videos = [parse_document(Video, serialize_document(doc)) async for doc in db[VIDEOS].find({})]
    except Exception as e:
        logger.error(f"Error fetching videos: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch videos."
        )
    return [video for video in videos if video is not None]


@router.delete("/{video_id}", response_model=MessageResponse)
async def delete_video(video_id: str):
    """
    Permanently remove a video

    - This action cannot be undone
    """
    video = await _get_video(video_id)
    db = get_database()
    try:
        await db[VIDEOS].delete_one(id_filter(video_id))
    except Exception as e:
        logger.error(f"Error deleting video {video_id}: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Could not delete video."
        )
    logger.info(f"Deleted video {video_id} ({video.display_title})")
    return MessageResponse(message="Content Removed from GloVerse")


@router.post("/{video_id}/feature", response_model=MessageResponse)
async def toggle_featured(video_id: str):
    video = await _get_video(video_id)
    featured = not video.is_featured
    db = get_database()
    try:
        await db[VIDEOS].update_one(id_filter(video_id), {"$set": {"isFeatured": featured}})
    except Exception as e:
        logger.error(f"Error updating video {video_id}: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Could not update video status."
        )
    return MessageResponse(
        message=f'"{video.title}" has been {"featured" if featured else "unfeatured"}.'
    )
