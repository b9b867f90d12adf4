"""
gloverse_hq/models/video.py

"""


from typing import Optional
from pydantic import Field
from gloverse_hq.models.base import BaseDocument

class Video(BaseDocument):
    """Video model"""
    title: Optional[str] = None
    uploader_handle: Optional[str] = None
    thumbnail_url: Optional[str] = None
    video_url: Optional[str] = None
    public_id: Optional[str] = Field(default=None, alias="public_id")
    view_count: Optional[float] = None
    is_featured: Optional[bool] = False

    @property
    def display_title(self) -> str:
        return self.title or "Untitled Video"
