"""
Dashboard overview endpoints

gloverse_hq/api/v1/dashboard.py

"""
from fastapi import APIRouter, Depends
from pydantic import BaseModel
from gloverse_hq.api.deps import require_session
from gloverse_hq.core.config import settings
from gloverse_hq.core.database import USERS, VIDEOS, get_database
import logging

logger = logging.getLogger(__name__)

router = APIRouter()

class DashboardStats(BaseModel):
    users: int = 0
    videos: int = 0

class ConnectionStatus(BaseModel):
    database: str
    expected: str
    connected: bool
    message: str


async def _count(collection: str) -> int:
    db = get_database()
    try:
        return await db[collection].count_documents({})
    except Exception as e:
        logger.error(f"Error counting {collection}: {e}")
        return 0


async def dashboard_counts() -> DashboardStats:
    """Total users and videos on the platform"""
    return DashboardStats(users=await _count(USERS), videos=await _count(VIDEOS))


@router.get("/stats", response_model=DashboardStats)
async def get_stats(_: bool = Depends(require_session)):
    return await dashboard_counts()


@router.get("/connection", response_model=ConnectionStatus)
async def get_connection(_: bool = Depends(require_session)):
    """Whether the service is pointed at the production GloVerse database"""
    db = get_database()
    name = db.name
    connected = name == settings.EXPECTED_DATABASE_NAME
    if connected:
        message = f"Successfully connected to the '{name}' database."
    else:
        message = f"Connected to '{name}', expected '{settings.EXPECTED_DATABASE_NAME}'."
    return ConnectionStatus(
        database=name,
        expected=settings.EXPECTED_DATABASE_NAME,
        connected=connected,
        message=message,
    )
