"""

gloverse_hq/core/database.py

"""


from typing import Any, Dict, Optional, Union
from motor.motor_asyncio import AsyncIOMotorClient
from bson import ObjectId
from gloverse_hq.core.config import settings
import logging

logger = logging.getLogger(__name__)

# Collections written by the GloVerse apps
CHANNELS = "channels"
USERS = "users"
VIDEOS = "videos"
AD_CAMPAIGNS = "ad_campaigns"
ADVERTISERS = "advertisers_data"
PAYMENT_REQUESTS = "payment_requests"
ANALYTICS = "analytics"

class Database:
    client: AsyncIOMotorClient = None
    db = None

db = Database()

async def connect_to_mongo():
    """Create database connection."""
    try:
        db.client = AsyncIOMotorClient(settings.MONGODB_URL)
        db.db = db.client[settings.DATABASE_NAME]

        await create_indexes()

        logger.info(f"Connected to MongoDB database '{settings.DATABASE_NAME}'")
    except Exception as e:
        logger.error(f"Could not connect to MongoDB: {e}")
        raise

async def close_mongo_connection():
    """Close database connection."""
    if db.client:
        db.client.close()
        logger.info("Disconnected from MongoDB")

async def create_indexes():
    """Create indexes for the filtered queries the dashboard runs"""
    try:
        await db.db[AD_CAMPAIGNS].create_index([("status", 1)])
        await db.db[CHANNELS].create_index([("monetizationStatus", 1)])
        await db.db[CHANNELS].create_index([("isMonetized", 1)])
        await db.db[USERS].create_index([("payoutRequested", 1)])
        await db.db[PAYMENT_REQUESTS].create_index([("status", 1), ("createdAt", -1)])

        logger.info("Database indexes created")
    except Exception as e:
        logger.error(f"Error creating indexes: {e}")

def get_database():
    """Get database instance"""
    return db.db

def document_id(doc_id: str) -> Union[ObjectId, str]:
    """Documents created by the apps may carry ObjectIds or plain string ids"""
    if ObjectId.is_valid(doc_id):
        return ObjectId(doc_id)
    return doc_id

def id_filter(doc_id: str) -> Dict[str, Any]:
    return {"_id": document_id(doc_id)}

def serialize_document(doc: Optional[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
    """Stringify the id so the document can be fed to a response model"""
    if doc is None:
        return None
    doc["_id"] = str(doc["_id"])
    return doc
