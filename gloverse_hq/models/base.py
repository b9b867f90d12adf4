"""
gloverse_hq/models/base.py
"""


from datetime import datetime
from typing import Any, Dict, Optional, Type, TypeVar
from enum import Enum
from pydantic import BaseModel, Field, ConfigDict, ValidationError
from pydantic.alias_generators import to_camel
import logging

logger = logging.getLogger(__name__)

# Enums
class CampaignStatus(str, Enum):
    PENDING = "Pending"
    ACTIVE = "Active"
    REJECTED = "Rejected"

class CampaignPlacement(str, Enum):
    FOR_YOU_FEED = "For You Feed"
    HEADER_BANNER = "Header Banner"
    USER_PROFILE = "User Profile"

class MonetizationStatus(str, Enum):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"

class PayoutStatus(str, Enum):
    PAID = "Paid"
    REJECTED = "Rejected"

class PaymentRequestStatus(str, Enum):
    PENDING = "pending"
    APPROVED = "approved"
    DECLINED = "declined"

# Base Models
class BaseDocument(BaseModel):
    """Structural view of a store document; fields are camelCase in the store"""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    id: Optional[str] = Field(default=None, alias="_id")
    created_at: Optional[datetime] = None

DocumentT = TypeVar("DocumentT", bound=BaseDocument)

def parse_document(model: Type[DocumentT], doc: Dict[str, Any]) -> Optional[DocumentT]:
    """Validate one stored document; malformed ones are logged and skipped"""
    try:
        return model.model_validate(doc)
    except ValidationError as e:
        logger.warning(f"Skipping malformed {model.__name__} document {doc.get('_id')}: {e}")
        return None

class MessageResponse(BaseModel):
    """Outcome of an admin action"""
    message: str
    title: str = "Success"
