"""
gloverse_hq/models/advertising.py
"""


from typing import Optional, List, Union
from datetime import datetime
from pydantic import BaseModel, Field, computed_field
from gloverse_hq.models.base import BaseDocument
from gloverse_hq.services.formatting import initials as initials_of

class AdCampaign(BaseDocument):
    """Ad campaign submitted by an advertiser"""
    title: Optional[str] = None
    video_url: Optional[str] = None
    thumbnail_url: Optional[str] = None
    placement: Optional[str] = None
    status: Optional[str] = None
    view_count: Optional[float] = None

class Advertiser(BaseDocument):
    """Advertiser account with a prepaid wallet"""
    business_name: Optional[str] = None
    email: Optional[str] = None
    profile_picture_url: Optional[str] = None
    wallet_balance: Optional[float] = None

    @computed_field
    @property
    def initials(self) -> str:
        return initials_of(self.business_name, fallback="AD")

class PaymentRequest(BaseDocument):
    """Wallet top-up an advertiser paid for and the operator confirms"""
    advertiser_id: Optional[str] = None
    amount: Optional[float] = None
    transaction_id: Optional[str] = None
    status: Optional[str] = None
    reviewed_at: Optional[datetime] = None
    business_name: Optional[str] = None

class BonusRequest(BaseModel):
    amount: Optional[Union[float, str]] = None

class DailyRevenue(BaseModel):
    date: str
    revenue: float

class RevenueSummary(BaseModel):
    """Platform revenue from active campaigns"""
    today: float = 0.0
    last_7_days: float = Field(default=0.0, serialization_alias="last7Days")
    this_month: float = Field(default=0.0, serialization_alias="thisMonth")
    total: float = 0.0
    campaign_count: int = Field(default=0, serialization_alias="campaignCount")
    daily: List[DailyRevenue] = Field(default_factory=list)

class FormattedRevenue(BaseModel):
    today: str
    last_7_days: str = Field(serialization_alias="last7Days")
    this_month: str = Field(serialization_alias="thisMonth")
    total: str

class RevenueResponse(BaseModel):
    summary: RevenueSummary
    formatted: FormattedRevenue
