"""
gloverse_hq/models/user.py

"""


from typing import Optional, Any, Union
from pydantic import BaseModel, Field, computed_field
from gloverse_hq.core.config import settings
from gloverse_hq.models.base import BaseDocument
from gloverse_hq.services.formatting import initials as initials_of

class AccountBase(BaseDocument):
    """Fields shared by channels and platform users"""
    handle: Optional[str] = None
    full_name: Optional[str] = None
    profile_picture_url: Optional[str] = None
    email: Optional[str] = None
    is_verified: Optional[bool] = False
    is_banned: Optional[bool] = False
    wallet_balance: Optional[float] = None
    upi_id: Optional[str] = None

    @computed_field
    @property
    def status(self) -> str:
        return "Banned" if self.is_banned else "Active"

    @computed_field
    @property
    def initials(self) -> str:
        return initials_of(self.full_name)

class Channel(AccountBase):
    """Creator channel (the dashboard's Users page)"""
    watch_hours: Optional[float] = None
    is_monetized: Optional[bool] = False
    monetization_status: Optional[str] = None

class MonetizedCreator(Channel):
    """Channel with payout affordances"""

    @computed_field(alias="payNowEligible")
    @property
    def pay_now_eligible(self) -> bool:
        return (self.wallet_balance or 0) >= settings.PAYOUT_THRESHOLD

    @computed_field(alias="canMarkPaid")
    @property
    def can_mark_paid(self) -> bool:
        return (self.wallet_balance or 0) > 0

class GloStar(AccountBase):
    """Account in the platform's users collection"""
    followers: Optional[float] = None
    payout_requested: Optional[bool] = False
    payout_request_amount: Optional[float] = None
    payout_status: Optional[str] = None
    bank_details: Optional[Any] = None

# Request bodies
class PasswordReset(BaseModel):
    password: str = ""

class WatchHoursUpdate(BaseModel):
    hours: Optional[Union[float, str]] = None

class PayLinkResponse(BaseModel):
    link: str
    message: str = Field(default="Redirecting to UPI App")
