"""

gloverse_hq/models/__init__.py

"""


from gloverse_hq.models.base import *
from gloverse_hq.models.user import *
from gloverse_hq.models.video import *
from gloverse_hq.models.advertising import *

__all__ = [
    # Base
    "parse_document",
    "CampaignStatus",
    "CampaignPlacement",
    "MonetizationStatus",
    "PayoutStatus",
    "PaymentRequestStatus",
    "BaseDocument",
    "MessageResponse",

    # Account models
    "AccountBase",
    "Channel",
    "MonetizedCreator",
    "GloStar",
    "PasswordReset",
    "WatchHoursUpdate",
    "PayLinkResponse",

    # Video models
    "Video",

    # Advertising models
    "AdCampaign",
    "Advertiser",
    "PaymentRequest",
    "BonusRequest",
    "DailyRevenue",
    "RevenueSummary",
    "FormattedRevenue",
    "RevenueResponse",
]
