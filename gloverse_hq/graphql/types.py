"""
GraphQL type definitions

gloverse_hq/graphql/types.py

"""
import strawberry
from typing import List, Optional
from datetime import datetime
from gloverse_hq.models.advertising import AdCampaign, Advertiser, RevenueResponse
from gloverse_hq.models.user import AccountBase, Channel, GloStar
from gloverse_hq.models.video import Video

@strawberry.type
class ChannelType:
    id: str
    handle: Optional[str] = None
    full_name: Optional[str] = None
    profile_picture_url: Optional[str] = None
    email: Optional[str] = None
    is_verified: bool = False
    is_banned: bool = False
    status: str = "Active"
    initials: str = ""
    wallet_balance: Optional[float] = None
    upi_id: Optional[str] = None
    watch_hours: Optional[float] = None
    is_monetized: bool = False
    monetization_status: Optional[str] = None
    created_at: Optional[datetime] = None

    @staticmethod
    def from_model(channel: Channel) -> "ChannelType":
        return ChannelType(
            **_account_fields(channel),
            watch_hours=channel.watch_hours,
            is_monetized=bool(channel.is_monetized),
            monetization_status=channel.monetization_status,
            created_at=channel.created_at,
        )

@strawberry.type
class GloStarType:
    id: str
    handle: Optional[str] = None
    full_name: Optional[str] = None
    profile_picture_url: Optional[str] = None
    email: Optional[str] = None
    is_verified: bool = False
    is_banned: bool = False
    status: str = "Active"
    initials: str = ""
    wallet_balance: Optional[float] = None
    upi_id: Optional[str] = None
    followers: Optional[float] = None
    payout_requested: bool = False
    payout_request_amount: Optional[float] = None
    payout_status: Optional[str] = None

    @staticmethod
    def from_model(user: GloStar) -> "GloStarType":
        return GloStarType(
            **_account_fields(user),
            followers=user.followers,
            payout_requested=bool(user.payout_requested),
            payout_request_amount=user.payout_request_amount,
            payout_status=user.payout_status,
        )

def _account_fields(account: AccountBase) -> dict:
    return {
        "id": account.id,
        "handle": account.handle,
        "full_name": account.full_name,
        "profile_picture_url": account.profile_picture_url,
        "email": account.email,
        "is_verified": bool(account.is_verified),
        "is_banned": bool(account.is_banned),
        "status": account.status,
        "initials": account.initials,
        "wallet_balance": account.wallet_balance,
        "upi_id": account.upi_id,
    }

@strawberry.type
class VideoType:
    id: str
    title: Optional[str] = None
    uploader_handle: Optional[str] = None
    thumbnail_url: Optional[str] = None
    video_url: Optional[str] = None
    view_count: float = 0
    is_featured: bool = False

    @staticmethod
    def from_model(video: Video) -> "VideoType":
        return VideoType(
            id=video.id,
            title=video.title,
            uploader_handle=video.uploader_handle,
            thumbnail_url=video.thumbnail_url,
            video_url=video.video_url,
            view_count=video.view_count or 0,
            is_featured=bool(video.is_featured),
        )

@strawberry.type
class AdCampaignType:
    id: str
    title: Optional[str] = None
    video_url: Optional[str] = None
    thumbnail_url: Optional[str] = None
    placement: Optional[str] = None
    status: Optional[str] = None
    view_count: Optional[float] = None
    created_at: Optional[datetime] = None

    @staticmethod
    def from_model(campaign: AdCampaign) -> "AdCampaignType":
        return AdCampaignType(
            id=campaign.id,
            title=campaign.title,
            video_url=campaign.video_url,
            thumbnail_url=campaign.thumbnail_url,
            placement=campaign.placement,
            status=campaign.status,
            view_count=campaign.view_count,
            created_at=campaign.created_at,
        )

@strawberry.type
class AdvertiserType:
    id: str
    business_name: Optional[str] = None
    email: Optional[str] = None
    profile_picture_url: Optional[str] = None
    wallet_balance: Optional[float] = None
    initials: str = "AD"

    @staticmethod
    def from_model(advertiser: Advertiser) -> "AdvertiserType":
        return AdvertiserType(
            id=advertiser.id,
            business_name=advertiser.business_name,
            email=advertiser.email,
            profile_picture_url=advertiser.profile_picture_url,
            wallet_balance=advertiser.wallet_balance,
            initials=advertiser.initials,
        )

@strawberry.type
class DashboardCountsType:
    users: int
    videos: int

@strawberry.type
class DailyRevenueType:
    date: str
    revenue: float

@strawberry.type
class RevenueSummaryType:
    today: float
    last_7_days: float
    this_month: float
    total: float
    campaign_count: int
    daily: List[DailyRevenueType]
    formatted_total: str

    @staticmethod
    def from_report(report: RevenueResponse) -> "RevenueSummaryType":
        summary = report.summary
        return RevenueSummaryType(
            today=summary.today,
            last_7_days=summary.last_7_days,
            this_month=summary.this_month,
            total=summary.total,
            campaign_count=summary.campaign_count,
            daily=[DailyRevenueType(date=day.date, revenue=day.revenue) for day in summary.daily],
            formatted_total=report.formatted.total,
        )
