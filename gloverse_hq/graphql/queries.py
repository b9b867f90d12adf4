"""
GraphQL queries

gloverse_hq/graphql/queries.py
"""
import strawberry
from typing import List, Optional
from strawberry.types import Info
from gloverse_hq.api.v1.ads import list_pending_campaigns
from gloverse_hq.api.v1.advertisers import list_advertisers
from gloverse_hq.api.v1.content import list_videos
from gloverse_hq.api.v1.dashboard import dashboard_counts as count_dashboard
from gloverse_hq.api.v1.revenue import active_campaigns
from gloverse_hq.core.database import CHANNELS, USERS
from gloverse_hq.models.base import MonetizationStatus
from gloverse_hq.models.user import Channel, GloStar, MonetizedCreator
from gloverse_hq.services import accounts
from gloverse_hq.services.revenue import revenue_report
from gloverse_hq.graphql.types import (
    AdCampaignType, AdvertiserType, ChannelType, DashboardCountsType,
    GloStarType, RevenueSummaryType, VideoType
)


def require_session(info: Info) -> None:
    if not info.context.get("authenticated"):
        raise PermissionError("Not authenticated")


@strawberry.type
class Query:
    @strawberry.field
    async def dashboard_counts(self, info: Info) -> DashboardCountsType:
        """Total users and videos"""
        require_session(info)
        stats = await count_dashboard()
        return DashboardCountsType(users=stats.users, videos=stats.videos)

    @strawberry.field
    async def channels(self, info: Info, search: Optional[str] = None) -> List[ChannelType]:
        require_session(info)
        channels = await accounts.list_accounts(CHANNELS, Channel, search=search)
        return [ChannelType.from_model(channel) for channel in channels]

    @strawberry.field
    async def glostars(self, info: Info, search: Optional[str] = None) -> List[GloStarType]:
        require_session(info)
        users = await accounts.list_accounts(USERS, GloStar, search=search)
        return [GloStarType.from_model(user) for user in users]

    @strawberry.field
    async def videos(self, info: Info) -> List[VideoType]:
        require_session(info)
        return [VideoType.from_model(video) for video in await list_videos()]

    @strawberry.field
    async def pending_campaigns(self, info: Info) -> List[AdCampaignType]:
        require_session(info)
        return [AdCampaignType.from_model(campaign) for campaign in await list_pending_campaigns()]

    @strawberry.field
    async def advertisers(self, info: Info, search: Optional[str] = None) -> List[AdvertiserType]:
        require_session(info)
        return [AdvertiserType.from_model(advertiser) for advertiser in await list_advertisers(search=search)]

    @strawberry.field
    async def monetization_requests(self, info: Info) -> List[ChannelType]:
        require_session(info)
        channels = await accounts.list_accounts(
            CHANNELS, Channel, query={"monetizationStatus": MonetizationStatus.PENDING.value}
        )
        return [ChannelType.from_model(channel) for channel in channels]

    @strawberry.field
    async def monetized_creators(self, info: Info) -> List[ChannelType]:
        require_session(info)
        creators = await accounts.list_accounts(CHANNELS, MonetizedCreator, query={"isMonetized": True})
        return [ChannelType.from_model(creator) for creator in creators]

    @strawberry.field
    async def payout_requests(self, info: Info) -> List[GloStarType]:
        require_session(info)
        users = await accounts.list_accounts(USERS, GloStar, query={"payoutRequested": True})
        return [GloStarType.from_model(user) for user in users]

    @strawberry.field
    async def revenue_summary(self, info: Info) -> RevenueSummaryType:
        require_session(info)
        return RevenueSummaryType.from_report(revenue_report(await active_campaigns()))
