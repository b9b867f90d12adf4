"""
GraphQL subscriptions for live dashboard pages

gloverse_hq/graphql/subscriptions.py

Each subscription registers a live query on subscribe and unregisters it
when the client goes away.
"""
import strawberry
from typing import AsyncGenerator, List, Optional
import asyncio
from contextlib import aclosing
from strawberry.types import Info
from gloverse_hq.core.database import AD_CAMPAIGNS, ADVERTISERS, CHANNELS, USERS, VIDEOS
from gloverse_hq.models.advertising import AdCampaign, Advertiser
from gloverse_hq.models.base import CampaignStatus, MonetizationStatus, parse_document
from gloverse_hq.models.user import Channel, GloStar
from gloverse_hq.models.video import Video
from gloverse_hq.services.formatting import matches_handle
from gloverse_hq.services.live_query import live_queries
from gloverse_hq.services.revenue import revenue_report
from gloverse_hq.graphql.queries import require_session
from gloverse_hq.graphql.types import (
    AdCampaignType, AdvertiserType, ChannelType, DashboardCountsType,
    GloStarType, RevenueSummaryType, VideoType
)
import logging

logger = logging.getLogger(__name__)


def _parsed(model, snapshot):
    documents = (parse_document(model, doc) for doc in snapshot)
    return [doc for doc in documents if doc is not None]


@strawberry.type
class Subscription:
    @strawberry.subscription
    async def dashboard_counts(self, info: Info) -> AsyncGenerator[DashboardCountsType, None]:
        """Users and videos totals, pushed when either changes"""
        require_session(info)
        queue: asyncio.Queue = asyncio.Queue()
        registrations = [
            live_queries.subscribe(name, lambda snapshot, name=name: queue.put_nowait((name, len(snapshot))))
            for name in (USERS, VIDEOS)
        ]
        counts = {}
        last = None
        try:
            while True:
                name, count = await queue.get()
                counts[name] = count
                if len(counts) < len(registrations):
                    continue
                totals = (counts[USERS], counts[VIDEOS])
                if totals != last:
                    last = totals
                    yield DashboardCountsType(users=totals[0], videos=totals[1])
        finally:
            for registration in registrations:
                registration.unsubscribe()

    @strawberry.subscription
    async def channels(self, info: Info, search: Optional[str] = None) -> AsyncGenerator[List[ChannelType], None]:
        require_session(info)
        async with aclosing(live_queries.stream(CHANNELS)) as snapshots:
            async for snapshot in snapshots:
                channels = _parsed(Channel, snapshot)
                yield [ChannelType.from_model(c) for c in channels if matches_handle(c.handle, search)]

    @strawberry.subscription
    async def glostars(self, info: Info, search: Optional[str] = None) -> AsyncGenerator[List[GloStarType], None]:
        require_session(info)
        async with aclosing(live_queries.stream(USERS)) as snapshots:
            async for snapshot in snapshots:
                users = _parsed(GloStar, snapshot)
                yield [GloStarType.from_model(u) for u in users if matches_handle(u.handle, search)]

    @strawberry.subscription
    async def videos(self, info: Info) -> AsyncGenerator[List[VideoType], None]:
        require_session(info)
        async with aclosing(live_queries.stream(VIDEOS)) as snapshots:
            async for snapshot in snapshots:
                yield [VideoType.from_model(video) for video in _parsed(Video, snapshot)]

    @strawberry.subscription
    async def pending_campaigns(self, info: Info) -> AsyncGenerator[List[AdCampaignType], None]:
        require_session(info)
        query = {"status": CampaignStatus.PENDING.value}
        async with aclosing(live_queries.stream(AD_CAMPAIGNS, query)) as snapshots:
            async for snapshot in snapshots:
                yield [AdCampaignType.from_model(c) for c in _parsed(AdCampaign, snapshot)]

    @strawberry.subscription
    async def advertisers(self, info: Info) -> AsyncGenerator[List[AdvertiserType], None]:
        require_session(info)
        async with aclosing(live_queries.stream(ADVERTISERS)) as snapshots:
            async for snapshot in snapshots:
                yield [AdvertiserType.from_model(a) for a in _parsed(Advertiser, snapshot)]

    @strawberry.subscription
    async def monetization_requests(self, info: Info) -> AsyncGenerator[List[ChannelType], None]:
        require_session(info)
        query = {"monetizationStatus": MonetizationStatus.PENDING.value}
        async with aclosing(live_queries.stream(CHANNELS, query)) as snapshots:
            async for snapshot in snapshots:
                yield [ChannelType.from_model(c) for c in _parsed(Channel, snapshot)]

    @strawberry.subscription
    async def payout_requests(self, info: Info) -> AsyncGenerator[List[GloStarType], None]:
        require_session(info)
        async with aclosing(live_queries.stream(USERS, {"payoutRequested": True})) as snapshots:
            async for snapshot in snapshots:
                yield [GloStarType.from_model(u) for u in _parsed(GloStar, snapshot)]

    @strawberry.subscription
    async def revenue_summary(self, info: Info) -> AsyncGenerator[RevenueSummaryType, None]:
        """Revenue recomputed whenever the set of active campaigns changes"""
        require_session(info)
        query = {"status": CampaignStatus.ACTIVE.value}
        async with aclosing(live_queries.stream(AD_CAMPAIGNS, query)) as snapshots:
            async for snapshot in snapshots:
                yield RevenueSummaryType.from_report(revenue_report(snapshot))
