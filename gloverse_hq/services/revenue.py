"""
Revenue aggregation for active ad campaigns

gloverse_hq/services/revenue.py

Revenue is attributed to the day a campaign was created, bucketed in a
fixed UTC offset (IST by default). Each view earns the platform a flat share.
"""
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Iterable, List, Optional, Tuple
from gloverse_hq.core.config import settings
from gloverse_hq.models.advertising import (
    DailyRevenue, FormattedRevenue, RevenueResponse, RevenueSummary
)
from gloverse_hq.services.formatting import format_inr
import logging

logger = logging.getLogger(__name__)


def _as_utc(value: datetime) -> datetime:
    # The driver hands back naive UTC datetimes
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def revenue_points(campaigns: Iterable[Dict[str, Any]]) -> List[Tuple[datetime, float]]:
    """(createdAt, viewCount) for every campaign that carries both"""
    points = []
    for campaign in campaigns:
        created_at = campaign.get("createdAt")
        view_count = campaign.get("viewCount")
        if not isinstance(created_at, datetime):
            continue
        if isinstance(view_count, bool) or not isinstance(view_count, (int, float)):
            continue
        points.append((_as_utc(created_at), float(view_count)))
    return points


def summarize_revenue(
    campaigns: Iterable[Dict[str, Any]],
    now: Optional[datetime] = None,
    share_per_view: Optional[float] = None,
    utc_offset_minutes: Optional[int] = None,
    window_days: Optional[int] = None,
) -> RevenueSummary:
    """
    Bucket campaign revenue into today, the last 7 days, this month and a
    daily series covering the last ``window_days`` days (today included).
    """
    share = settings.PLATFORM_SHARE_PER_VIEW if share_per_view is None else share_per_view
    offset = settings.REVENUE_UTC_OFFSET_MINUTES if utc_offset_minutes is None else utc_offset_minutes
    window = settings.REVENUE_DAILY_WINDOW_DAYS if window_days is None else window_days
    zone = timezone(timedelta(minutes=offset))

    local_now = _as_utc(now or datetime.utcnow()).astimezone(zone)
    today_start = local_now.replace(hour=0, minute=0, second=0, microsecond=0)
    week_start = today_start - timedelta(days=6)
    month_start = today_start.replace(day=1)

    # Oldest day first; dict keeps insertion order
    daily: Dict[str, float] = {}
    for days_ago in range(window - 1, -1, -1):
        daily[(local_now - timedelta(days=days_ago)).date().isoformat()] = 0.0

    summary = RevenueSummary()
    for created_at, view_count in revenue_points(campaigns):
        revenue = view_count * share
        local_created = created_at.astimezone(zone)

        summary.total += revenue
        summary.campaign_count += 1
        if local_created >= today_start:
            summary.today += revenue
        if local_created >= week_start:
            summary.last_7_days += revenue
        if local_created >= month_start:
            summary.this_month += revenue

        day = local_created.date().isoformat()
        if day in daily:
            daily[day] += revenue

    summary.daily = [DailyRevenue(date=day, revenue=amount) for day, amount in daily.items()]
    return summary


def revenue_report(campaigns: Iterable[Dict[str, Any]], now: Optional[datetime] = None) -> RevenueResponse:
    summary = summarize_revenue(campaigns, now=now)
    logger.debug(f"Revenue computed over {summary.campaign_count} active campaigns")
    return RevenueResponse(
        summary=summary,
        formatted=FormattedRevenue(
            today=format_inr(summary.today),
            last_7_days=format_inr(summary.last_7_days),
            this_month=format_inr(summary.this_month),
            total=format_inr(summary.total),
        ),
    )
