#gloverse_hq/routes/pages.py

from fastapi import APIRouter
from fastapi.responses import RedirectResponse
from gloverse_hq.core.session import DASHBOARD_PATH

router = APIRouter(tags=["Pages"])

NAV_ITEMS = [
    {"href": "/dashboard", "label": "Dashboard", "api": "/api/v1/dashboard/stats"},
    {"href": "/dashboard/users", "label": "Users", "api": "/api/v1/channels/"},
    {"href": "/dashboard/glostars", "label": "GloStars", "api": "/api/v1/glostars/"},
    {"href": "/dashboard/content", "label": "Videos", "api": "/api/v1/content/"},
    {"href": "/dashboard/monetization", "label": "Monetization", "api": "/api/v1/monetization/requests"},
    {"href": "/dashboard/payouts", "label": "Payouts", "api": "/api/v1/payouts/requests"},
    {"href": "/dashboard/revenue", "label": "Revenue", "api": "/api/v1/revenue/summary"},
    {"href": "/dashboard/ads-manager", "label": "Ad Requests", "api": "/api/v1/ads/pending"},
    {"href": "/dashboard/advertisers", "label": "Advertisers", "api": "/api/v1/advertisers/"},
]


@router.get("/")
async def root():
    return RedirectResponse(url=DASHBOARD_PATH, status_code=307)


@router.get("/login")
async def login_page():
    return {
        "title": "GloVerse HQ",
        "description": "Founder Command Center",
        "action": "/api/v1/auth/login",
        "fields": ["email", "password"],
    }


@router.get("/dashboard")
async def dashboard_page():
    return {"title": "GloVerse HQ", "sections": NAV_ITEMS}


@router.get("/dashboard/{section}")
async def dashboard_section(section: str):
    href = f"{DASHBOARD_PATH}/{section}"
    for item in NAV_ITEMS:
        if item["href"] == href:
            return {"title": item["label"], "api": item["api"]}
    return RedirectResponse(url=DASHBOARD_PATH, status_code=307)
