"""
API v1 routers

gloverse_hq/api/v1/__init__.py
"""
from fastapi import APIRouter

# Create the main API router
api_router = APIRouter()

# Import individual routers
from gloverse_hq.api.v1.auth import router as auth_router
from gloverse_hq.api.v1.dashboard import router as dashboard_router
from gloverse_hq.api.v1.channels import router as channels_router
from gloverse_hq.api.v1.glostars import router as glostars_router
from gloverse_hq.api.v1.content import router as content_router
from gloverse_hq.api.v1.ads import router as ads_router
from gloverse_hq.api.v1.advertisers import router as advertisers_router
from gloverse_hq.api.v1.revenue import router as revenue_router
from gloverse_hq.api.v1.monetization import router as monetization_router
from gloverse_hq.api.v1.payouts import router as payouts_router


# Include all routers
api_router.include_router(auth_router, prefix="/auth", tags=["authentication"])
api_router.include_router(dashboard_router, prefix="/dashboard", tags=["dashboard"])
api_router.include_router(channels_router, prefix="/channels", tags=["channels"])
api_router.include_router(glostars_router, prefix="/glostars", tags=["glostars"])
api_router.include_router(content_router, prefix="/content", tags=["content"])
api_router.include_router(ads_router, prefix="/ads", tags=["ads"])
api_router.include_router(advertisers_router, prefix="/advertisers", tags=["advertisers"])
api_router.include_router(revenue_router, prefix="/revenue", tags=["revenue"])
api_router.include_router(monetization_router, prefix="/monetization", tags=["monetization"])
api_router.include_router(payouts_router, prefix="/payouts", tags=["payouts"])
