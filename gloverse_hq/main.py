"""
gloverse_hq/main.py

"""


from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
import logging
from gloverse_hq.core.config import settings
from gloverse_hq.core.database import connect_to_mongo, close_mongo_connection
from gloverse_hq.core.session import session_gate
from gloverse_hq.api.v1 import api_router
from gloverse_hq.graphql.schema import graphql_app
from gloverse_hq.services.live_query import live_queries
from gloverse_hq.routes import pages



# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    await connect_to_mongo()
    yield
    # Shutdown
    await live_queries.close_all()
    await close_mongo_connection()

# Create FastAPI app.
app = FastAPI(
    title=settings.APP_NAME,
    lifespan=lifespan,
    debug=settings.DEBUG
)

# Cookie session gating for page routes
app.middleware("http")(session_gate)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_router, prefix="/api/v1")

# Include GraphQL endpoint
app.include_router(graphql_app, prefix="/graphql")

app.include_router(pages.router)

@app.get("/health")
async def health_check():
    return {"status": "healthy"}
