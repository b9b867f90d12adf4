"""

gloverse_hq/core/config.py

"""


from pydantic_settings import BaseSettings
from typing import List

class Settings(BaseSettings):
    # App
    APP_NAME: str = "GloVerse HQ"
    DEBUG: bool = False
    ENVIRONMENT: str = "development"
    SECRET_KEY: str

    # Database
    MONGODB_URL: str
    DATABASE_NAME: str
    EXPECTED_DATABASE_NAME: str = "gloverse-d94dc"

    # CORS
    CORS_ORIGINS: List[str] = ["*"]

    # Operator session
    OPERATOR_EMAIL: str
    OPERATOR_PASSWORD_HASH: str
    ALGORITHM: str = "HS256"
    SESSION_COOKIE_NAME: str = "session"
    SESSION_MAX_AGE_SECONDS: int = 60 * 60 * 24 * 7  # 1 week

    # Live queries
    LIVE_QUERY_INTERVAL: float = 2.0  # seconds

    # Revenue
    PLATFORM_SHARE_PER_VIEW: float = 0.04  # 40% of ₹0.10
    REVENUE_UTC_OFFSET_MINUTES: int = 330  # IST
    REVENUE_DAILY_WINDOW_DAYS: int = 28

    # Creator payouts
    PAYOUT_THRESHOLD: float = 10000

    class Config:
        env_file = ".env"
        case_sensitive = True

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT.lower() == "production"

settings = Settings()
