import os
from pydantic_settings import BaseSettings
from typing import List, Optional


class Settings(BaseSettings):
    # REQUIRED
    DATABASE_URL: str
    SECRET_KEY: str

    # App
    APP_NAME: str = "portfolio-backend"
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"
    MIGRATE_ON_START: bool = False
    PUBLIC_URL: Optional[str] = None

    # CORS
    CORS_ORIGINS: List[str] = ["http://localhost:3000"]

    # Auth
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 24 * 7
    ALGORITHM: str = "HS256"
    ADMIN_PREFIX: str = "/admin"
    SIGNIN_PATH: str = "/api/auth/signin"

    # Media
    MAX_IMAGE_SIZE: int = 5 * 1024 * 1024  # 5MB
    IMAGE_CACHE_CONTROL: str = "public, max-age=31536000, immutable"

    # Listings
    DEFAULT_PAGE_SIZE: int = 12
    MAX_PAGE_SIZE: int = 50

    class Config:
        case_sensitive = True
        # Load .env ONLY when not production
        env_file = ".env" if os.getenv("ENVIRONMENT") != "production" else None

    @property
    def secure_cookies(self) -> bool:
        return (self.PUBLIC_URL or "").startswith("https://") or self.ENVIRONMENT == "production"

    @property
    def SESSION_COOKIE_NAME(self) -> str:
        # browsers only accept the __Secure- prefix over https
        if self.secure_cookies:
            return "__Secure-portfolio.session-token"
        return "portfolio.session-token"


settings = Settings()
