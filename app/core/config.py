"""Application configuration from environment."""
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """App settings loaded from env / .env. Built once at startup and passed around."""

    app_name: str = "CyberGuard"
    environment: str = "development"
    debug: bool = False
    log_level: str = "INFO"

    # Database
    database_url: str = "sqlite+aiosqlite:///./cyberguard.db"

    # JWT session token
    secret_key: str = "change-me-in-production-use-env"
    algorithm: str = "HS256"
    access_token_expire_minutes: int = 60 * 24 * 7  # 7 days

    # Auth cookie
    auth_cookie_name: str = "token"
    auth_cookie_max_age: int = 60 * 60 * 24 * 7  # 7 days

    # Login rate limit: attempts per sliding window, per client IP
    login_rate_limit_attempts: int = 5
    login_rate_limit_window_seconds: int = 15 * 60

    min_password_length: int = 8

    cors_origins: list[str] = ["http://localhost:5173"]

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"

    @property
    def cookie_secure(self) -> bool:
        return self.environment.lower() == "production"


def get_settings() -> Settings:
    return Settings()
