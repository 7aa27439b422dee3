from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # App
    APP_ENV: str = "development"
    LOG_LEVEL: str = "INFO"
    API_PREFIX: str = "/api"

    # Frontend origins allowed to post forms
    CORS_ORIGINS: list[str] = ["http://localhost:3000"]

    # Database
    DATABASE_URL: str = "sqlite+aiosqlite:///./landing.db"
    DB_AUTO_CREATE: bool = True

    # Comment listing
    COMMENTS_DEFAULT_LIMIT: int = 10
    COMMENTS_MAX_LIMIT: int = 100


settings = Settings()
