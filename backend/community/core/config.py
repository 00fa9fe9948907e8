from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings"""

    model_config = SettingsConfigDict(
        env_file="../.env",
        env_ignore_empty=True,
        extra="ignore",
    )

    PROJECT_NAME: str = "Community Messaging"
    PROJECT_VERSION: str = "1.0.0"
    DESCRIPTION: str = "Private messaging and blocking backend for the community platform"

    DATABASE_URI: str = "sqlite:///./community.db"

    # Endpoints
    API_V1_STR: str = "/api/v1"

    # Redis
    REDIS_URL: str = "redis://localhost:6379/0"

    # Sessions are issued by the identity service, this API only reads them
    SESSION_COOKIE_NAME: str = "sessionId"
    REDIS_SESSION_PREFIX: str = "session:"

    # Live push channel: destination = prefix + email + suffix
    PUSH_DESTINATION_PREFIX: str = "/user/"
    PUSH_UNREAD_SUFFIX: str = "/queue/unread-count"

    # Media
    DEFAULT_AVATAR_URL: str = "/images/default-avatar.jpg"
    MEDIA_ROUTE_PREFIX: str = "/api/files/"

    # Content gate
    PROHIBITED_WORDS: list[str] = ["idiot", "stupid", "moron"]

    # Logging
    LOG_FILE: str = "community.log"

    # CORS Settings
    ALLOWED_ORIGINS: str = "https://localhost,https://127.0.0.1"
    ALLOW_CREDENTIALS: bool = True
    ALLOW_METHODS: list[str] = ["*"]
    ALLOW_HEADERS: list[str] = ["*"]


settings = Settings()
