"""Server configuration with environment variable support."""
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ServerConfig(BaseSettings):
    """Server configuration with environment variable support.

    All settings can be overridden via environment variables with TICKETBRIDGE_ prefix.
    Example: TICKETBRIDGE_PORT=9000 overrides the port setting.
    """

    model_config = SettingsConfigDict(
        env_prefix="TICKETBRIDGE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Server binding
    host: str = Field(
        default="127.0.0.1",
        description="Host to bind the server to",
    )
    port: int = Field(
        default=5000,
        ge=1,
        le=65535,
        description="Port to bind the server to",
    )

    # Outbound calls
    request_timeout_seconds: float = Field(
        default=30.0,
        gt=0,
        description="Timeout for calls to the Jira backend",
    )

    # Browser access
    cors_origins: list[str] = Field(
        default_factory=lambda: ["*"],
        description="Origins allowed to call the API from a browser",
    )

    log_level: str = Field(
        default="INFO",
        description="Minimum log level (DEBUG, INFO, WARNING, ...)",
    )
