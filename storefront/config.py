from dotenv import load_dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict

load_dotenv()


class Settings(BaseSettings):
    # Application settings
    app_name: str = "Softblaze Storefront"
    app_version: str = "1.0.0"
    debug: bool = False
    environment: str = "development"

    # Public origin used for canonical links when the request arrives on a local address
    production_origin: str = "https://softblaze.net"

    # Identity service; empty disables session lookups
    api_base_url: str = "http://localhost:8080"
    identity_timeout_seconds: float = 5.0

    # Logging settings
    log_level: str = "INFO"
    log_json: bool = False

    # CORS settings
    allowed_origins: list[str] = ["http://localhost:5173", "https://softblaze.net"]

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


settings = Settings()
