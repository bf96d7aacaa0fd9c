"""Application configuration.

Loads settings from environment variables with sensible defaults.
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # API
    api_version: str = "0.1.0"
    debug: bool = False

    # CMS (GraphQL endpoint serving the product catalog)
    cms_url: str | None = None
    cms_timeout: float = 10.0

    # Public site
    base_url: str | None = None
    site_url: str = "https://alandalus-library.com"
    fallback_base_url: str = "https://alandalus-library.netlify.app"

    # Locales
    supported_locales: list[str] = ["ar", "en"]
    default_locale: str = "ar"

    # Contact
    whatsapp_phone: str = "+201013283570"

    # Logging
    log_level: str = "INFO"

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


settings = Settings()
