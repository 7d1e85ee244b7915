"""Application configuration loaded from environment variables and .env file."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings.

    Values are loaded from environment variables first,
    then from a .env file in the project root as fallback.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
    )

    POKEAPI_BASE_URL: str = "https://pokeapi.co/api/v2"
    # One oversized page instead of paginating the catalog
    CATALOG_LIMIT: int = 100000
    FILTER_LIMIT: int = 20
    REQUEST_TIMEOUT: float = 10.0
    USER_AGENT: str = "pokecatalog/1.0 (+https://pokeapi.co)"
    LOG_LEVEL: str = "INFO"

    HOST: str = "127.0.0.1"
    PORT: int = 8000


settings = Settings()
