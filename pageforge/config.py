"""Application configuration."""

from pathlib import Path

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings."""

    # Paths
    TEMPLATES_DIR: Path = Path(__file__).parent / "templates"

    # Server settings
    HOST: str = "0.0.0.0"
    PORT: int = 8080
    LOG_LEVEL: str = "INFO"

    # Persistence (empty URL = in-memory backend for local development)
    SUPABASE_URL: str = ""
    SUPABASE_KEY: str = ""
    REQUEST_TIMEOUT: float = 10.0  # Seconds
    PAGES_TABLE: str = "album_landing_pages"

    # Rendering
    PLACEHOLDER_IMAGE: str = "/placeholder.svg"
    CANVAS_HEIGHT: int = 600

    # New element placement
    DEFAULT_ELEMENT_X: int = 100
    DEFAULT_ELEMENT_Y: int = 100
    DEFAULT_ELEMENT_WIDTH: int = 200
    DEFAULT_ELEMENT_HEIGHT: int = 100

    model_config = {"env_prefix": "PAGEFORGE_"}


settings = Settings()
