"""Application Configuration: environment-driven settings via pydantic-settings.

Invariants:
    - get_settings() is cached (lru_cache): single instance per process
    - Data file paths resolve relative to data_dir

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults provided for every setting: runs out-of-the-box from the repo root
"""

from functools import lru_cache
from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Data
    data_dir: Path = Path("data")
    quotes_file: str = "quotes.json"
    authors_file: str = "authors.json"
    tags_file: str = "tags.json"
    public_dir: Path = Path("public")

    # Engine
    random_seed: int | None = None

    # Request limits
    max_random_count: int = 50
    max_list_limit: int = 100
    default_list_limit: int = 10

    # API
    cors_origins: list[str] = ["*"]
    trust_proxy: bool = True

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    @field_validator("log_level")
    @classmethod
    def upper_log_level(cls, v: str) -> str:
        return v.upper()

    @property
    def quotes_path(self) -> Path:
        return self.data_dir / self.quotes_file

    @property
    def authors_path(self) -> Path:
        return self.data_dir / self.authors_file

    @property
    def tags_path(self) -> Path:
        return self.data_dir / self.tags_file


@lru_cache
def get_settings() -> Settings:
    return Settings()
