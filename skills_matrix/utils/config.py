from __future__ import annotations

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

# Resolve .env file path relative to the project root
_ENV_FILE = Path(__file__).parent.parent.parent / ".env"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE) if _ENV_FILE.exists() else ".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    api_prefix: str = ""
    # JSON dataset with skills/positions/people; None serves the bundled sample data.
    dataset_path: Path | None = None

    # A not-ready position counts as "within reach" at or below this many skill gaps.
    potential_gap_threshold: int = 3

    log_level: str = "INFO"


settings = Settings()
