import json
from typing import Annotated, Any

from pydantic import field_validator
from pydantic_settings import BaseSettings, NoDecode

__version__ = "1.0.0"


class Settings(BaseSettings):
    gemini_api_key: str = ""
    gemini_model: str = "gemini-2.5-flash"
    max_upload_size_mb: int = 5
    max_jd_length: int = 10000
    cors_origins: Annotated[list[str], NoDecode] = [
        "http://localhost:5173",
        "http://localhost:3000",
    ]
    debug: bool = False
    log_level: str = "INFO"

    # Rate limiting (slowapi)
    rate_limit: str = "10/minute"
    rate_limit_enabled: bool = True

    # Resume field normalization: Gemini when a key is set, else rule-based
    llm_normalization: bool = True

    # Scoring rubric overrides
    min_jd_length: int = 50
    experienced_min_years: int = 2
    fresher_phrases: Annotated[list[str], NoDecode] = []  # empty -> built-in phrase list

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}

    @field_validator("cors_origins", "fresher_phrases", mode="before")
    @classmethod
    def parse_list(cls, value: Any) -> Any:
        """Accept a comma-separated string or a JSON list."""
        if not isinstance(value, str):
            return value
        raw = value.strip()
        if raw.startswith("["):
            return json.loads(raw)
        return [item.strip() for item in raw.split(",") if item.strip()]


settings = Settings()
