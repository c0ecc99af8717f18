import json
from typing import Annotated, Any

from pydantic import field_validator
from pydantic_settings import BaseSettings, NoDecode


def _parse_cors_origins(raw: Any) -> Any:
    """Parse CORS_ORIGINS as comma-separated string or JSON list."""
    if not isinstance(raw, str):
        return raw
    raw = raw.strip()
    if raw.startswith("["):
        return json.loads(raw)
    return [o.strip() for o in raw.split(",") if o.strip()]


class Settings(BaseSettings):
    max_upload_size_mb: int = 10
    cors_origins: Annotated[list[str], NoDecode] = [
        "https://eliteresumes.in",
        "http://localhost:3000",
        "http://localhost:3001",
    ]
    debug: bool = False
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 8000

    # Gemini model variants, cheapest first; tried in order until one is available
    extraction_models: list[str] = [
        "gemini-2.0-flash-lite",
        "gemini-2.0-flash",
        "gemini-2.5-flash",
        "gemini-2.5-pro",
    ]
    extraction_max_output_tokens: int = 4000

    output_suffix: str = "_converted"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    @field_validator("cors_origins", mode="before")
    @classmethod
    def _split_cors_origins(cls, value: Any) -> Any:
        return _parse_cors_origins(value)


settings = Settings()
