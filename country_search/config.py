import json

from pydantic_settings import BaseSettings
from pydantic import field_validator
from pathlib import Path


class Settings(BaseSettings):
    countries_url: str = (
        "https://gist.githubusercontent.com/peymano-wmt/32dcb892b06648910ddd40406e37fdab"
        "/raw/db25946fd77c5873b0303b858e861ce724e0dcd0/countries.json"
    )
    http_timeout_seconds: float = 15.0
    cors_origins: list[str] = []
    log_level: str = "INFO"

    @field_validator("cors_origins", mode="before")
    @classmethod
    def parse_cors_origins(cls, v):
        if isinstance(v, str):
            # Accept JSON array or comma-separated string
            v = v.strip()
            if v.startswith("["):
                return json.loads(v)
            return [s.strip() for s in v.split(",") if s.strip()]
        return v

    model_config = {
        "env_file": str(Path(__file__).resolve().parent.parent / ".env"),
        "env_file_encoding": "utf-8",
    }


settings = Settings()
