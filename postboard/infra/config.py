from typing import List
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
import json


class Settings(BaseSettings):
    # Database
    database_url: str = Field(default="sqlite://db.sqlite3")
    generate_schemas: bool = Field(default=True)

    # Environment
    environment: str = Field(default="development")

    # HTTP
    api_prefix: str = Field(default="/api")

    # CORS
    cors_origins: List[str] = Field(default=["http://localhost:5173"])

    @field_validator("cors_origins", mode="before")
    @classmethod
    def parse_cors_origins(cls, v):
        if isinstance(v, str):
            return json.loads(v)
        return v

    @field_validator("api_prefix")
    @classmethod
    def validate_api_prefix(cls, v):
        if v and not v.startswith("/"):
            raise ValueError("API_PREFIX must start with '/'")
        return v.rstrip("/")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"  # Ignore extra environment variables
    )
