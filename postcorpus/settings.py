import json
from functools import cache
from typing import Annotated, Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

from postcorpus.constants import DEFAULT_CORPUS_EXTENSIONS, DEFAULT_CORPUS_PATH

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    corpus_path: str = Field(
        default=DEFAULT_CORPUS_PATH,
        alias="CORPUS_PATH",
        description="Directory holding the YYYY-MM-DD-slug.md posts",
    )

    # Comma-separated ("*.md,*.markdown") or JSON list
    corpus_extensions: Annotated[list[str], NoDecode] = Field(
        default_factory=lambda: list(DEFAULT_CORPUS_EXTENSIONS),
        alias="CORPUS_EXTENSIONS",
    )

    @field_validator("corpus_extensions", mode="before")
    @classmethod
    def parse_extensions(cls, v: str | list[str] | None) -> list[str]:
        if v is None:
            return list(DEFAULT_CORPUS_EXTENSIONS)
        if isinstance(v, list):
            return v
        if isinstance(v, str):
            if not v.strip():
                return list(DEFAULT_CORPUS_EXTENSIONS)
            if v.lstrip().startswith("["):
                return json.loads(v)
            return [part.strip() for part in v.split(",") if part.strip()]
        return list(DEFAULT_CORPUS_EXTENSIONS)

    load_workers: int = Field(
        default=1,
        ge=1,
        alias="LOAD_WORKERS",
        description="Thread-pool size for parsing posts (1 = sequential)",
    )

    log_level: LogLevel = Field(
        default="WARNING",
        alias="LOG_LEVEL",
        description="Root log level for the CLI",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        return v.upper() if isinstance(v, str) else v


@cache
def get_settings() -> Settings:
    return Settings()
