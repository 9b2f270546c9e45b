from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

from .yaml_config import get_defaults

_defaults = get_defaults()

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


class Settings(BaseSettings):
    model_config = {"env_prefix": "DOMAIN_DEDUP_"}

    # Reject hostnames with characters outside [A-Za-z0-9._-]
    validate_special_chars: bool = _defaults.get("validate_special_chars", False)

    output_file: str = _defaults.get("output_file", "output.txt")
    progress_interval: int = _defaults.get("progress_interval", 100_000)

    # Replaces the bundled IANA list when set
    tld_file: str | None = _defaults.get("tld_file")

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default=_defaults.get("log_level", "INFO"), validate_default=True
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value: object) -> object:
        return value.upper() if isinstance(value, str) else value


settings = Settings()
