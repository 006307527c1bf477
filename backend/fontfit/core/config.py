from functools import lru_cache
from pathlib import Path
from typing import Literal, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field, AliasChoices
from dotenv import find_dotenv, load_dotenv


class Settings(BaseSettings):
    """Settings loaded from environment variables.

    Uses a local .env file in development for convenience.
    """

    log_level: Literal["debug", "info", "warning", "error", "critical"] = "info"

    font_path: Optional[Path] = Field(
        default=None,
        validation_alias=AliasChoices("FONT_PATH", "FONTFIT_FONT_PATH"),
        description="TrueType/OpenType font used for measurement. Pillow's default font when unset.",
    )
    max_font_size: float = Field(
        default=100.0,
        gt=0,
        validation_alias=AliasChoices("MAX_FONT_SIZE", "FONTFIT_MAX_FONT_SIZE"),
        description="Upper bound of the font size search",
    )
    min_font_scale: float = Field(
        default=0.1,
        gt=0,
        le=1,
        validation_alias=AliasChoices("MIN_FONT_SCALE", "FONTFIT_MIN_FONT_SCALE"),
        description="Lower bound of the search as a fraction of max_font_size",
    )
    line_spacing_multiplier: float = Field(
        default=0.0,
        ge=0,
        validation_alias=AliasChoices("LINE_SPACING_MULTIPLIER", "FONTFIT_LINE_SPACING_MULTIPLIER"),
        description="Extra space between wrapped lines as a fraction of the line height",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Load fit defaults once per process.

    Reads LOG_LEVEL, FONT_PATH, MAX_FONT_SIZE, MIN_FONT_SCALE and
    LINE_SPACING_MULTIPLIER (each also accepted with a FONTFIT_ prefix) from the
    environment, then from backend/.env of a source checkout, then from the
    nearest .env above the working directory. Earlier sources win.
    """
    checkout_env = Path(__file__).resolve().parents[2] / ".env"
    if checkout_env.exists():
        load_dotenv(checkout_env, override=False)

    cwd_env = find_dotenv(usecwd=True)
    if cwd_env:
        load_dotenv(cwd_env, override=False)

    return Settings()
