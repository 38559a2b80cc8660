"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    shapecraft_env: str = "development"
    shapecraft_log_level: str = "debug"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Remote design documents
    figma_token: str = ""
    figma_api_base: str = "https://api.figma.com/v1"
    figma_timeout: float = 30.0
    output_dir: str = "output"

    # Fonts the host can load for text shapes, as "Family Style" (last word is the style)
    default_font_family: str = "Inter"
    default_font_style: str = "Regular"
    available_fonts: list[str] = ["Inter Regular", "Inter Bold", "Roboto Regular"]

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
