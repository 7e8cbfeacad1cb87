"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    questbanner_env: str = "development"
    questbanner_log_level: str = "info"

    # Outline font used for every glyph path; relative paths resolve against cwd
    questbanner_font_path: str = "assets/fonts/BebasNeue-Regular.ttf"

    # Canvas inset shared by the title, day counter and pill badges
    questbanner_padding: int = 20

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
