from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .tui.theme import ACCENT, DIM, TITLE_BG, TITLE_FG


class Settings(BaseSettings):
    """Configuration for the résumé navigator.

    Values are loaded from environment variables and `.env`.

    Notes:
    - The content tree is fixed; only logging and colours are configurable.
    - Logs go to a file because the navigator owns the whole terminal.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Logging (diagnostic; relative dirs resolve against the working directory)
    CV_NAV_LOG_DIR: Path = Field(default=Path("_logs"))
    CV_NAV_LOG_LEVEL: str = Field(default="INFO")
    # Timed rotation retention count (days). Old log files are auto-deleted.
    CV_NAV_LOG_BACKUP_COUNT: int = Field(default=7)

    # Colours (rich colour names or hex)
    CV_NAV_ACCENT: str = Field(default=ACCENT)
    CV_NAV_TITLE_FG: str = Field(default=TITLE_FG)
    CV_NAV_TITLE_BG: str = Field(default=TITLE_BG)
    CV_NAV_DIM: str = Field(default=DIM)

    # Geometry used until the terminal reports its size
    CV_NAV_DEFAULT_WIDTH: int = Field(default=80)
    CV_NAV_DEFAULT_HEIGHT: int = Field(default=24)


def load_settings() -> Settings:
    s = Settings()
    if s.CV_NAV_DEFAULT_WIDTH < 1:
        s.CV_NAV_DEFAULT_WIDTH = 80
    if s.CV_NAV_DEFAULT_HEIGHT < 1:
        s.CV_NAV_DEFAULT_HEIGHT = 24
    return s
