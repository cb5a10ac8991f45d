"""Runtime settings for chord-shapes.

Values come from environment variables (``CHORD_SHAPES_*``) or a ``.env``
file in the working directory.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_DISPLAY_WINDOW = 5
DEFAULT_LIST_WINDOW = 4
DEFAULT_STRING_COUNT = 6

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class Settings(BaseSettings):
    """Display and instrument settings.

    ``display_window`` is the number of frets a diagram may span before it is
    re-based with a position label. The compact list mode uses
    ``list_window`` instead.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    display_window: int = Field(
        default=DEFAULT_DISPLAY_WINDOW, validation_alias="CHORD_SHAPES_DISPLAY_WINDOW"
    )
    list_window: int = Field(
        default=DEFAULT_LIST_WINDOW, validation_alias="CHORD_SHAPES_LIST_WINDOW"
    )
    string_count: int = Field(
        default=DEFAULT_STRING_COUNT, validation_alias="CHORD_SHAPES_STRING_COUNT"
    )
    log_level: str = Field(default="WARNING", validation_alias="CHORD_SHAPES_LOG_LEVEL")

    def model_post_init(self, __context: Any) -> None:
        # A window must hold at least one fret
        if self.display_window <= 0:
            self.display_window = DEFAULT_DISPLAY_WINDOW
        if self.list_window <= 0:
            self.list_window = DEFAULT_LIST_WINDOW
        if self.string_count <= 0:
            self.string_count = DEFAULT_STRING_COUNT
        self.log_level = self.log_level.upper()


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()


def configure_logging(settings: Settings | None = None) -> None:
    """Install a basic handler unless the application already has one."""
    s = settings or get_settings()
    if not logging.getLogger().handlers:
        logging.basicConfig(level=s.log_level, format=LOG_FORMAT)
