"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    sigil_env: str = "development"
    sigil_log_level: str = ""  # empty = debug in development, info elsewhere

    # Logical canvas used when the host has not mounted a surface yet
    canvas_width: float = 800.0
    canvas_height: float = 450.0
    device_pixel_ratio: float = 1.0

    # Animation loop
    frame_interval_ms: float = 16.0  # ~60 fps
    resize_debounce_ms: float = 100.0

    # Export
    jpeg_quality: int = 95
    font_path: str = ""  # empty = Pillow's bundled default font

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    @property
    def log_level(self) -> str:
        if self.sigil_log_level:
            return self.sigil_log_level.upper()
        return "DEBUG" if self.sigil_env == "development" else "INFO"


settings = Settings()
