"""Process wiring: logging setup and the canvas factory."""

from __future__ import annotations

import logging

from sigil.canvas import SignatureCanvas
from sigil.config import Settings, settings


def configure_logging(config: Settings | None = None) -> None:
    config = config or settings
    logging.basicConfig(
        level=getattr(logging, config.log_level, logging.INFO),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )


def create_canvas(config: Settings | None = None, **hooks) -> SignatureCanvas:
    """Build a mounted SignatureCanvas sized from settings."""
    config = config or settings
    canvas = SignatureCanvas(config=config, **hooks)
    canvas.mount(config.canvas_width, config.canvas_height, config.device_pixel_ratio)
    return canvas
