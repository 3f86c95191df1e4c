"""Input options for one rendered signature."""

from __future__ import annotations

from pydantic import BaseModel, Field

from sigil.engine.registry import PatternStyle
from sigil.render.scene import FrameStyle
from sigil.render.theme import Theme


class SignatureOptions(BaseModel):
    name: str = ""
    theme: Theme = Theme.MONO
    frame_style: FrameStyle = FrameStyle.NONE
    pattern: PatternStyle = PatternStyle.CLASSIC
    width: float = Field(default=800.0, gt=0)
    height: float = Field(default=450.0, gt=0)
    device_pixel_ratio: float = Field(default=1.0, gt=0)
