"""Raster export: settled scene -> SVG -> cairosvg -> Pillow encode.

The scene is laid out once in logical units and rasterized at 1x or 3x,
so the high-resolution export is a true re-render, not an upscale.
"""

from __future__ import annotations

import base64
import inspect
import io
import logging
from typing import Awaitable, Callable, Union

import cairosvg
from PIL import Image

from sigil.engine.graph import SignatureGraph
from sigil.render.scene import (
    LIVE_FRAME,
    FrameStyle,
    draw_background,
    draw_frame,
    draw_grid,
    edge_strokes,
    paint_graph,
    point_sprites,
)
from sigil.render.surface import SvgSurface
from sigil.render.theme import Palette

logger = logging.getLogger(__name__)

HIGH_RES_SCALE = 3
DEFAULT_JPEG_QUALITY = 95

# Receives PNG bytes and their MIME type; may be sync or async.
ClipboardWriter = Callable[[bytes, str], Union[Awaitable[object], object]]


def settled_scene_svg(
    graph: SignatureGraph,
    palette: Palette,
    frame_style: FrameStyle | str = FrameStyle.NONE,
    width: float | None = None,
    height: float | None = None,
) -> str:
    """Full-canvas document: black background, fresh grid, frame, edges, glowing dots."""
    width = graph.width if width is None else width
    height = graph.height if height is None else height
    surface = SvgSurface(width, height)
    draw_background(surface)
    draw_grid(surface, palette, width, height)
    draw_frame(surface, frame_style, palette.line, width, height, LIVE_FRAME)
    paint_graph(
        surface,
        edge_strokes(graph, palette.line),
        point_sprites(graph, palette.dot, palette.dot_glow),
    )
    return surface.to_svg()


def rasterize(svg: str, width: float, height: float, scale: float = 1.0) -> Image.Image:
    """Render SVG markup to an opaque RGB image of (width×scale, height×scale) pixels."""
    try:
        png_bytes = cairosvg.svg2png(
            bytestring=svg.encode("utf-8"),
            output_width=max(1, round(width * scale)),
            output_height=max(1, round(height * scale)),
        )
    except Exception as e:
        logger.warning("Failed to render SVG to PNG: %s", e)
        raise
    image = Image.open(io.BytesIO(png_bytes)).convert("RGBA")
    opaque = Image.new("RGB", image.size, (0, 0, 0))
    opaque.paste(image, mask=image.getchannel("A"))
    return opaque


def render_settled_image(
    graph: SignatureGraph,
    palette: Palette,
    frame_style: FrameStyle | str = FrameStyle.NONE,
    width: float | None = None,
    height: float | None = None,
    high_res: bool = False,
) -> Image.Image:
    width = graph.width if width is None else width
    height = graph.height if height is None else height
    scale = HIGH_RES_SCALE if high_res else 1
    return rasterize(settled_scene_svg(graph, palette, frame_style, width, height), width, height, scale)


def encode_image(image: Image.Image, fmt: str = "jpeg", quality: int = DEFAULT_JPEG_QUALITY) -> bytes:
    buf = io.BytesIO()
    if fmt.lower() in ("jpeg", "jpg"):
        image.save(buf, format="JPEG", quality=quality)
    else:
        image.save(buf, format="PNG", optimize=True)
    return buf.getvalue()


def export_raster(
    graph: SignatureGraph,
    palette: Palette,
    frame_style: FrameStyle | str = FrameStyle.NONE,
    width: float | None = None,
    height: float | None = None,
    high_res: bool = False,
    fmt: str = "jpeg",
    quality: int = DEFAULT_JPEG_QUALITY,
) -> bytes:
    """Compressed image bytes of the settled constellation (JPEG by default)."""
    image = render_settled_image(graph, palette, frame_style, width, height, high_res)
    data = encode_image(image, fmt, quality)
    logger.info("Raster export: %dx%d %s, %d bytes", image.width, image.height, fmt, len(data))
    return data


def to_data_url(data: bytes, mime: str = "image/jpeg") -> str:
    return f"data:{mime};base64,{base64.b64encode(data).decode('ascii')}"


async def copy_to_clipboard(
    graph: SignatureGraph,
    palette: Palette,
    writer: ClipboardWriter,
    frame_style: FrameStyle | str = FrameStyle.NONE,
    width: float | None = None,
    height: float | None = None,
    high_res: bool = False,
) -> bool:
    """Same pipeline as export_raster, lossless PNG, handed to ``writer``.

    Returns False (never raises) when rendering or the write fails; a
    writer returning False also counts as failure. No retry.
    """
    try:
        png = export_raster(graph, palette, frame_style, width, height, high_res, fmt="png")
        result = writer(png, "image/png")
        if inspect.isawaitable(result):
            result = await result
    except Exception as e:
        logger.warning("Clipboard write failed: %s", e)
        return False
    return result is not False
