"""Drawing surfaces: one small vocabulary, two backends.

PillowSurface rasterizes (live frames, cached grid); SvgSurface collects
markup (vector export, and the document cairosvg rasterizes for raster
export). Scene code draws in logical units and never knows which backend
it is talking to.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Protocol
from xml.sax.saxutils import escape

from PIL import Image, ImageDraw, ImageFont

from sigil.render.theme import Rgba

# text anchor name -> Pillow anchor (horizontal + alphabetic baseline)
_PIL_ANCHORS = {"left": "ls", "center": "ms", "right": "rs"}
_SVG_ANCHORS = {"left": "start", "center": "middle", "right": "end"}


class Surface(Protocol):
    width: float
    height: float

    def fill_rect(self, x: float, y: float, w: float, h: float, color: Rgba) -> None: ...

    def stroke_line(self, x1: float, y1: float, x2: float, y2: float,
                    color: Rgba, width: float = 1.0) -> None: ...

    def stroke_polyline(self, points: list[tuple[float, float]], color: Rgba,
                        width: float = 1.0, closed: bool = False) -> None: ...

    def fill_circle(self, cx: float, cy: float, r: float, color: Rgba) -> None: ...

    def text(self, x: float, y: float, content: str, color: Rgba, size: float,
             anchor: str = "left", bold: bool = False) -> None: ...


@lru_cache(maxsize=64)
def load_font(size: int, font_path: str = "") -> ImageFont.FreeTypeFont | ImageFont.ImageFont:
    if font_path:
        return ImageFont.truetype(font_path, size)
    return ImageFont.load_default(size=size)


class PillowSurface:
    """Raster surface of ``width``×``height`` logical pixels at ``scale`` device pixels each."""

    def __init__(self, width: float, height: float, scale: float = 1.0,
                 font_path: str = "") -> None:
        self.width = width
        self.height = height
        self.scale = scale
        self.font_path = font_path
        self.pixel_size = (max(1, int(width * scale)), max(1, int(height * scale)))
        self.image = Image.new("RGB", self.pixel_size, (0, 0, 0))
        # RGBA draw mode on an RGB image alpha-blends every primitive
        self._draw = ImageDraw.Draw(self.image, "RGBA")

    def _px(self, v: float) -> float:
        return v * self.scale

    def _stroke_px(self, width: float) -> int:
        return max(1, round(width * self.scale))

    def fill_rect(self, x, y, w, h, color):
        s = self.scale
        self._draw.rectangle([x * s, y * s, (x + w) * s - 1, (y + h) * s - 1], fill=color.to_pil())

    def stroke_line(self, x1, y1, x2, y2, color, width=1.0):
        s = self.scale
        self._draw.line([(x1 * s, y1 * s), (x2 * s, y2 * s)], fill=color.to_pil(),
                        width=self._stroke_px(width))

    def stroke_polyline(self, points, color, width=1.0, closed=False):
        if len(points) < 2:
            return
        s = self.scale
        coords = [(x * s, y * s) for x, y in points]
        if closed:
            coords.append(coords[0])
        self._draw.line(coords, fill=color.to_pil(), width=self._stroke_px(width), joint="curve")

    def fill_circle(self, cx, cy, r, color):
        s = self.scale
        r = max(r, 0.1)
        self._draw.ellipse([(cx - r) * s, (cy - r) * s, (cx + r) * s, (cy + r) * s],
                           fill=color.to_pil())

    def text(self, x, y, content, color, size, anchor="left", bold=False):
        font = load_font(max(1, round(size * self.scale)), self.font_path)
        s = self.scale
        self._draw.text((x * s, y * s), content, fill=color.to_pil(), font=font,
                        anchor=_PIL_ANCHORS[anchor],
                        stroke_width=1 if bold and self.scale >= 2 else 0,
                        stroke_fill=color.to_pil())

    def blit(self, source: PillowSurface) -> None:
        """Copy another surface's pixels over this one (sizes must match)."""
        self.image.paste(source.image, (0, 0))


def _num(value: float) -> str:
    text = f"{value:.2f}".rstrip("0").rstrip(".")
    return "0" if text in ("", "-0") else text


def _paint(attr: str, color: Rgba) -> str:
    out = f'{attr}="{color.to_hex()}"'
    if color.a < 1:
        out += f' {attr}-opacity="{_num(color.a)}"'
    return out


class SvgSurface:
    """Collects SVG markup. ``origin`` is subtracted from every coordinate."""

    def __init__(self, width: float, height: float,
                 origin: tuple[float, float] = (0.0, 0.0)) -> None:
        self.width = width
        self.height = height
        self.origin = origin
        self.elements: list[str] = []

    def _x(self, x: float) -> str:
        return _num(x - self.origin[0])

    def _y(self, y: float) -> str:
        return _num(y - self.origin[1])

    def fill_rect(self, x, y, w, h, color):
        self.elements.append(
            f'<rect x="{self._x(x)}" y="{self._y(y)}" width="{_num(w)}" height="{_num(h)}" '
            f'{_paint("fill", color)}/>'
        )

    def stroke_line(self, x1, y1, x2, y2, color, width=1.0):
        stroke = f'stroke="{color.to_hex()}"'
        opacity = f' opacity="{_num(color.a)}"' if color.a < 1 else ""
        self.elements.append(
            f'<line x1="{self._x(x1)}" y1="{self._y(y1)}" x2="{self._x(x2)}" y2="{self._y(y2)}" '
            f'{stroke} stroke-width="{_num(width)}" stroke-linecap="round"{opacity}/>'
        )

    def stroke_polyline(self, points, color, width=1.0, closed=False):
        if len(points) < 2:
            return
        d = " ".join(
            f"{'M' if i == 0 else 'L'} {self._x(x)} {self._y(y)}" for i, (x, y) in enumerate(points)
        )
        if closed:
            d += " Z"
        opacity = f' opacity="{_num(color.a)}"' if color.a < 1 else ""
        self.elements.append(
            f'<path d="{d}" fill="none" stroke="{color.to_hex()}" '
            f'stroke-width="{_num(width)}"{opacity}/>'
        )

    def fill_circle(self, cx, cy, r, color):
        self.elements.append(
            f'<circle cx="{self._x(cx)}" cy="{self._y(cy)}" r="{_num(max(r, 0.1))}" '
            f'{_paint("fill", color)}/>'
        )

    def text(self, x, y, content, color, size, anchor="left", bold=False):
        weight = ' font-weight="bold"' if bold else ""
        self.elements.append(
            f'<text x="{self._x(x)}" y="{self._y(y)}" font-family="monospace" '
            f'font-size="{_num(size)}" text-anchor="{_SVG_ANCHORS[anchor]}"{weight} '
            f'{_paint("fill", color)}>{escape(content)}</text>'
        )

    def to_svg(self) -> str:
        w, h = _num(self.width), _num(self.height)
        return (
            f'<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 {w} {h}" '
            f'width="{w}" height="{h}">'
            + "".join(self.elements)
            + "</svg>"
        )
