"""SignatureCanvas — the host-facing object behind one constellation view.

Owns the current options, the installed graph, a RenderSession and the
animation loop. Hosts feed it input events and read frames and exports
back; everything else (buttons, toasts, file saving) stays outside.
"""

from __future__ import annotations

import logging
from typing import Any, Callable

from PIL import Image

from sigil.config import Settings, settings
from sigil.engine.assembly import TwinkleSource, platform_twinkle
from sigil.engine.graph import SignatureGraph
from sigil.engine.pipeline import create_generator
from sigil.engine.registry import PatternStyle
from sigil.export import raster, vector
from sigil.export.raster import ClipboardWriter
from sigil.models.options import SignatureOptions
from sigil.render.loop import AnimationLoop, Clock, Debouncer, monotonic_ms
from sigil.render.renderer import Renderer
from sigil.render.scene import FrameStyle, Stamp
from sigil.render.session import RenderSession
from sigil.render.theme import Theme, get_palette

logger = logging.getLogger(__name__)


class SignatureCanvas:
    def __init__(
        self,
        config: Settings | None = None,
        on_key_press: Callable[[], Any] | None = None,
        haptics: Callable[[], Any] | None = None,
        frame_sink: Callable[[Image.Image], Any] | None = None,
        clipboard_writer: ClipboardWriter | None = None,
        clock: Clock = monotonic_ms,
        twinkle: TwinkleSource = platform_twinkle,
    ) -> None:
        self.config = config or settings
        self.on_key_press = on_key_press
        self.frame_sink = frame_sink
        self.clipboard_writer = clipboard_writer
        self.clock = clock

        self.options = SignatureOptions(
            width=self.config.canvas_width,
            height=self.config.canvas_height,
            device_pixel_ratio=self.config.device_pixel_ratio,
        )
        self.generator = create_generator(twinkle=twinkle)
        self.session = RenderSession(haptics=haptics)
        self.renderer = Renderer(self.options.frame_style, self.config.font_path)
        self.loop = AnimationLoop(self.draw, self.config.frame_interval_ms, clock)
        self._resize = Debouncer(self._apply_resize, self.config.resize_debounce_ms)
        self.mounted = False

    # -- lifecycle --

    def mount(self, width: float, height: float, dpr: float = 1.0) -> None:
        self._update(width=width, height=height, device_pixel_ratio=dpr)
        self.mounted = True
        self.regenerate()

    def unmount(self) -> None:
        self.stop()
        self._resize.cancel()
        self.mounted = False
        self.renderer.surface = None
        self.session.grid_cache = None

    def start(self) -> None:
        """Begin the animation loop on the running event loop."""
        if not self.mounted:
            return
        self.loop.start()

    def stop(self) -> None:
        self.loop.stop()

    # -- state --

    @property
    def graph(self) -> SignatureGraph:
        return self.session.graph

    @property
    def theme(self) -> Theme:
        return self.session.theme

    def _update(self, **changes: Any) -> None:
        # Round-trip through the model so every change is validated
        self.options = SignatureOptions(**{**self.options.model_dump(), **changes})

    def regenerate(self) -> SignatureGraph | None:
        if not self.mounted:
            return None
        now = self.clock()
        opts = self.options
        graph = self.generator.run(opts.name, opts.pattern, opts.width, opts.height, now)
        self.session.install_graph(graph, now)
        logger.info(
            "Regenerated %r (%s): %d points, %d edges",
            opts.name, opts.pattern.value, len(graph.points), len(graph.edges),
        )
        return graph

    def set_name(self, name: str) -> None:
        grew = len(name) > len(self.options.name)
        self._update(name=name)
        if grew and self.on_key_press is not None:
            self.on_key_press()
        self.regenerate()

    def set_pattern(self, pattern: PatternStyle | str) -> None:
        self._update(pattern=pattern)
        self.regenerate()

    def set_theme(self, theme: Theme | str) -> None:
        self._update(theme=theme)
        self.session.set_theme(self.options.theme, self.clock())

    def set_frame_style(self, frame_style: FrameStyle | str) -> None:
        self._update(frame_style=frame_style)
        self.renderer.frame_style = self.options.frame_style

    def resize(self, width: float, height: float, dpr: float | None = None) -> None:
        """Debounced: only the last size of a burst is applied."""
        self._resize(width, height, dpr)

    def _apply_resize(self, width: float, height: float, dpr: float | None) -> None:
        self._update(
            width=width,
            height=height,
            device_pixel_ratio=self.options.device_pixel_ratio if dpr is None else dpr,
        )
        self.session.grid_cache = None
        self.regenerate()

    # -- pointer / touch --

    def pointer_move(self, x: float, y: float) -> int | None:
        return self.session.pointer_move(x, y)

    def pointer_leave(self) -> None:
        self.session.pointer_leave()

    def touch_start(self, x: float, y: float) -> int | None:
        return self.session.touch(x, y)

    def touch_move(self, x: float, y: float) -> int | None:
        return self.session.touch(x, y)

    def touch_end(self) -> None:
        self.session.pointer_leave()

    # -- stamp --

    def add_stamp(self) -> Stamp | None:
        if not self.options.name.strip():
            return None
        return self.session.add_stamp(self.options.name)

    def clear_stamp(self) -> None:
        self.session.clear_stamp()

    # -- drawing --

    def draw(self, t: float | None = None) -> Image.Image | None:
        if not self.mounted:
            return None
        t = self.clock() if t is None else t
        opts = self.options
        surface = self.renderer.draw(self.session, t, opts.width, opts.height, opts.device_pixel_ratio)
        if self.frame_sink is not None:
            self.frame_sink(surface.image)
        return surface.image

    # -- exports --

    async def export_svg(self) -> str:
        if not self.mounted:
            return ""
        opts = self.options
        return vector.export_svg(self.graph, get_palette(opts.theme), opts.frame_style, opts.width, opts.height)

    async def export_jpeg(self, high_res: bool = False) -> bytes:
        if not self.mounted:
            return b""
        opts = self.options
        return raster.export_raster(
            self.graph,
            get_palette(opts.theme),
            opts.frame_style,
            opts.width,
            opts.height,
            high_res=high_res,
            fmt="jpeg",
            quality=self.config.jpeg_quality,
        )

    async def copy_to_clipboard(self, high_res: bool = False) -> bool:
        if not self.mounted or self.clipboard_writer is None:
            return False
        opts = self.options
        return await raster.copy_to_clipboard(
            self.graph,
            get_palette(opts.theme),
            self.clipboard_writer,
            opts.frame_style,
            opts.width,
            opts.height,
            high_res=high_res,
        )
