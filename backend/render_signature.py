"""
Render a name's constellation to files.

Usage:
  python render_signature.py "Ada Lovelace"                      # sigil-ada-lovelace.svg
  python render_signature.py "Ada" -p spiral -t amber -f jpeg    # JPEG at 1x
  python render_signature.py "Ada" -f png --high-res             # 3x PNG
  python render_signature.py "Ada" -f gif -o out/                # animated build-up
"""

import argparse
import io
import logging
import os
import sys

from dotenv import load_dotenv

load_dotenv()

from sigil.config import settings  # noqa: E402
from sigil.engine.pipeline import generate_signature  # noqa: E402
from sigil.export import export_filename, export_raster, export_svg  # noqa: E402
from sigil.main import configure_logging  # noqa: E402
from sigil.models.options import SignatureOptions  # noqa: E402
from sigil.render.renderer import render_animation_frames  # noqa: E402
from sigil.render.theme import get_palette  # noqa: E402

logger = logging.getLogger("render_signature")

FORMATS = ("svg", "jpeg", "png", "gif")
EXTENSIONS = {"svg": "svg", "jpeg": "jpg", "png": "png", "gif": "gif"}


def render(opts, fmt, high_res=False, duration_ms=2000.0, fps=30.0):
    """Return the encoded file body for one format."""
    graph = generate_signature(opts.name, opts.pattern, opts.width, opts.height)
    palette = get_palette(opts.theme)

    if fmt == "svg":
        return export_svg(graph, palette, opts.frame_style, opts.width, opts.height).encode("utf-8")
    if fmt in ("jpeg", "png"):
        return export_raster(
            graph, palette, opts.frame_style, opts.width, opts.height,
            high_res=high_res, fmt=fmt, quality=settings.jpeg_quality,
        )

    frames = render_animation_frames(
        graph, opts.theme, opts.frame_style, duration_ms=duration_ms, fps=fps,
        dpr=opts.device_pixel_ratio, font_path=settings.font_path,
    )
    buf = io.BytesIO()
    frames[0].save(
        buf,
        format="GIF",
        save_all=True,
        append_images=frames[1:],
        duration=round(1000 / fps),
        loop=0,
    )
    return buf.getvalue()


def main():
    parser = argparse.ArgumentParser(description="Render a name as a constellation")
    parser.add_argument("name", help="Name to render (only A-Z letters shape the pattern)")
    parser.add_argument("-p", "--pattern", default="classic", help="classic, orbital, spiral, geometric, wave, scatter")
    parser.add_argument("-t", "--theme", default="mono", help="mono, amber, blue, emerald, violet, rose, cyan")
    parser.add_argument("--frame", default="none", help="none, thin, double, corners")
    parser.add_argument("-f", "--format", default="svg", choices=FORMATS)
    parser.add_argument("-o", "--output", help="Output file or folder (default: current folder)")
    parser.add_argument("--width", type=float, default=settings.canvas_width)
    parser.add_argument("--height", type=float, default=settings.canvas_height)
    parser.add_argument("--high-res", action="store_true", help="Rasterize at 3x")
    parser.add_argument("--duration", type=float, default=2000.0, help="GIF length in ms")
    parser.add_argument("--fps", type=float, default=30.0, help="GIF frame rate")
    args = parser.parse_args()

    configure_logging()

    if not args.name.strip():
        print("Error: name is empty")
        sys.exit(1)

    opts = SignatureOptions(
        name=args.name,
        theme=args.theme,
        frame_style=args.frame,
        pattern=args.pattern,
        width=args.width,
        height=args.height,
    )

    filename = export_filename(opts.name, EXTENSIONS[args.format])
    out_path = args.output or filename
    if os.path.isdir(out_path):
        out_path = os.path.join(out_path, filename)

    body = render(opts, args.format, args.high_res, args.duration, args.fps)
    with open(out_path, "wb") as f:
        f.write(body)
    print(f"Saved: {out_path} ({len(body)} bytes)")


if __name__ == "__main__":
    main()
