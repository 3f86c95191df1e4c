"""Tests for the live per-frame renderer (pixels via Pillow)."""

from sigil.render.renderer import Renderer, physical_size, render_animation_frames
from sigil.render.scene import FrameStyle
from sigil.render.session import RenderSession
from sigil.render.theme import Theme, get_palette
from tests.conftest import make_graph


def _session(name="Grace Hopper", theme=Theme.MONO):
    session = RenderSession(theme=theme)
    session.install_graph(make_graph(name), 0.0)
    return session


def test_physical_size():
    assert physical_size(800, 450, 1) == (800, 450)
    assert physical_size(800, 450, 2) == (1600, 900)
    assert physical_size(0.2, 0.2, 1) == (1, 1)


def test_surface_tracks_device_pixel_ratio():
    renderer = Renderer()
    session = _session()
    assert renderer.draw(session, 5000.0, 800, 450).image.size == (800, 450)
    assert renderer.draw(session, 5016.0, 800, 450, dpr=2).image.size == (1600, 900)


def test_grid_cached_between_frames():
    renderer = Renderer()
    session = _session()
    renderer.draw(session, 100.0, 800, 450)
    cache = session.grid_cache
    renderer.draw(session, 116.0, 800, 450)
    assert session.grid_cache is cache


def test_grid_redrawn_while_transitioning():
    renderer = Renderer()
    session = _session()
    renderer.draw(session, 100.0, 800, 450)
    session.set_theme(Theme.ROSE, 100.0)
    renderer.draw(session, 116.0, 800, 450)
    first = session.grid_cache
    renderer.draw(session, 132.0, 800, 450)
    assert session.grid_cache is not first
    # Settled: cached again under the new theme
    renderer.draw(session, 1000.0, 800, 450)
    settled = session.grid_cache
    renderer.draw(session, 1016.0, 800, 450)
    assert session.grid_cache is settled
    assert settled.palette is get_palette(Theme.ROSE)


def test_grid_rebuilt_on_resize():
    renderer = Renderer()
    session = _session()
    renderer.draw(session, 100.0, 800, 450)
    renderer.draw(session, 116.0, 600, 400)
    assert session.grid_cache.pixel_size == (600, 400)


def test_points_are_drawn():
    renderer = Renderer()
    session = _session()
    image = renderer.draw(session, 10000.0, 800, 450).image
    for p in session.graph.points:
        assert max(image.getpixel((int(p.x), int(p.y)))) > 50


def test_empty_graph_draws_background_only():
    renderer = Renderer()
    session = _session("")
    session.add_stamp("ignored")
    image = renderer.draw(session, 1000.0, 800, 450).image
    # Between grid lines the background is plain black
    assert image.getpixel((410, 215)) == (0, 0, 0)


def test_frame_overlay():
    session = _session()
    plain = Renderer(FrameStyle.NONE).draw(session, 10000.0, 800, 450).image
    framed = Renderer(FrameStyle.THIN).draw(session, 10000.0, 800, 450).image
    assert plain.getpixel((4, 100)) == (0, 0, 0)
    assert framed.getpixel((4, 100)) != (0, 0, 0)


def test_stamp_drawn_bottom_right():
    renderer = Renderer()
    session = _session()
    before = renderer.draw(session, 10000.0, 800, 450).image.copy()
    session.add_stamp("Grace Hopper")
    after = renderer.draw(session, 10000.0, 800, 450).image
    region = (600, 380, 790, 420)
    assert before.crop(region).tobytes() != after.crop(region).tobytes()


def test_render_animation_frames():
    graph = make_graph("Grace")
    frames = render_animation_frames(graph, Theme.AMBER, duration_ms=200, fps=10)
    assert len(frames) == 3
    assert all(f.size == (800, 450) for f in frames)
    # The constellation builds up over time
    assert frames[0].tobytes() != frames[-1].tobytes()
