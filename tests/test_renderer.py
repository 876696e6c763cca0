import io
from breakout_core.renderer import BufferedRenderer, DebugRenderer, NullRenderer
from conftest import hit_brick


def test_debug_renderer_output(session):
    out = io.StringIO()
    DebugRenderer(output=out).render_snapshot(session.snapshot())
    text = out.getvalue()
    assert "=== Frame 0 ===" in text
    assert "paddle @ (350.0, 550.0) 100x20" in text
    assert "resting" in text
    assert "bricks: 80" in text
    assert "transition=idle" in text


def test_debug_renderer_verbose_lists_bricks(session):
    out = io.StringIO()
    DebugRenderer(output=out, verbose=True).render_snapshot(session.snapshot())
    assert out.getvalue().count("brick [") == 80


def test_buffered_renderer_skips_destroyed_bricks(session):
    renderer = BufferedRenderer()
    renderer.render_snapshot(session.snapshot())
    hit_brick(session, session.grid.cells[7][0], 0)
    renderer.render_snapshot(session.snapshot())

    assert [f["frame"] for f in renderer.frames] == [0, 1]
    first, second = renderer.frames
    assert len(first["bricks"]) == 80
    assert len(second["bricks"]) == 79
    assert (7, 0) not in second["bricks"]
    assert second["overlay"]["score"] == 10
    assert second["overlay"]["phase"] == "idle"
    assert second["balls"][0]["moving"]

    renderer.clear()
    assert renderer.frames == []


def test_null_renderer_accepts_frames(session):
    NullRenderer().render_snapshot(session.snapshot())
