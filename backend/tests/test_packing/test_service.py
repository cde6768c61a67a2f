"""Tests for request building and the generate pipeline."""

from app.models.art import CircleZone, GenerationConfig, GenerationRequest
from app.packing import PackerConfig, generate_artwork
from app.packing.geometry import Rectangle, find_violations
from app.packing.service import build_request, status_line
from conftest import SIMPLE_RECTANGLES


def test_status_line():
    assert status_line(48, 50) == "Placed 48 / 50 rectangles"


def test_build_request_rectangles():
    req = build_request("rectangles", SIMPLE_RECTANGLES, 640, 480)
    assert (req.canvas_width, req.canvas_height) == (640, 480)
    assert req.config.color == "#0000ff"
    assert req.config.count == 800
    assert req.zones == ()


def test_build_request_art_plan(happy_face_plan):
    req = build_request("art_plan", happy_face_plan, 400, 400)
    assert req.config.count == 1200
    assert len(req.zones) == 3
    assert all(isinstance(z, CircleZone) for z in req.zones)


def test_generate_artwork_reports_counts():
    req = GenerationRequest(
        canvas_width=300,
        canvas_height=200,
        config=GenerationConfig(color="#336699", count=40, min_size=5, max_size=15),
    )
    art = generate_artwork(req, seed=3)
    assert art.placed == len(art.rectangles) == 40
    assert art.target == 40
    assert art.complete
    assert art.status == "Placed 40 / 40 rectangles"
    assert {r.color for r in art.rectangles} == {"#336699"}

    rects = [Rectangle(r.x, r.y, r.w, r.h) for r in art.rectangles]
    assert find_violations(rects, 300, 200, 2) == []


def test_generate_artwork_short_count_is_reported():
    req = GenerationRequest(
        canvas_width=30,
        canvas_height=30,
        config=GenerationConfig(count=5, min_size=20, max_size=20),
    )
    art = generate_artwork(req, seed=1, packer_config=PackerConfig(max_attempts_per_rect=10))
    assert art.placed == 1
    assert not art.complete
    assert art.attempts == 50
    assert art.status == "Placed 1 / 5 rectangles"


def test_generate_artwork_colors_by_zone():
    req = GenerationRequest(
        canvas_width=200,
        canvas_height=200,
        config=GenerationConfig(color="#ffffff", count=150, min_size=4, max_size=8),
        zones=(CircleZone(x=100, y=100, radius=60, color="#000000"),),
    )
    art = generate_artwork(req, seed=12)
    colors = {r.color for r in art.rectangles}
    assert colors == {"#ffffff", "#000000"}
    for r in art.rectangles:
        cx, cy = r.x + r.w / 2, r.y + r.h / 2
        inside = (cx - 100) ** 2 + (cy - 100) ** 2 <= 60 ** 2
        assert r.color == ("#000000" if inside else "#ffffff")


def test_same_seed_same_artwork():
    req = build_request("rectangles", SIMPLE_RECTANGLES, 320, 240)
    a = generate_artwork(req, seed=99, packer_config=PackerConfig(max_attempts_per_rect=5))
    b = generate_artwork(req, seed=99, packer_config=PackerConfig(max_attempts_per_rect=5))
    assert a.rectangles == b.rectangles
