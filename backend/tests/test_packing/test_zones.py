"""Tests for zone membership and per-rectangle coloring."""

import pytest
from pydantic import TypeAdapter, ValidationError

from app.models.art import CircleZone, GenerationConfig, GenerationRequest, RectZone, Zone
from app.packing.geometry import Rectangle
from app.packing.zones import color_for_rect, colorize, point_in_zone

RED = "#ff0000"
BLUE = "#0000ff"
DEFAULT = "#cccccc"


def test_circle_membership_is_boundary_inclusive():
    zone = CircleZone(x=50, y=50, radius=10, color=RED)
    assert point_in_zone(50, 50, zone)
    assert point_in_zone(60, 50, zone)
    assert point_in_zone(56, 58, zone)
    assert not point_in_zone(58, 58, zone)


def test_rect_membership_is_boundary_inclusive():
    zone = RectZone(x=10, y=20, width=30, height=40, color=RED)
    assert point_in_zone(10, 20, zone)
    assert point_in_zone(40, 60, zone)
    assert not point_in_zone(41, 30, zone)
    assert not point_in_zone(20, 19.5, zone)


def test_color_uses_rect_center():
    zone = CircleZone(x=0, y=0, radius=10, color=RED)
    # Top-left corner is inside the circle, but the center (15, 15) is not.
    assert color_for_rect(Rectangle(0, 0, 30, 30), [zone], DEFAULT) == DEFAULT
    assert color_for_rect(Rectangle(0, 0, 10, 10), [zone], DEFAULT) == RED


def test_first_matching_zone_wins():
    zones = [
        CircleZone(x=50, y=50, radius=40, color=RED),
        RectZone(x=0, y=0, width=100, height=100, color=BLUE),
    ]
    assert color_for_rect(Rectangle(45, 45, 10, 10), zones, DEFAULT) == RED
    assert color_for_rect(Rectangle(0, 0, 6, 6), zones, DEFAULT) == BLUE
    assert color_for_rect(Rectangle(200, 200, 6, 6), zones, DEFAULT) == DEFAULT


def test_colorize_keeps_geometry_and_order():
    rects = [Rectangle(0, 0, 4, 4), Rectangle(90, 90, 4, 4)]
    zones = [CircleZone(x=2, y=2, radius=5, color=RED)]
    placed = colorize(rects, zones, DEFAULT)
    assert [(p.x, p.y, p.w, p.h) for p in placed] == [(0, 0, 4, 4), (90, 90, 4, 4)]
    assert [p.color for p in placed] == [RED, DEFAULT]


def test_colorize_without_zones_uses_default():
    placed = colorize([Rectangle(1, 1, 2, 2)], [], BLUE)
    assert placed[0].color == BLUE


# ---------------------------------------------------------------------------
# Zone parsing
# ---------------------------------------------------------------------------

ZONES = TypeAdapter(list[Zone])


def test_zone_shape_selects_model():
    circle, rect = ZONES.validate_python([
        {"shape": "circle", "x": 1, "y": 2, "radius": 3, "color": RED},
        {"shape": "rect", "x": 1, "y": 2, "width": 3, "height": 4, "color": BLUE},
    ])
    assert isinstance(circle, CircleZone)
    assert isinstance(rect, RectZone)


def test_zone_shape_defaults_from_fields():
    circle, rect = ZONES.validate_json(
        '[{"x": 1, "y": 2, "radius": 3, "color": "#ff0000"},'
        ' {"x": 1, "y": 2, "width": 3, "height": 4, "color": "#0000ff"}]'
    )
    assert isinstance(circle, CircleZone) and circle.shape == "circle"
    assert isinstance(rect, RectZone) and rect.shape == "rect"


@pytest.mark.parametrize(
    "raw",
    [
        {"shape": "triangle", "x": 1, "y": 2, "radius": 3, "color": RED},
        # Tagged as a circle, so rect fields do not rescue it.
        {"shape": "circle", "x": 1, "y": 2, "width": 3, "height": 4, "color": RED},
        {"x": 1, "y": 2, "color": RED},
        "not a zone",
    ],
)
def test_invalid_zones_are_rejected(raw):
    with pytest.raises(ValidationError):
        ZONES.validate_python([raw])


def test_zone_instances_pass_through():
    zones = (CircleZone(x=5, y=5, radius=2, color=RED), RectZone(x=0, y=0, width=4, height=4, color=BLUE))
    request = GenerationRequest(canvas_width=10, canvas_height=10, config=GenerationConfig(), zones=zones)
    assert request.zones == zones
    dumped = request.model_dump()["zones"]
    assert [z["shape"] for z in dumped] == ["circle", "rect"]
    assert GenerationRequest.model_validate(request.model_dump()).zones == zones
