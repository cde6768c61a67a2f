"""Tool definitions offered to the model. Anthropic tool format (input_schema)."""

from __future__ import annotations

import copy
from typing import Any

from app.models.art import HEX_COLOR_PATTERN

RENDER_RECTANGLES = "render_rectangles"
CREATE_ART_PLAN = "create_art_plan"

# tool name -> result type
RESULT_TYPES = {
    RENDER_RECTANGLES: "rectangles",
    CREATE_ART_PLAN: "art_plan",
}


def _rect_params(count: tuple[int, int], min_size: tuple[int, int], max_size: tuple[int, int]) -> dict:
    return {
        "type": "object",
        "properties": {
            "color": {
                "type": "string",
                "pattern": HEX_COLOR_PATTERN,
                "description": "CSS hex color string (#rrggbb)",
            },
            "count": {
                "type": "integer",
                "minimum": count[0],
                "maximum": count[1],
                "description": "Number of rectangles to generate",
            },
            "min_size": {
                "type": "integer",
                "minimum": min_size[0],
                "maximum": min_size[1],
                "description": "Minimum rectangle side in pixels",
            },
            "max_size": {
                "type": "integer",
                "minimum": max_size[0],
                "maximum": max_size[1],
                "description": "Maximum rectangle side in pixels",
            },
        },
        "required": ["color", "count", "min_size", "max_size"],
        "additionalProperties": False,
    }


RECTANGLE_TOOL: dict[str, Any] = {
    "name": RENDER_RECTANGLES,
    "description": "Generate basic rectangles with specified color, count, and size parameters",
    "input_schema": _rect_params((500, 5000), (5, 30), (10, 50)),
}

ART_PLAN_TOOL: dict[str, Any] = {
    "name": CREATE_ART_PLAN,
    "description": (
        "Create artistic layouts with color zones and rectangle parameters "
        "for recognizable patterns, shapes, or artwork"
    ),
    "input_schema": {
        "type": "object",
        "properties": {
            "color_zones": {
                "type": "array",
                "items": {
                    "type": "object",
                    "properties": {
                        "x": {"type": "number", "minimum": 0, "maximum": 6000,
                              "description": "X coordinate in pixels"},
                        "y": {"type": "number", "minimum": 0, "maximum": 6000,
                              "description": "Y coordinate in pixels"},
                        "radius": {"type": "number", "minimum": 20, "maximum": 3000,
                                   "description": "Zone radius in pixels"},
                        "color": {"type": "string", "pattern": HEX_COLOR_PATTERN,
                                  "description": "CSS hex color for this zone"},
                    },
                    "required": ["x", "y", "radius", "color"],
                    "additionalProperties": False,
                },
                "description": "Circular color zones; the first zone containing a rectangle's center colors it",
            },
            "rectangles": _rect_params((1000, 5000), (10, 30), (20, 50)),
        },
        "required": ["color_zones", "rectangles"],
        "additionalProperties": False,
    },
}


def art_plan_tool_for_canvas(canvas_w: float, canvas_h: float) -> dict[str, Any]:
    """ART_PLAN_TOOL with coordinate and radius maxima bound to the canvas."""
    tool = copy.deepcopy(ART_PLAN_TOOL)
    w, h = round(canvas_w), round(canvas_h)
    limit = min(w, h)
    tool["description"] += (
        f". Canvas is {w}x{h} pixels. All coordinates and radii must be within these bounds."
    )
    props = tool["input_schema"]["properties"]["color_zones"]["items"]["properties"]
    props["x"].update(maximum=w, description=f"X coordinate in pixels (0 to {w})")
    props["y"].update(maximum=h, description=f"Y coordinate in pixels (0 to {h})")
    props["radius"].update(
        maximum=limit,
        description=f"Zone radius in pixels (max {limit} for this canvas)",
    )
    return tool


def tools_for_canvas(canvas_w: float, canvas_h: float) -> list[dict[str, Any]]:
    return [RECTANGLE_TOOL, art_plan_tool_for_canvas(canvas_w, canvas_h)]


def tools_for_mode(mode: str, canvas_w: float, canvas_h: float) -> list[dict[str, Any]]:
    """Tools offered for an interpretation mode; ``auto`` offers both."""
    if mode == "rectangles":
        return [RECTANGLE_TOOL]
    if mode == "art_plan":
        return [art_plan_tool_for_canvas(canvas_w, canvas_h)]
    return tools_for_canvas(canvas_w, canvas_h)
