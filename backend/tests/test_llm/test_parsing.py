"""Tests for tool-call parsing, tool schemas and prompt templates."""

import asyncio
import json

import pytest

from app.llm.client import interpret_prompt, is_llm_configured
from app.llm.errors import LLMNotConfiguredError, PromptInterpretationError, PromptParseError
from app.llm.model_router import get_model_for_task
from app.llm.parsing import (
    extract_json_block,
    message_text,
    parse_text_response,
    parse_tool_calls,
)
from app.llm.prompts import build_system_prompt, canvas_info, get_all_templates, get_prompt_template
from app.llm.tools import (
    ART_PLAN_TOOL,
    CREATE_ART_PLAN,
    RECTANGLE_TOOL,
    RENDER_RECTANGLES,
    art_plan_tool_for_canvas,
    tools_for_canvas,
    tools_for_mode,
)
from conftest import HAPPY_FACE_PLAN, SIMPLE_RECTANGLES


# ---------------------------------------------------------------------------
# Tool calls
# ---------------------------------------------------------------------------

class TestParseToolCalls:
    def test_langchain_shape(self):
        result = parse_tool_calls([{"name": RENDER_RECTANGLES, "args": SIMPLE_RECTANGLES, "id": "t1"}])
        assert result.kind == "rectangles"
        assert result.raw == SIMPLE_RECTANGLES

    def test_chat_completions_shape_with_string_arguments(self):
        call = {"function": {"name": CREATE_ART_PLAN, "arguments": json.dumps(HAPPY_FACE_PLAN)}}
        result = parse_tool_calls([call])
        assert result.kind == "art_plan"
        assert len(result.raw["color_zones"]) == 3

    def test_responses_and_input_shapes(self):
        a = parse_tool_calls([{"name": RENDER_RECTANGLES, "arguments": '{"count": 700}'}])
        b = parse_tool_calls([{"name": RENDER_RECTANGLES, "input": {"count": 700}}])
        assert a.raw == b.raw == {"count": 700}

    def test_unknown_tools_are_skipped(self):
        calls = [
            {"name": "web_search", "args": {"q": "x"}},
            {"name": CREATE_ART_PLAN, "args": {"rectangles": {}}},
        ]
        assert parse_tool_calls(calls).kind == "art_plan"

    def test_no_calls(self):
        with pytest.raises(PromptParseError, match="No tool calls found"):
            parse_tool_calls([])
        with pytest.raises(PromptParseError, match="No tool calls found"):
            parse_tool_calls(None)

    def test_only_unknown_calls(self):
        with pytest.raises(PromptParseError, match="No valid tool calls found"):
            parse_tool_calls([{"name": "other", "args": {}}, "garbage"])

    def test_truncated_arguments(self):
        call = {"name": CREATE_ART_PLAN, "arguments": '{"color_zones": [{"x": 1'}
        with pytest.raises(PromptParseError, match="Truncated create_art_plan arguments"):
            parse_tool_calls([call])

    def test_malformed_arguments(self):
        call = {"name": RENDER_RECTANGLES, "arguments": '{"count": 12,}'}
        with pytest.raises(PromptParseError, match="Failed to parse render_rectangles"):
            parse_tool_calls([call])

    def test_non_object_arguments(self):
        call = {"name": RENDER_RECTANGLES, "arguments": "[1, 2]"}
        with pytest.raises(PromptParseError, match="must be a JSON object"):
            parse_tool_calls([call])

    def test_parse_errors_are_interpretation_errors(self):
        assert issubclass(PromptParseError, PromptInterpretationError)
        assert issubclass(LLMNotConfiguredError, PromptInterpretationError)


# ---------------------------------------------------------------------------
# Text fallback
# ---------------------------------------------------------------------------

def test_extract_json_block():
    assert extract_json_block('Sure! {"a": 1} done') == '{"a": 1}'
    assert extract_json_block("no json here") is None
    assert extract_json_block("} backwards {") is None
    assert extract_json_block("") is None


def test_parse_text_response_rectangles():
    text = "Here you go:\n```json\n" + json.dumps(SIMPLE_RECTANGLES) + "\n```"
    result = parse_text_response(text)
    assert result.kind == "rectangles"
    assert result.raw["count"] == 800


def test_parse_text_response_detects_art_plan():
    result = parse_text_response(json.dumps({"colorZones": [], "rectangles": {}}))
    assert result.kind == "art_plan"


@pytest.mark.parametrize(
    "text,message",
    [
        ("nothing useful", "missing JSON block"),
        ("{not json}", "invalid JSON"),
    ],
)
def test_parse_text_response_errors(text, message):
    with pytest.raises(PromptParseError, match=message):
        parse_text_response(text)


def test_message_text():
    assert message_text("plain") == "plain"
    blocks = [
        {"type": "text", "text": "one"},
        {"type": "tool_use", "name": "x"},
        "two",
    ]
    assert message_text(blocks) == "one\ntwo"
    assert message_text(None) == ""


# ---------------------------------------------------------------------------
# Tool schemas and prompts
# ---------------------------------------------------------------------------

def test_tool_schemas():
    assert RECTANGLE_TOOL["name"] == RENDER_RECTANGLES
    props = RECTANGLE_TOOL["input_schema"]["properties"]
    assert props["count"]["minimum"] == 500
    assert props["max_size"]["maximum"] == 50
    plan = ART_PLAN_TOOL["input_schema"]
    assert plan["required"] == ["color_zones", "rectangles"]
    assert plan["properties"]["rectangles"]["properties"]["count"]["minimum"] == 1000


def test_art_plan_tool_is_bound_to_canvas():
    tool = art_plan_tool_for_canvas(640.4, 480)
    props = tool["input_schema"]["properties"]["color_zones"]["items"]["properties"]
    assert props["x"]["maximum"] == 640
    assert props["y"]["maximum"] == 480
    assert props["radius"]["maximum"] == 480
    assert "640x480" in tool["description"]
    # The shared definition is untouched.
    base = ART_PLAN_TOOL["input_schema"]["properties"]["color_zones"]["items"]["properties"]
    assert base["x"]["maximum"] == 6000


def test_tools_for_canvas():
    names = [t["name"] for t in tools_for_canvas(800, 600)]
    assert names == [RENDER_RECTANGLES, CREATE_ART_PLAN]


def test_tools_for_mode():
    assert tools_for_mode("rectangles", 800, 600) == [RECTANGLE_TOOL]
    (plan,) = tools_for_mode("art_plan", 800, 600)
    assert plan == art_plan_tool_for_canvas(800, 600)
    assert tools_for_mode("auto", 800, 600) == tools_for_canvas(800, 600)


def test_canvas_info():
    info = canvas_info(1000, 600)
    assert "1000x600" in info
    assert "80-100px" in info


def test_system_prompts():
    templates = get_all_templates()
    assert set(templates) == {"rectangles", "art_plan", "router"}
    assert get_prompt_template("unknown") == templates["router"]

    prompt = build_system_prompt("router", 400, 300)
    assert "render_rectangles" in prompt
    assert "create_art_plan" in prompt
    assert "Canvas is 400x300 pixels" in prompt
    assert '{"color_zones": [{"x": number' in prompt

    assert "{" in build_system_prompt("rectangles", 400, 300)


def test_model_routing():
    from app.config import settings

    assert get_model_for_task("interpret") == settings.model_cheap
    assert get_model_for_task("rectangles") == settings.model_cheap
    assert get_model_for_task("art_plan") == settings.model_mid
    assert get_model_for_task("anything") == settings.model_cheap


# ---------------------------------------------------------------------------
# Client
# ---------------------------------------------------------------------------

def test_interpret_prompt_without_key(no_llm):
    assert not is_llm_configured()
    with pytest.raises(LLMNotConfiguredError, match="ANTHROPIC_API_KEY"):
        asyncio.run(interpret_prompt("blue squares", 800, 600))


def test_is_llm_configured(monkeypatch):
    from app.config import settings

    monkeypatch.setattr(settings, "anthropic_api_key", "  ")
    assert not is_llm_configured()
    monkeypatch.setattr(settings, "anthropic_api_key", "sk-test")
    assert is_llm_configured()
