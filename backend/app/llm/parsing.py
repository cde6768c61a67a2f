"""Turn model output (tool calls or free text) into an InterpretedPrompt."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import Any, Iterable

from app.llm.errors import PromptParseError
from app.llm.tools import RESULT_TYPES

logger = logging.getLogger(__name__)


@dataclass
class InterpretedPrompt:
    """Raw tool arguments plus which tool produced them. Not yet sanitized."""

    kind: str  # "rectangles" | "art_plan"
    raw: dict[str, Any] = field(default_factory=dict)


def extract_json_block(text: str) -> str | None:
    """Slice from the first '{' to the last '}'; None if there is no such span."""
    if not text:
        return None
    start = text.find("{")
    end = text.rfind("}")
    if start == -1 or end == -1 or end <= start:
        return None
    return text[start : end + 1]


def _tool_name_and_args(call: Any) -> tuple[str | None, Any]:
    """Accept LangChain ({name, args}), Responses ({name, arguments}) and
    Chat Completions ({function: {name, arguments}}) shapes."""
    if not isinstance(call, dict):
        return None, None
    fn = call.get("function")
    if isinstance(fn, dict):
        return fn.get("name"), fn.get("arguments")
    args = call.get("args")
    if args is None:
        args = call.get("arguments", call.get("input"))
    return call.get("name"), args


def _decode_args(name: str, args: Any) -> dict[str, Any]:
    if isinstance(args, dict):
        return args
    if isinstance(args, str):
        try:
            decoded = json.loads(args)
        except json.JSONDecodeError as e:
            if not args.rstrip().endswith("}"):
                raise PromptParseError(
                    f"Truncated {name} arguments ({len(args)} chars)"
                ) from e
            raise PromptParseError(f"Failed to parse {name} arguments: {e}") from e
        if isinstance(decoded, dict):
            return decoded
    raise PromptParseError(f"{name} arguments must be a JSON object")


def parse_tool_calls(tool_calls: Iterable[Any]) -> InterpretedPrompt:
    """Return the first recognized tool call. Unknown tools are skipped."""
    calls = list(tool_calls or [])
    if not calls:
        raise PromptParseError("No tool calls found in response")

    for call in calls:
        name, args = _tool_name_and_args(call)
        kind = RESULT_TYPES.get(name or "")
        if kind is None:
            logger.debug("Skipping unknown tool call %r", name)
            continue
        raw = _decode_args(name, args)
        if kind == "art_plan":
            zones = raw.get("color_zones", raw.get("colorZones")) or []
            logger.info("Art plan with %d color zones", len(zones))
        return InterpretedPrompt(kind=kind, raw=raw)

    raise PromptParseError("No valid tool calls found")


def parse_text_response(text: str, kind: str = "rectangles") -> InterpretedPrompt:
    """Fallback when the model answers in prose: use the embedded JSON object."""
    block = extract_json_block(text)
    if block is None:
        raise PromptParseError("Model response missing JSON block")
    try:
        data = json.loads(block)
    except json.JSONDecodeError as e:
        raise PromptParseError("Model returned invalid JSON") from e
    if not isinstance(data, dict):
        raise PromptParseError("Model returned unsupported payload")

    if "rectangles" in data or "color_zones" in data or "colorZones" in data:
        kind = "art_plan"
    return InterpretedPrompt(kind=kind, raw=data)


def message_text(content: Any) -> str:
    """Flatten LangChain message content (str or list of blocks) to text."""
    if isinstance(content, str):
        return content
    if isinstance(content, list):
        parts = []
        for block in content:
            if isinstance(block, str):
                parts.append(block)
            elif isinstance(block, dict) and block.get("type") == "text":
                parts.append(block.get("text", ""))
        return "\n".join(parts)
    return ""
