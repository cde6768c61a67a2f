"""LangChain ChatAnthropic wrapper for prompt → generation settings."""

from __future__ import annotations

import logging

from app.config import settings
from app.llm.errors import LLMNotConfiguredError, PromptInterpretationError, PromptParseError
from app.llm.model_router import get_model_for_task
from app.llm.parsing import InterpretedPrompt, message_text, parse_text_response, parse_tool_calls
from app.llm.prompts import build_system_prompt
from app.llm.tools import tools_for_mode

logger = logging.getLogger(__name__)

# mode -> (prompt template, model task)
INTERPRET_MODES = {
    "auto": ("router", "interpret"),
    "rectangles": ("rectangles", "rectangles"),
    "art_plan": ("art_plan", "art_plan"),
}


def is_llm_configured() -> bool:
    return bool(settings.anthropic_api_key.strip())


async def interpret_prompt(
    prompt: str,
    canvas_w: float,
    canvas_h: float,
    mode: str = "auto",
) -> InterpretedPrompt:
    """Ask the model to pick a tool for *prompt* and return its raw arguments.

    ``auto`` lets the cheap model choose between plain rectangles and an art
    plan. ``rectangles`` and ``art_plan`` offer only that tool, with the art
    plan going to the mid-tier model.

    Raises LLMNotConfiguredError without an API key and PromptInterpretationError
    if the model call fails or its answer cannot be parsed.
    """
    if mode not in INTERPRET_MODES:
        raise ValueError(f"Unknown interpretation mode: {mode}")
    if not is_llm_configured():
        raise LLMNotConfiguredError("LLM not configured: set ANTHROPIC_API_KEY in .env")

    from langchain_anthropic import ChatAnthropic
    from langchain_core.messages import HumanMessage, SystemMessage

    template, task = INTERPRET_MODES[mode]
    model_id = get_model_for_task(task)
    llm = ChatAnthropic(
        model=model_id,
        api_key=settings.anthropic_api_key,
        temperature=settings.llm_temperature,
        max_tokens=4096,
    ).bind_tools(tools_for_mode(mode, canvas_w, canvas_h))

    messages = [
        SystemMessage(content=build_system_prompt(template, canvas_w, canvas_h)),
        HumanMessage(content=prompt),
    ]

    logger.debug("Interpreting prompt %r (%s) on %sx%s canvas with %s", prompt, mode, canvas_w, canvas_h, model_id)
    try:
        response = await llm.ainvoke(messages)
    except Exception as e:
        logger.warning("Model call failed: %s", e)
        raise PromptInterpretationError(f"Model call failed: {e}") from e

    tool_calls = getattr(response, "tool_calls", None) or []
    if tool_calls:
        result = parse_tool_calls(tool_calls)
    else:
        text = message_text(response.content)
        if not text:
            raise PromptParseError("Model returned neither a tool call nor text")
        result = parse_text_response(text, kind="art_plan" if mode == "art_plan" else "rectangles")

    logger.info("Prompt interpreted as %s", result.kind)
    return result
