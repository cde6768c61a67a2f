"""Prompt interpretation errors."""

from __future__ import annotations


class PromptInterpretationError(Exception):
    """The prompt could not be turned into generation settings."""


class LLMNotConfiguredError(PromptInterpretationError):
    """No API key is configured."""


class PromptParseError(PromptInterpretationError):
    """The model answered, but not with a usable tool call or JSON object."""
