"""Parsing of the line-oriented answer format produced by the AI sidecar."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class AiIntent(str, Enum):
    """What an AI answer is meant to convey."""

    CLARIFY = "Clarify"
    SUMMARY = "Summary"
    TODO = "Todo"
    DECISION = "Decision"
    SKILL_SUGGEST = "SkillSuggest"
    SKIP = "Skip"

    def __str__(self) -> str:
        return self.value


@dataclass
class TodoItem:
    """One action item, optionally assigned to someone."""

    text: str
    assignee: str | None = None


def _string_list(data: dict, key: str) -> list[str]:
    value = data.get(key, [])
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise ValueError(f"'{key}' must be a list of strings")
    return list(value)


def _todo_from(item: Any) -> TodoItem:
    if not isinstance(item, dict):
        raise ValueError("todo entries must be objects")
    text = item.get("text")
    assignee = item.get("assignee")
    if not isinstance(text, str):
        raise ValueError("todo 'text' must be a string")
    if assignee is not None and not isinstance(assignee, str):
        raise ValueError("todo 'assignee' must be a string or null")
    return TodoItem(text=text, assignee=assignee)


@dataclass
class StructuredOutput:
    """Structured data extracted from an AI answer."""

    todos: list[TodoItem] = field(default_factory=list)
    decisions: list[str] = field(default_factory=list)
    skill_suggestions: list[str] = field(default_factory=list)
    raw_text: str | None = None

    @classmethod
    def raw(cls, text: str) -> StructuredOutput:
        """Wrap an answer that could not be parsed."""
        return cls(raw_text=text)

    @classmethod
    def from_dict(cls, data: dict) -> StructuredOutput:
        """Build from decoded JSON; missing keys default to empty lists."""
        if not isinstance(data, dict):
            raise ValueError("structured output must be an object")
        todos = data.get("todos", [])
        if not isinstance(todos, list):
            raise ValueError("'todos' must be a list")
        raw_text = data.get("raw")
        if raw_text is not None and not isinstance(raw_text, str):
            raise ValueError("'raw' must be a string or null")
        return cls(
            todos=[_todo_from(item) for item in todos],
            decisions=_string_list(data, "decisions"),
            skill_suggestions=_string_list(data, "skill_suggestions"),
            raw_text=raw_text,
        )

    def to_dict(self) -> dict:
        """Return a JSON-ready dictionary."""
        result: dict[str, Any] = {
            "todos": [{"text": todo.text, "assignee": todo.assignee} for todo in self.todos],
            "decisions": list(self.decisions),
            "skill_suggestions": list(self.skill_suggestions),
        }
        if self.raw_text is not None:
            result["raw"] = self.raw_text
        return result


@dataclass
class AiPayload:
    """A parsed AI answer."""

    text: str
    intent: AiIntent
    structured: StructuredOutput | None = None


_INTENTS = {intent.value: intent for intent in AiIntent}


def _parse_intent(value: str) -> AiIntent:
    return _INTENTS.get(value, AiIntent.CLARIFY)


def _parse_structured(value: str) -> StructuredOutput | None:
    try:
        return StructuredOutput.from_dict(json.loads(value))
    except ValueError:
        return None


def _lines(text: str):
    """Split on newlines, dropping a trailing empty line and trailing carriage returns."""
    if not text:
        return
    parts = text.split("\n")
    if parts[-1] == "":
        parts.pop()
    for part in parts:
        yield part[:-1] if part.endswith("\r") else part


def parse_ai_payload(raw: str) -> AiPayload:
    """Parse INTENT/TEXT/STRUCTURED lines; fall back to a Clarify payload."""
    intent: AiIntent | None = None
    text: str | None = None
    structured: StructuredOutput | None = None
    buffer: list[str] | None = None

    def flush() -> None:
        nonlocal text, buffer
        if buffer is not None:
            text = "\n".join(buffer).strip()
            buffer = None

    for line in _lines(raw):
        if line.startswith("INTENT:"):
            flush()
            intent = _parse_intent(line[len("INTENT:"):].strip())
        elif line.startswith("TEXT:"):
            flush()
            first = line[len("TEXT:"):].strip()
            buffer = [first] if first else []
        elif line.startswith("STRUCTURED:"):
            flush()
            structured = _parse_structured(line[len("STRUCTURED:"):].strip())
        elif buffer is not None:
            if buffer:
                buffer.append(line)
            else:
                buffer = [line]
    flush()

    if intent is not None and text is not None:
        return AiPayload(text=text, intent=intent, structured=structured)
    return AiPayload(
        text=raw.strip(),
        intent=AiIntent.CLARIFY,
        structured=StructuredOutput.raw(raw),
    )