"""Rendering of AI answers as chat text."""

from __future__ import annotations

from triadchat.parser import AiIntent, AiPayload


def render_ai_payload(payload: AiPayload) -> str:
    """Render todos or decisions when the intent asks for them, otherwise the text."""
    structured = payload.structured
    if structured is None:
        return payload.text
    if payload.intent is AiIntent.TODO and structured.todos:
        return "\n".join(
            f"TODO: {todo.text} ({todo.assignee})"
            if todo.assignee is not None
            else f"TODO: {todo.text}"
            for todo in structured.todos
        )
    if payload.intent is AiIntent.DECISION and structured.decisions:
        return "\n".join(f"Decision: {decision}" for decision in structured.decisions)
    return payload.text