"""Keyword-based classification of chat messages."""

from __future__ import annotations

from enum import Enum

_DECISION_MARKERS = ("決定", "結論", "decide", "decided", "決まり")
_TASK_MARKERS = ("todo", "担当", "書く", "fix", "対応", "やる", "task")
_EXECUTE_MARKERS = ("/skill", "実行", "run", "deploy", "apply", "してください", "やって")
_AMBIGUITY_MARKERS = (
    "?",
    "？",
    "どう",
    "どっち",
    "迷",
    "悩",
    "which",
    "should we",
    "unclear",
    "不明",
    "曖昧",
)
_CONTRADICTION_MARKERS = ("矛盾", "contradict", "一方で", "but", "しかし")


def _contains_any(text: str, markers: tuple[str, ...]) -> bool:
    normalized = text.lower()
    return any(marker in normalized for marker in markers)


def contains_decision_marker(text: str) -> bool:
    """True if the text announces a decision."""
    return _contains_any(text, _DECISION_MARKERS)


def contains_task_marker(text: str) -> bool:
    """True if the text mentions a task or an assignment."""
    return _contains_any(text, _TASK_MARKERS)


def contains_execute_request(text: str) -> bool:
    """True if the text asks for something to be executed."""
    return _contains_any(text, _EXECUTE_MARKERS)


def contains_ambiguity(text: str) -> bool:
    """True if the text expresses a question or uncertainty."""
    return _contains_any(text, _AMBIGUITY_MARKERS)


def contains_contradiction(text: str) -> bool:
    """True if the text points out a contradiction or a counterpoint."""
    return _contains_any(text, _CONTRADICTION_MARKERS)


class MessageClass(str, Enum):
    """Broad category of a chat message."""

    DISCUSS = "Discuss"
    DECIDE = "Decide"
    TASK = "Task"
    EXECUTE = "Execute"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def classify(cls, text: str) -> MessageClass:
        """Classify a message; decisions win over tasks, tasks over execution."""
        if contains_decision_marker(text):
            return cls.DECIDE
        if contains_task_marker(text):
            return cls.TASK
        if contains_execute_request(text):
            return cls.EXECUTE
        return cls.DISCUSS