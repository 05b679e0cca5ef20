"""Rules deciding when the AI joins the conversation on its own."""

from __future__ import annotations

import time
from dataclasses import dataclass
from enum import Enum

from triadchat.classifier import (
    contains_ambiguity,
    contains_contradiction,
    contains_decision_marker,
    contains_execute_request,
    contains_task_marker,
)

_MENTION_TAG = "@ops-ai"


class AiMode(str, Enum):
    """How actively the AI takes part."""

    LISTENER = "listener"
    CLERK = "clerk"
    MODERATOR = "moderator"
    OPERATOR = "operator"
    COMPANION = "companion"

    def __str__(self) -> str:
        return self.value


class AiFrequency(str, Enum):
    """How often the AI may intervene."""

    LOW = "low"
    NORMAL = "normal"
    HIGH = "high"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class TriggerConfig:
    """Cooldown in seconds and the human message streak limit."""

    cooldown: float = 30.0
    human_streak_limit: int = 3

    @classmethod
    def from_frequency(cls, frequency: AiFrequency) -> TriggerConfig:
        if frequency is AiFrequency.LOW:
            return cls(cooldown=45.0, human_streak_limit=4)
        if frequency is AiFrequency.HIGH:
            return cls(cooldown=15.0, human_streak_limit=2)
        return cls()

    @classmethod
    def from_frequency_and_mode(cls, frequency: AiFrequency, mode: AiMode) -> TriggerConfig:
        if frequency is AiFrequency.NORMAL and mode is AiMode.COMPANION:
            return cls(cooldown=10.0, human_streak_limit=6)
        return cls.from_frequency(frequency)


def contains_ops_ai_mention(text: str) -> bool:
    """True if ``@ops-ai`` appears as a standalone mention."""
    pos = text.find(_MENTION_TAG)
    while pos != -1:
        before_ok = pos == 0 or not text[pos - 1].isalnum()
        after = pos + len(_MENTION_TAG)
        after_ok = after >= len(text) or not (text[after].isalnum() or text[after] == "-")
        if before_ok and after_ok:
            return True
        pos = text.find(_MENTION_TAG, pos + 1)
    return False


def should_intervene(
    text: str,
    mode: AiMode,
    config: TriggerConfig,
    ai_thinking: bool,
    last_ai_at: float | None,
    human_streak: int,
    now: float | None = None,
) -> bool:
    """Decide whether the AI should answer ``text``.

    Times are monotonic seconds; ``now`` defaults to the current monotonic time.
    """
    if ai_thinking:
        return False
    # A direct mention bypasses mode and cooldown checks.
    if contains_ops_ai_mention(text):
        return True
    if now is None:
        now = time.monotonic()
    if last_ai_at is not None and now - last_ai_at < config.cooldown:
        return False
    if human_streak >= config.human_streak_limit:
        return False

    if mode is AiMode.LISTENER:
        return False
    if mode is AiMode.CLERK:
        return contains_decision_marker(text) or contains_task_marker(text)
    if mode is AiMode.MODERATOR:
        return contains_ambiguity(text) or contains_contradiction(text)
    if mode is AiMode.OPERATOR:
        return contains_execute_request(text)
    return True