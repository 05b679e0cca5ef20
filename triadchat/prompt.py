"""Prompt construction for the AI sidecar."""

from __future__ import annotations

from collections.abc import Sequence

_LANG_INSTRUCTIONS = {
    "ja": "必ず日本語で出力してください。",
    "en": "Respond in English.",
    "zh": "请用中文回答。",
    "ko": "한국어로 답변해 주세요。",
}


def lang_instruction(lang: str) -> str:
    """Instruction telling the model which language to answer in."""
    return _LANG_INSTRUCTIONS.get(lang, _LANG_INSTRUCTIONS["en"])


def _lines(text: str) -> list[str]:
    if not text:
        return []
    parts = text.split("\n")
    if parts[-1] == "":
        parts.pop()
    return [part[:-1] if part.endswith("\r") else part for part in parts]


def truncate_transcript(transcript: str, max_lines: int) -> str:
    """Keep only the last ``max_lines`` lines of the transcript."""
    lines = _lines(transcript)
    start = max(len(lines) - max_lines, 0)
    return "\n".join(lines[start:])


def _base_prompt(task: str, transcript: str, lang: str) -> str:
    return (
        f"TASK:{task}\n{lang_instruction(lang)}\n"
        "Return the answer in exactly this format:\n"
        "INTENT: <Clarify|Summary|Todo|Decision|SkillSuggest>\n"
        "TEXT: <summary text>\n"
        'STRUCTURED: {"todos":[{"text":"...","assignee":"..."}],'
        '"decisions":["..."],"skill_suggestions":["..."]}\n'
        f"TRANSCRIPT:\n{truncate_transcript(transcript, 100)}\n"
    )


def summary_prompt(transcript: str, lang: str) -> str:
    return _base_prompt("summary", transcript, lang)


def todos_prompt(transcript: str, lang: str) -> str:
    return _base_prompt("todos", transcript, lang)


def decisions_prompt(transcript: str, lang: str) -> str:
    return _base_prompt("decisions", transcript, lang)


def intervene_prompt(transcript: str, last_messages: Sequence[str], lang: str) -> str:
    base = _base_prompt("intervene", transcript, lang)
    return f"{base}\nLAST_MESSAGES:\n{chr(10).join(last_messages)}\n"


def mention_prompt(message: str, transcript: str, lang: str) -> str:
    """Prompt for a direct answer to an ``@ops-ai`` mention."""
    return (
        f"TASK:mention\n{lang_instruction(lang)}\n"
        "You are ops-ai, a helpful team member who was directly addressed.\n"
        "Rules:\n"
        "- Answer the QUESTION below with actual content (1-3 sentences).\n"
        "- Do NOT start your answer by describing or restating the question.\n"
        "- Do NOT write 'The user is asking...' or 'ユーザーが〜と質問しています' "
        "or similar meta-commentary.\n"
        "- Do NOT generate TODO items or decisions — always leave STRUCTURED arrays empty.\n"
        "- Be direct and conversational, like a knowledgeable teammate.\n"
        "Return EXACTLY this format (no other text):\n"
        "INTENT: Clarify\n"
        "TEXT: <your direct answer here>\n"
        'STRUCTURED: {"todos":[],"decisions":[],"skill_suggestions":[]}\n'
        f"QUESTION: {message}\n"
        f"RECENT CONTEXT:\n{truncate_transcript(transcript, 10)}\n"
    )


def companion_prompt(transcript: str, last_messages: Sequence[str], lang: str) -> str:
    base = _base_prompt("companion", transcript, lang)
    return (
        f"{base}\n"
        "You are an active conversation participant, not just a clerk.\n"
        "React naturally: add relevant ideas, ask clarifying questions,\n"
        "point out interesting angles, or summarise when helpful.\n"
        "Keep responses short (1-3 sentences). Do not summarise unless asked.\n"
        f"LAST_MESSAGES:\n{chr(10).join(last_messages)}\n"
    )