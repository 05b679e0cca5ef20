import json

import pytest

from triadchat.parser import (
    AiIntent,
    AiPayload,
    StructuredOutput,
    TodoItem,
    parse_ai_payload,
)

STRUCTURED_JSON = (
    '{"todos":[{"text":"auth の設計","assignee":"takuro"}],'
    '"decisions":["auth は service に切り出す"],"skill_suggestions":["review-auth"]}'
)


def test_parses_full_answer():
    raw = f"INTENT: Todo\nTEXT: TODO を抽出しました\nSTRUCTURED: {STRUCTURED_JSON}\n"
    payload = parse_ai_payload(raw)
    assert payload.intent is AiIntent.TODO
    assert payload.text == "TODO を抽出しました"
    assert payload.structured.todos == [TodoItem(text="auth の設計", assignee="takuro")]
    assert payload.structured.decisions == ["auth は service に切り出す"]
    assert payload.structured.skill_suggestions == ["review-auth"]


def test_multiline_text_is_collected():
    raw = "INTENT: Summary\nTEXT: line one\nline two\nSTRUCTURED: {}"
    payload = parse_ai_payload(raw)
    assert payload.text == "line one\nline two"
    assert payload.structured == StructuredOutput()


def test_text_before_intent_is_kept():
    payload = parse_ai_payload("TEXT: hello\nINTENT: Decision")
    assert payload.intent is AiIntent.DECISION
    assert payload.text == "hello"
    assert payload.structured is None


def test_unknown_intent_becomes_clarify():
    payload = parse_ai_payload("INTENT: Whatever\nTEXT: hi")
    assert payload.intent is AiIntent.CLARIFY
    assert payload.text == "hi"


def test_invalid_structured_json_is_dropped():
    payload = parse_ai_payload("INTENT: Summary\nTEXT: ok\nSTRUCTURED: {not json")
    assert payload.text == "ok"
    assert payload.structured is None


def test_crlf_line_endings():
    payload = parse_ai_payload("INTENT: Skip\r\nTEXT: quiet\r\n")
    assert payload.intent is AiIntent.SKIP
    assert payload.text == "quiet"


def test_missing_intent_falls_back_to_raw():
    raw = "  just a plain answer\n"
    payload = parse_ai_payload(raw)
    assert payload == AiPayload(
        text=raw.strip(), intent=AiIntent.CLARIFY, structured=StructuredOutput.raw(raw)
    )
    assert payload.structured.raw_text == raw


def test_missing_text_falls_back_to_raw():
    raw = "INTENT: Summary"
    payload = parse_ai_payload(raw)
    assert payload.intent is AiIntent.CLARIFY
    assert payload.text == raw


def test_structured_round_trip():
    original = StructuredOutput.from_dict(json.loads(STRUCTURED_JSON))
    assert StructuredOutput.from_dict(original.to_dict()) == original
    assert original.to_dict() == json.loads(STRUCTURED_JSON)


def test_structured_missing_keys_default_empty():
    assert StructuredOutput.from_dict({"decisions": ["x"]}) == StructuredOutput(decisions=["x"])


@pytest.mark.parametrize(
    "data",
    [{"todos": "nope"}, {"todos": [{"assignee": "a"}]}, {"decisions": [1]}, ["list"]],
)
def test_structured_rejects_bad_shapes(data):
    with pytest.raises(ValueError):
        StructuredOutput.from_dict(data)