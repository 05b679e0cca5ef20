# triadchat

The core logic of a terminal chat in which an AI clerk, `ops-ai`, sits with
the people in the conversation. The package decides when the clerk should
speak, writes the prompts it is given, reads its answers into structured
data and renders them as chat text.

## Installation

```
pip install triadchat
```

To run the test suite:

```
pip install "triadchat[test]"
pytest
```

## Modules

- `triadchat.classifier`: `MessageClass.classify` sorts a chat line into
  `DISCUSS`, `DECIDE`, `TASK` or `EXECUTE` by English or Japanese keywords.
  A decision marker wins over a task marker, and a task marker wins over an
  execute request. The individual checks are available too:
  `contains_decision_marker`, `contains_task_marker`,
  `contains_execute_request`, `contains_ambiguity` and
  `contains_contradiction`. Matching is case-insensitive.
- `triadchat.trigger`: `AiMode` (listener, clerk, moderator, operator,
  companion), `AiFrequency` (low, normal, high), `TriggerConfig` and
  `should_intervene`. `contains_ops_ai_mention` finds `@ops-ai` when it
  stands alone. It does not match inside an address such as
  `team@ops-ai.example.com` or in a longer token such as `@ops-aix`.
  A mention always gets a reply unless the clerk is already thinking.
  Otherwise the cooldown, the human-message streak limit and the mode's
  keywords decide.
- `triadchat.prompt`: one prompt builder per task: `summary_prompt`,
  `todos_prompt`, `decisions_prompt`, `intervene_prompt`, `mention_prompt`
  and `companion_prompt`. It also has `lang_instruction` (ja, en, zh, ko,
  with English for anything else) and `truncate_transcript`.
- `triadchat.parser`: `parse_ai_payload` reads an answer in the
  `INTENT:` / `TEXT:` / `STRUCTURED:` line format into an `AiPayload`,
  which has an `AiIntent` and an optional `StructuredOutput` of
  `TodoItem`s, decisions and skill suggestions. If the answer has no intent
  or no text, the whole answer becomes a `CLARIFY` payload.
- `triadchat.rendering`: `render_ai_payload` turns a payload into chat text.
  It lists the TODOs or decisions when the intent asks for them and there
  are any. Otherwise it returns the payload's text.
- `triadchat.shortcodes`: `load_art_dictionary` reads a YAML mapping of
  shortcode names to art strings. It raises `ArtDictionaryError` when the
  file is missing, unreadable or not a mapping of strings.
  `expand_shortcodes` replaces every `[name]` found in the dictionary and
  leaves other brackets as they are.
- `triadchat.versioning`: `parse_semver_tuple` parses a strict
  `major.minor.patch` string. `version_supports_room_create_v2` is true
  from version 0.1.1 on.

## Examples

Deciding whether the clerk should speak:

```python
import time
from triadchat.trigger import AiFrequency, AiMode, TriggerConfig, should_intervene

config = TriggerConfig.from_frequency_and_mode(AiFrequency.NORMAL, AiMode.CLERK)
should_intervene("bob will fix the login bug", AiMode.CLERK, config,
                 False, None, 0, time.monotonic())   # True: "fix" is a task marker
```

Building a prompt, then parsing and rendering an answer:

```python
from triadchat.prompt import summary_prompt
from triadchat.parser import parse_ai_payload
from triadchat.rendering import render_ai_payload

prompt = summary_prompt("alice: let's split auth into a service", "en")

answer = (
    "INTENT: Todo\n"
    "TEXT: one item\n"
    'STRUCTURED: {"todos":[{"text":"write design","assignee":"bob"}],'
    '"decisions":[],"skill_suggestions":[]}\n'
)
print(render_ai_payload(parse_ai_payload(answer)))   # TODO: write design (bob)
```

Shortcodes:

```python
from triadchat.shortcodes import expand_shortcodes

expand_shortcodes("[wave] hi [unknown]", {"wave": "o/"})   # "o/ hi [unknown]"
```

## What the package does not do

The package holds the decision and text logic only. It does not run an AI
model or an AI command-line tool, so prompts have to be sent and answers
fetched by the caller. It has no network layer for chatting with peers and
no terminal user interface. It keeps no chat history or configuration on
disk. There is no command to run.