"""Core logic for a terminal chat with an AI clerk: classification, triggers, prompts, parsing."""

__version__ = "0.1.1"