"""Art shortcodes such as ``[wave]`` expanded from a YAML dictionary."""

from __future__ import annotations

import os
from collections.abc import Mapping

import yaml


class ArtDictionaryError(Exception):
    """The art dictionary could not be located, read or parsed."""


def expand_shortcodes(text: str, art_dict: Mapping[str, str]) -> str:
    """Replace every ``[key]`` found in ``art_dict``; leave other brackets untouched."""
    pieces: list[str] = []
    cursor = 0
    while True:
        open_pos = text.find("[", cursor)
        if open_pos == -1:
            break
        pieces.append(text[cursor:open_pos])
        key_start = open_pos + 1
        close_pos = text.find("]", key_start)
        if close_pos != -1:
            art = art_dict.get(text[key_start:close_pos])
            if art is not None:
                pieces.append(art)
                cursor = close_pos + 1
                continue
        pieces.append("[")
        cursor = key_start
    pieces.append(text[cursor:])
    return "".join(pieces)


def load_art_dictionary(path: str | os.PathLike | None) -> dict[str, str]:
    """Load a YAML mapping of shortcode names to art strings."""
    if path is None:
        raise ArtDictionaryError("no art.yaml path configured")
    display = os.fspath(path)
    try:
        with open(path, encoding="utf-8") as handle:
            contents = handle.read()
    except (OSError, UnicodeDecodeError) as error:
        raise ArtDictionaryError(f"failed to read {display}: {error}") from error

    try:
        data = yaml.safe_load(contents)
    except yaml.YAMLError as error:
        raise ArtDictionaryError(f"failed to parse {display}: {error}") from error

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ArtDictionaryError(f"failed to parse {display}: expected a mapping")
    for key, value in data.items():
        if not isinstance(key, str) or not isinstance(value, str):
            raise ArtDictionaryError(
                f"failed to parse {display}: keys and values must be strings"
            )
    return dict(data)