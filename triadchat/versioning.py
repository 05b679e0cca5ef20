"""Peer protocol version checks."""

from __future__ import annotations

import re

_NUMBER = re.compile(r"\+?[0-9]+")
_ROOM_CREATE_V2_MIN = (0, 1, 1)


def parse_semver_tuple(version: str) -> tuple[int, int, int] | None:
    """Parse exactly ``major.minor.patch``; return None for anything else."""
    parts = version.split(".")
    if len(parts) != 3 or not all(_NUMBER.fullmatch(part) for part in parts):
        return None
    major, minor, patch = (int(part) for part in parts)
    return major, minor, patch


def version_supports_room_create_v2(version: str) -> bool:
    """True if a peer of this version understands the extended room-create message."""
    parsed = parse_semver_tuple(version)
    return parsed is not None and parsed >= _ROOM_CREATE_V2_MIN