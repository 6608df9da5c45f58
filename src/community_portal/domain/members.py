"""Domain models for community members."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Member:
    """Represents a community member."""

    id: str | None
    nickname: str | None = None
