"""Domain models for groups and their activities."""

from dataclasses import dataclass, field
from datetime import datetime


@dataclass(frozen=True)
class Group:
    """Represents a regional or topical group."""

    id: str | None = None
    organizers: frozenset[str] = field(default_factory=frozenset)


@dataclass(frozen=True)
class Activity:
    """Represents a scheduled activity, optionally hosted by a group."""

    owner: str | None = None
    start_time: datetime | None = None
    group: Group | None = None
    title: str | None = None
