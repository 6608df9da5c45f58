"""Domain models for request actors."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Guest:
    """An anonymous visitor without a member identity."""


@dataclass(frozen=True)
class AuthenticatedMember:
    """A logged-in member, with the superuser flag resolved at construction."""

    id: str
    is_superuser: bool = False


Actor = Guest | AuthenticatedMember

GUEST = Guest()
