"""Access rights for activities, groups, members and activity results."""

from collections.abc import Callable, Iterable
from dataclasses import dataclass

from community_portal.domain.activities import Activity, Group
from community_portal.domain.actors import GUEST, Actor, AuthenticatedMember
from community_portal.domain.members import Member
from community_portal.services.clock import Clock, as_utc, utc_now

SuperuserCheck = Callable[[str], bool]


def superuser_check(superuser_ids: Iterable[str]) -> SuperuserCheck:
    """Build a predicate matching member ids against configured superusers."""
    ids = frozenset(superuser_ids)
    return lambda member_id: member_id in ids


def resolve_actor(member_id: str | None, is_superuser: SuperuserCheck) -> Actor:
    """Resolve the request's member id into a guest or an authenticated member."""
    if not member_id:
        return GUEST
    return AuthenticatedMember(id=member_id, is_superuser=is_superuser(member_id))


@dataclass(frozen=True)
class AccessPolicy:
    """Capability checks bound to a single resolved actor.

    Every predicate is total: missing entities or missing optional fields
    deny everyone except superusers.
    """

    actor: Actor
    clock: Clock = utc_now

    @classmethod
    def for_actor(cls, actor: Actor, clock: Clock = utc_now) -> "AccessPolicy":
        """Return a policy for the given actor."""
        return cls(actor=actor, clock=clock)

    def member_id(self) -> str | None:
        """Return the actor's member id, or None for guests."""
        if isinstance(self.actor, AuthenticatedMember):
            return self.actor.id
        return None

    def is_registered(self) -> bool:
        """Return True for any authenticated member."""
        return isinstance(self.actor, AuthenticatedMember)

    def is_superuser(self) -> bool:
        """Return True if the actor is a configured superuser."""
        return isinstance(self.actor, AuthenticatedMember) and self.actor.is_superuser

    def can_create_activity(self) -> bool:
        return self.is_registered()

    def can_edit_activity(self, activity: Activity | None) -> bool:
        """Allow superusers, the owner, and organizers of the hosting group."""
        if self.is_superuser():
            return True
        if activity is None:
            return False
        return self._is_me(activity.owner) or self._organizes(activity.group)

    def can_delete_activity(self, activity: Activity | None) -> bool:
        """Allow superusers, and owners of activities that have not started."""
        if self.is_superuser():
            return True
        if activity is None or not self._is_me(activity.owner):
            return False
        if activity.start_time is None:
            return False
        return not as_utc(activity.start_time) < self.clock()

    def can_create_group(self) -> bool:
        return self.is_registered()

    def can_edit_group(self, group: Group | None = None) -> bool:
        return self.is_superuser() or self._organizes(group)

    def can_view_group_details(self) -> bool:
        return self.is_registered()

    def can_participate_in_group(self) -> bool:
        return self.is_registered()

    def can_edit_member(self, member: Member | None) -> bool:
        if self.is_superuser():
            return True
        return member is not None and self._is_me(member.id)

    def can_create_activity_result(self) -> bool:
        return self.is_superuser()

    def capabilities(self) -> dict[str, bool]:
        """Return the role-only capabilities, e.g. for navigation rendering."""
        return {
            "create_activity": self.can_create_activity(),
            "create_group": self.can_create_group(),
            "view_group_details": self.can_view_group_details(),
            "participate_in_group": self.can_participate_in_group(),
            "create_activity_result": self.can_create_activity_result(),
        }

    def _is_me(self, member_id: str | None) -> bool:
        own_id = self.member_id()
        return own_id is not None and member_id is not None and own_id == member_id

    def _organizes(self, group: Group | None) -> bool:
        own_id = self.member_id()
        if own_id is None or group is None or not group.organizers:
            return False
        return own_id in group.organizers
