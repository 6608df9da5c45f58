"""Request dependencies binding access rights to the current actor."""

from fastapi import APIRouter, Depends, Request

from community_portal.api.models import CapabilitiesResponse
from community_portal.containers import AppContainer
from community_portal.domain.actors import Actor
from community_portal.services.access import (
    AccessPolicy,
    resolve_actor,
    superuser_check,
)

router = APIRouter(prefix="/access", tags=["access"])


def current_actor(request: Request) -> Actor:
    """Resolve the member id left on the request by the authentication layer."""
    container: AppContainer = request.app.state.container
    member_id = getattr(request.state, "member_id", None)
    return resolve_actor(member_id, superuser_check(container.superuser_ids))


def access_policy(request: Request) -> AccessPolicy:
    """Return the access policy for the current actor."""
    return AccessPolicy.for_actor(current_actor(request))


@router.get("/capabilities")
async def capabilities(
    policy: AccessPolicy = Depends(access_policy),
) -> CapabilitiesResponse:
    """Return what the current actor may do, independent of any entity."""
    return CapabilitiesResponse(
        member_id=policy.member_id(),
        superuser=policy.is_superuser(),
        capabilities=policy.capabilities(),
    )
