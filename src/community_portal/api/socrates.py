"""SoCraTes reservation and registration endpoints."""

from fastapi import APIRouter, Depends, HTTPException, Request, status

from community_portal.api.access import access_policy
from community_portal.api.models import RegistrationTuple
from community_portal.containers import AppContainer
from community_portal.services.access import AccessPolicy

router = APIRouter(prefix="/socrates", tags=["socrates"])


@router.post("/{resource_name}/reservations")
async def reserve(
    resource_name: str, registration: RegistrationTuple, request: Request
) -> dict[str, str]:
    """Hold a seat for the submitting session."""
    container: AppContainer = request.app.state.container
    reserved = container.registration_service.reserve(
        resource_name, registration.session_id, registration.duration
    )
    if not reserved:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="This session already holds a reservation.",
        )
    return {"status": "reserved"}


@router.get("/{resource_name}/reservations/{session_id}")
async def reservation_status(
    resource_name: str, session_id: str, request: Request
) -> dict[str, bool]:
    """Report whether the session still holds an unexpired reservation."""
    container: AppContainer = request.app.state.container
    valid = container.registration_service.has_valid_reservation(
        resource_name, session_id
    )
    return {"valid": valid}


@router.post("/{resource_name}/registrations")
async def register(
    resource_name: str,
    registration: RegistrationTuple,
    request: Request,
    policy: AccessPolicy = Depends(access_policy),
) -> dict[str, str]:
    """Register the current member, consuming the session's reservation."""
    member_id = policy.member_id()
    if member_id is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED)
    container: AppContainer = request.app.state.container
    registered = container.registration_service.register(
        resource_name, member_id, registration.session_id, registration.duration
    )
    if not registered:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="You are already registered.",
        )
    return {"status": "registered"}
