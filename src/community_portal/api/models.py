"""Pydantic models for SoCraTes registration payloads."""

from pydantic import BaseModel, Field


class RegistrationTuple(BaseModel):
    """Session and stay length submitted with a reservation or registration."""

    session_id: str = Field(min_length=1)
    duration: int = Field(ge=1)


class CapabilitiesResponse(BaseModel):
    """Role-only capabilities of the current actor."""

    member_id: str | None
    superuser: bool
    capabilities: dict[str, bool]
