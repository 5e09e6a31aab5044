"""
Creation and status changes of service requests.

Requests are immutable snapshots; every change returns a new ServiceRequest.
Status only moves forward: pending -> accepted -> completed.
"""
import uuid
from dataclasses import replace
from datetime import datetime, timezone
from typing import Optional, Sequence

from loguru import logger

from geomatch.errors import InvalidTransitionError
from geomatch.matchers.matching_orchestrator import find_matches
from geomatch.models import ACCEPTED, COMPLETED, PENDING, Coordinate, Provider, ServiceRequest

NEXT_STATUS = {
    PENDING: ACCEPTED,
    ACCEPTED: COMPLETED,
}


def create_request(
    client_id: str,
    client_name: str,
    category: str,
    description: str,
    origin: Coordinate,
    providers: Sequence[Provider] = (),
    address: Optional[str] = None,
) -> ServiceRequest:
    """
    Open a new pending request and record which providers currently match it.

    Args:
        client_id (str): Requesting client.
        client_name (str): Client display name.
        category (str): Requested service category.
        description (str): Free-text description of the job.
        origin (Coordinate): Where the job is.
        providers (Sequence[Provider]): Provider directory snapshot used for `matches`.
        address (Optional[str]): Human-readable address.

    Returns:
        ServiceRequest: The new request.
    """
    request = ServiceRequest(
        id=f"req-{uuid.uuid4().hex[:12]}",
        client_id=client_id,
        client_name=client_name,
        category=category,
        description=description,
        origin=origin,
        address=address,
        status=PENDING,
        created_at=datetime.now(timezone.utc),
    )
    matches = find_matches(request, providers)
    logger.debug(f"New request {request.id} ({category}) matched {len(matches)} providers")
    return replace(request, matches=tuple(p.id for p in matches))


def transition(request: ServiceRequest, status: str) -> ServiceRequest:
    """Move a request to the next status; any other move raises InvalidTransitionError."""
    if NEXT_STATUS.get(request.status) != status:
        raise InvalidTransitionError(
            f"Request {request.id} cannot move from '{request.status}' to '{status}'"
        )
    return replace(request, status=status)


def assign_provider(request: ServiceRequest, provider_id: str, provider_name: str) -> ServiceRequest:
    """Accept a pending, unassigned request on behalf of a provider."""
    if request.assigned_provider_id:
        raise InvalidTransitionError(f"Request {request.id} is already assigned to another provider")
    if request.status != PENDING:
        raise InvalidTransitionError(f"Request {request.id} is no longer available")
    accepted = transition(request, ACCEPTED)
    return replace(
        accepted,
        assigned_provider_id=provider_id,
        assigned_provider_name=provider_name,
    )


def complete_request(request: ServiceRequest) -> ServiceRequest:
    """Mark an accepted request as completed."""
    return transition(request, COMPLETED)
