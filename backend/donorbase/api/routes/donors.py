"""Donor Routes - HTTP surface of the Donor Registry.

Invariants:
    - Routes never contain business logic (delegate to DonorRegistry)
    - Registry errors propagate to the global DonorbaseError handler
    - GET routes are read-only queries; POST/PUT/DELETE mutate
"""

from fastapi import APIRouter, Depends, status

from donorbase.api.dependencies import get_donor_registry
from donorbase.schemas.donor import (
    DonorCreate,
    DonorResponse,
    DonorUpdate,
    FeedbackCreate,
    HistoryNoteCreate,
)
from donorbase.services.donor_registry import DonorRegistry

router = APIRouter(prefix="/api/v1/donors", tags=["donors"])


@router.post(
    "", response_model=DonorResponse, status_code=status.HTTP_201_CREATED,
)
async def create_donor(
    body: DonorCreate, registry: DonorRegistry = Depends(get_donor_registry),
):
    donor = await registry.create(body.name, body.email, body.donor_type)
    return DonorResponse.from_record(donor)


@router.get("", response_model=list[DonorResponse])
async def list_donors(registry: DonorRegistry = Depends(get_donor_registry)):
    return [DonorResponse.from_record(d) for d in await registry.list_all()]


@router.get("/{donor_id}", response_model=DonorResponse)
async def get_donor(
    donor_id: str, registry: DonorRegistry = Depends(get_donor_registry),
):
    return DonorResponse.from_record(await registry.get(donor_id))


@router.put("/{donor_id}", response_model=DonorResponse)
async def update_donor(
    donor_id: str,
    body: DonorUpdate,
    registry: DonorRegistry = Depends(get_donor_registry),
):
    donor = await registry.update(
        donor_id, name=body.name, email=body.email, donor_type=body.donor_type,
    )
    return DonorResponse.from_record(donor)


@router.delete("/{donor_id}", response_model=DonorResponse)
async def delete_donor(
    donor_id: str, registry: DonorRegistry = Depends(get_donor_registry),
):
    """Delete a donor and return its last stored value. Donations are untouched."""
    return DonorResponse.from_record(await registry.delete(donor_id))


@router.post("/{donor_id}/feedbacks", response_model=DonorResponse)
async def add_feedback(
    donor_id: str,
    body: FeedbackCreate,
    registry: DonorRegistry = Depends(get_donor_registry),
):
    donor = await registry.add_feedback(donor_id, body.feedback)
    return DonorResponse.from_record(donor)


@router.get("/{donor_id}/feedbacks", response_model=list[str])
async def get_feedbacks(
    donor_id: str, registry: DonorRegistry = Depends(get_donor_registry),
):
    return await registry.get_feedbacks(donor_id)


@router.post("/{donor_id}/donation-history", response_model=DonorResponse)
async def add_donation_history_note(
    donor_id: str,
    body: HistoryNoteCreate,
    registry: DonorRegistry = Depends(get_donor_registry),
):
    donor = await registry.add_donation_history_note(donor_id, body.note)
    return DonorResponse.from_record(donor)


@router.get("/{donor_id}/donation-history", response_model=list[str])
async def get_donation_history(
    donor_id: str, registry: DonorRegistry = Depends(get_donor_registry),
):
    return await registry.get_donation_history(donor_id)
