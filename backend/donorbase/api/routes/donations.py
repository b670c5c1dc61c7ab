"""Donation Routes - HTTP surface of the Donation Registry.

Invariants:
    - Routes never contain business logic (delegate to DonationRegistry)
    - /total routes are registered before /{donation_id} so they are not shadowed
"""

from fastapi import APIRouter, Depends, status

from donorbase.api.dependencies import get_donation_registry
from donorbase.schemas.donation import (
    DonationCreate,
    DonationResponse,
    DonationTotal,
    DonationUpdate,
    DonorDonationTotal,
)
from donorbase.services.donation_registry import DonationRegistry

router = APIRouter(prefix="/api/v1/donations", tags=["donations"])


@router.post(
    "", response_model=DonationResponse, status_code=status.HTTP_201_CREATED,
)
async def create_donation(
    body: DonationCreate,
    registry: DonationRegistry = Depends(get_donation_registry),
):
    donation = await registry.create(
        body.amount, body.date, body.donor_id, body.campaign_id,
    )
    return DonationResponse.from_record(donation)


@router.get("", response_model=list[DonationResponse])
async def list_donations(
    registry: DonationRegistry = Depends(get_donation_registry),
):
    return [DonationResponse.from_record(d) for d in await registry.list_all()]


@router.get("/total", response_model=DonationTotal)
async def total_donation(
    registry: DonationRegistry = Depends(get_donation_registry),
):
    return DonationTotal(total=await registry.total())


@router.get("/total/{donor_id}", response_model=DonorDonationTotal)
async def total_donation_for_donor(
    donor_id: str,
    registry: DonationRegistry = Depends(get_donation_registry),
):
    """Sum of a donor's donations. Unknown donors total 0."""
    total = await registry.total_for_donor(donor_id)
    return DonorDonationTotal(donor_id=donor_id, total=total)


@router.get("/{donation_id}", response_model=DonationResponse)
async def get_donation(
    donation_id: str,
    registry: DonationRegistry = Depends(get_donation_registry),
):
    return DonationResponse.from_record(await registry.get(donation_id))


@router.put("/{donation_id}", response_model=DonationResponse)
async def update_donation(
    donation_id: str,
    body: DonationUpdate,
    registry: DonationRegistry = Depends(get_donation_registry),
):
    donation = await registry.update(
        donation_id,
        amount=body.amount,
        date=body.date,
        donor_id=body.donor_id,
        campaign_id=body.campaign_id,
    )
    return DonationResponse.from_record(donation)


@router.delete("/{donation_id}", response_model=DonationResponse)
async def delete_donation(
    donation_id: str,
    registry: DonationRegistry = Depends(get_donation_registry),
):
    return DonationResponse.from_record(await registry.delete(donation_id))
