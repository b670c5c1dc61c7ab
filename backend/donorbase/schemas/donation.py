"""Donation Schemas - Pydantic request/response models for the donation endpoints.

Invariants:
    - JSON uses donorId / campaignId; Python attributes are donor_id / campaign_id
    - Either spelling is accepted on input (populate_by_name)
    - DonationUpdate fields default to None ("not provided")
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from donorbase.core.records import Donation


class DonationCreate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    amount: int
    date: str
    donor_id: str = Field(alias="donorId")
    campaign_id: int = Field(alias="campaignId")


class DonationUpdate(BaseModel):
    """Partial update: falsy fields (including amount=0) keep their stored value."""
    model_config = ConfigDict(populate_by_name=True)

    amount: int | None = None
    date: str | None = None
    donor_id: str | None = Field(None, alias="donorId")
    campaign_id: int | None = Field(None, alias="campaignId")


class DonationResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    amount: int
    date: str
    donor_id: str = Field(alias="donorId")
    campaign_id: int = Field(alias="campaignId")
    created_date: datetime
    updated_at: datetime | None = None

    @classmethod
    def from_record(cls, donation: Donation) -> "DonationResponse":
        return cls(
            id=donation.id,
            amount=donation.amount,
            date=donation.date,
            donor_id=donation.donor_id,
            campaign_id=donation.campaign_id,
            created_date=donation.created_date,
            updated_at=donation.updated_at,
        )


class DonationTotal(BaseModel):
    total: int


class DonorDonationTotal(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    donor_id: str = Field(alias="donorId")
    total: int
