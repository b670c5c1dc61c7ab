"""Donor Schemas - Pydantic request/response models for the donor endpoints.

Invariants:
    - Request models check shape only; emptiness rules live in core/donor_rules.py
    - DonorUpdate fields default to None ("not provided")
    - DonorResponse mirrors core.records.Donor field-for-field
"""

from datetime import datetime

from pydantic import BaseModel

from donorbase.core.records import Donor


class DonorCreate(BaseModel):
    name: str
    email: str
    donor_type: str


class DonorUpdate(BaseModel):
    """Partial update: omitted or null fields keep their stored value."""
    name: str | None = None
    email: str | None = None
    donor_type: str | None = None


class FeedbackCreate(BaseModel):
    feedback: str


class HistoryNoteCreate(BaseModel):
    note: str


class DonorResponse(BaseModel):
    id: str
    name: str
    email: str
    donor_type: str
    feedbacks: list[str]
    donation_history: list[str]
    created_date: datetime
    updated_at: datetime | None = None

    @classmethod
    def from_record(cls, donor: Donor) -> "DonorResponse":
        return cls(
            id=donor.id,
            name=donor.name,
            email=donor.email,
            donor_type=donor.donor_type,
            feedbacks=list(donor.feedbacks),
            donation_history=list(donor.donation_history),
            created_date=donor.created_date,
            updated_at=donor.updated_at,
        )
