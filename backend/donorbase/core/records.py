"""Records - immutable Donor and Donation values and their stored dict form.

Invariants:
    - Records are frozen; every change produces a new record (dataclasses.replace)
    - feedbacks / donation_history are tuples, so stored state is never aliased
    - to_dict() output is JSON-compatible; from_dict(to_dict(r)) == r
    - updated_at is None until the first update
"""

from dataclasses import dataclass, field
from datetime import datetime


def _dump_ts(value: datetime | None) -> str | None:
    return value.isoformat() if value is not None else None


def _load_ts(value: str | None) -> datetime | None:
    return datetime.fromisoformat(value) if value else None


@dataclass(frozen=True)
class Donor:
    """A donor and its two append-only note sequences."""
    id: str
    name: str
    email: str
    donor_type: str
    created_date: datetime
    feedbacks: tuple[str, ...] = field(default_factory=tuple)
    donation_history: tuple[str, ...] = field(default_factory=tuple)
    updated_at: datetime | None = None

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "donor_type": self.donor_type,
            "feedbacks": list(self.feedbacks),
            "donation_history": list(self.donation_history),
            "created_date": _dump_ts(self.created_date),
            "updated_at": _dump_ts(self.updated_at),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Donor":
        return cls(
            id=data["id"],
            name=data["name"],
            email=data["email"],
            donor_type=data["donor_type"],
            feedbacks=tuple(data.get("feedbacks", ())),
            donation_history=tuple(data.get("donation_history", ())),
            created_date=_load_ts(data["created_date"]),
            updated_at=_load_ts(data.get("updated_at")),
        )


@dataclass(frozen=True)
class Donation:
    """A single donation. donor_id / campaign_id are soft references."""
    id: str
    amount: int
    date: str
    donor_id: str
    campaign_id: int
    created_date: datetime
    updated_at: datetime | None = None

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "amount": self.amount,
            "date": self.date,
            "donor_id": self.donor_id,
            "campaign_id": self.campaign_id,
            "created_date": _dump_ts(self.created_date),
            "updated_at": _dump_ts(self.updated_at),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Donation":
        return cls(
            id=data["id"],
            amount=int(data["amount"]),
            date=data["date"],
            donor_id=data["donor_id"],
            campaign_id=int(data["campaign_id"]),
            created_date=_load_ts(data["created_date"]),
            updated_at=_load_ts(data.get("updated_at")),
        )
