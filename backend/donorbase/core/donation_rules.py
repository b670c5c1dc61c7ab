"""Donation Rules - pure validation, transforms and aggregates for Donations.

Invariants:
    - All functions are PURE: no IO, no async, no DB, no side effects
    - amount and campaign_id are non-negative ints (bool rejected)
    - donor_id / campaign_id are never checked against other registries
    - apply_donation_update keeps the stored value for EVERY falsy field,
      so amount=0 or campaign_id=0 in an update means "not provided"
    - Aggregates return 0 for an empty input
"""

from dataclasses import replace
from datetime import datetime
from typing import Iterable, NoReturn

from donorbase.core.errors import InputValidationError
from donorbase.core.records import Donation
from donorbase.core.validation import is_blank, is_well_formed_id

INVALID_DONATION_PAYLOAD = "Invalid donation payload"


def _is_non_negative_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0


def _reject(field: str) -> NoReturn:
    raise InputValidationError(INVALID_DONATION_PAYLOAD, field)


def validate_donation_create(
    amount: int, date: str, donor_id: str, campaign_id: int,
) -> None:
    """Every field is required; a zero amount or campaign_id counts as missing."""
    if not _is_non_negative_int(amount) or not amount:
        _reject("amount")
    if is_blank(date):
        _reject("date")
    if not is_well_formed_id(donor_id):
        _reject("donor_id")
    if not _is_non_negative_int(campaign_id) or not campaign_id:
        _reject("campaign_id")


def validate_donation_update(
    amount: int | None,
    date: str | None,
    donor_id: str | None,
    campaign_id: int | None,
) -> None:
    """Shape checks only; falsy values fall back during the update.

    An empty date falls back; a whitespace-only one is rejected as on create.
    """
    if amount is not None and not _is_non_negative_int(amount):
        _reject("amount")
    if date is not None and (not isinstance(date, str) or (date and is_blank(date))):
        _reject("date")
    if donor_id and not is_well_formed_id(donor_id):
        _reject("donor_id")
    if campaign_id is not None and not _is_non_negative_int(campaign_id):
        _reject("campaign_id")


def new_donation(
    donation_id: str,
    amount: int,
    date: str,
    donor_id: str,
    campaign_id: int,
    now: datetime,
) -> Donation:
    return Donation(
        id=donation_id,
        amount=amount,
        date=date,
        donor_id=donor_id,
        campaign_id=campaign_id,
        created_date=now,
        updated_at=None,
    )


def apply_donation_update(
    donation: Donation,
    amount: int | None,
    date: str | None,
    donor_id: str | None,
    campaign_id: int | None,
    now: datetime,
) -> Donation:
    """Field-by-field overwrite with falsy fallback to the stored value."""
    return replace(
        donation,
        amount=amount or donation.amount,
        date=date or donation.date,
        donor_id=donor_id or donation.donor_id,
        campaign_id=campaign_id or donation.campaign_id,
        updated_at=now,
    )


def total_amount(donations: Iterable[Donation]) -> int:
    return sum(d.amount for d in donations)


def total_amount_for_donor(donations: Iterable[Donation], donor_id: str) -> int:
    """Sum over donations whose donor_id matches exactly (case-sensitive)."""
    return sum(d.amount for d in donations if d.donor_id == donor_id)
