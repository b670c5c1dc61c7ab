"""Donor Rules - pure validation and transforms behind every Donor operation.

Invariants:
    - All functions are PURE: no IO, no async, no DB, no side effects
    - Transforms return a NEW Donor; the input record is never modified
    - apply_donor_update never touches feedbacks / donation_history
    - Note appends do not stamp updated_at

Design Decisions:
    - Update payload fields use None for "not provided"; an empty string is a
      validation error, anything else replaces the stored value
"""

from dataclasses import replace
from datetime import datetime

from donorbase.core.errors import InputValidationError
from donorbase.core.records import Donor
from donorbase.core.validation import check_required_text, is_blank

INVALID_DONOR_PAYLOAD = "Invalid donor payload"

_PAYLOAD_FIELDS = ("name", "email", "donor_type")


def validate_donor_create(name: str, email: str, donor_type: str) -> None:
    """All three fields are required on create."""
    for field, value in zip(_PAYLOAD_FIELDS, (name, email, donor_type)):
        check_required_text(value, field, INVALID_DONOR_PAYLOAD)


def validate_donor_update(
    name: str | None, email: str | None, donor_type: str | None,
) -> None:
    """Provided fields must be non-empty; at least one must be provided."""
    values = (name, email, donor_type)
    if all(v is None for v in values):
        raise InputValidationError(INVALID_DONOR_PAYLOAD, "payload")
    for field, value in zip(_PAYLOAD_FIELDS, values):
        if value is not None and is_blank(value):
            raise InputValidationError(INVALID_DONOR_PAYLOAD, field)


def validate_note(value: str, field: str) -> None:
    check_required_text(value, field, f"Invalid donor {field.replace('_', ' ')}")


def new_donor(
    donor_id: str, name: str, email: str, donor_type: str, now: datetime,
) -> Donor:
    """Fresh donor: empty sequences, created_date stamped, updated_at absent."""
    return Donor(
        id=donor_id,
        name=name,
        email=email,
        donor_type=donor_type,
        feedbacks=(),
        donation_history=(),
        created_date=now,
        updated_at=None,
    )


def apply_donor_update(
    donor: Donor,
    name: str | None,
    email: str | None,
    donor_type: str | None,
    now: datetime,
) -> Donor:
    """Overwrite profile fields; falsy incoming values keep the stored ones."""
    return replace(
        donor,
        name=name or donor.name,
        email=email or donor.email,
        donor_type=donor_type or donor.donor_type,
        updated_at=now,
    )


def append_feedback(donor: Donor, feedback: str) -> Donor:
    return replace(donor, feedbacks=donor.feedbacks + (feedback,))


def append_history_note(donor: Donor, note: str) -> Donor:
    return replace(donor, donation_history=donor.donation_history + (note,))
