"""Input Validation - shared pure checks for identifiers and required text.

Invariants:
    - All functions are PURE: no IO, no async, no side effects
    - Raise InputValidationError on violation, return None on success
    - A well-formed id is a non-blank str of at most MAX_KEY_LENGTH chars
"""

from donorbase.core.domain_types import Entity, MAX_KEY_LENGTH
from donorbase.core.errors import ErrorContext, InputValidationError


def is_blank(value: object) -> bool:
    """True for None, non-str values and whitespace-only strings."""
    return not isinstance(value, str) or not value.strip()


def is_well_formed_id(value: object) -> bool:
    return not is_blank(value) and len(value) <= MAX_KEY_LENGTH


def check_record_id(value: object, entity: Entity) -> None:
    """Reject ids that could never be a store key."""
    if not is_well_formed_id(value):
        raise InputValidationError(
            f"Invalid {entity.value.lower()} ID", "id",
            ErrorContext(entity=entity.value),
        )


def check_required_text(value: object, field: str, message: str) -> None:
    if is_blank(value):
        raise InputValidationError(message, field)
