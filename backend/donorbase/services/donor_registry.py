"""Donor Registry - create, read, update, delete, list and note appends for Donors.

Invariants:
    - Inputs validated before any store access (no side effects on failure)
    - At most one store read and, on success, at most one store write per call
    - Callers receive immutable Donor values, never the stored dicts
    - add_feedback / add_donation_history_note leave updated_at unchanged

Design Decisions:
    - Store, id generator and clock injected: no module-level registries
    - Pure transforms live in core/donor_rules.py; this class only sequences IO
"""

import logging

from donorbase.core.domain_types import Entity
from donorbase.core.donor_rules import (
    append_feedback,
    append_history_note,
    apply_donor_update,
    new_donor,
    validate_donor_create,
    validate_donor_update,
    validate_note,
)
from donorbase.core.errors import ErrorContext, OperationError, ResourceNotFoundError
from donorbase.core.records import Donor
from donorbase.core.repository_protocols import Clock, IdGenerator, KeyValueStore
from donorbase.core.validation import check_record_id
from donorbase.infrastructure.identity import utc_now, uuid4_str

logger = logging.getLogger(__name__)

_ENTITY = Entity.DONOR


class DonorRegistry:
    """Owns the lifecycle of Donor records in one store namespace."""

    def __init__(
        self,
        store: KeyValueStore,
        new_id: IdGenerator = uuid4_str,
        clock: Clock = utc_now,
    ):
        self._store = store
        self._new_id = new_id
        self._clock = clock

    # ─── Updates ─────────────────────────────────────────────────

    async def create(self, name: str, email: str, donor_type: str) -> Donor:
        validate_donor_create(name, email, donor_type)
        try:
            donor = new_donor(self._new_id(), name, email, donor_type, self._clock())
            await self._store.insert(donor.id, donor.to_dict())
        except Exception as e:
            logger.error(
                f"Donor creation failed: {e}", exc_info=True,
                extra={"entity": _ENTITY.value},
            )
            raise OperationError(
                "Donor creation unsuccessful", ErrorContext(entity=_ENTITY.value),
            ) from e
        logger.info(
            "Donor created", extra={"entity": _ENTITY.value, "record_id": donor.id},
        )
        return donor

    async def update(
        self,
        donor_id: str,
        name: str | None = None,
        email: str | None = None,
        donor_type: str | None = None,
    ) -> Donor:
        check_record_id(donor_id, _ENTITY)
        validate_donor_update(name, email, donor_type)
        donor = await self._load(donor_id)
        updated = apply_donor_update(donor, name, email, donor_type, self._clock())
        await self._save(updated)
        return updated

    async def delete(self, donor_id: str) -> Donor:
        donor = await self._load(donor_id, suffix=", could not be deleted")
        await self._store.remove(donor_id)
        logger.info(
            "Donor deleted", extra={"entity": _ENTITY.value, "record_id": donor_id},
        )
        return donor

    async def add_feedback(self, donor_id: str, feedback: str) -> Donor:
        check_record_id(donor_id, _ENTITY)
        validate_note(feedback, "feedback")
        updated = append_feedback(await self._load(donor_id), feedback)
        await self._save(updated)
        return updated

    async def add_donation_history_note(self, donor_id: str, note: str) -> Donor:
        check_record_id(donor_id, _ENTITY)
        validate_note(note, "note")
        updated = append_history_note(await self._load(donor_id), note)
        await self._save(updated)
        return updated

    # ─── Queries ─────────────────────────────────────────────────

    async def get(self, donor_id: str) -> Donor:
        return await self._load(donor_id)

    async def list_all(self) -> list[Donor]:
        return [Donor.from_dict(v) for v in await self._store.values()]

    async def get_feedbacks(self, donor_id: str) -> list[str]:
        return list((await self._load(donor_id)).feedbacks)

    async def get_donation_history(self, donor_id: str) -> list[str]:
        return list((await self._load(donor_id)).donation_history)

    # ─── Helpers ─────────────────────────────────────────────────

    async def _load(self, donor_id: str, suffix: str = "") -> Donor:
        check_record_id(donor_id, _ENTITY)
        data = await self._store.get(donor_id)
        if data is None:
            raise ResourceNotFoundError(_ENTITY.value, donor_id, suffix=suffix)
        return Donor.from_dict(data)

    async def _save(self, donor: Donor) -> None:
        await self._store.insert(donor.id, donor.to_dict())
