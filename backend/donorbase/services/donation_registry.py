"""Donation Registry - CRUD and aggregate sums over Donation records.

Invariants:
    - Inputs validated before any store access (no side effects on failure)
    - donor_id / campaign_id are soft references: never looked up
    - total_for_donor returns 0 (not NotFound) when nothing matches
"""

import logging

from donorbase.core.domain_types import Entity
from donorbase.core.donation_rules import (
    apply_donation_update,
    new_donation,
    total_amount,
    total_amount_for_donor,
    validate_donation_create,
    validate_donation_update,
)
from donorbase.core.errors import ErrorContext, OperationError, ResourceNotFoundError
from donorbase.core.records import Donation
from donorbase.core.repository_protocols import Clock, IdGenerator, KeyValueStore
from donorbase.core.validation import check_record_id
from donorbase.infrastructure.identity import utc_now, uuid4_str

logger = logging.getLogger(__name__)

_ENTITY = Entity.DONATION


class DonationRegistry:
    """Owns the lifecycle of Donation records in one store namespace."""

    def __init__(
        self,
        store: KeyValueStore,
        new_id: IdGenerator = uuid4_str,
        clock: Clock = utc_now,
    ):
        self._store = store
        self._new_id = new_id
        self._clock = clock

    async def create(
        self, amount: int, date: str, donor_id: str, campaign_id: int,
    ) -> Donation:
        validate_donation_create(amount, date, donor_id, campaign_id)
        try:
            donation = new_donation(
                self._new_id(), amount, date, donor_id, campaign_id, self._clock(),
            )
            await self._store.insert(donation.id, donation.to_dict())
        except Exception as e:
            logger.error(
                f"Donation creation failed: {e}", exc_info=True,
                extra={"entity": _ENTITY.value},
            )
            raise OperationError(
                "Donation creation unsuccessful", ErrorContext(entity=_ENTITY.value),
            ) from e
        logger.info(
            "Donation created",
            extra={"entity": _ENTITY.value, "record_id": donation.id},
        )
        return donation

    async def update(
        self,
        donation_id: str,
        amount: int | None = None,
        date: str | None = None,
        donor_id: str | None = None,
        campaign_id: int | None = None,
    ) -> Donation:
        check_record_id(donation_id, _ENTITY)
        validate_donation_update(amount, date, donor_id, campaign_id)
        donation = await self._load(donation_id)
        updated = apply_donation_update(
            donation, amount, date, donor_id, campaign_id, self._clock(),
        )
        await self._store.insert(updated.id, updated.to_dict())
        return updated

    async def delete(self, donation_id: str) -> Donation:
        donation = await self._load(donation_id, suffix=", could not be deleted")
        await self._store.remove(donation_id)
        logger.info(
            "Donation deleted",
            extra={"entity": _ENTITY.value, "record_id": donation_id},
        )
        return donation

    async def get(self, donation_id: str) -> Donation:
        return await self._load(donation_id)

    async def list_all(self) -> list[Donation]:
        return [Donation.from_dict(v) for v in await self._store.values()]

    async def total(self) -> int:
        """Sum of amount over every stored donation."""
        return total_amount(await self.list_all())

    async def total_for_donor(self, donor_id: str) -> int:
        """Sum of amount over donations referencing donor_id; donor existence unchecked."""
        check_record_id(donor_id, Entity.DONOR)
        return total_amount_for_donor(await self.list_all(), donor_id)

    async def _load(self, donation_id: str, suffix: str = "") -> Donation:
        check_record_id(donation_id, _ENTITY)
        data = await self._store.get(donation_id)
        if data is None:
            raise ResourceNotFoundError(_ENTITY.value, donation_id, suffix=suffix)
        return Donation.from_dict(data)
