"""Registry Dependencies - build per-request registries over the request's DB session.

Invariants:
    - Each registry gets its own namespace of the shared store implementation
    - Registries live for one request; the engine lives for the process
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from donorbase.core.domain_types import Namespace
from donorbase.infrastructure.database import get_db
from donorbase.infrastructure.kv_store import SqlKeyValueStore
from donorbase.services.donation_registry import DonationRegistry
from donorbase.services.donor_registry import DonorRegistry


async def get_donor_registry(db: AsyncSession = Depends(get_db)) -> DonorRegistry:
    return DonorRegistry(SqlKeyValueStore(db, Namespace.DONORS))


async def get_donation_registry(db: AsyncSession = Depends(get_db)) -> DonationRegistry:
    return DonationRegistry(SqlKeyValueStore(db, Namespace.DONATIONS))
