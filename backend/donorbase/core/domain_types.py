"""Domain Types - rich types that replace bare primitives across the codebase.

Invariants:
    - DonorId and DonationId wrap str (store keys are strings)
    - Each entity type owns exactly one store Namespace (disjoint key spaces)

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

DonorId = NewType("DonorId", str)
DonationId = NewType("DonationId", str)
CampaignId = NewType("CampaignId", int)


# ─── Enums ───────────────────────────────────────────────────────

class Entity(str, Enum):
    """Entity names as they appear in user-facing messages."""
    DONOR = "Donor"
    DONATION = "Donation"


class Namespace(str, Enum):
    """Store key spaces, one per registry."""
    DONORS = "donors"
    DONATIONS = "donations"


# ─── Limits ──────────────────────────────────────────────────────

MAX_KEY_LENGTH = 64
