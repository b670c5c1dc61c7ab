"""Default id generator and clock injected into the registries."""

import uuid
from datetime import datetime, timezone


def uuid4_str() -> str:
    return str(uuid.uuid4())


def utc_now() -> datetime:
    return datetime.now(timezone.utc)
