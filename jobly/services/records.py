"""
Helpers for converting asyncpg records into response models.
"""

from decimal import Decimal
from typing import Optional

import asyncpg

from jobly.models.schemas import Job


def equity_to_str(equity: Optional[Decimal]) -> Optional[str]:
    """Render a NUMERIC equity value as text, keeping its scale ('0.10' stays '0.10')."""
    if equity is None:
        return None
    return str(equity)


def record_to_job(record: asyncpg.Record) -> Job:
    data = dict(record)
    data["equity"] = equity_to_str(data.get("equity"))
    return Job(**data)
