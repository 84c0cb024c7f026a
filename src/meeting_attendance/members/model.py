from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class Member:
    """Domain entity: a person on the tracked roster.

    Note: plain data object (no DB access code here).
    """

    id: str
    name: str
    created_at: Optional[datetime] = None

    def to_dict(self) -> dict:
        return {"id": self.id, "name": self.name}
