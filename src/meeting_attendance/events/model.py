from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional


@dataclass(frozen=True)
class Event:
    """Domain entity: a dated meeting against which attendance is recorded."""

    id: str
    title: str
    date: date
    description: Optional[str] = None
    created_at: Optional[datetime] = None

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "title": self.title,
            "date": self.date.strftime("%Y-%m-%d"),
            "description": self.description,
        }
