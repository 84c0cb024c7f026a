from __future__ import annotations

from enum import Enum


class AttendanceState(str, Enum):
    """Three-way presence state of one member at one event."""

    PRESENT = "PRESENT"
    ABSENT_JUSTIFIED = "ABSENT_JUSTIFIED"
    ABSENT_UNJUSTIFIED = "ABSENT_UNJUSTIFIED"


class RiskTier(str, Enum):
    """Status derived from a member's unjustified absences."""

    OK = "ok"
    ATTENTION = "attention"
    OUT = "out"

    @property
    def label(self) -> str:
        return {
            RiskTier.OK: "OK",
            RiskTier.ATTENTION: "Atenção",
            RiskTier.OUT: "Fora",
        }[self]
