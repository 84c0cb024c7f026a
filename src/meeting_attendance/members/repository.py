from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Member


class MemberRepository(Protocol):
    """Member store interface.

    Note (DIP): the service layer depends on this interface, not on a concrete DB.
    """

    def list(self) -> Sequence[Member]:
        """All members ordered by name."""

        raise NotImplementedError

    def get(self, member_id: str) -> Optional[Member]:
        raise NotImplementedError

    def create(self, *, name: str) -> Member:
        raise NotImplementedError

    def delete(self, member_id: str) -> bool:
        """Remove a member; their attendance rows go with them."""

        raise NotImplementedError
