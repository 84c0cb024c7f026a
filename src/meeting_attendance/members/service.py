from __future__ import annotations

import logging
from typing import Sequence

from ..common.query_cache import QueryCache
from ..common.validators import validate_member_name
from ..core.exceptions import NotFoundError
from .model import Member
from .repository import MemberRepository

logger = logging.getLogger(__name__)


class MemberService:
    """Use case: manage the roster."""

    def __init__(self, members: MemberRepository, *, cache: QueryCache | None = None):
        self._members = members
        self._cache = cache or QueryCache(enabled=False)

    def list_members(self) -> Sequence[Member]:
        return self._cache.get_or_load(("members",), lambda: list(self._members.list()))

    def get_member(self, member_id: str) -> Member:
        member = self._members.get(member_id)
        if not member:
            raise NotFoundError("Membro não encontrado")
        return member

    def add_member(self, name: str) -> Member:
        name = validate_member_name(name)
        member = self._members.create(name=name)
        self._cache.invalidate("members")
        logger.info("member added id=%s", member.id)
        return member

    def remove_member(self, member_id: str) -> None:
        if not self._members.delete(member_id):
            raise NotFoundError("Membro não encontrado")
        # the store cascades the member's attendance rows
        self._cache.invalidate("members", "attendance")
        logger.info("member removed id=%s", member_id)
