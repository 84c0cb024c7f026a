from __future__ import annotations

from dataclasses import dataclass

from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .common.query_cache import QueryCache
from .database.connection import DBConfig, DatabaseConnection
from .events.mysql_event_repository import MySQLEventRepository
from .events.repository import EventRepository
from .events.service import EventService
from .members.mysql_member_repository import MySQLMemberRepository
from .members.repository import MemberRepository
from .members.service import MemberService
from .stats.rules.record_scan_rule import RecordScanRule
from .stats.rules.unmarked_absent_rule import UnmarkedAsAbsentRule
from .stats.service import StatsService


@dataclass(frozen=True)
class Container:
    members_repo: MemberRepository
    events_repo: EventRepository
    attendance_repo: AttendanceRepository
    cache: QueryCache

    member_service: MemberService
    event_service: EventService
    attendance_service: AttendanceService
    stats_service: StatsService


def wire(
    *,
    members_repo: MemberRepository,
    events_repo: EventRepository,
    attendance_repo: AttendanceRepository,
    cache_enabled: bool = True,
    count_unmarked_as_absent: bool = True,
) -> Container:
    """Build services over any store implementation (MySQL or in-memory)."""

    cache = QueryCache(enabled=cache_enabled)

    member_service = MemberService(members_repo, cache=cache)
    event_service = EventService(events_repo, cache=cache)
    attendance_service = AttendanceService(attendance_repo, members_repo, events_repo, cache=cache)
    rule = UnmarkedAsAbsentRule() if count_unmarked_as_absent else RecordScanRule()
    stats_service = StatsService(member_service, event_service, attendance_service, rule=rule)

    return Container(
        members_repo=members_repo,
        events_repo=events_repo,
        attendance_repo=attendance_repo,
        cache=cache,
        member_service=member_service,
        event_service=event_service,
        attendance_service=attendance_service,
        stats_service=stats_service,
    )


def build_container(
    *,
    db_config: dict,
    cache_enabled: bool = True,
    count_unmarked_as_absent: bool = True,
) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))
    return wire(
        members_repo=MySQLMemberRepository(conn),
        events_repo=MySQLEventRepository(conn),
        attendance_repo=MySQLAttendanceRepository(conn),
        cache_enabled=cache_enabled,
        count_unmarked_as_absent=count_unmarked_as_absent,
    )
