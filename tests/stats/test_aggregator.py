from __future__ import annotations

import pytest

from meeting_attendance.attendance.model import AttendanceRecord
from meeting_attendance.core.enums import RiskTier
from meeting_attendance.members.model import Member
from meeting_attendance.stats.aggregator import (
    absence_tier,
    event_statistics,
    member_absence_status,
    member_stats_across_events,
    percent,
    with_draft_justifications,
)


def rec(event_id, member_id, is_present, justification=None, rid=None):
    return AttendanceRecord(
        id=rid or f"{event_id}:{member_id}",
        event_id=event_id,
        member_id=member_id,
        is_present=is_present,
        justification=justification,
    )


ROSTER = [Member(id=f"m{i}", name=f"Member {i}") for i in range(1, 5)]


def test_event_statistics_scenario_with_unmarked_member():
    records = [
        rec("e1", "m1", True),
        rec("e1", "m2", False, "doctor"),
        rec("e1", "m3", False, ""),
    ]

    stats = event_statistics("e1", ROSTER, records)

    assert (stats.total, stats.present, stats.justified, stats.absent) == (4, 1, 1, 2)


def test_event_statistics_ignores_other_events_and_unknown_members():
    records = [
        rec("e1", "m1", True),
        rec("e2", "m2", True),
        rec("e1", "ghost", True),
    ]

    stats = event_statistics("e1", ROSTER, records)

    assert stats.present == 1
    assert stats.present + stats.justified + stats.absent == stats.total == 4


@pytest.mark.parametrize("roster_size", [0, 1, 3, 7])
def test_event_statistics_partitions_roster(roster_size):
    members = [Member(id=f"m{i}", name="X") for i in range(roster_size)]
    records = [rec("e1", f"m{i}", i % 3 == 0, "motivo" if i % 3 == 1 else None) for i in range(roster_size)]

    stats = event_statistics("e1", members, records)

    assert stats.present + stats.justified + stats.absent == stats.total == roster_size


def test_event_statistics_duplicate_record_last_wins():
    records = [rec("e1", "m1", True, rid="a"), rec("e1", "m1", False, "viagem", rid="b")]

    stats = event_statistics("e1", ROSTER, records)

    assert (stats.present, stats.justified, stats.absent) == (0, 1, 3)


def test_event_statistics_is_idempotent():
    records = [rec("e1", "m1", True), rec("e1", "m2", False, "doctor")]

    assert event_statistics("e1", ROSTER, records) == event_statistics("e1", ROSTER, records)


def test_event_statistics_accepts_plain_mappings_and_empty_input():
    records = [{"event_id": "e1", "member_id": "m1", "is_present": True}, {"member_id": "m2"}, None]

    assert event_statistics({"id": "e1"}, [{"id": "m1"}, {"id": "m2"}], records).to_dict()["present"] == 1
    empty = event_statistics("e1", None, None)
    assert (empty.total, empty.present, empty.justified, empty.absent) == (0, 0, 0, 0)
    assert empty.present_percent == empty.absent_percent == 0


def test_percentages_round_independently():
    members = [Member(id=f"m{i}", name="X") for i in range(3)]
    records = [rec("e1", "m0", True), rec("e1", "m1", False, "ok")]

    stats = event_statistics("e1", members, records)

    # 33 + 33 + 33 = 99; the shortfall is expected
    assert (stats.present_percent, stats.justified_percent, stats.absent_percent) == (33, 33, 33)


def test_percent_rounds_halves_up():
    assert percent(1, 8) == 13
    assert percent(1, 200) == 1
    assert percent(0, 0) == 0
    assert percent(5, -1) == 0


@pytest.mark.parametrize(
    "count, tier",
    [(0, RiskTier.OK), (1, RiskTier.OK), (2, RiskTier.OK), (3, RiskTier.ATTENTION), (4, RiskTier.OUT), (1000, RiskTier.OUT), (-2, RiskTier.OK)],
)
def test_absence_tier_boundaries(count, tier):
    assert absence_tier(count) == tier


def test_member_without_records_is_ok():
    status = member_absence_status("m1", [])

    assert status.count == 0
    assert status.tier == RiskTier.OK


def test_justified_absences_never_count():
    records = [rec(f"e{i}", "m1", False, "x" * (i + 1)) for i in range(10)]

    assert member_absence_status("m1", records).count == 0


def test_whitespace_justification_counts_as_unjustified():
    records = [rec("e1", "m1", False, "   "), rec("e2", "m1", False, "\n\t"), rec("e3", "m1", False, None)]

    status = member_absence_status("m1", records)

    assert status.count == 2
    assert status.tier == RiskTier.OK


def test_absence_status_scans_all_events_but_only_this_member():
    records = [rec(f"e{i}", "m1", False) for i in range(4)] + [rec("e1", "m2", False)]

    assert member_absence_status("m1", records).tier == RiskTier.OUT
    assert member_absence_status("m2", records).count == 1


def five_event_history():
    # present, present, absent-unjustified, absent-justified, nothing for e5
    return [
        rec("e1", "m1", True),
        rec("e2", "m1", True),
        rec("e3", "m1", False),
        rec("e4", "m1", False, "atestado"),
    ]


def test_record_scan_does_not_count_unmarked_event():
    assert member_absence_status("m1", five_event_history()).count == 1


def test_unmarked_event_counts_when_total_events_given():
    status = member_absence_status("m1", five_event_history(), total_events=5)

    assert status.count == 2
    assert status.tier == RiskTier.OK


def test_member_stats_across_events():
    stats = member_stats_across_events("m1", five_event_history(), 5)

    assert (stats.present, stats.justified, stats.absent, stats.not_marked) == (2, 1, 1, 1)
    assert stats.total_absent == 2
    assert stats.tier == RiskTier.OK


@pytest.mark.parametrize("total_events", [4, 5, 9])
def test_status_and_member_stats_agree(total_events):
    records = five_event_history()

    status = member_absence_status("m1", records, total_events=total_events)
    stats = member_stats_across_events("m1", records, total_events)

    assert status.count == stats.total_absent


def test_member_stats_with_no_events_is_all_zero():
    stats = member_stats_across_events("m1", [], 0)

    assert stats.to_dict()["total_absent"] == 0
    assert (stats.present, stats.justified, stats.absent, stats.not_marked) == (0, 0, 0, 0)


def test_member_stats_never_reports_negative_unmarked():
    stats = member_stats_across_events("m1", five_event_history(), 2)

    assert stats.not_marked == 0


def test_draft_justifies_absence_only_at_its_event():
    records = [rec("e1", "m1", False), rec("e2", "m1", False)]

    drafted = with_draft_justifications(records, "e2", {"m1": "médico"})

    assert member_absence_status("m1", records).count == 2
    assert member_absence_status("m1", drafted).count == 1


def test_draft_covers_member_without_record_and_ignores_presence():
    records = [rec("e1", "m1", True)]

    drafted = with_draft_justifications(records, "e1", {"m1": "x", "m2": "viagem", "m3": "  "})

    assert member_absence_status("m1", drafted, total_events=1).count == 0
    assert member_absence_status("m2", drafted, total_events=1).count == 0
    assert member_absence_status("m3", drafted, total_events=1).count == 1
    assert records == [rec("e1", "m1", True)]
