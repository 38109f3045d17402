"""Domain Types: verifies enum values match what the store holds.

Tests:
    - NewType wrappers exist and are callable
    - Enums serialize to the exact strings stored in text columns
    - Dashboard list sizes are five
"""

from uuid import uuid4

from site_api.core.domain_types import (
    UserId, RowId, AppRole, MeetingStatus, PostCategory,
    RECENT_INQUIRIES_LIMIT, UPCOMING_MEETINGS_LIMIT,
)


def test_identity_types_wrap_uuid():
    uid = uuid4()
    assert UserId(uid) == uid
    assert RowId(uid) == uid


def test_only_admin_and_user_roles():
    assert {r.value for r in AppRole} == {"admin", "user"}


def test_meeting_status_values():
    assert [s.value for s in MeetingStatus] == [
        "pending", "confirmed", "done", "postponed", "cancelled",
    ]


def test_enums_compare_equal_to_stored_strings():
    assert MeetingStatus.PENDING == "pending"
    assert PostCategory.ARTICLE == "article"


def test_dashboard_limits():
    assert RECENT_INQUIRIES_LIMIT == 5
    assert UPCOMING_MEETINGS_LIMIT == 5
