"""Tests for build_dashboard_payload: pure merge of counts and lists, no IO."""

from site_api.core.dashboard_stats import (
    DashboardCounts, DashboardLists, build_dashboard_payload,
)


def test_defaults_produce_zero_stats():
    payload = build_dashboard_payload(DashboardCounts(), DashboardLists())
    assert payload == {
        "ok": True,
        "stats": {
            "caseStudies": 0,
            "testimonials": 0,
            "teamMembers": 0,
            "blogPosts": 0,
            "pendingMeetings": 0,
            "unreadInquiries": 0,
        },
        "recentInquiries": [],
        "upcomingMeetings": [],
    }


def test_none_counts_default_to_zero():
    counts = DashboardCounts(case_studies=None, unread_inquiries=None)
    stats = build_dashboard_payload(counts, DashboardLists())["stats"]
    assert stats["caseStudies"] == 0
    assert stats["unreadInquiries"] == 0


def test_counts_mapped_to_camel_case_keys():
    counts = DashboardCounts(
        case_studies=3, testimonials=4, team_members=6, blog_posts=5,
        pending_meetings=1, unread_inquiries=2,
    )
    stats = build_dashboard_payload(counts, DashboardLists())["stats"]
    assert stats == {
        "caseStudies": 3,
        "testimonials": 4,
        "teamMembers": 6,
        "blogPosts": 5,
        "pendingMeetings": 1,
        "unreadInquiries": 2,
    }


def test_lists_passed_through_in_order():
    lists = DashboardLists(
        recent_inquiries=[{"name": "b"}, {"name": "a"}],
        upcoming_meetings=[{"name": "x"}],
    )
    payload = build_dashboard_payload(DashboardCounts(), lists)
    assert [i["name"] for i in payload["recentInquiries"]] == ["b", "a"]
    assert payload["upcomingMeetings"] == [{"name": "x"}]
