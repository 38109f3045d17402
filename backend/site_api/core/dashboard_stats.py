"""Dashboard Stats: pure merge of the dashboard sub-query results into one payload.

Invariants:
    - No IO: receives already-fetched counts and rows
    - Missing counts (None from COUNT on an empty result) default to 0
    - Output keys match what the admin dashboard page reads (camelCase)
"""

from dataclasses import dataclass, field


@dataclass
class DashboardCounts:
    """Counts gathered concurrently by the dashboard route."""
    case_studies: int | None = 0
    testimonials: int | None = 0
    team_members: int | None = 0
    blog_posts: int | None = 0
    pending_meetings: int | None = 0
    unread_inquiries: int | None = 0


@dataclass
class DashboardLists:
    recent_inquiries: list = field(default_factory=list)
    upcoming_meetings: list = field(default_factory=list)


def build_dashboard_payload(counts: DashboardCounts, lists: DashboardLists) -> dict:
    """Merge counts and lists into the dashboard response envelope. Pure, no IO."""
    return {
        "ok": True,
        "stats": {
            "caseStudies": counts.case_studies or 0,
            "testimonials": counts.testimonials or 0,
            "teamMembers": counts.team_members or 0,
            "blogPosts": counts.blog_posts or 0,
            "pendingMeetings": counts.pending_meetings or 0,
            "unreadInquiries": counts.unread_inquiries or 0,
        },
        "recentInquiries": list(lists.recent_inquiries),
        "upcomingMeetings": list(lists.upcoming_meetings),
    }
