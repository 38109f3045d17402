"""ORM Models: SQLAlchemy declarative models mirroring the managed database tables.

Invariants:
    - All models inherit from Base (db/base.py)
    - All models imported here so string-based relationship() references resolve
      before any query runs
"""

from site_api.models.case_study import CaseStudy  # noqa: F401
from site_api.models.testimonial import Testimonial  # noqa: F401
from site_api.models.team_member import TeamMember  # noqa: F401
from site_api.models.blog_post import BlogPost  # noqa: F401
from site_api.models.meeting_slot import MeetingSlot  # noqa: F401
from site_api.models.meeting_request import MeetingRequest  # noqa: F401
from site_api.models.contact_inquiry import ContactInquiry  # noqa: F401
from site_api.models.user_role import UserRole  # noqa: F401
