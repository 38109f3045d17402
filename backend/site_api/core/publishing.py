"""Publication Stamping: pure rule for blog_posts.published_at.

Invariants:
    - Becoming published (False → True) stamps published_at with `now`
    - Staying published keeps the original published_at
    - Unpublishing clears published_at
    - Payloads that do not touch is_published are returned unchanged
"""

from datetime import datetime


def stamp_publication(
    changes: dict, was_published: bool, now: datetime,
) -> dict:
    """Return `changes` plus the published_at transition it implies. Pure."""
    if "is_published" not in changes:
        return changes
    stamped = dict(changes)
    if changes["is_published"] and not was_published:
        stamped["published_at"] = now
    elif not changes["is_published"]:
        stamped["published_at"] = None
    return stamped
