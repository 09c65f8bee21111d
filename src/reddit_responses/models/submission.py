"""
Submission — link posts and self posts (kind ``t3``).
"""

from typing import ClassVar, Optional, Union

from reddit_responses.models.base import Payload
from reddit_responses.normalize import Count, EditedAt, EditedField, Timestamp


class Submission(Payload):
    """A post as returned inside listings and as the first half of a thread.

    ``score``, ``ups`` and ``downs`` may be fuzzed by the server. Fields marked
    moderator-only are ``None`` unless the logged-in user moderates the
    subreddit.
    """

    KIND: ClassVar[str] = "t3"

    id: str  # base-36, no kind prefix
    name: str  # fullname, e.g. "t3_abc123"
    domain: str  # "i.redd.it", or "self.<subreddit>" for self posts
    subreddit: str
    subreddit_id: str  # includes the "t5_" prefix
    author: str
    title: str
    permalink: str
    url: Optional[str] = None

    selftext: str  # "" on link posts
    selftext_html: Optional[str] = None  # None on link posts
    thumbnail: str  # "self" / "default" when there is no image

    score: int
    ups: int
    downs: int
    num_comments: Count
    gilded: Count

    created: Timestamp  # logged-in user's local time
    created_utc: Timestamp
    edited: EditedField

    likes: Optional[bool] = None  # True upvoted, False downvoted, None no vote
    suggested_sort: Optional[str] = None
    distinguished: Optional[str] = None  # "moderator", "admin", "special"
    link_flair_text: Optional[str] = None  # may be ""
    link_flair_css_class: Optional[str] = None
    author_flair_text: Optional[str] = None  # may be ""
    author_flair_css_class: Optional[str] = None

    archived: bool
    clicked: bool
    hidden: bool
    hide_score: bool
    is_self: bool
    locked: bool
    over_18: bool
    quarantine: bool
    saved: bool
    stickied: bool
    visited: bool

    # moderator-only
    banned_by: Optional[str] = None
    approved_by: Optional[str] = None
    removal_reason: Optional[str] = None
    num_reports: Optional[Count] = None

    @property
    def is_edited(self) -> bool:
        return isinstance(self.edited, EditedAt)

    @property
    def edited_at(self) -> Optional[Union[int, float]]:
        return self.edited.timestamp if isinstance(self.edited, EditedAt) else None
