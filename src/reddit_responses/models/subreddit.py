"""
SubredditAbout — public metadata from ``/r/{subreddit}/about`` (kind ``t5``).
"""

from typing import ClassVar, Optional

from reddit_responses.models.base import Payload
from reddit_responses.normalize import Count, Timestamp


class SubredditAbout(Payload):
    KIND: ClassVar[str] = "t5"

    id: str
    name: str  # "t5_..." fullname
    display_name: str
    title: str
    url: str
    subreddit_type: str  # "public", "restricted", "private", ...
    submission_type: str  # "any", "link", "self"
    lang: str

    subscribers: Count
    accounts_active: Count
    comment_score_hide_mins: Count

    description: str
    description_html: str
    public_description: str
    public_description_html: str
    submit_text: str
    submit_text_html: str
    submit_text_label: Optional[str] = None
    submit_link_label: Optional[str] = None

    created: Timestamp
    created_utc: Timestamp

    over18: bool
    public_traffic: bool
    quarantine: bool
    wiki_enabled: bool
