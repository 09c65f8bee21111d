"""
Comment tree records: comments (kind ``t1``) and "load more" stubs (kind ``more``).
"""

from typing import Annotated, Any, ClassVar, Optional, Union

from pydantic import BeforeValidator, field_validator

from reddit_responses.errors import TypeMismatch
from reddit_responses.models.base import Payload
from reddit_responses.models.listing import Listing
from reddit_responses.models.thing import Thing
from reddit_responses.normalize import Count, EditedAt, EditedField, Timestamp, absent_if_empty


def _array_as_tuple(value: Any) -> Any:
    return tuple(value) if isinstance(value, list) else value


# JSON arrays of ids, held immutably
Ids = Annotated[tuple[str, ...], BeforeValidator(_array_as_tuple)]


class MoreComments(Payload):
    """Placeholder for comments the server did not expand in this response."""

    KIND: ClassVar[str] = "more"

    id: str
    name: str
    parent_id: str
    count: Count
    depth: Count
    children: Ids  # ids of the collapsed comments


class Comment(Payload):
    KIND: ClassVar[str] = "t1"

    id: str
    name: str
    author: str
    body: str
    body_html: str
    parent_id: str  # fullname of the parent comment or post
    link_id: str  # fullname of the post
    subreddit: str
    subreddit_id: str
    permalink: Optional[str] = None
    depth: Optional[Count] = None

    score: int
    ups: int
    downs: int
    controversiality: Optional[Count] = None
    gilded: Count

    created: Timestamp
    created_utc: Timestamp
    edited: EditedField

    likes: Optional[bool] = None
    distinguished: Optional[str] = None
    author_flair_text: Optional[str] = None
    author_flair_css_class: Optional[str] = None

    archived: bool
    saved: bool
    score_hidden: bool
    stickied: bool

    # moderator-only
    banned_by: Optional[str] = None
    approved_by: Optional[str] = None
    removal_reason: Optional[str] = None
    num_reports: Optional[Count] = None

    # the wire sends "" when there are no replies
    replies: Optional["CommentListing"] = None

    @field_validator("replies", mode="plain")
    @classmethod
    def _decode_replies(cls, value: Any) -> Any:
        value = absent_if_empty(value)
        if value is None or isinstance(value, Thing):
            return value
        if not isinstance(value, dict):
            raise TypeMismatch("replies", cls.__name__, "expected \"\", null or a listing object", value)
        return CommentListing.decode(value)

    @property
    def is_edited(self) -> bool:
        return isinstance(self.edited, EditedAt)

    @property
    def reply_children(self) -> tuple:
        if self.replies is None:
            return ()
        return self.replies.data.children


CommentChild = Union[Comment, MoreComments]
CommentListing = Thing[Listing[CommentChild]]

Comment.model_rebuild()
