"""
reddit-responses — typed decoding for Reddit API responses.

Turns the ``{kind, data}`` things and cursor-paginated listings returned by
the Reddit JSON API into immutable pydantic models.
"""

from reddit_responses.errors import (
    RedditResponseError,
    DecodeError,
    InvalidJSON,
    MissingField,
    TypeMismatch,
    UnexpectedFieldShape,
    ChildDecodeFailure,
)
from reddit_responses.normalize import NOT_EDITED, NotEdited, EditedAt, Edited, classify_edited
from reddit_responses.models import (
    Thing,
    Listing,
    Submission,
    Comment,
    MoreComments,
    CommentChild,
    CommentListing,
    SubredditAbout,
    SubmissionListing,
    SubredditAboutThing,
)
from reddit_responses.responses import (
    CommentResponse,
    decode,
    decode_comment_response,
    decode_listing,
    decode_response,
    decode_subreddit_about,
    load_json,
)

__version__ = "0.1.0"
__all__ = [
    "RedditResponseError",
    "DecodeError",
    "InvalidJSON",
    "MissingField",
    "TypeMismatch",
    "UnexpectedFieldShape",
    "ChildDecodeFailure",
    "NOT_EDITED",
    "NotEdited",
    "EditedAt",
    "Edited",
    "classify_edited",
    "Thing",
    "Listing",
    "Submission",
    "Comment",
    "MoreComments",
    "CommentChild",
    "CommentListing",
    "SubredditAbout",
    "SubmissionListing",
    "SubredditAboutThing",
    "CommentResponse",
    "decode",
    "decode_comment_response",
    "decode_listing",
    "decode_response",
    "decode_subreddit_about",
    "load_json",
]
