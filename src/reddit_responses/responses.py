"""
Decode entry points — raw response bodies to typed things.

Nothing here performs I/O: bodies arrive from the transport as bytes, text,
an already-parsed JSON tree or an ``httpx.Response`` that has been read.
Decode errors propagate to the caller untouched.
"""

import json
import logging
from typing import Any, TypeVar, Union

import httpx
from pydantic import BaseModel, ConfigDict
from typing_extensions import Self

from reddit_responses.errors import InvalidJSON, TypeMismatch
from reddit_responses.models import (
    CommentListing,
    Listing,
    Submission,
    SubmissionListing,
    SubredditAboutThing,
    Thing,
)

logger = logging.getLogger(__name__)

D = TypeVar("D")

RawBody = Union[bytes, bytearray, str, dict, list]


def _reject_constant(token: str) -> Any:
    raise InvalidJSON(f"Response body is not valid JSON: non-standard constant {token}")


def load_json(raw: RawBody) -> Any:
    """Parse ``raw`` if it is still text; JSON trees are returned unchanged."""
    if isinstance(raw, (dict, list)):
        return raw
    try:
        return json.loads(raw, parse_constant=_reject_constant)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise InvalidJSON(f"Response body is not valid JSON: {e}")


def decode(raw: RawBody, target: type[D]) -> D:
    """Decode ``raw`` as ``target``, any class with a ``decode`` classmethod."""
    value = target.decode(load_json(raw))  # type: ignore[attr-defined]
    logger.debug("decoded %s", getattr(target, "__name__", target))
    return value


class CommentResponse(BaseModel):
    """A post together with its comment tree, as returned by ``/comments/{id}``.

    The wire format is a two-element array: a listing holding exactly the post,
    then the comment listing. Both halves decode or the whole response fails.
    """

    model_config = ConfigDict(frozen=True)

    post: SubmissionListing
    comments: CommentListing

    @property
    def submission(self) -> Submission:
        return self.post.data.children[0].data

    @classmethod
    def decode(cls, raw: Any) -> Self:
        if not isinstance(raw, list) or len(raw) != 2:
            raise TypeMismatch(None, cls.__name__, "expected an array of two listings", raw)
        post = SubmissionListing.decode(raw[0])
        comments = CommentListing.decode(raw[1])
        if len(post.data.children) != 1:
            raise TypeMismatch(
                "children", post.data.__class__.__name__,
                "expected exactly one submission", len(post.data.children),
            )
        return cls(post=post, comments=comments)


def decode_listing(raw: RawBody, payload_type: Any = Submission) -> Thing[Listing[Any]]:
    listing = decode(raw, Thing[Listing[payload_type]])
    logger.debug("listing page: %d children, after=%s", len(listing.data.children), listing.data.after)
    return listing


def decode_comment_response(raw: RawBody) -> CommentResponse:
    return decode(raw, CommentResponse)


def decode_subreddit_about(raw: RawBody) -> SubredditAboutThing:
    return decode(raw, SubredditAboutThing)


def decode_response(response: httpx.Response, target: type[D]) -> D:
    """Decode the body of an already-received response.

    Status handling belongs to the transport; only the body is read here.
    """
    return decode(response.content, target)
