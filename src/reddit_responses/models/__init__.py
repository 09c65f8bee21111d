from reddit_responses.models.base import Payload
from reddit_responses.models.thing import Thing
from reddit_responses.models.listing import Listing
from reddit_responses.models.submission import Submission
from reddit_responses.models.comment import Comment, CommentChild, CommentListing, MoreComments
from reddit_responses.models.subreddit import SubredditAbout

SubmissionListing = Thing[Listing[Submission]]
SubredditAboutThing = Thing[SubredditAbout]

__all__ = [
    "Payload",
    "Thing",
    "Listing",
    "Submission",
    "Comment",
    "CommentChild",
    "CommentListing",
    "MoreComments",
    "SubredditAbout",
    "SubmissionListing",
    "SubredditAboutThing",
]
