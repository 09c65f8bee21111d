"""Shared JSON fixtures shaped like real API payloads."""

import copy

import pytest

SUBMISSION = {
    "id": "abc",
    "name": "t3_abc",
    "domain": "self.learnpython",
    "subreddit": "learnpython",
    "subreddit_id": "t5_2r8ot",
    "author": "spez",
    "title": "How do listings paginate?",
    "permalink": "/r/learnpython/comments/abc/how_do_listings_paginate/",
    "url": "https://www.reddit.com/r/learnpython/comments/abc/how_do_listings_paginate/",
    "selftext": "Asking for a friend.",
    "selftext_html": "<p>Asking for a friend.</p>",
    "thumbnail": "self",
    "score": 42,
    "ups": 45,
    "downs": 3,
    "num_comments": 2,
    "gilded": 0,
    "created": 1609488000.0,
    "created_utc": 1609459200.0,
    "edited": False,
    "likes": None,
    "suggested_sort": None,
    "distinguished": None,
    "link_flair_text": None,
    "link_flair_css_class": None,
    "author_flair_text": None,
    "author_flair_css_class": None,
    "archived": False,
    "clicked": False,
    "hidden": False,
    "hide_score": False,
    "is_self": True,
    "locked": False,
    "over_18": False,
    "quarantine": False,
    "saved": False,
    "stickied": False,
    "visited": False,
    "banned_by": None,
    "approved_by": None,
    "removal_reason": None,
    "num_reports": None,
}

COMMENT = {
    "id": "c1",
    "name": "t1_c1",
    "author": "kn0thing",
    "body": "Use the after cursor.",
    "body_html": "<p>Use the after cursor.</p>",
    "parent_id": "t3_abc",
    "link_id": "t3_abc",
    "subreddit": "learnpython",
    "subreddit_id": "t5_2r8ot",
    "permalink": "/r/learnpython/comments/abc/how_do_listings_paginate/c1/",
    "depth": 0,
    "score": 7,
    "ups": 7,
    "downs": 0,
    "controversiality": 0,
    "gilded": 0,
    "created": 1609491600.0,
    "created_utc": 1609462800.0,
    "edited": False,
    "likes": None,
    "distinguished": None,
    "author_flair_text": None,
    "author_flair_css_class": None,
    "archived": False,
    "saved": False,
    "score_hidden": False,
    "stickied": False,
    "replies": "",
}

MORE = {
    "id": "c9",
    "name": "t1_c9",
    "parent_id": "t3_abc",
    "count": 3,
    "depth": 0,
    "children": ["c9", "ca", "cb"],
}

SUBREDDIT_ABOUT = {
    "id": "2r8ot",
    "name": "t5_2r8ot",
    "display_name": "learnpython",
    "title": "Learn Python",
    "url": "/r/learnpython/",
    "subreddit_type": "public",
    "submission_type": "any",
    "lang": "en",
    "subscribers": 1200000,
    "accounts_active": 1500,
    "comment_score_hide_mins": 0,
    "description": "Subreddit for posting questions and asking for general advice.",
    "description_html": "<p>Subreddit for posting questions.</p>",
    "public_description": "Learn Python.",
    "public_description_html": "<p>Learn Python.</p>",
    "submit_text": "",
    "submit_text_html": "",
    "submit_text_label": None,
    "submit_link_label": None,
    "created": 1232236800.0,
    "created_utc": 1232208000.0,
    "over18": False,
    "public_traffic": False,
    "quarantine": False,
    "wiki_enabled": True,
}


def _factory(base):
    def make(**overrides):
        data = copy.deepcopy(base)
        data.update(overrides)
        return data
    return make


def thing(kind, data):
    return {"kind": kind, "data": data}


def listing(children, after=None, before=None, modhash=None):
    return thing("Listing", {
        "modhash": modhash,
        "before": before,
        "after": after,
        "children": children,
    })


@pytest.fixture
def make_submission():
    return _factory(SUBMISSION)


@pytest.fixture
def make_comment():
    return _factory(COMMENT)


@pytest.fixture
def make_more():
    return _factory(MORE)


@pytest.fixture
def make_about():
    return _factory(SUBREDDIT_ABOUT)


@pytest.fixture
def thread_json(make_submission, make_comment, make_more):
    reply = make_comment(id="c2", name="t1_c2", parent_id="t1_c1", depth=1, body="Thanks!",
                         edited=1609470000.0)
    top = make_comment(replies=listing([thing("t1", reply)]))
    return [
        listing([thing("t3", make_submission())]),
        listing([thing("t1", top), thing("more", make_more())]),
    ]
