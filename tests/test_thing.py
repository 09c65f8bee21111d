import pytest

from reddit_responses import (
    Comment,
    CommentChild,
    MissingField,
    MoreComments,
    Submission,
    Thing,
    TypeMismatch,
    UnexpectedFieldShape,
)

from conftest import thing


def test_decodes_kind_and_data(make_submission):
    decoded = Thing[Submission].decode(thing("t3", make_submission()))
    assert decoded.kind == "t3"
    assert isinstance(decoded.data, Submission)
    assert decoded.data.id == "abc"


def test_kind_is_passed_through_verbatim(make_submission):
    # the envelope does not check kind against the payload type
    assert Thing[Submission].decode(thing("t3_custom", make_submission())).kind == "t3_custom"


def test_missing_data():
    with pytest.raises(MissingField) as exc_info:
        Thing[Submission].decode({"kind": "t3"})
    assert exc_info.value.field == "data"


def test_missing_kind(make_submission):
    with pytest.raises(MissingField) as exc_info:
        Thing[Submission].decode({"data": make_submission()})
    assert exc_info.value.field == "kind"


def test_null_data_is_not_a_default(make_submission):
    with pytest.raises(TypeMismatch) as exc_info:
        Thing[Submission].decode({"kind": "t3", "data": None})
    assert exc_info.value.type_name == "Submission"


def test_kind_must_be_string(make_submission):
    with pytest.raises(TypeMismatch) as exc_info:
        Thing[Submission].decode({"kind": 3, "data": make_submission()})
    assert exc_info.value.field == "kind"


def test_not_an_object():
    with pytest.raises(TypeMismatch):
        Thing[Submission].decode("t3_abc")


def test_payload_error_propagates_unwrapped(make_submission):
    with pytest.raises(TypeMismatch) as exc_info:
        Thing[Submission].decode(thing("t3", make_submission(score="high")))
    assert exc_info.value.field == "score"
    assert exc_info.value.type_name == "Submission"


def test_unparametrized_thing_cannot_decode(make_submission):
    with pytest.raises(TypeError):
        Thing.decode(thing("t3", make_submission()))


class TestKindDispatch:
    def test_selects_member_by_kind(self, make_comment, make_more):
        comment = Thing[CommentChild].decode(thing("t1", make_comment()))
        more = Thing[CommentChild].decode(thing("more", make_more()))
        assert isinstance(comment.data, Comment)
        assert isinstance(more.data, MoreComments)
        assert more.data.children == ("c9", "ca", "cb")

    def test_unknown_kind(self, make_submission):
        with pytest.raises(UnexpectedFieldShape) as exc_info:
            Thing[CommentChild].decode(thing("t3", make_submission()))
        assert exc_info.value.field == "kind"
        assert exc_info.value.value == "t3"
