"""
Scalar normalization for fields whose JSON type depends on server-side state.

The API reuses one key for different JSON types. ``edited`` is ``false`` on an
unedited post and the edit's Unix timestamp otherwise; ``replies`` on a comment
is ``""`` when there are none and a listing when there are. Such values are
captured raw first and then classified, so callers only ever see one
well-defined representation.
"""

from dataclasses import dataclass
from typing import Annotated, Any, Optional, Union

from pydantic import BeforeValidator, Field, PlainSerializer, PlainValidator
from pydantic_core import PydanticCustomError

from reddit_responses.errors import UnexpectedFieldShape

UNEXPECTED_FIELD_SHAPE = "unexpected_field_shape"


@dataclass(frozen=True)
class NotEdited:
    """The item has never been edited (wire value ``false``)."""

    def __bool__(self) -> bool:
        return False


@dataclass(frozen=True)
class EditedAt:
    """The item was edited at ``timestamp`` (Unix seconds, may be fractional)."""
    timestamp: Union[int, float]


Edited = Union[NotEdited, EditedAt]
NOT_EDITED = NotEdited()


def _is_number(value: Any) -> bool:
    # bool is an int subclass; `true` must not pass as a timestamp
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def classify_edited(value: Any, field: str = "edited") -> Edited:
    """Classify a raw false-or-timestamp scalar."""
    if value is False:
        return NOT_EDITED
    if _is_number(value):
        return EditedAt(value)
    raise UnexpectedFieldShape(field, value)


def _validate_edited(value: Any) -> Edited:
    if isinstance(value, (NotEdited, EditedAt)):
        return value
    if value is False or _is_number(value):
        return classify_edited(value)
    raise PydanticCustomError(
        UNEXPECTED_FIELD_SHAPE,
        "expected false or a Unix timestamp, got {shape}",
        {"shape": type(value).__name__},
    )


def absent_if_empty(value: Any) -> Optional[Any]:
    """``""`` and ``null`` both mean "absent"; anything else is returned as-is."""
    if value is None or value == "":
        return None
    return value


def _whole_seconds(value: Any) -> Any:
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def _serialize_edited(value: Edited) -> Union[bool, int, float]:
    return value.timestamp if isinstance(value, EditedAt) else False


# Dumps back to the wire shape: false or the timestamp.
EditedField = Annotated[Edited, PlainValidator(_validate_edited), PlainSerializer(_serialize_edited)]

# Unix seconds. The API serializes these as floats with a zero fraction.
Timestamp = Annotated[int, BeforeValidator(_whole_seconds)]

# Server counters; approximate ("fuzzed") by server policy but never negative.
Count = Annotated[int, Field(ge=0)]
