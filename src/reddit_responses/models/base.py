"""
Leaf schema base — strict, immutable payload records with their own decode.
"""

from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, ValidationError
from typing_extensions import Self

from reddit_responses.errors import DecodeError, MissingField, TypeMismatch, UnexpectedFieldShape
from reddit_responses.normalize import UNEXPECTED_FIELD_SHAPE


def _field_path(loc: tuple[Any, ...]) -> Any:
    if not loc:
        return None
    return ".".join(str(part) for part in loc)


def translate_validation_error(exc: ValidationError, type_name: str) -> DecodeError:
    """Map the first pydantic error of ``exc`` onto the decode error taxonomy."""
    err = exc.errors(include_url=False)[0]
    field = _field_path(err["loc"])
    if err["type"] == "missing":
        return MissingField(field, type_name)
    if err["type"] == UNEXPECTED_FIELD_SHAPE:
        return UnexpectedFieldShape(field, err["input"])
    return TypeMismatch(field, type_name, err["msg"], err["input"])


class Payload(BaseModel):
    """A flat payload record carried in the ``data`` half of a ``Thing``.

    Required fields have no default and fail decode when absent. Optional
    fields default to ``None``, which means "absent" and is never confused
    with an empty string, zero or ``false`` sent by the server.
    """

    KIND: ClassVar[str] = ""

    model_config = ConfigDict(strict=True, frozen=True)

    @classmethod
    def decode(cls, raw: Any) -> Self:
        try:
            return cls.model_validate(raw)
        except ValidationError as exc:
            raise translate_validation_error(exc, cls.__name__) from None
