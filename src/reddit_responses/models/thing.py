"""
Thing — the ``{kind, data}`` envelope wrapped around every API object.
"""

from typing import Any, Callable, Generic, TypeVar, Union, get_args, get_origin

from pydantic import BaseModel, ConfigDict
from typing_extensions import Self

from reddit_responses.errors import MissingField, TypeMismatch, UnexpectedFieldShape

T = TypeVar("T")


def payload_decoder(payload_type: Any, kind: str) -> Callable[[Any], Any]:
    """Return the decode operation for ``payload_type``.

    A ``Union`` of payload classes is resolved through each member's ``KIND``;
    any other type must supply its own ``decode`` classmethod.
    """
    if get_origin(payload_type) is Union:
        for member in get_args(payload_type):
            if getattr(member, "KIND", None) == kind:
                return member.decode
        raise UnexpectedFieldShape("kind", kind)
    return payload_type.decode


class Thing(BaseModel, Generic[T]):
    """``kind`` names the payload type (``t3``, ``Listing``...), ``data`` holds it.

    ``kind`` is not checked against ``T``: the caller picks ``T`` from the
    endpoint it queried, and a wrong pick fails inside ``T``'s own decode.
    """

    model_config = ConfigDict(frozen=True)

    kind: str
    data: T

    @classmethod
    def payload_type(cls) -> Any:
        args = cls.__pydantic_generic_metadata__["args"]
        if not args:
            raise TypeError(f"{cls.__name__} must be parametrized with a payload type to decode")
        return args[0]

    @classmethod
    def decode(cls, raw: Any) -> Self:
        payload_type = cls.payload_type()
        if not isinstance(raw, dict):
            raise TypeMismatch(None, cls.__name__, "expected a JSON object", raw)
        for key in ("kind", "data"):
            if key not in raw:
                raise MissingField(key, cls.__name__)
        kind = raw["kind"]
        if not isinstance(kind, str):
            raise TypeMismatch("kind", cls.__name__, "expected a string", kind)
        data = payload_decoder(payload_type, kind)(raw["data"])
        return cls(kind=kind, data=data)
