"""
Listing — one page of a cursor-paginated collection.
"""

from typing import Any, Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict
from typing_extensions import Self

from reddit_responses.errors import ChildDecodeFailure, DecodeError, MissingField, TypeMismatch
from reddit_responses.models.thing import Thing

T = TypeVar("T")

_OPTIONAL_STRINGS = ("modhash", "before", "after")


class Listing(BaseModel, Generic[T]):
    """The ``data`` of a ``Listing`` thing.

    ``before`` and ``after`` are opaque cursors. They are never parsed; send
    them back verbatim to fetch the neighbouring page. ``after`` being ``None``
    means the server reports no further page in that direction. ``modhash`` is
    passed through untouched.

    ``children`` keeps the server's order, which is the display order.
    """

    model_config = ConfigDict(frozen=True)

    modhash: Optional[str] = None
    before: Optional[str] = None
    after: Optional[str] = None
    children: tuple[Thing[T], ...]

    @classmethod
    def decode(cls, raw: Any) -> Self:
        args = cls.__pydantic_generic_metadata__["args"]
        if not args:
            raise TypeError(f"{cls.__name__} must be parametrized with a payload type to decode")
        child_type = Thing[args[0]]

        if not isinstance(raw, dict):
            raise TypeMismatch(None, cls.__name__, "expected a JSON object", raw)
        for key in _OPTIONAL_STRINGS:
            value = raw.get(key)
            if value is not None and not isinstance(value, str):
                raise TypeMismatch(key, cls.__name__, "expected a string or null", value)
        if "children" not in raw:
            raise MissingField("children", cls.__name__)
        if not isinstance(raw["children"], list):
            raise TypeMismatch("children", cls.__name__, "expected an array", raw["children"])

        children = []
        for index, child in enumerate(raw["children"]):
            try:
                children.append(child_type.decode(child))
            except DecodeError as exc:
                raise ChildDecodeFailure(index, exc) from exc

        return cls(
            modhash=raw.get("modhash"),
            before=raw.get("before"),
            after=raw.get("after"),
            children=tuple(children),
        )

    @property
    def has_more(self) -> bool:
        return self.after is not None

    def payloads(self) -> list[T]:
        return [child.data for child in self.children]

    def page_params(self, direction: str = "after", limit: Optional[int] = None) -> dict[str, str]:
        """Query parameters for the neighbouring page, cursor echoed verbatim.

        Returns ``{}`` when there is no cursor in ``direction``.
        """
        if direction not in ("after", "before"):
            raise ValueError(f"direction must be 'after' or 'before', not {direction!r}")
        cursor = getattr(self, direction)
        if cursor is None:
            return {}
        params = {direction: cursor}
        if limit is not None:
            params["limit"] = str(limit)
        return params
