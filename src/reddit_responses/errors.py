"""
reddit-responses error types — decode error taxonomy.
"""

from typing import Any, Optional


class RedditResponseError(Exception):
    def __init__(self, code: str, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.code = code
        self.details = details


class DecodeError(RedditResponseError):
    """Base for every failure to turn a JSON value into a typed response."""


class InvalidJSON(DecodeError):
    def __init__(self, message: str):
        super().__init__("invalid_json", message)


class MissingField(DecodeError):
    def __init__(self, field: str, type_name: str):
        super().__init__(
            "missing_field",
            f"{type_name}: required field '{field}' is missing",
            {"field": field, "type_name": type_name},
        )
        self.field = field
        self.type_name = type_name


class TypeMismatch(DecodeError):
    def __init__(self, field: Optional[str], type_name: str, expected: str, value: Any):
        where = f"field '{field}'" if field is not None else "value"
        super().__init__(
            "type_mismatch",
            f"{type_name}: {where} has the wrong type ({expected}), got {value!r:.80}",
            {"field": field, "type_name": type_name, "expected": expected, "value": value},
        )
        self.field = field
        self.type_name = type_name
        self.expected = expected
        self.value = value


class UnexpectedFieldShape(DecodeError):
    def __init__(self, field: str, value: Any):
        super().__init__(
            "unexpected_field_shape",
            f"field '{field}' has an undocumented shape: {value!r:.80}",
            {"field": field, "value": value},
        )
        self.field = field
        self.value = value


class ChildDecodeFailure(DecodeError):
    def __init__(self, index: int, cause: DecodeError):
        super().__init__(
            "child_decode_failure",
            f"listing child {index} failed to decode: {cause}",
            {"index": index, "cause": {"code": cause.code, **(cause.details or {})}},
        )
        self.index = index
        self.cause = cause
