"""Typed request/response schemas.

Every API schema is a pydantic model whose python field names are snake_case
and whose JSON names are the camelCase names of the REST API. Fields are
optional: the server omits what it does not know, and absence is kept
distinct from zero values.
"""

import json
import logging
from datetime import timedelta
from typing import Annotated, Any, List, Optional, Type, TypeVar

from pydantic import BaseModel, BeforeValidator, ConfigDict, PlainSerializer, ValidationError
from pydantic.alias_generators import to_camel

logger = logging.getLogger(__name__)

S = TypeVar("S", bound="Schema")

# int64/uint64 values travel as JSON strings; accept both, emit strings.
Int64 = Annotated[int, PlainSerializer(lambda v: str(v), return_type=str, when_used="json")]


def _parse_duration(value):
    if isinstance(value, str) and value.endswith("s"):
        return timedelta(seconds=float(value[:-1]))
    return value


def _format_duration(value: timedelta) -> str:
    seconds = f"{value.total_seconds():.9f}".rstrip("0").rstrip(".")
    return f"{seconds}s"


# google.protobuf.Duration travels as "<seconds>s", e.g. "3.5s".
Duration = Annotated[
    timedelta,
    BeforeValidator(_parse_duration),
    PlainSerializer(_format_duration, return_type=str, when_used="json"),
]


class SchemaDecodeError(ValueError):
    """Raised when a JSON document does not match a schema."""
    pass


class Schema(BaseModel):
    """Base class for all API schema types."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        protected_namespaces=(),
    )

    @classmethod
    def decode(cls: Type[S], text: str) -> S:
        """
        Decode a JSON document into this schema.

        Raises:
            SchemaDecodeError: if the text is not JSON or has the wrong shape
        """
        try:
            return cls.model_validate_json(text)
        except ValidationError as e:
            raise SchemaDecodeError(str(e)) from e

    def to_json_value(self) -> Any:
        """JSON-compatible value with null fields removed."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    def to_json(self, indent: Optional[int] = None) -> str:
        return json.dumps(self.to_json_value(), indent=indent)


class Empty(Schema):
    """A generic empty message (google.protobuf.Empty)."""
    pass


class GoogleTypeDate(Schema):
    """A whole or partial calendar date.

    A zero in any field means "not specified": year=0 is a date without a
    year, day=0 a year and month where the day isn't significant.
    """
    day: Optional[int] = None
    month: Optional[int] = None
    year: Optional[int] = None


class GoogleTypeMoney(Schema):
    """An amount of money with its currency type."""
    currency_code: Optional[str] = None
    nanos: Optional[int] = None
    units: Optional[Int64] = None


class GoogleRpcStatus(Schema):
    """The logical error model used by Google REST APIs."""
    code: Optional[int] = None
    details: Optional[List[dict]] = None
    message: Optional[str] = None


class ErrorBody(Schema):
    code: Optional[int] = None
    message: Optional[str] = None
    status: Optional[str] = None
    details: Optional[List[dict]] = None
    errors: Optional[List[dict]] = None


class ErrorEnvelope(Schema):
    """The {"error": {...}} envelope of a failed request."""
    error: ErrorBody


def parse_error_envelope(text: str) -> Optional[dict]:
    """
    Parse a failure body as a structured server error.

    Returns:
        The raw JSON object when it is a server error envelope, else None
    """
    try:
        value = json.loads(text)
    except ValueError:
        return None
    if not isinstance(value, dict):
        return None
    try:
        ErrorEnvelope.model_validate(value)
    except ValidationError:
        return None
    return value


class FieldMask:
    """A set of field paths, sent as a comma-separated query value."""

    def __init__(self, paths):
        if isinstance(paths, str):
            paths = paths.split(",")
        self.paths = [p.strip() for p in paths if p.strip()]

    def __str__(self):
        return ",".join(self.paths)

    def __eq__(self, other):
        return isinstance(other, FieldMask) and self.paths == other.paths

    def __repr__(self):
        return f"FieldMask({self.paths!r})"
