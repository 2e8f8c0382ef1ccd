"""Request body assembly from `-r key=value` arguments.

Keys are dotted kebab-case paths into the request schema
(`budget.display-name`). A key without a value moves the field cursor, and
following keys are taken relative to it:

    -r budget.amount.specified-amount -r currency-code=EUR -r units=10

A leading '.' makes a key absolute again, and each extra '.' after the
first pops one level ('..nanos' is a sibling of the current field).
"""

import difflib
import logging
import typing
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

from gapihub.sdk.exceptions import InvalidField
from gapihub.sdk.schema import Schema

logger = logging.getLogger(__name__)

FIELD_SEP = "."


class FieldCursor:
    """The current position inside the request structure."""

    def __init__(self, fields: Optional[List[str]] = None):
        self.fields = list(fields or [])

    def copy(self) -> "FieldCursor":
        return FieldCursor(self.fields)

    def set(self, value: str):
        """
        Move the cursor by `value`.

        Raises:
            InvalidField: on an empty key, a trailing '.', or popping past the root
        """
        if not value:
            raise InvalidField(value, reason="Field names must not be empty")

        fields = list(self.fields)
        field = ""
        first_is_sep = False
        consecutive_seps = 0
        last_c = FIELD_SEP

        for i, c in enumerate(value):
            if c == FIELD_SEP:
                if i == 0:
                    first_is_sep = True
                consecutive_seps += 1
                if i > 0 and last_c == FIELD_SEP:
                    if not fields:
                        raise InvalidField(value, reason=f"'{value}' would go up past the root field")
                    fields.pop()
                elif field:
                    fields.append(field)
                    field = ""
            else:
                consecutive_seps = 0
                if i == 1 and first_is_sep:
                    fields = []
                field += c
            last_c = c

        if field:
            fields.append(field)
        if len(value) == 1 and first_is_sep:
            fields = []
        if len(value) > 1 and consecutive_seps == 1:
            raise InvalidField(value, reason=f"'{value}' must not end with '{FIELD_SEP}'")
        self.fields = fields

    def __str__(self):
        return FIELD_SEP.join(self.fields)


@dataclass(frozen=True)
class FieldType:
    """Where a kebab path lands in the JSON body and how its value is parsed."""
    wire_path: Tuple[str, ...]
    scalar: type
    is_list: bool = False


def _strip_annotations(tp):
    """Unwrap Optional[...] and Annotated[...] down to the bare type."""
    while True:
        origin = typing.get_origin(tp)
        if origin is typing.Annotated:
            tp = typing.get_args(tp)[0]
        elif origin is typing.Union:
            args = [a for a in typing.get_args(tp) if a is not type(None)]
            if len(args) != 1:
                return tp
            tp = args[0]
        else:
            return tp


def request_fields(model: type, prefix: Tuple[str, ...] = (),
                   wire_prefix: Tuple[str, ...] = ()) -> Dict[str, FieldType]:
    """
    Flatten a request schema into settable kebab-case paths.

    Nested schemas are descended into. Lists of scalars become appendable
    fields. Maps and lists of objects cannot be expressed as key=value
    pairs and are left out.
    """
    table = {}
    for name, info in model.model_fields.items():
        kebab = prefix + (name.replace("_", "-"),)
        wire = wire_prefix + (info.alias or name,)
        tp = _strip_annotations(info.annotation)
        origin = typing.get_origin(tp)

        if isinstance(tp, type) and issubclass(tp, Schema):
            table.update(request_fields(tp, kebab, wire))
        elif origin in (list, List):
            item = _strip_annotations(typing.get_args(tp)[0])
            if item in (str, int, float, bool):
                table[FIELD_SEP.join(kebab)] = FieldType(wire, item, is_list=True)
        elif tp in (str, int, float, bool):
            table[FIELD_SEP.join(kebab)] = FieldType(wire, tp)
    return table


def _parse_scalar(path: str, value: str, scalar: type):
    if scalar is bool:
        lowered = value.lower()
        if lowered not in ("true", "false"):
            raise InvalidField(path, reason=f"Value '{value}' of field '{path}' is not a boolean (true or false)")
        return lowered == "true"
    if scalar in (int, float):
        try:
            return scalar(value)
        except ValueError:
            raise InvalidField(
                path, reason=f"Value '{value}' of field '{path}' is not a valid {scalar.__name__}") from None
    return value


def _assign(body: dict, field_type: FieldType, value):
    node = body
    for key in field_type.wire_path[:-1]:
        node = node.setdefault(key, {})
    leaf = field_type.wire_path[-1]
    if field_type.is_list:
        node.setdefault(leaf, []).append(value)
    else:
        node[leaf] = value


def _suggest(path: str, table: Dict[str, FieldType]) -> Optional[str]:
    segments = sorted({part for key in table for part in key.split(FIELD_SEP)})
    last = path.split(FIELD_SEP)[-1]
    matches = difflib.get_close_matches(last, segments, n=1)
    return matches[0] if matches else None


def split_kv(arg: str) -> Tuple[str, Optional[str]]:
    """Split 'key=value' at the first '='; a bare key has no value."""
    key, sep, value = arg.partition("=")
    return key, (value if sep else None)


def build_request(model: type, args: List[str]) -> Tuple[Any, List[InvalidField]]:
    """
    Build a request object of type `model` from `-r` arguments.

    Returns:
        (request or None, list of problems); the request is None when any
        argument was rejected
    """
    table = request_fields(model)
    cursor = FieldCursor()
    body: Dict[str, Any] = {}
    problems: List[InvalidField] = []

    for arg in args:
        key, value = split_kv(arg)
        target = cursor.copy()
        try:
            target.set(key)
        except InvalidField as e:
            problems.append(e)
            continue
        if value is None:
            cursor = target
            continue

        path = str(target)
        field_type = table.get(path)
        if field_type is None:
            problems.append(InvalidField(path, suggestion=_suggest(path, table)))
            continue
        try:
            _assign(body, field_type, _parse_scalar(path, value, field_type.scalar))
        except InvalidField as e:
            problems.append(e)

    if problems:
        return None, problems
    logger.debug(f"Request body for {model.__name__}: {body}")
    return model.model_validate(body), []
