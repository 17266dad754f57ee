"""
Request body validation shared by the stores.

Each resource declares its fields as ``{json_key: (column, parser)}``. A
parser takes the raw JSON value and returns the value to store, raising
ValidationError when the value has the wrong shape.
"""
import re
from datetime import datetime, timezone
from typing import Callable, Dict, Iterable, Tuple

from .errors import ValidationError, InvalidIdentifier

RECORD_ID_PATTERN = re.compile(r'^[0-9a-f]{24}$')

# Signed 64-bit integer column range
INT_MIN = -2 ** 63
INT_MAX = 2 ** 63 - 1

FieldSpec = Dict[str, Tuple[str, Callable]]


def check_record_id(record_id) -> str:
    if not isinstance(record_id, str) or not RECORD_ID_PATTERN.match(record_id):
        raise InvalidIdentifier(record_id)
    return record_id


def text(key: str) -> Callable:
    def parse(value):
        if not isinstance(value, str) or not value.strip():
            raise ValidationError(f"{key} must be a non-empty string", field=key)
        return value
    return parse


def integer(key: str) -> Callable:
    def parse(value):
        # bool is an int subclass; reject it explicitly
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValidationError(f"{key} must be an integer", field=key)
        if not INT_MIN <= value <= INT_MAX:
            raise ValidationError(f"{key} is out of range", field=key)
        return value
    return parse


def boolean(key: str) -> Callable:
    def parse(value):
        if not isinstance(value, bool):
            raise ValidationError(f"{key} must be a boolean", field=key)
        return value
    return parse


def timestamp(key: str) -> Callable:
    def parse(value):
        if not isinstance(value, str):
            raise ValidationError(f"{key} must be an ISO-8601 date string", field=key)
        try:
            parsed = datetime.fromisoformat(value.replace('Z', '+00:00'))
        except ValueError:
            raise ValidationError(f"{key} must be an ISO-8601 date string", field=key)
        # Stored naive, in UTC
        if parsed.tzinfo is not None:
            parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
        return parsed
    return parse


def id_list(key: str) -> Callable:
    def parse(value):
        if value is None:
            return []
        if not isinstance(value, list):
            raise ValidationError(f"{key} must be an array of ids", field=key)
        for item in value:
            try:
                check_record_id(item)
            except InvalidIdentifier:
                raise ValidationError(f"{key} contains an invalid id: {item!r}", field=key)
        return list(value)
    return parse


def require_object(data) -> dict:
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object")
    return data


def parse_fields(data: dict, fields: FieldSpec, required: Iterable[str] = ()) -> dict:
    """
    Parse the known keys present in ``data`` into column values.

    Unknown keys are ignored. Keys listed in ``required`` must be present
    and not null.
    """
    data = require_object(data)
    missing = [key for key in required if data.get(key) is None]
    if missing:
        raise ValidationError(
            f"Missing required fields: {', '.join(missing)}",
            field=missing[0]
        )

    values = {}
    for key, (column, parser) in fields.items():
        if key in data:
            values[column] = parser(data[key])
    return values
