"""Builds the response envelope every endpoint returns.

Shape: {"success": bool, "data"?: ..., "message"?: str, "count"?: int}
Keys are only present when the outcome carries them.
"""
from typing import Any, Optional

from pydantic import BaseModel

_UNSET = object()


def _serialize(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump(by_alias=True)
    if isinstance(value, (list, tuple)):
        return [_serialize(v) for v in value]
    return value


def build_envelope(success: bool, data: Any = _UNSET, message: Optional[str] = None,
                   count: Optional[int] = None) -> dict:
    envelope = {"success": success}
    if data is not _UNSET:
        envelope["data"] = _serialize(data)
    if message is not None:
        envelope["message"] = message
    if count is not None:
        envelope["count"] = count
    return envelope


def with_data(data: Any, message: Optional[str] = None) -> dict:
    """Single record, optionally with a confirmation message."""
    return build_envelope(True, data=data, message=message)


def with_collection(records: list, count: int) -> dict:
    return build_envelope(True, data=records, count=count)


def with_message(message: str) -> dict:
    return build_envelope(True, message=message)


def failure(message: str) -> dict:
    """Not-found, validation and internal faults all share this shape."""
    return build_envelope(False, message=message)
