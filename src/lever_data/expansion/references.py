"""
Resolvers for expandable relationship fields.

Lever returns related records (stages, users, postings, ...) as bare ID strings
by default and as embedded objects when the request carries expand=<field>.
The resolvers below accept either wire shape and return both views.
Payloads are decoded JSON values, or undecoded JSON text passed as bytes:

    resolve_reference(b'"8d49b010"', Stage, field="stage")
        -> ("8d49b010", None)
    resolve_reference("8d49b010", Stage, field="stage")
        -> ("8d49b010", None)
    resolve_reference({"id": "8d49b010", "text": "Interview"}, Stage, field="stage")
        -> ("8d49b010", Stage(id="8d49b010", text="Interview"))

The embedded-object decode is always attempted first, then the ID decode.
Anything that is neither raises ExpansionError.
"""

from typing import Any, Callable, Optional

from pydantic import BaseModel, StrictStr, TypeAdapter, ValidationError
from pydantic_core import from_json

from lever_data.errors import ExpansionError

Projector = Callable[[Any], Any]

_ID = TypeAdapter(StrictStr)
_IDS = TypeAdapter(list[StrictStr])


def decode_payload(payload: Any, field: str) -> Any:
    """
    Return the JSON value of a payload, or None when it is absent.
    bytes are undecoded JSON text (blank means absent); other values are already decoded.
    """
    if isinstance(payload, (bytes, bytearray, memoryview)):
        text = bytes(payload).strip()
        if not text:
            return None
        try:
            return from_json(text)
        except ValueError as e:
            raise ExpansionError(field, f"invalid JSON: {e}") from e
    return payload


def _project(obj: BaseModel, project: Optional[Projector], field: str) -> Any:
    if project is None:
        return obj
    try:
        return project(obj)
    except ExpansionError as e:
        raise e.within(field) from e


def _validate_objects(value: Any, shape: type[BaseModel]) -> list[BaseModel]:
    if not isinstance(value, list):
        raise ValueError(f"expected a list, got {type(value).__name__}")
    return [shape.model_validate(item) for item in value]


def resolve_reference(
    payload: Any,
    shape: type[BaseModel],
    *,
    field: str,
    project: Optional[Projector] = None,
) -> tuple[str, Optional[Any]]:
    """
    Resolve a field holding one ID or one embedded record.

    Returns (id, record). Absent payload gives ("", None); an ID string gives
    (id, None); an embedded record gives (record.id, record). When project is
    set, the validated shape is passed through it (nested records with their
    own expandable fields) and its errors surface with this field's path.
    """
    value = decode_payload(payload, field)
    if value is None:
        return "", None

    try:
        obj = shape.model_validate(value)
    except ValidationError:
        try:
            return _ID.validate_python(value), None
        except ValidationError as e:
            raise ExpansionError(
                field, f"expected an ID string or a {shape.__name__} object"
            ) from e

    record = _project(obj, project, field)
    return record.id, record


def resolve_references(
    payload: Any,
    shape: type[BaseModel],
    *,
    field: str,
    project: Optional[Projector] = None,
) -> tuple[list[str], list[Any]]:
    """
    Resolve a field holding a list of IDs or a list of embedded records.

    Returns (ids, records), both in wire order. Absent payload gives ([], []);
    a list of ID strings gives (ids, []). Lists mixing IDs and records are rejected.
    """
    value = decode_payload(payload, field)
    if value is None:
        return [], []

    try:
        objs = _validate_objects(value, shape)
    except ValueError:
        try:
            return _IDS.validate_python(value), []
        except ValidationError as e:
            raise ExpansionError(
                field, f"expected a list of ID strings or a list of {shape.__name__} objects"
            ) from e

    records = [_project(obj, project, f"{field}[{i}]") for i, obj in enumerate(objs)]
    return [r.id for r in records], records
