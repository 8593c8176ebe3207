"""Apply patch documents to student payloads.

Patches follow the JSON Patch operation vocabulary, restricted to the
top-level fields of ``StudentDto``. Operations are applied in order to a
copy of the payload; the original is never modified.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from pydantic import ValidationError

from collegeapp.api.exceptions import PatchError, StudentValidationError
from collegeapp.api.models import PatchOp, PatchOperation, StudentDto, normalize_field_key
from collegeapp.api.validation import field_errors_from_pydantic

_FIELDS: dict[str, str] = {
    normalize_field_key(name): name for name in StudentDto.model_fields
}


def resolve_path(path: str) -> str:
    """Map a JSON pointer like ``/studentName`` to a StudentDto field name.

    Raises:
        PatchError: If the pointer does not name a single top-level field.
    """
    segments = path.split("/")[1:]
    if len(segments) != 1 or not segments[0]:
        raise PatchError(f"The target location specified by path '{path}' was not found")
    key = segments[0].replace("~1", "/").replace("~0", "~")
    try:
        return _FIELDS[normalize_field_key(key)]
    except KeyError:
        raise PatchError(f"The target location specified by path '{path}' was not found") from None


def _default(field: str) -> Any:
    return StudentDto.model_fields[field].default


def apply_patch(dto: StudentDto, operations: Sequence[PatchOperation]) -> StudentDto:
    """Apply patch operations to a copy of ``dto``.

    Args:
        dto: The payload to start from.
        operations: Operations to apply, in order.

    Returns:
        A new StudentDto with every operation applied. It has not been
        checked with ``validate_student``.

    Raises:
        PatchError: If an operation targets an unknown field or a test fails.
        StudentValidationError: If a value has the wrong type for its field.
    """
    values = dto.model_dump(mode="json")

    for operation in operations:
        target = resolve_path(operation.path)
        match operation.op:
            case PatchOp.ADD | PatchOp.REPLACE:
                values[target] = operation.value
            case PatchOp.REMOVE:
                values[target] = _default(target)
            case PatchOp.COPY:
                values[target] = values[resolve_path(operation.from_)]
            case PatchOp.MOVE:
                source = resolve_path(operation.from_)
                value = values[source]
                values[source] = _default(source)
                values[target] = value
            case PatchOp.TEST:
                if values[target] != operation.value:
                    raise PatchError(
                        f"The current value '{values[target]}' at path '{operation.path}' "
                        f"is not equal to the test value '{operation.value}'"
                    )

    try:
        return StudentDto.model_validate(values)
    except ValidationError as e:
        raise StudentValidationError(field_errors_from_pydantic(e.errors())) from e
