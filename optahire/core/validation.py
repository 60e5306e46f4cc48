"""
Field validators for user-submitted profile data.

Bounds are pydantic constraints; these helpers apply them to single values
and turn pydantic error details into messages that name the field, e.g.
"Title must be at least 3 characters long."
"""

from functools import lru_cache
from typing import Annotated, Any, Dict, List, Sequence

from pydantic import StringConstraints, TypeAdapter, ValidationError, conlist


class FieldValidationError(ValueError):
    """A field value falls outside its length or cardinality bounds."""

    def __init__(self, field: str, message: str):
        super().__init__(message)
        self.field = field
        self.message = message


class MissingFieldsError(ValueError):
    """One or more required fields were not provided."""

    def __init__(self, fields: List[str]):
        self.fields = fields
        self.message = f"Missing required fields: {', '.join(fields)}"
        super().__init__(self.message)


def _plural(count: int, noun: str) -> str:
    return f"{count} {noun}" if count == 1 else f"{count} {noun}s"


def describe_error(error: Dict[str, Any], label: str) -> str:
    """
    Build a readable message from one pydantic error entry.

    Args:
        error: An item of ValidationError.errors()
        label: Display name of the field, e.g. "Skills"
    """
    error_type = error.get("type")
    ctx = error.get("ctx") or {}

    if error_type == "string_too_short":
        return f"{label} must be at least {_plural(ctx['min_length'], 'character')} long."
    if error_type == "string_too_long":
        return f"{label} must be at most {_plural(ctx['max_length'], 'character')} long."
    if error_type == "too_short":
        return f"{label} must contain at least {_plural(ctx['min_length'], 'item')}."
    if error_type == "too_long":
        return f"{label} must contain at most {_plural(ctx['max_length'], 'item')}."
    if error_type == "value_error":
        return error.get("msg", "").removeprefix("Value error, ")

    return f"Invalid {label}: {error.get('msg', 'invalid value')}"


@lru_cache(maxsize=None)
def _string_adapter(min_len: int, max_len: int) -> TypeAdapter:
    return TypeAdapter(
        Annotated[str, StringConstraints(strip_whitespace=True, min_length=min_len, max_length=max_len)]
    )


@lru_cache(maxsize=None)
def _array_adapter(min_count: int, max_count: int) -> TypeAdapter:
    return TypeAdapter(conlist(Any, min_length=min_count, max_length=max_count))


def validate_string(value: str, field_label: str, min_len: int, max_len: int) -> str:
    """
    Strip a string and check its length against inclusive bounds.

    Returns:
        The stripped string

    Raises:
        FieldValidationError: If the stripped length is outside [min_len, max_len]
    """
    try:
        return _string_adapter(min_len, max_len).validate_python(value)
    except ValidationError as e:
        raise FieldValidationError(field_label, describe_error(e.errors()[0], field_label))


def validate_array(value: Sequence[Any], field_label: str, min_count: int, max_count: int) -> List[Any]:
    """
    Check the number of items in a list against inclusive bounds.

    Returns:
        The list unchanged

    Raises:
        FieldValidationError: If the item count is outside [min_count, max_count]
    """
    try:
        return _array_adapter(min_count, max_count).validate_python(list(value))
    except ValidationError as e:
        raise FieldValidationError(field_label, describe_error(e.errors()[0], field_label))
