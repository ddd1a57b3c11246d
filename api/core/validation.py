"""
Request validation shared by the feature services.

Request bodies arrive as camelCase JSON objects and are validated by the
`Payload` models in each feature's `schemas.py`. Validation is fail-fast and
reports only the first violated rule, always as a 400:

1. body is a JSON object
2. required strings (create) / present strings must stay non-empty (update)
3. slug format
4. optional field types, when present
5. server-owned fields (update only)

Steps 1, 2 and 5 run in `Payload._fail_fast`; steps 3 and 4 are ordinary
pydantic field validation, reported in field declaration order, so payload
models declare their required fields first.
"""

from __future__ import annotations

import re
from typing import Annotated, Any, ClassVar, TypeVar

from fastapi import HTTPException, status
from pydantic import (
    AfterValidator,
    BaseModel,
    ConfigDict,
    Field,
    StrictInt,
    StrictStr,
    StringConstraints,
    ValidationError,
    model_validator,
)
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError

from .sql import INT4_MAX, INT4_MIN

SLUG_PATTERN = r"^[a-z0-9\-_]+$"
SLUG_MESSAGE = "Slug must contain only lowercase letters, numbers, hyphens, and underscores"

# Stored trimmed. Optional text that is blank after trimming is stored as NULL.
Text = Annotated[str, StringConstraints(strict=True, strip_whitespace=True)]
OptionalText = Annotated[Text | None, AfterValidator(lambda value: value or None)]
Slug = Annotated[str, StringConstraints(strict=True, pattern=SLUG_PATTERN)]
Int32 = Annotated[StrictInt, Field(ge=INT4_MIN, le=INT4_MAX)]
TextList = list[StrictStr]

_PAYLOAD_ERROR = "payload"

# pydantic error type -> message, for field-level failures.
_TYPE_MESSAGES = {
    "string_type": "{label} must be a string",
    "string_pattern_mismatch": SLUG_MESSAGE,
    "int_type": "{label} must be an integer",
    "greater_than_equal": "{label} must be an integer",
    "less_than_equal": "{label} must be an integer",
    "bool_type": "{label} must be a boolean",
    "list_type": "{label} must be an array of strings",
}

P = TypeVar("P", bound="Payload")


def bad_request(message: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=message)


def field_label(name: str) -> str:
    # "thumbnailUrl" -> "ThumbnailUrl"
    return name[:1].upper() + name[1:]


def is_slug(value: Any) -> bool:
    return isinstance(value, str) and re.fullmatch(SLUG_PATTERN, value) is not None


def _payload_error(message: str) -> PydanticCustomError:
    return PydanticCustomError(_PAYLOAD_ERROR, "{message}", {"message": message})


def _non_empty_string(value: Any) -> bool:
    return isinstance(value, str) and value.strip() != ""


class Payload(BaseModel):
    """
    Base for request bodies.

    Subclasses list their required string fields (`required_fields`, field
    names) and, for updates, the camelCase keys clients may not send
    (`system_fields`). `partial = True` turns required fields into "must stay
    non-empty when present". Unknown keys are ignored.
    """

    model_config = ConfigDict(alias_generator=to_camel, extra="ignore")

    required_fields: ClassVar[tuple[str, ...]] = ()
    system_fields: ClassVar[tuple[str, ...]] = ()
    partial: ClassVar[bool] = False

    @model_validator(mode="wrap")
    @classmethod
    def _fail_fast(cls, data: Any, handler: Any) -> Any:
        if not isinstance(data, dict):
            raise _payload_error("Request body must be a JSON object")

        for name in cls.required_fields:
            key = cls.model_fields[name].alias or name
            if cls.partial:
                if key in data and not _non_empty_string(data[key]):
                    raise _payload_error(f"{field_label(key)} must be a non-empty string")
            elif not _non_empty_string(data.get(key)):
                raise _payload_error(f"{field_label(key)} is required and must be a non-empty string")

        model = handler(data)

        if any(key in data for key in cls.system_fields):
            raise _payload_error(f"Cannot update system fields ({', '.join(cls.system_fields)})")
        return model


def payload_message(exc: ValidationError) -> str:
    """
    Single client-facing message for the first error pydantic reported.
    """
    errors = exc.errors()
    if not errors:
        return "Invalid request body"
    first = errors[0]
    if first["type"] == _PAYLOAD_ERROR:
        return first["msg"]

    loc = first.get("loc", ())
    label = field_label(str(loc[0])) if loc else "Request body"
    if len(loc) > 1:
        # An element inside a list field.
        return f"{label} must be an array of strings"
    template = _TYPE_MESSAGES.get(first["type"], "{label} is invalid")
    return template.format(label=label)


def parse_payload(model: type[P], body: Any) -> P:
    try:
        return model.model_validate(body)
    except ValidationError as exc:
        raise bad_request(payload_message(exc)) from None


def _is_integer_text(text: str, *, signed: bool) -> bool:
    digits = text[1:] if signed and text.startswith("-") else text
    return digits.isascii() and digits.isdigit()


def parse_id(raw: str, *, label: str) -> int:
    """
    Parse a path id. Ids are int4 serials: anything but 1..2147483647 is a 400.
    """
    text = (raw or "").strip()
    if not _is_integer_text(text, signed=False) or len(text) > 10 or not 1 <= int(text) <= INT4_MAX:
        raise bad_request(f"Invalid {label} ID")
    return int(text)


def parse_int_param(
    raw: str | None,
    *,
    default: int | None,
    message: str,
    minimum: int | None = None,
    maximum: int | None = None,
) -> int | None:
    text = (raw or "").strip()
    if not text:
        return default
    if not _is_integer_text(text, signed=True):
        raise bad_request(message)
    try:
        value = int(text)
    except ValueError:
        # Longer than the interpreter converts from str.
        raise bad_request(message) from None
    if (minimum is not None and value < minimum) or (maximum is not None and value > maximum):
        raise bad_request(message)
    return value
