"""Payload Validation — run a schema, collect every violation into ValidationFailure.

Invariants:
    - Never fail-fast: all field errors Pydantic reports are surfaced together
    - Field paths use wire (alias) names joined by "." (e.g. "estimatedHours")
    - Validation is pure: no IO, the only side effect is a WARNING log line

Design Decisions:
    - Wrap pydantic.ValidationError instead of leaking it: callers handle one
      error kind (ValidationFailure) regardless of which schema rejected input
"""

import logging
from typing import Any, Mapping, TypeVar

from pydantic import BaseModel, ValidationError

from batcave.core.errors import ErrorContext, FieldError, ValidationFailure

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


def field_errors(exc: ValidationError) -> list[FieldError]:
    """Flatten a Pydantic ValidationError into FieldError records."""
    return [
        FieldError(
            field=".".join(str(loc) for loc in e["loc"]) or "payload",
            message=e["msg"],
            type=e["type"],
        )
        for e in exc.errors()
    ]


def validate_payload(
    schema: type[ModelT],
    data: Mapping[str, Any] | Any,
    context: ErrorContext | None = None,
) -> ModelT:
    """Validate data against schema or raise ValidationFailure with all errors."""
    try:
        return schema.model_validate(data)
    except ValidationError as e:
        errors = field_errors(e)
        logger.warning(
            f"{schema.__name__} rejected input: "
            f"{', '.join(err.field for err in errors)}",
            extra={"schema": schema.__name__, "error_count": len(errors)},
        )
        raise ValidationFailure(errors, schema.__name__, context) from e
