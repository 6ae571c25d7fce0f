# server/core/validation.py

from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar
from pydantic import BaseModel, ValidationError as PydanticValidationError


T = TypeVar("T", bound=BaseModel)


@dataclass
class ValidationResult(Generic[T]):
    """
    Outcome of validating a request body: either `value` or a non-empty `errors` list.
    """
    value: T | None = None
    errors: list[dict] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors

    @property
    def message(self) -> str:
        return summarize_errors(self.errors)


def summarize_errors(errors: list[dict]) -> str:
    """
    Renders errors as one readable line, e.g.
    'Validation error: Field required at "name"; List should have at least 1 item at "coreValues"'
    """
    parts = []
    for err in errors:
        if err.get("field"):
            parts.append(f'{err["message"]} at "{err["field"]}"')
        else:
            parts.append(err["message"])
    return "Validation error: " + "; ".join(parts)


def validate(schema: type[T], data: Any) -> ValidationResult[T]:
    try:
        return ValidationResult(value=schema.model_validate(data))
    except PydanticValidationError as e:
        errors = [
            {"field": ".".join(str(p) for p in err["loc"]), "message": err["msg"]}
            for err in e.errors()
        ]
        return ValidationResult(errors=errors)
