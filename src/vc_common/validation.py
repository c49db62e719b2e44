"""Field-level validation rules.

``EachPositive`` plugs into pydantic models:

    class CreateOrderRequest(BaseModel):
        video_ids: EachPositive

``validate_fields`` runs the same predicates imperatively against a plain
mapping, keyed by field name, and reports one message per failing field.
"""

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Annotated, Any

from pydantic import AfterValidator

EACH_POSITIVE_MESSAGE = "List contains not positive value"


def is_each_positive(values: list[int] | None) -> bool:
    """None and [] are valid; any element <= 0 invalidates the whole list."""
    if values is None:
        return True
    return all(v > 0 for v in values)


def check_each_positive(values: list[int] | None) -> list[int] | None:
    if not is_each_positive(values):
        raise ValueError(EACH_POSITIVE_MESSAGE)
    return values


EachPositive = Annotated[list[int] | None, AfterValidator(check_each_positive)]


@dataclass(frozen=True)
class FieldRule:
    predicate: Callable[[Any], bool]
    message: str


EACH_POSITIVE = FieldRule(predicate=is_each_positive, message=EACH_POSITIVE_MESSAGE)


def validate_fields(
    payload: Mapping[str, Any], rules: Mapping[str, FieldRule]
) -> dict[str, str]:
    """Return {field: message} for every rule whose predicate fails.

    A field missing from the payload is checked as None; "required" is not
    this table's concern.
    """
    violations: dict[str, str] = {}
    for name, rule in rules.items():
        if not rule.predicate(payload.get(name)):
            violations[name] = rule.message
    return violations
