"""
Contains the types used in the validation framework
"""
from datetime import date, datetime
from typing import TYPE_CHECKING, Any, Callable, Literal, Mapping, Sequence, TypeAlias

if TYPE_CHECKING:
    from .validators.base import StepResult

ScalarValue: TypeAlias = str | int | float | bool | date | datetime | None
ValueType: TypeAlias = "ScalarValue | Mapping[str, ValueType] | Sequence[ValueType]"

ErrorPayload: TypeAlias = "str | dict[str, ValidationResult] | list[ValidationResult]"
ValidationResult: TypeAlias = "tuple[Literal[True], Any] | tuple[Literal[False], ErrorPayload]"
UnpackedErrors: TypeAlias = "str | dict[str | int, UnpackedErrors]"

CheckFunction: TypeAlias = "Callable[[Any, Any, Any], StepResult]"
"""A check-step: (value, other_values, siblings) -> StepResult"""
MutationFunction: TypeAlias = Callable[[Any, Any, Any], Any]
"""Called with (value, other_values, siblings) on success, returns the replacement value"""
ErrorFunction: TypeAlias = Callable[[Any, Any], None]
"""Called with (value, other_values) on failure, side effects only"""
ArrayCheckFunction: TypeAlias = Callable[[Sequence[Any], Any], bool]
"""Called with (allowed_values, value), decides membership"""
DependentPredicate: TypeAlias = Callable[[Any, Any], bool]
"""Called with (dependent_field_value, value)"""
Translator: TypeAlias = Callable[[str, Mapping[str, Any]], str]
"""Called with (msg_name, translation_context), returns the display message"""

InputType: TypeAlias = Literal[
    "text", "number", "radio", "radio-group", "checkbox", "select", "datetime-local", "date", "tel", "email"
]
