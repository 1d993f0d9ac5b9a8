"""
Contains functionality to analyze a form shape and the result of a validation process
"""
from typing import Any, Mapping, Optional

from .errors import ValidatorNotFoundError
from .types import UnpackedErrors, ValidationResult
from .utils.key_path import is_numeric_segment, is_sequence, lookup_segment
from .validators.base import BaseValidator


def _field_validator(validator: BaseValidator, segment: str, key_path: str) -> BaseValidator:
    if validator.fields is None or segment not in validator.fields:
        raise ValidatorNotFoundError(key_path)
    return validator.fields[segment]


def find_validator(key_path: str, shape: BaseValidator) -> BaseValidator:
    """
    Returns the validator responsible for the field at `key_path`. Inside arrays numeric segments address the item
    validator, non-numeric ones the fields of the item validator. So both ``people.0.name`` and ``people.name``
    resolve to the validator of the name field.
    A ValidatorNotFoundError will be raised if a segment has no corresponding field.
    """
    validator = shape
    for segment in key_path.split("."):
        if validator.of is not None:
            if is_numeric_segment(segment):
                validator = validator.of
            else:
                validator = _field_validator(validator.of, segment, key_path)
        else:
            validator = _field_validator(validator, segment, key_path)
    return validator


def find_validator_and_siblings(key_path: str, shape: BaseValidator, values: Any) -> tuple[BaseValidator, Any]:
    """
    Returns the validator responsible for the field at `key_path` together with the container holding that field
    within `values`. This is what has to be passed as `siblings` when the field is validated on its own.
    Unlike `find_validator`, every segment below an array descends into the item validator, so the path has to
    address array entries by index. ``people.name`` therefore resolves to the person validator, not the name field.
    """
    validator = shape
    siblings = values
    last_siblings = siblings
    for segment in key_path.split("."):
        last_siblings = siblings
        siblings = lookup_segment(siblings, segment, None)
        if validator.of is not None:
            validator = validator.of
        else:
            validator = _field_validator(validator, segment, key_path)
    return validator, last_siblings


def unpack_errors(result: ValidationResult) -> UnpackedErrors:
    """
    Converts a validation result into a tree of error messages. Only failing branches are kept: object fields by name,
    array entries by their index. A successful result yields an empty dict.
    """
    success, payload = result
    if success:
        return {}
    if isinstance(payload, Mapping):
        return {name: unpack_errors(sub_result) for name, sub_result in payload.items() if not sub_result[0]}
    if is_sequence(payload):
        return {index: unpack_errors(sub_result) for index, sub_result in enumerate(payload) if not sub_result[0]}
    return payload


def _flatten(errors: UnpackedErrors, prefix: str, target: dict[str, str]) -> None:
    if isinstance(errors, Mapping):
        for key, sub_errors in errors.items():
            _flatten(sub_errors, f"{prefix}.{key}" if prefix else str(key), target)
    else:
        target[prefix] = errors


class ValidationReport:
    """
    Wraps the result of `validate` and provides properties for further analysis. Note that the values are calculated
    only if you use them.
    """

    def __init__(self, result: ValidationResult):
        self._result = result
        self._errors: Optional[UnpackedErrors] = None
        self._error_paths: Optional[dict[str, str]] = None

    @property
    def result(self) -> ValidationResult:
        """The wrapped validation result"""
        return self._result

    @property
    def is_valid(self) -> bool:
        """True if the validation succeeded"""
        return self._result[0] is True

    @property
    def value(self) -> Any:
        """The validated (and possibly mutated) value, None if the validation failed"""
        return self._result[1] if self.is_valid else None

    @property
    def errors(self) -> UnpackedErrors:
        """The unpacked errors (see `unpack_errors`)"""
        if self._errors is None:
            self._errors = unpack_errors(self._result)
        return self._errors

    @property
    def error_paths(self) -> dict[str, str]:
        """
        Maps the dotted key path of each failing leaf to its message, e.g. ``{"people.1.name": "This field is
        required"}``. A failing scalar at the top level is stored under the empty path.
        """
        if self._error_paths is None:
            self._error_paths = {}
            if not self.is_valid:
                _flatten(self.errors, "", self._error_paths)
        return self._error_paths

    @property
    def num_errors(self) -> int:
        """Number of failing leaves"""
        return len(self.error_paths)

    def error_for(self, key_path: str) -> Optional[str]:
        """Returns the message of the failing leaf at `key_path`, None if that field has no error"""
        return self.error_paths.get(key_path)

    def has_error(self, key_path: str) -> bool:
        """True if the field at `key_path` or any field nested within it failed"""
        prefix = key_path + "."
        return any(path == key_path or path.startswith(prefix) for path in self.error_paths)
