"""
Contains the merging of user supplied initial values into the default values derived from a form shape.
"""
import logging
from typing import Any, Iterable, Mapping, Optional

from .analysis import find_validator
from .errors import ValidatorNotFoundError
from .types import ValueType
from .utils.key_path import is_sequence
from .validators.base import BaseValidator

_logger = logging.getLogger(__name__)


def _items(values: Any) -> Iterable[tuple[Any, Any]]:
    if isinstance(values, Mapping):
        return values.items()
    return enumerate(values)


def _copy_container(values: Any) -> dict[Any, Any] | list[Any]:
    if isinstance(values, Mapping):
        return dict(values)
    return list(values)


def _get(container: dict[Any, Any] | list[Any], key: Any) -> Any:
    if isinstance(container, dict):
        return container.get(key)
    return container[key] if key < len(container) else None


def _set(container: dict[Any, Any] | list[Any], key: Any, value: Any) -> None:
    if isinstance(container, list) and key >= len(container):
        container.extend([None] * (key + 1 - len(container)))
    container[key] = value


def _item_validator(key_path: str, shape: Optional[BaseValidator]) -> Optional[BaseValidator]:
    if shape is None:
        return None
    try:
        return find_validator(key_path, shape).of
    except ValidatorNotFoundError:
        _logger.debug("No array validator found for '%s', user supplied entries are taken as they are", key_path)
        return None


def _grow(defaults: list[Any], length: int, item_validator: Optional[BaseValidator]) -> list[Any]:
    """Appends default entries until `defaults` has at least `length` entries"""
    grown = list(defaults)
    while len(grown) < length:
        grown.append(item_validator.get_default_value() if item_validator is not None else None)
    return grown


def complete_default_values(
    validator_defaults: Mapping[str, Any] | list[Any],
    user_defaults: Mapping[str, Any] | list[Any],
    shape: Optional[BaseValidator] = None,
    key_path: Optional[str] = None,
) -> ValueType:
    """
    Merges `user_defaults` over `validator_defaults` (usually ``shape.get_default_value()``) and returns the merged
    tree. Neither argument is modified.
    User supplied arrays that are longer than the derived default arrays are padded with default entries of the
    array's item validator (looked up in `shape`), so that every entry is complete. None values in `user_defaults`
    keep the derived default.
    """
    ret = _copy_container(validator_defaults)
    for key, value in _items(user_defaults):
        this_key_path = str(key) if key_path is None else f"{key_path}.{key}"
        if value is None:
            continue
        current = _get(ret, key)
        if is_sequence(value):
            if not is_sequence(current):
                current = []
            if len(current) < len(value):
                current = _grow(current, len(value), _item_validator(this_key_path, shape))
            _set(ret, key, complete_default_values(current, value, shape, this_key_path))
        elif isinstance(value, Mapping):
            if not isinstance(current, Mapping):
                current = {}
            _set(ret, key, complete_default_values(current, value, shape, this_key_path))
        else:
            _set(ret, key, value)
    return ret
