"""
Contains functions to read and write values of nested form data using dotted key paths like ``people.0.name``.
Mappings are indexed by the segment itself, sequences by the segment interpreted as an integer.
"""
from typing import Any, Mapping, Optional, Sequence

from formshape.errors import KeyNotFoundError

_MISSING = object()


def is_sequence(value: Any) -> bool:
    """
    Returns True for list-like values. Strings and bytes are not treated as sequences.
    """
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray))


def is_numeric_segment(segment: str) -> bool:
    """Returns True if the key path segment addresses a sequence index"""
    return segment.isdigit()


def lookup_segment(container: Any, segment: str, default: Any = _MISSING) -> Any:
    """
    Returns the child of `container` addressed by a single key path segment. If the child is absent `default` is
    returned, or a KeyError is raised if no default was given. A child that is present but falsy counts as present.
    """
    if isinstance(container, Mapping):
        if segment in container:
            return container[segment]
        # unpacked error trees key array entries by int
        if is_numeric_segment(segment) and int(segment) in container:
            return container[int(segment)]
    elif is_sequence(container) and is_numeric_segment(segment):
        index = int(segment)
        if index < len(container):
            return container[index]
    if default is _MISSING:
        raise KeyError(segment)
    return default


def get_field_value_from_key_string(key_path: str | int, values: Any) -> Any:
    """
    Walks `values` along the dot separated `key_path` and returns the value found at its end.
    If any segment is absent a KeyNotFoundError will be raised.
    """
    current_value: Any = values
    for segment in str(key_path).split("."):
        try:
            current_value = lookup_segment(current_value, segment)
        except KeyError as error:
            raise KeyNotFoundError(key_path) from error
    return current_value


def optional_field_value(key_path: str | int, values: Any, default: Optional[Any] = None) -> Any:
    """
    Like `get_field_value_from_key_string` but returns `default` instead of raising if the path can't be resolved.
    """
    try:
        return get_field_value_from_key_string(key_path, values)
    except KeyNotFoundError:
        return default


def _empty_container_for(segment: str) -> dict[str, Any] | list[Any]:
    return [] if is_numeric_segment(segment) else {}


def _set_deep_value(value: Any, segments: list[str], index: int, old_values: Any, key_path: str) -> Any:
    """
    Returns a copy of `old_values` in which the element addressed by ``segments[index:]`` is replaced by `value`.
    Only the containers on the path are copied, everything else is shared with `old_values`.
    """
    segment = segments[index]
    is_last = index == len(segments) - 1
    if isinstance(old_values, Mapping):
        ret: Any = dict(old_values)
        old_child = old_values.get(segment, _MISSING)
        if is_last:
            ret[segment] = value
        elif old_child is _MISSING or old_child is None:
            ret[segment] = _set_deep_value(
                value, segments, index + 1, _empty_container_for(segments[index + 1]), key_path
            )
        else:
            ret[segment] = _set_deep_value(value, segments, index + 1, old_child, key_path)
        return ret
    if is_sequence(old_values):
        if not is_numeric_segment(segment):
            raise KeyNotFoundError(key_path)
        ret = list(old_values)
        position = int(segment)
        if position >= len(ret):
            ret.extend([None] * (position + 1 - len(ret)))
        old_child = ret[position]
        if is_last:
            ret[position] = value
        elif old_child is None:
            ret[position] = _set_deep_value(
                value, segments, index + 1, _empty_container_for(segments[index + 1]), key_path
            )
        else:
            ret[position] = _set_deep_value(value, segments, index + 1, old_child, key_path)
        return ret
    raise KeyNotFoundError(key_path)


def set_field_value_from_key_string(key_path: str | int, value: Any, old_values: Any) -> Any:
    """
    Returns a new value tree in which the value at `key_path` is replaced by `value`. `old_values` and all of its
    nested containers are left untouched. Missing intermediate containers are created: a list if the following
    segment is numeric, a dict otherwise.
    A KeyNotFoundError will be raised if the path runs into a scalar value.
    """
    key_path = str(key_path)
    return _set_deep_value(value, key_path.split("."), 0, old_values, key_path)
