"""
Contains helpers shared by the validators: key path resolution on value trees and guards for developer input.
"""
from .developer_input import (
    ensure_regex_matches,
    ensure_value_is_count,
    ensure_value_is_datetime,
    ensure_value_is_numeric,
    ensure_value_is_regexp,
)
from .key_path import (
    get_field_value_from_key_string,
    is_sequence,
    optional_field_value,
    set_field_value_from_key_string,
)
