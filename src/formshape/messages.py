"""
Contains the message catalog. Every failing check-step is identified by a stable message name plus a context mapping
(e.g. ``("min_number", {"num": 3})``). The catalog turns this identity into a display message, either through a
registered translator or by filling the ``{{placeholder}}`` slots of a template.
"""
from typing import Any, Mapping, Optional

from frozendict import frozendict

from .types import Translator

GENERIC_ERROR_MSG = "There is an error within this field"

DEFAULT_MESSAGES: frozendict[str, str] = frozendict(
    {
        "required": "This field is required",
        "always_false": "This validator will never return true",
        "array": "This field has to be an array",
        "object": "This field has to be an object",
        "any_of": "None of the available validators match",
        "greater_than": "This value must be greater than the value of {{name}}",
        "less_than": "This value must be less than the value of {{name}}",
        "greater_or_equal_to": "This value must be greater than or equal to the value of {{name}}",
        "less_or_equal_to": "This value must be less than or equal to the value of {{name}}",
        "greater_than_sibling": "This value must be greater than the value of its sibling {{name}}",
        "less_than_sibling": "This value must be less than the value of its sibling {{name}}",
        "greater_or_equal_to_sibling": "This value must be greater than or equal to the value of its sibling {{name}}",
        "less_or_equal_to_sibling": "This value must be less than or equal to the value of its sibling {{name}}",
        "one_of_array_field_values": "This value is not allowed.",
        "one_of_array_sibling_field_values": "This value is not allowed.",
        "one_of": "This value must be one of these: {{allowed}}",
        "min_length_array": "There must be at least {{num}} entries for this",
        "max_length_array": "There must be at most {{num}} entries for this",
        "length_range_array": "There must be between {{min}} and {{max}} entries for this",
        "boolean": "This field has to be a boolean",
        "date_time": "This field must contain a date/time",
        "date": "This field must contain a date",
        "min_date": "This date must be at least {{date}}",
        "max_date": "This date must be {{date}} at the latest",
        "date_range": "This date must be between {{minDate}} and {{maxDate}}",
        "greater_than_date": "This date must be after the value for {{name}}",
        "less_than_date": "This date must be before the value for {{name}}",
        "greater_or_equal_to_date": "This date must be at least the value for {{name}}",
        "less_or_equal_to_date": "This date must be the value of {{name}} at the latest",
        "greater_than_sibling_date": "This date must be after the value for its sibling {{name}}",
        "less_than_sibling_date": "This date must be before the value for its sibling {{name}}",
        "greater_or_equal_to_sibling_date": "This date must be at least the value for its sibling {{name}}",
        "less_or_equal_to_sibling_date": "This date must be the value of its sibling {{name}} at the latest",
        "email": "This must be a valid email address",
        "number": "This field must be a number",
        "whole_number": "This field must be a whole number",
        "min_number": "This value must be at least {{num}}",
        "max_number": "This value must be at most {{num}}",
        "positive": "This value must be positive",
        "negative": "This value must be negative",
        "number_range": "This value must be between {{min}} and {{max}}",
        "regex": "This value is malformed",
        "min_length_string": "This string must be at least {{num}} characters long",
        "max_length_string": "This string must be no longer than {{num}} characters",
        "length_range_string": "This string must be between {{min}} and {{max}} characters long",
    }
)


def fill_placeholders(template: str, context: Optional[Mapping[str, Any]] = None) -> str:
    """
    Replaces every ``{{key}}`` in `template` by the string representation of ``context[key]``.
    This is a plain substring replacement, unknown placeholders are left as they are.
    """
    if not context:
        return template
    for key, value in context.items():
        template = template.replace("{{" + key + "}}", str(value))
    return template


class MessageCatalog:
    """
    Process wide registry of message templates and the optional translator.
    Configure it once at start up, before validating, e.g.:
    ```
    catalog.register({"required": "Bitte ausfüllen"})
    catalog.set_translator(lambda msg_name, context: my_i18n.t(f"forms:{msg_name}", **context))
    ```
    """

    def __init__(self):
        self._templates: dict[str, str] = dict(DEFAULT_MESSAGES)
        self._translator: Optional[Translator] = None

    @property
    def translator(self) -> Optional[Translator]:
        """The translator used to render messages, None if the templates are used directly"""
        return self._translator

    def register(self, templates: Mapping[str, str]) -> None:
        """
        Adds or overrides message templates.
        """
        self._templates.update(templates)

    def set_translator(self, translator: Optional[Translator]) -> None:
        """
        Installs a translator. Pass None to fall back to the templates.
        """
        self._translator = translator

    def reset(self) -> None:
        """
        Restores the built-in templates and removes the translator.
        """
        self._templates = dict(DEFAULT_MESSAGES)
        self._translator = None

    def template(self, msg_name: str) -> Optional[str]:
        """Returns the raw template registered for `msg_name`"""
        return self._templates.get(msg_name)

    def render(self, msg_name: Optional[str], context: Optional[Mapping[str, Any]] = None) -> Optional[str]:
        """
        Renders the message for `msg_name`. Returns None if there is neither a translator nor a template for it.
        """
        if not msg_name:
            return None
        if self._translator is not None:
            return self._translator(msg_name, context or {})
        template = self._templates.get(msg_name)
        if template is None:
            return None
        return fill_placeholders(template, context)


catalog = MessageCatalog()
