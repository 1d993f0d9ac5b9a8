from typing import Any, Mapping

import pytest

from formshape import (
    DEFAULT_MESSAGES,
    ArrayValidator,
    MessageCatalog,
    NumberValidator,
    StringValidator,
    catalog,
    fill_placeholders,
)


class TestFillPlaceholders:
    @pytest.mark.parametrize(
        "template, context, expected",
        [
            pytest.param("At least {{num}}", {"num": 3}, "At least 3", id="single"),
            pytest.param("{{min}} to {{max}}", {"min": 1, "max": 2}, "1 to 2", id="multiple"),
            pytest.param("{{num}} and {{num}}", {"num": 3}, "3 and 3", id="repeated"),
            pytest.param("{{other}}", {"num": 3}, "{{other}}", id="unknown placeholder"),
            pytest.param("plain", None, "plain", id="no context"),
        ],
    )
    def test_fill(self, template: str, context: Mapping[str, Any] | None, expected: str):
        assert fill_placeholders(template, context) == expected


class TestMessageCatalog:
    def test_defaults(self):
        fresh_catalog = MessageCatalog()
        assert fresh_catalog.template("required") == "This field is required"
        assert fresh_catalog.render("min_number", {"num": 3}) == "This value must be at least 3"
        assert fresh_catalog.translator is None

    def test_unknown_messages(self):
        assert MessageCatalog().render("no_such_message") is None
        assert MessageCatalog().render(None) is None

    def test_default_messages_are_immutable(self):
        with pytest.raises(TypeError):
            DEFAULT_MESSAGES["required"] = "changed"  # type:ignore[index]

    def test_register(self):
        catalog.register({"required": "Bitte ausfüllen", "min_number": "Mindestens {{num}}"})
        assert StringValidator().required().validate("") == (False, "Bitte ausfüllen")
        assert NumberValidator().min(3).validate(1) == (False, "Mindestens 3")

    def test_registered_templates_apply_to_existing_validators(self):
        validator = NumberValidator().max(3)
        catalog.register({"max_number": "Höchstens {{num}}"})
        assert validator.validate(4) == (False, "Höchstens 3")

    def test_translator(self):
        calls: list[Any] = []

        def translate(msg_name: str, context: Mapping[str, Any]) -> str:
            calls.append((msg_name, dict(context)))
            return f"translated:{msg_name}"

        catalog.set_translator(translate)
        assert NumberValidator().min(3).validate(1) == (False, "translated:min_number")
        assert StringValidator().required().validate("") == (False, "translated:required")
        assert calls == [("min_number", {"num": 3}), ("required", {})]

    def test_explicit_messages_win_over_the_translator(self):
        catalog.set_translator(lambda msg_name, context: "translated")
        assert NumberValidator().min(3, "At least {{num}}").validate(1) == (False, "At least 3")
        assert NumberValidator(default_error_msg="Not a number").validate("x") == (False, "Not a number")

    def test_translator_receives_comparison_names(self):
        catalog.set_translator(lambda msg_name, context: f"{msg_name}:{context['name']}")
        assert NumberValidator().greater_than_sibling("foo").validate(1, {}, {"foo": 2}) == (
            False,
            "greater_than_sibling:foo",
        )

    def test_array_length_messages_are_rendered_when_added(self):
        catalog.register({"min_length_array": "Mindestens {{num}} Einträge"})
        validator = ArrayValidator(StringValidator()).min_length(2)
        catalog.reset()
        assert validator.validate(["a"]) == (False, "Mindestens 2 Einträge")

    def test_reset(self):
        catalog.register({"required": "changed"})
        catalog.set_translator(lambda *_: "translated")
        catalog.reset()
        assert catalog.translator is None
        assert StringValidator().required().validate("") == (False, "This field is required")
