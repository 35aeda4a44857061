"""Tests for the type projector."""

from __future__ import annotations

import pytest

from logic_editor.localization import MappingLocalization
from logic_editor.projectors.errors import SerializationError, SerializationException
from logic_editor.projectors.types import project_types


# -------------------------------------------------------------------------
# Stubs
# -------------------------------------------------------------------------


class StubType:
    def __init__(self, name, combines=None):
        self.name = name
        self._combines = combines

    def get_combined_types(self):
        return self._combines


class StubLabeledType(StubType):
    def __init__(self, name, label, combines=None):
        super().__init__(name, combines)
        self.label = label


class NotAType:
    def __init__(self, name):
        self.name = name


# -------------------------------------------------------------------------
# Shape
# -------------------------------------------------------------------------


class TestTypeDescriptor:
    def test_name_and_label_default_to_name(self):
        result = project_types([StubType("number")])
        assert result == {"number": {"name": "number", "label": "number"}}

    def test_editable_label_used(self):
        result = project_types([StubLabeledType("number", "Number")])
        assert result["number"]["label"] == "Number"

    def test_combines_in_source_order(self):
        integer = StubType("integer")
        real = StubType("real")
        number = StubType("number", combines=[real, integer])
        result = project_types([number])
        assert result["number"]["combines"] == ["real", "integer"]

    def test_combines_omitted_when_empty(self):
        result = project_types([StubType("a", combines=[]), StubType("b", combines=None)])
        assert "combines" not in result["a"]
        assert "combines" not in result["b"]

    def test_combines_accepts_any_iterable(self):
        result = project_types([StubType("a", combines=(t for t in [StubType("b")]))])
        assert result["a"]["combines"] == ["b"]

    def test_input_order_kept(self):
        result = project_types([StubType("z"), StubType("a"), StubType("m")])
        assert list(result) == ["z", "a", "m"]

    def test_non_types_skipped(self):
        result = project_types([NotAType("x"), "string", 42, StubType("ok")])
        assert list(result) == ["ok"]

    def test_empty_input(self):
        assert project_types([]) == {}

    def test_duplicate_name_last_write_wins(self):
        first = StubLabeledType("number", "First", combines=[StubType("a")])
        second = StubLabeledType("number", "Second")
        result = project_types([first, second])
        assert result == {"number": {"name": "number", "label": "Second"}}

    def test_combined_types_not_validated(self):
        result = project_types([StubType("a", combines=[StubType("not valid!")])])
        assert result["a"]["combines"] == ["not valid!"]


# -------------------------------------------------------------------------
# Validation
# -------------------------------------------------------------------------


class TestTypeNameValidation:
    @pytest.mark.parametrize("name", ["number", "_private", "Value2", "a_b_c", "X"])
    def test_valid_names(self, name):
        assert name in project_types([StubType(name)])

    @pytest.mark.parametrize(
        "name", ["2fast", "with space", "dash-ed", "colon:name", "", "dot.name", "tail\n", "ümlaut"]
    )
    def test_invalid_names_abort(self, name):
        bad = StubType(name)
        with pytest.raises(SerializationError) as exc_info:
            project_types([StubType("fine"), bad, StubType("after")])
        assert exc_info.value.component is bad

    def test_message_names_the_type(self):
        with pytest.raises(SerializationError, match="bad-name"):
            project_types([StubType("bad-name")])

    def test_message_shows_case_insensitive_pattern(self):
        with pytest.raises(SerializationError) as exc_info:
            project_types([StubType("Foo-1")])
        assert "[A-Za-z_][A-Za-z0-9_]*" in str(exc_info.value)

    def test_serializer_not_called_on_failure(self):
        calls = []
        with pytest.raises(SerializationError):
            project_types([StubType("1bad")], serializer=calls.append)
        assert calls == []

    def test_exception_alias(self):
        assert SerializationException is SerializationError


# -------------------------------------------------------------------------
# Localization and serializer
# -------------------------------------------------------------------------


class TestTypeLocalization:
    def test_label_translated(self):
        loc = MappingLocalization({"Number": "Zahl"})
        result = project_types([StubLabeledType("number", "Number")], localization=loc)
        assert result["number"]["label"] == "Zahl"

    def test_fallback_when_missing(self):
        loc = MappingLocalization({"Other": "Andere"})
        result = project_types([StubLabeledType("number", "Number")], localization=loc)
        assert result["number"]["label"] == "Number"

    def test_name_fallback_is_translated(self):
        loc = MappingLocalization({"number": "Zahl"})
        result = project_types([StubType("number")], localization=loc)
        assert result["number"]["label"] == "Zahl"

    def test_empty_translation_keeps_label(self):
        class EmptyLocalization:
            def get_localized_string(self, key):
                return ""

        result = project_types(
            [StubLabeledType("number", "Number")], localization=EmptyLocalization()
        )
        assert result["number"]["label"] == "Number"

    def test_name_key_not_translated(self):
        loc = MappingLocalization({"number": "Zahl"})
        result = project_types([StubType("number")], localization=loc)
        assert "number" in result
        assert result["number"]["name"] == "number"


class TestTypeSerializer:
    def test_serializer_gets_whole_mapping(self):
        received = []

        def serializer(mapping):
            received.append(mapping)
            return "done"

        result = project_types([StubType("a"), StubType("b")], serializer=serializer)
        assert result == "done"
        assert len(received) == 1
        assert set(received[0]) == {"a", "b"}
