"""Tests for the catalog loader and model objects."""

from __future__ import annotations

import json

import pytest
import yaml

from logic_editor.core.catalog import CatalogError, load_catalog, parse_catalog
from logic_editor.core.models import (
    ComponentDefinition,
    LabeledSocketDefinition,
    SocketDefinition,
    TypeDefinition,
    component_class,
)
from logic_editor.projectors import project_components, project_types
from logic_editor.projectors.base import (
    Component,
    ControlsComponent,
    Editable,
    EditableComponent,
    IdentifiedComponent,
    Socket,
    ValueType,
)

CATALOG = {
    "types": [
        {"name": "number", "label": "Number", "combines": ["integer"]},
        {"name": "integer"},
    ],
    "components": [
        {
            "name": "math",
            "identifier": "math.add",
            "label": "Add",
            "menu_path": "Math/Basic",
            "inputs": [
                {"name": "a", "type": "number", "label": "A"},
                {"name": "b", "type": "number", "multiple": True},
            ],
            "outputs": [{"name": "sum", "type": "number"}],
        },
        {"name": "print", "controls": ["text"]},
    ],
}


class TestModelCapabilities:
    def test_plain_type(self):
        t = TypeDefinition(name="number")
        assert isinstance(t, ValueType)
        assert not isinstance(t, Editable)

    def test_plain_socket(self):
        s = SocketDefinition(name="a", socket_type="number")
        assert isinstance(s, Socket)
        assert not isinstance(s, Editable)
        assert isinstance(LabeledSocketDefinition(name="a", socket_type="n", label="A"), Editable)

    def test_plain_component(self):
        c = ComponentDefinition(name="add")
        assert isinstance(c, Component)
        assert not isinstance(c, EditableComponent)
        assert not isinstance(c, IdentifiedComponent)
        assert not isinstance(c, ControlsComponent)

    def test_component_class_combinations(self):
        cls = component_class(editable=True, identified=True, controls=True)
        c = cls(name="x", label="X", menu_label="X", identifier="x.1", controls=["a"])
        assert isinstance(c, Component)
        assert isinstance(c, EditableComponent)
        assert isinstance(c, IdentifiedComponent)
        assert isinstance(c, ControlsComponent)
        assert c.get_control_type_names() == ["a"]

    def test_component_class_cached(self):
        assert component_class(editable=True) is component_class(editable=True)
        assert component_class() is ComponentDefinition


class TestParseCatalog:
    def test_types(self):
        catalog = parse_catalog(CATALOG)
        number, integer = catalog.types
        assert number.label == "Number"
        assert number.get_combined_types() == [integer]
        assert not isinstance(integer, Editable)

    def test_components(self):
        catalog = parse_catalog(CATALOG)
        math, printer = catalog.components
        assert math.identifier == "math.add"
        assert math.menu_label == "Add"
        assert isinstance(math.inputs[0], Editable)
        assert math.inputs[1].allows_multiple is True
        assert not isinstance(printer, EditableComponent)
        assert isinstance(printer, ControlsComponent)

    def test_unknown_combination(self):
        with pytest.raises(CatalogError, match="unknown type"):
            parse_catalog({"types": [{"name": "a", "combines": ["missing"]}]})

    def test_forward_combination(self):
        catalog = parse_catalog(
            {"types": [{"name": "a", "combines": ["b"]}, {"name": "b"}]}
        )
        assert catalog.types[0].get_combined_types()[0].name == "b"

    def test_missing_name(self):
        with pytest.raises(CatalogError, match="missing 'name'"):
            parse_catalog({"components": [{"label": "x"}]})

    def test_socket_missing_type(self):
        with pytest.raises(CatalogError, match="missing 'type'"):
            parse_catalog({"components": [{"name": "x", "inputs": [{"name": "a"}]}]})

    def test_sections_must_be_lists(self):
        with pytest.raises(CatalogError):
            parse_catalog({"types": {"name": "a"}})

    def test_not_a_mapping(self):
        with pytest.raises(CatalogError):
            parse_catalog(["a"])

    def test_names_not_validated(self):
        catalog = parse_catalog({"components": [{"name": "a:b"}], "types": [{"name": "1x"}]})
        assert catalog.components[0].name == "a:b"
        assert catalog.types[0].name == "1x"


class TestLoadCatalog:
    def test_yaml(self, tmp_path):
        path = tmp_path / "catalog.yaml"
        path.write_text(yaml.dump(CATALOG), encoding="utf-8")
        catalog = load_catalog(path)
        assert [c.name for c in catalog.components] == ["math", "print"]

    def test_json(self, tmp_path):
        path = tmp_path / "catalog.json"
        path.write_text(json.dumps(CATALOG), encoding="utf-8")
        assert len(load_catalog(path).types) == 2

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("", encoding="utf-8")
        catalog = load_catalog(path)
        assert catalog.types == [] and catalog.components == []

    def test_bad_json(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(CatalogError, match="Could not parse"):
            load_catalog(path)

    def test_missing(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_catalog(tmp_path / "nope.yaml")


class TestCatalogProjection:
    def test_types_projection(self):
        catalog = parse_catalog(CATALOG)
        assert project_types(catalog.types) == {
            "number": {"name": "number", "label": "Number", "combines": ["integer"]},
            "integer": {"name": "integer", "label": "integer"},
        }

    def test_components_projection(self):
        catalog = parse_catalog(CATALOG)
        result = project_components(catalog.components)
        assert result["math"] == {
            "name": "math",
            "identifiers": {
                "math.add": {"label": "Add", "menu": ["Math", "Basic"], "mlabel": "Add"},
            },
            "outputs": {"sum": {"type": "number", "multiple": False, "label": "sum"}},
            "inputs": {
                "a": {"type": "number", "multiple": False, "label": "A"},
                "b": {"type": "number", "multiple": True, "label": "b"},
            },
        }
        assert result["print"] == {
            "name": "print",
            "label": "print",
            "mlabel": "print",
            "menu": None,
            "controls": ["text"],
        }
