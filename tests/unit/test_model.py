#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_model.py
"""Unit tests for the API model: loading, item naming and reference resolution."""

import json

import pytest

from api2md.ast import DeclarationReference, DocLinkTag, DocParagraph, DocSection
from api2md.exceptions import ApiModelError
from api2md.model import ApiItem, ApiItemKind, ApiModel, ReleaseTag, ResolvedReference


def resolve(model, text, context=None) -> ResolvedReference:
    return model.resolve_declaration_reference(DeclarationReference.parse(text), context)


def iter_items(item):
    yield item
    for member in item.members:
        yield from iter_items(member)


@pytest.mark.unit
class TestLoading:
    """Tests for ApiModel.load_package."""

    def test_load_json(self, widgets_model_file):
        model = ApiModel()
        package = model.load_package(widgets_model_file)

        assert package.display_name == "@acme/widgets"
        assert model.packages == [package]
        assert package.parent is model
        [entry_point] = package.members
        assert entry_point.kind == ApiItemKind.ENTRY_POINT
        assert [m.display_name for m in entry_point.members] == ["Widget", "Layout", "Color", "makeWidget"]

        widget = entry_point.members[0]
        assert widget.release_tag == ReleaseTag.BETA
        assert widget.signature == "export declare class Widget"
        assert widget.summary is not None
        assert isinstance(widget.summary.nodes[0], DocParagraph)

        remarks = widget.remarks
        assert isinstance(remarks, DocSection)
        link = remarks.nodes[0].nodes[1]
        assert isinstance(link, DocLinkTag)
        assert link.code_destination == DeclarationReference.parse("Layout.stack")

        renders = widget.find_members_by_name("render")
        assert [r.overload_index for r in renders] == [1, 2]

        make_widget = entry_point.members[3]
        assert make_widget.is_deprecated
        assert make_widget.is_callable

    def test_load_yaml(self, tmp_path):
        path = tmp_path / "tools.api.yaml"
        path.write_text(
            "kind: Package\n"
            "name: tools\n"
            "members:\n"
            "  - kind: Function\n"
            "    name: run\n"
            "    releaseTag: Alpha\n"
            "    docs:\n"
            "      summary: |\n"
            "        Runs the tool.\n"
            "\n"
            "        Twice.\n",
            encoding="utf-8",
        )
        model = ApiModel()
        package = model.load_package(path)
        run = package.members[0].members[0]
        assert run.kind == ApiItemKind.FUNCTION
        assert run.release_tag == ReleaseTag.ALPHA
        assert run.summary is not None
        assert len(run.summary.nodes) == 2

    def test_explicit_entry_point_is_kept(self, tmp_path):
        path = tmp_path / "pkg.api.json"
        data = {
            "kind": "Package",
            "name": "pkg",
            "members": [{"kind": "EntryPoint", "members": [{"kind": "Class", "name": "A"}]}],
        }
        path.write_text(json.dumps(data), encoding="utf-8")
        package = ApiModel().load_package(path)
        assert len(package.members) == 1
        assert package.members[0].members[0].display_name == "A"

    def test_missing_file(self, tmp_path):
        with pytest.raises(ApiModelError, match="Unable to read API model file") as exc_info:
            ApiModel().load_package(tmp_path / "missing.api.json")
        assert exc_info.value.file_path is not None
        assert isinstance(exc_info.value.original_error, OSError)

    def test_malformed_json(self, tmp_path):
        path = tmp_path / "bad.api.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(ApiModelError, match="Unable to read API model file"):
            ApiModel().load_package(path)

    def test_root_must_be_object(self, tmp_path):
        path = tmp_path / "list.api.json"
        path.write_text("[]", encoding="utf-8")
        with pytest.raises(ApiModelError, match="must contain an object"):
            ApiModel().load_package(path)

    @pytest.mark.parametrize(
        "data",
        [
            {"name": "no-kind"},
            {"kind": "Gadget", "name": "x"},
            {"kind": "Package", "name": "x", "members": [{"kind": "Class", "name": "A", "releaseTag": "Gamma"}]},
            {"kind": "Package", "name": "x", "docs": {"summary": 42}},
        ],
    )
    def test_invalid_content(self, tmp_path, data):
        path = tmp_path / "invalid.api.json"
        path.write_text(json.dumps(data), encoding="utf-8")
        with pytest.raises(ApiModelError, match="Invalid API model file"):
            ApiModel().load_package(path)

    def test_root_must_be_package(self, tmp_path):
        path = tmp_path / "class.api.json"
        path.write_text(json.dumps({"kind": "Class", "name": "A"}), encoding="utf-8")
        with pytest.raises(ApiModelError, match="Expected a Package item, got Class"):
            ApiModel().load_package(path)

    def test_duplicate_package(self, widgets_model_file):
        model = ApiModel()
        model.load_package(widgets_model_file)
        with pytest.raises(ApiModelError, match="already loaded"):
            model.load_package(widgets_model_file)


@pytest.mark.unit
class TestItemNaming:
    """Tests for hierarchy, scoped names and canonical references."""

    def test_hierarchy(self, widgets_model):
        render = widgets_model.packages[0].members[0].members[0].members[1]
        kinds = [item.kind for item in render.get_hierarchy()]
        assert kinds == [
            ApiItemKind.MODEL,
            ApiItemKind.PACKAGE,
            ApiItemKind.ENTRY_POINT,
            ApiItemKind.CLASS,
            ApiItemKind.METHOD,
        ]
        assert render.get_associated_package() is widgets_model.packages[0]

    def test_scoped_names(self, widgets_model):
        names = {
            item.canonical_reference: item.get_scoped_name_within_package()
            for item in iter_items(widgets_model.packages[0])
            if item.kind != ApiItemKind.ENTRY_POINT
        }
        assert names["@acme/widgets#"] == ""
        assert names["@acme/widgets#Layout.stack"] == "Layout.stack()"
        assert names["@acme/widgets#Color.Red"] == "Color.Red"
        assert names["@acme/widgets#Widget.render:2"] == "Widget.render()"

    def test_overloads_are_qualified(self, widgets_model):
        widget = widgets_model.packages[0].members[0].members[0]
        first, second = widget.find_members_by_name("render")
        assert first.has_namesakes
        assert first.canonical_reference == "@acme/widgets#Widget.render:1"
        assert second.canonical_reference == "@acme/widgets#Widget.render:2"
        assert widget.canonical_reference == "@acme/widgets#Widget"

    def test_package_lookup(self, widgets_model):
        assert widgets_model.try_get_package_by_name("@acme/widgets") is widgets_model.packages[0]
        assert widgets_model.try_get_package_by_name("widgets") is None

    def test_detached_item(self):
        item = ApiItem(kind=ApiItemKind.CLASS, display_name="Lonely")
        assert item.get_associated_package() is None
        assert item.canonical_reference == "Lonely"
        assert not item.has_namesakes

    def test_add_member_sets_parent(self):
        parent = ApiItem(kind=ApiItemKind.NAMESPACE, display_name="Ns")
        child = parent.add_member(ApiItem(kind=ApiItemKind.FUNCTION, display_name="f"))
        assert child.parent is parent
        assert child.get_scoped_name_within_package() == "Ns.f()"


@pytest.mark.unit
class TestResolution:
    """Tests for ApiModel.resolve_declaration_reference."""

    def test_every_canonical_reference_resolves_to_its_item(self, widgets_model):
        for item in iter_items(widgets_model.packages[0]):
            if item.kind == ApiItemKind.ENTRY_POINT:
                continue
            result = resolve(widgets_model, item.canonical_reference)
            assert result.succeeded, result.error_message
            assert result.resolved_api_item is item

    def test_unknown_package(self, widgets_model):
        result = resolve(widgets_model, "@acme/gadgets#Widget")
        assert not result.succeeded
        assert result.error_message == 'The package "@acme/gadgets" could not be located'

    def test_unknown_member(self, widgets_model):
        assert resolve(widgets_model, "@acme/widgets#Widget.paint").error_message == (
            'The member reference "paint" was not found'
        )

    def test_unknown_overload(self, widgets_model):
        assert resolve(widgets_model, "@acme/widgets#Widget.render:3").error_message == (
            'The member reference "render:3" was not found'
        )

    def test_ambiguous_member(self, widgets_model):
        assert resolve(widgets_model, "@acme/widgets#Widget.render").error_message == (
            'The member reference "render" was ambiguous'
        )

    def test_relative_reference_without_context(self, widgets_model):
        assert resolve(widgets_model, "Widget").error_message == (
            "The reference does not include a package name, and no context item was provided"
        )

    def test_relative_reference_with_detached_context(self, widgets_model):
        detached = ApiItem(kind=ApiItemKind.CLASS, display_name="Lonely")
        assert resolve(widgets_model, "Widget", detached).error_message == (
            "The reference does not include a package name, and the context item is not part of a package"
        )

    def test_relative_reference_with_context(self, widgets_model):
        stack = widgets_model.packages[0].members[0].members[1].members[0]
        result = resolve(widgets_model, "Widget.size", stack)
        assert result.resolved_api_item.display_name == "size"

    def test_first_component_names_package(self, widgets_model):
        result = resolve(widgets_model, "@acme/widgets.Layout")
        assert result.resolved_api_item.kind == ApiItemKind.NAMESPACE

    def test_resolved_reference_holds_exactly_one_value(self):
        with pytest.raises(ValueError):
            ResolvedReference()
        with pytest.raises(ValueError):
            ResolvedReference(resolved_api_item=ApiItem(kind=ApiItemKind.CLASS, display_name="A"), error_message="x")
        assert not ResolvedReference.failure("nope").succeeded
