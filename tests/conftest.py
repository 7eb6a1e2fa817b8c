"""Pytest configuration and shared fixtures for the api2md test suite.

This module provides shared fixtures, test configuration, and utilities
that are used across the entire test suite.
"""

import json
import os
from pathlib import Path

import pytest
from hypothesis import Phase, Verbosity, settings

from api2md.ast import DocParagraph, DocPlainText, DocSection
from api2md.model import ApiItem, ApiItemKind, ApiModel, ReleaseTag

# Register custom Hypothesis profiles
settings.register_profile("ci", max_examples=100, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=20)
settings.register_profile(
    "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))

FIXTURES_DIR = Path(__file__).parent / "fixtures"


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")


def summary(text: str) -> DocSection:
    return DocSection(nodes=[DocParagraph(nodes=[DocPlainText(text=text)])])


@pytest.fixture
def widgets_model() -> ApiModel:
    """Provide a small model with one package.

    Layout::

        @acme/widgets
          Widget (class, beta)
            constructor
            render (method, 2 overloads)
            size (property)
          Layout (namespace)
            stack (function)
          Color (enum)
            Red (enum member)
          makeWidget (function, deprecated)

    """
    model = ApiModel()
    widget = ApiItem(
        kind=ApiItemKind.CLASS,
        display_name="Widget",
        release_tag=ReleaseTag.BETA,
        summary=summary("A visual widget."),
        members=[
            ApiItem(kind=ApiItemKind.CONSTRUCTOR, display_name="constructor", summary=summary("Creates a widget.")),
            ApiItem(kind=ApiItemKind.METHOD, display_name="render", summary=summary("Renders the widget.")),
            ApiItem(
                kind=ApiItemKind.METHOD,
                display_name="render",
                overload_index=2,
                summary=summary("Renders into a target."),
            ),
            ApiItem(kind=ApiItemKind.PROPERTY, display_name="size"),
        ],
    )
    layout = ApiItem(
        kind=ApiItemKind.NAMESPACE,
        display_name="Layout",
        members=[ApiItem(kind=ApiItemKind.FUNCTION, display_name="stack", signature="stack(): void")],
    )
    color = ApiItem(
        kind=ApiItemKind.ENUM,
        display_name="Color",
        members=[ApiItem(kind=ApiItemKind.ENUM_MEMBER, display_name="Red")],
    )
    make_widget = ApiItem(
        kind=ApiItemKind.FUNCTION,
        display_name="makeWidget",
        deprecated=summary("Use the Widget constructor."),
    )
    package = ApiItem(
        kind=ApiItemKind.PACKAGE,
        display_name="@acme/widgets",
        summary=summary("Widgets for dashboards."),
        members=[widget, layout, color, make_widget],
    )
    model.add_package(package)
    return model


@pytest.fixture
def widgets_model_file(tmp_path: Path) -> Path:
    """Write the widgets package as an ``*.api.json`` file and return its path."""
    data = json.loads((FIXTURES_DIR / "models" / "widgets.api.json").read_text(encoding="utf-8"))
    path = tmp_path / "input" / "widgets.api.json"
    path.parent.mkdir()
    path.write_text(json.dumps(data), encoding="utf-8")
    return path
