#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/api2md/documenters/html.py
"""Documenter writing one HTML file per API item.

Page bodies come from :class:`ApiHtmlEmitter` and are wrapped in a Jinja2
page template. The bundled template links a stylesheet that is copied into
the output folder next to the pages.

"""

from __future__ import annotations

import logging
from importlib import resources
from pathlib import Path
from typing import Optional, Union

from jinja2 import Environment, FileSystemLoader, PackageLoader, Template, select_autoescape
from markupsafe import Markup

from api2md.constants import DEFAULT_STYLESHEET, FILE_EXTENSIONS
from api2md.documenters.base import BaseDocumenter
from api2md.emitters.html import ApiHtmlEmitter
from api2md.model.items import ApiItem
from api2md.model.model import ApiModel
from api2md.options.html import HtmlEmitterOptions
from api2md.utils.io_utils import write_text_file

logger = logging.getLogger(__name__)

PAGE_TEMPLATE_NAME = "page.html.jinja"


class HtmlDocumenter(BaseDocumenter):
    """Write ``<name>.html`` pages rendered by :class:`ApiHtmlEmitter`.

    Parameters
    ----------
    api_model : ApiModel
        The loaded model to document
    emitter_options : HtmlEmitterOptions or None, default = None
        Options for the HTML emitter
    template_file : str, Path or None, default = None
        Custom Jinja2 page template. It receives ``title``, ``content``,
        ``stylesheet`` and ``api_item``. The bundled template is used when None.
    stylesheet : str or None, default = "api2md.css"
        Stylesheet linked from each page. The bundled stylesheet is written
        under this name; None disables both.

    """

    file_extension = FILE_EXTENSIONS["html"]

    def __init__(
        self,
        api_model: ApiModel,
        emitter_options: Optional[HtmlEmitterOptions] = None,
        template_file: Union[str, Path, None] = None,
        stylesheet: Optional[str] = DEFAULT_STYLESHEET,
    ):
        super().__init__(api_model, emitter_options)
        self.stylesheet = stylesheet
        self.template = self._load_template(template_file)

    def create_emitter(self) -> ApiHtmlEmitter:
        return ApiHtmlEmitter(self.api_model)

    def render_page(self, api_item: ApiItem, title: str, body: str) -> str:
        # nosemgrep: python.flask.security.xss.audit.direct-use-of-jinja2.direct-use-of-jinja2
        return self.template.render(
            title=title,
            content=Markup(body),  # Already escaped by the emitter
            stylesheet=self.stylesheet,
            api_item=api_item,
        )

    def generate_files(self, output_folder: Union[str, Path]) -> list[Path]:
        written = super().generate_files(output_folder)
        if self.stylesheet:
            bundled = resources.files("api2md").joinpath("templates").joinpath(DEFAULT_STYLESHEET)
            css = bundled.read_text(encoding="utf-8")
            written.append(write_text_file(Path(output_folder) / self.stylesheet, css))
        return written

    @staticmethod
    def _load_template(template_file: Union[str, Path, None]) -> Template:
        if template_file is None:
            loader = PackageLoader("api2md", "templates")
            template_name = PAGE_TEMPLATE_NAME
        else:
            template_path = Path(template_file)
            loader = FileSystemLoader(str(template_path.parent))
            template_name = template_path.name
        # nosemgrep: python.flask.security.xss.audit.direct-use-of-jinja2.direct-use-of-jinja2
        env = Environment(
            loader=loader,
            autoescape=select_autoescape(["html", "xml", "jinja"]),
            keep_trailing_newline=True,
        )
        logger.debug(f"Using page template {template_name}")
        return env.get_template(template_name)
