#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/api2md/emitters/references.py
"""Resolution of code links against the API model.

Failures here never abort a render. They are logged as warnings and kept
on the resolver so callers can report them after a run.

"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from api2md.ast.nodes import DocLinkTag
from api2md.model.resolution import DeclarationReferenceResolver, ResolvedReference
from api2md.options.base import BaseEmitterOptions
from api2md.utils.escape import collapse_whitespace

logger = logging.getLogger(__name__)

NO_API_MODEL_MESSAGE = "No API model is available to resolve the reference"


@dataclass(frozen=True)
class ResolvedLink:
    """Text and target of a code link that can be written."""

    text: str
    filename: str


class ReferenceResolver:
    """Turn code-destination link tags into link text and target filenames.

    Parameters
    ----------
    api_model : DeclarationReferenceResolver or None
        Object that resolves declaration references; None makes every code
        link unresolvable

    Attributes
    ----------
    warnings : list of str
        Every warning reported so far, in order

    """

    def __init__(self, api_model: Optional[DeclarationReferenceResolver] = None):
        self.api_model = api_model
        self.warnings: list[str] = []

    def resolve_code_link(self, link_tag: DocLinkTag, options: BaseEmitterOptions) -> ResolvedLink | None:
        """Resolve a code link.

        Parameters
        ----------
        link_tag : DocLinkTag
            Link with a ``code_destination``
        options : BaseEmitterOptions
            Supplies the context item and the filename callback

        Returns
        -------
        ResolvedLink or None
            What to write, or None when nothing should be written

        """
        reference = link_tag.code_destination
        assert reference is not None

        if self.api_model is None:
            result = ResolvedReference.failure(NO_API_MODEL_MESSAGE)
        else:
            result = self.api_model.resolve_declaration_reference(reference, options.context_api_item)

        if result.resolved_api_item is None:
            self.warn(f'Unable to resolve reference "{reference.emit_as_tsdoc()}": {result.error_message}')
            return None

        filename = options.get_filename(result.resolved_api_item)
        if not filename:
            return None

        link_text = link_tag.link_text or ""
        if not link_text:
            link_text = result.resolved_api_item.get_scoped_name_within_package()
        link_text = collapse_whitespace(link_text).strip()
        if not link_text:
            self.warn("Unable to determine link text")
            return None

        return ResolvedLink(text=link_text, filename=filename)

    def warn(self, message: str) -> None:
        logger.warning(message)
        self.warnings.append(message)
