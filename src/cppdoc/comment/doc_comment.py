"""Parsed documentation comments and their routing into builders."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from cppdoc.base import UnknownSectionError
from cppdoc.comment.documentation import DocumentationBuilder
from cppdoc.comment.sections import (
    BriefSection,
    CommentSection,
    SectionKind,
    section_kind,
)

log = logging.getLogger(__name__)


@dataclass
class DocComment:
    """
    A lexed documentation comment.

    The brief is held apart from the section sequence so the lexer can
    synthesize it independently of the inline sections.
    """

    sections: list[CommentSection] = field(default_factory=list)
    brief: BriefSection | None = None

    @property
    def has_brief(self) -> bool:
        return self.brief is not None

    def add_section(self, section: CommentSection) -> None:
        self.sections.append(section)


def set_sections(builder: DocumentationBuilder, comment: DocComment) -> None:
    """
    Feed every section of comment into builder, in order.

    The brief goes to add_brief(); details to add_details(); inline and
    list sections to add_section(). The builder clones what it receives,
    so comment may be reused or discarded afterwards.

    Raises:
        UnknownSectionError: If a section of another kind (including a
            brief inside the section sequence) is encountered
    """
    if comment.brief is not None:
        builder.add_brief(comment.brief)

    for section in comment.sections:
        kind = section_kind(section)
        if kind is SectionKind.DETAILS:
            builder.add_details(section)
        elif kind in (SectionKind.INLINE, SectionKind.LIST):
            builder.add_section(section)
        else:
            raise UnknownSectionError(
                f"Cannot route {kind.value} section from the section sequence"
            )

    log.debug("Routed %d sections into %s", len(comment.sections), type(builder).__name__)
