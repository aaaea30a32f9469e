"""cppdoc.comment - Comment sections, documentation builders and routing."""

from cppdoc.comment.doc_comment import DocComment, set_sections
from cppdoc.comment.documentation import (
    BuilderState,
    Documentation,
    DocumentationBuilder,
    EntityDocumentation,
    EntityDocumentationBuilder,
    FileDocumentation,
    FileDocumentationBuilder,
)
from cppdoc.comment.sections import (
    BriefSection,
    CommentSection,
    DetailsSection,
    InlineSection,
    ListItem,
    ListSection,
    SectionKind,
    clone,
    section_kind,
)

__all__ = [
    "SectionKind",
    "BriefSection",
    "DetailsSection",
    "InlineSection",
    "ListItem",
    "ListSection",
    "CommentSection",
    "section_kind",
    "clone",
    "Documentation",
    "EntityDocumentation",
    "FileDocumentation",
    "BuilderState",
    "DocumentationBuilder",
    "EntityDocumentationBuilder",
    "FileDocumentationBuilder",
    "DocComment",
    "set_sections",
]
