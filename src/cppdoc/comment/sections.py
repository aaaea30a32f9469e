"""Comment section types produced by the comment lexer.

Sections are frozen so that documentation assembled from them stays
immutable; list items are held in a tuple.
"""

from __future__ import annotations

import copy
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Union

from cppdoc.base import UnknownSectionError


class SectionKind(Enum):
    """Structural kind of a documentation comment section."""

    BRIEF = "brief"
    DETAILS = "details"
    INLINE = "inline"
    LIST = "list"


@dataclass(frozen=True)
class BriefSection:
    """One-line summary."""

    kind: ClassVar[SectionKind] = SectionKind.BRIEF

    text: str

    def clone(self) -> BriefSection:
        return copy.deepcopy(self)


@dataclass(frozen=True)
class DetailsSection:
    """Extended free-form description."""

    kind: ClassVar[SectionKind] = SectionKind.DETAILS

    text: str

    def clone(self) -> DetailsSection:
        return copy.deepcopy(self)


@dataclass(frozen=True)
class InlineSection:
    """A single keyed command, e.g. key="returns" or key="param"."""

    kind: ClassVar[SectionKind] = SectionKind.INLINE

    key: str
    text: str

    def clone(self) -> InlineSection:
        return copy.deepcopy(self)


@dataclass(frozen=True)
class ListItem:
    """Entry of a list section; key is None for unkeyed items."""

    key: str | None
    text: str


@dataclass(frozen=True)
class ListSection:
    """Ordered list of keyed or unkeyed items, e.g. all parameters."""

    kind: ClassVar[SectionKind] = SectionKind.LIST

    items: tuple[ListItem, ...] = ()
    key: str | None = None  # command that started the list, if any

    def __post_init__(self):
        # lexers hand over lists; keep our own tuple
        object.__setattr__(self, "items", tuple(self.items))

    def clone(self) -> ListSection:
        return copy.deepcopy(self)


CommentSection = Union[BriefSection, DetailsSection, InlineSection, ListSection]

_SECTION_TYPES = (BriefSection, DetailsSection, InlineSection, ListSection)


def section_kind(section: object) -> SectionKind:
    """Return the kind tag of a comment section.

    Raises:
        UnknownSectionError: If section is not a comment section
    """
    if not isinstance(section, _SECTION_TYPES):
        raise UnknownSectionError(f"Not a comment section: {type(section).__name__}")
    return section.kind


def clone(section: CommentSection) -> CommentSection:
    """Deep-copy a section so the copy is independent of its comment."""
    section_kind(section)
    return section.clone()
