"""Documentation objects and the builders that assemble them.

A builder accumulates cloned comment sections and is consumed exactly once
by finish(), which returns an immutable Documentation. The builder exposes
no read access to what it has accumulated; the only way to look at the
result is through the finished object.

Brief policy: a documentation object has at most one brief. A second
add_brief() on the same builder is rejected with DuplicateBriefError
rather than silently replacing or ignoring either brief.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Union

from cppdoc.base import BuilderFinishedError, DuplicateBriefError, UnknownSectionError
from cppdoc.comment.sections import (
    BriefSection,
    DetailsSection,
    InlineSection,
    ListSection,
)

log = logging.getLogger(__name__)

# Sections kept in encounter order next to the details
OtherSection = Union[InlineSection, ListSection]


@dataclass(frozen=True)
class Documentation:
    """Finished documentation for one entity or file."""

    brief: BriefSection | None = None
    details: tuple[DetailsSection, ...] = ()
    sections: tuple[OtherSection, ...] = ()

    @property
    def is_empty(self) -> bool:
        return self.brief is None and not self.details and not self.sections


@dataclass(frozen=True)
class EntityDocumentation(Documentation):
    """Documentation of a single entity plus its corrected declaration text."""

    entity: str = ""
    synopsis: str = ""


@dataclass(frozen=True)
class FileDocumentation(Documentation):
    """Documentation attached to a whole file."""

    file_name: str = ""


class BuilderState(Enum):
    EMPTY = "empty"
    ACCUMULATING = "accumulating"
    FINISHED = "finished"


class DocumentationBuilder:
    """
    Mutable accumulator for one Documentation.

    Example:
        builder = EntityDocumentationBuilder("foo", synopsis="void foo();")
        builder.add_brief(BriefSection("Does foo."))
        builder.add_section(InlineSection("returns", "nothing"))
        doc = builder.finish()
    """

    def __init__(self) -> None:
        self._state = BuilderState.EMPTY
        self._brief: BriefSection | None = None
        self._details: list[DetailsSection] = []
        self._sections: list[OtherSection] = []

    @property
    def state(self) -> BuilderState:
        return self._state

    def _check_open(self, operation: str) -> None:
        if self._state is BuilderState.FINISHED:
            raise BuilderFinishedError(f"{operation}() called after finish()")

    def add_brief(self, section: BriefSection) -> None:
        """Install the brief.

        Raises:
            DuplicateBriefError: If a brief was already added
            BuilderFinishedError: If the builder was already finished
        """
        self._check_open("add_brief")
        if not isinstance(section, BriefSection):
            raise UnknownSectionError(
                f"add_brief() expects a brief section, got {type(section).__name__}"
            )
        if self._brief is not None:
            raise DuplicateBriefError(
                f"Brief already set to {self._brief.text!r}, got {section.text!r}"
            )
        self._brief = section.clone()
        self._state = BuilderState.ACCUMULATING

    def add_details(self, section: DetailsSection) -> None:
        self._check_open("add_details")
        if not isinstance(section, DetailsSection):
            raise UnknownSectionError(
                f"add_details() expects a details section, got {type(section).__name__}"
            )
        self._details.append(section.clone())
        self._state = BuilderState.ACCUMULATING

    def add_section(self, section: OtherSection) -> None:
        """Append an inline or list section, preserving call order."""
        self._check_open("add_section")
        if not isinstance(section, (InlineSection, ListSection)):
            raise UnknownSectionError(
                f"add_section() expects an inline or list section, "
                f"got {type(section).__name__}"
            )
        self._sections.append(section.clone())
        self._state = BuilderState.ACCUMULATING

    def _build(
        self,
        brief: BriefSection | None,
        details: tuple[DetailsSection, ...],
        sections: tuple[OtherSection, ...],
    ) -> Documentation:
        return Documentation(brief=brief, details=details, sections=sections)

    def finish(self) -> Documentation:
        """Return the finished documentation. The builder is unusable afterwards."""
        self._check_open("finish")
        self._state = BuilderState.FINISHED
        result = self._build(self._brief, tuple(self._details), tuple(self._sections))
        self._brief = None
        self._details = []
        self._sections = []
        log.debug(
            "Finished documentation: brief=%s details=%d sections=%d",
            result.brief is not None,
            len(result.details),
            len(result.sections),
        )
        return result


class EntityDocumentationBuilder(DocumentationBuilder):
    """Builder for the documentation of one entity."""

    def __init__(self, entity: str, synopsis: str = "") -> None:
        super().__init__()
        self._entity = entity
        self._synopsis = synopsis

    def _build(self, brief, details, sections) -> EntityDocumentation:
        return EntityDocumentation(
            brief=brief,
            details=details,
            sections=sections,
            entity=self._entity,
            synopsis=self._synopsis,
        )

    def finish(self) -> EntityDocumentation:
        return super().finish()


class FileDocumentationBuilder(DocumentationBuilder):
    """Builder for the documentation of one file."""

    def __init__(self, file_name: str) -> None:
        super().__init__()
        self._file_name = file_name

    def _build(self, brief, details, sections) -> FileDocumentation:
        return FileDocumentation(
            brief=brief,
            details=details,
            sections=sections,
            file_name=self._file_name,
        )

    def finish(self) -> FileDocumentation:
        return super().finish()
