"""
Documentation builder tests for cppdoc.comment.

Tests for:
- Separation of details from inline/list sections
- Brief cardinality
- Builder lifecycle (empty, accumulating, finished)
- Cloning of sections on intake
- Entity and file documentation variants
"""

import dataclasses

import pytest

from cppdoc.base import (
    BuilderFinishedError,
    DefectError,
    DuplicateBriefError,
    UnknownSectionError,
)
from cppdoc.comment import (
    BriefSection,
    BuilderState,
    DetailsSection,
    DocumentationBuilder,
    EntityDocumentation,
    EntityDocumentationBuilder,
    FileDocumentation,
    FileDocumentationBuilder,
    InlineSection,
    ListItem,
    ListSection,
)


def _param_list():
    return ListSection(
        items=[ListItem("a", "first"), ListItem("b", "second"), ListItem(None, "note")],
        key="param",
    )


class TestSectionOrdering:
    """Details and other sections keep their relative order."""

    def test_details_separated_from_other_sections(self):
        """Inline and list sections interleave in encounter order."""
        builder = DocumentationBuilder()
        builder.add_brief(BriefSection("b"))
        builder.add_details(DetailsSection("d1"))
        builder.add_section(InlineSection("param", "x"))
        builder.add_details(DetailsSection("d2"))
        builder.add_section(_param_list())

        doc = builder.finish()

        assert doc.brief == BriefSection("b")
        assert doc.details == (DetailsSection("d1"), DetailsSection("d2"))
        assert doc.sections == (InlineSection("param", "x"), _param_list())

    def test_empty_documentation(self):
        """A builder fed nothing yields empty documentation."""
        doc = DocumentationBuilder().finish()

        assert doc.is_empty
        assert doc.brief is None
        assert doc.details == ()
        assert doc.sections == ()

    def test_documentation_is_immutable(self):
        """Finished documentation cannot be reassigned."""
        builder = DocumentationBuilder()
        builder.add_brief(BriefSection("b"))
        doc = builder.finish()

        with pytest.raises(dataclasses.FrozenInstanceError):
            doc.brief = BriefSection("other")

    def test_nested_sections_are_immutable(self):
        """Sections inside finished documentation cannot be changed."""
        builder = DocumentationBuilder()
        builder.add_brief(BriefSection("b"))
        builder.add_details(DetailsSection("d"))
        builder.add_section(_param_list())
        doc = builder.finish()

        with pytest.raises(dataclasses.FrozenInstanceError):
            doc.brief.text = "changed"
        with pytest.raises(dataclasses.FrozenInstanceError):
            doc.details[0].text = "changed"
        with pytest.raises(dataclasses.FrozenInstanceError):
            doc.sections[0].items[0].text = "changed"
        with pytest.raises(AttributeError):
            doc.sections[0].items.append(ListItem("z", "extra"))

        assert doc.brief.text == "b"
        assert doc.details == (DetailsSection("d"),)
        assert doc.sections == (_param_list(),)


class TestBrief:
    """At most one brief per documentation object."""

    def test_second_brief_rejected(self):
        """A second add_brief() raises and keeps the first brief."""
        builder = DocumentationBuilder()
        builder.add_brief(BriefSection("first"))

        with pytest.raises(DuplicateBriefError, match="first"):
            builder.add_brief(BriefSection("second"))

        assert builder.finish().brief == BriefSection("first")

    def test_duplicate_brief_is_a_defect(self):
        """Duplicate briefs belong to the defect family."""
        assert issubclass(DuplicateBriefError, DefectError)


class TestLifecycle:
    """Builder states and use after finish()."""

    def test_state_transitions(self):
        """EMPTY -> ACCUMULATING -> FINISHED."""
        builder = DocumentationBuilder()
        assert builder.state is BuilderState.EMPTY

        builder.add_details(DetailsSection("d"))
        assert builder.state is BuilderState.ACCUMULATING

        builder.finish()
        assert builder.state is BuilderState.FINISHED

    @pytest.mark.parametrize(
        "call",
        [
            lambda b: b.add_brief(BriefSection("b")),
            lambda b: b.add_details(DetailsSection("d")),
            lambda b: b.add_section(InlineSection("returns", "r")),
            lambda b: b.finish(),
        ],
        ids=["add_brief", "add_details", "add_section", "finish"],
    )
    def test_use_after_finish_rejected(self, call):
        """Every operation after finish() raises."""
        builder = DocumentationBuilder()
        builder.finish()

        with pytest.raises(BuilderFinishedError, match="after finish"):
            call(builder)


class TestSectionTypes:
    """Each add_* only accepts its own section kind."""

    def test_add_details_rejects_inline(self):
        """add_details() does not accept inline sections."""
        with pytest.raises(UnknownSectionError):
            DocumentationBuilder().add_details(InlineSection("param", "x"))

    def test_add_section_rejects_details(self):
        """add_section() does not accept details."""
        with pytest.raises(UnknownSectionError):
            DocumentationBuilder().add_section(DetailsSection("d"))

    def test_add_brief_rejects_plain_text(self):
        """add_brief() does not accept raw strings."""
        with pytest.raises(UnknownSectionError):
            DocumentationBuilder().add_brief("brief")


class TestCloning:
    """Sections are copied on intake."""

    def test_later_mutation_does_not_leak(self):
        """Changing the lexer's item list after adding it leaves the result alone."""
        items = [ListItem("a", "first"), ListItem("b", "second")]
        params = ListSection(items, key="param")
        builder = DocumentationBuilder()
        builder.add_section(params)

        items.append(ListItem("c", "third"))
        doc = builder.finish()

        assert len(doc.sections[0].items) == 2
        assert doc.sections[0] == params
        assert doc.sections[0] is not params

    def test_sections_are_frozen_on_creation(self):
        """Sections cannot be changed once the lexer has built them."""
        details = DetailsSection("original")

        with pytest.raises(dataclasses.FrozenInstanceError):
            details.text = "changed"


class TestVariants:
    """Entity and file documentation."""

    def test_entity_documentation(self):
        """Entity builders carry the name and synopsis through."""
        builder = EntityDocumentationBuilder("foo", synopsis="void foo();")
        builder.add_brief(BriefSection("Does foo."))

        doc = builder.finish()

        assert isinstance(doc, EntityDocumentation)
        assert doc.entity == "foo"
        assert doc.synopsis == "void foo();"
        assert doc.brief.text == "Does foo."

    def test_file_documentation(self):
        """File builders carry the file name through."""
        builder = FileDocumentationBuilder("foo.hpp")
        builder.add_details(DetailsSection("All about foo."))

        doc = builder.finish()

        assert isinstance(doc, FileDocumentation)
        assert doc.file_name == "foo.hpp"
        assert doc.details == (DetailsSection("All about foo."),)

    def test_file_builder_finishes_once(self):
        """Subclassed builders keep the single-finish rule."""
        builder = FileDocumentationBuilder("foo.hpp")
        builder.finish()

        with pytest.raises(BuilderFinishedError):
            builder.finish()
