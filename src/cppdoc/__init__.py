"""
cppdoc - Exact declaration text and structured documentation for C++ entities.

This package provides:
- Span correction: exact declaration text from approximate front-end extents
- Documentation builders: immutable documentation from lexed comment sections
- Exception classes: CppdocError, DefectError, ParseError and friends
- configure_logging: stdlib logging set up from CPPDOC_LOG_LEVEL
"""

from cppdoc.base import (
    BodyOffsetError,
    BuilderFinishedError,
    CppdocError,
    DefectError,
    DuplicateBriefError,
    ParseError,
    SpanError,
    UnknownSectionError,
)
from cppdoc.entity import document_entities, document_entity, document_file
from cppdoc.logging_setup import configure_logging

__all__ = [
    "CppdocError",
    "DefectError",
    "UnknownSectionError",
    "BodyOffsetError",
    "BuilderFinishedError",
    "DuplicateBriefError",
    "SpanError",
    "ParseError",
    "document_entity",
    "document_file",
    "document_entities",
    "configure_logging",
]
