"""Base exceptions for cppdoc.

Two families of errors are raised by the package:

- DefectError and its subclasses signal a broken internal assumption
  (a front end that reported something it should not, or a builder used
  out of order). They are never swallowed.
- ParseError signals a token mismatch while walking a declaration and
  carries enough context to report it to the user.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from cppdoc.source.buffer import SourceLocation


class CppdocError(Exception):
    """Base exception for cppdoc operations."""


class DefectError(CppdocError):
    """Raised when an internal invariant is violated."""


class UnknownSectionError(DefectError):
    """Raised when a comment section cannot be routed by its kind."""


class BodyOffsetError(DefectError):
    """Raised when a function body does not start after its declaration."""


class BuilderFinishedError(DefectError):
    """Raised when a documentation builder is used after finish()."""


class DuplicateBriefError(DefectError):
    """Raised when a documentation builder receives a second brief."""


class SpanError(DefectError):
    """Raised when a reported extent cannot be mapped onto its source buffer."""


class ParseError(CppdocError):
    """Raised when an expected token is not found in a declaration."""

    def __init__(
        self,
        location: SourceLocation | None,
        expected: str,
        actual: str,
    ):
        self.location = location
        self.expected = expected
        self.actual = actual
        message = f"expected '{expected}' got '{actual}'"
        if location is not None:
            message = f"{location}: {message}"
        super().__init__(message)
