"""Source buffers and the spans that address them."""

from __future__ import annotations

import bisect
from dataclasses import dataclass, field
from pathlib import Path

from cppdoc.base import SpanError
from cppdoc.config import check_encoding, get_settings


@dataclass(frozen=True)
class Span:
    """Half-open byte range [begin, end) into a SourceBuffer."""

    begin: int
    end: int

    def __post_init__(self):
        if self.begin < 0 or self.end < self.begin:
            raise SpanError(f"Invalid span [{self.begin}, {self.end})")

    def __len__(self) -> int:
        return self.end - self.begin

    def contains(self, offset: int) -> bool:
        return self.begin <= offset < self.end


@dataclass(frozen=True)
class SourceLocation:
    """A 1-based line/column position inside a named source."""

    file: str | None
    line: int
    column: int

    def __str__(self) -> str:
        return f"{self.file or '<unknown>'}:{self.line}:{self.column}"


@dataclass(frozen=True)
class SourceBuffer:
    """
    Immutable text of one analyzed unit.

    Offsets are byte offsets, matching what the front end reports. Scanning
    for ASCII punctuation on the raw bytes is safe for UTF-8 input since
    multi-byte sequences never contain ASCII bytes.

    Example:
        buffer = SourceBuffer.from_text("int x;\\n", name="a.hpp")
        buffer.text(Span(0, 6))  # "int x;"
    """

    data: bytes
    name: str | None = None
    encoding: str = "utf-8"
    _line_starts: tuple[int, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        check_encoding(self.encoding)
        starts = [0]
        starts.extend(i + 1 for i, byte in enumerate(self.data) if byte == 0x0A)
        object.__setattr__(self, "_line_starts", tuple(starts))

    @classmethod
    def from_text(
        cls, text: str, name: str | None = None, encoding: str = "utf-8"
    ) -> SourceBuffer:
        return cls(text.encode(encoding), name=name, encoding=encoding)

    @classmethod
    def from_file(cls, path: Path | str, encoding: str | None = None) -> SourceBuffer:
        """Read a file; encoding defaults to the configured source encoding."""
        path = Path(path)
        if encoding is None:
            encoding = get_settings().encoding
        return cls(path.read_bytes(), name=str(path), encoding=encoding)

    def __len__(self) -> int:
        return len(self.data)

    def check_span(self, span: Span) -> None:
        """Raise SpanError unless span lies inside this buffer."""
        if span.end > len(self.data):
            raise SpanError(
                f"Span [{span.begin}, {span.end}) exceeds buffer "
                f"{self.name or '<unknown>'} of length {len(self.data)}"
            )

    def slice(self, span: Span) -> bytes:
        self.check_span(span)
        return self.data[span.begin : span.end]

    def text(self, span: Span) -> str:
        return self.decode(self.slice(span))

    def decode(self, raw: bytes) -> str:
        return raw.decode(self.encoding)

    def byte_at(self, offset: int) -> bytes:
        """Return the byte at offset, or b"" past the end of the buffer."""
        return self.data[offset : offset + 1]

    def location(self, offset: int) -> SourceLocation:
        """Map a byte offset back to a line/column position."""
        if offset < 0 or offset > len(self.data):
            raise SpanError(f"Offset {offset} outside buffer {self.name or '<unknown>'}")
        line = bisect.bisect_right(self._line_starts, offset)
        column = offset - self._line_starts[line - 1] + 1
        return SourceLocation(self.name, line, column)
