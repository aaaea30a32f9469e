"""Token stream over corrected declaration text.

Consumers that need to walk a declaration (to skip attributes, find a
name after a keyword, etc.) use the helpers here. A mismatch between the
expected and the actual token raises ParseError with the node location.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable

from cppdoc.base import ParseError
from cppdoc.source.buffer import SourceBuffer, SourceLocation
from cppdoc.source.corrector import read_source
from cppdoc.source.nodes import SyntaxNode

_TOKEN_RE = re.compile(
    r"""
    (?P<whitespace>\s+)
    | (?P<identifier>[A-Za-z_]\w*)
    | (?P<number>\.?\d(?:[eEpP][+-]|[\w.'])*)
    | (?P<string>"(?:\\.|[^"\\\n])*")
    | (?P<char>'(?:\\.|[^'\\\n])*')
    | (?P<punctuator>::|->|\.\.\.|&&|\|\||==|!=|<=|>=)
    | (?P<other>.)
    """,
    re.VERBOSE | re.DOTALL,
)


@dataclass(frozen=True)
class Token:
    """A single token and its offset in the tokenized text."""

    value: str
    offset: int

    @property
    def is_whitespace(self) -> bool:
        return bool(self.value) and self.value[0].isspace()


def tokenize(text: str) -> list[Token]:
    """Split declaration text into tokens, keeping whitespace runs."""
    return [Token(m.group(), m.start()) for m in _TOKEN_RE.finditer(text)]


class TokenStream:
    """Forward-only cursor over a token list."""

    def __init__(self, tokens: Iterable[Token]):
        self._tokens = list(tokens)
        self._pos = 0

    @property
    def position(self) -> int:
        return self._pos

    @property
    def done(self) -> bool:
        return self._pos >= len(self._tokens)

    def peek(self, n: int = 0) -> Token:
        """Return the token n ahead, or an empty token past the end."""
        index = self._pos + n
        if index < len(self._tokens):
            return self._tokens[index]
        end = self._tokens[-1].offset + len(self._tokens[-1].value) if self._tokens else 0
        return Token("", end)

    def bump(self) -> Token:
        token = self.peek()
        if not self.done:
            self._pos += 1
        return token


class Tokenizer:
    """Tokenizer for the corrected source of one node."""

    def __init__(self, buffer: SourceBuffer, node: SyntaxNode):
        # trailing newline terminates the last token
        self.source = read_source(buffer, node) + "\n"
        self.location = buffer.location(node.begin) if node.file is not None else None

    def stream(self) -> TokenStream:
        return TokenStream(tokenize(self.source))


def skip_whitespace(stream: TokenStream) -> None:
    while stream.peek().is_whitespace:
        stream.bump()


def skip(
    stream: TokenStream,
    location: SourceLocation | None,
    value: str | Iterable[str],
) -> None:
    """
    Consume the expected token(s) or raise ParseError.

    A single value is consumed as is. A sequence of values is consumed in
    order with whitespace skipped after each one.
    """
    if isinstance(value, str):
        token = stream.peek()
        if token.value != value:
            raise ParseError(location, value, token.value)
        stream.bump()
        return

    for val in value:
        skip(stream, location, val)
        skip_whitespace(stream)


def skip_if_token(stream: TokenStream, value: str) -> bool:
    """Consume value and following whitespace if it is the next token."""
    if stream.peek().value != value:
        return False
    stream.bump()
    skip_whitespace(stream)
    return True


def skip_bracket_count(
    stream: TokenStream,
    location: SourceLocation | None,
    open_: str,
    close: str,
) -> None:
    """Consume a bracketed group starting at open_ up to its matching close."""
    skip(stream, location, open_)
    depth = 1
    while depth != 0:
        token = stream.peek()
        if stream.done:
            raise ParseError(location, close, token.value)
        if token.value == open_:
            depth += 1
        elif token.value == close:
            depth -= 1
        stream.bump()


def skip_attribute(stream: TokenStream, location: SourceLocation | None) -> bool:
    """
    Skip a C++11 [[...]] or GNU __attribute__((...)) attribute.

    Returns:
        True if an attribute was skipped
    """
    if stream.peek().value == "[" and stream.peek(1).value == "[":
        stream.bump()  # opening
        skip_bracket_count(stream, location, "[", "]")
        skip(stream, location, "]")  # closing
        return True
    if skip_if_token(stream, "__attribute__"):
        skip(stream, location, "(")
        skip_bracket_count(stream, location, "(", ")")
        skip(stream, location, ")")
        return True
    return False
