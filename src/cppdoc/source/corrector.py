"""Span correction for declaration extents.

The front end reports declaration extents that are frequently wrong in a
handful of well-known ways: function extents include the body, class
extents stop before the terminating semicolon, template parameter extents
swallow a closing angle bracket, macro extents miss their last closing
parenthesis, and deleted/defaulted functions and some type aliases stop
short of the semicolon. Each rule below repairs one of these using only the
raw slice and a lookahead into the buffer past the reported end.
"""

from __future__ import annotations

import logging
from enum import Enum

from cppdoc.base import BodyOffsetError, SpanError
from cppdoc.source.buffer import SourceBuffer, Span
from cppdoc.source.nodes import ChildVisit, NodeKind, SyntaxNode

log = logging.getLogger(__name__)

_TERMINATOR = b";"
_BODY_END = b"}"
_WHITESPACE = frozenset(b" \t\n\r\f\v")


class CorrectionRule(Enum):
    """The correction applied to a raw extent."""

    STRIP_BODY = "strip_body"
    APPEND_TERMINATOR = "append_terminator"
    TEMPLATE_PARAMETER = "template_parameter"
    CLOSE_MACRO = "close_macro"
    EXTEND_TO_TERMINATOR = "extend_to_terminator"
    EXTEND_TO_END_OF_LINE = "extend_to_end_of_line"
    NONE = "none"


_NO_LINE_MARGIN = frozenset(
    {
        NodeKind.PARAMETER,
        NodeKind.BASE_SPECIFIER,
        NodeKind.TEMPLATE_TYPE_PARAMETER,
        NodeKind.NON_TYPE_TEMPLATE_PARAMETER,
        NodeKind.TEMPLATE_TEMPLATE_PARAMETER,
    }
)


def select_rule(
    kind: NodeKind, raw: bytes, template_kind: NodeKind | None = None
) -> CorrectionRule:
    """
    Pick the single correction rule for a node kind and its raw text.

    Function-like, class-like and type alias declarations whose raw text
    already ends in ';' get NONE. They deliberately do not fall through to
    the end-of-line margin that other declarations take, so a trailing
    comment is never pulled into their source and correcting an already
    corrected extent returns it unchanged.
    """
    last = raw[-1:]
    function_like = kind.is_function_like or (
        template_kind is not None and template_kind.is_function_like
    )

    if function_like:
        if last == _BODY_END:
            return CorrectionRule.STRIP_BODY
        if last != _TERMINATOR:
            return CorrectionRule.EXTEND_TO_TERMINATOR
        return CorrectionRule.NONE
    if kind.is_class_like:
        if last != _TERMINATOR:
            return CorrectionRule.APPEND_TERMINATOR
        return CorrectionRule.NONE
    if kind.is_template_parameter:
        return CorrectionRule.TEMPLATE_PARAMETER
    if kind is NodeKind.MACRO_DEFINITION:
        return CorrectionRule.CLOSE_MACRO
    if kind is NodeKind.TYPE_ALIAS:
        if last != _TERMINATOR:
            return CorrectionRule.EXTEND_TO_TERMINATOR
        return CorrectionRule.NONE
    if kind.is_declaration and kind not in _NO_LINE_MARGIN:
        return CorrectionRule.EXTEND_TO_END_OF_LINE
    return CorrectionRule.NONE


def _find_body_begin(node: SyntaxNode) -> int | None:
    body_begin: int | None = None

    def visitor(child: SyntaxNode) -> ChildVisit:
        nonlocal body_begin
        if child.kind.is_body:
            body_begin = child.begin
            return ChildVisit.BREAK
        return ChildVisit.CONTINUE

    node.visit_children(visitor)
    return body_begin


def _strip_body(node: SyntaxNode, raw: bytes) -> bytes:
    body_begin = _find_body_begin(node)
    if body_begin is None:
        raise BodyOffsetError(
            f"Function {node.spelling or '<anonymous>'} ends in '}}' but has no body"
        )
    if body_begin <= node.begin:
        raise BodyOffsetError(
            f"Body of {node.spelling or '<anonymous>'} starts at {body_begin}, "
            f"not after declaration begin {node.begin}"
        )
    return raw[: body_begin - node.begin] + _TERMINATOR


def _template_parameter(buffer: SourceBuffer, raw: bytes, end: int) -> bytes:
    result = bytearray(raw)
    pos = end
    data = buffer.data

    while pos < len(data) and data[pos] in _WHITESPACE:
        pos += 1

    # decltype(...) arguments are not covered by the reported extent
    if buffer.byte_at(pos) == b"(":
        result += data[end:pos]
        depth = 0
        while True:
            char = buffer.byte_at(pos)
            if not char:
                raise SpanError(
                    f"Unbalanced parenthesis after template parameter at "
                    f"{buffer.location(end)}"
                )
            if char == b"(":
                depth += 1
            elif char == b")":
                depth -= 1
            result += char
            pos += 1
            if depth == 0:
                break

    # maximal munch: a '>' directly closing the parameter list was consumed
    if buffer.byte_at(pos) not in (b">", b",") and result[-1:] == b">":
        del result[-1]
    return bytes(result)


def _close_macro(raw: bytes) -> bytes:
    for char in reversed(raw):
        if char == 0x29:  # ')'
            return raw
        if char == 0x28:  # '('
            return raw + b")"
    return raw


def _extend_to_terminator(buffer: SourceBuffer, raw: bytes, end: int) -> bytes:
    stop = buffer.data.find(_TERMINATOR, end)
    if stop == -1:
        raise SpanError(
            f"No terminating ';' after declaration ending at {buffer.location(end)}"
        )
    return raw + buffer.data[end : stop + 1]


def _extend_to_end_of_line(buffer: SourceBuffer, raw: bytes, end: int) -> bytes:
    stop = buffer.data.find(b"\n", end)
    if stop == -1:
        stop = len(buffer.data)
    return raw + buffer.data[end:stop]


def correct_span(buffer: SourceBuffer, node: SyntaxNode) -> bytes:
    """
    Return the corrected declaration bytes for node.

    Raises:
        SpanError: If the reported extent does not fit the buffer, or a
            required terminator is missing before the end of the buffer
        BodyOffsetError: If a function body does not start after the
            declaration begin
    """
    span = node.span
    buffer.check_span(span)
    if span.end <= span.begin:
        raise SpanError(f"Empty extent [{span.begin}, {span.end}) for {node.kind.value}")

    raw = buffer.slice(span)
    rule = select_rule(node.kind, raw, node.template_kind)
    log.debug(
        "Correcting %s %s [%d, %d) with %s",
        node.kind.value,
        node.spelling or "<anonymous>",
        span.begin,
        span.end,
        rule.value,
    )

    if rule is CorrectionRule.STRIP_BODY:
        return _strip_body(node, raw)
    if rule is CorrectionRule.APPEND_TERMINATOR:
        return raw + _TERMINATOR
    if rule is CorrectionRule.TEMPLATE_PARAMETER:
        return _template_parameter(buffer, raw, span.end)
    if rule is CorrectionRule.CLOSE_MACRO:
        return _close_macro(raw)
    if rule is CorrectionRule.EXTEND_TO_TERMINATOR:
        return _extend_to_terminator(buffer, raw, span.end)
    if rule is CorrectionRule.EXTEND_TO_END_OF_LINE:
        return _extend_to_end_of_line(buffer, raw, span.end)
    return raw


def _check_file(buffer: SourceBuffer, node: SyntaxNode) -> None:
    if buffer.name is not None and node.file != buffer.name:
        raise SpanError(f"Node from {node.file} read against buffer {buffer.name}")


def read_source(buffer: SourceBuffer, node: SyntaxNode) -> str:
    """
    Return the exact declaration text of node.

    Nodes without a source file (synthesized or built-in) have no text, so
    an empty string is returned for them.

    Example:
        text = read_source(buffer, node)  # "void f(int a);"
    """
    if node.file is None:
        log.debug("No source file for %s %s", node.kind.value, node.spelling)
        return ""
    _check_file(buffer, node)
    return buffer.decode(correct_span(buffer, node))


def read_range(buffer: SourceBuffer, node: SyntaxNode) -> Span | None:
    """
    Return the corrected span of node, or None if it has no source file.

    The corrected end is derived from the corrected text length, so for
    rules that synthesize characters (an appended ';' or ')') the span
    may reach past the reported extent.
    """
    if node.file is None:
        return None
    _check_file(buffer, node)
    corrected = correct_span(buffer, node)
    return Span(node.begin, node.begin + len(corrected))
