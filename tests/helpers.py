"""Test helpers for building syntax nodes over a test buffer."""

from cppdoc.source import NodeKind, SourceBuffer, SyntaxNode


def make_node(
    buffer: SourceBuffer,
    raw: str,
    kind: NodeKind,
    start: int = 0,
    **kwargs,
) -> SyntaxNode:
    """
    Build a node whose reported extent covers the first occurrence of raw.

    Offsets are byte offsets into the buffer, located from `start`.
    """
    encoded = raw.encode(buffer.encoding)
    begin = buffer.data.index(encoded, start)
    return SyntaxNode(
        kind=kind,
        begin=begin,
        end=begin + len(encoded),
        file=buffer.name,
        **kwargs,
    )


def body_child(
    buffer: SourceBuffer,
    marker: str,
    kind: NodeKind = NodeKind.COMPOUND_STATEMENT,
) -> SyntaxNode:
    """Build a body child starting at the first occurrence of marker."""
    return make_node(buffer, marker, kind)
