"""Per-entity and per-file documentation assembly.

Each entity is independent: one span correction and one builder, no shared
mutable state. document_entities() uses that to assemble many entities of
one buffer in a thread pool.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Iterable

from cppdoc.comment.doc_comment import DocComment, set_sections
from cppdoc.comment.documentation import (
    EntityDocumentation,
    EntityDocumentationBuilder,
    FileDocumentation,
    FileDocumentationBuilder,
)
from cppdoc.config import get_settings
from cppdoc.source.buffer import SourceBuffer
from cppdoc.source.corrector import read_source
from cppdoc.source.nodes import SyntaxNode

log = logging.getLogger(__name__)


def document_entity(
    buffer: SourceBuffer,
    node: SyntaxNode,
    comment: DocComment,
    entity: str | None = None,
) -> EntityDocumentation:
    """
    Build the documentation of one entity.

    Args:
        buffer: Source buffer the node was reported against
        node: The entity's syntax node
        comment: The entity's lexed documentation comment
        entity: Entity name (defaults to the node spelling)

    Returns:
        EntityDocumentation with the corrected declaration as synopsis
    """
    synopsis = read_source(buffer, node)
    builder = EntityDocumentationBuilder(
        entity if entity is not None else node.spelling, synopsis=synopsis
    )
    set_sections(builder, comment)
    return builder.finish()


def document_file(file_name: str, comment: DocComment) -> FileDocumentation:
    """Build the documentation attached to a whole file."""
    builder = FileDocumentationBuilder(file_name)
    set_sections(builder, comment)
    return builder.finish()


def document_entities(
    buffer: SourceBuffer,
    items: Iterable[tuple[SyntaxNode, DocComment]],
    max_workers: int | None = None,
) -> list[EntityDocumentation]:
    """
    Build documentation for many entities of one buffer concurrently.

    Results are returned in input order. The first error raised by any
    entity propagates to the caller.
    """
    items = list(items)
    if max_workers is None:
        max_workers = get_settings().max_workers
    log.debug("Documenting %d entities of %s", len(items), buffer.name)

    with ThreadPoolExecutor(max_workers=max_workers) as pool:
        futures = [
            pool.submit(document_entity, buffer, node, comment) for node, comment in items
        ]
        return [future.result() for future in futures]
