"""cppdoc.source - Source buffers, syntax nodes, declaration span correction and tokens."""

from cppdoc.source.buffer import SourceBuffer, SourceLocation, Span
from cppdoc.source.corrector import (
    CorrectionRule,
    correct_span,
    read_range,
    read_source,
    select_rule,
)
from cppdoc.source.nodes import ChildVisit, NodeKind, SyntaxNode
from cppdoc.source.tokens import (
    Token,
    Tokenizer,
    TokenStream,
    skip,
    skip_attribute,
    skip_bracket_count,
    skip_if_token,
    skip_whitespace,
    tokenize,
)

__all__ = [
    "SourceBuffer",
    "SourceLocation",
    "Span",
    "NodeKind",
    "ChildVisit",
    "SyntaxNode",
    "CorrectionRule",
    "select_rule",
    "correct_span",
    "read_source",
    "read_range",
    "Token",
    "TokenStream",
    "Tokenizer",
    "tokenize",
    "skip_whitespace",
    "skip",
    "skip_if_token",
    "skip_bracket_count",
    "skip_attribute",
]
